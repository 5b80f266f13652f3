"""
Authentication module exceptions.

LoginError is expected and safe to show to end users (with a generic
message). The others indicate the application uses the service wrongly.
"""

from typing import Any, Optional

from authgate.shared.exceptions import AuthenticationError, AuthRuntimeError, LogicError


class LoginError(AuthenticationError):
    """
    Raised when a login or MFA attempt fails.

    The code tells why: an event listener cancelled the login, or the
    credentials (password or MFA code) are invalid.
    """

    CANCELLED = "CANCELLED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    def __init__(self, message: str, code: str = INVALID_CREDENTIALS):
        super().__init__(message, code=code)


class SessionChecksumError(AuthenticationError):
    """Raised in strict mode when the session checksum doesn't match the user."""

    def __init__(self, user_id: Optional[Any] = None):
        super().__init__(
            "Session is no longer valid for this user",
            code="CHECKSUM_MISMATCH",
            details={"user_id": user_id},
        )


class AlreadyInitializedError(LogicError):
    """Raised when initialize() is called a second time."""

    def __init__(self):
        super().__init__("Auth service is already initialized", code="ALREADY_INITIALIZED")


class NotInitializedError(LogicError):
    """Raised when the service is used before initialize() is called."""

    def __init__(self):
        super().__init__("Auth needs to be initialized before use", code="NOT_INITIALIZED")


class AlreadyLoggedInError(LogicError):
    """Raised on login while a user is already logged in."""

    def __init__(self):
        super().__init__("Already logged in", code="ALREADY_LOGGED_IN")


class NoUserError(AuthRuntimeError):
    """Raised on MFA verification when nobody is logged in."""

    def __init__(self):
        super().__init__("No user (partially) logged in", code="NO_USER")
