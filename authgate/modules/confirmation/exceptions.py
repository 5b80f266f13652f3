"""
Confirmation module exceptions.
"""

from authgate.shared.exceptions import AuthenticationError, LogicError


class InvalidTokenError(AuthenticationError):
    """Raised when a confirmation token is invalid or expired."""

    def __init__(self, message: str = "Invalid confirmation token"):
        super().__init__(message, code="INVALID_TOKEN")


class ConfirmationNotSupportedError(LogicError):
    """Raised when confirmation tokens are used but not configured."""

    def __init__(self):
        super().__init__(
            "Confirmation tokens are not supported",
            code="CONFIRMATION_NOT_SUPPORTED",
        )
