"""
Base exception classes for authgate.

Each module defines its own exceptions that inherit from these bases.
The split follows how a failure should be handled:

- AuthenticationError: expected, user-facing (bad credentials, vetoed login)
- LogicError: the embedding application uses the library wrongly
- DomainError: configuration or user data is inconsistent
- AuthRuntimeError: operation can't be performed in the current state
"""

from typing import Optional, Any


class AuthGateError(Exception):
    """
    Base exception for all authgate errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary, e.g. for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(AuthGateError):
    """Authentication failed (invalid credentials, cancelled login)."""

    pass


class LogicError(AuthGateError):
    """Programming or integration error in the embedding application."""

    pass


class DomainError(AuthGateError, ValueError):
    """Configuration or data doesn't match what the authz strategy expects."""

    pass


class AuthRuntimeError(AuthGateError, RuntimeError):
    """Operation isn't possible in the current state."""

    pass
