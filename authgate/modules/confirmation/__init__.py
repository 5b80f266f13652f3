"""
Confirmation module.

Public API:
- IConfirmation: Interface for confirmation token services
- NoConfirmation: Default, doesn't support tokens
- Exceptions: InvalidTokenError, ConfirmationNotSupportedError
"""

from .interfaces import IConfirmation
from .no_confirmation import NoConfirmation
from .exceptions import InvalidTokenError, ConfirmationNotSupportedError

__all__ = [
    "IConfirmation",
    "NoConfirmation",
    "InvalidTokenError",
    "ConfirmationNotSupportedError",
]
