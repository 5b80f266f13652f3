"""
Confirmation module interface.

Confirmation tokens are used for workflows outside of login, like
verifying an e-mail address or resetting a password.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from authgate.shared.identity import IUser

if TYPE_CHECKING:
    from authgate.modules.auth.interfaces import IStorage


@runtime_checkable
class IConfirmation(Protocol):
    """Interface to generate and verify confirmation tokens."""

    def with_storage(self, storage: "IStorage") -> "IConfirmation":
        """Get a copy using the storage to fetch users."""
        ...

    def with_subject(self, subject: str) -> "IConfirmation":
        """Get a copy for a specific subject, like "verify-email"."""
        ...

    def get_token(self, user: IUser, expire: datetime) -> str:
        """
        Generate a confirmation token.

        Args:
            user: The user the token is for
            expire: When the token expires

        Returns:
            The token
        """
        ...

    def from_token(self, token: str) -> IUser:
        """
        Get the user a confirmation token was generated for.

        Raises:
            InvalidTokenError: If the token is invalid or expired
        """
        ...
