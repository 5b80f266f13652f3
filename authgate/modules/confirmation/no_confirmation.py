"""
Null implementation of confirmation tokens.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from authgate.shared.identity import IUser

from .exceptions import ConfirmationNotSupportedError

if TYPE_CHECKING:
    from authgate.modules.auth.interfaces import IStorage


class NoConfirmation:
    """No support for confirmation tokens. Used when none is configured."""

    def with_storage(self, storage: "IStorage") -> "NoConfirmation":
        return self

    def with_subject(self, subject: str) -> "NoConfirmation":
        return self

    def get_token(self, user: IUser, expire: datetime) -> str:
        raise ConfirmationNotSupportedError()

    def from_token(self, token: str) -> IUser:
        raise ConfirmationNotSupportedError()
