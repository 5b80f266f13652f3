"""
Session bridge reading the user from a bearer Authorization header.

The session carries an empty checksum, so by default only users with an
empty auth checksum (like API key users) are authenticated. Pass
trusted=True when the key itself is the credential that identifies the
user. Nothing can be written back.
"""

import copy
from datetime import datetime
from typing import Optional

from authgate.shared.config import get_settings
from authgate.shared.identity import AuthId

from .exceptions import SessionReadOnlyError
from .models import SessionInfo


class BearerSession:
    """
    Get auth info from an `Authorization: Bearer <key>` header value.

    The user reference is the key passed through id_format, e.g. with
    id_format "key:{}" the user is fetched from storage as "key:<key>".
    """

    def __init__(self, header: str = "", id_format: Optional[str] = None, trusted: bool = False):
        self._header = header or ""
        self._id_format = id_format or get_settings().bearer_id_format
        self._trusted = trusted

    def for_header(self, header: Optional[str]) -> "BearerSession":
        """Get a copy for the Authorization header of another request."""
        clone = copy.copy(self)
        clone._header = header or ""
        return clone

    def get_info(self) -> SessionInfo:
        key = self._header[7:].strip() if self._header[:7].lower() == "bearer " else ""

        if key == "":
            return SessionInfo.empty()

        return SessionInfo(user=self._id_format.format(key), checksum="", trusted=self._trusted)

    def persist(
        self,
        user_id: AuthId,
        context_id: Optional[AuthId],
        checksum: Optional[str],
        timestamp: Optional[datetime],
    ) -> None:
        raise SessionReadOnlyError("bearer authorization")

    def clear(self) -> None:
        raise SessionReadOnlyError("bearer authorization")
