"""
Session bridge storing auth info in a mutable mapping.

Works with any server side session object that behaves like a dict,
like a web framework's request session.
"""

import copy
from collections.abc import MutableMapping
from datetime import datetime
from typing import Any, Optional

from authgate.shared.config import get_settings
from authgate.shared.identity import AuthId

from .models import SessionInfo


class MappingSession:
    """Store auth info under a single key of a session mapping."""

    def __init__(self, session: MutableMapping[str, Any], key: Optional[str] = None):
        self._session = session
        self._key = key or get_settings().session_key

    @property
    def key(self) -> str:
        return self._key

    def for_session(self, session: MutableMapping[str, Any]) -> "MappingSession":
        """Get a copy using another session mapping, e.g. for the next request."""
        clone = copy.copy(self)
        clone._session = session
        return clone

    def get_info(self) -> SessionInfo:
        data = self._session.get(self._key) or {}

        return SessionInfo(
            user=data.get("user"),
            context=data.get("context"),
            checksum=data.get("checksum"),
            timestamp=data.get("timestamp"),
        )

    def persist(
        self,
        user_id: AuthId,
        context_id: Optional[AuthId],
        checksum: Optional[str],
        timestamp: Optional[datetime],
    ) -> None:
        self._session[self._key] = {
            "user": user_id,
            "context": context_id,
            "checksum": checksum,
            "timestamp": timestamp,
        }

    def clear(self) -> None:
        self._session.pop(self._key, None)
