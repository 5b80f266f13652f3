"""
Session module interface.

A session bridge transports the auth info between requests. How it does
so (server side session, cookie, JWT, bearer header) is up to the bridge.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from authgate.shared.identity import AuthId

from .models import SessionInfo


@runtime_checkable
class ISession(Protocol):
    """Interface for reading and writing auth info to a session."""

    def get_info(self) -> SessionInfo:
        """
        Get auth information from the session.

        Returns:
            SessionInfo with user, context, checksum and timestamp. All
            fields are None if the session has no auth info.
        """
        ...

    def persist(
        self,
        user_id: AuthId,
        context_id: Optional[AuthId],
        checksum: Optional[str],
        timestamp: Optional[datetime],
    ) -> None:
        """
        Persist auth information to the session.

        Args:
            user_id: Id of the (partially) logged in user
            context_id: Id of the current context, if any
            checksum: Auth checksum of the user
            timestamp: When the user logged in
        """
        ...

    def clear(self) -> None:
        """Remove auth information from the session."""
        ...
