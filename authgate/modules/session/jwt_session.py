"""
Session bridge keeping auth info as claims of a signed JWT.

The token is typically stored in a cookie by the application. The bridge
only holds the current token; reading it back from and writing it to the
HTTP layer is up to the caller.
"""

import copy
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from authgate.shared.config import get_settings
from authgate.shared.identity import AuthId
from authgate.shared.log import get_logger

from .models import SessionInfo

logger = get_logger(__name__)


class JwtSession:
    """
    Store auth info in a JWT signed with a shared secret (PyJWT).

    Claims:
        user, context, checksum: auth info
        ts: when the user logged in (ISO 8601), if known
        iat, exp: issue and expiry time of the token
    """

    def __init__(
        self,
        token: Optional[str] = None,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        ttl: Optional[int] = None,
    ):
        settings = get_settings()
        self._token = token
        self._secret = secret or settings.jwt_secret
        self._algorithm = algorithm or settings.jwt_algorithm
        self._ttl = ttl if ttl is not None else settings.jwt_ttl

    @property
    def token(self) -> Optional[str]:
        """The current token, None if cleared."""
        return self._token

    def with_token(self, token: Optional[str]) -> "JwtSession":
        """Get a copy holding another token, e.g. from the next request's cookie."""
        clone = copy.copy(self)
        clone._token = token
        return clone

    def with_ttl(self, seconds: int) -> "JwtSession":
        """Get a copy with a different time to live for new tokens."""
        clone = copy.copy(self)
        clone._ttl = seconds
        return clone

    def get_info(self) -> SessionInfo:
        if not self._token:
            return SessionInfo.empty()

        try:
            claims = jwt.decode(self._token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            logger.debug("JWT session has expired")
            return SessionInfo.empty()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Ignoring invalid JWT session: {e}")
            return SessionInfo.empty()

        return SessionInfo(
            user=claims.get("user"),
            context=claims.get("context"),
            checksum=claims.get("checksum"),
            timestamp=claims.get("ts"),
        )

    def persist(
        self,
        user_id: AuthId,
        context_id: Optional[AuthId],
        checksum: Optional[str],
        timestamp: Optional[datetime],
    ) -> None:
        now = datetime.now(timezone.utc)
        payload = {
            "user": user_id,
            "context": context_id,
            "checksum": checksum,
            "iat": now,
            "exp": now + timedelta(seconds=self._ttl),
        }
        if timestamp is not None:
            payload["ts"] = timestamp.isoformat()

        self._token = jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def clear(self) -> None:
        self._token = None
