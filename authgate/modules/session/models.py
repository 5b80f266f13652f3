"""
Session module data models.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from authgate.shared.log import get_logger

logger = get_logger(__name__)


class SessionInfo(BaseModel):
    """
    Auth information read from a session.

    user and context are either ids or, if the session bridge already
    resolved them, the user and context objects themselves.
    """

    user: Optional[Any] = Field(None, description="User id or user object")
    context: Optional[Any] = Field(None, description="Context id or context object")
    checksum: Optional[str] = Field(None, description="Auth checksum of the user")
    timestamp: Optional[datetime] = Field(None, description="When the user logged in")
    trusted: bool = Field(
        False, description="The bridge verified the credential itself; don't compare the checksum"
    )

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @field_validator("checksum", mode="before")
    @classmethod
    def _checksum_as_string(cls, value: Any) -> Optional[str]:
        return str(value) if value is not None else None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Optional[datetime]:
        """Accept datetimes, unix timestamps and ISO 8601 strings."""
        if value is None or isinstance(value, datetime):
            return value

        try:
            if isinstance(value, str) and value.isdigit():
                value = int(value)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return datetime.fromtimestamp(value, tz=timezone.utc)
            return datetime.fromisoformat(str(value))
        except (ValueError, OverflowError, OSError) as e:
            logger.warning(f"Ignoring invalid session timestamp {value!r}: {e}")
            return None

    @classmethod
    def empty(cls) -> "SessionInfo":
        """Session info without a user."""
        return cls()
