"""
Authorization module exceptions.

These signal inconsistent configuration or user data. They're never
caught by the library, as masking them could grant or deny access
unintentionally.
"""

from typing import Any, Optional

from authgate.shared.exceptions import DomainError


class UnknownLevelError(DomainError):
    """Raised when a user's role names a level that isn't defined."""

    def __init__(self, level: str, user_id: Optional[Any] = None):
        super().__init__(
            f"Authorization level '{level}' isn't defined (uid:{user_id})",
            code="UNKNOWN_LEVEL",
            details={"level": level, "user_id": user_id},
        )


class InvalidRoleError(DomainError):
    """Raised when a user's role has a type the strategy can't evaluate."""

    def __init__(self, role: Any, expected: str, user_id: Optional[Any] = None):
        super().__init__(
            f"For authz {expected} the role should be valid, "
            f"{type(role).__name__} returned (uid:{user_id})",
            code="INVALID_ROLE",
            details={"type": type(role).__name__, "user_id": user_id},
        )


class InvalidStrategyConfigError(DomainError):
    """Raised when levels or groups are configured incorrectly."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid authz configuration: {reason}",
            code="INVALID_AUTHZ_CONFIG",
            details={"reason": reason},
        )
