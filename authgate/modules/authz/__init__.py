"""
Authorization module.

Answers "does the current user have role X" through a pluggable strategy.

Public API:
- IAuthz: Interface for authz strategies
- AuthzState: Base class holding the bound user and context
- Levels: Authorize by numeric access level
- Groups: Authorize by group membership
- Authz exceptions: UnknownLevelError, InvalidRoleError, InvalidStrategyConfigError
"""

from .interfaces import IAuthz
from .state import AuthzState
from .levels import Levels
from .groups import Groups
from .exceptions import (
    UnknownLevelError,
    InvalidRoleError,
    InvalidStrategyConfigError,
)

__all__ = [
    # Interface
    "IAuthz",
    # Strategies
    "AuthzState",
    "Levels",
    "Groups",
    # Exceptions
    "UnknownLevelError",
    "InvalidRoleError",
    "InvalidStrategyConfigError",
]
