"""
Shared infrastructure for authgate.

This package contains cross-cutting concerns used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- log: NOTICE level and logger helpers
- identity: User and context contracts

Note: Auth logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    AuthGateError,
    AuthenticationError,
    LogicError,
    DomainError,
    AuthRuntimeError,
)
from .identity import IUser, IContext, AuthId, RoleValue
from .log import NOTICE, get_logger, notice

__all__ = [
    "Settings",
    "get_settings",
    "AuthGateError",
    "AuthenticationError",
    "LogicError",
    "DomainError",
    "AuthRuntimeError",
    "IUser",
    "IContext",
    "AuthId",
    "RoleValue",
    "NOTICE",
    "get_logger",
    "notice",
]
