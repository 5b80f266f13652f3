"""
Authentication module.

Tracks who is logged in for a request, handles login, MFA and logout,
and answers role questions through the configured authz strategy.

Public API:
- Auth: The auth service
- IAuthService: Interface of the auth service
- IStorage, IEventDispatcher, MfaVerifier: Collaborators supplied by the application
- Events: Login, PartialLogin, Logout
- Auth exceptions: LoginError, AlreadyInitializedError, etc.
"""

from .interfaces import IAuthService, IStorage, IEventDispatcher, MfaVerifier
from .service import Auth
from .events import AuthEvent, CancellableEvent, Login, PartialLogin, Logout, NullDispatcher
from .exceptions import (
    LoginError,
    SessionChecksumError,
    AlreadyInitializedError,
    NotInitializedError,
    AlreadyLoggedInError,
    NoUserError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IStorage",
    "IEventDispatcher",
    "MfaVerifier",
    # Service
    "Auth",
    # Events
    "AuthEvent",
    "CancellableEvent",
    "Login",
    "PartialLogin",
    "Logout",
    "NullDispatcher",
    # Exceptions
    "LoginError",
    "SessionChecksumError",
    "AlreadyInitializedError",
    "NotInitializedError",
    "AlreadyLoggedInError",
    "NoUserError",
]
