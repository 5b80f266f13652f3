"""
authgate - authentication and authorization for web applications.

The application supplies user storage, a session bridge and (optionally)
event listeners; authgate keeps track of who is logged in and which roles
they have.

    from authgate import Auth, Levels, MappingSession

    auth = Auth(Levels({"user": 1, "admin": 10}), storage)
    auth.initialize(MappingSession(request.session))
    auth.login(username, password)
"""

import logging

from .shared.exceptions import (
    AuthGateError,
    AuthenticationError,
    LogicError,
    DomainError,
    AuthRuntimeError,
)
from .shared.identity import IUser, IContext
from .modules.authz import IAuthz, Levels, Groups, UnknownLevelError, InvalidRoleError
from .modules.auth import (
    Auth,
    IAuthService,
    IStorage,
    IEventDispatcher,
    Login,
    PartialLogin,
    Logout,
    LoginError,
    NoUserError,
)
from .modules.users import PartiallyLoggedIn, BasicUser
from .modules.session import ISession, SessionInfo, MappingSession, BearerSession, JwtSession
from .modules.confirmation import IConfirmation, NoConfirmation

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Auth",
    "IAuthService",
    "IStorage",
    "IEventDispatcher",
    "IUser",
    "IContext",
    "IAuthz",
    "Levels",
    "Groups",
    "PartiallyLoggedIn",
    "BasicUser",
    "ISession",
    "SessionInfo",
    "MappingSession",
    "BearerSession",
    "JwtSession",
    "IConfirmation",
    "NoConfirmation",
    "Login",
    "PartialLogin",
    "Logout",
    "AuthGateError",
    "AuthenticationError",
    "LogicError",
    "DomainError",
    "AuthRuntimeError",
    "LoginError",
    "NoUserError",
    "UnknownLevelError",
    "InvalidRoleError",
]
