"""
Session module.

Transports the auth info (user, context, checksum, timestamp) between
requests.

Public API:
- ISession: Interface for session bridges
- SessionInfo: Auth info read from a session
- MappingSession: Server side session (any mutable mapping)
- BearerSession: Read-only, from a bearer Authorization header
- JwtSession: Signed JWT, e.g. stored in a cookie
"""

from .interfaces import ISession
from .models import SessionInfo
from .mapping import MappingSession
from .bearer import BearerSession
from .jwt_session import JwtSession
from .exceptions import SessionReadOnlyError

__all__ = [
    # Interface
    "ISession",
    # Models
    "SessionInfo",
    # Bridges
    "MappingSession",
    "BearerSession",
    "JwtSession",
    # Exceptions
    "SessionReadOnlyError",
]
