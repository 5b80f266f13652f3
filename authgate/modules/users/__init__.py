"""
User wrappers and a ready-made user model.

Public API:
- PartiallyLoggedIn: Wrapper for a user that still needs to pass MFA
- BasicUser: Simple user model for applications without their own
"""

from .models import PartiallyLoggedIn, BasicUser, PARTIAL_PREFIX, unwrap_user

__all__ = [
    "PartiallyLoggedIn",
    "BasicUser",
    "PARTIAL_PREFIX",
    "unwrap_user",
]
