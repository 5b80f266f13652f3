"""
Identity contracts supplied by the embedding application.

The application's user and context (organization, team, ...) entities only
need to implement these protocols. authgate never mutates them.
"""

from typing import Any, Optional, Protocol, Union, runtime_checkable


AuthId = Union[str, int]
"""Identifier of a user or context as stored in the session."""

RoleValue = Union[int, str, list[str], tuple[str, ...]]
"""A level, a role name or an ordered collection of role names."""


@runtime_checkable
class IContext(Protocol):
    """
    Entity used as context for authorization.

    A user can have different roles per context, for instance per
    organization they're a member of.
    """

    def get_auth_id(self) -> Optional[AuthId]:
        """Get the context id."""
        ...


@runtime_checkable
class IUser(Protocol):
    """Entity used as user for authentication and authorization."""

    def get_auth_id(self) -> AuthId:
        """Get the user id."""
        ...

    def get_auth_checksum(self) -> str:
        """
        Get a checksum over security sensitive user data.

        This should cover things like username, e-mail and password hash.
        If the checksum changes, the user is logged out in all sessions.
        """
        ...

    def get_auth_role(self, context: Optional[IContext] = None) -> Any:
        """
        Get the role(s) of the user, optionally within a context.

        Returns:
            An int level, a role name, or a list of role names
        """
        ...

    def requires_mfa(self) -> bool:
        """Check if multi-factor authentication is required on login."""
        ...

    def verify_password(self, password: str) -> bool:
        """Check if the password is correct."""
        ...
