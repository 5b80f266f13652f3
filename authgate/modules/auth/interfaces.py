"""
Authentication module interfaces.

IStorage and IEventDispatcher are implemented by the embedding
application. IAuthService is what the application gets in return.
"""

from datetime import datetime
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from authgate.shared.identity import IContext, IUser
from authgate.modules.session.interfaces import ISession


MfaVerifier = Callable[[IUser, str], bool]
"""Verifies an MFA code (TOTP, SMS, ...) for a user."""


@runtime_checkable
class IStorage(Protocol):
    """
    Interface to the storage of users and contexts.

    This is typically a thin layer over the application's database.
    """

    def fetch_user_by_id(self, id: str) -> Optional[IUser]:
        """
        Fetch a user by id.

        Returns:
            The user if found, None otherwise
        """
        ...

    def fetch_user_by_username(self, username: str) -> Optional[IUser]:
        """
        Fetch a user by username (or e-mail address).

        Returns:
            The user if found, None otherwise
        """
        ...

    def fetch_context(self, id: str) -> Optional[IContext]:
        """
        Fetch a context (organization, team, ...) by id.

        Return None if the application doesn't use contexts for auth.
        """
        ...

    def get_context_for_user(self, user: IUser) -> Optional[IContext]:
        """
        Get the default context of a user, used on login.

        Return None if the application doesn't use contexts for auth.
        """
        ...


@runtime_checkable
class IEventDispatcher(Protocol):
    """Interface for dispatching auth events to listeners."""

    def dispatch(self, event: Any) -> Any:
        """
        Pass the event to all relevant listeners.

        Returns:
            The event, so changes made by listeners (like cancelling a
            login) are visible to the caller.
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication and authorization of a request.

    An instance is bound to a single request/session. Call initialize()
    before anything else.
    """

    def initialize(self, session: ISession) -> None:
        """
        Initialize the service using session information.

        Raises:
            AlreadyInitializedError: If the service is already initialized
        """
        ...

    def is_initialized(self) -> bool:
        ...

    def is_logged_in(self) -> bool:
        """Check if the current user is fully logged in."""
        ...

    def is_partially_logged_in(self) -> bool:
        """Check if the current user still needs to verify MFA."""
        ...

    def is_logged_out(self) -> bool:
        """Check if no user is logged in, not even partially."""
        ...

    def is_(self, role: str) -> bool:
        """Check if the current user is logged in and has the role."""
        ...

    def user(self) -> Optional[IUser]:
        """Get the current user."""
        ...

    def context(self) -> Optional[IContext]:
        """Get the current context."""
        ...

    def time(self) -> Optional[datetime]:
        """Get the time the current user logged in."""
        ...

    def get_available_roles(self) -> list[str]:
        """Get all available authorization roles."""
        ...

    def login(self, username: str, password: str) -> None:
        """
        Login with username and password.

        Raises:
            LoginError: If the credentials are invalid or login is cancelled
            AlreadyLoggedInError: If a user is already logged in
        """
        ...

    def login_as(self, user: IUser) -> None:
        """
        Login as the given user, without checking credentials.

        Raises:
            LoginError: If login is cancelled
            AlreadyLoggedInError: If a user is already logged in
        """
        ...

    def mfa(self, code: str) -> None:
        """
        Verify the MFA code of the current user.

        Raises:
            LoginError: If the code is invalid or login is cancelled
            NoUserError: If no user is (partially) logged in
        """
        ...

    def logout(self) -> None:
        """Logout the current user."""
        ...

    def set_context(self, context: Optional[IContext]) -> None:
        """Set the current context."""
        ...

    def recalc(self) -> "IAuthService":
        """Recalculate the roles of the current user and update the session."""
        ...
