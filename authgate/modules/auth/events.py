"""
Events dispatched by the Auth service.

Listeners of Login and PartialLogin can veto the login by calling
cancel(reason). Logout is informational.
"""

from typing import TYPE_CHECKING, Any, Optional

from authgate.shared.identity import IUser

if TYPE_CHECKING:
    from .service import Auth


class AuthEvent:
    """Base class for all auth events."""

    def __init__(self, auth: "Auth", user: IUser):
        self._auth = auth
        self._user = user

    @property
    def auth(self) -> "Auth":
        """The Auth service that dispatched the event."""
        return self._auth

    @property
    def user(self) -> IUser:
        return self._user


class CancellableEvent(AuthEvent):
    """Event that a listener can cancel."""

    def __init__(self, auth: "Auth", user: IUser):
        super().__init__(auth, user)
        self._cancelled: Optional[str] = None

    def cancel(self, reason: str) -> None:
        """Cancel the login, with a reason that's passed to the LoginError."""
        self._cancelled = reason

    def is_cancelled(self) -> bool:
        return self._cancelled is not None

    @property
    def cancellation_reason(self) -> str:
        return self._cancelled or ""

    def is_propagation_stopped(self) -> bool:
        """Other listeners should be skipped once the event is cancelled."""
        return self.is_cancelled()


class Login(CancellableEvent):
    """Dispatched when a user logs in."""

    pass


class PartialLogin(CancellableEvent):
    """Dispatched when a user logs in, but still needs to verify MFA."""

    pass


class Logout(AuthEvent):
    """Dispatched when a user logs out."""

    pass


class NullDispatcher:
    """Event dispatcher without listeners."""

    def dispatch(self, event: Any) -> Any:
        return event
