"""
Authentication service implementation.

Auth ties an authorization strategy to a session. It reads the user from
the session on initialize, and moves between the anonymous, partially
logged in (MFA pending) and logged in states on login, mfa and logout,
writing each change back to the session.
"""

import copy
from datetime import datetime, timezone
from typing import Optional

from authgate.shared.config import get_settings
from authgate.shared.identity import AuthId, IContext, IUser
from authgate.shared.log import LoggerLike, get_logger, notice
from authgate.modules.authz.interfaces import IAuthz
from authgate.modules.confirmation.interfaces import IConfirmation
from authgate.modules.confirmation.no_confirmation import NoConfirmation
from authgate.modules.session.interfaces import ISession
from authgate.modules.session.models import SessionInfo
from authgate.modules.users.models import PARTIAL_PREFIX, PartiallyLoggedIn, unwrap_user

from .events import CancellableEvent, Login, Logout, NullDispatcher, PartialLogin
from .exceptions import (
    AlreadyInitializedError,
    AlreadyLoggedInError,
    LoginError,
    NoUserError,
    NotInitializedError,
    SessionChecksumError,
)
from .interfaces import IAuthService, IEventDispatcher, IStorage, MfaVerifier

logger = get_logger(__name__)


class Auth(IAuthService):
    """
    Authentication and authorization for a single request/session.

    Usage:
        auth = Auth(Levels({"user": 1, "admin": 10}), storage)
        auth.initialize(MappingSession(request.session))

        if not auth.is_("admin"):
            raise Forbidden()

    The authz object is immutable; a new one is set whenever the user or
    context changes. Configuration methods (with_*) return a copy, so a
    configured service can be reused as a template for each request.
    """

    def __init__(
        self,
        authz: IAuthz,
        storage: IStorage,
        confirmation: Optional[IConfirmation] = None,
        strict_checksum: Optional[bool] = None,
    ):
        self._authz = authz
        self._storage = storage
        self._confirmation = confirmation or NoConfirmation()
        self._dispatcher: IEventDispatcher = NullDispatcher()
        self._logger: LoggerLike = logger
        self._mfa_verifier: Optional[MfaVerifier] = None
        self._strict_checksum = (
            strict_checksum if strict_checksum is not None else get_settings().strict_checksum
        )

        self._session: Optional[ISession] = None
        self._timestamp: Optional[datetime] = None
        self._multiple_requests = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _with(self, **properties) -> "Auth":
        clone = copy.copy(self)
        for name, value in properties.items():
            setattr(clone, f"_{name}", value)
        return clone

    def with_event_dispatcher(self, dispatcher: IEventDispatcher) -> "Auth":
        """Get a copy with an event dispatcher."""
        return self._with(dispatcher=dispatcher)

    def with_logger(self, logger: LoggerLike) -> "Auth":
        """
        Get a copy logging to the given logger.

        Only messages of the service itself go to this logger. The authz
        strategies log unknown role names to their module logger
        (authgate.modules.authz.*).
        """
        return self._with(logger=logger)

    def with_mfa(self, verifier: MfaVerifier) -> "Auth":
        """Get a copy with a callback to verify MFA codes."""
        return self._with(mfa_verifier=verifier)

    def for_multiple_requests(self) -> "Auth":
        """
        Get a copy that can be initialized multiple times.

        Meant for workers and daemons that handle many sessions. Each
        initialize() starts from scratch with the new session.
        """
        return self._with(multiple_requests=True)

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self, session: ISession) -> None:
        if self.is_initialized() and not self._multiple_requests:
            raise AlreadyInitializedError()

        authz = self._authz.for_user(None).in_context_of(None)

        self._session = session
        self._authz = authz
        self._timestamp = None

        user, context, timestamp = self._get_info_from_session(session.get_info())

        self._authz = authz.for_user(user).in_context_of(context)
        self._timestamp = timestamp

    def _get_info_from_session(
        self, info: SessionInfo
    ) -> tuple[Optional[IUser], Optional[IContext], Optional[datetime]]:
        """Resolve the user and context from session info, loading them from storage."""
        uid = info.user
        if uid is None:
            return None, None, None

        partial = isinstance(uid, str) and uid.startswith(PARTIAL_PREFIX)
        if partial:
            uid = uid[len(PARTIAL_PREFIX):]

        user = self._storage.fetch_user_by_id(str(uid)) if isinstance(uid, (str, int)) else uid
        if user is None:
            self._logger.debug("Session user not found", extra={"user_id": str(uid)})
            return None, None, None

        if not info.trusted and user.get_auth_checksum() != info.checksum:
            notice(self._logger, "Session checksum mismatch", user_id=user.get_auth_id())
            if self._strict_checksum:
                raise SessionChecksumError(user.get_auth_id())
            return None, None, None

        if partial:
            user = PartiallyLoggedIn(user)

        cid = info.context
        if cid is None:
            context = None
        elif isinstance(cid, (str, int)):
            context = self._storage.fetch_context(str(cid))
        else:
            context = cid

        return user, context, info.timestamp

    def is_initialized(self) -> bool:
        return self._session is not None

    def _assert_initialized(self) -> None:
        if not self.is_initialized():
            raise NotInitializedError()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_available_roles(self) -> list[str]:
        return self._authz.get_available_roles()

    def is_logged_in(self) -> bool:
        self._assert_initialized()
        return self._authz.is_logged_in()

    def is_partially_logged_in(self) -> bool:
        self._assert_initialized()
        return self._authz.is_partially_logged_in()

    def is_logged_out(self) -> bool:
        self._assert_initialized()
        return self._authz.is_logged_out()

    def is_(self, role: str) -> bool:
        """
        Check if the current user is logged in and has the role.

            if not auth.is_("manager"):
                raise HTTPException(status_code=403)
        """
        self._assert_initialized()
        return self._authz.is_(role)

    def user(self) -> Optional[IUser]:
        """Get the current user; a PartiallyLoggedIn wrapper while MFA is pending."""
        self._assert_initialized()
        return self._authz.user()

    def context(self) -> Optional[IContext]:
        self._assert_initialized()
        return self._authz.context()

    def time(self) -> Optional[datetime]:
        self._assert_initialized()
        return self._timestamp

    # ------------------------------------------------------------------
    # Login / logout
    # ------------------------------------------------------------------

    def login_as(self, user: IUser) -> None:
        self._assert_initialized()

        if self._authz.is_logged_in():
            raise AlreadyLoggedInError()

        self._login_user(user)

    def login(self, username: str, password: str) -> None:
        self._assert_initialized()

        if self._authz.is_logged_in():
            raise AlreadyLoggedInError()

        user = self._storage.fetch_user_by_username(username)

        if user is None or not user.verify_password(password):
            self._logger.debug("Login failed: invalid credentials", extra={"username": username})
            raise LoginError("Invalid credentials", LoginError.INVALID_CREDENTIALS)

        self._login_user(user)

    def _login_user(self, user: IUser) -> None:
        if user.requires_mfa():
            self._partial_login(user)
        else:
            self._complete_login(user)

    def _partial_login(self, user: IUser) -> None:
        self._dispatch_cancellable(PartialLogin(self, user))

        self._authz = self._authz.for_user(PartiallyLoggedIn(user))
        self._timestamp = datetime.now(timezone.utc)
        self._update_session()

        self._logger.info("Partial login", extra={"user_id": user.get_auth_id()})

    def _complete_login(self, user: IUser) -> None:
        self._dispatch_cancellable(Login(self, user))

        # A listener may have changed the authz state, e.g. by setting a context
        authz = self._authz.for_user(user)
        if authz.context() is None:
            authz = authz.in_context_of(self._storage.get_context_for_user(user))

        self._authz = authz
        self._timestamp = datetime.now(timezone.utc)
        self._update_session()

        self._logger.info(
            "Login successful",
            extra={"user_id": user.get_auth_id(), "context_id": self._context_id()},
        )

    def _dispatch_cancellable(self, event: CancellableEvent) -> None:
        event = self._dispatcher.dispatch(event)

        if event.is_cancelled():
            notice(
                self._logger,
                "Login cancelled",
                user_id=event.user.get_auth_id(),
                reason=event.cancellation_reason,
            )
            raise LoginError(event.cancellation_reason, LoginError.CANCELLED)

    def mfa(self, code: str) -> None:
        self._assert_initialized()

        if self._authz.is_logged_out():
            raise NoUserError()

        user = unwrap_user(self._authz.user())
        verified = self._mfa_verifier(user, code) if self._mfa_verifier is not None else False

        if not verified:
            self._logger.debug("MFA verification failed", extra={"user_id": user.get_auth_id()})
            raise LoginError("Invalid MFA", LoginError.INVALID_CREDENTIALS)

        if self._authz.is_partially_logged_in():
            self._complete_login(user)
        else:
            self._logger.info("MFA verification successful", extra={"user_id": user.get_auth_id()})

    def logout(self) -> None:
        self._assert_initialized()

        if self._authz.is_logged_out():
            return

        user = unwrap_user(self._authz.user())
        self._dispatcher.dispatch(Logout(self, user))

        self._logger.debug("Logout", extra={"user_id": user.get_auth_id()})

        # Logged out even if the session bridge is read-only
        try:
            self._session.clear()
        finally:
            self._authz = self._authz.for_user(None).in_context_of(None)
            self._timestamp = None

    # ------------------------------------------------------------------
    # Context and recalculation
    # ------------------------------------------------------------------

    def set_context(self, context: Optional[IContext]) -> None:
        self._assert_initialized()

        self._authz = self._authz.in_context_of(context)
        self._update_session()

    def recalc(self) -> "Auth":
        """
        Recalculate the roles of the current user and context.

        Call this after the role of the user has changed. The login time
        is kept as is.
        """
        self._assert_initialized()

        self._authz = self._authz.recalc()
        self._update_session()

        return self

    def _context_id(self) -> Optional[AuthId]:
        context = self._authz.context()
        return context.get_auth_id() if context is not None else None

    def _update_session(self) -> None:
        """Store the current auth information in the session."""
        if self._authz.is_logged_out():
            self._session.clear()
            return

        user = self._authz.user()
        self._session.persist(
            user.get_auth_id(),
            self._context_id(),
            user.get_auth_checksum(),
            self._timestamp,
        )

    # ------------------------------------------------------------------
    # Authz for other users / contexts
    # ------------------------------------------------------------------

    def authz(self) -> IAuthz:
        """Get the read-only authz state of the current user and context."""
        return self._authz

    def for_user(self, user: Optional[IUser]) -> IAuthz:
        """Get a read-only authz state for another user."""
        return self._authz.for_user(user)

    def in_context_of(self, context: Optional[IContext]) -> IAuthz:
        """Get a read-only authz state for another context."""
        return self._authz.in_context_of(context)

    # ------------------------------------------------------------------
    # Confirmation
    # ------------------------------------------------------------------

    def confirm(self, subject: str) -> IConfirmation:
        """Get the service to create or verify confirmation tokens for a subject."""
        return self._confirmation.with_storage(self._storage).with_subject(subject)
