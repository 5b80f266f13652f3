"""
Immutable state shared by the authorization strategies.

An authz object binds a strategy to a user and a context. Every change
produces a copy with the derived role information recalculated, so the
object that was handed out earlier keeps answering the same way.
"""

import copy
from typing import Any, Optional

from authgate.shared.identity import IContext, IUser
from authgate.modules.users.models import PartiallyLoggedIn


class AuthzState:
    """
    Base class for authorization strategies.

    Subclasses implement get_available_roles() and is_(), and calculate the
    derived role information of the bound user in _calculate().
    """

    def __init__(self) -> None:
        self._user: Optional[IUser] = None
        self._context: Optional[IContext] = None

    def _calculate(self) -> None:
        """Calculate the role information of the bound user."""
        raise NotImplementedError

    def _derived(self) -> Any:
        """Get the calculated role information, used to detect changes."""
        raise NotImplementedError

    def _with(self, **changes: Any) -> "AuthzState":
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        clone._calculate()

        is_same = (
            clone._user is self._user
            and clone._context is self._context
            and clone._derived() == self._derived()
        )
        return self if is_same else clone

    def get_available_roles(self) -> list[str]:
        raise NotImplementedError

    def is_(self, role: str) -> bool:
        raise NotImplementedError

    def for_user(self, user: Optional[IUser]) -> "AuthzState":
        """Get a copy bound to the given user."""
        return self._with(user=user)

    def in_context_of(self, context: Optional[IContext]) -> "AuthzState":
        """Get a copy bound to the given context."""
        return self._with(context=context)

    def recalc(self) -> "AuthzState":
        """Get a copy with the role(s) of the bound user recalculated."""
        return self._with()

    def user(self) -> Optional[IUser]:
        return self._user

    def context(self) -> Optional[IContext]:
        return self._context

    def is_logged_in(self) -> bool:
        return self._user is not None and not self.is_partially_logged_in()

    def is_partially_logged_in(self) -> bool:
        return isinstance(self._user, PartiallyLoggedIn)

    def is_logged_out(self) -> bool:
        return self._user is None

    def _user_id(self) -> Optional[Any]:
        return self._user.get_auth_id() if self._user is not None else None
