"""
Authorization module interface.

The Auth service depends on IAuthz, not on a concrete strategy. An authz
object is immutable: binding it to a user or context returns a new object.
"""

from typing import Optional, Protocol, runtime_checkable

from authgate.shared.identity import IContext, IUser


@runtime_checkable
class IAuthz(Protocol):
    """
    Interface for an authorization strategy bound to a user and context.

    Implementations must be immutable. Methods that change the bound user
    or context return a (possibly) new object and leave the original as is.
    """

    def get_available_roles(self) -> list[str]:
        """
        Get all available authorization roles, in declaration order.
        """
        ...

    def for_user(self, user: Optional[IUser]) -> "IAuthz":
        """
        Get a copy bound to the given user.

        Args:
            user: The user, a PartiallyLoggedIn wrapper or None

        Returns:
            An authz object for the user. May be the same object if
            nothing changed.

        Raises:
            DomainError: If the role of the user can't be evaluated
        """
        ...

    def in_context_of(self, context: Optional[IContext]) -> "IAuthz":
        """
        Get a copy bound to the given context.

        Args:
            context: The context (e.g. organization) or None

        Returns:
            An authz object for the context. May be the same object if
            nothing changed.
        """
        ...

    def recalc(self) -> "IAuthz":
        """
        Get a copy with the role(s) of the bound user recalculated.

        Use this when the role of the user has been changed.
        """
        ...

    def user(self) -> Optional[IUser]:
        """Get the bound user."""
        ...

    def context(self) -> Optional[IContext]:
        """Get the bound context."""
        ...

    def is_(self, role: str) -> bool:
        """
        Check if the bound user has the specified role.

        An unknown role name is logged and returns False.
        """
        ...

    def is_logged_in(self) -> bool:
        """Check if a user is fully logged in."""
        ...

    def is_partially_logged_in(self) -> bool:
        """Check if a user is logged in, but still has to verify MFA."""
        ...

    def is_logged_out(self) -> bool:
        """Check if no user is logged in, not even partially."""
        ...
