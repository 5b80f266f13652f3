"""
Authorization by access group.

Each group lists the groups it supersedes. A user has a role if one of
their groups is that role or (indirectly) supersedes it. Can be used for
ACL (Access Control List).

    authz = Groups({
        "user": [],
        "accountant": ["user"],
        "moderator": ["user"],
        "developer": ["user"],
        "admin": ["moderator", "developer"],
    })
"""

from collections.abc import Mapping, Sequence
from typing import Optional

from authgate.shared.log import get_logger, notice
from authgate.modules.users.models import PartiallyLoggedIn

from .exceptions import InvalidRoleError, InvalidStrategyConfigError
from .state import AuthzState

logger = get_logger(__name__)


class Groups(AuthzState):
    """Authorize by access group."""

    def __init__(self, groups: Mapping[str, Sequence[str]]):
        super().__init__()

        for group, superseded in groups.items():
            if isinstance(superseded, str):
                raise InvalidStrategyConfigError(f"group '{group}' should list superseded groups")
            unknown = [name for name in superseded if name not in groups]
            if unknown:
                raise InvalidStrategyConfigError(
                    f"group '{group}' supersedes undefined group(s) {', '.join(unknown)}"
                )

        graph = {group: list(superseded) for group, superseded in groups.items()}
        self._groups: dict[str, tuple[str, ...]] = {
            group: tuple(self._expand(group, graph)) for group in graph
        }
        self._user_roles: tuple[str, ...] = ()

    @classmethod
    def _expand(
        cls,
        role: str,
        graph: dict[str, list[str]],
        expanded: Optional[list[str]] = None,
    ) -> list[str]:
        """
        Expand a group to include all groups it supersedes.

        The group being expanded is removed from the graph before recursing,
        so cross references and cycles terminate.
        """
        if expanded is None:
            expanded = []
        expanded.append(role)

        graph_without_current = {name: sub for name, sub in graph.items() if name != role}

        for superseded in graph[role]:
            if superseded not in expanded:
                cls._expand(superseded, graph_without_current, expanded)

        return expanded

    def get_available_roles(self) -> list[str]:
        return list(self._groups)

    def is_(self, role: str) -> bool:
        if role not in self._groups:
            # Most likely a typo in the calling code
            notice(logger, f"Unknown authz role '{role}'", role=role)
            return False

        return role in self._user_roles

    def _derived(self) -> tuple[str, ...]:
        return self._user_roles

    def _calculate(self) -> None:
        if self._user is None or isinstance(self._user, PartiallyLoggedIn):
            self._user_roles = ()
            return

        role = self._user.get_auth_role(self._context)

        if isinstance(role, str):
            roles = [role]
        elif isinstance(role, (list, tuple, set, frozenset)) and all(isinstance(r, str) for r in role):
            roles = list(role)
        else:
            raise InvalidRoleError(role, "groups", self._user_id())

        user_roles: list[str] = []
        for name in roles:
            for expanded in self._groups.get(name, ()):
                if expanded not in user_roles:
                    user_roles.append(expanded)

        self._user_roles = tuple(user_roles)
