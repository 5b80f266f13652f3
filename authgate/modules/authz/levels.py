"""
Authorization by access level.

Each role has a numeric level. A user has a role if their level is equal
to or higher than the level of that role.

    authz = Levels({"user": 1, "moderator": 100, "admin": 1000})
    auth = Auth(authz, storage)
"""

from collections.abc import Mapping

from authgate.shared.log import get_logger, notice
from authgate.modules.users.models import PartiallyLoggedIn

from .exceptions import InvalidRoleError, InvalidStrategyConfigError, UnknownLevelError
from .state import AuthzState

logger = get_logger(__name__)


class Levels(AuthzState):
    """Authorize by access level."""

    def __init__(self, levels: Mapping[str, int]):
        super().__init__()

        for name, level in levels.items():
            if isinstance(level, bool) or not isinstance(level, int) or level <= 0:
                raise InvalidStrategyConfigError(
                    f"level of '{name}' should be a positive integer, got {level!r}"
                )

        self._levels: dict[str, int] = dict(levels)
        self._user_level = 0

    def get_available_roles(self) -> list[str]:
        return list(self._levels)

    def is_(self, role: str) -> bool:
        if role not in self._levels:
            # Most likely a typo in the calling code
            notice(logger, f"Unknown authz role '{role}'", role=role)
            return False

        return self._user_level >= self._levels[role]

    def _derived(self) -> int:
        return self._user_level

    def _calculate(self) -> None:
        if self._user is None or isinstance(self._user, PartiallyLoggedIn):
            self._user_level = 0
            return

        role = self._user.get_auth_role(self._context)

        if isinstance(role, str):
            if role not in self._levels:
                raise UnknownLevelError(role, self._user_id())
            self._user_level = self._levels[role]
        elif isinstance(role, (int, float)) and not isinstance(role, bool):
            self._user_level = int(role)
        else:
            raise InvalidRoleError(role, "levels", self._user_id())
