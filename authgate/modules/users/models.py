"""
User models.

PartiallyLoggedIn marks a user that passed the password check but still
has to verify MFA. It's a wrapper rather than a flag, so session
serialization and role evaluation can tell the two states apart.
"""

import hashlib
from typing import Any, Optional, Union

import bcrypt
from pydantic import BaseModel, Field

from authgate.shared.identity import AuthId, IContext, IUser


PARTIAL_PREFIX = "#partial:"


class PartiallyLoggedIn:
    """Wrapper for a user that is partially logged in."""

    def __init__(self, user: IUser):
        self._user = user

    @property
    def user(self) -> IUser:
        """The wrapped user."""
        return self._user

    def get_auth_id(self) -> str:
        return f"{PARTIAL_PREFIX}{self._user.get_auth_id()}"

    def get_auth_checksum(self) -> str:
        return self._user.get_auth_checksum()

    def get_auth_role(self, context: Optional[IContext] = None) -> Any:
        return self._user.get_auth_role(context)

    def requires_mfa(self) -> bool:
        return True

    def verify_password(self, password: str) -> bool:
        return self._user.verify_password(password)

    def __repr__(self) -> str:
        return f"PartiallyLoggedIn({self._user!r})"


def unwrap_user(user: Optional[IUser]) -> Optional[IUser]:
    """Get the actual user, removing the partial login wrapper if present."""
    return user.user if isinstance(user, PartiallyLoggedIn) else user


class BasicUser(BaseModel):
    """
    A simple user which can be used instead of a custom user class.

    Passwords are stored as bcrypt hashes. The auth checksum covers the id
    and the password hash, so changing the password ends all sessions.
    """

    id: AuthId = Field(..., description="User ID")
    username: str = Field(default="", description="Login name")
    hashed_password: str = Field(default="", description="bcrypt hash of the password")
    role: Union[int, str, list[str]] = Field(default=0, description="Level, role or roles")
    mfa: bool = Field(default=False, description="Whether MFA is required on login")

    model_config = {"extra": "ignore"}

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "BasicUser":
        """Create a user from data loaded from the database."""
        return cls.model_validate(data)

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a plain text password with bcrypt."""
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")

    def get_auth_id(self) -> str:
        return str(self.id)

    def get_auth_checksum(self) -> str:
        return hashlib.sha256(f"{self.id}{self.hashed_password}".encode("utf-8")).hexdigest()

    def get_auth_role(self, context: Optional[IContext] = None) -> Union[int, str, list[str]]:
        return self.role

    def requires_mfa(self) -> bool:
        return self.mfa

    def verify_password(self, password: str) -> bool:
        if not self.hashed_password:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), self.hashed_password.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash
            return False
