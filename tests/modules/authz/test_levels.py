import logging

import pytest

from authgate.modules.authz import (
    Levels,
    UnknownLevelError,
    InvalidRoleError,
    InvalidStrategyConfigError,
)
from authgate.modules.users import PartiallyLoggedIn
from authgate.shared.exceptions import DomainError
from tests.fakes import FakeContext, FakeUser


@pytest.fixture
def authz():
    return Levels({"user": 1, "mod": 10, "admin": 100})


class TestLevelsConfig:
    def test_available_roles(self, authz):
        """Should list roles in declaration order."""
        assert authz.get_available_roles() == ["user", "mod", "admin"]

    @pytest.mark.parametrize("level", [0, -1, "10", 1.5, True])
    def test_invalid_level(self, level):
        """Levels must be positive integers."""
        with pytest.raises(InvalidStrategyConfigError):
            Levels({"user": level})


class TestLevelsState:
    def test_no_user(self, authz):
        """Without a user nobody is logged in."""
        assert authz.user() is None
        assert authz.is_logged_in() is False
        assert authz.is_partially_logged_in() is False
        assert authz.is_logged_out() is True

    def test_for_user(self, authz):
        """for_user should return a new object, leaving the original unchanged."""
        user = FakeUser(1, role=1)
        user_authz = authz.for_user(user)

        assert user_authz is not authz
        assert user_authz.user() is user
        assert user_authz.is_logged_in() is True
        assert authz.is_logged_in() is False

    def test_for_same_user_returns_same_object(self, authz):
        """Binding the same user again may return the same object."""
        user = FakeUser(1, role=1)
        user_authz = authz.for_user(user)

        assert user_authz.for_user(user) is user_authz

    def test_context(self, authz):
        """in_context_of should return a new object bound to the context."""
        context = FakeContext("org")
        context_authz = authz.in_context_of(context)

        assert context_authz is not authz
        assert context_authz.context() is context
        assert authz.context() is None

    def test_role_per_context(self, authz):
        """The level is evaluated within the bound context."""
        user = FakeUser(1, role="user")
        user.roles_by_context["org"] = "admin"
        user_authz = authz.for_user(user)

        assert user_authz.is_("admin") is False
        assert user_authz.in_context_of(FakeContext("org")).is_("admin") is True

    def test_partially_logged_in(self, authz):
        """A partially logged in user isn't logged in, nor logged out."""
        partial_authz = authz.for_user(PartiallyLoggedIn(FakeUser(1, role=100)))

        assert partial_authz.is_logged_in() is False
        assert partial_authz.is_partially_logged_in() is True
        assert partial_authz.is_logged_out() is False

    def test_partially_logged_in_has_no_roles(self, authz):
        """A partially logged in user never has a role, whatever the underlying level."""
        partial_authz = authz.for_user(PartiallyLoggedIn(FakeUser(1, role="admin")))

        assert partial_authz.is_("user") is False
        assert partial_authz.is_("mod") is False
        assert partial_authz.is_("admin") is False


class TestLevelsIs:
    def test_without_user(self, authz):
        """No user means no role."""
        assert authz.is_("user") is False

    @pytest.mark.parametrize(
        "role, expected",
        [
            (1, {"user": True, "mod": False, "admin": False}),
            (10, {"user": True, "mod": True, "admin": False}),
            (50, {"user": True, "mod": True, "admin": False}),
            (100, {"user": True, "mod": True, "admin": True}),
            (500, {"user": True, "mod": True, "admin": True}),
            (0, {"user": False, "mod": False, "admin": False}),
            ("user", {"user": True, "mod": False, "admin": False}),
            ("mod", {"user": True, "mod": True, "admin": False}),
            ("admin", {"user": True, "mod": True, "admin": True}),
            (10.7, {"user": True, "mod": True, "admin": False}),
        ],
    )
    def test_with_user(self, authz, role, expected):
        """A user has every role up to and including their level."""
        user_authz = authz.for_user(FakeUser(1, role=role))

        assert {name: user_authz.is_(name) for name in expected} == expected

    def test_unknown_role(self, authz, caplog):
        """An unknown role returns False and is logged as notice."""
        caplog.set_level(logging.DEBUG, logger="authgate")
        user_authz = authz.for_user(FakeUser(1, role=100))

        assert user_authz.is_("manager") is False
        assert "Unknown authz role 'manager'" in caplog.text
        assert caplog.records[-1].levelname == "NOTICE"

    def test_unknown_user_level(self, authz):
        """A role name that isn't a defined level is a hard error."""
        with pytest.raises(UnknownLevelError, match="Authorization level 'foo' isn't defined \\(uid:42\\)"):
            authz.for_user(FakeUser(42, role="foo"))

    def test_unknown_user_level_is_domain_error(self, authz):
        """UnknownLevelError should be a DomainError."""
        with pytest.raises(DomainError):
            authz.for_user(FakeUser(42, role="foo"))

    @pytest.mark.parametrize("role", [["user", "mod"], None, True])
    def test_invalid_user_role(self, authz, role):
        """Roles other than int or str can't be evaluated."""
        with pytest.raises(InvalidRoleError):
            authz.for_user(FakeUser(42, role=role))


class TestLevelsRecalc:
    def test_recalc(self, authz):
        """recalc should pick up a changed role of the bound user."""
        user = FakeUser(1, role=1)
        user_authz = authz.for_user(user)
        assert user_authz.is_("mod") is False

        user.role = 10
        updated = user_authz.recalc()

        assert user_authz.is_("mod") is False
        assert updated.is_("mod") is True
        assert updated.user() is user

    def test_recalc_without_change(self, authz):
        """recalc should return the same object if nothing changed."""
        user_authz = authz.for_user(FakeUser(1, role=1))
        assert user_authz.recalc() is user_authz

    def test_recalc_without_user(self, authz):
        """recalc without a user returns the same object."""
        assert authz.recalc() is authz
