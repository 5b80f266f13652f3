"""
Shared test fixtures.

This module provides common test infrastructure used across all test modules.
"""

from unittest.mock import MagicMock

import pytest

from authgate.shared.config import get_settings
from tests.fakes import FakeContext, FakeUser, InMemoryStorage, make_session


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def user() -> FakeUser:
    """A user at level 1 without MFA."""
    return FakeUser(42, role=1)


@pytest.fixture
def mfa_user() -> FakeUser:
    """A user at level 10 that requires MFA."""
    return FakeUser(7, role=10, mfa=True)


@pytest.fixture
def context() -> FakeContext:
    return FakeContext("org-1")


@pytest.fixture
def storage(user, mfa_user, context) -> InMemoryStorage:
    store = InMemoryStorage(users=[user, mfa_user], contexts=[context])
    store.add_username("jane", user)
    store.add_username("mark", mfa_user)
    return store


@pytest.fixture
def session() -> MagicMock:
    """An empty mock session bridge."""
    return make_session()
