"""
Pytest configuration for econsim tests.

Re-exports the shared database fixtures and provides caller identities.
"""

import pytest

from econsim.application.context import UserContext
from tests.shared.fixtures.database import (
    TEST_USER_ID,
    TEST_USER_ID_2,
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

# Make fixtures available
__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]


@pytest.fixture
def user_context() -> UserContext:
    """Caller identity for the default test user."""
    return UserContext.from_values(TEST_USER_ID)


@pytest.fixture
def other_user_context() -> UserContext:
    """Caller identity for a second user (isolation tests)."""
    return UserContext.from_values(TEST_USER_ID_2)
