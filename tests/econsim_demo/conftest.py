"""Pytest configuration for demo seeding tests."""

from tests.shared.fixtures.database import (
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

# Make fixtures available
__all__ = ["sqlite_engine", "sqlite_session", "sqlite_session_maker"]
