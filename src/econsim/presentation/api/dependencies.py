"""FastAPI dependency injection for the bank selection API.

Provides dependencies for:
- Database sessions
- Caller identity (user context for repository scoping)
- Repository factory
- The financial report bridge
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from econsim.application.context import UserContext
from econsim.domain.banks import FinancialReportPort
from econsim.infrastructure.integration.ffiec import FFIECBridgeAdapter, FFIECBridgeClient
from econsim.infrastructure.persistence.sqlalchemy.models import Base
from econsim.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from econsim_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    engine = get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Settings & Caller Identity
# -----------------------------------------------------------------------------

AppSettings = Annotated[Settings, Depends(get_settings)]


async def get_user_context(
    settings: AppSettings,
    user_id: Annotated[Optional[str], Header(alias="user-id")] = None,
) -> UserContext:
    """
    Get UserContext for repository scoping.

    The caller is identified by the ``user-id`` header. A missing or blank
    header falls back to ``settings.default_user_id``.

    This is a stand-in for authentication: it trusts whatever the client
    sends and must be replaced by a verified principal before serving more
    than one tenant.
    """
    if user_id is None or not user_id.strip():
        return UserContext.from_values(settings.default_user_id)
    return UserContext.from_values(user_id.strip())


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    session: DBSession,
    user_context: CurrentUserContext,
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current user.

    The factory creates user-scoped repositories for domain operations.
    """
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Financial Report Bridge
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_ffiec_client() -> FFIECBridgeClient:
    """Get the shared FFIEC bridge client (singleton)."""
    settings = get_settings()
    return FFIECBridgeClient(
        base_url=settings.ffiec_bridge_url,
        timeout=settings.ffiec_bridge_timeout,
        enabled=settings.ffiec_bridge_enabled,
    )


def get_financial_report_port() -> FinancialReportPort:
    """Get the financial report port backed by the FFIEC bridge."""
    return FFIECBridgeAdapter(get_ffiec_client())


ReportPort = Annotated[FinancialReportPort, Depends(get_financial_report_port)]

# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def search_banks(factory: RepoFactory, ...):
#       query = SearchBanksQuery.from_factory(factory)  # NOQA: ERA001
