"""Fixtures for API tests.

The app runs against a file-backed SQLite database seeded with a small
catalog. The database is prepared in its own event loop; TestClient then
drives the app in its own loop and sessions are opened per request.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from econsim.domain.banks import (
    FinancialDataUnavailableError,
    FinancialReport,
    FinancialReportPort,
    ReportingPeriod,
)
from econsim.infrastructure.persistence.sqlalchemy.models import Base
from econsim.presentation.api.app import API_V1_PREFIX, create_app
from econsim.presentation.api.dependencies import (
    get_db_session,
    get_financial_report_port,
)
from econsim_config.settings import Settings, get_settings
from tests.shared.fixtures.factories import make_bank, to_model

CATALOG = [
    make_bank(
        "Small Town Bank",
        bank_id="small",
        state="NY",
        total_assets="500000000",
        rssd_id="1001",
    ),
    make_bank(
        "Hudson Valley Savings",
        bank_id="hudson",
        state="NY",
        city="Poughkeepsie",
        total_assets="1500000000",
        rssd_id="1002",
    ),
    make_bank(
        "Lone Star Community Bank",
        bank_id="lonestar",
        state="TX",
        city="Austin",
        total_assets="2500000000",
        rssd_id="1003",
    ),
    make_bank(
        "Old Harbor Savings",
        bank_id="closed",
        state="NY",
        total_assets="800000000",
        is_active=False,
        rssd_id="1004",
    ),
]


class FakeReportPort(FinancialReportPort):
    """In-memory report source; RSSD ids listed in ``missing`` fail."""

    def __init__(self, enabled: bool = True, missing: frozenset[str] = frozenset()):
        self._enabled = enabled
        self.missing = missing

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def list_reporting_periods(self) -> list[ReportingPeriod]:
        if not self._enabled:
            msg = "Financial report service is not configured"
            raise FinancialDataUnavailableError(msg)
        return [ReportingPeriod("12/31/2023", "Q4 2023"), ReportingPeriod("9/30/2023")]

    async def fetch_financial_report(
        self,
        rssd_id: str,
        reporting_period: str,
    ) -> FinancialReport:
        if rssd_id in self.missing:
            msg = f"No report for {rssd_id}"
            raise FinancialDataUnavailableError(msg, rssd_id=rssd_id)
        return FinancialReport(
            rssd_id=rssd_id,
            reporting_period=reporting_period,
            filing_date="2024-01-30",
            sections={"balanceSheet": {"totalAssets": 1000}},
        )


def _run(coro) -> None:
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


async def _setup(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession)
    async with session_maker() as session:
        session.add_all(to_model(b) for b in CATALOG)
        await session.commit()


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        default_user_id="default-user",
        ffiec_bridge_enabled=True,
    )


@pytest.fixture
def report_port() -> FakeReportPort:
    return FakeReportPort(missing=frozenset({"1003"}))


@pytest.fixture
def api_engine(api_settings):
    engine = create_async_engine(api_settings.database_url, poolclass=NullPool)
    _run(_setup(engine))
    yield engine
    _run(engine.dispose())


@pytest.fixture
def test_client(api_settings, api_engine, report_port) -> TestClient:
    """TestClient with database, settings and report source overridden."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        api_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_financial_report_port] = lambda: report_port

    return TestClient(app)
