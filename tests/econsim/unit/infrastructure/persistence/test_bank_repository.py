"""Unit tests for BankRepositorySQLAlchemy (in-memory SQLite)."""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import select

from econsim.domain.banks import (
    BankField,
    BankSearchCriteria,
    EqualsFilter,
    RangeFilter,
    TextSearchFilter,
)
from econsim.infrastructure.persistence.sqlalchemy.models import BankModel
from econsim.infrastructure.persistence.sqlalchemy.repositories.bank_repository import (
    BankRepositorySQLAlchemy,
    to_clause,
)
from tests.shared.fixtures.factories import insert_banks, make_bank


@pytest.fixture
def repo(sqlite_session) -> BankRepositorySQLAlchemy:
    return BankRepositorySQLAlchemy(sqlite_session)


@pytest_asyncio.fixture
async def catalog(sqlite_session):
    """Small catalog with one inactive bank."""
    return await insert_banks(
        sqlite_session,
        [
            make_bank(
                "Small Town Bank",
                bank_id="small",
                state="NY",
                city="Ithaca",
                total_assets="500000000",
            ),
            make_bank(
                "Hudson Trust",
                bank_id="hudson",
                state="NY",
                city="Albany",
                total_assets="1500000000",
                regulator="FDIC",
                charter_type="State Nonmember Bank",
            ),
            make_bank(
                "Texas Capital Trust",
                bank_id="texas",
                state="TX",
                city="Dallas",
                total_assets="2500000000",
                fdic_certificate_number="77777",
            ),
            make_bank(
                "Closed Savings",
                bank_id="closed",
                state="NY",
                total_assets="9000000000",
                is_active=False,
            ),
        ],
    )


class TestSearch:
    async def test_asset_range_and_state(self, repo, catalog):
        criteria = BankSearchCriteria(
            min_assets=Decimal("1000000000"),
            max_assets=Decimal("2000000000"),
            state="NY",
        )

        page = await repo.search(criteria)

        assert [b.id for b in page.items] == ["hudson"]
        assert page.total == 1
        assert page.items[0].total_assets == Decimal("1500000000.00")

    async def test_inactive_banks_are_never_returned(self, repo, catalog):
        page = await repo.search(BankSearchCriteria())

        assert "closed" not in [b.id for b in page.items]
        assert page.total == 3

    async def test_ordered_by_assets_then_name(self, repo, sqlite_session):
        await insert_banks(
            sqlite_session,
            [
                make_bank("Zeta Bank", bank_id="z", total_assets="100"),
                make_bank("Alpha Bank", bank_id="a", total_assets="100"),
                make_bank("Big Bank", bank_id="big", total_assets="900"),
            ],
        )

        page = await repo.search(BankSearchCriteria())

        assert [b.id for b in page.items] == ["big", "a", "z"]

    async def test_text_search_is_case_insensitive_over_several_columns(
        self,
        repo,
        catalog,
    ):
        by_name = await repo.search(BankSearchCriteria(search="TRUST"))
        by_city = await repo.search(BankSearchCriteria(search="albany"))
        by_fdic = await repo.search(BankSearchCriteria(search="7777"))

        assert {b.id for b in by_name.items} == {"hudson", "texas"}
        assert [b.id for b in by_city.items] == ["hudson"]
        assert [b.id for b in by_fdic.items] == ["texas"]

    async def test_like_wildcards_match_literally(self, repo, catalog):
        page = await repo.search(BankSearchCriteria(search="%"))

        assert page.items == []
        assert page.total == 0

    async def test_exact_filters(self, repo, catalog):
        page = await repo.search(
            BankSearchCriteria(regulator="FDIC", charter_type="State Nonmember Bank"),
        )

        assert [b.id for b in page.items] == ["hudson"]

    async def test_pagination(self, repo, catalog):
        first = await repo.search(BankSearchCriteria(limit=2, offset=0))
        second = await repo.search(BankSearchCriteria(limit=2, offset=2))

        assert [b.id for b in first.items] == ["texas", "hudson"]
        assert [b.id for b in second.items] == ["small"]
        assert first.total == second.total == 3

    async def test_offset_past_end(self, repo, catalog):
        page = await repo.search(BankSearchCriteria(offset=50))

        assert page.items == []
        assert page.total == 3


class TestLookups:
    async def test_find_by_id(self, repo, catalog):
        bank = await repo.find_by_id("texas")

        assert bank is not None
        assert bank.bank_name == "Texas Capital Trust"
        assert bank.created_at is not None
        assert bank.created_at.tzinfo is not None

    async def test_find_by_id_ignores_inactive(self, repo, catalog):
        assert await repo.find_by_id("closed") is None
        assert await repo.find_by_id("missing") is None

    async def test_find_by_ids_returns_active_only(self, repo, catalog):
        banks = await repo.find_by_ids(["small", "closed", "missing", "hudson"])

        assert {b.id for b in banks} == {"small", "hudson"}

    async def test_find_by_ids_empty(self, repo):
        assert await repo.find_by_ids([]) == []

    async def test_count_active(self, repo, catalog):
        assert await repo.count_active() == 3


class TestToClause:
    async def test_open_range_matches_everything(self, sqlite_session, catalog):
        clause = to_clause(RangeFilter(BankField.TOTAL_ASSETS))

        result = await sqlite_session.execute(select(BankModel.id).where(clause))

        assert len(result.all()) == 4

    async def test_filters_combine(self, sqlite_session, catalog):
        clauses = [
            to_clause(EqualsFilter(BankField.STATE, "NY")),
            to_clause(TextSearchFilter((BankField.CITY,), "alb")),
        ]

        result = await sqlite_session.execute(select(BankModel.id).where(*clauses))

        assert result.scalars().all() == ["hudson"]

    def test_unknown_filter_type(self):
        with pytest.raises(TypeError):
            to_clause("state = 'NY'")
