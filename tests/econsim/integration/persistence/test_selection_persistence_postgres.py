"""Bank catalog and selection persistence against PostgreSQL.

Uses Testcontainers; run with --run-integration.
"""

from decimal import Decimal

import pytest

from econsim.domain.banks import BankSearchCriteria, BankSelection
from econsim.domain.shared.exceptions import ConcurrencyError
from econsim.infrastructure.persistence.sqlalchemy.repositories import (
    BankRepositorySQLAlchemy,
    BankSelectionRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import insert_banks, make_bank

pytestmark = pytest.mark.integration


async def test_search_with_asset_range(db_session):
    await insert_banks(
        db_session,
        [
            make_bank("Small", bank_id="small", total_assets="500000000"),
            make_bank("Target", bank_id="target", total_assets="1500000000"),
            make_bank("Large", bank_id="large", state="TX", total_assets="2500000000"),
        ],
    )

    page = await BankRepositorySQLAlchemy(db_session).search(
        BankSearchCriteria(
            min_assets=Decimal("1000000000"),
            max_assets=Decimal("2000000000"),
            state="NY",
        ),
    )

    assert [b.id for b in page.items] == ["target"]


async def test_concurrent_first_insert_is_a_conflict(db_session, user_context):
    repo = BankSelectionRepositorySQLAlchemy(db_session, user_context)
    await repo.save(BankSelection.default(user_context.user_id))

    with pytest.raises(ConcurrencyError):
        await repo.save(BankSelection.default(user_context.user_id))

    created = await repo.get_or_create()
    assert created.version == 1


async def test_versioned_update(db_session, user_context):
    repo = BankSelectionRepositorySQLAlchemy(db_session, user_context)
    selection = await repo.get_or_create()
    stale = await repo.find()
    assert stale is not None

    selection.replace(["a", "b"], 30)
    await repo.save(selection)
    await db_session.commit()

    stale.replace(["c"], 30)
    with pytest.raises(ConcurrencyError):
        await repo.save(stale)

    stored = await repo.find()
    assert stored is not None
    assert stored.bank_ids == ["a", "b"]
    assert stored.version == 2


async def test_plain_insert_conflict_keeps_session_usable(
    db_session,
    user_context,
    monkeypatch,
):
    repo = BankSelectionRepositorySQLAlchemy(db_session, user_context)
    created = await repo.get_or_create()
    # Force the savepoint path used for dialects without ON CONFLICT support.
    monkeypatch.setattr(repo, "_dialect_name", lambda: "generic")

    with pytest.raises(ConcurrencyError):
        await repo.save(BankSelection.default(user_context.user_id))

    existing = await repo.get_or_create()
    assert existing.id == created.id
    assert existing.version == 1
