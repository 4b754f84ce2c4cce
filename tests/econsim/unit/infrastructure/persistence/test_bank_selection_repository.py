"""Unit tests for BankSelectionRepositorySQLAlchemy (in-memory SQLite)."""

import pytest

from econsim.domain.banks import BankSelection
from econsim.domain.shared.exceptions import ConcurrencyError
from econsim.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from econsim.infrastructure.persistence.sqlalchemy.repositories.bank_selection_repository import (  # NOQA: E501
    BankSelectionRepositorySQLAlchemy,
)


@pytest.fixture
def repo(sqlite_session, user_context) -> BankSelectionRepositorySQLAlchemy:
    return BankSelectionRepositorySQLAlchemy(sqlite_session, user_context)


class TestGetOrCreate:
    async def test_creates_empty_selection_once(self, repo, sqlite_session):
        first = await repo.get_or_create()
        await sqlite_session.commit()
        second = await repo.get_or_create()

        assert first.bank_ids == []
        assert first.max_banks == 30
        assert first.version == 1
        assert second.id == first.id
        assert second.version == 1

    async def test_find_before_create(self, repo):
        assert await repo.find() is None

    async def test_selections_are_per_user(
        self,
        sqlite_session,
        user_context,
        other_user_context,
    ):
        mine = BankSelectionRepositorySQLAlchemy(sqlite_session, user_context)
        theirs = BankSelectionRepositorySQLAlchemy(sqlite_session, other_user_context)

        selection = await mine.get_or_create()
        selection.replace(["bank-a"], 30)
        await mine.save(selection)

        other = await theirs.get_or_create()

        assert other.user_id == other_user_context.user_id
        assert other.bank_ids == []
        assert other.id != selection.id

    async def test_concurrent_create_returns_existing(self, sqlite_session, user_context):
        winner = BankSelectionRepositorySQLAlchemy(sqlite_session, user_context)
        created = await winner.get_or_create()

        loser = BankSelectionRepositorySQLAlchemy(sqlite_session, user_context)
        duplicate = BankSelection.default(user_context.user_id)

        with pytest.raises(ConcurrencyError):
            await loser.save(duplicate)

        assert (await loser.get_or_create()).id == created.id


class TestSave:
    async def test_update_bumps_version_and_persists_order(self, repo, sqlite_session):
        selection = await repo.get_or_create()
        selection.replace(["c", "a", "b"], 10)

        await repo.save(selection)
        await sqlite_session.commit()
        stored = await repo.find()

        assert selection.version == 2
        assert stored is not None
        assert stored.bank_ids == ["c", "a", "b"]
        assert stored.max_banks == 10
        assert stored.version == 2

    async def test_stale_version_is_rejected(self, repo):
        selection = await repo.get_or_create()
        stale = await repo.find()
        assert stale is not None

        selection.replace(["a"], 30)
        await repo.save(selection)

        stale.replace(["b"], 30)
        with pytest.raises(ConcurrencyError):
            await repo.save(stale)

        stored = await repo.find()
        assert stored is not None
        assert stored.bank_ids == ["a"]
        assert stored.version == 2

    async def test_cannot_save_another_users_selection(self, repo):
        with pytest.raises(ValueError, match="another user"):
            await repo.save(BankSelection.default("somebody-else"))


class TestFactory:
    def test_factory_caches_repositories(self, sqlite_session, user_context):
        factory = SQLAlchemyRepositoryFactory(sqlite_session, user_context)

        assert factory.bank_repository() is factory.bank_repository()
        assert factory.bank_selection_repository() is factory.bank_selection_repository()
        assert factory.user_context == user_context
        assert factory.session is sqlite_session
