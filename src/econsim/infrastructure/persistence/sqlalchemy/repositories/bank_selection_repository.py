"""SQLAlchemy implementation of BankSelectionRepository.

This implementation is user-scoped via UserContext, meaning all queries
automatically filter by the current user's user_id.

Writes are guarded by the selection's version: updates only match the row
when its stored version equals the one the caller read, and the first
insert for a user does nothing if another request inserted concurrently.
Either miss surfaces as ConcurrencyError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from econsim.domain.banks import BankSelection, BankSelectionRepository
from econsim.domain.shared.exceptions import ConcurrencyError
from econsim.domain.shared.time import ensure_tz_aware
from econsim.infrastructure.persistence.sqlalchemy.models import BankSelectionModel

if TYPE_CHECKING:
    from econsim.application.context import UserContext


# Dialects whose INSERT supports ON CONFLICT DO NOTHING. Other dialects insert
# inside a savepoint so a unique violation leaves the session usable.
_INSERT_IGNORING_CONFLICTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BankSelectionRepositorySQLAlchemy(BankSelectionRepository):
    """SQLAlchemy implementation of BankSelectionRepository."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def find(self) -> BankSelection | None:
        stmt = (
            select(BankSelectionModel)
            .where(BankSelectionModel.user_id == self._user_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def get_or_create(self) -> BankSelection:
        selection = await self.find()
        if selection is not None:
            return selection

        selection = BankSelection.default(self._user_id)
        try:
            await self.save(selection)
        except ConcurrencyError:
            # Another request created it between our read and insert.
            existing = await self.find()
            if existing is None:
                raise
            return existing
        return selection

    async def save(self, selection: BankSelection) -> None:
        if selection.user_id != self._user_id:
            msg = "Cannot save a bank selection of another user"
            raise ValueError(msg)

        if selection.is_persisted:
            await self._update(selection)
        else:
            await self._insert(selection)

    async def _insert(self, selection: BankSelection) -> None:
        values = {
            "id": selection.id,
            "user_id": selection.user_id,
            "selected_banks": list(selection.bank_ids),
            "max_banks": selection.max_banks,
            "version": 1,
            "created_at": selection.created_at,
            "updated_at": selection.updated_at,
        }
        dialect = self._dialect_name()
        if dialect in _INSERT_IGNORING_CONFLICTS:
            stmt = _INSERT_IGNORING_CONFLICTS[dialect](BankSelectionModel.__table__)
            stmt = stmt.on_conflict_do_nothing(index_elements=["user_id"])
            result = await self._session.execute(stmt.values(**values))
            inserted = result.rowcount > 0
        else:
            inserted = await self._insert_in_savepoint(values)

        if not inserted:
            raise ConcurrencyError(
                "Bank selection was created by another request",
                details={"user_id": self._user_id},
            )
        selection.version = 1

    async def _insert_in_savepoint(self, values: dict) -> bool:
        try:
            async with self._session.begin_nested():
                await self._session.execute(
                    insert(BankSelectionModel.__table__).values(**values),
                )
        except IntegrityError:
            return False
        return True

    def _dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

    async def _update(self, selection: BankSelection) -> None:
        stmt = (
            update(BankSelectionModel)
            .where(
                BankSelectionModel.user_id == self._user_id,
                BankSelectionModel.version == selection.version,
            )
            .values(
                selected_banks=list(selection.bank_ids),
                max_banks=selection.max_banks,
                version=selection.version + 1,
                updated_at=selection.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ConcurrencyError(
                details={
                    "user_id": self._user_id,
                    "expected_version": selection.version,
                },
            )
        selection.version += 1

    def _map_to_domain(self, model: BankSelectionModel) -> BankSelection:
        return BankSelection(
            id=model.id,
            user_id=model.user_id,
            bank_ids=list(model.selected_banks or []),
            max_banks=model.max_banks,
            version=model.version,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
