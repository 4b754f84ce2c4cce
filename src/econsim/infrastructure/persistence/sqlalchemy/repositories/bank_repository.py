"""SQLAlchemy implementation of BankRepository.

Search criteria arrive as structured filter predicates and are rendered
into bound SQLAlchemy expressions; user input never reaches SQL text.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import ColumnElement, and_, func, or_, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from econsim.domain.banks import (
    Bank,
    BankField,
    BankPage,
    BankRepository,
    BankSearchCriteria,
    EqualsFilter,
    RangeFilter,
    SearchFilter,
    TextSearchFilter,
)
from econsim.domain.shared.time import ensure_tz_aware
from econsim.infrastructure.persistence.sqlalchemy.models import BankModel

_COLUMNS = {
    BankField.BANK_NAME: BankModel.bank_name,
    BankField.FDIC_CERTIFICATE_NUMBER: BankModel.fdic_certificate_number,
    BankField.CITY: BankModel.city,
    BankField.STATE: BankModel.state,
    BankField.CHARTER_TYPE: BankModel.charter_type,
    BankField.REGULATOR: BankModel.regulator,
    BankField.TOTAL_ASSETS: BankModel.total_assets,
    BankField.IS_ACTIVE: BankModel.is_active,
}

# Assets descending, then name; id makes the order total for stable paging.
_ORDERING = (
    BankModel.total_assets.desc(),
    BankModel.bank_name.asc(),
    BankModel.id.asc(),
)


def to_clause(search_filter: SearchFilter) -> ColumnElement[bool]:
    """Render one filter predicate as a SQLAlchemy boolean expression."""
    if isinstance(search_filter, EqualsFilter):
        return _COLUMNS[search_filter.field] == search_filter.value

    if isinstance(search_filter, RangeFilter):
        column = _COLUMNS[search_filter.field]
        bounds = []
        if search_filter.lower is not None:
            bounds.append(column >= search_filter.lower)
        if search_filter.upper is not None:
            bounds.append(column <= search_filter.upper)
        return and_(*bounds) if bounds else true()

    if isinstance(search_filter, TextSearchFilter):
        return or_(
            *(
                _COLUMNS[field].icontains(search_filter.term, autoescape=True)
                for field in search_filter.fields
            ),
        )

    msg = f"Unsupported search filter: {type(search_filter).__name__}"
    raise TypeError(msg)


class BankRepositorySQLAlchemy(BankRepository):
    """Read-only SQLAlchemy access to the bank catalog."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def search(self, criteria: BankSearchCriteria) -> BankPage:
        conditions = [to_clause(f) for f in criteria.to_filters()]

        count_stmt = select(func.count()).select_from(BankModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(BankModel)
            .where(*conditions)
            .order_by(*_ORDERING)
            .limit(criteria.limit)
            .offset(criteria.offset)
        )
        result = await self._session.execute(stmt)
        items = [self._map_to_domain(model) for model in result.scalars().all()]
        return BankPage(items=items, total=total)

    async def find_by_id(self, bank_id: str) -> Bank | None:
        stmt = select(BankModel).where(
            BankModel.id == bank_id,
            BankModel.is_active.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_ids(self, bank_ids: Sequence[str]) -> list[Bank]:
        if not bank_ids:
            return []
        stmt = (
            select(BankModel)
            .where(
                BankModel.id.in_(list(bank_ids)),
                BankModel.is_active.is_(True),
            )
            .order_by(*_ORDERING)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count_active(self) -> int:
        stmt = (
            select(func.count())
            .select_from(BankModel)
            .where(BankModel.is_active.is_(True))
        )
        return (await self._session.execute(stmt)).scalar_one()

    def _map_to_domain(self, model: BankModel) -> Bank:
        return Bank(
            id=model.id,
            rssd_id=model.rssd_id,
            fdic_certificate_number=model.fdic_certificate_number,
            bank_name=model.bank_name,
            city=model.city,
            state=model.state,
            total_assets=Decimal(model.total_assets).quantize(Decimal("0.01")),
            charter_type=model.charter_type,
            regulator=model.regulator,
            is_active=model.is_active,
            last_filing_date=model.last_filing_date,
            created_at=ensure_tz_aware(model.created_at) if model.created_at else None,
            updated_at=ensure_tz_aware(model.updated_at) if model.updated_at else None,
        )
