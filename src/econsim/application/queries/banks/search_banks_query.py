"""Search banks query - paginated, filtered bank catalog lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from econsim.application.dtos import BankSearchResult
from econsim.domain.banks import Bank, BankNotFoundError, BankRepository, BankSearchCriteria
from econsim.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from econsim.application.factories import RepositoryFactory


class SearchBanksQuery:
    """Query to search active banks."""

    def __init__(self, bank_repository: BankRepository):
        self._bank_repo = bank_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SearchBanksQuery:
        return cls(bank_repository=factory.bank_repository())

    async def execute(self, criteria: BankSearchCriteria) -> BankSearchResult:
        page = await self._bank_repo.search(criteria)
        return BankSearchResult(
            items=page.items,
            total=page.total,
            limit=criteria.limit,
            offset=criteria.offset,
            has_more=criteria.has_more(page.total),
        )


class GetBankQuery:
    """Query to fetch a single active bank."""

    def __init__(self, bank_repository: BankRepository):
        self._bank_repo = bank_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetBankQuery:
        return cls(bank_repository=factory.bank_repository())

    async def execute(self, bank_id: str) -> Bank:
        if not bank_id or not bank_id.strip():
            msg = "Bank id is required"
            raise ValidationError(msg)

        bank = await self._bank_repo.find_by_id(bank_id)
        if bank is None:
            raise BankNotFoundError(bank_id)
        return bank
