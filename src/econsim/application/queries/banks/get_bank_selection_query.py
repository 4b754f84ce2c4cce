"""Get bank selection query - the caller's selection with resolved banks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from econsim.application.dtos import SelectionOverview, order_like_selection
from econsim.domain.banks import BankRepository, BankSelectionRepository

if TYPE_CHECKING:
    from econsim.application.factories import RepositoryFactory


class GetBankSelectionQuery:
    """Load the current user's selection, creating an empty one on first use."""

    def __init__(
        self,
        selection_repository: BankSelectionRepository,
        bank_repository: BankRepository,
    ):
        self._selection_repo = selection_repository
        self._bank_repo = bank_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetBankSelectionQuery:
        return cls(
            selection_repository=factory.bank_selection_repository(),
            bank_repository=factory.bank_repository(),
        )

    async def execute(self) -> SelectionOverview:
        selection = await self._selection_repo.get_or_create()
        banks = (
            await self._bank_repo.find_by_ids(selection.bank_ids)
            if selection.bank_ids
            else []
        )
        return SelectionOverview(
            selection=selection,
            banks=order_like_selection(selection, banks),
        )
