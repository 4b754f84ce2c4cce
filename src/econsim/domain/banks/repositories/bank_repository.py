"""Abstract repository for the bank catalog."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from econsim.domain.banks.entities import Bank
from econsim.domain.banks.value_objects import BankSearchCriteria


@dataclass(frozen=True)
class BankPage:
    """One page of search results plus the unpaginated match count."""

    items: list[Bank]
    total: int


class BankRepository(ABC):
    """Read-only access to active banks in the catalog."""

    @abstractmethod
    async def search(self, criteria: BankSearchCriteria) -> BankPage:
        """Find active banks matching the criteria.

        Results are ordered by total assets (descending), then bank name
        and id (ascending).
        """

    @abstractmethod
    async def find_by_id(self, bank_id: str) -> Bank | None:
        """Find an active bank by id."""

    @abstractmethod
    async def find_by_ids(self, bank_ids: Sequence[str]) -> list[Bank]:
        """Find the active banks among ``bank_ids``; unknown ids are skipped."""

    @abstractmethod
    async def count_active(self) -> int:
        """Count active banks in the catalog."""
