"""Abstract repository for bank selections."""

from abc import ABC, abstractmethod

from econsim.domain.banks.aggregates import BankSelection


class BankSelectionRepository(ABC):
    """Repository interface for the BankSelection aggregate.

    This repository is user-scoped - all operations apply to the user
    passed at construction time.
    """

    @abstractmethod
    async def find(self) -> BankSelection | None:
        """Load the current user's selection from storage, or None."""

    @abstractmethod
    async def get_or_create(self) -> BankSelection:
        """Load the selection, persisting an empty default one if missing."""

    @abstractmethod
    async def save(self, selection: BankSelection) -> None:
        """Persist the selection guarded by its version.

        On success ``selection.version`` is advanced to the stored version.

        Raises
        ------
        ConcurrencyError
            If the stored version no longer matches ``selection.version``,
            or a concurrent request created the selection first.
        """
