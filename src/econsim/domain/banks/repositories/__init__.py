from econsim.domain.banks.repositories.bank_repository import BankPage, BankRepository
from econsim.domain.banks.repositories.bank_selection_repository import (
    BankSelectionRepository,
)

__all__ = ["BankPage", "BankRepository", "BankSelectionRepository"]
