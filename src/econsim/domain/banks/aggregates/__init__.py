from econsim.domain.banks.aggregates.bank_selection import (
    MAX_SELECTION_SIZE,
    BankSelection,
)

__all__ = ["MAX_SELECTION_SIZE", "BankSelection"]
