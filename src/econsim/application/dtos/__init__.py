"""Application-level DTOs."""

from econsim.application.dtos.bank_search_dto import (
    BankReportEntry,
    BankSearchResult,
    SelectedBankReports,
)
from econsim.application.dtos.bank_selection_dto import (
    SelectionOverview,
    SelectionResult,
    order_like_selection,
)

__all__ = [
    "BankReportEntry",
    "BankSearchResult",
    "SelectedBankReports",
    "SelectionOverview",
    "SelectionResult",
    "order_like_selection",
]
