"""Bank catalog and selection queries."""

from econsim.application.queries.banks.get_bank_selection_query import (
    GetBankSelectionQuery,
)
from econsim.application.queries.banks.search_banks_query import (
    GetBankQuery,
    SearchBanksQuery,
)
from econsim.application.queries.banks.selected_bank_reports_query import (
    ListReportingPeriodsQuery,
    SelectedBankReportsQuery,
)

__all__ = [
    "GetBankQuery",
    "GetBankSelectionQuery",
    "ListReportingPeriodsQuery",
    "SearchBanksQuery",
    "SelectedBankReportsQuery",
]
