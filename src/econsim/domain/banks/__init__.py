"""Bank catalog and bank selection domain."""

from econsim.domain.banks.exceptions import (
    BankNotFoundError,
    FinancialDataUnavailableError,
    InvalidSearchCriteriaError,
    SelectionConflictError,
    SelectionFullError,
    TooManyBanksError,
    UnknownBanksError,
)
from econsim.domain.banks.entities import Bank
from econsim.domain.banks.aggregates import MAX_SELECTION_SIZE, BankSelection
from econsim.domain.banks.value_objects import (
    BankField,
    BankSearchCriteria,
    EqualsFilter,
    RangeFilter,
    SearchFilter,
    SelectionStatus,
    TextSearchFilter,
)
from econsim.domain.banks.repositories import (
    BankPage,
    BankRepository,
    BankSelectionRepository,
)
from econsim.domain.banks.ports import (
    FinancialReport,
    FinancialReportPort,
    ReportingPeriod,
)

__all__ = [
    "MAX_SELECTION_SIZE",
    "Bank",
    "BankField",
    "BankNotFoundError",
    "BankPage",
    "BankRepository",
    "BankSearchCriteria",
    "BankSelection",
    "BankSelectionRepository",
    "EqualsFilter",
    "FinancialDataUnavailableError",
    "FinancialReport",
    "FinancialReportPort",
    "InvalidSearchCriteriaError",
    "RangeFilter",
    "ReportingPeriod",
    "SearchFilter",
    "SelectionConflictError",
    "SelectionFullError",
    "SelectionStatus",
    "TextSearchFilter",
    "TooManyBanksError",
    "UnknownBanksError",
]
