"""DTOs returned by bank catalog queries."""

from dataclasses import dataclass
from typing import Optional

from econsim.domain.banks import Bank, FinancialReport


@dataclass(frozen=True)
class BankSearchResult:
    """One page of bank search results."""

    items: list[Bank]
    total: int
    limit: int
    offset: int
    has_more: bool


@dataclass(frozen=True)
class BankReportEntry:
    """Report lookup outcome for one selected bank.

    Exactly one of ``report`` and ``error`` is set.
    """

    bank: Bank
    report: Optional[FinancialReport] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.report is not None


@dataclass(frozen=True)
class SelectedBankReports:
    """Financial reports of all selected banks for one period."""

    reporting_period: str
    entries: list[BankReportEntry]

    @property
    def failed_count(self) -> int:
        return sum(1 for entry in self.entries if not entry.success)
