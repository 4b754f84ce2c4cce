"""Financial reports for the banks in the caller's selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from econsim.application.dtos import BankReportEntry, SelectedBankReports
from econsim.application.queries.banks.get_bank_selection_query import (
    GetBankSelectionQuery,
)
from econsim.domain.banks import (
    FinancialDataUnavailableError,
    FinancialReportPort,
    ReportingPeriod,
)
from econsim.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from econsim.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SelectedBankReportsQuery:
    """Fetch the UBPR report of every selected bank for one period.

    A failing bank does not fail the whole request: its entry carries the
    error message instead of a report. Only an unavailable report source
    fails the query as a whole.
    """

    def __init__(
        self,
        selection_query: GetBankSelectionQuery,
        report_port: FinancialReportPort,
    ):
        self._selection_query = selection_query
        self._report_port = report_port

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        report_port: FinancialReportPort,
    ) -> SelectedBankReportsQuery:
        return cls(
            selection_query=GetBankSelectionQuery.from_factory(factory),
            report_port=report_port,
        )

    async def execute(self, reporting_period: str) -> SelectedBankReports:
        if not reporting_period or not reporting_period.strip():
            msg = "Reporting period is required"
            raise ValidationError(msg)
        if not self._report_port.enabled:
            msg = "Financial report service is not configured"
            raise FinancialDataUnavailableError(msg)

        overview = await self._selection_query.execute()
        entries: list[BankReportEntry] = []
        for bank in overview.banks:
            try:
                report = await self._report_port.fetch_financial_report(
                    bank.rssd_id,
                    reporting_period,
                )
            except FinancialDataUnavailableError as e:
                logger.warning(
                    "No report for bank %s (rssd %s, period %s): %s",
                    bank.id,
                    bank.rssd_id,
                    reporting_period,
                    e.message,
                )
                entries.append(BankReportEntry(bank=bank, error=e.message))
                continue
            entries.append(BankReportEntry(bank=bank, report=report))

        return SelectedBankReports(reporting_period=reporting_period, entries=entries)


class ListReportingPeriodsQuery:
    """List the reporting periods the report source offers."""

    def __init__(self, report_port: FinancialReportPort):
        self._report_port = report_port

    async def execute(self) -> list[ReportingPeriod]:
        if not self._report_port.enabled:
            msg = "Financial report service is not configured"
            raise FinancialDataUnavailableError(msg)
        return await self._report_port.list_reporting_periods()
