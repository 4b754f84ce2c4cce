"""Financial report port interface.

Regulatory (UBPR) financial data is served by an external protocol bridge
in front of the FFIEC web service. The domain only needs two operations
from it and treats the report content as opaque sections.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ReportingPeriod:
    """A UBPR reporting period, e.g. ``12/31/2023``."""

    period: str
    description: Optional[str] = None


@dataclass(frozen=True)
class FinancialReport:
    """UBPR report of one bank for one reporting period.

    ``sections`` maps section names (``balanceSheet``, ``incomeStatement``,
    ``capitalAdequacy``, ...) to their figures exactly as the bridge sent
    them.
    """

    rssd_id: str
    reporting_period: str
    filing_date: Optional[str] = None
    sections: dict[str, Any] = field(default_factory=dict)


class FinancialReportPort(ABC):
    """
    Interface for fetching regulatory financial reports.

    Implementations raise FinancialDataUnavailableError for every failure
    (disabled bridge, transport error, malformed answer).
    """

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether a report source is configured."""

    @abstractmethod
    async def list_reporting_periods(self) -> list[ReportingPeriod]:
        """
        List the reporting periods the source can serve.

        Raises
        ------
        FinancialDataUnavailableError
            If the source cannot be reached or answers with an error
        """

    @abstractmethod
    async def fetch_financial_report(
        self,
        rssd_id: str,
        reporting_period: str,
    ) -> FinancialReport:
        """
        Fetch the report of one bank.

        Parameters
        ----------
        rssd_id
            RSSD id of the bank
        reporting_period
            Reporting period as listed by ``list_reporting_periods``

        Returns
        -------
        The bank's financial report

        Raises
        ------
        FinancialDataUnavailableError
            If the report cannot be retrieved
        """
