"""FFIEC bridge adapter implementing the financial report port."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, unquote

from econsim.domain.banks import (
    FinancialDataUnavailableError,
    FinancialReport,
    FinancialReportPort,
    ReportingPeriod,
)
from econsim.infrastructure.integration.ffiec.client import FFIECBridgeError

if TYPE_CHECKING:
    from econsim.infrastructure.integration.ffiec.client import FFIECBridgeClient

logger = logging.getLogger(__name__)

REPORTING_PERIOD_URI_PREFIX = "ffiec://reporting-periods/"
BANK_REPORT_URI = "ffiec://banks/{rssd_id}/{period}"

# Top-level keys of a UBPR document that describe it rather than hold figures.
_REPORT_META_KEYS = frozenset({"rssdId", "reportingPeriod", "filingDate"})


def bank_report_uri(rssd_id: str, reporting_period: str) -> str:
    # Periods look like 12/31/2023, so path segments are percent-encoded.
    return BANK_REPORT_URI.format(
        rssd_id=quote(rssd_id, safe=""),
        period=quote(reporting_period, safe=""),
    )


class FFIECBridgeAdapter(FinancialReportPort):
    """Infrastructure adapter that implements FinancialReportPort.

    Translates bridge resources into domain objects and bridge failures
    into FinancialDataUnavailableError.
    """

    def __init__(self, client: FFIECBridgeClient):
        self._client = client

    @property
    def enabled(self) -> bool:
        return self._client.enabled

    async def list_reporting_periods(self) -> list[ReportingPeriod]:
        self._ensure_enabled()
        try:
            resources = await self._client.list_resources()
        except FFIECBridgeError as e:
            raise FinancialDataUnavailableError(str(e)) from e

        periods = []
        for resource in resources:
            uri = str(resource.get("uri", ""))
            if not uri.startswith(REPORTING_PERIOD_URI_PREFIX):
                continue
            periods.append(
                ReportingPeriod(
                    period=unquote(uri[len(REPORTING_PERIOD_URI_PREFIX) :]),
                    description=resource.get("description"),
                ),
            )
        return periods

    async def fetch_financial_report(
        self,
        rssd_id: str,
        reporting_period: str,
    ) -> FinancialReport:
        self._ensure_enabled(rssd_id)
        uri = bank_report_uri(rssd_id, reporting_period)
        try:
            contents = await self._client.read_resource(uri)
        except FFIECBridgeError as e:
            raise FinancialDataUnavailableError(str(e), rssd_id=rssd_id) from e

        document = self._parse_document(contents, rssd_id)
        logger.debug("Fetched UBPR report %s", uri)
        filing_date = document.get("filingDate")
        return FinancialReport(
            rssd_id=str(document.get("rssdId", rssd_id)),
            reporting_period=str(document.get("reportingPeriod", reporting_period)),
            filing_date=str(filing_date) if filing_date is not None else None,
            sections={
                key: value
                for key, value in document.items()
                if key not in _REPORT_META_KEYS
            },
        )

    def _ensure_enabled(self, rssd_id: str | None = None) -> None:
        if not self._client.enabled:
            msg = "Financial report service is not configured"
            raise FinancialDataUnavailableError(msg, rssd_id=rssd_id)

    @staticmethod
    def _parse_document(contents: list[dict[str, Any]], rssd_id: str) -> dict[str, Any]:
        first = contents[0] if contents else None
        if not isinstance(first, dict) or "text" not in first:
            msg = "Financial report response was empty"
            raise FinancialDataUnavailableError(msg, rssd_id=rssd_id)
        try:
            document = json.loads(first["text"])
        except (TypeError, ValueError) as e:
            msg = "Financial report response was not valid JSON"
            raise FinancialDataUnavailableError(msg, rssd_id=rssd_id) from e
        if not isinstance(document, dict):
            msg = "Financial report response had an unexpected shape"
            raise FinancialDataUnavailableError(msg, rssd_id=rssd_id)
        return document
