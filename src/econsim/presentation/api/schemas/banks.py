"""Bank catalog and bank selection schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import ConfigDict, Field

from econsim.application.dtos import (
    BankReportEntry,
    BankSearchResult,
    SelectedBankReports,
    SelectionOverview,
    SelectionResult,
)
from econsim.domain.banks import (
    MAX_SELECTION_SIZE,
    Bank,
    BankSelection,
    FinancialReport,
    ReportingPeriod,
    SelectionStatus,
)
from econsim.presentation.api.schemas.common import CamelModel

# =============================================================================
# Bank catalog
# =============================================================================


class BankResponse(CamelModel):
    """Response schema for a bank."""

    id: str = Field(description="Bank identifier")
    rssd_id: str = Field(description="Federal Reserve RSSD id")
    fdic_certificate_number: str = Field(description="FDIC certificate number")
    bank_name: str = Field(description="Institution name")
    city: str
    state: str = Field(description="Two-letter state code")
    total_assets: Decimal = Field(description="Total assets in USD")
    charter_type: str
    regulator: str
    is_active: bool
    last_filing_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6f1c2a9e-3d4b-4a8e-9b7c-1d2e3f405162",
                "rssdId": "480228",
                "fdicCertificateNumber": "3510",
                "bankName": "Bank of America, National Association",
                "city": "Charlotte",
                "state": "NC",
                "totalAssets": "2540000000000.00",
                "charterType": "National Bank",
                "regulator": "OCC",
                "isActive": True,
                "lastFilingDate": "2024-03-31",
            },
        },
    )

    @classmethod
    def from_domain(cls, bank: Bank) -> BankResponse:
        return cls(
            id=bank.id,
            rssd_id=bank.rssd_id,
            fdic_certificate_number=bank.fdic_certificate_number,
            bank_name=bank.bank_name,
            city=bank.city,
            state=bank.state,
            total_assets=bank.total_assets,
            charter_type=bank.charter_type,
            regulator=bank.regulator,
            is_active=bank.is_active,
            last_filing_date=bank.last_filing_date,
            created_at=bank.created_at,
            updated_at=bank.updated_at,
        )


class BankSearchResponse(CamelModel):
    """One page of bank search results."""

    success: bool = True
    banks: list[BankResponse]
    total: int = Field(description="Number of matches before pagination")
    limit: int
    offset: int
    has_more: bool = Field(description="True if offset + limit < total")

    @classmethod
    def from_result(cls, result: BankSearchResult) -> BankSearchResponse:
        return cls(
            banks=[BankResponse.from_domain(b) for b in result.items],
            total=result.total,
            limit=result.limit,
            offset=result.offset,
            has_more=result.has_more,
        )


class BankDetailResponse(CamelModel):
    """Single bank lookup."""

    success: bool = True
    data: BankResponse


# =============================================================================
# Bank selection
# =============================================================================


class ReplaceSelectionRequest(CamelModel):
    """Request to replace the whole selection."""

    # The cap applies after duplicates collapse, so the raw length is unbounded.
    bank_ids: list[str] = Field(
        description="Bank ids in display order (duplicates are collapsed)",
    )
    max_banks: int = Field(
        default=MAX_SELECTION_SIZE,
        ge=1,
        le=MAX_SELECTION_SIZE,
        description="Selection cap",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"bankIds": ["6f1c2a9e-3d4b-4a8e-9b7c-1d2e3f405162"]},
        },
    )


class BankIdRequest(CamelModel):
    """Request naming a single bank."""

    bank_id: str = Field(min_length=1, description="Bank identifier")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"bankId": "6f1c2a9e-3d4b-4a8e-9b7c-1d2e3f405162"},
        },
    )


class BankSelectionRecord(CamelModel):
    """The stored selection record."""

    id: str
    user_id: str
    bank_ids: list[str]
    max_banks: int
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, selection: BankSelection) -> BankSelectionRecord:
        return cls(
            id=selection.id,
            user_id=selection.user_id,
            bank_ids=list(selection.bank_ids),
            max_banks=selection.max_banks,
            version=selection.version,
            created_at=selection.created_at,
            updated_at=selection.updated_at,
        )


class SelectionOverviewResponse(CamelModel):
    """The caller's selection with resolved banks."""

    success: bool = True
    selection: BankSelectionRecord
    selected_banks: list[BankResponse]
    total_selected: int
    max_allowed: int

    @classmethod
    def from_overview(cls, overview: SelectionOverview) -> SelectionOverviewResponse:
        return cls(
            selection=BankSelectionRecord.from_domain(overview.selection),
            selected_banks=[BankResponse.from_domain(b) for b in overview.banks],
            total_selected=overview.total_selected,
            max_allowed=overview.max_allowed,
        )


class SelectionResultResponse(CamelModel):
    """Outcome of a selection mutation.

    ``success`` is false for no-op outcomes (``already_selected``,
    ``not_in_selection``); the selection is returned unchanged.
    """

    success: bool
    status: SelectionStatus
    selected_banks: list[BankResponse]
    total_selected: int
    max_allowed: int
    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "status": "updated",
                "selectedBanks": [],
                "totalSelected": 0,
                "maxAllowed": 30,
                "message": "Successfully selected 0 banks",
            },
        },
    )

    @classmethod
    def from_result(cls, result: SelectionResult) -> SelectionResultResponse:
        return cls(
            success=result.success,
            status=result.status,
            selected_banks=[BankResponse.from_domain(b) for b in result.banks],
            total_selected=result.total_selected,
            max_allowed=result.max_allowed,
            message=result.message,
        )


# =============================================================================
# Financial reports
# =============================================================================


class ReportingPeriodResponse(CamelModel):
    period: str
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, period: ReportingPeriod) -> ReportingPeriodResponse:
        return cls(period=period.period, description=period.description)


class ReportingPeriodListResponse(CamelModel):
    success: bool = True
    periods: list[ReportingPeriodResponse]


class FinancialReportResponse(CamelModel):
    rssd_id: str
    reporting_period: str
    filing_date: Optional[str] = None
    sections: dict[str, Any] = Field(
        default_factory=dict,
        description="Report sections as delivered by the FFIEC bridge",
    )

    @classmethod
    def from_domain(cls, report: FinancialReport) -> FinancialReportResponse:
        return cls(
            rssd_id=report.rssd_id,
            reporting_period=report.reporting_period,
            filing_date=report.filing_date,
            sections=dict(report.sections),
        )


class BankReportEntryResponse(CamelModel):
    bank: BankResponse
    success: bool
    report: Optional[FinancialReportResponse] = None
    error: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: BankReportEntry) -> BankReportEntryResponse:
        return cls(
            bank=BankResponse.from_domain(entry.bank),
            success=entry.success,
            report=FinancialReportResponse.from_domain(entry.report)
            if entry.report
            else None,
            error=entry.error,
        )


class SelectedBankReportsResponse(CamelModel):
    """UBPR reports of the selected banks for one reporting period."""

    success: bool = True
    reporting_period: str
    reports: list[BankReportEntryResponse]
    failed: int = Field(description="Number of banks whose report is missing")

    @classmethod
    def from_result(cls, result: SelectedBankReports) -> SelectedBankReportsResponse:
        return cls(
            reporting_period=result.reporting_period,
            reports=[BankReportEntryResponse.from_entry(e) for e in result.entries],
            failed=result.failed_count,
        )
