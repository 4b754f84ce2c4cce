"""API request/response schemas."""

from econsim.presentation.api.schemas.banks import (
    BankDetailResponse,
    BankIdRequest,
    BankResponse,
    BankSearchResponse,
    BankSelectionRecord,
    ReplaceSelectionRequest,
    ReportingPeriodListResponse,
    SelectedBankReportsResponse,
    SelectionOverviewResponse,
    SelectionResultResponse,
)
from econsim.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "BankDetailResponse",
    "BankIdRequest",
    "BankResponse",
    "BankSearchResponse",
    "BankSelectionRecord",
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "ReplaceSelectionRequest",
    "ReportingPeriodListResponse",
    "SelectedBankReportsResponse",
    "SelectionOverviewResponse",
    "SelectionResultResponse",
]
