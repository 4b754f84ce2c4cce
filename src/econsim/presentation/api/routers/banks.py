"""Banks router for catalog search and bank selection endpoints."""

import logging
from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Body, Query

from econsim.application.commands.banks import (
    AddBankToSelectionCommand,
    ClearBankSelectionCommand,
    RemoveBankFromSelectionCommand,
    ReplaceBankSelectionCommand,
)
from econsim.application.queries.banks import (
    GetBankQuery,
    GetBankSelectionQuery,
    ListReportingPeriodsQuery,
    SearchBanksQuery,
    SelectedBankReportsQuery,
)
from econsim.domain.banks import BankSearchCriteria
from econsim.domain.banks.value_objects.search_criteria import DEFAULT_LIMIT
from econsim.presentation.api.dependencies import AppSettings, RepoFactory, ReportPort
from econsim.presentation.api.schemas.banks import (
    BankDetailResponse,
    BankIdRequest,
    BankResponse,
    BankSearchResponse,
    ReplaceSelectionRequest,
    ReportingPeriodListResponse,
    ReportingPeriodResponse,
    SelectedBankReportsResponse,
    SelectionOverviewResponse,
    SelectionResultResponse,
)
from econsim.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# limit and offset are range-checked by BankSearchCriteria (400 on failure).
SearchTerm = Annotated[
    Optional[str],
    Query(description="Substring of name, FDIC certificate, city or state"),
]
StateFilter = Annotated[Optional[str], Query(description="Two-letter state code")]
CharterTypeFilter = Annotated[
    Optional[str],
    Query(alias="charterType", description="Exact charter type"),
]
RegulatorFilter = Annotated[Optional[str], Query(description="Exact regulator")]
MinAssetsFilter = Annotated[
    Optional[Decimal],
    Query(alias="minAssets", description="Minimum total assets (inclusive)"),
]
MaxAssetsFilter = Annotated[
    Optional[Decimal],
    Query(alias="maxAssets", description="Maximum total assets (inclusive)"),
]
PageLimit = Annotated[int, Query(description="Page size (1-100)")]
PageOffset = Annotated[int, Query(description="Number of matches to skip")]
ReportingPeriodParam = Annotated[
    str,
    Query(
        alias="reportingPeriod",
        description="Reporting period as offered by /reporting-periods",
    ),
]

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
}
_SELECTION_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    409: {"model": ErrorResponse, "description": "Concurrent update, retry"},
}


# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------


@router.get(
    "/search",
    summary="Search banks",
    responses={200: {"description": "One page of matching banks"}, **_ERRORS},
)
async def search_banks(  # NOQA: PLR0913
    factory: RepoFactory,
    search: SearchTerm = None,
    state: StateFilter = None,
    charter_type: CharterTypeFilter = None,
    regulator: RegulatorFilter = None,
    min_assets: MinAssetsFilter = None,
    max_assets: MaxAssetsFilter = None,
    limit: PageLimit = DEFAULT_LIMIT,
    offset: PageOffset = 0,
) -> BankSearchResponse:
    """
    Search active banks.

    Results are ordered by total assets (largest first), then by name.
    """
    criteria = BankSearchCriteria(
        search=search,
        state=state,
        charter_type=charter_type,
        regulator=regulator,
        min_assets=min_assets,
        max_assets=max_assets,
        limit=limit,
        offset=offset,
    )
    result = await SearchBanksQuery.from_factory(factory).execute(criteria)
    return BankSearchResponse.from_result(result)


@router.get(
    "/reporting-periods",
    summary="List reporting periods",
    responses={
        200: {"description": "Reporting periods offered by the FFIEC bridge"},
        503: {"model": ErrorResponse, "description": "Report source unavailable"},
    },
)
async def list_reporting_periods(report_port: ReportPort) -> ReportingPeriodListResponse:
    """List the UBPR reporting periods available for report lookups."""
    periods = await ListReportingPeriodsQuery(report_port).execute()
    return ReportingPeriodListResponse(
        periods=[ReportingPeriodResponse.from_domain(p) for p in periods],
    )


# -----------------------------------------------------------------------------
# Selection
# -----------------------------------------------------------------------------


@router.get(
    "/selection",
    summary="Get bank selection",
    responses={200: {"description": "The caller's selection"}},
)
async def get_selection(factory: RepoFactory) -> SelectionOverviewResponse:
    """
    Get the caller's bank selection.

    An empty selection is created on first access.
    """
    try:
        overview = await GetBankSelectionQuery.from_factory(factory).execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SelectionOverviewResponse.from_overview(overview)


@router.post(
    "/selection",
    summary="Replace bank selection",
    responses={200: {"description": "Selection replaced"}, **_SELECTION_ERRORS},
)
async def replace_selection(
    request: ReplaceSelectionRequest,
    factory: RepoFactory,
    settings: AppSettings,
) -> SelectionResultResponse:
    """
    Replace the whole selection.

    Duplicate ids are collapsed. Every id must name an active bank; nothing
    is written otherwise.
    """
    command = ReplaceBankSelectionCommand.from_factory(
        factory,
        max_attempts=settings.selection_max_attempts,
    )
    try:
        result = await command.execute(request.bank_ids, request.max_banks)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info(
        "Selection replaced for %s: %d banks",
        factory.user_context,
        result.total_selected,
    )
    return SelectionResultResponse.from_result(result)


@router.post(
    "/selection/add",
    summary="Add bank to selection",
    responses={
        200: {"description": "Bank added, or already selected"},
        **_SELECTION_ERRORS,
    },
)
async def add_to_selection(
    request: BankIdRequest,
    factory: RepoFactory,
    settings: AppSettings,
) -> SelectionResultResponse:
    """
    Add one bank to the selection.

    Adding a bank that is already selected is a no-op reported with status
    `already_selected`.
    """
    command = AddBankToSelectionCommand.from_factory(
        factory,
        max_attempts=settings.selection_max_attempts,
    )
    try:
        result = await command.execute(request.bank_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SelectionResultResponse.from_result(result)


@router.delete(
    "/selection/remove",
    summary="Remove bank from selection",
    responses={
        200: {"description": "Bank removed, or was not selected"},
        **_SELECTION_ERRORS,
    },
)
async def remove_from_selection(
    request: Annotated[BankIdRequest, Body()],
    factory: RepoFactory,
    settings: AppSettings,
) -> SelectionResultResponse:
    """
    Remove one bank from the selection.

    Removing a bank that is not selected is a no-op reported with status
    `not_in_selection`.
    """
    command = RemoveBankFromSelectionCommand.from_factory(
        factory,
        max_attempts=settings.selection_max_attempts,
    )
    try:
        result = await command.execute(request.bank_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return SelectionResultResponse.from_result(result)


@router.delete(
    "/selection/clear",
    summary="Clear bank selection",
    responses={200: {"description": "Selection emptied"}, **_SELECTION_ERRORS},
)
async def clear_selection(
    factory: RepoFactory,
    settings: AppSettings,
) -> SelectionResultResponse:
    """Empty the selection. The selection cap is kept."""
    command = ClearBankSelectionCommand.from_factory(
        factory,
        max_attempts=settings.selection_max_attempts,
    )
    try:
        result = await command.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Selection cleared for %s", factory.user_context)
    return SelectionResultResponse.from_result(result)


@router.get(
    "/selection/reports",
    summary="Financial reports of selected banks",
    responses={
        200: {"description": "One entry per selected bank"},
        **_ERRORS,
        503: {"model": ErrorResponse, "description": "Report source unavailable"},
    },
)
async def get_selection_reports(
    factory: RepoFactory,
    report_port: ReportPort,
    reporting_period: ReportingPeriodParam,
) -> SelectedBankReportsResponse:
    """
    Fetch the UBPR report of every selected bank for one reporting period.

    Banks whose report cannot be fetched are listed with `success: false`
    and an error message.
    """
    query = SelectedBankReportsQuery.from_factory(factory, report_port)
    try:
        result = await query.execute(reporting_period)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if result.failed_count:
        logger.info(
            "Reports for %s: %d of %d banks failed",
            reporting_period,
            result.failed_count,
            len(result.entries),
        )
    return SelectedBankReportsResponse.from_result(result)


# -----------------------------------------------------------------------------
# Single bank (registered last so it does not shadow the fixed paths)
# -----------------------------------------------------------------------------


@router.get(
    "/{bank_id}",
    summary="Get bank",
    responses={
        200: {"description": "Bank details"},
        404: {"model": ErrorResponse, "description": "Bank not found"},
    },
)
async def get_bank(bank_id: str, factory: RepoFactory) -> BankDetailResponse:
    """Get one active bank by id."""
    bank = await GetBankQuery.from_factory(factory).execute(bank_id)
    return BankDetailResponse(data=BankResponse.from_domain(bank))
