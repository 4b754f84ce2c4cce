"""Unit tests for the bank catalog, selection and report queries."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from econsim.application.queries.banks import (
    GetBankQuery,
    GetBankSelectionQuery,
    ListReportingPeriodsQuery,
    SearchBanksQuery,
    SelectedBankReportsQuery,
)
from econsim.domain.banks import (
    BankNotFoundError,
    BankPage,
    BankSearchCriteria,
    BankSelection,
    FinancialDataUnavailableError,
    FinancialReport,
    ReportingPeriod,
)
from econsim.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import make_bank


@pytest.fixture
def bank_repo() -> AsyncMock:
    return AsyncMock()


class TestSearchBanksQuery:
    async def test_wraps_page_with_paging_info(self, bank_repo):
        banks = [make_bank("A"), make_bank("B")]
        bank_repo.search.return_value = BankPage(items=banks, total=5)
        criteria = BankSearchCriteria(limit=2, offset=2)

        result = await SearchBanksQuery(bank_repo).execute(criteria)

        bank_repo.search.assert_awaited_once_with(criteria)
        assert result.items == banks
        assert result.total == 5
        assert result.limit == 2
        assert result.offset == 2
        assert result.has_more is True

    async def test_last_page_has_no_more(self, bank_repo):
        bank_repo.search.return_value = BankPage(items=[make_bank()], total=3)

        result = await SearchBanksQuery(bank_repo).execute(
            BankSearchCriteria(limit=2, offset=2),
        )

        assert result.has_more is False


class TestGetBankQuery:
    async def test_returns_bank(self, bank_repo):
        bank = make_bank(bank_id="b-1")
        bank_repo.find_by_id.return_value = bank

        assert await GetBankQuery(bank_repo).execute("b-1") is bank

    async def test_missing_bank(self, bank_repo):
        bank_repo.find_by_id.return_value = None

        with pytest.raises(BankNotFoundError):
            await GetBankQuery(bank_repo).execute("nope")

    async def test_blank_id(self, bank_repo):
        with pytest.raises(ValidationError):
            await GetBankQuery(bank_repo).execute(" ")

        bank_repo.find_by_id.assert_not_called()


class TestGetBankSelectionQuery:
    async def test_resolves_banks_in_selection_order(self, bank_repo):
        first = make_bank("First", bank_id="b-1")
        second = make_bank("Second", bank_id="b-2")
        selection_repo = AsyncMock()
        selection_repo.get_or_create.return_value = BankSelection(
            user_id="u",
            bank_ids=["b-2", "b-1"],
            version=3,
        )
        bank_repo.find_by_ids.return_value = [first, second]

        overview = await GetBankSelectionQuery(selection_repo, bank_repo).execute()

        assert [b.id for b in overview.banks] == ["b-2", "b-1"]
        assert overview.total_selected == 2
        assert overview.max_allowed == 30

    async def test_empty_selection_skips_bank_lookup(self, bank_repo):
        selection_repo = AsyncMock()
        selection_repo.get_or_create.return_value = BankSelection.default("u")

        overview = await GetBankSelectionQuery(selection_repo, bank_repo).execute()

        assert overview.banks == []
        bank_repo.find_by_ids.assert_not_called()


# =============================================================================
# Financial reports
# =============================================================================


@pytest.fixture
def report_port() -> AsyncMock:
    port = AsyncMock()
    port.enabled = True
    return port


@pytest.fixture
def selection_query() -> AsyncMock:
    query = AsyncMock()
    query.execute.return_value = MagicMock(
        banks=[
            make_bank("Reporting Bank", bank_id="b-1", rssd_id="111"),
            make_bank("Silent Bank", bank_id="b-2", rssd_id="222"),
        ],
    )
    return query


class TestSelectedBankReportsQuery:
    async def test_per_bank_failures_become_entries(self, selection_query, report_port):
        report = FinancialReport(
            rssd_id="111",
            reporting_period="12/31/2023",
            sections={"balanceSheet": {"totalAssets": 1}},
        )

        async def fetch(rssd_id, period):
            if rssd_id == "222":
                raise FinancialDataUnavailableError("No data", rssd_id=rssd_id)
            return report

        report_port.fetch_financial_report.side_effect = fetch

        result = await SelectedBankReportsQuery(selection_query, report_port).execute(
            "12/31/2023",
        )

        assert result.reporting_period == "12/31/2023"
        assert [e.bank.id for e in result.entries] == ["b-1", "b-2"]
        assert result.entries[0].success
        assert result.entries[0].report is report
        assert not result.entries[1].success
        assert result.entries[1].error == "No data"
        assert result.failed_count == 1

    async def test_disabled_source_fails_whole_query(
        self,
        selection_query,
        report_port,
    ):
        report_port.enabled = False

        with pytest.raises(FinancialDataUnavailableError):
            await SelectedBankReportsQuery(selection_query, report_port).execute(
                "12/31/2023",
            )

        selection_query.execute.assert_not_called()

    async def test_period_is_required(self, selection_query, report_port):
        with pytest.raises(ValidationError, match="Reporting period"):
            await SelectedBankReportsQuery(selection_query, report_port).execute("")


class TestListReportingPeriodsQuery:
    async def test_lists_periods(self, report_port):
        periods = [ReportingPeriod("12/31/2023"), ReportingPeriod("9/30/2023")]
        report_port.list_reporting_periods.return_value = periods

        assert await ListReportingPeriodsQuery(report_port).execute() == periods

    async def test_disabled_source(self, report_port):
        report_port.enabled = False

        with pytest.raises(FinancialDataUnavailableError):
            await ListReportingPeriodsQuery(report_port).execute()
