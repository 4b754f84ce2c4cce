"""Unit tests for BankSearchCriteria."""

from decimal import Decimal

import pytest

from econsim.domain.banks import (
    BankField,
    BankSearchCriteria,
    EqualsFilter,
    InvalidSearchCriteriaError,
    RangeFilter,
    TextSearchFilter,
)
from econsim.domain.shared.exceptions import ErrorCode, ValidationError


class TestNormalization:
    def test_defaults(self):
        criteria = BankSearchCriteria()

        assert criteria.limit == 20
        assert criteria.offset == 0
        assert criteria.search is None

    def test_blank_text_is_absent(self):
        criteria = BankSearchCriteria(search="   ", state="", regulator=" ")

        assert criteria.search is None
        assert criteria.state is None
        assert criteria.regulator is None

    def test_state_is_uppercased_and_trimmed(self):
        criteria = BankSearchCriteria(state=" ny ")

        assert criteria.state == "NY"

    def test_search_is_trimmed(self):
        criteria = BankSearchCriteria(search="  chase ")

        assert criteria.search == "chase"


class TestValidation:
    @pytest.mark.parametrize(
        ("kwargs", "field"),
        [
            ({"limit": 0}, "limit"),
            ({"limit": 101}, "limit"),
            ({"offset": -1}, "offset"),
            ({"search": "x" * 101}, "search"),
            ({"state": "NYC"}, "state"),
            ({"charter_type": "c" * 51}, "charter_type"),
            ({"regulator": "r" * 51}, "regulator"),
            ({"min_assets": Decimal("-1")}, "min_assets"),
            ({"max_assets": Decimal("-0.01")}, "max_assets"),
        ],
    )
    def test_out_of_range_values_are_rejected(self, kwargs, field):
        with pytest.raises(InvalidSearchCriteriaError) as exc_info:
            BankSearchCriteria(**kwargs)

        assert exc_info.value.details == {"field": field}
        assert exc_info.value.code == ErrorCode.INVALID_SEARCH_CRITERIA

    def test_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            BankSearchCriteria(limit=0)

    def test_inverted_asset_range_is_rejected(self):
        with pytest.raises(InvalidSearchCriteriaError, match="min_assets"):
            BankSearchCriteria(min_assets=Decimal("10"), max_assets=Decimal("5"))

    def test_boundary_values_are_accepted(self):
        criteria = BankSearchCriteria(
            limit=100,
            offset=0,
            search="x" * 100,
            min_assets=Decimal("0"),
            max_assets=Decimal("0"),
        )

        assert criteria.limit == 100


class TestToFilters:
    def test_active_filter_always_comes_first(self):
        filters = BankSearchCriteria().to_filters()

        assert filters == [EqualsFilter(BankField.IS_ACTIVE, True)]

    def test_all_criteria_become_predicates(self):
        criteria = BankSearchCriteria(
            search="trust",
            state="ca",
            charter_type="National Bank",
            regulator="OCC",
            min_assets=Decimal("1000"),
            max_assets=Decimal("2000"),
        )

        filters = criteria.to_filters()

        assert filters[0] == EqualsFilter(BankField.IS_ACTIVE, True)
        assert TextSearchFilter(
            (
                BankField.BANK_NAME,
                BankField.FDIC_CERTIFICATE_NUMBER,
                BankField.CITY,
                BankField.STATE,
            ),
            "trust",
        ) in filters
        assert EqualsFilter(BankField.STATE, "CA") in filters
        assert EqualsFilter(BankField.CHARTER_TYPE, "National Bank") in filters
        assert EqualsFilter(BankField.REGULATOR, "OCC") in filters
        assert (
            RangeFilter(BankField.TOTAL_ASSETS, Decimal("1000"), Decimal("2000"))
            in filters
        )

    def test_open_ended_asset_range(self):
        filters = BankSearchCriteria(min_assets=Decimal("5")).to_filters()

        assert filters[-1] == RangeFilter(BankField.TOTAL_ASSETS, lower=Decimal("5"))


class TestHasMore:
    @pytest.mark.parametrize(
        ("limit", "offset", "total", "expected"),
        [
            (20, 0, 21, True),
            (20, 0, 20, False),
            (20, 0, 0, False),
            (10, 10, 25, True),
            (10, 20, 25, False),
        ],
    )
    def test_has_more(self, limit, offset, total, expected):
        criteria = BankSearchCriteria(limit=limit, offset=offset)

        assert criteria.has_more(total) is expected
