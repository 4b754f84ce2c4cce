"""Bank search criteria value object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from econsim.domain.banks.exceptions import InvalidSearchCriteriaError
from econsim.domain.banks.value_objects.search_filters import (
    TEXT_SEARCH_FIELDS,
    BankField,
    EqualsFilter,
    RangeFilter,
    SearchFilter,
    TextSearchFilter,
)

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
MAX_SEARCH_LENGTH = 100
MAX_STATE_LENGTH = 2
MAX_CLASSIFIER_LENGTH = 50


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class BankSearchCriteria:
    """Validated, normalized bank search parameters.

    Blank text parameters are treated as absent and ``state`` is upper-cased.
    Construction fails with InvalidSearchCriteriaError on out-of-range input.
    """

    search: Optional[str] = None
    state: Optional[str] = None
    charter_type: Optional[str] = None
    regulator: Optional[str] = None
    min_assets: Optional[Decimal] = None
    max_assets: Optional[Decimal] = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def __post_init__(self) -> None:
        search = _clean(self.search)
        state = _clean(self.state)
        object.__setattr__(self, "search", search)
        object.__setattr__(self, "state", state.upper() if state else None)
        object.__setattr__(self, "charter_type", _clean(self.charter_type))
        object.__setattr__(self, "regulator", _clean(self.regulator))

        if not 1 <= self.limit <= MAX_LIMIT:
            msg = f"limit must be between 1 and {MAX_LIMIT}"
            raise InvalidSearchCriteriaError(msg, field="limit")
        if self.offset < 0:
            msg = "offset must be greater than or equal to 0"
            raise InvalidSearchCriteriaError(msg, field="offset")
        if self.search and len(self.search) > MAX_SEARCH_LENGTH:
            msg = f"search must be at most {MAX_SEARCH_LENGTH} characters"
            raise InvalidSearchCriteriaError(msg, field="search")
        if self.state and len(self.state) > MAX_STATE_LENGTH:
            msg = f"state must be at most {MAX_STATE_LENGTH} characters"
            raise InvalidSearchCriteriaError(msg, field="state")
        for name in ("charter_type", "regulator"):
            value = getattr(self, name)
            if value and len(value) > MAX_CLASSIFIER_LENGTH:
                msg = f"{name} must be at most {MAX_CLASSIFIER_LENGTH} characters"
                raise InvalidSearchCriteriaError(msg, field=name)
        for name in ("min_assets", "max_assets"):
            value = getattr(self, name)
            if value is not None and value < 0:
                msg = f"{name} must be non-negative"
                raise InvalidSearchCriteriaError(msg, field=name)
        if (
            self.min_assets is not None
            and self.max_assets is not None
            and self.min_assets > self.max_assets
        ):
            msg = "min_assets must not exceed max_assets"
            raise InvalidSearchCriteriaError(msg, field="min_assets")

    def to_filters(self) -> list[SearchFilter]:
        """Translate the criteria into AND-combined filter predicates.

        The active-bank restriction is always the first predicate.
        """
        filters: list[SearchFilter] = [EqualsFilter(BankField.IS_ACTIVE, True)]

        if self.search:
            filters.append(TextSearchFilter(TEXT_SEARCH_FIELDS, self.search))
        if self.state:
            filters.append(EqualsFilter(BankField.STATE, self.state))
        if self.charter_type:
            filters.append(EqualsFilter(BankField.CHARTER_TYPE, self.charter_type))
        if self.regulator:
            filters.append(EqualsFilter(BankField.REGULATOR, self.regulator))
        if self.min_assets is not None or self.max_assets is not None:
            filters.append(
                RangeFilter(
                    BankField.TOTAL_ASSETS,
                    lower=self.min_assets,
                    upper=self.max_assets,
                ),
            )
        return filters

    def has_more(self, total: int) -> bool:
        return self.offset + self.limit < total
