"""Bank domain value objects."""

from econsim.domain.banks.value_objects.search_criteria import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    BankSearchCriteria,
)
from econsim.domain.banks.value_objects.search_filters import (
    TEXT_SEARCH_FIELDS,
    BankField,
    EqualsFilter,
    RangeFilter,
    SearchFilter,
    TextSearchFilter,
)
from econsim.domain.banks.value_objects.selection_status import SelectionStatus

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "TEXT_SEARCH_FIELDS",
    "BankField",
    "BankSearchCriteria",
    "EqualsFilter",
    "RangeFilter",
    "SearchFilter",
    "SelectionStatus",
    "TextSearchFilter",
]
