"""Structured filter predicates for bank catalog queries.

Search criteria are translated into a flat list of these predicates, which
the persistence layer renders into bound query expressions. All predicates
in a list are combined with AND.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class BankField(str, Enum):
    """Filterable columns of the bank catalog."""

    BANK_NAME = "bank_name"
    FDIC_CERTIFICATE_NUMBER = "fdic_certificate_number"
    CITY = "city"
    STATE = "state"
    CHARTER_TYPE = "charter_type"
    REGULATOR = "regulator"
    TOTAL_ASSETS = "total_assets"
    IS_ACTIVE = "is_active"


TEXT_SEARCH_FIELDS: tuple[BankField, ...] = (
    BankField.BANK_NAME,
    BankField.FDIC_CERTIFICATE_NUMBER,
    BankField.CITY,
    BankField.STATE,
)


@dataclass(frozen=True)
class EqualsFilter:
    """Exact match on one column."""

    field: BankField
    value: Union[str, bool]


@dataclass(frozen=True)
class RangeFilter:
    """Inclusive range on one numeric column; either bound may be open."""

    field: BankField
    lower: Optional[Decimal] = None
    upper: Optional[Decimal] = None


@dataclass(frozen=True)
class TextSearchFilter:
    """Case-insensitive substring match, OR-ed over several columns."""

    fields: tuple[BankField, ...]
    term: str


SearchFilter = Union[EqualsFilter, RangeFilter, TextSearchFilter]
