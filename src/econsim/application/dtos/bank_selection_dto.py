"""DTOs returned by bank selection commands and queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from econsim.domain.banks import Bank, BankSelection, SelectionStatus


def order_like_selection(selection: BankSelection, banks: Sequence[Bank]) -> list[Bank]:
    """Order resolved banks like the selection's id list.

    Ids without a resolved (active) bank are dropped.
    """
    by_id = {bank.id: bank for bank in banks}
    return [by_id[bank_id] for bank_id in selection.bank_ids if bank_id in by_id]


@dataclass(frozen=True)
class SelectionOverview:
    """A user's selection together with its resolved banks."""

    selection: BankSelection
    banks: list[Bank]

    @property
    def total_selected(self) -> int:
        return len(self.selection.bank_ids)

    @property
    def max_allowed(self) -> int:
        return self.selection.max_banks


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a selection mutation."""

    status: SelectionStatus
    selection: BankSelection
    banks: list[Bank]
    message: str

    @property
    def success(self) -> bool:
        return self.status.changed

    @property
    def total_selected(self) -> int:
        return len(self.selection.bank_ids)

    @property
    def max_allowed(self) -> int:
        return self.selection.max_banks
