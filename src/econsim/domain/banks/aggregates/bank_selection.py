"""BankSelection aggregate: a user's bounded, ordered set of banks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable
from uuid import uuid4

from econsim.domain.banks.exceptions import TooManyBanksError
from econsim.domain.shared.exceptions import ValidationError
from econsim.domain.shared.time import utc_now

MAX_SELECTION_SIZE = 30


def _new_id() -> str:
    return str(uuid4())


@dataclass
class BankSelection:
    """Per-user selection of banks.

    Keyed by ``user_id``; at most one selection exists per user. The id list
    keeps insertion order and never holds duplicates. ``version`` is the
    optimistic-concurrency token: 0 means the selection was never persisted,
    every successful write moves it forward by one.
    """

    user_id: str
    id: str = field(default_factory=_new_id)
    bank_ids: list[str] = field(default_factory=list)
    max_banks: int = MAX_SELECTION_SIZE
    version: int = 0
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def default(cls, user_id: str) -> BankSelection:
        """Create an empty selection with the default cap."""
        return cls(user_id=user_id)

    @property
    def size(self) -> int:
        return len(self.bank_ids)

    @property
    def is_full(self) -> bool:
        return self.size >= self.max_banks

    @property
    def is_persisted(self) -> bool:
        return self.version > 0

    def contains(self, bank_id: str) -> bool:
        return bank_id in self.bank_ids

    def ids_with(self, bank_id: str) -> list[str]:
        """Current ids with ``bank_id`` appended."""
        return [*self.bank_ids, bank_id]

    def ids_without(self, bank_id: str) -> list[str]:
        """Current ids with ``bank_id`` dropped."""
        return [b for b in self.bank_ids if b != bank_id]

    @staticmethod
    def validate_max_banks(max_banks: int) -> int:
        if not 1 <= max_banks <= MAX_SELECTION_SIZE:
            msg = f"maxBanks must be between 1 and {MAX_SELECTION_SIZE}"
            raise ValidationError(msg, details={"max_banks": max_banks})
        return max_banks

    @classmethod
    def normalize_ids(cls, bank_ids: Iterable[str], max_banks: int) -> list[str]:
        """Validate a candidate id list against the cap.

        Duplicates collapse to their first occurrence before the cap is
        checked. Blank ids are rejected.

        Returns
        -------
        The de-duplicated id list, in request order.

        Raises
        ------
        ValidationError
            If ``max_banks`` is outside [1, 30] or an id is blank.
        TooManyBanksError
            If the de-duplicated list is longer than ``max_banks``.
        """
        cls.validate_max_banks(max_banks)

        unique: list[str] = []
        seen: set[str] = set()
        for bank_id in bank_ids:
            if not bank_id or not bank_id.strip():
                msg = "Bank ids must be non-empty"
                raise ValidationError(msg)
            if bank_id not in seen:
                seen.add(bank_id)
                unique.append(bank_id)

        if len(unique) > max_banks:
            raise TooManyBanksError(requested=len(unique), max_banks=max_banks)
        return unique

    def replace(self, bank_ids: Iterable[str], max_banks: int) -> None:
        """Replace the whole selection. Bank existence is checked by the caller."""
        self.bank_ids = self.normalize_ids(bank_ids, max_banks)
        self.max_banks = max_banks
        self.updated_at = utc_now()
