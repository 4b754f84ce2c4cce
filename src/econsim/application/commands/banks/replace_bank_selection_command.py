"""Replace a user's bank selection.

This is the only write path for bank selections. Add, remove and clear are
expressed as transitions that compute a new id list from the current
selection; ``apply`` runs such a transition inside an optimistic-concurrency
loop: read the selection, compute the change, write it guarded by the
version read, and start over when a concurrent request got there first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Sequence

from econsim.application.dtos import SelectionResult, order_like_selection
from econsim.domain.banks import (
    MAX_SELECTION_SIZE,
    BankRepository,
    BankSelection,
    BankSelectionRepository,
    SelectionConflictError,
    SelectionStatus,
    UnknownBanksError,
)
from econsim.domain.shared.exceptions import ConcurrencyError

if TYPE_CHECKING:
    from econsim.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3

_NO_OP_MESSAGES = {
    SelectionStatus.ALREADY_SELECTED: "Bank already selected",
    SelectionStatus.NOT_IN_SELECTION: "Bank not in selection",
}


@dataclass(frozen=True)
class SelectionChange:
    """What a transition wants done with the selection it was shown."""

    status: SelectionStatus
    bank_ids: Optional[list[str]] = None
    max_banks: Optional[int] = None

    @classmethod
    def replace_with(cls, bank_ids: list[str], max_banks: int) -> SelectionChange:
        return cls(SelectionStatus.UPDATED, bank_ids, max_banks)

    @classmethod
    def no_op(cls, status: SelectionStatus) -> SelectionChange:
        return cls(status)


SelectionTransition = Callable[[BankSelection], SelectionChange]


class ReplaceBankSelectionCommand:
    """Replace the current user's selection with a validated id list."""

    def __init__(
        self,
        selection_repo: BankSelectionRepository,
        bank_repo: BankRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)
        self._selection_repo = selection_repo
        self._bank_repo = bank_repo
        self._max_attempts = max_attempts

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> ReplaceBankSelectionCommand:
        return cls(
            selection_repo=factory.bank_selection_repository(),
            bank_repo=factory.bank_repository(),
            max_attempts=max_attempts,
        )

    async def execute(
        self,
        bank_ids: Sequence[str],
        max_banks: int = MAX_SELECTION_SIZE,
    ) -> SelectionResult:
        """Replace the selection with ``bank_ids`` and cap ``max_banks``.

        Fails before anything is written if the cap is out of range, the
        de-duplicated list exceeds it, or any id is not an active bank.
        """
        # Fail fast on malformed input; apply() re-checks before writing.
        BankSelection.normalize_ids(bank_ids, max_banks)
        requested = list(bank_ids)
        return await self.apply(
            lambda _: SelectionChange.replace_with(requested, max_banks),
        )

    async def apply(self, transition: SelectionTransition) -> SelectionResult:
        """Run ``transition`` against the current selection and persist it.

        Raises
        ------
        SelectionConflictError
            If every attempt lost against a concurrent writer.
        """
        for attempt in range(1, self._max_attempts + 1):
            selection = await self._selection_repo.get_or_create()
            change = transition(selection)

            if change.bank_ids is None:
                return await self._build_result(
                    selection,
                    change.status,
                    _NO_OP_MESSAGES.get(change.status, "Selection unchanged"),
                )

            max_banks = (
                change.max_banks if change.max_banks is not None else selection.max_banks
            )
            bank_ids = BankSelection.normalize_ids(change.bank_ids, max_banks)
            await self._ensure_active_banks(bank_ids)
            selection.replace(bank_ids, max_banks)

            try:
                await self._selection_repo.save(selection)
            except ConcurrencyError:
                logger.info(
                    "Selection of user %s changed concurrently (attempt %d/%d)",
                    selection.user_id,
                    attempt,
                    self._max_attempts,
                )
                continue

            logger.info(
                "Selection of user %s now holds %d banks (cap %d, version %d)",
                selection.user_id,
                selection.size,
                selection.max_banks,
                selection.version,
            )
            return await self._build_result(
                selection,
                SelectionStatus.UPDATED,
                f"Successfully selected {selection.size} banks",
            )

        raise SelectionConflictError(
            user_id=selection.user_id,
            attempts=self._max_attempts,
        )

    async def _ensure_active_banks(self, bank_ids: Iterable[str]) -> None:
        wanted = list(bank_ids)
        if not wanted:
            return
        found = {bank.id for bank in await self._bank_repo.find_by_ids(wanted)}
        missing = [bank_id for bank_id in wanted if bank_id not in found]
        if missing:
            raise UnknownBanksError(missing)

    async def _build_result(
        self,
        selection: BankSelection,
        status: SelectionStatus,
        message: str,
    ) -> SelectionResult:
        banks = (
            await self._bank_repo.find_by_ids(selection.bank_ids)
            if selection.bank_ids
            else []
        )
        return SelectionResult(
            status=status,
            selection=selection,
            banks=order_like_selection(selection, banks),
            message=message,
        )
