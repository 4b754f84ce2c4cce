"""Add one bank to the user's selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from econsim.application.commands.banks.replace_bank_selection_command import (
    DEFAULT_MAX_ATTEMPTS,
    ReplaceBankSelectionCommand,
    SelectionChange,
)
from econsim.domain.banks import BankSelection, SelectionFullError, SelectionStatus
from econsim.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from econsim.application.dtos import SelectionResult
    from econsim.application.factories import RepositoryFactory


class AddBankToSelectionCommand:
    """Append a bank to the selection, keeping the current cap.

    Adding a bank that is already selected is a no-op reported as
    ``ALREADY_SELECTED``. Adding to a full selection raises
    SelectionFullError and leaves the selection untouched.
    """

    def __init__(self, replace_command: ReplaceBankSelectionCommand):
        self._replace = replace_command

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> AddBankToSelectionCommand:
        return cls(ReplaceBankSelectionCommand.from_factory(factory, max_attempts))

    async def execute(self, bank_id: str) -> SelectionResult:
        if not bank_id or not bank_id.strip():
            msg = "bankId is required"
            raise ValidationError(msg)

        def add(selection: BankSelection) -> SelectionChange:
            if selection.contains(bank_id):
                return SelectionChange.no_op(SelectionStatus.ALREADY_SELECTED)
            if selection.is_full:
                raise SelectionFullError(selection.max_banks)
            return SelectionChange.replace_with(
                selection.ids_with(bank_id),
                selection.max_banks,
            )

        return await self._replace.apply(add)
