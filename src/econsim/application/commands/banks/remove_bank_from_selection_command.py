"""Remove one bank from the user's selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from econsim.application.commands.banks.replace_bank_selection_command import (
    DEFAULT_MAX_ATTEMPTS,
    ReplaceBankSelectionCommand,
    SelectionChange,
)
from econsim.domain.banks import BankSelection, SelectionStatus
from econsim.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from econsim.application.dtos import SelectionResult
    from econsim.application.factories import RepositoryFactory


class RemoveBankFromSelectionCommand:
    """Drop a bank from the selection; absent ids report NOT_IN_SELECTION."""

    def __init__(self, replace_command: ReplaceBankSelectionCommand):
        self._replace = replace_command

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> RemoveBankFromSelectionCommand:
        return cls(ReplaceBankSelectionCommand.from_factory(factory, max_attempts))

    async def execute(self, bank_id: str) -> SelectionResult:
        if not bank_id or not bank_id.strip():
            msg = "bankId is required"
            raise ValidationError(msg)

        def remove(selection: BankSelection) -> SelectionChange:
            if not selection.contains(bank_id):
                return SelectionChange.no_op(SelectionStatus.NOT_IN_SELECTION)
            return SelectionChange.replace_with(
                selection.ids_without(bank_id),
                selection.max_banks,
            )

        return await self._replace.apply(remove)
