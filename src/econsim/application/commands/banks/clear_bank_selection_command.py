"""Clear the user's bank selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from econsim.application.commands.banks.replace_bank_selection_command import (
    DEFAULT_MAX_ATTEMPTS,
    ReplaceBankSelectionCommand,
    SelectionChange,
)

if TYPE_CHECKING:
    from econsim.application.dtos import SelectionResult
    from econsim.application.factories import RepositoryFactory


class ClearBankSelectionCommand:
    """Empty the selection. The record and its cap are kept."""

    def __init__(self, replace_command: ReplaceBankSelectionCommand):
        self._replace = replace_command

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> ClearBankSelectionCommand:
        return cls(ReplaceBankSelectionCommand.from_factory(factory, max_attempts))

    async def execute(self) -> SelectionResult:
        return await self._replace.apply(
            lambda selection: SelectionChange.replace_with([], selection.max_banks),
        )
