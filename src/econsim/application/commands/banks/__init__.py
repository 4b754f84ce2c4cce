"""Bank selection commands."""

from econsim.application.commands.banks.add_bank_to_selection_command import (
    AddBankToSelectionCommand,
)
from econsim.application.commands.banks.clear_bank_selection_command import (
    ClearBankSelectionCommand,
)
from econsim.application.commands.banks.remove_bank_from_selection_command import (
    RemoveBankFromSelectionCommand,
)
from econsim.application.commands.banks.replace_bank_selection_command import (
    DEFAULT_MAX_ATTEMPTS,
    ReplaceBankSelectionCommand,
    SelectionChange,
    SelectionTransition,
)

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "AddBankToSelectionCommand",
    "ClearBankSelectionCommand",
    "RemoveBankFromSelectionCommand",
    "ReplaceBankSelectionCommand",
    "SelectionChange",
    "SelectionTransition",
]
