"""Outcome of a selection mutation."""

from enum import Enum


class SelectionStatus(str, Enum):
    """Named outcomes of selection mutations.

    No-op outcomes are statuses rather than errors so clients can tell a
    harmless repeat apart from a rejected request.
    """

    UPDATED = "updated"
    ALREADY_SELECTED = "already_selected"
    NOT_IN_SELECTION = "not_in_selection"

    @property
    def changed(self) -> bool:
        return self is SelectionStatus.UPDATED
