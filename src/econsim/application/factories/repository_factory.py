"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from econsim.domain.banks.repositories import BankRepository, BankSelectionRepository

if TYPE_CHECKING:
    from econsim.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def user_context(self) -> UserContext:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as ``Any`` so the application layer stays independent of the
        database implementation. Used for commit/rollback at the
        presentation layer.
        """
        ...

    def bank_repository(self) -> BankRepository:
        """Get bank catalog repository."""
        ...

    def bank_selection_repository(self) -> BankSelectionRepository:
        """Get the current user's bank selection repository."""
        ...
