"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from econsim.infrastructure.persistence.sqlalchemy.repositories.bank_repository import (
    BankRepositorySQLAlchemy,
)
from econsim.infrastructure.persistence.sqlalchemy.repositories.bank_selection_repository import (  # NOQA: E501
    BankSelectionRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from econsim.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._bank_repo: BankRepositorySQLAlchemy | None = None
        self._selection_repo: BankSelectionRepositorySQLAlchemy | None = None

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def bank_repository(self) -> BankRepositorySQLAlchemy:
        if self._bank_repo is None:
            self._bank_repo = BankRepositorySQLAlchemy(self._session)
        return self._bank_repo

    def bank_selection_repository(self) -> BankSelectionRepositorySQLAlchemy:
        if self._selection_repo is None:
            self._selection_repo = BankSelectionRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._selection_repo
