"""SQLAlchemy repository implementations."""

from econsim.infrastructure.persistence.sqlalchemy.repositories.bank_repository import (
    BankRepositorySQLAlchemy,
)
from econsim.infrastructure.persistence.sqlalchemy.repositories.bank_selection_repository import (  # NOQA: E501
    BankSelectionRepositorySQLAlchemy,
)
from econsim.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "BankRepositorySQLAlchemy",
    "BankSelectionRepositorySQLAlchemy",
]
