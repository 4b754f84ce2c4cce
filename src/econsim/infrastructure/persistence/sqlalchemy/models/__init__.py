"""SQLAlchemy models for persistence layer."""

from econsim.infrastructure.persistence.sqlalchemy.models.bank_model import BankModel
from econsim.infrastructure.persistence.sqlalchemy.models.bank_selection_model import (
    BankSelectionModel,
)
from econsim.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = [
    "Base",
    "BankModel",
    "BankSelectionModel",
    "TimestampMixin",
]
