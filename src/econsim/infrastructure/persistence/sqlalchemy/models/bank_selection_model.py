"""SQLAlchemy model for the BankSelection aggregate."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from econsim.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class BankSelectionModel(Base, TimestampMixin):
    """One row per user holding the ordered list of selected bank ids."""

    __tablename__ = "bank_selections"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    selected_banks: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    max_banks: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint(
            "max_banks >= 1 AND max_banks <= 30",
            name="ck_bank_selections_max_banks",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<BankSelectionModel(user_id={self.user_id}, "
            f"banks={len(self.selected_banks or [])}, version={self.version})>"
        )
