"""SQLAlchemy model for the bank catalog."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import Boolean, Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from econsim.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


def _new_id() -> str:
    return str(uuid4())


class BankModel(Base, TimestampMixin):
    """Database model for banks (reference data, written by ingestion)."""

    __tablename__ = "banks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)

    # Regulatory identifiers
    rssd_id: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    fdic_certificate_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
    )

    # Institution details
    bank_name: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(2), nullable=False)
    total_assets: Mapped[Decimal] = mapped_column(
        Numeric(20, 2),
        nullable=False,
        default=Decimal("0"),
    )
    charter_type: Mapped[str] = mapped_column(String(50), nullable=False)
    regulator: Mapped[str] = mapped_column(String(50), nullable=False)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_filing_date: Mapped[Optional[date]] = mapped_column(Date)

    __table_args__ = (
        Index("ix_banks_bank_name", "bank_name"),
        Index("ix_banks_state", "state"),
        Index("ix_banks_total_assets", "total_assets"),
        Index("ix_banks_is_active", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<BankModel(id={self.id}, rssd_id={self.rssd_id}, name={self.bank_name})>"
