"""Bank entity (read-only reference data)."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Bank:
    """A regulated depository institution from the bank catalog.

    The catalog is maintained by an external ingestion process. This
    application only ever reads banks, and only those with ``is_active``.
    """

    id: str
    rssd_id: str
    fdic_certificate_number: str
    bank_name: str
    city: str
    state: str
    total_assets: Decimal
    charter_type: str
    regulator: str
    is_active: bool = True
    last_filing_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"{self.bank_name} ({self.city}, {self.state})"
