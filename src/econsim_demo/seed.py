"""Demo bank catalog seeding.

Upserts the fixed demo catalog, keyed by RSSD id. Running it twice leaves
the catalog unchanged; bank ids of existing rows are kept so stored
selections stay valid.

Usage:
    econsim demo seed
    # or
    python -m econsim_demo.seed

Options:
    --dry-run   Show what would be written without touching the database
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from econsim.infrastructure.persistence.sqlalchemy.models import BankModel
from econsim.presentation.api.dependencies import create_tables, get_session_maker
from econsim_config.settings import get_settings
from econsim_demo.data import DEMO_BANKS, DEMO_FILING_DATE, DemoBank

logger = logging.getLogger(__name__)


@dataclass
class SeedStats:
    """Statistics about what was seeded."""

    banks_created: int
    banks_updated: int
    dry_run: bool = False

    @property
    def total(self) -> int:
        return self.banks_created + self.banks_updated


def _apply(model: BankModel, bank: DemoBank) -> None:
    model.fdic_certificate_number = bank.fdic_certificate_number
    model.bank_name = bank.bank_name
    model.city = bank.city
    model.state = bank.state
    model.total_assets = bank.total_assets
    model.charter_type = bank.charter_type
    model.regulator = bank.regulator
    model.is_active = bank.is_active
    model.last_filing_date = DEMO_FILING_DATE


async def upsert_banks(session: AsyncSession, banks: Sequence[DemoBank]) -> SeedStats:
    """Insert or update ``banks`` by RSSD id.

    Parameters
    ----------
    session
        Database session; the caller commits.
    banks
        Catalog entries to write

    Returns
    -------
    Counts of created and updated rows
    """
    rssd_ids = [b.rssd_id for b in banks]
    result = await session.execute(
        select(BankModel).where(BankModel.rssd_id.in_(rssd_ids)),
    )
    existing = {m.rssd_id: m for m in result.scalars().all()}

    created = 0
    updated = 0
    for bank in banks:
        model = existing.get(bank.rssd_id)
        if model is None:
            model = BankModel(rssd_id=bank.rssd_id)
            session.add(model)
            created += 1
        else:
            updated += 1
        _apply(model, bank)

    await session.flush()
    return SeedStats(banks_created=created, banks_updated=updated)


async def seed_demo_data(dry_run: bool = False) -> SeedStats:
    """Main seeding function.

    Parameters
    ----------
    dry_run
        Show what would be written without touching the database

    Returns
    -------
    Statistics about what was seeded
    """
    if dry_run:
        logger.info("DRY RUN - no data will be written")
        for bank in DEMO_BANKS:
            logger.info("  %s %s (%s)", bank.rssd_id, bank.bank_name, bank.state)
        return SeedStats(banks_created=len(DEMO_BANKS), banks_updated=0, dry_run=True)

    await create_tables()

    async with get_session_maker()() as session:
        try:
            stats = await upsert_banks(session, DEMO_BANKS)
            await session.commit()
        except Exception:
            await session.rollback()
            raise

    logger.info("=" * 50)
    logger.info("Demo catalog seeding complete!")
    logger.info("  Banks created: %d", stats.banks_created)
    logger.info("  Banks updated: %d", stats.banks_updated)
    logger.info("=" * 50)
    return stats


def describe_database() -> str:
    """Database URL without credentials, for log output."""
    db_url = get_settings().database_url
    return db_url.split("@")[-1] if "@" in db_url else db_url


def main() -> None:
    """Script entry point."""
    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    dry_run = "--dry-run" in sys.argv or "-n" in sys.argv

    logger.info("Economy Simulator Demo Seeder")
    logger.info("Database: %s", describe_database())
    asyncio.run(seed_demo_data(dry_run=dry_run))


if __name__ == "__main__":
    main()
