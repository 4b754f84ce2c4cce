"""Economy simulator CLI application using Typer.

This module provides command-line utilities for the backend: schema
creation and demo catalog seeding.
"""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from econsim.presentation.api.dependencies import create_tables, get_engine
from econsim_demo.data import DEMO_BANKS
from econsim_demo.seed import SeedStats, describe_database, seed_demo_data

app = typer.Typer(
    name="econsim",
    help="Economy Simulator - bank catalog and selection backend CLI",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

demo_app = typer.Typer(
    name="demo",
    help="Demo data utilities",
    no_args_is_help=True,
)
app.add_typer(demo_app)


async def _init_schema() -> None:
    try:
        await create_tables()
    finally:
        await get_engine().dispose()


@db_app.command("init")
def init_database() -> None:
    """Create all database tables. Existing tables are left untouched."""
    console.print(f"[dim]Database: {describe_database()}[/dim]")
    asyncio.run(_init_schema())
    console.print("[bold green]Database schema is up to date[/bold green]")


async def _seed(dry_run: bool) -> SeedStats:
    try:
        return await seed_demo_data(dry_run=dry_run)
    finally:
        if not dry_run:
            await get_engine().dispose()


@demo_app.command("seed")
def seed_demo(
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would be written without touching the database",
    ),
) -> None:
    """Upsert the demo bank catalog (keyed by RSSD id)."""
    console.print("\n[bold green]Economy Simulator Demo Catalog[/bold green]")
    console.print(f"[dim]Database: {describe_database()}[/dim]\n")

    stats = asyncio.run(_seed(dry_run))

    table = Table(title="Demo banks")
    table.add_column("RSSD", style="cyan")
    table.add_column("Name")
    table.add_column("State")
    table.add_column("Total assets", justify="right")
    table.add_column("Active")
    for bank in DEMO_BANKS:
        table.add_row(
            bank.rssd_id,
            bank.bank_name,
            bank.state,
            f"{bank.total_assets:,.0f}",
            "yes" if bank.is_active else "[red]no[/red]",
        )
    console.print(table)

    if stats.dry_run:
        console.print(
            f"\n[yellow]Dry run: {stats.total} banks would be written.[/yellow]\n"
        )
        return
    console.print(
        f"\n[bold]{stats.banks_created}[/bold] created, "
        f"[bold]{stats.banks_updated}[/bold] updated.\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
