"""Tests for the econsim command line."""

from typer.testing import CliRunner

from econsim.presentation.cli.app import app
from econsim_demo.data import DEMO_BANKS

runner = CliRunner()


def test_demo_seed_dry_run_lists_catalog():
    result = runner.invoke(app, ["demo", "seed", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "Dry run" in result.output
    assert f"{len(DEMO_BANKS)} banks would be written" in result.output
    assert DEMO_BANKS[0].rssd_id in result.output


def test_without_command_shows_help():
    result = runner.invoke(app, [])

    assert "demo" in result.output
    assert "db" in result.output
