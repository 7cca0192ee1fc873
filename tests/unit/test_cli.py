"""CLI smoke tests.

Basic tests to verify CLI wiring. Comprehensive tests are in tests/unit/cli/.
"""

from __future__ import annotations

from typer.testing import CliRunner

from wkgeo.cli.main import app

runner = CliRunner()


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"], env={"NO_COLOR": "1", "TERM": "dumb"})
    assert result.exit_code == 0
    for command in ("version", "convert", "info"):
        assert command in result.stdout


def test_version_command_outputs_version() -> None:
    result = runner.invoke(app, ["version"], env={"NO_COLOR": "1", "TERM": "dumb"})
    assert result.exit_code == 0
    assert "wkgeo" in result.stdout.lower()


def test_convert_help_shows_options() -> None:
    result = runner.invoke(
        app, ["convert", "--help"], env={"NO_COLOR": "1", "TERM": "dumb"}
    )
    assert result.exit_code == 0
    assert "--byte-order" in result.stdout


def test_info_help_shows_options() -> None:
    result = runner.invoke(app, ["info", "--help"], env={"NO_COLOR": "1", "TERM": "dumb"})
    assert result.exit_code == 0
    assert "--json" in result.stdout
