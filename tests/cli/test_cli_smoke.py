"""Smoke tests for CLI command structure - high value, low maintenance."""

import pytest
from typer.testing import CliRunner

from src.infrastructure.cli.app import app


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


class TestCoreCommandStructure:
    """Test that core command structure exists and is accessible."""

    def test_main_help_shows_core_commands(self, runner):
        """Ensure main help shows the core command groups."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "match" in result.stdout
        assert "settings" in result.stdout
        assert "data" in result.stdout
        assert "init" in result.stdout

    def test_version_command_works(self, runner):
        """Ensure version command is accessible."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Pitchmatch" in result.stdout

    @pytest.mark.parametrize(
        "command",
        [
            ["match", "--help"],
            ["match", "test", "--help"],
            ["match", "auto", "--help"],
            ["settings", "--help"],
            ["data", "import", "--help"],
            ["data", "list", "--help"],
        ],
    )
    def test_subcommand_help(self, runner, command):
        """Ensure every command group answers --help."""
        result = runner.invoke(app, command)

        assert result.exit_code == 0

    def test_settings_fields(self, runner):
        """Field listing needs no database."""
        result = runner.invoke(app, ["settings", "fields"])

        assert result.exit_code == 0
        assert "vocal_type" in result.stdout
        assert "era" in result.stdout
