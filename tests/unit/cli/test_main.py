"""Unit tests for the main CLI application."""

import logging

from bagpack import __version__
from bagpack.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"bagpack version {__version__}" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows help."""
        result = runner.invoke(app, [])

        assert "inventory" in result.output
        assert "managers" in result.output

    def test_verbose_enables_debug_logging(self) -> None:
        """--verbose sets the root logger to DEBUG."""
        runner.invoke(app, ["--verbose", "config", "show"])
        assert logging.getLogger().level == logging.DEBUG

        runner.invoke(app, ["config", "show"])
        assert logging.getLogger().level == logging.WARNING
