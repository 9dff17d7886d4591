"""Tests for main CLI module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tabbed_output.cli.main import app


class TestCLIMain:
    """Test main CLI entry point."""

    @pytest.mark.unit
    def test_help_option(self, cli_runner: CliRunner) -> None:
        """Test --help option displays help text."""
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "render" in result.stdout
        assert "init" in result.stdout

    @pytest.mark.unit
    def test_version_option(self, cli_runner: CliRunner) -> None:
        """Test --version option displays version."""
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tabbed version" in result.stdout

    @pytest.mark.unit
    def test_verbose_flag(self, cli_runner: CliRunner) -> None:
        """Test --verbose flag is accepted."""
        result = cli_runner.invoke(app, ["--verbose", "render"], input="a\tb\n")
        assert result.exit_code == 0

    @pytest.mark.unit
    def test_default_logging_options(self, cli_runner: CliRunner) -> None:
        """Test logging is configured quietly when no flag is given."""
        with patch("tabbed_output.cli.main.configure_logging") as mock_configure:
            result = cli_runner.invoke(app, ["render"], input="a\tb\n")
        assert result.exit_code == 0
        mock_configure.assert_called_once_with(
            verbose=False, debug=False, json_output=False, log_file=False
        )

    @pytest.mark.unit
    def test_json_logs_and_log_file_flags(self, cli_runner: CliRunner) -> None:
        """Test --json-logs and --log-file reach the logging setup."""
        with patch("tabbed_output.cli.main.configure_logging") as mock_configure:
            result = cli_runner.invoke(
                app, ["--json-logs", "--log-file", "render"], input="a\tb\n"
            )
        assert result.exit_code == 0
        mock_configure.assert_called_once_with(
            verbose=False, debug=False, json_output=True, log_file=True
        )
