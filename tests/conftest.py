"""Shared pytest fixtures for tabbed_output tests."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
import typer
from typer.testing import CliRunner

from tabbed_output.cli.main import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """Create a settings file with pipe-delimited table options."""
    config_path = temp_dir / "config.yaml"
    config_path.write_text(
        """
version: "1.0"
table:
  column_separator: " "
  line_start: "|"
  line_end: "|"
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
    """Keep tests away from the real settings file and TABBED_ variables."""
    for key in list(os.environ.keys()):
        if key.startswith("TABBED_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TABBED_CONFIG", str(temp_dir / "missing.yaml"))


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Undo handlers and structlog configuration installed by a test."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
