"""Init command for writing the default settings file."""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from rich.console import Console

from tabbed_output.core.config.models import CONFIG_FILE, SettingsConfig

console = Console()
logger = structlog.get_logger()


def init(
    config_path: Path = typer.Option(
        CONFIG_FILE,
        "--config",
        "-c",
        envvar="TABBED_CONFIG",
        help="Settings file to create.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing settings file.",
    ),
) -> None:
    """Write a settings file with the default table options."""
    logger.info("Initializing config", path=str(config_path))

    if config_path.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_path}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=1)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(SettingsConfig().to_yaml())

    console.print(f"[green]OK:[/green] Configuration written to {config_path}")
    logger.info("Configuration initialized", config_file=str(config_path))
