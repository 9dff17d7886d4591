"""Render command for aligning delimited text."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from tabbed_output.core.buffer import TableBuffer
from tabbed_output.core.config.models import CONFIG_FILE, SettingsConfig, load_config
from tabbed_output.core.exceptions import ColumnCountError, TableError

console = Console()
logger = structlog.get_logger()

ESCAPES = {"\\t": "\t", "\\s": " "}


def _unescape(value: str | None) -> str | None:
    """Translate shell-friendly escapes such as ``\\t`` into characters."""
    if value is None:
        return None
    return ESCAPES.get(value, value)


def _load_settings(config_path: Path) -> SettingsConfig:
    try:
        settings = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] Could not load configuration from {config_path}")
        console.print(str(e), markup=False)
        raise typer.Exit(1) from e
    return settings or SettingsConfig()


def _build_table(settings: SettingsConfig, overrides: dict[str, Any]) -> TableBuffer:
    options = {k: v for k, v in overrides.items() if v is not None}
    try:
        return TableBuffer(settings.table, **options)
    except ValidationError as e:
        console.print("[red]Error:[/red] Invalid table option")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  {field}: {error['msg']}", markup=False)
        raise typer.Exit(1) from e


def render(
    source: typer.FileText = typer.Argument(
        "-",
        help="Delimited text to align. Reads stdin when omitted or '-'.",
    ),
    delimiter: str = typer.Option(
        "\t",
        "--delimiter",
        "-d",
        help="Delimiter between cells in the input (default: tab).",
    ),
    no_header: bool = typer.Option(
        False,
        "--no-header",
        help="Treat the first line as data instead of a header.",
    ),
    rule: bool = typer.Option(
        False,
        "--rule",
        "-r",
        help="Draw a spacer line under the header.",
    ),
    separator: str | None = typer.Option(
        None,
        "--separator",
        "-s",
        help="Column separator in the output.",
    ),
    line_start: str | None = typer.Option(
        None,
        "--line-start",
        help="Character written before every cell.",
    ),
    line_end: str | None = typer.Option(
        None,
        "--line-end",
        help="Character written after the last cell of each line.",
    ),
    padding_char: str | None = typer.Option(
        None,
        "--padding-char",
        help="Character used to pad cells.",
    ),
    padding: bool | None = typer.Option(
        None,
        "--padding/--no-padding",
        help="Pad cells to their column width.",
    ),
    ansi: bool | None = typer.Option(
        None,
        "--ansi/--no-ansi",
        help="Ignore ANSI colour codes when measuring cells.",
    ),
    align: str | None = typer.Option(
        None,
        "--align",
        "-a",
        help="Column alignment: right or left.",
    ),
    config_path: Path = typer.Option(
        CONFIG_FILE,
        "--config",
        "-c",
        envvar="TABBED_CONFIG",
        help="Settings file with default table options.",
    ),
) -> None:
    """Align delimited text into columns."""
    settings = _load_settings(config_path)
    table = _build_table(
        settings,
        {
            "column_separator": _unescape(separator),
            "line_start": _unescape(line_start),
            "line_end": _unescape(line_end),
            "padding_char": _unescape(padding_char),
            "padding": padding,
            "ansi_aware_width": ansi,
            "alignment": align,
        },
    )
    split_on = _unescape(delimiter) or "\t"

    header_pending = not no_header
    for lineno, line in enumerate(source, start=1):
        line = line.rstrip("\r\n")
        if not line or (split_on not in line and not line.strip()):
            continue
        cells = line.split(split_on)
        try:
            if header_pending:
                table.header(*cells)
                header_pending = False
                if rule:
                    table.spacer_line()
            else:
                table.add_line(*cells)
        except ColumnCountError as e:
            console.print(f"[red]Error:[/red] line {lineno}: {escape(e.message)}")
            raise typer.Exit(1) from e

    if table.is_empty:
        logger.info("No input rows to render")
        return

    try:
        written = table.render(sys.stdout)
    except TableError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e
    logger.info("Rendered table", characters=written)
