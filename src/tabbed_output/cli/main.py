"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console

from tabbed_output import __version__
from tabbed_output.cli.commands import init, render
from tabbed_output.logging.config import configure_logging

app = typer.Typer(
    name="tabbed",
    help="Align tab or comma separated text into columns for terminals and logs.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tabbed version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging on stderr.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Write stderr log lines as JSON.",
    ),
    log_file: bool = typer.Option(
        False,
        "--log-file",
        help="Also keep a rotating JSON log under ~/.local/state/tabbed/.",
    ),
) -> None:
    """Read delimited rows and print them as aligned columns.

    Tables go to stdout and log lines to stderr, so output can be piped.
    """
    configure_logging(verbose=verbose, debug=debug, json_output=json_logs, log_file=log_file)


app.command()(init.init)
app.command()(render.render)


if __name__ == "__main__":
    app()
