"""Main Typer application — imports and registers all CLI commands.

Entry point: ``quarrywatch`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from quarrywatch.cli.commands.locate import locate_cmd
from quarrywatch.cli.commands.map_cmd import map_cmd
from quarrywatch.cli.commands.show import show_cmd
from quarrywatch.cli.commands.watch import watch_cmd
from quarrywatch.config import MonitorConfig

app = typer.Typer(
    name="quarrywatch",
    help="Quarrywatch: live status monitor for a distributed excavation job.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="watch", help="Monitor the quarry continuously.")(watch_cmd)
app.command(name="show", help="Print progress statistics once.")(show_cmd)
app.command(name="map", help="Print the quarry map once.")(map_cmd)
app.command(name="locate", help="Show the grid position of a hole.")(locate_cmd)


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich, leaving stdout to the readout."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Log level (defaults to QUARRYWATCH_LOG_LEVEL or INFO).",
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    configure_logging(log_level or MonitorConfig().log_level)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
