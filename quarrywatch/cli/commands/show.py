"""``quarrywatch show`` — print the quarry's progress statistics once."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from quarrywatch.cli.commands._common import load_snapshot_or_exit
from quarrywatch.config import MonitorConfig
from quarrywatch.monitor.stats import aggregate
from quarrywatch.monitor.text_renderer import build_stats_panel

console = Console()


def show_cmd(
    state: Path = typer.Option(
        None,
        "--state",
        "-s",
        help="Path to the job-state JSON file (defaults to QUARRYWATCH_STATE_PATH).",
    ),
) -> None:
    """Print progress, timing estimates and the active-hole table."""
    state_path = state or MonitorConfig().state_path
    snapshot = load_snapshot_or_exit(state_path, console)
    console.print(build_stats_panel(aggregate(snapshot)))
