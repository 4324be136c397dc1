"""``quarrywatch map`` — print the quarry map once."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from quarrywatch.cli.commands._common import load_snapshot_or_exit
from quarrywatch.config import MonitorConfig
from quarrywatch.core.job_store import JobStateStore
from quarrywatch.monitor.map_renderer import MapRenderer
from quarrywatch.surfaces.grid import CharGridSurface

console = Console()


def map_cmd(
    state: Path = typer.Option(
        None,
        "--state",
        "-s",
        help="Path to the job-state JSON file (defaults to QUARRYWATCH_STATE_PATH).",
    ),
    width: int = typer.Option(
        0,
        "--width",
        "-W",
        min=0,
        help="Map width in characters (0 = terminal width).",
    ),
    height: int = typer.Option(
        0,
        "--height",
        "-H",
        min=0,
        help="Map height in characters (0 = terminal height).",
    ),
) -> None:
    """Print every hole as pending (-), done (+) or active (X) around the origin (O)."""
    config = MonitorConfig()
    snapshot = load_snapshot_or_exit(state or config.state_path, console)

    # Terminal cells cannot be rescaled, so the map is drawn at scale 1.
    surface = CharGridSurface(
        width or console.size.width,
        height or max(console.size.height - 1, 1),
        name="terminal",
    )
    renderer = MapRenderer(
        JobStateStore(snapshot),
        [surface],
        aspect=config.map_aspect,
        min_scale=1.0,
        max_scale=1.0,
    )
    renderer.render_once()
    for line in surface.lines():
        console.print(line, markup=False, highlight=False, no_wrap=True, overflow="crop")
