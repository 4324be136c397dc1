"""``quarrywatch watch`` — run the live monitor until interrupted.

Starts three independent loops against one job-state file: the Poller
(refreshes the snapshot), the Text Renderer (statistics on stdout) and
the Map Renderer (one map per ``--map-file``).
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console

from quarrywatch.config import MonitorConfig
from quarrywatch.core.job_store import JobStateStore
from quarrywatch.core.poller import Poller
from quarrywatch.core.scheduler import Scheduler
from quarrywatch.monitor.map_renderer import MapRenderer
from quarrywatch.monitor.text_renderer import TextRenderer
from quarrywatch.sources.json_file import JsonFileSnapshotSource
from quarrywatch.surfaces.console import RichConsoleSurface
from quarrywatch.surfaces.grid import FileGridSurface

logger = logging.getLogger(__name__)

console = Console()


def parse_size(value: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a pair of positive ints."""
    try:
        width_str, height_str = value.lower().split("x", 1)
        width, height = int(width_str), int(height_str)
    except ValueError as exc:
        raise typer.BadParameter(f"expected WIDTHxHEIGHT, got {value!r}") from exc
    if width < 1 or height < 1:
        raise typer.BadParameter(f"size must be positive, got {value!r}")
    return width, height


def build_scheduler(
    config: MonitorConfig,
    map_files: list[Path],
    map_size: tuple[int, int],
) -> Scheduler:
    """Wire source, store, loops and surfaces into a ready-to-run Scheduler."""
    store = JobStateStore()
    poller = Poller(
        JsonFileSnapshotSource(config.state_path),
        store,
        interval=config.poll_interval,
    )
    text_renderer = TextRenderer(
        store,
        RichConsoleSurface(console),
        interval=config.text_interval,
    )
    map_renderer = MapRenderer(
        store,
        [FileGridSurface(path, *map_size) for path in map_files],
        interval=config.map_interval,
        surface_pause=config.surface_pause,
        aspect=config.map_aspect,
        min_scale=config.min_scale,
        max_scale=config.max_scale,
        scale_step=config.scale_step,
    )

    scheduler = Scheduler()
    scheduler.add("poller", poller.run_forever)
    scheduler.add("text", text_renderer.run_forever)
    scheduler.add("map", map_renderer.run_forever)
    return scheduler


async def _run(scheduler: Scheduler) -> list[str]:
    scheduler.install_signal_handlers()
    return await scheduler.run()


def watch_cmd(
    state: Path = typer.Option(
        None,
        "--state",
        "-s",
        help="Path to the job-state JSON file (defaults to QUARRYWATCH_STATE_PATH).",
    ),
    map_file: list[Path] | None = typer.Option(
        None,
        "--map-file",
        "-m",
        help="Write the quarry map to this file each map pass (repeatable).",
    ),
    map_size: str = typer.Option(
        "80x40",
        "--map-size",
        help="Base size of each map file, as WIDTHxHEIGHT characters.",
    ),
    poll_interval: float = typer.Option(
        None, "--poll-interval", help="Seconds between snapshot reads."
    ),
    text_interval: float = typer.Option(
        None, "--text-interval", help="Seconds between statistics refreshes."
    ),
    map_interval: float = typer.Option(
        None, "--map-interval", help="Seconds between map passes."
    ),
) -> None:
    """Monitor the quarry continuously.  Press Ctrl+C to exit."""
    overrides = {
        "state_path": state,
        "poll_interval": poll_interval,
        "text_interval": text_interval,
        "map_interval": map_interval,
    }
    config = MonitorConfig(**{k: v for k, v in overrides.items() if v is not None})
    scheduler = build_scheduler(config, list(map_file or []), parse_size(map_size))

    logger.info("Watching %s", config.state_path)
    try:
        ended = asyncio.run(_run(scheduler))
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
        return
    if ended:
        raise typer.Exit(code=1)
