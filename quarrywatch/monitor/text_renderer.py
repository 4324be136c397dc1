"""Text Renderer — the statistics readout.

Every cycle the renderer reads the latest snapshot from the store, runs
the Stats Aggregator and rewrites its text surface:

    Holes: 18/100 (18%)  |  Active: 2  |  Avg: 01:05
    Elapsed: 12:40  |  Remaining: 45:10

     Hole   Position   Remaining
        5       -3,1   00:12
       12        3,4   AWOL

A fault while aggregating or drawing is logged and confined to that cycle.
``build_stats_panel`` renders the same figures as a Rich panel for
one-shot display.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quarrywatch.core.clock import Clock, world_ticks
from quarrywatch.core.job_store import JobStateStore
from quarrywatch.core.poller import Sleep
from quarrywatch.models.jobs import JobStateSnapshot
from quarrywatch.models.stats import QuarryStats
from quarrywatch.monitor.stats import AWOL, aggregate
from quarrywatch.surfaces.base import TextSurface

logger = logging.getLogger(__name__)

Aggregator = Callable[[JobStateSnapshot, int], QuarryStats]

TABLE_HEADER = f"{'Hole':>5}   {'Position':>8}   Remaining"


def format_lines(stats: QuarryStats) -> list[str]:
    """Lay out *stats* as plain text lines, active holes in index order."""
    lines = [stats.summary_line, stats.timing_line, "", TABLE_HEADER]
    for row in stats.active_rows:
        lines.append(f"{row.index:>5}   {row.position_label:>8}   {row.remaining_label}")
    return lines


class TextRenderer:
    """Periodically render statistics for the stored snapshot.

    Parameters
    ----------
    store:
        Source of the latest snapshot (read-only here).
    surface:
        The text surface this renderer owns.
    interval:
        Seconds between refreshes.
    clock:
        World-clock tick source.
    aggregator:
        Snapshot-to-stats function; defaults to :func:`aggregate`.
    sleep:
        Awaitable sleep used between cycles.
    """

    def __init__(
        self,
        store: JobStateStore,
        surface: TextSurface,
        *,
        interval: float = 1.0,
        clock: Clock = world_ticks,
        aggregator: Aggregator = aggregate,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._store = store
        self._surface = surface
        self._interval = interval
        self._clock = clock
        self._aggregator = aggregator
        self._sleep = sleep
        self.faults = 0

    def render_once(self) -> bool:
        """Render one frame.  Returns False when skipped or faulted."""
        snapshot = self._store.current()
        if snapshot is None:
            return False
        try:
            stats = self._aggregator(snapshot, self._clock())
            lines = format_lines(stats)
            self._surface.clear()
            self._surface.move_cursor(0, 0)
            for line in lines:
                self._surface.write_line(line)
        except Exception:  # noqa: BLE001
            self.faults += 1
            logger.exception("Text render cycle failed (fault #%d)", self.faults)
            return False
        return True

    async def run_forever(self) -> None:
        """Render until cancelled."""
        while True:
            self.render_once()
            await self._sleep(self._interval)


# ---------------------------------------------------------------------------
# One-shot Rich panel
# ---------------------------------------------------------------------------


def _build_active_table(stats: QuarryStats) -> Table:
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Hole", style="dim", justify="right", width=6)
    table.add_column("Position", justify="right", min_width=10)
    table.add_column("Remaining", min_width=10)

    for row in stats.active_rows:
        if row.remaining_label == AWOL:
            remaining = "[bold red]AWOL[/bold red]"
        elif row.remaining_label:
            remaining = row.remaining_label
        else:
            remaining = "[dim]-[/dim]"
        table.add_row(str(row.index), row.position_label, remaining)
    return table


def build_stats_panel(stats: QuarryStats, *, title: str = "Quarry Monitor") -> Panel:
    """Render *stats* as a Rich Panel containing the active-holes table."""
    summary = "  |  ".join([
        f"[bold]Holes:[/bold] {stats.finished_jobs}/{stats.total_jobs}",
        f"[bold]Progress:[/bold] {stats.progress_percent}%",
        f"[bold]Active:[/bold] {stats.active_count}",
        f"[bold]Avg:[/bold] {stats.average_label}",
    ])
    timing = "  |  ".join([
        f"[bold]Elapsed:[/bold] {stats.elapsed_label}",
        f"[bold]Remaining:[/bold] {stats.remaining_label}",
    ])
    content = Group(
        Text.from_markup(summary),
        Text.from_markup(timing),
        Text(""),
        _build_active_table(stats),
    )
    return Panel(
        content,
        title=f"[bold]{title}[/bold]",
        border_style="blue",
        padding=(1, 2),
    )
