"""Map Renderer — plots every hole of the quarry onto display surfaces.

For each surface the renderer picks a scale that fits the whole lattice,
then plots in layers, later layers overwriting earlier ones:

1. every hole as pending (``-``)
2. every claimed hole as done (``+``)
3. every active hole (``X``)
4. the origin marker (``O``)

Character cells are taller than they are wide, so rows are compressed by
``aspect`` (5/8 by default).  Layering matters: after compression two
holes can share a cell, and an active hole must win.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Iterator, Sequence

from quarrywatch.core.job_store import JobStateStore
from quarrywatch.core.poller import Sleep
from quarrywatch.core.spiral import map_index_to_position
from quarrywatch.models.grid import CellStatus, GridCell
from quarrywatch.models.jobs import JobStateSnapshot
from quarrywatch.surfaces.base import DisplaySurface, PresentableSurface

logger = logging.getLogger(__name__)

DEFAULT_ASPECT = 5 / 8
ORIGIN_GLYPH = "O"

_STATUS_GLYPHS: dict[CellStatus, str] = {
    CellStatus.PENDING: "-",
    CellStatus.DONE: "+",
    CellStatus.ACTIVE: "X",
}


def grid_extent(total_jobs: int) -> float:
    """Side length, in lattice units, needed to hold *total_jobs* holes."""
    return math.sqrt(max(total_jobs, 0)) * 3 + 1


def fit_scale(
    width: int,
    height: int,
    total_jobs: int,
    *,
    aspect: float = DEFAULT_ASPECT,
    min_scale: float = 0.5,
    max_scale: float = 5.0,
    step: float = 0.5,
) -> float:
    """Largest scale (in *step* increments) at which the lattice fits.

    *width* and *height* are the surface's addressable size at scale 1.
    """
    extent = grid_extent(total_jobs)
    raw = min(width / extent, height / (extent * aspect))
    scale = math.floor(raw / step) * step
    return max(min_scale, min(max_scale, scale))


def iter_grid_cells(snapshot: JobStateSnapshot) -> Iterator[GridCell]:
    """Yield cells layer by layer: pending, then done, then active."""
    positions = {
        index: map_index_to_position(index)
        for index in range(1, snapshot.total_jobs + 1)
    }
    for index, (x, y) in positions.items():
        yield GridCell(index=index, x=x, y=y, status=CellStatus.PENDING)
    for index in range(1, min(snapshot.next_job, snapshot.total_jobs + 1)):
        x, y = positions[index]
        yield GridCell(index=index, x=x, y=y, status=CellStatus.DONE)
    for index in sorted(snapshot.active_jobs):
        x, y = positions[index]
        yield GridCell(index=index, x=x, y=y, status=CellStatus.ACTIVE)


class MapRenderer:
    """Periodically draw the quarry map on every display surface.

    Parameters
    ----------
    store:
        Source of the latest snapshot (read-only here).
    surfaces:
        Display surfaces this renderer owns.  May be empty.
    interval:
        Seconds between full passes over all surfaces.
    surface_pause:
        Seconds to pause between consecutive surfaces within a pass.
    aspect:
        Vertical compression applied to lattice rows.
    min_scale, max_scale, scale_step:
        Range and granularity of the surface scale factor.
    sleep:
        Awaitable sleep used for both pauses.
    """

    def __init__(
        self,
        store: JobStateStore,
        surfaces: Sequence[DisplaySurface],
        *,
        interval: float = 5.0,
        surface_pause: float = 1.0,
        aspect: float = DEFAULT_ASPECT,
        min_scale: float = 0.5,
        max_scale: float = 5.0,
        scale_step: float = 0.5,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._store = store
        self._surfaces = list(surfaces)
        self._interval = interval
        self._surface_pause = surface_pause
        self._aspect = aspect
        self._min_scale = min_scale
        self._max_scale = max_scale
        self._scale_step = scale_step
        self._sleep = sleep
        self.faults = 0

    @property
    def surfaces(self) -> list[DisplaySurface]:
        return list(self._surfaces)

    def draw(self, surface: DisplaySurface, snapshot: JobStateSnapshot) -> None:
        """Draw *snapshot* onto a single *surface*."""
        surface.clear()
        surface.set_scale(1.0)
        base_width, base_height = surface.get_size()
        surface.set_scale(
            fit_scale(
                base_width,
                base_height,
                snapshot.total_jobs,
                aspect=self._aspect,
                min_scale=self._min_scale,
                max_scale=self._max_scale,
                step=self._scale_step,
            )
        )
        width, height = surface.get_size()
        cx, cy = width // 2, height // 2

        def put(x: int, y: int, glyph: str) -> None:
            col = cx + x
            row = cy + math.floor(y * self._aspect)
            if 0 <= col < width and 0 <= row < height:
                surface.set_cursor(col, row)
                surface.plot(glyph)

        for cell in iter_grid_cells(snapshot):
            put(cell.x, cell.y, _STATUS_GLYPHS[cell.status])
        put(0, 0, ORIGIN_GLYPH)

        if isinstance(surface, PresentableSurface):
            surface.present()

    def draw_surface(self, surface: DisplaySurface, snapshot: JobStateSnapshot) -> bool:
        """Draw one surface, confining any fault to it."""
        try:
            self.draw(surface, snapshot)
        except Exception:  # noqa: BLE001
            self.faults += 1
            logger.exception("Map render failed on %s (fault #%d)", surface, self.faults)
            return False
        return True

    def render_once(self) -> bool:
        """Draw every surface once without pausing.  False when skipped or any fault."""
        snapshot = self._store.current()
        if snapshot is None:
            return False
        results = [self.draw_surface(surface, snapshot) for surface in self._surfaces]
        return all(results)

    async def run_pass(self) -> None:
        """One full pass over all surfaces, pausing between them."""
        if self._store.current() is None:
            return
        for position, surface in enumerate(self._surfaces):
            if position:
                await self._sleep(self._surface_pause)
            snapshot = self._store.current()
            if snapshot is not None:
                self.draw_surface(surface, snapshot)

    async def run_forever(self) -> None:
        """Render until cancelled."""
        while True:
            await self.run_pass()
            await self._sleep(self._interval)
