"""Poller — pulls snapshots from a source into the JobStateStore.

A failed or empty fetch leaves the store untouched: stale but valid data
is preferred over no data.  Fetch errors never escape the loop; the next
cycle simply tries again.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from quarrywatch.core.job_store import JobStateStore
from quarrywatch.models.jobs import JobStateSnapshot

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@runtime_checkable
class SnapshotSource(Protocol):
    """Anything that can hand over the latest job-state snapshot."""

    def fetch(self) -> JobStateSnapshot | None:
        """Return the latest snapshot, or ``None`` if none is available.

        Must be cheap enough to call once per poll interval indefinitely.
        """
        ...


class Poller:
    """Periodically fetch from *source* and install into *store*.

    Parameters
    ----------
    source:
        The snapshot source to poll.
    store:
        Destination store; the Poller is its only writer.
    interval:
        Seconds between fetches.
    sleep:
        Awaitable sleep used between cycles.  Defaults to ``asyncio.sleep``.
    """

    def __init__(
        self,
        source: SnapshotSource,
        store: JobStateStore,
        *,
        interval: float = 1.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._source = source
        self._store = store
        self._interval = interval
        self._sleep = sleep
        self.misses = 0

    def poll_once(self) -> bool:
        """Run one fetch-and-install cycle.  Returns True if a snapshot was installed."""
        try:
            snapshot = self._source.fetch()
        except Exception:  # noqa: BLE001
            logger.exception("Snapshot source raised; keeping previous snapshot")
            self.misses += 1
            return False

        if snapshot is None:
            logger.debug("No snapshot available; keeping previous snapshot")
            self.misses += 1
            return False

        self._store.install(snapshot)
        self.misses = 0
        return True

    async def run_forever(self) -> None:
        """Poll until cancelled."""
        while True:
            self.poll_once()
            await self._sleep(self._interval)
