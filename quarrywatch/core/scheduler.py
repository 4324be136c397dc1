"""Scheduler — runs the monitor's loops as one unit.

Each loop (Poller, Text Renderer, Map Renderer) is an independent asyncio
task that yields only at its own sleep.  The scheduler starts them all and
blocks until any one of them ends or a stop is requested, then cancels the
rest.  There is no per-task restart: a loop that ends ends the run.

Usage::

    scheduler = Scheduler()
    scheduler.add("poller", poller.run_forever)
    scheduler.add("text", text_renderer.run_forever)
    scheduler.add("map", map_renderer.run_forever)
    await scheduler.run()
"""

from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import Callable, Coroutine
from typing import Any

logger = logging.getLogger(__name__)

LoopFactory = Callable[[], Coroutine[Any, Any, None]]


class Scheduler:
    """Start-all / stop-all supervisor for indefinitely looping tasks.

    Parameters
    ----------
    shutdown_timeout:
        Seconds to wait for cancelled tasks to unwind before abandoning them.
    """

    def __init__(self, *, shutdown_timeout: float = 5.0) -> None:
        self._loops: dict[str, LoopFactory] = {}
        self._shutdown_timeout = shutdown_timeout
        self._stop_event: asyncio.Event | None = None
        self._stop_requested = False

    def add(self, name: str, loop: LoopFactory) -> None:
        """Register a loop under a unique *name*."""
        if name in self._loops:
            raise ValueError(f"Loop already registered: {name}")
        self._loops[name] = loop

    @property
    def names(self) -> list[str]:
        return list(self._loops)

    def request_stop(self) -> None:
        """Ask a running (or about-to-run) scheduler to shut down."""
        self._stop_requested = True
        if self._stop_event is not None:
            self._stop_event.set()

    def install_signal_handlers(self) -> None:
        """Route SIGTERM to ``request_stop`` on platforms that support it."""
        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(signal.SIGTERM, self.request_stop)
        except (NotImplementedError, RuntimeError):
            logger.debug("Signal handlers unavailable on this platform")

    async def run(self) -> list[str]:
        """Run every registered loop until one ends or a stop is requested.

        Returns
        -------
        list[str]
            Names of the loops that ended on their own (empty when the run
            was stopped by request).
        """
        self._stop_event = asyncio.Event()
        if self._stop_requested:
            self._stop_event.set()

        tasks = {
            asyncio.create_task(factory(), name=name): name
            for name, factory in self._loops.items()
        }
        stopper = asyncio.create_task(self._stop_event.wait(), name="stop-request")
        logger.info("Scheduler started: %s", ", ".join(self._loops) or "(no loops)")

        try:
            done, _ = await asyncio.wait(
                [*tasks, stopper], return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            await self._cancel_all([*tasks, stopper])

        ended: list[str] = []
        for task in done:
            name = tasks.get(task)
            if name is None:
                continue
            ended.append(name)
            if not task.cancelled() and task.exception() is not None:
                logger.error(
                    "Loop %s crashed", name, exc_info=task.exception()
                )
            else:
                logger.error("Loop %s exited; stopping the monitor", name)

        if not ended:
            logger.info("Scheduler stopped on request")
        return sorted(ended)

    async def _cancel_all(self, tasks: list[asyncio.Task]) -> None:
        for task in tasks:
            task.cancel()
        pending = [t for t in tasks if not t.done()]
        if pending:
            _, still_pending = await asyncio.wait(pending, timeout=self._shutdown_timeout)
            if still_pending:
                logger.warning(
                    "%d task(s) did not finish within %ss, abandoning",
                    len(still_pending),
                    self._shutdown_timeout,
                )
