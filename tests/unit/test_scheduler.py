"""Tests for the Scheduler — start-all / stop-all supervision."""

from __future__ import annotations

import asyncio

import pytest

from quarrywatch.core.scheduler import Scheduler


def make_forever(log: list[str], name: str):
    async def _loop() -> None:
        try:
            while True:
                log.append(name)
                await asyncio.sleep(0.01)
        except asyncio.CancelledError:
            log.append(f"{name}:cancelled")
            raise

    return _loop


class TestRegistration:
    def test_names_in_registration_order(self):
        scheduler = Scheduler()
        scheduler.add("poller", make_forever([], "poller"))
        scheduler.add("text", make_forever([], "text"))
        assert scheduler.names == ["poller", "text"]

    def test_duplicate_name_rejected(self):
        scheduler = Scheduler()
        scheduler.add("map", make_forever([], "map"))
        with pytest.raises(ValueError, match="already registered"):
            scheduler.add("map", make_forever([], "map"))


class TestRun:
    @pytest.mark.asyncio
    async def test_loops_interleave_until_stopped(self):
        log: list[str] = []
        scheduler = Scheduler()
        scheduler.add("poller", make_forever(log, "poller"))
        scheduler.add("text", make_forever(log, "text"))

        asyncio.get_running_loop().call_later(0.1, scheduler.request_stop)
        ended = await scheduler.run()

        assert ended == []
        assert log.count("poller") >= 2
        assert log.count("text") >= 2
        assert "poller:cancelled" in log
        assert "text:cancelled" in log

    @pytest.mark.asyncio
    async def test_stop_requested_before_run(self):
        log: list[str] = []
        scheduler = Scheduler()
        scheduler.add("poller", make_forever(log, "poller"))
        scheduler.request_stop()
        assert await scheduler.run() == []

    @pytest.mark.asyncio
    async def test_crashed_loop_stops_the_rest(self, caplog):
        log: list[str] = []

        async def crashing() -> None:
            await asyncio.sleep(0.02)
            raise RuntimeError("unexpected")

        scheduler = Scheduler()
        scheduler.add("map", crashing)
        scheduler.add("text", make_forever(log, "text"))

        ended = await asyncio.wait_for(scheduler.run(), timeout=2)

        assert ended == ["map"]
        assert "text:cancelled" in log
        assert "Loop map crashed" in caplog.text

    @pytest.mark.asyncio
    async def test_returning_loop_stops_the_rest(self, caplog):
        log: list[str] = []

        async def finishes() -> None:
            await asyncio.sleep(0)

        scheduler = Scheduler()
        scheduler.add("poller", finishes)
        scheduler.add("text", make_forever(log, "text"))

        assert await scheduler.run() == ["poller"]
        assert "Loop poller exited" in caplog.text

    @pytest.mark.asyncio
    async def test_stubborn_task_is_abandoned(self, caplog):
        release = asyncio.Event()

        async def stubborn() -> None:
            while not release.is_set():
                try:
                    await asyncio.sleep(1)
                except asyncio.CancelledError:
                    await release.wait()

        scheduler = Scheduler(shutdown_timeout=0.05)
        scheduler.add("stubborn", stubborn)
        scheduler.request_stop()

        assert await scheduler.run() == []
        assert "did not finish" in caplog.text
        release.set()
        await asyncio.sleep(0.01)

    @pytest.mark.asyncio
    async def test_no_loops(self):
        scheduler = Scheduler()
        scheduler.request_stop()
        assert await scheduler.run() == []
