"""Shared test fixtures for Quarrywatch."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from quarrywatch.core.clock import Clock, fixed_clock
from quarrywatch.core.job_store import JobStateStore
from quarrywatch.models.jobs import JobStateSnapshot

NOW = 100_000


@pytest.fixture
def now() -> int:
    """Provide a fixed world-clock tick."""
    return NOW


@pytest.fixture
def clock(now: int) -> Clock:
    """Provide a clock frozen at ``now``."""
    return fixed_clock(now)


@pytest.fixture
def store() -> JobStateStore:
    """Provide an empty JobStateStore."""
    return JobStateStore()


# ---------------------------------------------------------------------------
# Snapshot factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_snapshot() -> Callable[..., JobStateSnapshot]:
    """Factory fixture: build a JobStateSnapshot with sensible defaults.

    Defaults describe a 100-hole quarry with 20 holes claimed, holes 5 and
    12 still active, started 10 000 ticks before ``NOW``.
    """

    def _factory(**overrides: Any) -> JobStateSnapshot:
        defaults: dict[str, Any] = {
            "total_jobs": 100,
            "next_job": 21,
            "active_jobs": {5: NOW - 300, 12: NOW - 300},
            "job_durations": [],
            "start_time": NOW - 10_000,
            "stop_time": None,
        }
        defaults.update(overrides)
        return JobStateSnapshot(**defaults)

    return _factory


@pytest.fixture
def snapshot(make_snapshot: Callable[..., JobStateSnapshot]) -> JobStateSnapshot:
    """Convenience: a ready-made snapshot with test defaults."""
    return make_snapshot()


@pytest.fixture
def write_state(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture: write raw text to a state file and return its path."""

    def _write(text: str, name: str = "quarry_state.json") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
