"""Tests for the JobStateStore — replace-on-write, read-latest semantics."""

from __future__ import annotations

from collections.abc import Callable

from quarrywatch.core.job_store import JobStateStore
from quarrywatch.models.jobs import JobStateSnapshot


class TestJobStateStore:
    def test_empty_until_first_install(self, store: JobStateStore):
        assert store.current() is None
        assert store.has_snapshot is False
        assert store.version == 0

    def test_read_after_write(self, store: JobStateStore, snapshot: JobStateSnapshot):
        store.install(snapshot)
        assert store.current() is snapshot
        assert store.version == 1

    def test_install_replaces_wholesale(
        self, store: JobStateStore, make_snapshot: Callable[..., JobStateSnapshot]
    ):
        first = make_snapshot(next_job=10, active_jobs={9: 0})
        second = make_snapshot(next_job=11, active_jobs={})
        store.install(first)
        store.install(second)
        assert store.current() is second
        assert store.version == 2
        # The previous snapshot is untouched by the replacement
        assert first.next_job == 10
        assert first.active_jobs == {9: 0}

    def test_initial_snapshot(self, snapshot: JobStateSnapshot):
        store = JobStateStore(snapshot)
        assert store.current() is snapshot
        assert store.version == 1
