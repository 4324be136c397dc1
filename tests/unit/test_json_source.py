"""Tests for the JSON file snapshot source."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from quarrywatch.core.poller import SnapshotSource
from quarrywatch.sources.json_file import (
    JsonFileSnapshotSource,
    SnapshotRejected,
    parse_snapshot,
)

STATE = {
    "totalJobs": 9,
    "nextJob": 4,
    "activeJobs": {"2": 1_000},
    "jobDurations": [120, 80],
    "startTime": 500,
    "stopTime": None,
}


class TestParseSnapshot:
    def test_camel_case_document(self):
        snap = parse_snapshot(json.dumps(STATE))
        assert snap.total_jobs == 9
        assert snap.next_job == 4
        assert snap.active_jobs == {2: 1_000}
        assert snap.job_durations == [120, 80]
        assert snap.start_time == 500
        assert snap.stop_time is None

    def test_optional_fields_default(self):
        snap = parse_snapshot(b'{"totalJobs": 4, "nextJob": 1, "activeJobs": {}}')
        assert snap.job_durations == []
        assert snap.start_time is None

    def test_empty_array_for_active_jobs(self):
        snap = parse_snapshot('{"totalJobs": 4, "nextJob": 1, "activeJobs": []}')
        assert snap.active_jobs == {}

    def test_array_for_active_jobs_is_one_based(self):
        snap = parse_snapshot(
            '{"totalJobs": 10, "nextJob": 3, "activeJobs": [100, 200], "startTime": 50}'
        )
        assert snap.active_jobs == {1: 100, 2: 200}
        assert snap.finished_count == 0

    def test_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_snapshot("{")
        with pytest.raises(SnapshotRejected, match="problem"):
            parse_snapshot("{}")


class TestJsonFileSnapshotSource:
    def test_satisfies_protocol(self, tmp_path: Path):
        assert isinstance(JsonFileSnapshotSource(tmp_path / "x.json"), SnapshotSource)

    def test_reads_file(self, write_state: Callable[..., Path]):
        source = JsonFileSnapshotSource(write_state(json.dumps(STATE)))
        snap = source.fetch()
        assert snap is not None
        assert snap.active_count == 1

    def test_reads_array_encoded_active_jobs(self, write_state: Callable[..., Path]):
        doc = {**STATE, "nextJob": 3, "activeJobs": [100, 200]}
        snap = JsonFileSnapshotSource(write_state(json.dumps(doc))).fetch()
        assert snap is not None
        assert snap.active_jobs == {1: 100, 2: 200}

    def test_rereads_on_every_fetch(self, write_state: Callable[..., Path]):
        path = write_state(json.dumps(STATE))
        source = JsonFileSnapshotSource(path)
        source.fetch()
        path.write_text(json.dumps({**STATE, "nextJob": 6}), encoding="utf-8")
        assert source.fetch().next_job == 6

    def test_missing_file(self, tmp_path: Path):
        assert JsonFileSnapshotSource(tmp_path / "absent.json").fetch() is None

    def test_empty_file(self, write_state: Callable[..., Path]):
        assert JsonFileSnapshotSource(write_state("  \n")).fetch() is None

    def test_directory_instead_of_file(self, tmp_path: Path):
        assert JsonFileSnapshotSource(tmp_path).fetch() is None

    def test_repeated_failure_warns_once(self, tmp_path: Path, caplog):
        source = JsonFileSnapshotSource(tmp_path / "absent.json")
        with caplog.at_level(logging.WARNING, logger="quarrywatch.sources.json_file"):
            for _ in range(3):
                source.fetch()
        assert caplog.text.count("State file not found") == 1

    def test_warns_again_after_recovery(self, write_state: Callable[..., Path], caplog):
        path = write_state("not json")
        source = JsonFileSnapshotSource(path)
        with caplog.at_level(logging.WARNING, logger="quarrywatch.sources.json_file"):
            source.fetch()
            path.write_text(json.dumps(STATE), encoding="utf-8")
            assert source.fetch() is not None
            path.write_text("not json", encoding="utf-8")
            source.fetch()
        assert caplog.text.count("Rejected snapshot") == 2
