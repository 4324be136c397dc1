"""Snapshot sources — where the controller's job-state record comes from."""

from quarrywatch.sources.json_file import (
    JsonFileSnapshotSource,
    SnapshotRejected,
    parse_snapshot,
)

__all__ = ["JsonFileSnapshotSource", "SnapshotRejected", "parse_snapshot"]
