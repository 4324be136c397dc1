"""JSON file snapshot source.

The controller persists its job-state record as a JSON document (typically
on removable storage shared with the monitor).  Each ``fetch`` re-reads the
whole file; a missing, unreadable, truncated or inconsistent file yields
``None`` so the previous snapshot stays in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from quarrywatch.models.jobs import JobStateSnapshot

logger = logging.getLogger(__name__)


class SnapshotRejected(ValueError):
    """Raised when a job-state payload cannot be turned into a valid snapshot."""


def parse_snapshot(payload: str | bytes) -> JobStateSnapshot:
    """Decode and validate a JSON job-state payload.

    Raises
    ------
    SnapshotRejected
        If the payload is not JSON, misses required fields, or violates
        the snapshot invariants.
    """
    try:
        return JobStateSnapshot.model_validate_json(payload)
    except ValidationError as exc:
        raise SnapshotRejected(
            f"{exc.error_count()} problem(s): "
            + "; ".join(err["msg"] for err in exc.errors())
        ) from exc


class JsonFileSnapshotSource:
    """Reads the job-state record from a JSON file.

    Parameters
    ----------
    path:
        Location of the controller's job-state file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._last_warning: str | None = None

    def fetch(self) -> JobStateSnapshot | None:
        """Return the snapshot in the file, or ``None`` if there is none to use."""
        try:
            payload = self.path.read_bytes()
        except FileNotFoundError:
            self._warn(f"State file not found: {self.path}")
            return None
        except OSError as exc:
            self._warn(f"Cannot read state file {self.path}: {exc}")
            return None

        if not payload.strip():
            self._warn(f"State file is empty: {self.path}")
            return None

        try:
            snapshot = parse_snapshot(payload)
        except SnapshotRejected as exc:
            self._warn(f"Rejected snapshot from {self.path}: {exc}")
            return None

        self._last_warning = None
        return snapshot

    def _warn(self, message: str) -> None:
        # Repeat failures are logged once until the source recovers.
        if message != self._last_warning:
            logger.warning(message)
        self._last_warning = message
