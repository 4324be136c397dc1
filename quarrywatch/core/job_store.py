"""JobStateStore — holds the latest installed job-state snapshot.

Single writer (the Poller), any number of readers (the renderers).
Snapshots are immutable and the store only ever swaps its reference, so
a reader sees either the previous snapshot or the new one, never a mix.
No locks are needed under cooperative scheduling.
"""

from __future__ import annotations

import logging

from quarrywatch.models.jobs import JobStateSnapshot

logger = logging.getLogger(__name__)


class JobStateStore:
    """Zero-or-one snapshot holder with replace-on-write semantics."""

    def __init__(self, initial: JobStateSnapshot | None = None) -> None:
        self._snapshot = initial
        self._version = 0 if initial is None else 1

    def install(self, snapshot: JobStateSnapshot) -> None:
        """Replace the current snapshot; visible to the next ``current()``."""
        self._snapshot = snapshot
        self._version += 1
        logger.debug(
            "Installed snapshot v%d: next=%d/%d active=%d",
            self._version,
            snapshot.next_job,
            snapshot.total_jobs,
            snapshot.active_count,
        )

    def current(self) -> JobStateSnapshot | None:
        """Return the latest installed snapshot, or ``None`` before the first."""
        return self._snapshot

    @property
    def version(self) -> int:
        """Number of snapshots installed so far."""
        return self._version

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None
