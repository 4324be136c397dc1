"""Quarrywatch data models — all Pydantic v2, all frozen (immutable)."""

from quarrywatch.models.grid import CellStatus, GridCell
from quarrywatch.models.jobs import JobStateSnapshot
from quarrywatch.models.stats import ActiveJobRow, QuarryStats

__all__ = [
    # jobs
    "JobStateSnapshot",
    # grid
    "CellStatus",
    "GridCell",
    # stats
    "ActiveJobRow",
    "QuarryStats",
]
