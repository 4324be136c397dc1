"""Derived progress statistics — the Stats Aggregator's output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from quarrywatch.core.timefmt import format_duration


class ActiveJobRow(BaseModel):
    """One row of the active-jobs table."""

    model_config = ConfigDict(frozen=True)

    index: int
    x: int
    y: int
    remaining_label: str  # "" before any job finished, "AWOL" when overdue

    @property
    def position_label(self) -> str:
        return f"{self.x},{self.y}"


class QuarryStats(BaseModel):
    """A frozen set of statistics computed from one snapshot at one instant.

    Durations are world-clock ticks.  ``average_duration`` is 0 when no
    job has finished yet; the labels render that case as ``N/A``.
    """

    model_config = ConfigDict(frozen=True)

    total_jobs: int
    finished_jobs: int
    active_count: int
    progress_percent: int
    average_duration: float
    has_average: bool
    elapsed: float
    remaining: float
    active_rows: list[ActiveJobRow] = []

    @property
    def average_label(self) -> str:
        return format_duration(self.average_duration) if self.has_average else "N/A"

    @property
    def elapsed_label(self) -> str:
        return format_duration(self.elapsed)

    @property
    def remaining_label(self) -> str:
        return format_duration(self.remaining)

    @property
    def summary_line(self) -> str:
        return (
            f"Holes: {self.finished_jobs}/{self.total_jobs} ({self.progress_percent}%)"
            f"  |  Active: {self.active_count}"
            f"  |  Avg: {self.average_label}"
        )

    @property
    def timing_line(self) -> str:
        return f"Elapsed: {self.elapsed_label}  |  Remaining: {self.remaining_label}"
