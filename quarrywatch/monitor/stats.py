"""Stats Aggregator — derives progress and timing figures from a snapshot.

Pure functions: the same snapshot at the same tick always yields the same
``QuarryStats``.  The estimates are deliberately rough:

* the average job duration is Laplace-smoothed, ``sum / (count + 1)``, so a
  handful of quick early holes does not produce an overconfident figure;
* the remaining-time projection divides outstanding work by the current
  number of active holes (floored at 1).  Between bursts of assignment,
  with nothing active, this overestimates heavily.  That weakness is kept
  as-is for compatibility with the controller's own readout.
"""

from __future__ import annotations

from quarrywatch.core.clock import Clock, world_ticks
from quarrywatch.core.spiral import map_index_to_position
from quarrywatch.core.timefmt import format_duration
from quarrywatch.models.jobs import JobStateSnapshot
from quarrywatch.models.stats import ActiveJobRow, QuarryStats

AWOL = "AWOL"


def progress_percent(snapshot: JobStateSnapshot) -> int:
    """Finished holes as a whole percentage of the total (0 for an empty quarry)."""
    if snapshot.total_jobs <= 0:
        return 0
    return snapshot.finished_count * 100 // snapshot.total_jobs


def average_job_duration(durations: list[int]) -> float:
    """Smoothed mean of completed-job durations; 0 when none are recorded."""
    if not durations:
        return 0.0
    return sum(durations) / (len(durations) + 1)


def elapsed_time(snapshot: JobStateSnapshot, now: int) -> int:
    """Ticks of work so far.

    While any hole is active the clock runs to *now*; otherwise it stops at
    the recorded stop time.  Absent start/stop times default to *now*, so a
    quarry that never started reports zero.
    """
    start = snapshot.start_time if snapshot.start_time is not None else now
    if snapshot.active_jobs:
        return now - start
    stop = snapshot.stop_time if snapshot.stop_time is not None else now
    return stop - start


def remaining_time(snapshot: JobStateSnapshot, now: int, average: float) -> float:
    """Projected wall-clock ticks until every hole is finished."""
    outstanding = (snapshot.total_jobs - snapshot.finished_count) * average
    in_progress = sum(now - started for started in snapshot.active_jobs.values())
    return (outstanding - in_progress) / max(snapshot.active_count, 1)


def job_remaining_label(average: float | None, elapsed: int) -> str:
    """Remaining-time label for one active hole.

    Empty when no hole has finished yet (*average* is ``None``), ``AWOL``
    once the hole has run past twice the average duration, otherwise a
    formatted duration (negative when slightly overdue).
    """
    if average is None:
        return ""
    remaining = average - elapsed
    if remaining < -average:
        return AWOL
    return format_duration(remaining)


def active_job_rows(
    snapshot: JobStateSnapshot, now: int, average: float | None
) -> list[ActiveJobRow]:
    """Table rows for the active holes, ordered by hole index.

    *average* is ``None`` until some hole has finished.
    """
    rows: list[ActiveJobRow] = []
    for index in sorted(snapshot.active_jobs):
        x, y = map_index_to_position(index)
        rows.append(
            ActiveJobRow(
                index=index,
                x=x,
                y=y,
                remaining_label=job_remaining_label(
                    average, now - snapshot.active_jobs[index]
                ),
            )
        )
    return rows


def aggregate(
    snapshot: JobStateSnapshot,
    now: int | None = None,
    *,
    clock: Clock = world_ticks,
) -> QuarryStats:
    """Compute the full statistics set for *snapshot* at tick *now*.

    Parameters
    ----------
    snapshot:
        The job-state snapshot to summarise.
    now:
        Current world-clock tick.  Read from *clock* when omitted.
    clock:
        Tick source used when *now* is not given.
    """
    if now is None:
        now = clock()
    has_average = bool(snapshot.job_durations)
    average = average_job_duration(snapshot.job_durations)
    return QuarryStats(
        total_jobs=snapshot.total_jobs,
        finished_jobs=snapshot.finished_count,
        active_count=snapshot.active_count,
        progress_percent=progress_percent(snapshot),
        average_duration=average,
        has_average=has_average,
        elapsed=elapsed_time(snapshot, now),
        remaining=remaining_time(snapshot, now, average),
        active_rows=active_job_rows(
            snapshot, now, average if has_average else None
        ),
    )
