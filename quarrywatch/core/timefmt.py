"""Human-readable durations for world-clock ticks."""

from __future__ import annotations

TICKS_PER_SECOND = 20


def format_seconds(seconds: int) -> str:
    """Format a whole-second duration.

    ``45s`` under a minute, ``MM:SS`` under an hour, ``H:MM:SS`` beyond.
    Negative input is rendered as ``-`` followed by the absolute value.
    """
    if seconds < 0:
        return "-" + format_seconds(-seconds)
    if seconds < 60:
        return f"{seconds}s"
    minutes, secs = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes:02d}:{secs:02d}"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def format_duration(ticks: float) -> str:
    """Format a duration given in ticks, truncated to whole seconds."""
    seconds = int(abs(ticks) // TICKS_PER_SECOND)
    if ticks < 0:
        return "-" + format_seconds(seconds)
    return format_seconds(seconds)
