"""Quarrywatch: live status monitor for a distributed excavation job.

Reads the job-assignment controller's shared state record, derives progress
statistics and a 2-D map of the quarry's holes, and keeps both refreshed:

  - Poller: pulls the latest snapshot into the JobStateStore every second
  - Text Renderer: progress, timing estimates and the active-hole table
  - Map Renderer: the spiral hole lattice on every display surface
  - Scheduler: runs all three as independent asyncio loops

The monitor only reads job state; it never assigns work or writes the
record.
"""

__version__ = "0.1.0"
__description__ = "Live status monitor for a distributed excavation job"

from quarrywatch.core.job_store import JobStateStore
from quarrywatch.core.poller import Poller
from quarrywatch.core.scheduler import Scheduler
from quarrywatch.core.spiral import map_index_to_position
from quarrywatch.core.timefmt import format_duration
from quarrywatch.models.jobs import JobStateSnapshot
from quarrywatch.monitor.map_renderer import MapRenderer
from quarrywatch.monitor.stats import aggregate
from quarrywatch.monitor.text_renderer import TextRenderer

__all__ = [
    "JobStateSnapshot",
    "JobStateStore",
    "MapRenderer",
    "Poller",
    "Scheduler",
    "TextRenderer",
    "aggregate",
    "format_duration",
    "map_index_to_position",
    "__version__",
]
