"""Job-state models — the controller's record as seen by the monitor.

``JobStateSnapshot`` is a frozen, point-in-time copy of the job-assignment
record.  It is produced only by a snapshot source and replaced wholesale on
every successful poll; nothing in the monitor mutates one in place.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class JobStateSnapshot(BaseModel):
    """One consistent read of the quarry's job-assignment state.

    All timestamps and durations are world-clock ticks (20 per second).
    Field names accept the controller's camelCase keys (``totalJobs``,
    ``activeJobs`` ...) as well as their snake_case equivalents.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    total_jobs: int = Field(ge=0)
    next_job: int = Field(ge=1)
    active_jobs: dict[int, int]
    job_durations: list[int] = []
    start_time: int | None = None
    stop_time: int | None = None

    @field_validator("active_jobs", mode="before")
    @classmethod
    def _array_is_one_based_mapping(cls, value: Any) -> Any:
        # Serializers that cannot tell a table from an array emit one whose
        # keys run 1..k as a JSON array; null entries are missing keys.
        if isinstance(value, list):
            return {i + 1: v for i, v in enumerate(value) if v is not None}
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> JobStateSnapshot:
        if self.next_job > self.total_jobs + 1:
            raise ValueError(
                f"nextJob {self.next_job} exceeds totalJobs + 1 ({self.total_jobs + 1})"
            )
        claimed = self.next_job - 1
        stray = sorted(j for j in self.active_jobs if j < 1 or j > claimed)
        if stray:
            raise ValueError(f"active jobs {stray} are outside the claimed range 1..{claimed}")
        return self

    @property
    def claimed_count(self) -> int:
        """Holes handed out so far (active or finished)."""
        return self.next_job - 1

    @property
    def active_count(self) -> int:
        return len(self.active_jobs)

    @property
    def finished_count(self) -> int:
        """Holes claimed and no longer active."""
        return self.claimed_count - self.active_count

    @property
    def has_started(self) -> bool:
        return self.start_time is not None
