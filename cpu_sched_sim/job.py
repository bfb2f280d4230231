from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidJobSpecError, SchedulingInvariantError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class JobSpec:
    """Immutable job description as supplied by the caller."""

    job_id: int
    entry_time: int
    run_duration: int

    def __post_init__(self) -> None:
        if not _is_int(self.entry_time) or not _is_int(self.run_duration):
            msg = f"job {self.job_id}: entry_time and run_duration must be integers"
            raise InvalidJobSpecError(msg)
        if self.entry_time < 0:
            msg = f"job {self.job_id}: entry_time cannot be negative"
            raise InvalidJobSpecError(msg)
        if self.run_duration <= 0:
            msg = f"job {self.job_id}: run_duration must be strictly positive"
            raise InvalidJobSpecError(msg)


@dataclass(slots=True)
class Job:
    """Mutable runtime state for a job, owned by a single scheduler run."""

    spec: JobSpec
    time_left: int
    first_run_time: Optional[int] = None
    completion_time: Optional[int] = None
    queue_level: int = 0

    @classmethod
    def from_spec(cls, spec: JobSpec) -> Job:
        return cls(spec=spec, time_left=spec.run_duration)

    def mark_dispatched(self, now: int) -> None:
        self._check_active("dispatch")
        if now < self.entry_time:
            msg = f"job {self.job_id} dispatched at {now} before its entry time {self.entry_time}"
            raise SchedulingInvariantError(msg)
        if self.first_run_time is None:
            self.first_run_time = now

    def run(self, units: int = 1) -> None:
        self._check_active("run")
        if units <= 0 or units > self.time_left:
            msg = f"job {self.job_id} cannot run {units} units with {self.time_left} left"
            raise SchedulingInvariantError(msg)
        self.time_left -= units

    def mark_completed(self, now: int) -> None:
        self._check_active("complete")
        if self.time_left != 0:
            msg = f"job {self.job_id} completed with {self.time_left} units left"
            raise SchedulingInvariantError(msg)
        if self.first_run_time is None or now < self.entry_time + self.run_duration:
            msg = f"job {self.job_id} cannot complete at {now}"
            raise SchedulingInvariantError(msg)
        self.completion_time = now

    def demote(self, lowest_level: int) -> None:
        self._check_active("demote")
        self.queue_level = min(self.queue_level + 1, lowest_level)

    @property
    def is_complete(self) -> bool:
        return self.completion_time is not None

    @property
    def job_id(self) -> int:
        return self.spec.job_id

    @property
    def entry_time(self) -> int:
        return self.spec.entry_time

    @property
    def run_duration(self) -> int:
        return self.spec.run_duration

    def _check_active(self, action: str) -> None:
        if self.completion_time is not None:
            msg = f"cannot {action} job {self.job_id}: already completed at {self.completion_time}"
            raise SchedulingInvariantError(msg)
