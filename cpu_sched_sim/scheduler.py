from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Sequence

from . import metrics
from .errors import DegenerateSimulationError, InvalidJobSpecError
from .job import Job, JobSpec


class Policy(str, Enum):
    FEEDBACK_QUEUE = "mlfq"
    RESPONSE_RATIO = "hrrn"

    @property
    def display_name(self) -> str:
        if self is Policy.FEEDBACK_QUEUE:
            return "Multi-Level Feedback Queue"
        return "Highest Response Ratio Next"


@dataclass(frozen=True, slots=True)
class ExecutionSlice:
    """Contiguous stretch of CPU time given to one job."""

    job_id: int
    start: int
    end: int
    queue_level: int = 0

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class CompletedRun:
    policy: Policy
    jobs: list[Job] = field(default_factory=list)
    timeline: list[ExecutionSlice] = field(default_factory=list)
    idle_time: int = 0
    end_time: int = 0

    @property
    def busy_time(self) -> int:
        return sum(s.length for s in self.timeline)


class SchedulingPolicy(ABC):
    """Common calling convention shared by both policies.

    ``execute`` takes ownership of a fresh set of ``Job`` records built from
    the specs, so repeated runs never observe each other's state. Jobs are
    handed to the policy ordered by entry time, keeping input order on ties.
    """

    policy: ClassVar[Policy]

    def __init__(self) -> None:
        self._last_run: CompletedRun | None = None

    def execute(self, specs: Sequence[JobSpec]) -> CompletedRun:
        _check_unique_ids(specs)
        jobs = [Job.from_spec(spec) for spec in sorted(specs, key=lambda s: s.entry_time)]
        run = self._simulate(jobs)
        self._last_run = run
        return run

    @abstractmethod
    def _simulate(self, jobs: list[Job]) -> CompletedRun:
        """Run the policy over jobs ordered by entry time."""

    def results(self) -> metrics.Report:
        if self._last_run is None:
            msg = f"{self.policy.display_name}: execute() has not been called"
            raise DegenerateSimulationError(msg)
        return metrics.build_report(self.policy.display_name, self._last_run.jobs)


def _check_unique_ids(specs: Sequence[JobSpec]) -> None:
    seen: set[int] = set()
    for spec in specs:
        if spec.job_id in seen:
            msg = f"duplicate job id {spec.job_id}"
            raise InvalidJobSpecError(msg)
        seen.add(spec.job_id)
