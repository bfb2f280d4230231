from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Iterable, Sequence

from .errors import DegenerateSimulationError, SchedulingInvariantError
from .job import Job


@dataclass(frozen=True, slots=True)
class JobMetrics:
    job_id: int
    entry_time: int
    run_duration: int
    first_run_time: int
    completion_time: int
    wait_time: int
    turnaround_time: int
    response_time: int


@dataclass(frozen=True, slots=True)
class AggregateMetrics:
    count: int
    mean_wait_time: float
    mean_turnaround_time: float
    mean_response_time: float
    makespan: int
    total_run_time: int
    cpu_utilization: float
    throughput: float


@dataclass(frozen=True, slots=True)
class Report:
    title: str
    per_job: tuple[JobMetrics, ...]
    aggregate: AggregateMetrics

    def render(self) -> str:
        return format_report(self.title, self.per_job, self.aggregate)


def build_job_metrics(jobs: Iterable[Job]) -> list[JobMetrics]:
    """Per-job rows ordered by job id.

    Wait time is the time spent in the system without holding the CPU. For a
    non-preemptive run that is the same as first run time minus entry time.
    """

    rows: list[JobMetrics] = []
    for job in sorted(jobs, key=lambda j: j.job_id):
        if job.first_run_time is None or job.completion_time is None:
            msg = f"job {job.job_id} has not completed"
            raise SchedulingInvariantError(msg)
        turnaround = job.completion_time - job.entry_time
        rows.append(
            JobMetrics(
                job_id=job.job_id,
                entry_time=job.entry_time,
                run_duration=job.run_duration,
                first_run_time=job.first_run_time,
                completion_time=job.completion_time,
                wait_time=turnaround - job.run_duration,
                turnaround_time=turnaround,
                response_time=job.first_run_time - job.entry_time,
            ),
        )
    return rows


def summarise(rows: Sequence[JobMetrics]) -> AggregateMetrics:
    if not rows:
        msg = "cannot summarise an empty run"
        raise DegenerateSimulationError(msg)
    makespan = max(r.completion_time for r in rows) - min(r.entry_time for r in rows)
    if makespan <= 0:
        msg = "makespan is zero; utilization and throughput are undefined"
        raise DegenerateSimulationError(msg)
    total_run_time = sum(r.run_duration for r in rows)
    return AggregateMetrics(
        count=len(rows),
        mean_wait_time=float(mean(r.wait_time for r in rows)),
        mean_turnaround_time=float(mean(r.turnaround_time for r in rows)),
        mean_response_time=float(mean(r.response_time for r in rows)),
        makespan=makespan,
        total_run_time=total_run_time,
        cpu_utilization=100.0 * total_run_time / makespan,
        throughput=len(rows) / makespan,
    )


def build_report(title: str, jobs: Iterable[Job]) -> Report:
    rows = build_job_metrics(jobs)
    return Report(title=title, per_job=tuple(rows), aggregate=summarise(rows))


HEADER = "Job | Entry | Duration | Start | Finish | Wait | Turnaround | Response"


def format_report(title: str, rows: Sequence[JobMetrics], aggregate: AggregateMetrics) -> str:
    lines = [f"=== {title} Results ===", HEADER]
    for r in rows:
        lines.append(
            f"{r.job_id:>3} | {r.entry_time:>5} | {r.run_duration:>8} | {r.first_run_time:>5} | "
            f"{r.completion_time:>6} | {r.wait_time:>4} | {r.turnaround_time:>10} | {r.response_time:>8}",
        )
    lines.extend(
        [
            "",
            f"Average Wait Time: {aggregate.mean_wait_time:.2f}",
            f"Average Turnaround Time: {aggregate.mean_turnaround_time:.2f}",
            f"Average Response Time: {aggregate.mean_response_time:.2f}",
            f"CPU Utilization: {aggregate.cpu_utilization:.2f}%",
            f"Throughput: {aggregate.throughput:.2f} jobs/unit time",
        ],
    )
    return "\n".join(lines)
