from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence

from .errors import InvalidJobSpecError
from .job import JobSpec
from .scheduler import Policy

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_POLICY_ALIASES = {
    "a": Policy.FEEDBACK_QUEUE,
    "mlfq": Policy.FEEDBACK_QUEUE,
    "b": Policy.RESPONSE_RATIO,
    "hrrn": Policy.RESPONSE_RATIO,
}
_SEPARATOR = re.compile(r"[:,]")


def from_pairs(pairs: Iterable[tuple[int, int]]) -> list[JobSpec]:
    """Build specs numbered from 1 in the order given."""

    return [
        JobSpec(job_id=idx, entry_time=entry, run_duration=duration)
        for idx, (entry, duration) in enumerate(pairs, start=1)
    ]


def parse_job_spec(raw: str, job_id: int) -> JobSpec:
    parts = [part.strip() for part in _SEPARATOR.split(raw.strip())]
    if len(parts) != 2:
        msg = f"job {job_id}: expected ENTRY:DURATION, got {raw!r}"
        raise InvalidJobSpecError(msg)
    entry = _parse_int(parts[0], f"job {job_id} entry time")
    duration = _parse_int(parts[1], f"job {job_id} run duration")
    return JobSpec(job_id=job_id, entry_time=entry, run_duration=duration)


def parse_job_specs(raw_items: Sequence[str]) -> list[JobSpec]:
    return [parse_job_spec(raw, idx) for idx, raw in enumerate(raw_items, start=1)]


def parse_policy(raw: str) -> Policy:
    try:
        return _POLICY_ALIASES[raw.strip().lower()]
    except KeyError:
        msg = f"unknown policy {raw!r}; choose A (mlfq) or B (hrrn)"
        raise ValueError(msg) from None


def prompt_jobs(read: Reader | None = None, write: Writer | None = None) -> list[JobSpec]:
    """Ask for a job count, then the entry time and run duration of each job."""

    read = read or input
    write = write or print
    count = _parse_int(read("How many jobs to schedule? "), "job count")
    if count < 1:
        msg = "at least one job is required"
        raise InvalidJobSpecError(msg)
    specs: list[JobSpec] = []
    for job_id in range(1, count + 1):
        write(f"\nJob #{job_id} details:")
        entry = _parse_int(read("  Entry time: "), f"job {job_id} entry time")
        duration = _parse_int(read("  Run duration: "), f"job {job_id} run duration")
        specs.append(JobSpec(job_id=job_id, entry_time=entry, run_duration=duration))
    return specs


def prompt_policy(read: Reader | None = None, write: Writer | None = None) -> Policy:
    read = read or input
    write = write or print
    write("\nChoose scheduling method:")
    write("  [A] Multi-Level Feedback Queue (MLFQ)")
    write("  [B] Highest Response Ratio Next (HRRN)")
    return parse_policy(read("Enter choice (A/B): "))


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        msg = f"{what} must be an integer, got {raw!r}"
        raise InvalidJobSpecError(msg) from None
