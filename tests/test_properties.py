"""Invariants that must hold for every run, whichever policy produced it."""

from collections import defaultdict

import pytest

from cpu_sched_sim.scheduler import Policy
from cpu_sched_sim.simulator import execute

POLICIES = list(Policy)


@pytest.mark.parametrize("policy", POLICIES)
def test_every_job_completes_exactly_once(policy, mixed_specs):
    run = execute(policy, mixed_specs)
    assert sorted(job.job_id for job in run.jobs) == [spec.job_id for spec in mixed_specs]


@pytest.mark.parametrize("policy", POLICIES)
def test_conservation(policy, mixed_specs):
    for job in execute(policy, mixed_specs).jobs:
        assert job.time_left == 0
        assert job.first_run_time >= job.entry_time
        assert job.completion_time >= job.entry_time + job.run_duration


@pytest.mark.parametrize("policy", POLICIES)
def test_timeline_is_monotonic_and_exclusive(policy, mixed_specs):
    run = execute(policy, mixed_specs)
    previous_end = 0
    served = defaultdict(int)
    for piece in run.timeline:
        assert piece.start >= previous_end
        assert piece.end > piece.start
        previous_end = piece.end
        served[piece.job_id] += piece.length
    assert dict(served) == {spec.job_id: spec.run_duration for spec in mixed_specs}
    assert run.busy_time + run.idle_time == run.end_time == previous_end


def test_queue_level_never_decreases(mixed_specs):
    run = execute(Policy.FEEDBACK_QUEUE, mixed_specs)
    levels = defaultdict(list)
    for piece in run.timeline:
        levels[piece.job_id].append(piece.queue_level)
    assert any(max(seen) == 2 for seen in levels.values())
    for seen in levels.values():
        assert seen == sorted(seen)


def test_first_dispatch_matches_timeline(mixed_specs):
    run = execute(Policy.FEEDBACK_QUEUE, mixed_specs)
    first_seen = {}
    for piece in run.timeline:
        first_seen.setdefault(piece.job_id, piece.start)
    assert first_seen == {job.job_id: job.first_run_time for job in run.jobs}


@pytest.mark.parametrize("policy", POLICIES)
def test_runs_are_deterministic_and_independent(policy, mixed_specs):
    first = execute(policy, mixed_specs)
    second = execute(policy, mixed_specs)
    assert first.timeline == second.timeline
    assert not {id(job) for job in first.jobs} & {id(job) for job in second.jobs}
