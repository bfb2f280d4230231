import pytest

from cpu_sched_sim.errors import InvalidJobSpecError, SchedulingInvariantError
from cpu_sched_sim.job import Job, JobSpec


@pytest.mark.parametrize(
    ("entry", "duration"),
    [(-1, 3), (0, 0), (0, -2), (1.5, 3), (0, 2.0), (True, 3), ("1", 3)],
)
def test_spec_rejects_malformed_values(entry, duration):
    with pytest.raises(InvalidJobSpecError):
        JobSpec(job_id=1, entry_time=entry, run_duration=duration)


def test_invalid_spec_is_a_value_error():
    with pytest.raises(ValueError):
        JobSpec(job_id=1, entry_time=0, run_duration=0)


def test_from_spec_starts_with_full_time_left():
    job = Job.from_spec(JobSpec(job_id=3, entry_time=2, run_duration=6))
    assert job.time_left == 6
    assert job.first_run_time is None
    assert job.completion_time is None
    assert job.queue_level == 0
    assert (job.job_id, job.entry_time, job.run_duration) == (3, 2, 6)


def test_first_run_time_is_set_once():
    job = Job.from_spec(JobSpec(job_id=1, entry_time=0, run_duration=5))
    job.mark_dispatched(2)
    job.mark_dispatched(7)
    assert job.first_run_time == 2


def test_dispatch_before_entry_is_a_defect():
    job = Job.from_spec(JobSpec(job_id=1, entry_time=4, run_duration=5))
    with pytest.raises(SchedulingInvariantError):
        job.mark_dispatched(3)


def test_running_past_zero_is_a_defect():
    job = Job.from_spec(JobSpec(job_id=1, entry_time=0, run_duration=2))
    job.run(2)
    with pytest.raises(SchedulingInvariantError):
        job.run(1)


def test_completion_requires_no_time_left():
    job = Job.from_spec(JobSpec(job_id=1, entry_time=0, run_duration=2))
    job.mark_dispatched(0)
    job.run(1)
    with pytest.raises(SchedulingInvariantError):
        job.mark_completed(1)


def test_completed_job_is_read_only():
    job = Job.from_spec(JobSpec(job_id=1, entry_time=0, run_duration=3))
    job.mark_dispatched(0)
    job.run(3)
    job.mark_completed(3)
    assert job.is_complete
    for mutate in (lambda: job.run(1), lambda: job.mark_dispatched(4), lambda: job.demote(2), lambda: job.mark_completed(5)):
        with pytest.raises(SchedulingInvariantError):
            mutate()
    assert job.completion_time == 3


def test_demote_clamps_at_lowest_level():
    job = Job.from_spec(JobSpec(job_id=1, entry_time=0, run_duration=3))
    levels = []
    for _ in range(4):
        job.demote(2)
        levels.append(job.queue_level)
    assert levels == [1, 2, 2, 2]
