from __future__ import annotations

import logging
from collections import deque
from fractions import Fraction
from typing import Deque

from .job import Job
from .scheduler import CompletedRun, ExecutionSlice, Policy, SchedulingPolicy

logger = logging.getLogger(__name__)


def response_ratio(job: Job, now: int) -> Fraction:
    """(time waited + run duration) / run duration, kept exact."""

    return Fraction(now - job.entry_time + job.run_duration, job.run_duration)


class ResponseRatioScheduler(SchedulingPolicy):
    """Non-preemptive Highest Response Ratio Next.

    Ties go to the job that became ready first.
    """

    policy = Policy.RESPONSE_RATIO

    def _simulate(self, jobs: list[Job]) -> CompletedRun:
        run = CompletedRun(policy=self.policy)
        pending: Deque[Job] = deque(jobs)
        ready: list[Job] = []
        now = 0

        while pending or ready:
            while pending and pending[0].entry_time <= now:
                ready.append(pending.popleft())

            if not ready:
                next_arrival = pending[0].entry_time
                logger.debug("CPU idle from %d to %d", now, next_arrival)
                run.idle_time += next_arrival - now
                now = next_arrival
                continue

            index, current = max(enumerate(ready), key=lambda item: response_ratio(item[1], now))
            del ready[index]
            logger.debug(
                "t=%d dispatch job %d (ratio %s, %d ready)",
                now,
                current.job_id,
                response_ratio(current, now),
                len(ready),
            )

            current.mark_dispatched(now)
            start = now
            current.run(current.time_left)
            now += current.run_duration
            current.mark_completed(now)
            run.timeline.append(ExecutionSlice(current.job_id, start, now))
            run.jobs.append(current)

        run.end_time = now
        logger.info("%s finished %d jobs at t=%d (idle %d)", self.policy.display_name, len(run.jobs), now, run.idle_time)
        return run
