from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Sequence

from .errors import SchedulingInvariantError
from .job import Job
from .scheduler import CompletedRun, ExecutionSlice, Policy, SchedulingPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeedbackQueueConfig:
    """Per-level time quanta, highest priority first. ``None`` runs to completion."""

    quanta: tuple[Optional[int], ...] = (4, 8, None)

    def __post_init__(self) -> None:
        if not self.quanta:
            msg = "at least one queue level is required"
            raise ValueError(msg)
        last = len(self.quanta) - 1
        for level, quantum in enumerate(self.quanta):
            if quantum is None:
                if level != last:
                    msg = "only the lowest queue level may have an unbounded quantum"
                    raise ValueError(msg)
                continue
            if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
                msg = f"quantum for level {level} must be a positive integer"
                raise ValueError(msg)

    @property
    def lowest_level(self) -> int:
        return len(self.quanta) - 1


class FeedbackQueueScheduler(SchedulingPolicy):
    """Preemptive multi-level feedback queue.

    New arrivals always join level 0. A job that uses up its quantum without
    finishing drops one level; levels never rise again. Each level is a strict
    FIFO queue and the highest non-empty level is always served first.
    """

    policy = Policy.FEEDBACK_QUEUE

    def __init__(self, config: FeedbackQueueConfig | None = None) -> None:
        super().__init__()
        self.config = config or FeedbackQueueConfig()

    def _simulate(self, jobs: list[Job]) -> CompletedRun:
        run = CompletedRun(policy=self.policy)
        levels: list[Deque[Job]] = [deque() for _ in self.config.quanta]
        pending: Deque[Job] = deque(jobs)
        remaining = len(jobs)
        now = 0

        while remaining:
            self._admit(pending, levels[0], now)
            level = _highest_ready_level(levels)
            if level is None:
                if not pending:
                    msg = f"{remaining} jobs unfinished with no queued or pending work at {now}"
                    raise SchedulingInvariantError(msg)
                next_arrival = pending[0].entry_time
                logger.debug("CPU idle from %d to %d", now, next_arrival)
                run.idle_time += next_arrival - now
                now = next_arrival
                continue

            current = levels[level].popleft()
            current.mark_dispatched(now)
            quantum = self.config.quanta[level]
            slice_length = current.time_left if quantum is None else min(current.time_left, quantum)
            logger.debug("t=%d dispatch job %d from level %d for up to %d units", now, current.job_id, level, slice_length)

            start = now
            for _ in range(slice_length):
                now += 1
                current.run()
                self._admit(pending, levels[0], now)
            run.timeline.append(ExecutionSlice(current.job_id, start, now, level))

            if current.time_left == 0:
                current.mark_completed(now)
                run.jobs.append(current)
                remaining -= 1
                logger.debug("t=%d job %d completed", now, current.job_id)
            else:
                current.demote(self.config.lowest_level)
                levels[current.queue_level].append(current)
                logger.debug("t=%d job %d moved to level %d", now, current.job_id, current.queue_level)

        run.end_time = now
        logger.info("%s finished %d jobs at t=%d (idle %d)", self.policy.display_name, len(run.jobs), now, run.idle_time)
        return run

    @staticmethod
    def _admit(pending: Deque[Job], top_level: Deque[Job], now: int) -> None:
        while pending and pending[0].entry_time <= now:
            job = pending.popleft()
            top_level.append(job)
            logger.debug("t=%d admit job %d", now, job.job_id)


def _highest_ready_level(levels: Sequence[Deque[Job]]) -> int | None:
    for index, queue in enumerate(levels):
        if queue:
            return index
    return None
