from __future__ import annotations

from typing import Sequence

from .feedback_queue import FeedbackQueueConfig, FeedbackQueueScheduler
from .response_ratio import ResponseRatioScheduler
from .scheduler import CompletedRun, Policy, SchedulingPolicy
from .job import JobSpec


def create_scheduler(policy: Policy, *, config: FeedbackQueueConfig | None = None) -> SchedulingPolicy:
    if policy is Policy.FEEDBACK_QUEUE:
        return FeedbackQueueScheduler(config)
    if policy is Policy.RESPONSE_RATIO:
        return ResponseRatioScheduler()
    msg = f"unknown policy {policy!r}"
    raise ValueError(msg)


def execute(
    policy: Policy,
    specs: Sequence[JobSpec],
    *,
    config: FeedbackQueueConfig | None = None,
) -> CompletedRun:
    """Run ``specs`` under ``policy`` on a fresh scheduler."""

    return create_scheduler(policy, config=config).execute(specs)
