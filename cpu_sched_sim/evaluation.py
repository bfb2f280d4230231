from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from . import metrics
from .feedback_queue import FeedbackQueueConfig
from .job import JobSpec
from .scheduler import CompletedRun, Policy
from .simulator import create_scheduler

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EvaluationOutcome:
    name: str
    run: CompletedRun
    report: metrics.Report

    @property
    def per_job(self) -> tuple[metrics.JobMetrics, ...]:
        return self.report.per_job

    @property
    def aggregate(self) -> metrics.AggregateMetrics:
        return self.report.aggregate


def evaluate_policy(
    policy: Policy,
    specs: Sequence[JobSpec],
    *,
    config: FeedbackQueueConfig | None = None,
) -> EvaluationOutcome:
    scheduler = create_scheduler(policy, config=config)
    run = scheduler.execute(specs)
    report = scheduler.results()
    logger.info(
        "%s: mean wait %.2f, mean turnaround %.2f, utilization %.2f%%",
        policy.display_name,
        report.aggregate.mean_wait_time,
        report.aggregate.mean_turnaround_time,
        report.aggregate.cpu_utilization,
    )
    return EvaluationOutcome(name=policy.display_name, run=run, report=report)


def evaluate_suite(
    policies: Sequence[Policy],
    specs: Sequence[JobSpec],
    *,
    config: FeedbackQueueConfig | None = None,
) -> list[EvaluationOutcome]:
    return [evaluate_policy(policy, specs, config=config) for policy in policies]
