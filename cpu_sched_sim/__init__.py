"""Single-CPU job scheduling simulator with feedback queue and response ratio policies."""

from .errors import (
	DegenerateSimulationError,
	InvalidJobSpecError,
	SchedulingError,
	SchedulingInvariantError,
)
from .job import Job, JobSpec
from .scheduler import CompletedRun, ExecutionSlice, Policy, SchedulingPolicy
from .feedback_queue import FeedbackQueueConfig, FeedbackQueueScheduler
from .response_ratio import ResponseRatioScheduler
from .simulator import create_scheduler, execute
from . import workload
from . import metrics
from . import evaluation

__all__ = [
	"CompletedRun",
	"DegenerateSimulationError",
	"ExecutionSlice",
	"FeedbackQueueConfig",
	"FeedbackQueueScheduler",
	"InvalidJobSpecError",
	"Job",
	"JobSpec",
	"Policy",
	"ResponseRatioScheduler",
	"SchedulingError",
	"SchedulingInvariantError",
	"SchedulingPolicy",
	"create_scheduler",
	"evaluation",
	"execute",
	"metrics",
	"workload",
]
