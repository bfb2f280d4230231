from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import evaluation, workload
from .errors import DegenerateSimulationError, SchedulingInvariantError
from .feedback_queue import FeedbackQueueConfig
from .scheduler import Policy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate single-CPU job scheduling and report metrics.")
    parser.add_argument(
        "jobs",
        nargs="*",
        metavar="ENTRY:DURATION",
        help="Jobs in input order. When omitted the jobs are read interactively.",
    )
    parser.add_argument(
        "--policy",
        type=str,
        default=None,
        help="A/mlfq for the feedback queue, B/hrrn for response ratio, or 'all' to compare both.",
    )
    parser.add_argument("--interactive", action="store_true", help="Prompt for jobs and policy.")
    parser.add_argument(
        "--mlfq-quanta",
        type=str,
        default="4,8,0",
        help="Comma-separated quantum per feedback queue level; 0 on the last level means run to completion.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser


def parse_quanta(raw: str) -> tuple[Optional[int], ...]:
    values = [int(item.strip()) for item in raw.split(",") if item.strip()]
    if not values:
        msg = "mlfq-quanta must contain at least one value"
        raise ValueError(msg)
    if values[-1] == 0:
        return (*values[:-1], None)
    return tuple(values)


def parse_policies(raw: str | None) -> list[Policy]:
    if raw is None or raw.strip().lower() == "all":
        return list(Policy)
    return [workload.parse_policy(raw)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.interactive and args.jobs:
        parser.error("--interactive cannot be combined with jobs on the command line")
    interactive = args.interactive or not args.jobs
    try:
        config = FeedbackQueueConfig(quanta=parse_quanta(args.mlfq_quanta))
        if interactive:
            print("=== CPU Scheduler Simulator ===")
            specs = workload.prompt_jobs()
            policies = [workload.prompt_policy()] if args.policy is None else parse_policies(args.policy)
        else:
            specs = workload.parse_job_specs(args.jobs)
            policies = parse_policies(args.policy)
    except ValueError as exc:
        parser.error(str(exc))
    except EOFError:
        parser.error("input ended before every answer was given")

    try:
        outcomes = evaluation.evaluate_suite(policies, specs, config=config)
    except DegenerateSimulationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except SchedulingInvariantError as exc:
        print(f"internal error: {exc}", file=sys.stderr)
        return 3

    for outcome in outcomes:
        print()
        print(outcome.report.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
