from __future__ import annotations


class SchedulingError(Exception):
    """Base class for every failure raised by the simulator."""

    kind = "error"


class InvalidJobSpecError(SchedulingError, ValueError):
    """Job input that must be rejected before it reaches a scheduler."""

    kind = "invalid-input"


class DegenerateSimulationError(SchedulingError):
    """A run whose metrics are undefined (no jobs, or zero makespan)."""

    kind = "degenerate"


class SchedulingInvariantError(SchedulingError, AssertionError):
    """Internal bookkeeping went wrong; indicates a programming defect."""

    kind = "invariant"
