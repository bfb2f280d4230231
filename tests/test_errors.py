import pytest

from cpu_sched_sim.errors import (
    DegenerateSimulationError,
    InvalidJobSpecError,
    SchedulingError,
    SchedulingInvariantError,
)


@pytest.mark.parametrize(
    ("error", "kind", "also"),
    [
        (InvalidJobSpecError, "invalid-input", ValueError),
        (DegenerateSimulationError, "degenerate", SchedulingError),
        (SchedulingInvariantError, "invariant", AssertionError),
    ],
)
def test_error_kinds(error, kind, also):
    exc = error("boom")
    assert exc.kind == kind
    assert isinstance(exc, SchedulingError)
    assert isinstance(exc, also)


def test_kinds_are_distinct():
    kinds = {InvalidJobSpecError.kind, DegenerateSimulationError.kind, SchedulingInvariantError.kind}
    assert len(kinds) == 3
    assert SchedulingError.kind not in kinds
