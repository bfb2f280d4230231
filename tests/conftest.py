from __future__ import annotations

import pytest

from cpu_sched_sim.workload import from_pairs


@pytest.fixture
def mixed_specs():
    """Bursty arrivals with an idle gap and a long job that reaches the lowest level."""
    return from_pairs([(0, 7), (2, 4), (3, 15), (3, 1), (9, 5), (30, 2), (31, 9)])
