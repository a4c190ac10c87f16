"""Shared fixtures for the jug_lab tests."""

import pytest

from jug_lab.core.state import PuzzleState
from jug_lab.problems.water_jug import WaterJugProblem


@pytest.fixture
def five_three():
    """Classic puzzle: measure 4 with a 5 and a 3."""
    return WaterJugProblem(5, 3, start=(0, 0), goal=(4, 0))


@pytest.fixture
def empty_five_three():
    return PuzzleState.from_amounts(5, 3, 0, 0)
