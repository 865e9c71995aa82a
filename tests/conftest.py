"""Test configuration and fixtures."""

import pytest

from wordmover.comparator import WordVectorComparator
from wordmover.embeddings import KeyedVectors
from wordmover.solvers import WeightedCostSolver

# Fixed 3-d vectors so distances can be checked by hand.
SNOW_VECTORS = {
    "намело": [1.0, 0.0, 0.0],
    "сугробы": [0.0, 1.0, 0.0],
    "у": [0.0, 0.0, 1.0],
    "нашего": [1.0, 1.0, 0.0],
    "крыльца": [3.0, 4.0, 0.0],
}


@pytest.fixture(name="snow_model")
def fixture_snow_model() -> KeyedVectors:
    """In-memory embedding table over the five test words."""
    return KeyedVectors.from_mapping(SNOW_VECTORS)


@pytest.fixture(name="comparator")
def fixture_comparator(snow_model: KeyedVectors) -> WordVectorComparator:
    return WordVectorComparator(snow_model, WeightedCostSolver())


class RecordingSolver:
    """Solver double that records its inputs and returns a fixed value."""

    name = "recording"
    description = "Records the last call."

    def __init__(self, value: float = 15.692) -> None:
        self.value = value
        self.calls = []

    def solve(self, bow1, bow2, cost_matrix):
        self.calls.append((list(bow1), list(bow2), cost_matrix))
        return self.value


@pytest.fixture(name="recording_solver")
def fixture_recording_solver() -> RecordingSolver:
    return RecordingSolver()
