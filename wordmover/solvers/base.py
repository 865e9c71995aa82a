"""Base interfaces for distance solvers."""
from __future__ import annotations

from typing import List, Protocol, Sequence, Tuple

from ..matrix import Matrix


class DistanceSolver(Protocol):
    """Protocol for pluggable transport solvers.

    ``bow1`` and ``bow2`` are distributions over the same joined vocabulary
    and ``cost_matrix`` holds word distances for rows of the first document
    against columns of the second. Implementations must be deterministic.
    """

    name: str
    description: str

    def solve(
        self,
        bow1: Sequence[float],
        bow2: Sequence[float],
        cost_matrix: Matrix,
    ) -> float:
        ...


def support(bow: Sequence[float]) -> List[Tuple[int, float]]:
    """Positions carrying mass, with their weights."""
    return [(idx, weight) for idx, weight in enumerate(bow) if weight > 0]
