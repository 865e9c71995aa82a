"""Concrete distance solvers."""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import List, Sequence

from ..logging_config import get_logger
from ..matrix import Matrix
from .base import DistanceSolver, support

logger = get_logger("solvers")


@dataclass
class WeightedCostSolver(DistanceSolver):
    name: str = "weighted"
    description: str = "Expected word distance under independent word draws."

    def solve(
        self,
        bow1: Sequence[float],
        bow2: Sequence[float],
        cost_matrix: Matrix,
    ) -> float:
        total = 0.0
        for i, left in support(bow1):
            for j, right in support(bow2):
                total += left * right * cost_matrix[i, j]
        return total


@dataclass
class RelaxedTransportSolver(DistanceSolver):
    name: str = "relaxed"
    description: str = "Relaxed WMD lower bound: each word moves to its nearest counterpart."

    def solve(
        self,
        bow1: Sequence[float],
        bow2: Sequence[float],
        cost_matrix: Matrix,
    ) -> float:
        source = support(bow1)
        target = support(bow2)
        if not source or not target:
            return 0.0
        forward = sum(
            weight * min(cost_matrix[i, j] for j, _ in target) for i, weight in source
        )
        backward = sum(
            weight * min(cost_matrix[i, j] for i, _ in source) for j, weight in target
        )
        return max(forward, backward)


@dataclass
class SinkhornSolver(DistanceSolver):
    """Entropy-regularised optimal transport (Sinkhorn-Knopp).

    Both supports are renormalised to unit mass before scaling, since mass of
    out-of-vocabulary tokens is dropped upstream.
    """

    name: str = "sinkhorn"
    description: str = "Entropy-regularised optimal transport via Sinkhorn iterations."
    epsilon: float = 0.1
    max_iter: int = 200
    threshold: float = 1e-6

    def __post_init__(self) -> None:
        # Costs are scaled into [0, 1], so exp(-1 / epsilon) is the smallest kernel entry.
        if self.epsilon <= 0 or math.exp(-1.0 / self.epsilon) < sys.float_info.min:
            raise ValueError(
                f"Epsilon must satisfy exp(-1/ε) > {sys.float_info.min}, got ε={self.epsilon}"
            )

    def solve(
        self,
        bow1: Sequence[float],
        bow2: Sequence[float],
        cost_matrix: Matrix,
    ) -> float:
        source = support(bow1)
        target = support(bow2)
        if not source or not target:
            return 0.0
        a = _unit_mass([weight for _, weight in source])
        b = _unit_mass([weight for _, weight in target])
        cost = [[cost_matrix[i, j] for j, _ in target] for i, _ in source]

        # Scale by the largest cost so epsilon is relative to the problem.
        scale = max((value for row in cost for value in row), default=0.0) or 1.0
        kernel = [[math.exp(-value / (scale * self.epsilon)) for value in row] for row in cost]

        u = [1.0] * len(a)
        v = [1.0] * len(b)
        for iteration in range(1, self.max_iter + 1):
            u = [
                a[i] / max(sum(kernel[i][j] * v[j] for j in range(len(b))), 1e-300)
                for i in range(len(a))
            ]
            v = [
                b[j] / max(sum(kernel[i][j] * u[i] for i in range(len(a))), 1e-300)
                for j in range(len(b))
            ]
            error = sum(
                abs(u[i] * sum(kernel[i][j] * v[j] for j in range(len(b))) - a[i])
                for i in range(len(a))
            )
            if error < self.threshold:
                logger.debug(f"Sinkhorn converged after {iteration} iterations")
                break
        else:
            logger.debug(f"Sinkhorn stopped after {self.max_iter} iterations without converging")

        return sum(
            u[i] * kernel[i][j] * v[j] * cost[i][j]
            for i in range(len(a))
            for j in range(len(b))
        )


def _unit_mass(weights: List[float]) -> List[float]:
    total = sum(weights)
    return [weight / total for weight in weights]
