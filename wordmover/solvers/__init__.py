"""Distance solver registry and helpers."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from .base import DistanceSolver
from .strategies import RelaxedTransportSolver, SinkhornSolver, WeightedCostSolver

_SOLVER_FACTORIES: Dict[str, Callable[[], DistanceSolver]] = {
    "weighted": lambda: WeightedCostSolver(),
    "relaxed": lambda: RelaxedTransportSolver(),
    "sinkhorn": lambda: SinkhornSolver(),
}

__all__ = [
    "DistanceSolver",
    "RelaxedTransportSolver",
    "SinkhornSolver",
    "WeightedCostSolver",
    "available_solvers",
    "describe_solvers",
    "get_solver",
]


def get_solver(key: str) -> DistanceSolver:
    try:
        factory = _SOLVER_FACTORIES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown distance solver '{key}'") from exc
    return factory()


def available_solvers() -> Iterable[str]:
    return _SOLVER_FACTORIES.keys()


def describe_solvers() -> List[dict]:
    descriptions: List[dict] = []
    for key, factory in _SOLVER_FACTORIES.items():
        instance = factory()
        descriptions.append(
            {
                "key": key,
                "description": instance.description,
                "name": getattr(instance, "name", key),
            }
        )
    return descriptions
