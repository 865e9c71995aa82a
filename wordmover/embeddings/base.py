"""Base interface for word embedding sources."""
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

Vector = List[float]


class WordVectorModel(Protocol):
    """Protocol for anything that maps words to fixed-length vectors."""

    name: str
    description: str

    def word_index(self, word: str) -> Optional[int]:
        ...

    def word_to_vector(self, word: str) -> Optional[Vector]:
        ...

    def sentence_to_vector(self, text: str) -> Optional[Vector]:
        ...


def vec_sum(vectors: Iterable[Vector]) -> Vector:
    """Elementwise sum; empty input gives an empty vector."""
    total: Vector = []
    for vector in vectors:
        if not total:
            total = [0.0] * len(vector)
        for idx, value in enumerate(vector):
            total[idx] += value
    return total
