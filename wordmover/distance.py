"""Pairwise word distances and the cross-document cost matrix."""
from __future__ import annotations

import math
from typing import Sequence

from .dictionary import Dictionary
from .embeddings.base import WordVectorModel
from .matrix import Matrix


def euclidean_distance(left: Sequence[float], right: Sequence[float]) -> float:
    if len(left) != len(right):
        raise ValueError(f"Shape mismatch: {len(left)} vs {len(right)}")
    return math.sqrt(sum((a - b) * (a - b) for a, b in zip(left, right)))


def build_distance_matrix(
    dictionary: Dictionary,
    dict1: Dictionary,
    dict2: Dictionary,
    model: WordVectorModel,
) -> Matrix:
    """Fill ``matrix[i, j]`` for words of ``dict1`` (rows) against ``dict2`` (columns).

    Same-document pairs and pairs lacking an embedding stay at zero, so the
    matrix is asymmetric and sparse.
    """
    matrix = Matrix(len(dictionary))
    vectors = {word: model.word_to_vector(word) for word in dictionary}
    rows = [(i, vectors[word]) for word, i in dictionary.items() if word in dict1]
    cols = [(j, vectors[word]) for word, j in dictionary.items() if word in dict2]
    for i, left in rows:
        if left is None:
            continue
        for j, right in cols:
            if right is None:
                continue
            matrix[i, j] = euclidean_distance(left, right)
    return matrix
