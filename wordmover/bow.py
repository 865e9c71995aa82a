"""Bag-of-words vectors over a :class:`Dictionary`."""
from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional

from .dictionary import Dictionary


def bow(tokens: Iterable[str], dictionary: Dictionary) -> List[int]:
    """Count tokens and lay the counts out by dictionary position.

    Tokens missing from ``dictionary`` are counted but have no slot, so their
    mass is dropped.
    """
    counts = Counter(tokens)
    vector = [0] * len(dictionary)
    for word, freq in counts.items():
        index = dictionary.word_index(word)
        if index is not None:
            vector[index] = freq
    return vector


def bow_normalized(tokens: Iterable[str], dictionary: Dictionary) -> Optional[List[float]]:
    """Return counts divided by the number of input tokens.

    ``None`` only for an empty token sequence. A document whose tokens are all
    unknown still yields a zero vector.
    """
    token_list = list(tokens)
    normalizer = len(token_list)
    if normalizer == 0:
        return None
    return [freq / normalizer for freq in bow(token_list, dictionary)]
