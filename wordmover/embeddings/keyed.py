"""In-memory word vector table."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..logging_config import get_logger
from .base import Vector, vec_sum

logger = get_logger("embeddings.keyed")


@dataclass
class KeyedVectors:
    """Word -> vector table; a word's index is its row position."""

    name: str = "keyed"
    description: str = "Word vectors held in memory, loaded from word2vec text format."
    _index: Dict[str, int] = field(default_factory=dict)
    _vectors: List[Vector] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, vectors: Mapping[str, Sequence[float]]) -> "KeyedVectors":
        model = cls()
        for word, vector in vectors.items():
            model.add(word, vector)
        return model

    @classmethod
    def load(cls, path: Path) -> "KeyedVectors":
        """Read ``word v1 v2 ...`` lines, skipping a ``count dim`` header."""
        model = cls()
        with Path(path).open(encoding="utf-8") as handle:
            for word, vector in _parse_lines(handle):
                model.add(word, vector)
        logger.info(f"Loaded {len(model)} vectors (dim={model.dimension}) from {path}")
        return model

    @property
    def dimension(self) -> int:
        return len(self._vectors[0]) if self._vectors else 0

    def add(self, word: str, vector: Sequence[float]) -> None:
        values = [float(value) for value in vector]
        if self._vectors and len(values) != self.dimension:
            raise ValueError(
                f"Vector for '{word}' has {len(values)} values, expected {self.dimension}"
            )
        if word in self._index:
            self._vectors[self._index[word]] = values
            return
        self._index[word] = len(self._vectors)
        self._vectors.append(values)

    def word_index(self, word: str) -> Optional[int]:
        return self._index.get(word)

    def word_to_vector(self, word: str) -> Optional[Vector]:
        index = self._index.get(word)
        if index is None:
            return None
        return list(self._vectors[index])

    def sentence_to_vector(self, text: str) -> Optional[Vector]:
        known = [
            self._vectors[self._index[word]] for word in text.split() if word in self._index
        ]
        if not known:
            return None
        return vec_sum(known)

    def __len__(self) -> int:
        return len(self._vectors)

    def __contains__(self, word: object) -> bool:
        return word in self._index


def _parse_lines(lines: Iterable[str]) -> Iterable[Tuple[str, List[float]]]:
    for lineno, line in enumerate(lines, start=1):
        parts = line.rstrip("\n").split(" ")
        parts = [part for part in parts if part]
        if not parts:
            continue
        if lineno == 1 and len(parts) == 2 and all(part.isdigit() for part in parts):
            continue
        word, raw = parts[0], parts[1:]
        try:
            vector = [float(value) for value in raw]
        except ValueError as exc:
            raise ValueError(f"Malformed vector on line {lineno}") from exc
        yield word, vector
