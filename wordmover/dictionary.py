"""Vocabulary with stable, reindexable integer positions."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class Dictionary:
    """Ordered, deduplicated mapping of words to integer positions.

    New words take the next counter value, so before :meth:`reindex` indices
    are only guaranteed to be unique. After :meth:`reindex` they are exactly
    ``0..n-1`` in lexicographic word order.

    A dictionary has a single writer. ``insert`` checks then assigns, so
    concurrent inserts on one instance can hand out duplicate indices; share
    an instance across threads only behind external locking.
    """

    def __init__(self) -> None:
        self._data: Dict[str, int] = {}
        self._counter = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        dictionary = cls()
        dictionary.extend(words)
        dictionary.reindex()
        return dictionary

    def insert(self, word: str) -> None:
        if word in self._data:
            return
        self._data[word] = self._counter
        self._counter += 1

    def extend(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def reindex(self) -> None:
        self._counter = 0
        for word in sorted(self._data):
            self._data[word] = self._counter
            self._counter += 1

    def join(self, other: "Dictionary") -> "Dictionary":
        """Return the reindexed union of both vocabularies."""
        joined = Dictionary.from_words(self)
        joined.extend(other)
        joined.reindex()
        return joined

    def contains(self, word: str) -> bool:
        return word in self._data

    def word_index(self, word: str) -> Optional[int]:
        return self._data.get(word)

    def is_empty(self) -> bool:
        return not self._data

    def items(self) -> List[Tuple[str, int]]:
        return [(word, self._data[word]) for word in sorted(self._data)]

    def __contains__(self, word: object) -> bool:
        return word in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Dictionary({dict(self.items())!r})"
