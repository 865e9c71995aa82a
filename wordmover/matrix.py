"""Square grid stored as one flat buffer."""
from __future__ import annotations

from typing import List, Tuple


class Matrix:
    """``size x size`` grid of floats addressed as ``matrix[i, j]``.

    Cells live in a single list at ``i * size + j``. Rows handed out by
    :meth:`row` and :meth:`as_rows` are copies.
    """

    def __init__(self, size: int, default: float = 0.0) -> None:
        if size < 0:
            raise ValueError(f"Matrix size must be non-negative, got {size}")
        self.size = size
        self._data: List[float] = [default] * (size * size)

    def _offset(self, key: Tuple[int, int]) -> int:
        i, j = key
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"Cell ({i}, {j}) out of range for size {self.size}")
        return i * self.size + j

    def __getitem__(self, key: Tuple[int, int]) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        self._data[self._offset(key)] = value

    def __len__(self) -> int:
        return self.size

    def row(self, i: int) -> List[float]:
        start = self._offset((i, 0))
        return self._data[start : start + self.size]

    def as_rows(self) -> List[List[float]]:
        return [self.row(i) for i in range(self.size)]

    def __repr__(self) -> str:
        return f"Matrix(size={self.size})"
