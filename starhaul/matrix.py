"""Compact storage for symmetric square matrices."""

from __future__ import annotations

from math import isqrt
from typing import Any, Generic, Iterable, TypeVar

T = TypeVar("T")


class SymmetricMatrix(Generic[T]):
    """A symmetric matrix that stores only its upper triangle, row by row."""

    def __init__(self, data: Iterable[T]) -> None:
        self._data: list[T] = list(data)
        size = len(self._data)
        order = (isqrt(8 * size + 1) - 1) // 2
        if order * (order + 1) // 2 != size:
            raise ValueError(
                f"{size} values do not fill the upper triangle of a square matrix"
            )
        self._order = order

    @classmethod
    def with_order(cls, order: int, fill: Any = 0) -> "SymmetricMatrix[Any]":
        """Create an order x order matrix with every entry set to ``fill``."""
        if order < 0:
            raise ValueError("matrix order must not be negative")
        return cls([fill] * ((order * order + order) // 2))

    def order(self) -> int:
        """Number of rows (and columns) of the matrix."""
        return self._order

    def index(self, i: int, j: int) -> int:
        """Position of entry (i, j) in the underlying storage."""
        n = self._order
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"entry ({i}, {j}) is outside a matrix of order {n}")
        if i > j:
            i, j = j, i
        return n * i - (i - 1) * i // 2 + (j - i)

    def __getitem__(self, key: tuple[int, int]) -> T:
        i, j = key
        return self._data[self.index(i, j)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        i, j = key
        self._data[self.index(i, j)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymmetricMatrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"SymmetricMatrix({self._data!r})"