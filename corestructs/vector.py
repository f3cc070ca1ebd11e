"""A growable array of values that doubles its capacity when full."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

SCALE_FACTOR = 2


class Vector:
    """Dynamic array with an explicit capacity that grows by ``SCALE_FACTOR``."""

    def __init__(self, initial_capacity: int) -> None:
        initial_capacity = operator.index(initial_capacity)
        if initial_capacity < 0:
            raise ValueError("initial capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = initial_capacity

    @property
    def capacity(self) -> int:
        """Number of elements the vector can hold before it must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def _check_index(self, index: Any) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of bounds for size {len(self._items)}")
        return index

    def __getitem__(self, index: int) -> Any:
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check_index(index)] = value

    def _grow(self) -> None:
        self._capacity = max(self._capacity * SCALE_FACTOR, 1)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index``, shifting later elements right."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of bounds for size {len(self._items)}")
        if len(self._items) == self._capacity:
            self._grow()
        self._items.insert(index, value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self.insert(len(self._items), value)

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        return self._items.pop(self._check_index(index))

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self.remove(len(self._items) - 1)

    def find(self, value: Any) -> int:
        """Return the index of the first occurrence of ``value``, or -1."""
        return next((i for i, item in enumerate(self._items) if item == value), -1)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"Vector({self}, capacity={self._capacity})"