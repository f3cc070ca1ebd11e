"""A priority queue kept as an ascending sorted array."""

from __future__ import annotations

import bisect
import operator
from collections.abc import Iterator
from typing import Any

SCALE_FACTOR = 2


class SortedPriorityQueue:
    """Max-priority queue: the largest value is served first."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of elements the queue can hold before it must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from highest to lowest priority."""
        return iter(self._items[::-1])

    def has_items(self) -> bool:
        """True when the queue is not empty."""
        return bool(self._items)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` in its sorted position."""
        if len(self._items) >= self._capacity:
            self._capacity = max(self._capacity * SCALE_FACTOR, 1)
        bisect.insort_left(self._items, value)

    def dequeue(self) -> Any:
        """Remove and return the highest-priority element."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the highest-priority element without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"SortedPriorityQueue({self}, capacity={self._capacity})"