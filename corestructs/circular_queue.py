"""A fixed-capacity FIFO queue stored in a ring buffer."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that is at capacity."""


class CircularQueue:
    """Bounded first-in, first-out queue over a circular buffer."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[Any] = [None] * capacity
        self._capacity = capacity
        self._front = 0
        self._end = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Maximum number of elements the queue holds."""
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        snapshot = [
            self._data[(self._front + offset) % self._capacity]
            for offset in range(self._size)
        ]
        return iter(snapshot)

    def is_empty(self) -> bool:
        """True when the queue holds no elements."""
        return self._size == 0

    def is_full(self) -> bool:
        """True when the queue is at capacity."""
        return self._size == self._capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the end of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._data[self._end] = value
        self._end = (self._end + 1) % self._capacity
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._data[self._front]
        self._data[self._front] = None
        self._front = (self._front + 1) % self._capacity
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the front element without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._data[self._front]

    def _slot_in_use(self, slot: int) -> bool:
        if self._size == 0:
            return False
        front, end = self._front, self._end
        if front <= end and front <= slot < end:
            return True
        return front >= end and (slot >= front or slot < end)

    def memory_layout(self) -> str:
        """Show the buffer slot by slot, with ``_`` for unused slots."""
        cells = (
            str(self._data[slot]) if self._slot_in_use(slot) else "_"
            for slot in range(self._capacity)
        )
        return "[" + ", ".join(cells) + "]"

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"CircularQueue({self}, capacity={self._capacity})"