"""A binary max-heap stored in an array."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

SCALE_FACTOR = 2


class MaxHeap:
    """Array-backed max-heap that grows by ``SCALE_FACTOR`` when full."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of elements the heap can hold before it must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in array order."""
        return iter(list(self._data))

    def enqueue(self, value: Any) -> None:
        """Add ``value`` and bubble it up to restore the heap property."""
        if len(self._data) == self._capacity:
            self._capacity = max(self._capacity * SCALE_FACTOR, 1)
        data = self._data
        data.append(value)
        index = len(data) - 1
        while index > 0:
            parent = (index - 1) // 2
            if data[index] <= data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def dequeue(self) -> Any:
        """Remove and return the largest element."""
        data = self._data
        if not data:
            raise IndexError("heap is empty")
        root = data[0]
        last = data.pop()
        if not data:
            return root
        data[0] = last
        size = len(data)
        index = 0
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and data[child] > data[largest]:
                    largest = child
            if largest == index:
                break
            data[index], data[largest] = data[largest], data[index]
            index = largest
        return root

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"MaxHeap({self}, capacity={self._capacity})"

    def render(self) -> str:
        """Draw the heap level by level, roughly centred, as text."""
        size = len(self._data)
        if size == 0:
            return "Heap is empty\n"
        max_level = size.bit_length()
        lines = []
        for level in range(max_level):
            start = (1 << level) - 1
            end = (1 << (level + 1)) - 1
            parts = ["  " * ((1 << (max_level - level - 1)) - 1)]
            gap = "  " * ((1 << (max_level - level)) - 1)
            for j in range(start, min(end, size)):
                parts.append(str(self._data[j]).rjust(2))
                if j < end - 1 and j + 1 < size:
                    parts.append(gap)
            lines.append("".join(parts))
        return "".join(line + "\n" for line in lines) + "\n"