"""A singly linked list of values."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class SinglyLinkedList:
    """Linked list whose front is the cheap end for push and pop."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return iter([node.data for node in self._nodes()])

    def _check_index(self, index: Any, *, allow_end: bool = False) -> int:
        index = operator.index(index)
        limit = self._size if allow_end else self._size - 1
        if not 0 <= index <= limit:
            raise IndexError(f"index {index} out of bounds for size {self._size}")
        return index

    def _node_at(self, index: int) -> _Node:
        return next(islice(self._nodes(), index, None))

    def __getitem__(self, index: int) -> Any:
        return self._node_at(self._check_index(index)).data

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(self._check_index(index)).data = value

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        index = self._check_index(index, allow_end=True)
        if index == 0:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        index = self._check_index(index)
        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(index - 1)
            assert previous.next is not None
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        return removed.data

    def push(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.insert(0, value)

    def pop(self) -> Any:
        """Remove and return the front element."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self.remove(0)

    def is_empty(self) -> bool:
        """True when the list holds no elements."""
        return self._head is None

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self})"