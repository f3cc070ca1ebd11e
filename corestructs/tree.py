"""A binary search tree with breadth-first and depth-first traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class TraversalType(Enum):
    """Order in which a depth-first traversal visits nodes."""

    PRE_ORDER = 0
    IN_ORDER = 1
    POST_ORDER = 2


@dataclass(slots=True)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.add(value)

    def __len__(self) -> int:
        return self._size

    def add(self, data: Any) -> None:
        """Insert ``data`` below the leaf where the search for it ends."""
        node = _Node(data)
        if self._root is None:
            self._root = node
        else:
            current = self._root
            while True:
                if data < current.data:
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right
        self._size += 1

    def breadth_first(self) -> Iterator[Any]:
        """Yield values level by level, left to right."""
        if self._root is None:
            return
        pending = deque([self._root])
        while pending:
            node = pending.popleft()
            yield node.data
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)

    def depth_first(self, order: TraversalType | int) -> Iterator[Any]:
        """Yield values in the given depth-first ``order``."""
        walkers: dict[TraversalType, Callable[[], Iterator[Any]]] = {
            TraversalType.PRE_ORDER: self._pre_order,
            TraversalType.IN_ORDER: self._in_order,
            TraversalType.POST_ORDER: self._post_order,
        }
        return walkers[TraversalType(order)]()

    def _pre_order(self) -> Iterator[Any]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _in_order(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def _post_order(self) -> Iterator[Any]:
        reversed_order = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.breadth_first())!r})"