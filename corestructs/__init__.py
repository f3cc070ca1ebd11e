"""Classic data structures: vector, circular queue, linked list, priority queues, max-heap and binary search tree."""

__version__ = "0.1.0"

__all__ = [
    "vector",
    "circular_queue",
    "linked_list",
    "priority_queue",
    "heap",
    "tree",
    "cli",
]