"""Command-line demonstrations and timings for the data structures."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time

from corestructs.circular_queue import CircularQueue
from corestructs.heap import MaxHeap
from corestructs.linked_list import SinglyLinkedList
from corestructs.priority_queue import SortedPriorityQueue
from corestructs.tree import BinarySearchTree, TraversalType
from corestructs.vector import Vector

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _report(ok: bool, passed: str, failed: str) -> None:
    print(f"Test passed: {passed}" if ok else f"Test failed: {failed}")


def _filled_vector() -> Vector:
    vector = Vector(5)
    print("Adding elements 0 to 9...")
    for value in range(10):
        vector.append(value)
    return vector


def _vector_self_tests() -> None:
    vector = _filled_vector()
    actual = str(vector)
    ok = actual == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"
    _report(ok, "Elements added correctly.", f"Elements not added correctly. {actual}")

    vector = _filled_vector()
    print("Removing elements...")
    removed = vector.remove(3)
    _report(removed == 3 and len(vector) == 9,
            "Element removed correctly.", "Element not removed correctly.")

    vector = _filled_vector()
    print("Popping element...")
    popped = vector.pop()
    _report(popped == 9 and len(vector) == 9,
            "Element popped correctly.", "Element not popped correctly.")

    vector = _filled_vector()
    print("Pushing element...")
    vector.append(100)
    _report(vector[len(vector) - 1] == 100 and len(vector) == 11,
            "Element pushed correctly.", "Element not pushed correctly.")

    vector = _filled_vector()
    print("Inserting element at index 3...")
    vector.insert(3, 99)
    _report(vector[3] == 99 and len(vector) == 11,
            "Element inserted correctly.", "Element not inserted correctly.")


def _vector_speed_test(count: int) -> None:
    vector = Vector(5)
    print(f"Speed test: Adding {count} elements...")
    start = time.process_time()
    for value in range(count):
        vector.append(value)
    elapsed = time.process_time() - start
    print(f"Time taken to add {count} elements: {elapsed:.8f} seconds")
    print(f"Vector size after adding: {len(vector)}")
    print(f"Vector capacity after adding: {vector.capacity}")


def _run_vector(args: argparse.Namespace) -> int:
    if args.count is not None:
        _vector_speed_test(_atoi(args.count))
    else:
        _vector_self_tests()
    return 0


def _run_queue(args: argparse.Namespace) -> int:
    queue = CircularQueue(5)
    print("Enqueueing elements 0 to 4...")
    for value in range(5):
        queue.enqueue(value)
    print(f"Queue: {queue}")
    actual = str(queue)
    _report(actual == "[0, 1, 2, 3, 4]", "Elements enqueued correctly.",
            f"Elements not enqueued correctly. {actual}")

    print("Dequeuing elements...")
    for _ in range(3):
        print(f"Dequeued: {queue.dequeue()}")
    actual = str(queue)
    print(f"Queue: {queue}")
    _report(actual == "[3, 4]", "Elements dequeued correctly.",
            f"Elements not dequeued correctly. {actual}")

    print("Enqueueing elements 5 to 6...")
    for value in range(5, 7):
        queue.enqueue(value)
    actual = str(queue)
    print(f"Queue: {queue}")
    _report(actual == "[3, 4, 5, 6]", "Elements enqueued correctly after wrap around.",
            f"Elements not enqueued correctly after wrap around. {actual}")

    print("Showing memory locations...")
    print(f"Queue memory locations: {queue.memory_layout()}")
    return 0


def _timed(label: str, count: int, action) -> None:
    start = time.process_time()
    action()
    elapsed = time.process_time() - start
    print(f"Time taken to {label} {count} elements: {elapsed:.6f} seconds")


def _pushed_list(count: int) -> SinglyLinkedList:
    linked = SinglyLinkedList()
    for value in range(count):
        linked.push(value)
    return linked


def _run_sll(args: argparse.Namespace) -> int:
    if args.count is None:
        print("Usage: corestructs sll <number of elements>", file=sys.stderr)
        return 1
    count = _atoi(args.count)
    debug = _atoi(args.debug) if args.debug is not None else 0
    kept_back = max(count - 3, 0)

    def show(label: str, linked: SinglyLinkedList) -> None:
        if debug:
            print(f"List {label}: {linked}")

    linked = SinglyLinkedList()

    def push_all() -> None:
        for value in range(count):
            linked.push(value)

    _timed("push", count, push_all)
    show("after push", linked)

    linked = _pushed_list(count)
    show("before pop", linked)

    def pop_most() -> None:
        for _ in range(kept_back):
            linked.pop()

    _timed("pop", count, pop_most)
    show("after pop", linked)

    linked = _pushed_list(count)
    show("before insert", linked)

    def insert_at_end() -> None:
        for value in range(count):
            linked.insert(len(linked), value)

    _timed("insert", count, insert_at_end)
    show("after insert", linked)

    linked = _pushed_list(count)
    show("before remove", linked)

    def remove_from_end() -> None:
        for _ in range(kept_back):
            linked.remove(len(linked) - 1)

    _timed("remove", count, remove_from_end)
    show("after remove", linked)
    return 0


def _print_priority_queue(queue: SortedPriorityQueue) -> None:
    if queue.has_items():
        print(f"Priority Queue: {queue}")
    else:
        print("Queue is empty")


def _run_pqueue(args: argparse.Namespace) -> int:
    if args.size is None:
        queue = SortedPriorityQueue(5)
        for value in (5, 3, 8, 1, 7, 2):
            queue.enqueue(value)
        print("Priority Queue after enqueuing elements:")
        _print_priority_queue(queue)
        print(f"Dequeue: {queue.dequeue()}")
        print("Priority Queue after dequeue:")
        _print_priority_queue(queue)
        return 0

    size = _atoi(args.size)
    if size <= 0:
        print("Invalid size argument. Using default size of 10.", file=sys.stderr)
        size = 10
    rng = random.Random(args.seed)
    queue = SortedPriorityQueue(size)
    for _ in range(size):
        queue.enqueue(rng.randrange(100))
    print(f"Priority Queue after enqueuing {size} elements:")
    _print_priority_queue(queue)
    for _ in range(size):
        if not queue.has_items():
            print("Queue is empty, cannot dequeue.")
            break
        print(f"Dequeued: {queue.dequeue()}")
    print(f"Priority Queue after dequeuing {size} elements:")
    _print_priority_queue(queue)
    return 0


def _run_heap(args: argparse.Namespace) -> int:
    if args.count is None:
        print("Usage: corestructs heap <number of elements>", file=sys.stderr)
        return 1
    count = _atoi(args.count)
    try:
        heap = MaxHeap(count)
    except ValueError as error:
        print(f"Cannot create heap: {error}", file=sys.stderr)
        return 1
    rng = random.Random(args.seed)
    for _ in range(count):
        heap.enqueue(rng.randrange(100))
    print(f"Heap elements: {heap}" if len(heap) else "Heap is empty")
    sys.stdout.write(heap.render())
    print("".join(f"{heap.dequeue()} " for _ in range(count)))
    return 0


def _run_tree(args: argparse.Namespace) -> int:
    if args.text is None:
        print("Usage: corestructs tree <string>", file=sys.stderr)
        return 1
    tree = BinarySearchTree(args.text)

    def show(values) -> None:
        print("".join(f"{value} " for value in values))

    print("Breadth-first traversal:")
    show(tree.breadth_first())
    print("Depth-first traversal (pre-order):")
    show(tree.depth_first(TraversalType.PRE_ORDER))
    print("Depth-first traversal (in-order):")
    show(tree.depth_first(TraversalType.IN_ORDER))
    print("Depth-first traversal (post-order):")
    show(tree.depth_first(TraversalType.POST_ORDER))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corestructs", description="Exercise the bundled data structures."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    vector = commands.add_parser("vector", help="vector checks or an append timing")
    vector.add_argument("count", nargs="?", help="number of elements to time")
    vector.set_defaults(run=_run_vector)

    queue = commands.add_parser("queue", help="circular queue walkthrough")
    queue.set_defaults(run=_run_queue)

    sll = commands.add_parser("sll", help="linked list timings")
    sll.add_argument("count", nargs="?", help="number of elements")
    sll.add_argument("debug", nargs="?", help="non-zero to print the lists")
    sll.set_defaults(run=_run_sll)

    pqueue = commands.add_parser("pqueue", help="sorted priority queue demo")
    pqueue.add_argument("size", nargs="?", help="number of random elements")
    pqueue.add_argument("--seed", type=int, default=1, help="random seed")
    pqueue.set_defaults(run=_run_pqueue)

    heap = commands.add_parser("heap", help="max-heap demo")
    heap.add_argument("count", nargs="?", help="number of random elements")
    heap.add_argument("--seed", type=int, default=1, help="random seed")
    heap.set_defaults(run=_run_heap)

    tree = commands.add_parser("tree", help="binary search tree traversals")
    tree.add_argument("text", nargs="?", help="characters to insert")
    tree.set_defaults(run=_run_tree)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen demonstration and return its exit status."""
    args = _build_parser().parse_args(argv)
    return args.run(args)


if __name__ == "__main__":
    raise SystemExit(main())