import random

import pytest

from corestructs.priority_queue import SortedPriorityQueue


def _filled(values, capacity=5):
    queue = SortedPriorityQueue(capacity)
    for value in values:
        queue.enqueue(value)
    return queue


SAMPLE = [5, 3, 8, 1, 7, 2]


def test_new_queue_is_empty():
    queue = SortedPriorityQueue(5)
    assert not queue.has_items()
    assert len(queue) == 0
    assert str(queue) == "[]"


def test_iteration_is_highest_first():
    queue = _filled(SAMPLE)
    assert list(queue) == sorted(SAMPLE, reverse=True)


def test_str_lists_highest_first():
    assert str(_filled(SAMPLE)) == "[8, 7, 5, 3, 2, 1]"


def test_dequeue_returns_maximum():
    queue = _filled(SAMPLE)
    assert queue.dequeue() == max(SAMPLE)
    assert len(queue) == len(SAMPLE) - 1
    assert list(queue) == sorted(SAMPLE, reverse=True)[1:]


def test_peek_does_not_remove():
    queue = _filled(SAMPLE)
    assert queue.peek() == max(SAMPLE)
    assert len(queue) == len(SAMPLE)


def test_dequeue_and_peek_empty_raise():
    queue = SortedPriorityQueue(2)
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_capacity_doubles_when_full():
    queue = _filled(SAMPLE, capacity=5)
    assert queue.capacity == 10


def test_zero_capacity_still_grows():
    queue = _filled([4, 2], capacity=0)
    assert queue.capacity >= len(queue)
    assert list(queue) == [4, 2]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        SortedPriorityQueue(-1)


def test_clear_empties_queue_keeps_capacity():
    queue = _filled(SAMPLE)
    capacity = queue.capacity
    queue.clear()
    assert not queue.has_items()
    assert queue.capacity == capacity


def test_random_drain_is_descending():
    rng = random.Random(1234)
    values = [rng.randrange(100) for _ in range(50)]
    queue = _filled(values, capacity=50)
    drained = []
    while queue.has_items():
        drained.append(queue.dequeue())
    assert drained == sorted(values, reverse=True)


def test_duplicates_are_kept():
    queue = _filled([3, 3, 1, 3])
    assert [queue.dequeue() for _ in range(4)] == [3, 3, 3, 1]