import pytest

from corestructs.circular_queue import CircularQueue, QueueEmptyError, QueueFullError


def test_enqueue_dequeue_scenario():
    queue = CircularQueue(5)
    for value in range(5):
        queue.enqueue(value)
    assert str(queue) == "[0, 1, 2, 3, 4]"

    assert [queue.dequeue() for _ in range(3)] == [0, 1, 2]
    assert str(queue) == "[3, 4]"

    for value in range(5, 7):
        queue.enqueue(value)
    assert str(queue) == "[3, 4, 5, 6]"

    assert queue.memory_layout() == "[5, 6, _, 3, 4]"


def test_memory_layout_empty():
    queue = CircularQueue(3)
    assert queue.memory_layout() == "[_, _, _]"


def test_memory_layout_full_shows_all():
    queue = CircularQueue(3)
    for value in (7, 8, 9):
        queue.enqueue(value)
    assert queue.memory_layout() == "[7, 8, 9]"


def test_enqueue_full_raises():
    queue = CircularQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_dequeue_empty_raises():
    queue = CircularQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_peek_empty_raises():
    with pytest.raises(QueueEmptyError):
        CircularQueue(2).peek()


def test_peek_does_not_remove():
    queue = CircularQueue(3)
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.peek() == 10
    assert len(queue) == 2
    assert queue.dequeue() == 10


def test_empty_and_full_flags():
    queue = CircularQueue(1)
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(5)
    assert queue.is_full()
    assert not queue.is_empty()


def test_capacity_and_length():
    queue = CircularQueue(4)
    assert queue.capacity == 4
    queue.enqueue(1)
    queue.enqueue(2)
    assert len(queue) == 2
    assert queue.capacity == 4


def test_fifo_order_over_many_wraps():
    queue = CircularQueue(3)
    out = []
    for value in range(20):
        queue.enqueue(value)
        if len(queue) == 3:
            out.append(queue.dequeue())
    while not queue.is_empty():
        out.append(queue.dequeue())
    assert out == list(range(20))


def test_empty_string():
    assert str(CircularQueue(4)) == "[]"


def test_zero_capacity_is_full_and_empty():
    queue = CircularQueue(0)
    assert queue.is_empty()
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CircularQueue(-2)


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        CircularQueue(1).dequeue()