import pytest

from corestructs.vector import Vector


def _filled(start=0, end=10, capacity=5):
    vector = Vector(capacity)
    for value in range(start, end):
        vector.append(value)
    return vector


def test_add_elements_string():
    assert str(_filled()) == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"


def test_remove_elements():
    vector = _filled()
    assert vector.remove(3) == 3
    assert len(vector) == 9
    assert list(vector) == [0, 1, 2, 4, 5, 6, 7, 8, 9]


def test_pop_elements():
    vector = _filled()
    assert vector.pop() == 9
    assert len(vector) == 9


def test_insert_elements():
    vector = _filled()
    vector.insert(3, 99)
    assert vector[3] == 99
    assert len(vector) == 11
    assert vector[4] == 3


def test_push_elements():
    vector = _filled()
    vector.append(100)
    assert vector[len(vector) - 1] == 100
    assert len(vector) == 11


def test_capacity_doubles_when_full():
    vector = Vector(5)
    assert vector.capacity == 5
    for value in range(5):
        vector.append(value)
    assert vector.capacity == 5
    vector.append(5)
    assert vector.capacity == 10


def test_capacity_never_below_size():
    vector = Vector(1)
    for value in range(100):
        vector.append(value)
        assert vector.capacity >= len(vector)


def test_zero_capacity_grows():
    vector = Vector(0)
    vector.append(7)
    assert list(vector) == [7]
    assert vector.capacity >= 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_empty_string():
    assert str(Vector(3)) == "[]"


def test_get_and_set():
    vector = _filled()
    vector[2] = 42
    assert vector[2] == 42
    assert list(vector)[2] == 42


def test_get_from_empty_raises():
    with pytest.raises(IndexError):
        Vector(4)[0]


def test_get_out_of_bounds_raises():
    vector = _filled()
    with pytest.raises(IndexError):
        vector[10]
    with pytest.raises(IndexError):
        vector[-1]
    assert vector[9] == 9
    assert len(vector) == 10


def test_set_out_of_bounds_raises():
    vector = _filled()
    with pytest.raises(IndexError):
        vector[10] = 1
    assert list(vector) == list(range(10))


def test_insert_out_of_bounds_raises():
    vector = _filled()
    with pytest.raises(IndexError):
        vector.insert(11, 1)
    assert len(vector) == 10


def test_insert_at_end_is_append():
    vector = _filled()
    vector.insert(len(vector), 55)
    assert vector[10] == 55


def test_remove_out_of_bounds_raises():
    vector = _filled()
    with pytest.raises(IndexError):
        vector.remove(10)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Vector(2).pop()


def test_find():
    vector = _filled()
    vector.append(4)
    assert vector.find(4) == 4
    assert vector.find(1234) == -1


def test_iteration_round_trip():
    values = [5, 3, 8, 1]
    vector = Vector(2)
    for value in values:
        vector.append(value)
    assert list(vector) == values
    assert [vector.pop() for _ in values] == list(reversed(values))
    assert len(vector) == 0