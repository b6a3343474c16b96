import random

import pytest

from dsakit.circular_list import CircularList


def test_insert_at_beginning_reverses_order():
    cl = CircularList()
    for value in (1, 2, 3):
        cl.insert_at_beginning(value)
    assert list(cl) == [3, 2, 1]
    assert len(cl) == 3


def test_insert_at_end_keeps_order():
    cl = CircularList()
    for value in (1, 2, 3):
        cl.insert_at_end(value)
    assert list(cl) == [1, 2, 3]


def test_constructor_takes_values():
    assert list(CircularList([4, 5, 6])) == [4, 5, 6]


def test_empty_list():
    cl = CircularList()
    assert list(cl) == []
    assert len(cl) == 0


def test_delete_at_beginning_returns_head():
    cl = CircularList([7, 8, 9])
    assert cl.delete_at_beginning() == 7
    assert list(cl) == [8, 9]


def test_delete_at_end_returns_tail():
    cl = CircularList([7, 8, 9])
    assert cl.delete_at_end() == 9
    assert list(cl) == [7, 8]
    cl.insert_at_end(10)
    assert list(cl) == [7, 8, 10]


def test_delete_single_element_empties():
    cl = CircularList([42])
    assert cl.delete_at_end() == 42
    assert len(cl) == 0
    cl.insert_at_beginning(5)
    assert cl.delete_at_beginning() == 5
    assert list(cl) == []


def test_delete_from_empty_raises():
    cl = CircularList()
    with pytest.raises(IndexError):
        cl.delete_at_beginning()
    with pytest.raises(IndexError):
        cl.delete_at_end()


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_match_reference(seed):
    rng = random.Random(seed)
    cl = CircularList()
    reference = []
    popped = []
    expected_popped = []
    for _ in range(400):
        op = rng.randrange(4)
        if op == 0:
            value = rng.randrange(1000)
            cl.insert_at_beginning(value)
            reference.insert(0, value)
        elif op == 1:
            value = rng.randrange(1000)
            cl.insert_at_end(value)
            reference.append(value)
        elif op == 2 and reference:
            popped.append(cl.delete_at_beginning())
            expected_popped.append(reference.pop(0))
        elif op == 3 and reference:
            popped.append(cl.delete_at_end())
            expected_popped.append(reference.pop())
        assert list(cl) == reference
        assert len(cl) == len(reference)
    assert popped == expected_popped
    assert len(popped) > 0