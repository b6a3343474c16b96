import random

import pytest

from dsakit.doubly_list import DoublyLinkedList


def assert_consistent(dll, reference):
    assert list(dll) == reference
    assert list(reversed(dll)) == reference[::-1]
    assert len(dll) == len(reference)


def test_insert_at_beginning_and_end():
    dll = DoublyLinkedList()
    dll.insert_at_beginning(2)
    dll.insert_at_beginning(1)
    dll.insert_at_end(3)
    assert_consistent(dll, [1, 2, 3])


def test_insert_at_position_middle():
    dll = DoublyLinkedList([1, 3])
    dll.insert_at_position(2, 2)
    assert_consistent(dll, [1, 2, 3])


def test_insert_at_position_edges():
    dll = DoublyLinkedList()
    dll.insert_at_position(5, 1)
    dll.insert_at_position(6, 2)
    dll.insert_at_position(4, 1)
    assert_consistent(dll, [4, 5, 6])


@pytest.mark.parametrize("position", [0, 3, -1])
def test_insert_at_position_out_of_range(position):
    dll = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        dll.insert_at_position(9, position)
    assert_consistent(dll, [1])


def test_delete_operations_return_values():
    dll = DoublyLinkedList([10, 20, 30, 40])
    assert dll.delete_at_beginning() == 10
    assert dll.delete_at_end() == 40
    assert_consistent(dll, [20, 30])
    assert dll.delete_at_position(2) == 30
    assert dll.delete_at_position(1) == 20
    assert_consistent(dll, [])


def test_delete_middle_position():
    dll = DoublyLinkedList([1, 2, 3])
    assert dll.delete_at_position(2) == 2
    assert_consistent(dll, [1, 3])


def test_delete_from_empty_raises():
    dll = DoublyLinkedList()
    with pytest.raises(IndexError):
        dll.delete_at_beginning()
    with pytest.raises(IndexError):
        dll.delete_at_end()
    with pytest.raises(IndexError):
        dll.delete_at_position(1)


def test_delete_position_out_of_range():
    dll = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        dll.delete_at_position(3)
    with pytest.raises(IndexError):
        dll.delete_at_position(0)
    assert_consistent(dll, [1, 2])


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_match_reference(seed):
    rng = random.Random(seed)
    dll = DoublyLinkedList()
    reference = []
    popped = []
    expected_popped = []
    for _ in range(400):
        op = rng.randrange(6)
        if op == 0:
            value = rng.randrange(1000)
            dll.insert_at_beginning(value)
            reference.insert(0, value)
        elif op == 1:
            value = rng.randrange(1000)
            dll.insert_at_end(value)
            reference.append(value)
        elif op == 2:
            value = rng.randrange(1000)
            position = rng.randrange(len(reference) + 1) + 1
            dll.insert_at_position(value, position)
            reference.insert(position - 1, value)
        elif op == 3 and reference:
            popped.append(dll.delete_at_beginning())
            expected_popped.append(reference.pop(0))
        elif op == 4 and reference:
            popped.append(dll.delete_at_end())
            expected_popped.append(reference.pop())
        elif op == 5 and reference:
            position = rng.randrange(len(reference)) + 1
            popped.append(dll.delete_at_position(position))
            expected_popped.append(reference.pop(position - 1))
        assert_consistent(dll, reference)
    assert popped == expected_popped
    assert len(popped) > 0