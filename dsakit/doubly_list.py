"""A doubly linked list with 1-based positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    value: int
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """Doubly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the head."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: int) -> None:
        """Put ``value`` after the tail."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at_position(self, value: int, position: int) -> None:
        """Insert ``value`` so it ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            self.insert_at_beginning(value)
        elif position == self._size + 1:
            self.insert_at_end(value)
        else:
            previous = self._node_at(position - 1)
            following = previous.next
            assert following is not None
            node = _Node(value, previous, following)
            previous.next = node
            following.prev = node
            self._size += 1

    def delete_at_beginning(self) -> int:
        """Remove the head and return its value."""
        head = self._head
        if head is None:
            raise IndexError("delete from an empty list")
        self._head = head.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return head.value

    def delete_at_end(self) -> int:
        """Remove the tail and return its value."""
        tail = self._tail
        if tail is None:
            raise IndexError("delete from an empty list")
        self._tail = tail.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return tail.value

    def delete_at_position(self, position: int) -> int:
        """Remove the node at ``position`` (1 to len) and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            return self.delete_at_beginning()
        if position == self._size:
            return self.delete_at_end()
        node = self._node_at(position)
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"