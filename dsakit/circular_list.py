"""A circular singly linked list addressed through its tail node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = None


class CircularList:
    """Circular singly linked list; the tail's successor is the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _link_after_tail(self, value: int) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the current head."""
        self._link_after_tail(value)

    def insert_at_end(self, value: int) -> None:
        """Put ``value`` after the current tail and make it the new tail."""
        self._tail = self._link_after_tail(value)

    def delete_at_beginning(self) -> int:
        """Remove the head and return its value."""
        tail = self._tail
        if tail is None:
            raise IndexError("delete from an empty list")
        head = tail.next
        assert head is not None
        if head is tail:
            self._tail = None
        else:
            tail.next = head.next
        self._size -= 1
        return head.value

    def delete_at_end(self) -> int:
        """Remove the tail and return its value."""
        tail = self._tail
        if tail is None:
            raise IndexError("delete from an empty list")
        if tail.next is tail:
            self._tail = None
        else:
            node = tail.next
            assert node is not None
            while node.next is not tail:
                node = node.next  # type: ignore[assignment]
            node.next = tail.next
            self._tail = node
        self._size -= 1
        return tail.value

    def __iter__(self) -> Iterator[int]:
        tail = self._tail
        if tail is None:
            return
        node = tail.next
        while True:
            assert node is not None
            yield node.value
            if node is tail:
                return
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"