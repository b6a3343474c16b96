"""Singly linked list nodes and the operations that work on chains of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: int
    next: Optional["Node"] = None


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a list whose nodes hold ``values`` in the given order."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: Optional[Node]) -> Iterator[int]:
    """Yield the values of the list from head to tail."""
    node = head
    while node is not None:
        yield node.value
        node = node.next


def to_values(head: Optional[Node]) -> list[int]:
    """Return the values of the list as a Python list."""
    return list(iter_values(head))


def insert_at_head(head: Optional[Node], value: int) -> Node:
    """Put a new node in front of ``head`` and return it as the new head."""
    return Node(value, head)


def build_by_head_insertion(values: Iterable[int]) -> Optional[Node]:
    """Insert each value at the head in turn; the result is in reverse order."""
    head: Optional[Node] = None
    for value in values:
        head = insert_at_head(head, value)
    return head


def _node_before(head: Node, position: int) -> Node:
    """Return the node at index ``position - 1``, raising if it does not exist."""
    node: Optional[Node] = head
    for _ in range(position - 1):
        node = node.next if node is not None else None
        if node is None:
            break
    if node is None:
        raise IndexError(f"position {position} is out of range")
    return node


def insert_at_position(head: Optional[Node], position: int, value: int) -> Node:
    """Insert ``value`` so that it ends up at the 0-based ``position``.

    An empty list simply receives the value as its only node.
    """
    if position < 0:
        raise IndexError(f"position {position} is out of range")
    if head is None:
        return Node(value)
    if position == 0:
        return Node(value, head)
    before = _node_before(head, position)
    before.next = Node(value, before.next)
    return head


def delete_from_head(head: Optional[Node], count: int) -> Optional[Node]:
    """Remove the first ``count`` nodes and return the new head."""
    if count < 0:
        raise ValueError("count must not be negative")
    if head is None:
        return None
    for _ in range(count):
        if head is None:
            raise IndexError("cannot delete more nodes than the list holds")
        head = head.next
    return head


def delete_at_position(head: Optional[Node], position: int) -> Optional[Node]:
    """Remove the node at the 0-based ``position`` and return the new head."""
    if head is None or position < 0:
        raise IndexError(f"position {position} is out of range")
    if position == 0:
        return head.next
    before = _node_before(head, position)
    if before.next is None:
        raise IndexError(f"position {position} is out of range")
    before.next = before.next.next
    return head


def delete_from_tail(head: Optional[Node], count: int) -> Optional[Node]:
    """Remove the last ``count`` nodes and return the new head."""
    if count < 0:
        raise ValueError("count must not be negative")
    for _ in range(count):
        if head is None:
            raise IndexError("list is empty")
        if head.next is None:
            head = None
            continue
        node = head
        while node.next is not None and node.next.next is not None:
            node = node.next
        node.next = None
    return head


def contains(head: Optional[Node], value: int) -> bool:
    """Tell whether any node holds ``value``."""
    return any(item == value for item in iter_values(head))


def has_loop(head: Optional[Node]) -> bool:
    """Detect a cycle with the tortoise-and-hare walk."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def lists_equal(head_a: Optional[Node], head_b: Optional[Node]) -> bool:
    """Tell whether both lists hold the same values in the same order."""
    a, b = head_a, head_b
    while a is not None and b is not None:
        if a.value != b.value:
            return False
        a, b = a.next, b.next
    return a is None and b is None


def format_arrows(head: Optional[Node]) -> str:
    """Render the list as ``a->b->c``, or ``NULL`` when it is empty."""
    if head is None:
        return "NULL"
    return "->".join(str(value) for value in iter_values(head))


def format_lines(head: Optional[Node]) -> str:
    """Render each value on a line of its own."""
    return "".join(f"{value}\n" for value in iter_values(head))


def format_reversed(head: Optional[Node]) -> str:
    """Render the values from tail to head, each followed by a space."""
    return "".join(f"{value} " for value in reversed(to_values(head)))