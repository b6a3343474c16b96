"""Stacks and queues, with the command drivers that exercise them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

INVALID = "Invalid"

_PAIRS = {"}": "{", "]": "[", ")": "("}
_OPENERS = frozenset(_PAIRS.values())


class MaxStack:
    """A stack of integers that reports its largest element in constant time."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._maxima: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Push ``value`` on top of the stack."""
        if not self._maxima or value >= self._maxima[-1]:
            self._maxima.append(value)
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        value = self._items.pop()
        if value == self._maxima[-1]:
            self._maxima.pop()
        return value

    def maximum(self) -> int:
        """Return the largest element currently on the stack."""
        if not self._maxima:
            raise IndexError("maximum of an empty stack")
        return self._maxima[-1]

    def __len__(self) -> int:
        return len(self._items)


def is_balanced(brackets: str) -> bool:
    """Tell whether every opening bracket in ``brackets`` is closed in order.

    A closing bracket that does not match the innermost open bracket is
    skipped, so only unclosed opening brackets make the text unbalanced.
    """
    stack: list[str] = []
    for char in brackets:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
    return not stack


class Stack:
    """A plain last-in, first-out stack."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def push(self, value: int) -> None:
        """Push ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items

    def top_down(self) -> list[int]:
        """Return the elements from the top of the stack to the bottom."""
        return self._items[::-1]

    def __len__(self) -> int:
        return len(self._items)


def run_stack_queries(queries: Iterable[Sequence[int]]) -> list[str]:
    """Run numbered stack queries and return the lines they print.

    ``(1, x)`` pushes ``x``; ``(2,)`` pops; ``(3,)`` prints the stack from
    top to bottom; any other kind prints the top element. Popping or
    printing an empty stack prints ``Invalid``.
    """
    stack = Stack()
    output: list[str] = []
    for query in queries:
        kind, *args = query
        if kind == 1:
            if not args:
                raise ValueError("push query needs a value")
            stack.push(args[0])
        elif stack.is_empty():
            output.append(INVALID)
        elif kind == 2:
            stack.pop()
        elif kind == 3:
            output.append("".join(f"{value} " for value in stack.top_down()))
        else:
            output.append(str(stack.peek()))
    return output


@dataclass(eq=False)
class _QueueNode:
    value: int
    next: Optional["_QueueNode"] = None


class LinkedQueue:
    """A first-in, first-out queue built from linked nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_QueueNode] = None
        self._tail: Optional[_QueueNode] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        node = _QueueNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the front element."""
        head = self._head
        if head is None:
            raise IndexError("pop from an empty queue")
        self._head = head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return head.value

    def top(self) -> int:
        """Return the front element without removing it."""
        if self._head is None:
            raise IndexError("top of an empty queue")
        return self._head.value

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return self._head is None

    def __len__(self) -> int:
        return self._size


def run_queue_commands(commands: Iterable[str]) -> list[str]:
    """Run textual queue commands and return the lines they print.

    ``top`` prints the front element, ``pop`` removes it, and
    ``push <x>`` appends ``x``. ``top`` and ``pop`` on an empty queue
    print ``Invalid``.
    """
    queue = LinkedQueue()
    output: list[str] = []
    for command in commands:
        words = command.split()
        if not words:
            raise ValueError("empty command")
        name = words[0]
        if name.startswith("t"):
            output.append(INVALID if queue.is_empty() else str(queue.top()))
        elif name.startswith("po"):
            if queue.is_empty():
                output.append(INVALID)
            else:
                queue.pop()
        else:
            if len(words) < 2:
                raise ValueError(f"command {command!r} needs a value")
            queue.push(int(words[1]))
    return output


class TwoStackQueue:
    """A first-in, first-out queue kept in two stacks."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._inbox: list[int] = list(values)
        self._outbox: list[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        self._inbox.append(value)

    def dequeue(self) -> int:
        """Remove and return the front element."""
        self._refill()
        return self._outbox.pop()

    def front(self) -> int:
        """Return the front element without removing it."""
        self._refill()
        return self._outbox[-1]

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


__all__ = [
    "INVALID",
    "LinkedQueue",
    "MaxStack",
    "Stack",
    "TwoStackQueue",
    "deque",
    "is_balanced",
    "run_queue_commands",
    "run_stack_queries",
]