"""Queues built on linked nodes, arrays and stacks, with queue problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 100


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """A first-in first-out queue of linked nodes with head and tail pointers."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("pop from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class ArrayQueue:
    """A queue in a fixed array of ``capacity`` slots.

    Slots freed by ``pop`` are not reused, so the queue accepts at most
    ``capacity`` pushes over its lifetime.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the back; raises OverflowError when no slot is left."""
        if self.is_full():
            raise OverflowError(f"queue overflow, cannot insert {value!r}")
        self._slots.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("pop from empty queue")
        value = self._slots[self._front]
        self._front += 1
        return value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        """Return True once the last slot has been used."""
        return len(self._slots) == self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front :])


class CircularQueue:
    """A queue in a ring of ``capacity`` slots that are reused as values leave."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the back; raises OverflowError when every slot is taken."""
        if self.is_full():
            raise OverflowError("circular queue is full")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("pop from empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._size == 0

    def is_full(self) -> bool:
        """Return True if every slot is taken."""
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]


class StackQueue:
    """A queue kept in two stacks; each push moves older values above the new one."""

    def __init__(self) -> None:
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._main:
            raise IndexError("pop from empty queue")
        return self._main.pop()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._main:
            raise IndexError("queue is empty")
        return self._main[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._main

    def __len__(self) -> int:
        return len(self._main)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._main)


def first_non_repeating(text: str) -> list[str | None]:
    """For each prefix of ``text``, its first character seen only once, or None."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    result: list[str | None] = []
    for ch in text:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        result.append(pending[0] if pending else None)
    return result


def interleave_halves(items: Iterable[Any]) -> list[Any]:
    """Interleave the first half of the items with the rest, starting with the first half.

    The first half holds ``len // 2`` items.
    """
    queue = deque(items)
    first_half = deque(queue.popleft() for _ in range(len(queue) // 2))
    while first_half:
        queue.append(first_half.popleft())
        queue.append(queue.popleft())
    return list(queue)


def reverse_queue(items: Iterable[Any]) -> list[Any]:
    """Return the items in reverse order, passing them through a stack."""
    stack = list(items)
    reversed_items = []
    while stack:
        reversed_items.append(stack.pop())
    return reversed_items