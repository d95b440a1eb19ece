"""Stacks built on lists, fixed arrays, linked nodes and queues, with stack problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

DEFAULT_CAPACITY = 100


class _StackLike(Protocol):
    def push(self, value: Any) -> None: ...

    def pop(self) -> Any: ...

    def is_empty(self) -> bool: ...


class Stack:
    """An unbounded stack kept in a list; the top is the end of the list."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)


class BoundedStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """A stack of linked nodes; the head node is the top."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._head is None:
            raise IndexError("stack underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._head is None:
            raise IndexError("stack is empty")
        return self._head.value

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class QueueStack:
    """A stack kept in two queues; each push moves the older values behind the new one."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._main:
            raise IndexError("stack underflow")
        return self._main.popleft()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main[0]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._main

    def __len__(self) -> int:
        return len(self._main)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return iter(self._main)


def push_bottom(stack: _StackLike, value: Any) -> None:
    """Put ``value`` underneath everything already on ``stack``, in place."""
    if stack.is_empty():
        stack.push(value)
        return
    top = stack.pop()
    push_bottom(stack, value)
    stack.push(top)


def reverse_stack(stack: _StackLike) -> None:
    """Reverse ``stack`` in place using only push, pop and recursion."""
    if stack.is_empty():
        return
    top = stack.pop()
    reverse_stack(stack)
    push_bottom(stack, top)


def largest_rectangle(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of bars of width one."""
    best = 0
    rising: list[tuple[int, int]] = []
    for i, height in enumerate([*heights, 0]):
        start = i
        while rising and rising[-1][1] >= height:
            index, bar = rising.pop()
            best = max(best, bar * (i - index))
            start = index
        rising.append((start, height))
    return best


def next_greater(values: Sequence[int]) -> list[int]:
    """For each value, the first later value strictly greater than it, or -1."""
    result: list[int] = []
    higher: list[int] = []
    for value in reversed(values):
        while higher and value >= higher[-1]:
            higher.pop()
        result.append(higher[-1] if higher else -1)
        higher.append(value)
    result.reverse()
    return result


def has_duplicate_parentheses(expression: str) -> bool:
    """Return True if a pair of parentheses encloses nothing but another pair (or nothing).

    Raises ValueError on a closing parenthesis without a matching opening one.
    """
    pending: list[str] = []
    for ch in expression:
        if ch != ")":
            pending.append(ch)
            continue
        if not pending:
            raise ValueError("unbalanced parentheses")
        if pending[-1] == "(":
            return True
        while pending and pending[-1] != "(":
            pending.pop()
        if not pending:
            raise ValueError("unbalanced parentheses")
        pending.pop()
    return False


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, the number of consecutive days up to it with a price no higher."""
    spans: list[int] = []
    higher: list[int] = []
    for i, price in enumerate(prices):
        while higher and prices[higher[-1]] <= price:
            higher.pop()
        spans.append(i - higher[-1] if higher else i + 1)
        higher.append(i)
    return spans