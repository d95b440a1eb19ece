"""A binary max-heap kept in a list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class MaxHeap:
    """A priority queue whose top is always its largest value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Add ``value``, sifting it up past smaller parents."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not items[child] > items[parent]:
                break
            items[child], items[parent] = items[parent], items[child]
            child = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def top(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the heap holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)