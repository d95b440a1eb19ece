"""Sorting algorithms: counting, insertion, selection, merge and quick sort."""

from __future__ import annotations

import bisect
import heapq
import random
from collections import Counter
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from itertools import accumulate


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort integers by counting how often each value between min and max occurs."""
    values = list(items)
    if not values:
        return []
    counts = Counter(values)
    return [
        value
        for value in range(min(values), max(values) + 1)
        for _ in range(counts[value])
    ]


def stable_counting_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers with prefix-summed counts, keeping equal items in order."""
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("counting sort needs non-negative integers")
    if not values:
        return []
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    positions = list(accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def insertion_sort(items: Iterable) -> list:
    """Sort by inserting each item after the equal items already placed."""
    output: list = []
    for item in items:
        bisect.insort_right(output, item)
    return output


def selection_sort(items: Iterable) -> list:
    """Sort by repeatedly swapping the smallest remaining item to the front."""
    output = list(items)
    for i in range(len(output)):
        smallest = min(range(i, len(output)), key=output.__getitem__)
        output[i], output[smallest] = output[smallest], output[i]
    return output


def merge(left: Iterable, right: Iterable) -> list:
    """Merge two sorted sequences; on ties the item from ``left`` comes first."""
    return list(heapq.merge(left, right))


def merge_sort(items: Iterable) -> list:
    """Sort by splitting in halves, sorting each and merging them."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    return merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def partition(items: MutableSequence, start: int, end: int) -> int:
    """Partition ``items[start:end + 1]`` around its last item in place.

    Items not greater than the pivot end up before it; the pivot's final
    index is returned.
    """
    pivot = items[end]
    index = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[index] = items[index], items[i]
            index += 1
    items[end], items[index] = items[index], items[end]
    return index


def _quick_sort(
    items: MutableSequence,
    start: int,
    end: int,
    choose_pivot: Callable[[MutableSequence, int, int], None] | None,
) -> None:
    while start < end:
        if choose_pivot is not None:
            choose_pivot(items, start, end)
        pivot = partition(items, start, end)
        if pivot - start < end - pivot:
            _quick_sort(items, start, pivot - 1, choose_pivot)
            start = pivot + 1
        else:
            _quick_sort(items, pivot + 1, end, choose_pivot)
            end = pivot - 1


def quick_sort(items: Iterable) -> list:
    """Sort with quick sort, using the last item of each range as pivot."""
    output = list(items)
    _quick_sort(output, 0, len(output) - 1, None)
    return output


def randomized_quick_sort(items: Iterable, rng: random.Random | None = None) -> list:
    """Sort with quick sort, drawing each pivot at random from its range."""
    generator = rng if rng is not None else random.Random()

    def choose(values: MutableSequence, start: int, end: int) -> None:
        picked = generator.randrange(start, end)
        values[picked], values[end] = values[end], values[picked]

    output = list(items)
    _quick_sort(output, 0, len(output) - 1, choose)
    return output


def is_sorted(items: Sequence) -> bool:
    """Return True if every item is no greater than the one after it."""
    return all(a <= b for a, b in zip(items, items[1:]))