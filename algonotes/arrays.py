"""Array and matrix problems: subarrays, searching, water trapping and traversal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


def reversed_items(items: Sequence) -> list:
    """Return the items in reverse order."""
    return list(reversed(items))


def _require_items(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("sequence must not be empty")


def max_product_subarray(nums: Sequence[int]) -> int:
    """Largest product of a contiguous run, tracking running minimum and maximum."""
    _require_items(nums)
    low = high = best = nums[0]
    for x in nums[1:]:
        if x >= 0:
            low, high = min(low * x, x), max(high * x, x)
        else:
            low, high = min(high * x, x), max(low * x, x)
        best = max(best, high)
    return best


def max_product_subarray_scan(nums: Sequence[int]) -> int:
    """Largest product of a contiguous run, by prefix and suffix product scans."""
    _require_items(nums)
    best = None
    for direction in (nums, reversed(nums)):
        product = 1
        for x in direction:
            product *= x
            best = product if best is None else max(best, product)
            if product == 0:
                product = 1
    return best


def contains_duplicate(nums: Sequence) -> bool:
    """Return True if any value occurs more than once."""
    seen = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def max_subarray_sum_brute(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous run, summing every run afresh."""
    _require_items(nums)
    return max(
        sum(nums[start : end + 1])
        for start in range(len(nums))
        for end in range(start, len(nums))
    )


def max_subarray_sum_prefix(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous run, extending each start with running sums."""
    _require_items(nums)
    return max(max(accumulate(nums[start:])) for start in range(len(nums)))


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous run by Kadane's algorithm."""
    _require_items(nums)
    best = nums[0]
    current = 0
    for x in nums:
        current += x
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if none is positive."""
    best = 0
    cheapest = None
    for price in prices:
        if cheapest is not None:
            best = max(best, price - cheapest)
            cheapest = min(cheapest, price)
        else:
            cheapest = price
    return best


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    if not heights:
        return 0
    left = list(accumulate([heights[0], *heights[:-1]], max))
    right = list(accumulate([heights[-1], *reversed(heights[1:])], max))[::-1]
    return sum(
        max(0, min(lm, rm) - h) for lm, rm, h in zip(left, right, heights)
    )


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two items of an ascending sequence summing to ``target``, or None."""
    start, end = 0, len(nums) - 1
    while start < end:
        total = nums[start] + nums[end]
        if total == target:
            return start, end
        if total > target:
            end -= 1
        else:
            start += 1
    return None


def is_anagram(first: str, second: str) -> bool:
    """Return True if the two strings hold the same letters in any order."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def staircase_search(
    matrix: Sequence[Sequence[int]], key: int
) -> tuple[int, int] | None:
    """Find ``key`` in a row- and column-sorted matrix from its top-right corner.

    Returns the zero-based (row, column) or None.
    """
    if not matrix:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == key:
            return row, col
        if value > key:
            col -= 1
        else:
            row += 1
    return None


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values of the matrix read clockwise from the outside in."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    out: list[int] = []
    while top <= bottom and left <= right:
        out.extend(matrix[top][left : right + 1])
        out.extend(matrix[i][right] for i in range(top + 1, bottom + 1))
        if top != bottom:
            out.extend(matrix[bottom][j] for j in range(right - 1, left - 1, -1))
        if left != right:
            out.extend(matrix[i][left] for i in range(bottom - 1, top, -1))
        top, bottom = top + 1, bottom - 1
        left, right = left + 1, right - 1
    return out