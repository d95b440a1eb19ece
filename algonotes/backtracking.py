"""Recursion and backtracking puzzles: subsets, strings, queens, grids and sudoku."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence


def stone_pile_difference(stones: Sequence[int]) -> int:
    """Smallest difference between the weights of two piles splitting ``stones``."""
    sums = {0}
    for stone in stones:
        sums |= {total + stone for total in sums}
    whole = sum(stones)
    return min(abs(whole - 2 * part) for part in sums)


def _no_consecutive_ones(prefix: str, remaining: int, last_one: bool) -> Iterator[str]:
    if remaining == 0:
        yield prefix
        return
    yield from _no_consecutive_ones(prefix + "0", remaining - 1, False)
    if not last_one:
        yield from _no_consecutive_ones(prefix + "1", remaining - 1, True)


def binary_strings_without_consecutive_ones(n: int) -> list[str]:
    """All binary strings of length ``n`` with no two adjacent ones, in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_no_consecutive_ones("", n, False))


def remove_duplicates(text: str, keep_last: bool = False) -> str:
    """Drop repeated characters, keeping each one's first occurrence or its last."""
    if not keep_last:
        return "".join(dict.fromkeys(text))
    seen: set[str] = set()
    kept: list[str] = []
    for ch in reversed(text):
        if ch not in seen:
            seen.add(ch)
            kept.append(ch)
    return "".join(reversed(kept))


def n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of '.' and 'Q'."""
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                ["." * col + "Q" + "." * (n - col - 1) for col in columns]
            )
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return solutions


def _paths(row: int, col: int, rows: int, cols: int, moves: str) -> Iterator[str]:
    if row == rows - 1 and col == cols - 1:
        yield moves
        return
    if row >= rows or col >= cols:
        return
    yield from _paths(row, col + 1, rows, cols, moves + "R")
    yield from _paths(row + 1, col, rows, cols, moves + "D")


def grid_paths(rows: int, cols: int) -> list[str]:
    """Every right/down route from the top-left to the bottom-right cell.

    Each route is a string of 'R' and 'D' moves; right moves are tried first.
    """
    if rows < 1 or cols < 1:
        return []
    return list(_paths(0, 0, rows, cols, ""))


def count_grid_ways(rows: int, cols: int) -> int:
    """Number of right/down routes across a ``rows`` x ``cols`` grid."""
    if rows < 1 or cols < 1:
        return 0
    return math.comb(rows + cols - 2, rows - 1)


def _permute(rest: str, prefix: str) -> Iterator[str]:
    if not rest:
        yield prefix
        return
    for i, ch in enumerate(rest):
        if i and ch == rest[i - 1]:
            continue
        yield from _permute(rest[:i] + rest[i + 1 :], prefix + ch)


def permutations(text: str) -> list[str]:
    """Orderings of ``text``, skipping a character equal to the one just before it.

    For text with repeated characters next to each other this avoids
    producing the same ordering twice.
    """
    return list(_permute(text, ""))


def _safe(grid: list[list[int]], row: int, col: int, digit: int) -> bool:
    if digit in grid[row]:
        return False
    if any(grid[r][col] == digit for r in range(9)):
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(
        grid[r][c] != digit
        for r in range(top, top + 3)
        for c in range(left, left + 3)
    )


def _fill(grid: list[list[int]], cell: int) -> bool:
    if cell == 81:
        return True
    row, col = divmod(cell, 9)
    if grid[row][col]:
        return _fill(grid, cell + 1)
    for digit in range(1, 10):
        if _safe(grid, row, col, digit):
            grid[row][col] = digit
            if _fill(grid, cell + 1):
                return True
            grid[row][col] = 0
    return False


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a 9 x 9 sudoku; returns the solved grid, or None if none exists.

    The given grid is left unchanged.
    """
    board = [list(row) for row in grid]
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku grid must be 9 x 9")
    if any(not 0 <= value <= 9 for row in board for value in row):
        raise ValueError("sudoku cells must hold 0 to 9")
    return board if _fill(board, 0) else None