"""Star patterns drawn with '*' and '.' characters."""

from __future__ import annotations


def left_triangle(n: int) -> list[str]:
    """Rows of a triangle growing from the left: row i has i stars then dots."""
    return ["*" * i + "." * (n - i) for i in range(1, n + 1)]


def inverted_right_triangle(n: int) -> list[str]:
    """Rows of a triangle shrinking to the right: dots then fewer stars each row."""
    return ["." * (n - i) + "*" * i for i in range(n, 0, -1)]


def pyramid(n: int) -> list[str]:
    """Rows of a centred pyramid: row i has 2i - 1 stars padded by dots."""
    return [
        "." * (n - i) + "*" * (2 * i - 1) + "." * (n - i) for i in range(1, n + 1)
    ]