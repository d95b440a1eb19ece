"""Classic algorithms and data structures in plain Python, with no dependencies."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "binary_tree",
    "bst",
    "graph",
    "hash_table",
    "heap",
    "numbers",
    "patterns",
    "queues",
    "sorting",
    "stacks",
]