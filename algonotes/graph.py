"""A graph stored as adjacency lists, with breadth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable


class Graph:
    """Adjacency lists keyed by node; parallel edges are kept as given."""

    def __init__(self) -> None:
        self._adjacent: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable, bidirectional: bool = True) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``bidirectional`` is False."""
        self._adjacent.setdefault(u, []).append(v)
        if bidirectional:
            self._adjacent.setdefault(v, []).append(u)
        else:
            self._adjacent.setdefault(v, [])

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """The nodes ``node`` has edges to, in the order they were added."""
        return list(self._adjacent.get(node, ()))

    def adjacency(self) -> dict[Hashable, list[Hashable]]:
        """A copy of every node's neighbour list."""
        return {node: list(nbrs) for node, nbrs in self._adjacent.items()}

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Nodes reachable from ``start`` in breadth-first order."""
        visited = {start}
        order: list[Hashable] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adjacent.get(node, ()):
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def __contains__(self, node: object) -> bool:
        return node in self._adjacent

    def __len__(self) -> int:
        return len(self._adjacent)