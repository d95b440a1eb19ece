"""A hash table with separate chaining and doubling on a high load factor."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_TABLE_SIZE = 5


class HashTable:
    """Maps string keys to values using chains of entries in each bucket.

    New entries go to the head of their chain, so a key inserted twice is
    held twice and lookups see the most recent value. When the number of
    entries reaches twice the table size, the table doubles and every entry
    is inserted again.
    """

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self.table_size = size
        self._count = 0
        self._table: list[list[tuple[str, int]]] = [[] for _ in range(size)]

    def _index(self, key: str) -> int:
        total = sum((ord(ch) * ord(ch)) % self.table_size for ch in key)
        return total % self.table_size

    def insert(self, key: str, value: int) -> None:
        """Add ``key`` with ``value`` at the head of its chain; may trigger a rehash."""
        self._table[self._index(key)].insert(0, (key, value))
        self._count += 1
        if self._count // self.table_size > 1:
            self.rehash()

    def rehash(self) -> None:
        """Double the table size and insert every entry again, chain by chain."""
        old_table = self._table
        self.table_size *= 2
        self._count = 0
        self._table = [[] for _ in range(self.table_size)]
        for chain in old_table:
            for key, value in chain:
                self.insert(key, value)

    def remove(self, key: str) -> bool:
        """Remove the most recent entry for ``key``; return False if there is none."""
        chain = self._table[self._index(key)]
        for position, (entry_key, _) in enumerate(chain):
            if entry_key == key:
                del chain[position]
                self._count -= 1
                return True
        return False

    def exists(self, key: str) -> bool:
        """Return True if ``key`` has an entry."""
        return any(entry_key == key for entry_key, _ in self._table[self._index(key)])

    def search(self, key: str) -> int:
        """Return the most recent value for ``key``; raises KeyError if absent."""
        for entry_key, value in self._table[self._index(key)]:
            if entry_key == key:
                return value
        raise KeyError(key)

    def buckets(self) -> list[list[tuple[str, int]]]:
        """A copy of every bucket's chain, head first, in bucket order."""
        return [list(chain) for chain in self._table]

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        for chain in self._table:
            yield from chain