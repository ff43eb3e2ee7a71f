"""Integer hash tables: linear probing with tombstones, and separate chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DEFAULT_SIZE = 20


class DuplicateKeyError(KeyError):
    """Raised when inserting a key that a chained table already holds."""


@dataclass
class DataItem:
    """A key with its associated data."""

    key: int
    data: int


# Marks a slot whose item was deleted, so probing continues past it.
TOMBSTONE = DataItem(-1, -1)


class OpenAddressingTable:
    """A fixed-size table resolving collisions by linear probing.

    Deleted slots hold ``TOMBSTONE``; searches probe past them and inserts
    reuse them. Keys are not de-duplicated: a search finds the first match.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._slots: list[DataItem | None] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        for step in range(self.size):
            yield (start + step) % self.size

    def insert(self, key: int, data: int) -> DataItem:
        """Store ``data`` under ``key``; raise OverflowError if no slot is free."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is TOMBSTONE:
                item = DataItem(key, data)
                self._slots[index] = item
                return item
        raise OverflowError("hash table is full")

    def _locate(self, key: int) -> int | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not TOMBSTONE and slot.key == key:
                return index
        return None

    def search(self, key: int) -> DataItem | None:
        """Return the item stored under ``key``, or None."""
        index = self._locate(key)
        return None if index is None else self._slots[index]

    def delete(self, key: int) -> DataItem | None:
        """Remove and return the item stored under ``key``, or None if absent."""
        index = self._locate(key)
        if index is None:
            return None
        item = self._slots[index]
        self._slots[index] = TOMBSTONE
        return item

    def slots(self) -> list[DataItem | None]:
        """Return the slot contents in table order (None for never-used slots)."""
        return list(self._slots)

    def __repr__(self) -> str:
        return f"OpenAddressingTable(size={self.size})"


class ChainedHashTable:
    """A fixed number of buckets, each a chain of items with distinct keys."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._buckets: list[list[DataItem]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[DataItem]:
        return self._buckets[key % self.size]

    def insert(self, key: int, data: int) -> DataItem:
        """Append ``data`` under ``key``; raise DuplicateKeyError if present."""
        if self.search(key) is not None:
            raise DuplicateKeyError(key)
        item = DataItem(key, data)
        self._bucket(key).append(item)
        return item

    def search(self, key: int) -> DataItem | None:
        """Return the item stored under ``key``, or None."""
        return next((item for item in self._bucket(key) if item.key == key), None)

    def delete(self, key: int) -> DataItem | None:
        """Remove and return the item stored under ``key``, or None if absent."""
        bucket = self._bucket(key)
        for position, item in enumerate(bucket):
            if item.key == key:
                del bucket[position]
                return item
        return None

    def buckets(self) -> list[list[DataItem]]:
        """Return a copy of every bucket's chain, in bucket order."""
        return [list(bucket) for bucket in self._buckets]

    def __repr__(self) -> str:
        return f"ChainedHashTable(size={self.size})"