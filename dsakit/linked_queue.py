"""A first-in first-out queue built on singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a bounded queue at capacity."""


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node | None = None


class LinkedQueue:
    """A linked-list queue, unbounded unless ``capacity`` is given."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear; raise QueueFullError when at capacity."""
        if self.capacity is not None and self._size >= self.capacity:
            raise QueueFullError("queue is full")
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """Return the front value without removing it."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        return self._head.value

    def back(self) -> int:
        """Return the rear value without removing it."""
        if self._tail is None:
            raise QueueEmptyError("queue is empty")
        return self._tail.value

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue(capacity={self.capacity}, items={list(self)!r})"