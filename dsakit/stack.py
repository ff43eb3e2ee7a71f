"""A fixed-capacity stack of integers."""

from __future__ import annotations


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def is_full(self) -> bool:
        """Return whether the stack holds ``capacity`` values."""
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        """Return whether the stack holds no values."""
        return not self._items

    def push(self, value: int) -> None:
        """Push ``value``; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"