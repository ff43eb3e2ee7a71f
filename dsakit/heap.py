"""A fixed-capacity max-heap of integers stored in a list."""

from __future__ import annotations

from typing import Iterator


class HeapFullError(OverflowError):
    """Raised when pushing onto a heap that is at capacity."""


class HeapEmptyError(IndexError):
    """Raised when reading from an empty heap."""


def parent(index: int) -> int:
    """Return the index of the parent of a non-root ``index``."""
    if index <= 0:
        raise ValueError(f"index {index} has no parent")
    return (index - 1) // 2


def left_child(index: int) -> int:
    """Return the index of the left child of ``index``."""
    return 2 * index + 1


def right_child(index: int) -> int:
    """Return the index of the right child of ``index``."""
    return 2 * index + 2


class MaxHeap:
    """A max-heap holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._data: list[int] = []

    def push(self, value: int) -> None:
        """Add ``value``; raise HeapFullError when at capacity."""
        if len(self._data) >= self.capacity:
            raise HeapFullError("heap is full")
        data = self._data
        data.append(value)
        index = len(data) - 1
        while index > 0:
            up = parent(index)
            if data[up] >= data[index]:
                break
            data[up], data[index] = data[index], data[up]
            index = up

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = index
            left, right = left_child(index), right_child(index)
            if left < size and data[left] > data[largest]:
                largest = left
            if right < size and data[right] > data[largest]:
                largest = right
            if largest == index:
                return
            data[index], data[largest] = data[largest], data[index]
            index = largest

    def pop(self) -> int:
        """Remove and return the largest value; raise HeapEmptyError if empty."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        data = self._data
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in storage (level) order."""
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"MaxHeap(capacity={self.capacity}, data={self._data!r})"