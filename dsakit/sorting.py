"""In-place integer sorting algorithms.

Each sort rearranges the list it is given and also returns it, so calls
can be chained or used in expressions.
"""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def bubble_sort(items: MutableSequence[T]) -> MutableSequence[T]:
    """Sort ``items`` in place by repeatedly swapping adjacent pairs."""
    for end in range(len(items), 0, -1):
        swapped = False
        for j in range(end - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(items: MutableSequence[T]) -> MutableSequence[T]:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        current = items[i]
        j = i
        while j > 0 and items[j - 1] > current:
            items[j] = items[j - 1]
            j -= 1
        items[j] = current
    return items


def _merge(items: MutableSequence[T], start: int, mid: int, end: int) -> None:
    left = list(items[start:mid])
    right = list(items[mid:end])
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Take from the left run on ties so the sort stays stable.
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[start:end] = merged


def _merge_sort(items: MutableSequence[T], start: int, end: int) -> None:
    if end - start < 2:
        return
    mid = start + (end - start) // 2
    _merge_sort(items, start, mid)
    _merge_sort(items, mid, end)
    _merge(items, start, mid, end)


def merge_sort(items: MutableSequence[T]) -> MutableSequence[T]:
    """Sort ``items`` in place with a top-down merge sort."""
    _merge_sort(items, 0, len(items))
    return items


def _quick_sort(items: MutableSequence[T], start: int, end: int) -> None:
    if start >= end:
        return
    left, right = start, end
    # The middle element is the pivot, so no final pivot swap is needed.
    pivot = items[start + (end - start) // 2]
    while left <= right:
        while items[left] < pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left <= right:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1
    _quick_sort(items, start, right)
    _quick_sort(items, left, end)


def quick_sort(items: MutableSequence[T]) -> MutableSequence[T]:
    """Sort ``items`` in place with a middle-pivot quicksort."""
    _quick_sort(items, 0, len(items) - 1)
    return items


def heapify(items: MutableSequence[T], size: int, index: int) -> None:
    """Sift ``items[index]`` down so the subtree rooted there is a max-heap.

    Only the first ``size`` elements are considered part of the heap.
    """
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(items: MutableSequence[T]) -> MutableSequence[T]:
    """Sort ``items`` in place by building a max-heap and draining it."""
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapify(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items