"""Element-wise copying that stays correct when source and target overlap."""

from __future__ import annotations

from enum import IntEnum
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class CopyDirection(IntEnum):
    """Order in which elements are copied."""

    LOWER_TO_HIGHER = 0
    HIGHER_TO_LOWER = 1


def _check_range(length: int, offset: int, count: int, what: str) -> None:
    if offset < 0 or offset + count > length:
        raise IndexError(f"{what} range [{offset}, {offset + count}) exceeds length {length}")


def move_bytes(buffer: MutableSequence[T], dest: int, src: int, count: int) -> CopyDirection:
    """Copy ``count`` elements of ``buffer`` from offset ``src`` to ``dest``.

    When the target starts inside the source range the copy runs from the
    highest element down, so no source element is overwritten before it is
    read. Returns the direction used.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    _check_range(len(buffer), src, count, "source")
    _check_range(len(buffer), dest, count, "destination")
    if dest <= src + count <= dest + count:
        for i in reversed(range(count)):
            buffer[dest + i] = buffer[src + i]
        return CopyDirection.HIGHER_TO_LOWER
    for i in range(count):
        buffer[dest + i] = buffer[src + i]
    return CopyDirection.LOWER_TO_HIGHER


def copy_between(dest: MutableSequence[T], src: Sequence[T], count: int) -> CopyDirection:
    """Copy the first ``count`` elements of ``src`` into the start of ``dest``."""
    if dest is src:
        return move_bytes(dest, 0, 0, count)
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    _check_range(len(src), 0, count, "source")
    _check_range(len(dest), 0, count, "destination")
    dest[:count] = src[:count]
    return CopyDirection.LOWER_TO_HIGHER