"""A single-level timing wheel of fixed slot count."""

from __future__ import annotations

from collections import deque
from typing import Callable

WHEEL_BIN_NUMBER = 10
GRANULARITY = 1_000_000


class DeadlineTooFarError(ValueError):
    """Raised when a deadline lies beyond the span of the wheel."""


class TimingWheel:
    """Buckets callbacks by deadline into ``slots`` slots of ``granularity`` each.

    Each ``tick`` runs the callbacks of the current slot and moves on to the
    next one, wrapping around at the end.
    """

    def __init__(self, granularity: int = GRANULARITY, slots: int = WHEEL_BIN_NUMBER) -> None:
        if granularity <= 0:
            raise ValueError(f"granularity must be positive, got {granularity}")
        if slots <= 0:
            raise ValueError(f"slots must be positive, got {slots}")
        self.granularity = granularity
        self.slots = slots
        self.current_slot = 0
        self._bins: list[deque[tuple[int, Callable[[], object]]]] = [
            deque() for _ in range(slots)
        ]

    def install(self, deadline: int, callback: Callable[[], object]) -> int:
        """Schedule ``callback`` ``deadline`` time units ahead; return its slot."""
        if deadline < 0:
            raise ValueError(f"deadline must be non-negative, got {deadline}")
        offset = int(deadline) // self.granularity
        if offset >= self.slots:
            raise DeadlineTooFarError("deadline exceeds timing wheel size")
        index = (self.current_slot + offset) % self.slots
        self._bins[index].append((deadline, callback))
        return index

    def tick(self) -> list[int]:
        """Run the current slot's callbacks in order; return their deadlines."""
        pending = self._bins[self.current_slot]
        fired: list[int] = []
        while pending:
            deadline, callback = pending.popleft()
            callback()
            fired.append(deadline)
        self.current_slot = (self.current_slot + 1) % self.slots
        return fired

    def __len__(self) -> int:
        return sum(len(bin_) for bin_ in self._bins)

    def __repr__(self) -> str:
        return (
            f"TimingWheel(granularity={self.granularity}, slots={self.slots}, "
            f"current_slot={self.current_slot}, pending={len(self)})"
        )