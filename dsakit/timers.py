"""A tick-driven timer list drawing timers from a fixed pool."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

NUM_TIMERS = 10


class CallbackResult(IntEnum):
    """What a timer callback asks the list to do with its timer."""

    NORMAL = 0
    FREE_TIMER = 1
    INVALID = 2


class TimerType(IntEnum):
    """How a configured fire time is interpreted."""

    RELATIVE = 0
    ABSOLUTE = 1
    INVALID = 2


class TimerPoolExhausted(RuntimeError):
    """Raised when no free timer is left in the pool."""


@dataclass(eq=False)
class Timer:
    """A timer firing at absolute tick ``fire``, calling ``callback(user_data)``."""

    fire: int = 0
    callback: Callable[[Any], Any] | None = None
    user_data: Any = None


class TimerList:
    """Active timers kept sorted by fire tick, plus a pool of free timers."""

    def __init__(self, capacity: int = NUM_TIMERS) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.tick_count = 0
        self._free: list[Timer] = [Timer() for _ in range(capacity)]
        self._active: list[Timer] = []

    def allocate(self) -> Timer:
        """Take a timer from the pool; raise TimerPoolExhausted when none is left."""
        if not self._free:
            raise TimerPoolExhausted("no free timers")
        return self._free.pop()

    def configure(
        self,
        timer: Timer,
        timer_type: TimerType,
        fire: int,
        callback: Callable[[Any], Any],
        user_data: Any = None,
    ) -> None:
        """Set the fire tick, callback and callback argument of ``timer``.

        A relative fire time is counted from the current tick.
        """
        timer_type = TimerType(timer_type)
        if timer_type is TimerType.RELATIVE:
            fire += self.tick_count
        elif timer_type is not TimerType.ABSOLUTE:
            raise ValueError(f"invalid timer type {timer_type!r}")
        timer.fire = fire
        timer.callback = callback
        timer.user_data = user_data

    def arm(self, timer: Timer) -> None:
        """Insert ``timer`` into the active list after timers firing no later."""
        for position, other in enumerate(self._active):
            if timer.fire < other.fire:
                self._active.insert(position, timer)
                return
        self._active.append(timer)

    def disarm(self, timer: Timer) -> None:
        """Remove ``timer`` from the active list."""
        try:
            self._active.remove(timer)
        except ValueError:
            raise ValueError("timer is not armed") from None

    def release(self, timer: Timer) -> None:
        """Return ``timer`` to the free pool."""
        self._free.append(timer)

    def tick(self) -> list[Timer]:
        """Advance one tick and fire every due timer; return those fired.

        A timer whose callback returns FREE_TIMER goes back to the pool.
        """
        self.tick_count += 1
        fired: list[Timer] = []
        while self._active and self._active[0].fire <= self.tick_count:
            timer = self._active.pop(0)
            fired.append(timer)
            result = timer.callback(timer.user_data) if timer.callback else None
            if result == CallbackResult.FREE_TIMER:
                self.release(timer)
        return fired

    def active(self) -> list[Timer]:
        """Return the armed timers in firing order."""
        return list(self._active)

    @property
    def free_count(self) -> int:
        """Number of timers available in the pool."""
        return len(self._free)

    def __repr__(self) -> str:
        return (
            f"TimerList(tick={self.tick_count}, active={len(self._active)}, "
            f"free={len(self._free)})"
        )