"""A minimal priority-based preemptive scheduler with tick-driven delays."""

from __future__ import annotations

from dataclasses import dataclass

MAX_PRIORITY = 32
IDLE_PRIORITY = 0


@dataclass(eq=False)
class OSThread:
    """A thread control block; higher ``prio`` runs first, 0 is the idle thread."""

    name: str = ""
    prio: int = 0
    timeout: int = 0


class Scheduler:
    """Tracks ready and delayed threads as bit sets indexed by priority.

    Priority ``p`` (1..32) occupies bit ``p - 1``. The idle thread is started
    at priority 0 and runs whenever no other thread is ready.
    """

    def __init__(self) -> None:
        self.threads: list[OSThread | None] = [None] * (MAX_PRIORITY + 1)
        self.ready_set = 0
        self.delayed_set = 0
        self.current: OSThread | None = None
        self.idle_thread = OSThread(name="idle")
        self.start(self.idle_thread, IDLE_PRIORITY)

    def start(self, thread: OSThread, prio: int) -> None:
        """Register ``thread`` at the unused priority ``prio`` and make it ready."""
        if not 0 <= prio <= MAX_PRIORITY:
            raise ValueError(f"priority must be between 0 and {MAX_PRIORITY}, got {prio}")
        if self.threads[prio] is not None:
            raise ValueError(f"priority {prio} is already in use")
        self.threads[prio] = thread
        thread.prio = prio
        if prio > 0:
            self.ready_set |= 1 << (prio - 1)

    def schedule(self) -> OSThread:
        """Switch to the highest-priority ready thread (or idle) and return it."""
        if self.ready_set == 0:
            chosen = self.threads[IDLE_PRIORITY]
        else:
            chosen = self.threads[self.ready_set.bit_length()]
        if chosen is None:
            raise RuntimeError("ready set refers to an unregistered priority")
        self.current = chosen
        return chosen

    def tick(self) -> None:
        """Count down every delayed thread; make those reaching zero ready."""
        working = self.delayed_set
        while working:
            thread = self.threads[working.bit_length()]
            if thread is None or thread.timeout == 0:
                raise RuntimeError("delayed set refers to an invalid thread")
            bit = 1 << (thread.prio - 1)
            thread.timeout -= 1
            if thread.timeout == 0:
                self.ready_set |= bit
                self.delayed_set &= ~bit
            working &= ~bit

    def delay(self, ticks: int) -> OSThread:
        """Block the current thread for ``ticks`` ticks; return the thread run next."""
        if self.current is None or self.current is self.idle_thread:
            raise RuntimeError("delay() must be called from a non-idle running thread")
        if ticks < 1:
            raise ValueError(f"ticks must be positive, got {ticks}")
        thread = self.current
        thread.timeout = ticks
        bit = 1 << (thread.prio - 1)
        self.ready_set &= ~bit
        self.delayed_set |= bit
        return self.schedule()

    def __repr__(self) -> str:
        return (
            f"Scheduler(ready={self.ready_set:#x}, delayed={self.delayed_set:#x}, "
            f"current={self.current.name if self.current else None!r})"
        )