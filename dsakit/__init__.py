"""Classic data structures, algorithms and small embedded-style systems.

Sorting, number conversions, trees, heaps, queues, hash tables, buffers,
a memory pool, timers, a state machine, a deck-shuffling puzzle, a fan
control group and a priority scheduler.
"""

__version__ = "0.1.0"