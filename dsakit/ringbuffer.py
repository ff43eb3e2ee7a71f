"""A circular ring buffer, a blocking bounded buffer, and thread demos."""

from __future__ import annotations

import argparse
import threading
import time

RING_BUFFER_SIZE = 24
DEFAULT_THREADS = 2


class BufferFullError(OverflowError):
    """Raised when writing to a full ring buffer."""


class BufferEmptyError(IndexError):
    """Raised when reading from an empty ring buffer."""


class RingBuffer:
    """A FIFO ring of ``size`` slots; one slot stays empty to mark fullness.

    Safe for one writer thread and one reader thread at a time.
    """

    def __init__(self, size: int = RING_BUFFER_SIZE) -> None:
        if size < 2:
            raise ValueError(f"size must be at least 2, got {size}")
        self.size = size
        self._data = [0] * size
        self._head = 0
        self._tail = 0

    def is_full(self) -> bool:
        """Return whether another write would fail."""
        return (self._head + 1) % self.size == self._tail

    def is_empty(self) -> bool:
        """Return whether there is nothing to read."""
        return self._head == self._tail

    def write(self, value: int) -> None:
        """Append ``value``; raise BufferFullError when full."""
        if self.is_full():
            raise BufferFullError("ring buffer is full")
        self._data[self._head] = value
        self._head = (self._head + 1) % self.size

    def read(self) -> int:
        """Remove and return the oldest value; raise BufferEmptyError when empty."""
        if self.is_empty():
            raise BufferEmptyError("ring buffer is empty")
        value = self._data[self._tail]
        self._tail = (self._tail + 1) % self.size
        return value

    def __len__(self) -> int:
        return (self._head - self._tail) % self.size


class BoundedStackBuffer:
    """A thread-safe last-in first-out buffer of at most ``size`` values.

    ``put`` blocks while the buffer is full and ``get`` blocks while it is empty.
    """

    def __init__(self, size: int = RING_BUFFER_SIZE) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._items: list[int] = []
        self._cond = threading.Condition()

    def put(self, value: int) -> None:
        """Push ``value``, waiting for room if needed."""
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) < self.size)
            self._items.append(value)
            self._cond.notify_all()

    def get(self) -> int:
        """Pop the most recently put value, waiting for one if needed."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            value = self._items.pop()
            self._cond.notify_all()
            return value

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


def run_producer_consumer(target: int, size: int = RING_BUFFER_SIZE) -> list[int]:
    """Stream 1..``target`` through a ring buffer between two threads.

    The writer retries while the buffer is full; the reader retries while it
    is empty and stops after reading ``target``. Returns the values read.
    """
    if target < 1:
        raise ValueError(f"target must be positive, got {target}")
    buffer = RingBuffer(size)
    received: list[int] = []

    def writer() -> None:
        counter = 1
        while counter <= target:
            try:
                buffer.write(counter)
            except BufferFullError:
                time.sleep(0)
                continue
            counter += 1

    def reader() -> None:
        while True:
            try:
                value = buffer.read()
            except BufferEmptyError:
                time.sleep(0)
                continue
            received.append(value)
            if value == target:
                return

    workers = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return received


def run_parallel(
    target: int, threads: int = DEFAULT_THREADS, size: int = RING_BUFFER_SIZE
) -> list[int]:
    """Run ``threads`` writers and ``threads`` readers over a bounded buffer.

    Each writer puts ``target`` down to 1; each reader takes ``target``
    values. Returns every value read, in the order they were read.
    """
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    if threads < 1:
        raise ValueError(f"threads must be positive, got {threads}")
    buffer = BoundedStackBuffer(size)
    received: list[int] = []
    lock = threading.Lock()

    def writer() -> None:
        for value in range(target, 0, -1):
            buffer.put(value)

    def reader() -> None:
        for _ in range(target):
            value = buffer.get()
            with lock:
                received.append(value)

    workers = [threading.Thread(target=writer) for _ in range(threads)]
    workers += [threading.Thread(target=reader) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return received


def main(argv: list[str] | None = None) -> int:
    """Run the producer/consumer demo and print every value read."""
    parser = argparse.ArgumentParser(
        prog="ringbuffer", description="Pass values between threads through a buffer."
    )
    parser.add_argument("target", type=int, help="number of values to pass")
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="run this many writer/reader pairs over a blocking buffer",
    )
    args = parser.parse_args(argv)
    if args.target < 1:
        parser.error("target must be positive")
    if args.threads is None:
        values = run_producer_consumer(args.target)
    else:
        if args.threads < 1:
            parser.error("threads must be positive")
        values = run_parallel(args.target, args.threads)
    for value in values:
        print(f"Read value {value}")
    return 0