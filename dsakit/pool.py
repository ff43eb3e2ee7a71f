"""A pool allocator handing out fixed-size slots from growing blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType

# A freed slot must be able to hold a link to the next free slot.
MIN_ELEMENT_SIZE = 8
INITIAL_BLOCKS = 1


@dataclass(frozen=True)
class PoolSlot:
    """A slot of ``element_size`` bytes at ``index`` within block ``block``."""

    block: int
    index: int
    memory: memoryview = field(compare=False, repr=False)
    owner: object = field(compare=False, repr=False, default=None)


class Pool:
    """Allocates equally sized slots, ``block_size`` slots per block.

    Freed slots are reused most-recent first. ``free_all`` forgets every
    allocation but keeps the blocks, which are reused by later allocations.
    """

    def __init__(self, element_size: int, block_size: int) -> None:
        if element_size < 1:
            raise ValueError(f"element_size must be positive, got {element_size}")
        if block_size < 1:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self.element_size = max(element_size, MIN_ELEMENT_SIZE)
        self.block_size = block_size
        self._blocks: list[bytearray | None] = [None] * INITIAL_BLOCKS
        self._closed = False
        self.free_all()

    @property
    def block_count(self) -> int:
        """Number of blocks currently allocated."""
        return sum(block is not None for block in self._blocks)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("pool is closed")

    def allocate(self) -> PoolSlot:
        """Return a free slot, recycling freed ones first."""
        self._ensure_open()
        if self._freed:
            return self._freed.pop()
        self._used += 1
        if self._used == self.block_size:
            self._used = 0
            self._block += 1
            if self._block == len(self._blocks):
                self._blocks.extend([None] * len(self._blocks))
            if self._blocks[self._block] is None:
                self._blocks[self._block] = bytearray(self.element_size * self.block_size)
        start = self._used * self.element_size
        view = memoryview(self._blocks[self._block])[start : start + self.element_size]
        return PoolSlot(self._block, self._used, view, self)

    def free(self, slot: PoolSlot) -> None:
        """Return ``slot`` to the pool for reuse."""
        self._ensure_open()
        if slot.owner is not self:
            raise ValueError("slot does not belong to this pool")
        self._freed.append(slot)

    def free_all(self) -> None:
        """Forget all allocations while keeping the blocks for reuse."""
        self._used = self.block_size - 1
        self._block = -1
        self._freed: list[PoolSlot] = []

    def close(self) -> None:
        """Release every block; the pool cannot be used afterwards."""
        self._blocks = []
        self._freed = []
        self._closed = True

    def __enter__(self) -> Pool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Pool(element_size={self.element_size}, block_size={self.block_size}, "
            f"blocks={self.block_count})"
        )