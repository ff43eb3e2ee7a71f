"""A fixed-size array of bits."""

from __future__ import annotations


class BitArray:
    """A fixed number of bits, all clear initially, addressed by index."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._bits = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"bit index {index} out of range for {self.size} bits")

    def set(self, index: int) -> None:
        """Set the bit at ``index``."""
        self._check(index)
        self._bits |= 1 << index

    def clear(self, index: int) -> None:
        """Clear the bit at ``index``."""
        self._check(index)
        self._bits &= ~(1 << index)

    def test(self, index: int) -> bool:
        """Return whether the bit at ``index`` is set."""
        self._check(index)
        return bool(self._bits >> index & 1)

    def set_bits(self) -> list[int]:
        """Return the indices of all set bits in ascending order."""
        return [i for i in range(self.size) if self._bits >> i & 1]

    def __repr__(self) -> str:
        return f"BitArray(size={self.size}, set={self.set_bits()})"