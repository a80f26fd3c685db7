"""A fixed-size two-dimensional grid of bits packed into 64-bit words."""

from __future__ import annotations

_ENTRY_BITS = 64
_ENTRY_BYTES = 8


class BitMask:
    """A width by height grid of booleans; cells outside the grid read as False."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        self.width = width
        self.height = height
        length = -(-(width * height) // _ENTRY_BITS)
        self._contents = [0] * length

    @property
    def size(self) -> int:
        """Storage used in bytes."""
        return len(self._contents) * _ENTRY_BYTES

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        index = y * self.width + x
        return divmod(index, _ENTRY_BITS)

    def get(self, x: int, y: int) -> bool:
        """Return the bit at (x, y)."""
        location = self._locate(x, y)
        if location is None:
            return False
        container, bit = location
        return (self._contents[container] >> bit) & 1 == 1

    def set(self, x: int, y: int, value: bool) -> None:
        """Set the bit at (x, y); coordinates outside the grid are ignored."""
        location = self._locate(x, y)
        if location is None:
            return
        container, bit = location
        if value:
            self._contents[container] |= 1 << bit
        else:
            self._contents[container] &= ~(1 << bit)