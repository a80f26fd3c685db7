"""Byte-order helpers for 32-bit unsigned integers."""

import sys

_U32_MAX = 0xFFFFFFFF


def swap_u32(value: int) -> int:
    """Reverse the byte order of a 32-bit unsigned integer."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"not a 32-bit unsigned integer: {value}")
    return int.from_bytes(value.to_bytes(4, "little"), "big")


def to_big_endian(value: int) -> int:
    """Convert a host-order value to big-endian order."""
    if sys.byteorder == "big":
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"not a 32-bit unsigned integer: {value}")
        return value
    return swap_u32(value)


def from_big_endian(value: int) -> int:
    """Convert a big-endian value to host order."""
    return to_big_endian(value)