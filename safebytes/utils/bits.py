"""
Conversion between integers and little-endian bit lists.
"""

from __future__ import annotations

from typing import Final, Optional, Sequence


WORD_BITS: Final[int] = 64


def byte_to_bits(value: int) -> list[bool]:
    """Eight bits of a byte, least significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte_to_bits expects int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [bool(value & (1 << i)) for i in range(8)]


def bytes_to_bits(data: bytes | bytearray | memoryview) -> list[bool]:
    """Bits of every byte in order, each byte least significant first."""
    bits: list[bool] = []
    for byte in bytes(data):
        bits.extend(byte_to_bits(byte))
    return bits


def checked_bits_to_uint(bits: Sequence[bool], max_bits: int = WORD_BITS) -> Optional[int]:
    """
    Little-endian bits to an unsigned integer.

    Returns None when there are more bits than max_bits.
    """
    if len(bits) > max_bits:
        return None
    value = 0
    for i, bit in enumerate(bits):
        if bit:
            value |= 1 << i
    return value


__all__ = ["WORD_BITS", "byte_to_bits", "bytes_to_bits", "checked_bits_to_uint"]
