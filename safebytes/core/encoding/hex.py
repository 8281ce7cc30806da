"""
Hex Codec
=========

Conversion between byte sequences and hexadecimal text.

Format:
- Output is always lowercase, two characters per byte, high nibble first
- Input may be upper-, lower- or mixed-case; it is normalized on decode
- No "0x" prefix, no whitespace, no separators

Both directions run in linear time and space, so megabyte-sized
inputs are fine.
"""

from __future__ import annotations

import re
from typing import Final, Iterable, Protocol, TypeVar, Union, runtime_checkable


BytesLike = Union[bytes, bytearray, memoryview]

_NON_HEX: Final[re.Pattern[str]] = re.compile(r"[^0-9a-fA-F]")


class HexError(ValueError):
    """Raised when text cannot be decoded as hex."""
    pass


class OddLength(HexError):
    """Hex text must contain an even number of characters."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Hex string lengths must be a multiple of 2 (got {length})")


class InvalidChar(HexError):
    """A character outside 0-9, a-f, A-F was found."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(
            f"Only hexadecimal characters (0-9, a-f) are permitted "
            f"(first invalid character at position {position})"
        )


def encode(data: BytesLike) -> str:
    """
    Encode bytes as lowercase hex.

    Args:
        data: Bytes to encode

    Returns:
        Hex string of length 2 * len(data)
    """
    if isinstance(data, memoryview):
        return data.hex()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"encode expects bytes-like, got {type(data).__name__}")
    return data.hex()


def decode(text: str) -> bytes:
    """
    Decode hex text into bytes.

    Args:
        text: Hex string (even length, case-insensitive)

    Returns:
        Decoded bytes, len(text) // 2 long

    Raises:
        OddLength: If the text has an odd number of characters
        InvalidChar: At the first character that is not a hex digit
    """
    if not isinstance(text, str):
        raise TypeError(f"decode expects str, got {type(text).__name__}")

    if len(text) % 2 == 1:
        raise OddLength(len(text))

    # bytes.fromhex tolerates whitespace, so validate first
    bad = _NON_HEX.search(text)
    if bad is not None:
        raise InvalidChar(bad.start())

    return bytes.fromhex(text)


def encode_many(items: Iterable[BytesLike]) -> list[str]:
    """Encode each byte sequence in order."""
    return [encode(item) for item in items]


H = TypeVar("H", bound="Hex")


@runtime_checkable
class Hex(Protocol):
    """Anything that can represent itself as hex and be rebuilt from it."""

    def to_hex(self) -> str:
        ...

    @classmethod
    def from_hex(cls: type[H], text: str) -> H:
        ...


__all__ = [
    "BytesLike",
    "HexError",
    "OddLength",
    "InvalidChar",
    "encode",
    "decode",
    "encode_many",
    "Hex",
]
