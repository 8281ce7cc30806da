"""
ByteArray Contract
==================

Two-way mapping between a value and its flat byte representation.

Rules:
- from_bytes() accepts only the exact length a type requires (or what its
  own validity check allows); anything else raises a ConversionError
- as_bytes() returns exactly what from_bytes() needs to rebuild the value
- to_hex()/from_hex() are thin compositions over the hex codec

Types provided here:
- ByteVector: variable length
- FixedBytes: fixed length, declared with a class keyword
- Bytes32 / Bytes64: ready-made fixed lengths for digests and keys
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Optional, TypeVar

from safebytes.core.encoding.hashable import Hashable
from safebytes.core.encoding.hex import BytesLike, HexError, decode, encode


_BA = TypeVar("_BA", bound="ByteArray")


class ConversionError(ValueError):
    """Raised when bytes cannot be turned into the requested type."""
    pass


class InvalidLength(ConversionError):
    """The input was the wrong length for the target type."""

    def __init__(self, expected: Optional[int], actual: int) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            msg = f"The input data was the incorrect length ({actual} bytes) to perform the conversion"
        else:
            msg = f"The input data was the incorrect length: expected {expected} bytes, got {actual}"
        super().__init__(msg)


class InvalidValue(ConversionError):
    """The input had the right shape but is not a valid value of the type."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not create a ByteArray when converting from a different format: {reason}")


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes-like, got {type(data).__name__}")


class ByteArray(ABC):
    """
    Capability: convert to and from a flat byte sequence.

    Implementers supply from_bytes() and as_bytes(); the hex and
    vector conversions come for free.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def from_bytes(cls: type[_BA], data: BytesLike) -> _BA:
        """Build the value from bytes or raise ConversionError."""

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Canonical bytes of the value."""

    def to_vec(self) -> list[int]:
        return list(self.as_bytes())

    @classmethod
    def from_vec(cls: type[_BA], values: Iterable[int]) -> _BA:
        try:
            raw = bytes(values)
        except (TypeError, ValueError) as e:
            raise InvalidValue("vector items must be integers in 0..255") from e
        return cls.from_bytes(raw)

    def to_hex(self) -> str:
        return encode(self.as_bytes())

    @classmethod
    def from_hex(cls: type[_BA], text: str) -> _BA:
        """
        Build the value from hex text.

        Raises:
            InvalidValue: If the text is not valid hex (cause chained)
            InvalidLength: If the decoded bytes have the wrong length
        """
        try:
            raw = decode(text)
        except HexError as e:
            raise InvalidValue("invalid hex representation for the target type") from e
        return cls.from_bytes(raw)

    def __bytes__(self) -> bytes:
        return self.as_bytes()


@functools.total_ordering
class _BytesValue(ByteArray, Hashable):
    """Immutable bytes holder with byte-wise equality, ordering and hashing."""

    __slots__ = ("_data",)

    _data: bytes

    def as_bytes(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data < other._data  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_data"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.to_hex()}')"


class ByteVector(_BytesValue):
    """Variable-length byte value. Every length is valid."""

    __slots__ = ()

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = _as_bytes(data)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "ByteVector":
        return cls(data)


class FixedBytes(_BytesValue):
    """
    Fixed-length byte value.

    Declare the length when subclassing:

        class PublicKey(FixedBytes, length=32):
            pass

    Subclasses can override _validate() to reject bit patterns that
    have the right length but are not valid for the type.
    """

    __slots__ = ()

    LENGTH: ClassVar[Optional[int]] = None

    def __init_subclass__(cls, length: Optional[int] = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if length is not None:
            if length < 0:
                raise ValueError(f"length must be non-negative, got {length}")
            cls.LENGTH = length

    def __init__(self, data: BytesLike) -> None:
        raw = _as_bytes(data)
        type(self)._check(raw)
        self._data = raw

    @classmethod
    def _check(cls, raw: bytes) -> None:
        if cls.LENGTH is None:
            raise TypeError(f"{cls.__name__} has no declared length")
        if len(raw) != cls.LENGTH:
            raise InvalidLength(cls.LENGTH, len(raw))
        cls._validate(raw)

    @classmethod
    def _validate(cls, raw: bytes) -> None:
        """Hook for type-specific checks; raise InvalidValue to reject."""

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "FixedBytes":
        return cls(data)

    @classmethod
    def zero(cls) -> "FixedBytes":
        if cls.LENGTH is None:
            raise TypeError(f"{cls.__name__} has no declared length")
        return cls(bytes(cls.LENGTH))


class Bytes32(FixedBytes, length=32):
    """32-byte value (digests, public keys)."""

    __slots__ = ()


class Bytes64(FixedBytes, length=64):
    """64-byte value (signatures, wide digests)."""

    __slots__ = ()


__all__ = [
    "ConversionError",
    "InvalidLength",
    "InvalidValue",
    "ByteArray",
    "ByteVector",
    "FixedBytes",
    "Bytes32",
    "Bytes64",
]
