"""
Epoch Time
==========

Whole seconds since the UNIX epoch as an unsigned 64-bit value.

Canonical bytes are 8 bytes little-endian, so EpochTime plugs into the
ByteArray and Hashable contracts like any fixed-length value.
"""

from __future__ import annotations

import functools
import math
from datetime import datetime, timezone
from typing import Final

from safebytes.core.encoding.byte_array import ByteArray, InvalidLength
from safebytes.core.encoding.hashable import Hashable
from safebytes.core.encoding.hex import BytesLike


EPOCH_TIME_SIZE: Final[int] = 8
MAX_EPOCH_TIME: Final[int] = 2**64 - 1


@functools.total_ordering
class EpochTime(ByteArray, Hashable):
    """
    Immutable UNIX timestamp in seconds.

    Usage:
        t = EpochTime.now()
        int(t)                 # 1760000000
        t.to_datetime()        # aware UTC datetime
        EpochTime.from_bytes(t.as_bytes()) == t
    """

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int) -> None:
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise TypeError(f"EpochTime expects int seconds, got {type(seconds).__name__}")
        if not 0 <= seconds <= MAX_EPOCH_TIME:
            raise ValueError(f"EpochTime must be between 0 and {MAX_EPOCH_TIME}, got {seconds}")
        object.__setattr__(self, "_seconds", seconds)

    @classmethod
    def now(cls) -> "EpochTime":
        """Current UTC time, truncated to whole seconds."""
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, value: datetime) -> "EpochTime":
        """From a datetime; naive values are taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls(math.floor(value.timestamp()))

    def to_datetime(self) -> datetime:
        """Aware UTC datetime."""
        return datetime.fromtimestamp(self._seconds, tz=timezone.utc)

    def as_int(self) -> int:
        return self._seconds

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "EpochTime":
        raw = bytes(data)
        if len(raw) != EPOCH_TIME_SIZE:
            raise InvalidLength(EPOCH_TIME_SIZE, len(raw))
        return cls(int.from_bytes(raw, "little"))

    def as_bytes(self) -> bytes:
        return self._seconds.to_bytes(EPOCH_TIME_SIZE, "little")

    def __int__(self) -> int:
        return self._seconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        return self._seconds < other._seconds

    def __hash__(self) -> int:
        return hash(("EpochTime", self._seconds))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("EpochTime is immutable")

    def __str__(self) -> str:
        return str(self._seconds)

    def __repr__(self) -> str:
        return f"EpochTime({self._seconds})"


__all__ = ["EPOCH_TIME_SIZE", "MAX_EPOCH_TIME", "EpochTime"]
