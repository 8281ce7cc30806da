"""
Raw Byte Appending
==================

append_raw_bytes(value, buf) writes the raw little-endian bytes of a
value onto the end of a bytearray. It is used to build hashing
preimages from several fields without an intermediate encoding.

Supported values:
- str: UTF-8 bytes
- bytes / bytearray / memoryview: copied as is
- bool: one byte, 0x01 or 0x00
- int: signed 64-bit little-endian (append_int for other widths)
- datetime: UNIX timestamp in seconds as signed 64-bit little-endian
  (naive datetimes are taken as UTC)
- list / tuple: each item in order
- ByteArray: its canonical bytes

Register more types with append_raw_bytes.register.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from functools import singledispatch
from typing import Any

from safebytes.core.encoding.byte_array import ByteArray


def append_int(value: int, buf: bytearray, width: int = 8, signed: bool = True) -> None:
    """
    Append an integer as little-endian bytes of the given width.

    Raises:
        OverflowError: If the value does not fit
    """
    buf.extend(value.to_bytes(width, "little", signed=signed))


@singledispatch
def append_raw_bytes(value: Any, buf: bytearray) -> None:
    raise TypeError(f"cannot append raw bytes of {type(value).__name__}")


@append_raw_bytes.register
def _(value: str, buf: bytearray) -> None:
    buf.extend(value.encode("utf-8"))


@append_raw_bytes.register(bytes)
@append_raw_bytes.register(bytearray)
@append_raw_bytes.register(memoryview)
def _(value: Any, buf: bytearray) -> None:
    buf.extend(value)


@append_raw_bytes.register
def _(value: bool, buf: bytearray) -> None:
    buf.append(1 if value else 0)


@append_raw_bytes.register
def _(value: int, buf: bytearray) -> None:
    append_int(value, buf)


@append_raw_bytes.register
def _(value: datetime, buf: bytearray) -> None:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    append_int(math.floor(value.timestamp()), buf)


@append_raw_bytes.register(list)
@append_raw_bytes.register(tuple)
def _(value: Any, buf: bytearray) -> None:
    for item in value:
        append_raw_bytes(item, buf)


@append_raw_bytes.register
def _(value: ByteArray, buf: bytearray) -> None:
    buf.extend(value.as_bytes())


def raw_bytes(*values: Any) -> bytes:
    """Concatenated raw bytes of the values."""
    buf = bytearray()
    for value in values:
        append_raw_bytes(value, buf)
    return bytes(buf)


__all__ = ["append_raw_bytes", "append_int", "raw_bytes"]
