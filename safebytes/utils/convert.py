"""
Batch conversion helpers.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar


T = TypeVar("T")
U = TypeVar("U")


def try_convert_all(items: Iterable[T], converter: Callable[[T], U]) -> list[U]:
    """
    Convert every item, in order.

    The first exception raised by the converter propagates unchanged;
    no partial result is returned.

    Usage:
        keys = try_convert_all(hex_keys, Bytes32.from_hex)
    """
    return [converter(item) for item in items]


__all__ = ["try_convert_all"]
