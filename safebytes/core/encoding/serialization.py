"""
Serialization Adapters
======================

Glue between ByteArray values and common carriers.

- Human-readable carriers (JSON, YAML, TOML) get lowercase hex
- Binary carriers get the raw canonical bytes
- Secret wrappers always serialize as HIDDEN_MARKER, in every format

This is not a serialization framework: there is no schema, no nesting
beyond what json itself does, and no versioning.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, TypeVar

from safebytes.core.encoding.byte_array import ByteArray, InvalidValue
from safebytes.core.encoding.hex import encode
from safebytes.core.memory.hidden import HIDDEN_MARKER, Hidden
from safebytes.core.memory.safe_array import SafeArray
from safebytes.types.epoch_time import EpochTime


_BA = TypeVar("_BA", bound=ByteArray)


def _is_secret(value: Any) -> bool:
    return isinstance(value, (Hidden, SafeArray))


class SafeJSONEncoder(json.JSONEncoder):
    """
    JSON encoder aware of SafeBytes types.

    Usage:
        json.dumps(payload, cls=SafeJSONEncoder)
    """

    def default(self, o: Any) -> Any:
        if _is_secret(o):
            return HIDDEN_MARKER
        if isinstance(o, EpochTime):
            return o.as_int()
        if isinstance(o, ByteArray):
            return o.to_hex()
        if isinstance(o, (bytes, bytearray, memoryview)):
            return encode(o)
        return super().default(o)


def to_json(obj: Any, **kwargs: Any) -> str:
    """json.dumps with SafeJSONEncoder."""
    kwargs.setdefault("cls", SafeJSONEncoder)
    return json.dumps(obj, **kwargs)


def serialize(value: Any, human_readable: bool = True) -> str | bytes:
    """
    Serialize a ByteArray for a carrier format.

    Args:
        value: ByteArray value (or a secret wrapper)
        human_readable: Hex text when True, raw bytes otherwise

    Returns:
        Hex string or bytes; HIDDEN_MARKER for secret wrappers
    """
    if _is_secret(value):
        return HIDDEN_MARKER
    if not isinstance(value, ByteArray):
        raise TypeError(f"serialize expects a ByteArray, got {type(value).__name__}")
    if human_readable:
        return value.to_hex()
    return value.as_bytes()


def deserialize(cls: type[_BA], data: str | bytes | bytearray | memoryview) -> _BA:
    """
    Rebuild a value from either carrier form.

    Raises:
        ConversionError: Bad hex (InvalidValue) or wrong length (InvalidLength)
    """
    if isinstance(data, str):
        return cls.from_hex(data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return cls.from_bytes(data)
    raise TypeError(f"deserialize expects str or bytes, got {type(data).__name__}")


def to_base64(value: Any) -> str:
    """Standard base64 of the canonical bytes; HIDDEN_MARKER for secrets."""
    if _is_secret(value):
        return HIDDEN_MARKER
    if isinstance(value, ByteArray):
        raw = value.as_bytes()
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise TypeError(f"to_base64 expects a ByteArray or bytes, got {type(value).__name__}")
    return base64.b64encode(raw).decode("ascii")


def from_base64(cls: type[_BA], text: str) -> _BA:
    """
    Rebuild a value from standard base64.

    Raises:
        InvalidValue: If the text is not valid base64
        InvalidLength: If the decoded bytes have the wrong length
    """
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidValue("invalid base64 representation for the target type") from e
    return cls.from_bytes(raw)


__all__ = [
    "SafeJSONEncoder",
    "to_json",
    "serialize",
    "deserialize",
    "to_base64",
    "from_base64",
]
