"""
SafeBytes Encoding Module
=========================

Canonical byte and hex representations.

Components:
- hex.py: Hex codec
- byte_array.py: ByteArray contract and ready-made byte value types
- hashable.py: Hashable contract over caller-supplied hashers
- serialization.py: JSON / base64 / hex-or-bytes adapters
  (imported directly; it depends on the memory and types modules)
"""

from safebytes.core.encoding.hex import (
    BytesLike,
    Hex,
    HexError,
    InvalidChar,
    OddLength,
    decode,
    encode,
    encode_many,
)
from safebytes.core.encoding.hashable import Hashable, HasherLike, digest
from safebytes.core.encoding.byte_array import (
    ByteArray,
    Bytes32,
    Bytes64,
    ByteVector,
    ConversionError,
    FixedBytes,
    InvalidLength,
    InvalidValue,
)

__all__ = [
    "BytesLike",
    "Hex",
    "HexError",
    "OddLength",
    "InvalidChar",
    "encode",
    "decode",
    "encode_many",
    "Hashable",
    "HasherLike",
    "digest",
    "ByteArray",
    "ByteVector",
    "FixedBytes",
    "Bytes32",
    "Bytes64",
    "ConversionError",
    "InvalidLength",
    "InvalidValue",
]
