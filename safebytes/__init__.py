"""
SafeBytes - Canonical Bytes and Secret Handling
===============================================

Byte and hex representations for binary values, a hashing contract,
and wrappers that keep secrets out of logs and wipe them on release.

Security Notice:
- Secret wrappers render as HIDDEN_MARKER in str/repr/format/logs/JSON
- Secrets are compared in constant time where they are bytes-like
- Zeroization covers library-owned buffers; immutable copies made by
  callers cannot be wiped
"""

from safebytes.core.config import SafeBytesConfig
from safebytes.core.logging import get_secure_logger
from safebytes.core.encoding import (
    ByteArray,
    Bytes32,
    Bytes64,
    ByteVector,
    ConversionError,
    FixedBytes,
    Hashable,
    HexError,
    InvalidChar,
    InvalidLength,
    InvalidValue,
    OddLength,
    decode,
    encode,
)
from safebytes.core.memory import (
    HIDDEN_MARKER,
    Hidden,
    SafeArray,
    SafePassword,
    hidden_type,
)
from safebytes.types import (
    CollectionError,
    EpochTime,
    FixedSet,
    Full,
    OutOfBounds,
    SizeMismatch,
)

__version__ = "0.1.0"
__author__ = "SafeBytes Team"

__all__ = [
    "SafeBytesConfig",
    "get_secure_logger",
    "ByteArray",
    "ByteVector",
    "FixedBytes",
    "Bytes32",
    "Bytes64",
    "Hashable",
    "encode",
    "decode",
    "ConversionError",
    "InvalidLength",
    "InvalidValue",
    "HexError",
    "OddLength",
    "InvalidChar",
    "HIDDEN_MARKER",
    "Hidden",
    "hidden_type",
    "SafePassword",
    "SafeArray",
    "EpochTime",
    "FixedSet",
    "CollectionError",
    "Full",
    "OutOfBounds",
    "SizeMismatch",
    "__version__",
]
