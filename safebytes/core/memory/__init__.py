"""
SafeBytes Memory Module
=======================

Wrappers and helpers for secrets held in process memory.

Components:
- hidden.py: Hidden wrapper (redacted output, zeroize on release)
- password.py: SafePassword, a Hidden for passphrases
- safe_array.py: SafeArray, fixed-length key buffers
- zeroization.py: Memory wiping utilities

WARNING:
- Python's memory model doesn't guarantee secure erasure
- Immutable str/bytes copies cannot be overwritten
- These are best-effort mitigations
"""

from safebytes.core.memory.zeroization import (
    Zeroize,
    ZeroizeContext,
    lock_buffer,
    secure_zero,
    unlock_buffer,
    zeroize,
    zeroize_on_exception,
)
from safebytes.core.memory.hidden import (
    HIDDEN_MARKER,
    Hidden,
    constant_time_equal,
    hidden_type,
)
from safebytes.core.memory.password import SafePassword
from safebytes.core.memory.safe_array import SafeArray

__all__ = [
    "HIDDEN_MARKER",
    "Hidden",
    "hidden_type",
    "constant_time_equal",
    "SafePassword",
    "SafeArray",
    "Zeroize",
    "secure_zero",
    "zeroize",
    "zeroize_on_exception",
    "ZeroizeContext",
    "lock_buffer",
    "unlock_buffer",
]
