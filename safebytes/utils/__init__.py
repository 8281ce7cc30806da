"""
Utils module - Utility functions and helpers.

extend_bytes depends on the encoding layer and is imported directly:

    from safebytes.utils.extend_bytes import append_raw_bytes
"""

from safebytes.utils.bits import byte_to_bits, bytes_to_bits, checked_bits_to_uint
from safebytes.utils.convert import try_convert_all
from safebytes.utils.validators import ValidationError, validate_bool, validate_int

__all__ = [
    "byte_to_bits",
    "bytes_to_bits",
    "checked_bits_to_uint",
    "try_convert_all",
    "ValidationError",
    "validate_int",
    "validate_bool",
]
