"""
Types module - Value types built on the encoding contracts.
"""

from safebytes.types.epoch_time import EpochTime
from safebytes.types.fixed_set import (
    CollectionError,
    FixedSet,
    Full,
    OutOfBounds,
    SizeMismatch,
)

__all__ = [
    "EpochTime",
    "FixedSet",
    "CollectionError",
    "Full",
    "OutOfBounds",
    "SizeMismatch",
]
