"""
Fixed Set
=========

A fixed-capacity container with stable slot positions.

- Capacity is set at construction and never changes
- Each slot holds one value or nothing (None)
- insert() fills the first free slot and returns its position
- Removing a value frees its slot without moving any other value
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar


T = TypeVar("T")


class CollectionError(Exception):
    """Base class for FixedSet errors."""
    pass


class Full(CollectionError):
    """Every slot is occupied."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"All {capacity} slots are occupied")


class OutOfBounds(CollectionError, IndexError):
    """A position outside [0, capacity) was used."""

    def __init__(self, position: int, capacity: int) -> None:
        self.position = position
        self.capacity = capacity
        super().__init__(f"Position {position} is out of bounds for capacity {capacity}")


class SizeMismatch(CollectionError):
    """Two sets with different capacities were combined."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot combine sets of capacity {left} and {right}")


class FixedSet(Generic[T]):
    """
    Up to `capacity` values, each at a stable position.

    Usage:
        slots = FixedSet[str](3)
        slots.insert("a")     # 0
        slots.insert("b")     # 1
        slots.remove(0)       # 'a'
        slots.insert("c")     # 0
    """

    __slots__ = ("_items",)

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._items: list[Optional[T]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._items)

    def _check_position(self, position: int) -> None:
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"position must be an int, got {type(position).__name__}")
        if not 0 <= position < len(self._items):
            raise OutOfBounds(position, len(self._items))

    def insert(self, value: T) -> int:
        """
        Store a value in the first free slot.

        Returns:
            The slot's position

        Raises:
            Full: If no slot is free
        """
        if value is None:
            raise ValueError("None marks an empty slot and cannot be inserted")
        for position, item in enumerate(self._items):
            if item is None:
                self._items[position] = value
                return position
        raise Full(len(self._items))

    def set_item(self, position: int, value: T) -> None:
        """Store a value at a given position, replacing what was there."""
        self._check_position(position)
        if value is None:
            raise ValueError("use remove() to clear a slot")
        self._items[position] = value

    def remove(self, position: int) -> Optional[T]:
        """Clear a slot and return what it held."""
        self._check_position(position)
        value = self._items[position]
        self._items[position] = None
        return value

    def get(self, position: int) -> Optional[T]:
        self._check_position(position)
        return self._items[position]

    def index(self, value: T) -> Optional[int]:
        """Position of the first slot holding an equal value, or None."""
        for position, item in enumerate(self._items):
            if item is not None and item == value:
                return position
        return None

    def is_full(self) -> bool:
        return all(item is not None for item in self._items)

    def union(self, other: "FixedSet[T]") -> "FixedSet[T]":
        """
        New set holding this set's values, with empty slots filled from
        the same positions in `other`.

        Raises:
            SizeMismatch: If the capacities differ
        """
        if other.capacity != self.capacity:
            raise SizeMismatch(self.capacity, other.capacity)
        result: FixedSet[T] = FixedSet(self.capacity)
        result._items = [
            mine if mine is not None else theirs
            for mine, theirs in zip(self._items, other._items)
        ]
        return result

    def sum(self) -> Optional[Any]:
        """Sum of the occupied values, or None if every slot is empty."""
        total: Any = None
        for item in self:
            total = item if total is None else total + item
        return total

    def to_list(self) -> list[Optional[T]]:
        """Every slot in position order, None for empty ones."""
        return list(self._items)

    def __len__(self) -> int:
        return sum(1 for item in self._items if item is not None)

    def __iter__(self) -> Iterator[T]:
        return (item for item in self._items if item is not None)

    def __contains__(self, value: object) -> bool:
        return self.index(value) is not None  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedSet(capacity={self.capacity}, items={self._items!r})"


__all__ = ["CollectionError", "Full", "OutOfBounds", "SizeMismatch", "FixedSet"]
