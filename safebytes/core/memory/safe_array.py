"""
SafeArray
=========

A fixed-length byte array for key material.

Compared to a plain bytearray it:
- compares in constant time
- zeroizes itself on zeroize() and when collected
- refuses implicit copies (pickle, copy, deepcopy); clone() is explicit
- never shows its contents in repr()
- optionally locks its pages in memory (MemoryConfig.lock_memory)

Pair it with Hidden when the key should also be kept out of logs:

    CipherKey = hidden_type("CipherKey", SafeArray)
    key = CipherKey(SafeArray(32))
"""

from __future__ import annotations

import hmac
from typing import Any, ClassVar, NoReturn, Optional

from safebytes.core.config import SafeBytesConfig
from safebytes.core.encoding.byte_array import ByteArray, InvalidLength
from safebytes.core.encoding.hex import BytesLike
from safebytes.core.memory.zeroization import lock_buffer, secure_zero, unlock_buffer


class SafeArray(ByteArray):
    """
    Zero-initialised fixed-length byte array.

    The length comes from the constructor or from a class keyword:

        class Key32(SafeArray, length=32):
            pass

        Key32()              # 32 zero bytes
        SafeArray(16)        # 16 zero bytes
    """

    __slots__ = ("_buf", "_locked", "__weakref__")

    LENGTH: ClassVar[Optional[int]] = None

    def __init_subclass__(cls, length: Optional[int] = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if length is not None:
            if length < 0:
                raise ValueError(f"length must be non-negative, got {length}")
            cls.LENGTH = length

    def __init__(self, length: Optional[int] = None) -> None:
        size = type(self)._resolve_length(length)
        self._buf = bytearray(size)
        self._locked = False
        if size and SafeBytesConfig.get_instance().memory.lock_memory:
            self._locked = lock_buffer(self._buf)

    @classmethod
    def _resolve_length(cls, length: Optional[int]) -> int:
        if cls.LENGTH is not None:
            if length is not None and length != cls.LENGTH:
                raise InvalidLength(cls.LENGTH, length)
            return cls.LENGTH
        if length is None:
            raise TypeError(f"{cls.__name__} needs a length")
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return length

    @classmethod
    def from_bytes(cls, data: BytesLike, length: Optional[int] = None) -> "SafeArray":
        """
        Copy bytes into a new array.

        Raises:
            InvalidLength: If data does not match the declared length
        """
        view = memoryview(data).cast("B") if isinstance(data, memoryview) else memoryview(data)
        try:
            expected = cls.LENGTH if cls.LENGTH is not None else length
            if expected is not None and view.nbytes != expected:
                raise InvalidLength(expected, view.nbytes)
            arr = cls(view.nbytes)
            arr._buf[:] = view
        finally:
            view.release()
        return arr

    def as_bytes(self) -> bytes:
        """Immutable copy of the contents. Prefer as_view() for secrets."""
        return bytes(self._buf)

    def as_view(self) -> memoryview:
        """Writable view over the array's own storage (no copy)."""
        return memoryview(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def clone(self) -> "SafeArray":
        """Explicit, independent copy."""
        new = type(self)(len(self._buf))
        new._buf[:] = self._buf
        return new

    def zeroize(self) -> None:
        """Overwrite the contents with zeros. The array stays usable."""
        secure_zero(self._buf)
        if self._locked:
            unlock_buffer(self._buf)
            self._locked = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SafeArray):
            return NotImplemented
        return hmac.compare_digest(self._buf, other._buf)

    __hash__ = None  # type: ignore[assignment]

    def __del__(self) -> None:
        try:
            self.zeroize()
        except Exception:
            pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self._buf)})"

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be pickled or copied; use clone()")

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; use clone()")

    def __deepcopy__(self, memo: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; use clone()")


__all__ = ["SafeArray"]
