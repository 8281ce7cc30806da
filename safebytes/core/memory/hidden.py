"""
Hidden Values
=============

A wrapper that conceals secrets from logs, debug output and casual copies,
and overwrites them when it is released.

Security Properties:
- str(), repr() and format() always give HIDDEN_MARKER
- pickle / copy / deepcopy are refused; clone() is the explicit copy
- reveal() is the only way to reach the inner value
- The inner value is zeroized exactly once: on wipe(), on context exit,
  or when the wrapper is collected
- bytes handed to the constructor are moved into a wipeable bytearray

Equality:
- Two wrappers are equal when their inner values are equal
- Bytes-like and SafeArray contents are compared in constant time
  (hmac.compare_digest); other types use their own ==, which is not
  constant-time

Caller obligations:
- Copies of the secret made before wrapping (the original str, bytes,
  or a buffer the caller kept) are not the wrapper's to wipe
"""

from __future__ import annotations

import copy
import hmac
from typing import Any, Final, Generic, NoReturn, Optional, TypeVar

from safebytes.core.memory.zeroization import zeroize


HIDDEN_MARKER: Final[str] = "Hidden<redacted>"

T = TypeVar("T")

_CONSUMED: Final[object] = object()


def _inner_bytes(value: Any) -> Optional[bytes | bytearray | memoryview]:
    """The comparable bytes behind a value, if it has a bytes-like form."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return value
    as_view = getattr(value, "as_view", None)
    if callable(as_view):
        return as_view()
    return None


def constant_time_equal(a: Any, b: Any) -> Optional[bool]:
    """
    Compare two bytes-like values in constant time.

    Returns None when either side has no bytes-like form.
    """
    left, right = _inner_bytes(a), _inner_bytes(b)
    if left is None or right is None:
        return None
    return hmac.compare_digest(left, right)


class Hidden(Generic[T]):
    """
    Owns one secret value and keeps it out of sight.

    Usage:
        with Hidden(bytearray(key_material)) as key:
            derive(key.reveal())
        # key material is now zeroed

        token = Hidden.hide(api_token)
        log.info("using %s", token)   # logs Hidden<redacted>
    """

    __slots__ = ("_inner", "_wiped", "__weakref__")

    def __init__(self, value: T) -> None:
        if isinstance(value, bytes):
            value = bytearray(value)  # type: ignore[assignment]
        self._inner: Any = value
        self._wiped = False

    @classmethod
    def hide(cls, value: T) -> "Hidden[T]":
        """Wrap a value."""
        return cls(value)

    def _check(self) -> None:
        if self._wiped:
            raise ValueError(f"{type(self).__name__} has been wiped")
        if self._inner is _CONSUMED:
            raise ValueError(f"{type(self).__name__} has been consumed")

    def reveal(self) -> T:
        """
        Access the inner value (by reference).

        This is the sanctioned path to the secret; nothing else in the
        wrapper exposes it.
        """
        self._check()
        return self._inner

    def into_inner(self) -> T:
        """
        Give ownership of the inner value back to the caller.

        The wrapper is left empty and will not wipe the returned value.
        """
        self._check()
        value = self._inner
        self._inner = _CONSUMED
        return value

    def clone(self) -> "Hidden[T]":
        """Explicit, independent copy with its own storage."""
        self._check()
        cloner = getattr(self._inner, "clone", None)
        value = cloner() if callable(cloner) else copy.deepcopy(self._inner)
        new = type(self).__new__(type(self))
        Hidden.__init__(new, value)
        return new

    @property
    def is_wiped(self) -> bool:
        return self._wiped

    def wipe(self) -> None:
        """Zeroize the inner value. Safe to call more than once."""
        if self._wiped:
            return
        self._wiped = True
        inner = self._inner
        self._inner = None
        if inner is not _CONSUMED:
            zeroize(inner)

    def zeroize(self) -> None:
        self.wipe()

    def __enter__(self) -> "Hidden[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Always wipe."""
        self.wipe()

    def __del__(self) -> None:
        # Interpreter shutdown may have torn down module globals already
        try:
            self.wipe()
        except Exception:
            pass

    def _is_empty(self) -> bool:
        return self._wiped or self._inner is _CONSUMED

    def __eq__(self, other: object) -> bool:
        """
        Compare concealed contents. A wiped or consumed wrapper holds
        nothing and equals no other wrapper, itself included.
        """
        if not isinstance(other, Hidden):
            return NotImplemented
        if self._is_empty() or other._is_empty():
            return False
        result = constant_time_equal(self._inner, other._inner)
        if result is None:
            return bool(self._inner == other._inner)
        return result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return HIDDEN_MARKER

    def __str__(self) -> str:
        return HIDDEN_MARKER

    def __format__(self, format_spec: str) -> str:
        return HIDDEN_MARKER

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be pickled or copied; use clone()")

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; use clone()")

    def __deepcopy__(self, memo: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; use clone()")


def hidden_type(name: str, inner_type: type = object) -> type[Hidden[Any]]:
    """
    Build a named Hidden subclass that only accepts one inner type.

    Usage:
        CipherKey = hidden_type("CipherKey", SafeArray)
        key = CipherKey(SafeArray(32))
    """

    def __init__(self: Hidden[Any], value: Any) -> None:
        if not isinstance(value, inner_type):
            raise TypeError(
                f"{name} wraps {inner_type.__name__}, got {type(value).__name__}"
            )
        Hidden.__init__(self, value)

    return type(name, (Hidden,), {"__slots__": (), "__init__": __init__})


__all__ = ["HIDDEN_MARKER", "Hidden", "hidden_type", "constant_time_equal"]
