"""
Memory Zeroization Utilities
============================

Explicit overwriting of secret material before it is released.

Key Concepts:
- secure_zero: overwrite a mutable byte buffer in place
- zeroize: overwrite whatever a value owns (buffers, zeroizable objects,
  containers of them)
- ZeroizeContext / zeroize_on_exception: cleanup on scope exit
- lock_buffer / unlock_buffer: keep a buffer out of swap (best-effort)

Limitations:
- str, bytes and int are immutable in Python and cannot be overwritten;
  zeroize() only drops what it can reach and logs the type at DEBUG
- Copies made by the interpreter or by callers are out of reach
"""

from __future__ import annotations

import ctypes
import functools
import logging
import platform
from contextlib import contextmanager
from typing import (
    Any,
    Callable,
    Final,
    Iterator,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

from safebytes.core.config import SafeBytesConfig


_log = logging.getLogger("safebytes.memory")

IS_WINDOWS: Final[bool] = platform.system() == "Windows"
IS_LINUX: Final[bool] = platform.system() == "Linux"
IS_MACOS: Final[bool] = platform.system() == "Darwin"

WipeableBuffer = Union[bytearray, memoryview]


@runtime_checkable
class Zeroize(Protocol):
    """Objects that know how to overwrite their own secret storage."""

    def zeroize(self) -> None:
        ...


def _wipe_patterns(passes: int) -> list[int]:
    """Alternate 0x00/0xFF so that the final pass is always 0x00."""
    passes = max(1, passes)
    return [0xFF if (passes - 1 - i) % 2 else 0x00 for i in range(passes)]


def _fill(buf: WipeableBuffer, size: int, patterns: list[int]) -> None:
    try:
        arr = (ctypes.c_char * size).from_buffer(buf)
    except (TypeError, ValueError) as e:
        _log.debug("ctypes wipe unavailable (%s); using Python-level fill", type(e).__name__)
        for pattern in patterns:
            buf[:] = bytes((pattern,)) * size
        return

    addr = ctypes.addressof(arr)
    for pattern in patterns:
        ctypes.memset(addr, pattern, size)
    del arr


def secure_zero(data: WipeableBuffer, passes: Optional[int] = None) -> None:
    """
    Securely zero a byte buffer in place.

    Args:
        data: bytearray or writable, contiguous memoryview
        passes: Overwrite passes (defaults to MemoryConfig.wipe_passes)

    Raises:
        TypeError: If the buffer is immutable, read-only or non-contiguous
    """
    if passes is None:
        passes = SafeBytesConfig.get_instance().memory.wipe_passes
    patterns = _wipe_patterns(passes)

    if isinstance(data, bytearray):
        if len(data):
            _fill(data, len(data), patterns)
        return

    if isinstance(data, memoryview):
        if data.readonly:
            raise TypeError("cannot zero a read-only memoryview")
        if not data.c_contiguous:
            raise TypeError("cannot zero a non-contiguous memoryview")
        if data.nbytes == 0:
            return
        view = data if (data.format == "B" and data.ndim == 1) else data.cast("B")
        try:
            _fill(view, view.nbytes, patterns)
        finally:
            if view is not data:
                view.release()
        return

    raise TypeError(f"secure_zero expects bytearray or memoryview, got {type(data).__name__}")


_CONTAINERS: Final[tuple[type, ...]] = (list, dict, tuple, set, frozenset)


def _zeroize_member(item: Any) -> None:
    if isinstance(item, (bytearray, memoryview, Zeroize)) or isinstance(item, _CONTAINERS):
        zeroize(item)


def zeroize(value: Any) -> None:
    """
    Overwrite everything a value owns that can be overwritten.

    - bytearray / writable memoryview: secure_zero
    - objects with zeroize(): delegated
    - list: members zeroized, slots set to 0, then cleared
    - dict: values zeroized, then cleared
    - tuple / set / frozenset: members zeroized; set is also cleared
    - anything else (read-only views included) is immutable: nothing
      to overwrite
    """
    if value is None:
        return

    if isinstance(value, memoryview) and value.readonly:
        _log.debug("Cannot overwrite read-only %s in place", type(value).__name__)
        return

    if isinstance(value, (bytearray, memoryview)):
        secure_zero(value)
        return

    if isinstance(value, Zeroize):
        value.zeroize()
        return

    if isinstance(value, list):
        for item in value:
            _zeroize_member(item)
        value[:] = [0] * len(value)
        value.clear()
        return

    if isinstance(value, dict):
        for item in value.values():
            _zeroize_member(item)
        value.clear()
        return

    if isinstance(value, (tuple, set, frozenset)):
        for item in value:
            _zeroize_member(item)
        if isinstance(value, set):
            value.clear()
        return

    _log.debug("Cannot overwrite immutable %s in place", type(value).__name__)


T = TypeVar("T")


def zeroize_on_exception(
    *buffers: Any,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator that zeroizes values when the wrapped call raises.

    Usage:
        key = bytearray(32)

        @zeroize_on_exception(key)
        def process():
            fill_key(key)
            use_key(key)
            # If exception here, key is zeroed

        process()
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except BaseException:
                for buf in buffers:
                    zeroize(buf)
                raise
        return wrapper
    return decorator


@contextmanager
def ZeroizeContext(*buffers: Any) -> Iterator[None]:
    """
    Context manager that zeroizes values on exit, normal or exceptional.

    Usage:
        key = bytearray(32)
        nonce = bytearray(12)

        with ZeroizeContext(key, nonce):
            fill_key(key)
            encrypt(data, key, nonce)
        # key and nonce are now zeroed
    """
    body_failed = False
    try:
        yield
    except BaseException:
        body_failed = True
        raise
    finally:
        failure: Optional[Exception] = None
        for buf in buffers:
            try:
                zeroize(buf)
            except Exception as e:
                _log.debug("Zeroization of %s failed: %s", type(buf).__name__, type(e).__name__)
                if failure is None:
                    failure = e
        # The body's exception wins over a cleanup failure
        if failure is not None and not body_failed:
            raise failure


def _libc() -> ctypes.CDLL:
    return ctypes.CDLL("libc.so.6" if IS_LINUX else "libc.dylib", use_errno=True)


def lock_buffer(buf: bytearray) -> bool:
    """
    Lock a buffer's pages so they are not swapped to disk.

    Returns True if successful, False otherwise.
    """
    if not len(buf):
        return False
    try:
        arr = (ctypes.c_char * len(buf)).from_buffer(buf)
        address, size = ctypes.addressof(arr), len(buf)
        del arr
        if IS_WINDOWS:
            kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            return bool(kernel32.VirtualLock(ctypes.c_void_p(address), ctypes.c_size_t(size)))
        if IS_LINUX or IS_MACOS:
            return _libc().mlock(ctypes.c_void_p(address), ctypes.c_size_t(size)) == 0
    except (OSError, AttributeError, TypeError, ValueError) as e:
        _log.debug("Memory lock unavailable: %s", type(e).__name__)
    return False


def unlock_buffer(buf: bytearray) -> bool:
    """Unlock pages previously locked with lock_buffer()."""
    if not len(buf):
        return False
    try:
        arr = (ctypes.c_char * len(buf)).from_buffer(buf)
        address, size = ctypes.addressof(arr), len(buf)
        del arr
        if IS_WINDOWS:
            kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            return bool(kernel32.VirtualUnlock(ctypes.c_void_p(address), ctypes.c_size_t(size)))
        if IS_LINUX or IS_MACOS:
            return _libc().munlock(ctypes.c_void_p(address), ctypes.c_size_t(size)) == 0
    except (OSError, AttributeError, TypeError, ValueError) as e:
        _log.debug("Memory unlock unavailable: %s", type(e).__name__)
    return False


__all__ = [
    "Zeroize",
    "WipeableBuffer",
    "secure_zero",
    "zeroize",
    "zeroize_on_exception",
    "ZeroizeContext",
    "lock_buffer",
    "unlock_buffer",
]
