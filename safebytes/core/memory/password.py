"""
Safe Password
=============

A Hidden specialised to passphrase text.

The passphrase is held as UTF-8 in a bytearray owned by the wrapper so
that it can be overwritten; a Python str cannot be. reveal() decodes a
fresh str on every call, so callers that care should prefer
reveal_bytes() and keep the str lifetime short.
"""

from __future__ import annotations

import logging
from typing import Union

from safebytes.core.config import SafeBytesConfig
from safebytes.core.memory.hidden import Hidden
from safebytes.core.memory.zeroization import lock_buffer, unlock_buffer


_log = logging.getLogger("safebytes.memory")

PasswordInput = Union[str, bytes, bytearray]


def _to_buffer(passphrase: PasswordInput) -> bytearray:
    if isinstance(passphrase, str):
        return bytearray(passphrase.encode("utf-8"))
    if isinstance(passphrase, bytearray):
        # Ownership moves to the wrapper; wiping clears the caller's buffer too
        passphrase.decode("utf-8")
        return passphrase
    if isinstance(passphrase, bytes):
        passphrase.decode("utf-8")
        return bytearray(passphrase)
    raise TypeError(f"SafePassword expects str, bytes or bytearray, got {type(passphrase).__name__}")


class SafePassword(Hidden[str]):
    """
    Passphrase that never shows up in logs or reprs.

    Usage:
        pw = SafePassword("secret123")
        str(pw)            # 'Hidden<redacted>'
        pw.reveal()        # 'secret123'

        with SafePassword.from_str(read_passphrase()) as pw:
            kdf.derive(pw.reveal_bytes())
        # buffer zeroed
    """

    __slots__ = ("_locked",)

    def __init__(self, passphrase: PasswordInput) -> None:
        buf = _to_buffer(passphrase)
        super().__init__(buf)
        self._locked = False
        if buf and SafeBytesConfig.get_instance().memory.lock_memory:
            self._locked = lock_buffer(buf)

    @classmethod
    def from_str(cls, passphrase: str) -> "SafePassword":
        """Wrap a passphrase given as text."""
        if not isinstance(passphrase, str):
            raise TypeError(f"from_str expects str, got {type(passphrase).__name__}")
        return cls(passphrase)

    def reveal(self) -> str:
        """The passphrase as text (a new str on each call)."""
        self._check()
        return bytes(self._inner).decode("utf-8")

    def reveal_bytes(self) -> bytearray:
        """The UTF-8 buffer itself, by reference."""
        self._check()
        return self._inner

    def into_inner(self) -> str:
        """Return the passphrase as text and wipe the buffer."""
        text = self.reveal()
        self.wipe()
        return text

    def clone(self) -> "SafePassword":
        self._check()
        return type(self)(bytearray(self._inner))

    def wipe(self) -> None:
        if self._wiped:
            return
        buf = self._inner
        super().wipe()
        if getattr(self, "_locked", False) and isinstance(buf, bytearray):
            unlock_buffer(buf)
            self._locked = False
            _log.debug("Unlocked passphrase buffer")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafePassword):
            return super().__eq__(other)
        if isinstance(other, Hidden):
            return False
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


__all__ = ["SafePassword", "PasswordInput"]
