"""
Hashable Contract
=================

Lets a value produce a digest of its canonical bytes without choosing
the hash algorithm. The hasher is always supplied by the caller.

Accepted hashers:
- cryptography HashAlgorithm instances, e.g. hashes.SHA256()
- cryptography hashes.Hash contexts (copied, never finalized in place)
- hashlib-style constructors, e.g. hashlib.sha3_256
- hashlib-style objects with copy()/update()/digest() (copied)

Equal values give equal digests under the same hasher. Collision
resistance is the hasher's business, not this module's.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from cryptography.hazmat.primitives import hashes

from safebytes.core.encoding.hex import BytesLike


HasherLike = Union[hashes.HashAlgorithm, hashes.Hash, Callable[[], Any], Any]


def digest(data: BytesLike, hasher: HasherLike) -> bytes:
    """
    Hash data with a caller-supplied hasher.

    Args:
        data: Bytes to hash
        hasher: Algorithm, context, constructor or hashlib-style object

    Returns:
        The digest bytes

    Raises:
        TypeError: If the hasher is not one of the supported shapes
    """
    payload = bytes(data)

    if isinstance(hasher, hashes.HashAlgorithm):
        ctx = hashes.Hash(hasher)
        ctx.update(payload)
        return ctx.finalize()

    if isinstance(hasher, hashes.Hash):
        ctx = hasher.copy()
        ctx.update(payload)
        return ctx.finalize()

    # blake2b/blake2s are classes that also carry unbound update/copy
    if isinstance(hasher, type):
        return _from_factory(hasher, payload)

    # hashlib objects: copy so the caller's instance stays reusable
    if hasattr(hasher, "update") and hasattr(hasher, "digest") and hasattr(hasher, "copy"):
        ctx = hasher.copy()
        ctx.update(payload)
        return ctx.digest()

    if callable(hasher):
        return _from_factory(hasher, payload)

    raise TypeError(f"unsupported hasher: {type(hasher).__name__}")


def _from_factory(factory: Callable[[], Any], payload: bytes) -> bytes:
    ctx = factory()
    if not (hasattr(ctx, "update") and hasattr(ctx, "digest")):
        raise TypeError("hasher factory must return an object with update() and digest()")
    ctx.update(payload)
    return ctx.digest()


class Hashable:
    """
    Mixin for values with canonical bytes (see ByteArray).

    Usage:
        key = Bytes32.from_hex(...)
        key.hash(hashes.SHA256())
        key.hash(hashlib.blake2b)
    """

    __slots__ = ()

    def hash(self, hasher: HasherLike) -> bytes:
        """Digest of this value's canonical bytes."""
        return digest(self.as_bytes(), hasher)  # type: ignore[attr-defined]


__all__ = ["HasherLike", "digest", "Hashable"]
