"""Digest primitives."""

from __future__ import annotations

from .blake2 import Blake2bEngine, Blake2sEngine


def blake2b_digest(data: bytes, *, digest_size: int = 32, key: bytes | None = None) -> bytes:
    """Compute a BLAKE2b digest.

    Args:
        data: Data to hash.
        digest_size: Output size (1..64). For KDF-like usage, 32 bytes is typical.
        key: Optional key (0..64 bytes) for keyed BLAKE2b (MAC-like usage).

    Returns:
        Digest bytes.
    """

    return Blake2bEngine().hash(data, key, digest_size)


def blake2s_digest(data: bytes, *, digest_size: int = 32, key: bytes | None = None) -> bytes:
    """Compute a BLAKE2s digest (``digest_size`` 1..32, key 0..32 bytes)."""

    return Blake2sEngine().hash(data, key, digest_size)
