"""Independent BLAKE2 backend.

Wraps the OpenSSL implementations exposed by :pypi:`cryptography`. They only
offer unkeyed, full-length digests, which is enough to cross-check the
pure-Python engines.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes

from ..config import Variant


def reference_digest(data: bytes, variant: Variant | str = Variant.BLAKE2B) -> bytes:
    """Return the full-length unkeyed digest of ``data`` from the backend."""

    variant = Variant.parse(variant)
    if variant is Variant.BLAKE2B:
        algorithm: hashes.HashAlgorithm = hashes.BLAKE2b(digest_size=64)
    else:
        algorithm = hashes.BLAKE2s(digest_size=32)

    h = hashes.Hash(algorithm)
    h.update(bytes(data))
    return h.finalize()
