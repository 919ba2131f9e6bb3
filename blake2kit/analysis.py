"""Avalanche analysis of the BLAKE2 engines.

Flips input bits one at a time and measures how many digest bits change. A
sound hash flips about half of the output bits for every single-bit change
and never returns the same digest for two different inputs.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import Variant
from .crypto.blake2 import engine_for
from .crypto.errors import InvalidParameterError


def hamming_distance(a: bytes, b: bytes) -> int:
    """Number of differing bits between two equal-length byte strings."""

    if len(a) != len(b):
        raise ValueError("hamming_distance requires equal-length inputs")
    x = np.frombuffer(a, dtype=np.uint8) ^ np.frombuffer(b, dtype=np.uint8)
    return int(np.unpackbits(x).sum())


def flip_bit(data: bytes, bit: int) -> bytes:
    """Return ``data`` with bit ``bit`` (LSB-first within each byte) inverted."""

    out = bytearray(data)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)


@dataclass(frozen=True)
class AvalancheProfile:
    """Per-flip digest bit distances for one input."""

    variant: Variant
    output_length: int
    distances: np.ndarray

    @property
    def flips(self) -> int:
        return int(self.distances.size)

    @property
    def output_bits(self) -> int:
        return self.output_length * 8

    @property
    def mean_ratio(self) -> float:
        """Mean fraction of output bits changed per flip (ideal: 0.5)."""
        return float(self.distances.mean() / self.output_bits)

    @property
    def min_distance(self) -> int:
        return int(self.distances.min())

    @property
    def max_distance(self) -> int:
        return int(self.distances.max())

    @property
    def collisions(self) -> int:
        """Flips that left the digest unchanged."""
        return int(np.count_nonzero(self.distances == 0))

    def summary(self) -> dict:
        return {
            "variant": self.variant.value,
            "output_length": self.output_length,
            "flips": self.flips,
            "mean_ratio": round(self.mean_ratio, 4),
            "min_distance": self.min_distance,
            "max_distance": self.max_distance,
            "collisions": self.collisions,
        }


def avalanche_profile(
    data: bytes,
    variant: Variant | str = Variant.BLAKE2B,
    output_length: int | None = None,
    key: bytes | None = None,
    *,
    max_flips: int = 256,
) -> AvalancheProfile:
    """Flip each of the first ``max_flips`` input bits and record digest distances.

    Raises:
        InvalidParameterError: If ``data`` is empty, ``max_flips`` is not
            positive, or the engine rejects the digest/key length.
    """

    data = bytes(data)
    if not data:
        raise InvalidParameterError("data", data, "at least one byte long")
    if max_flips < 1:
        raise InvalidParameterError("max_flips", max_flips, "positive")

    engine = engine_for(variant)
    if output_length is None:
        output_length = engine.max_digest_size
    baseline = engine.hash(data, key, output_length)

    flips = min(len(data) * 8, max_flips)
    distances = np.empty(flips, dtype=np.int64)
    for bit in range(flips):
        distances[bit] = hamming_distance(baseline, engine.hash(flip_bit(data, bit), key, output_length))

    return AvalancheProfile(variant=engine.variant, output_length=output_length, distances=distances)
