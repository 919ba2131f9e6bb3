"""BLAKE2 constant tables (RFC 7693, sections 2.6 and 2.7).

All tables are tuples and must never be rebuilt per call.
"""

from __future__ import annotations

from dataclasses import dataclass

from .words import WORD32, WORD64, WordOps

BLAKE2B_IV = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

BLAKE2S_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

# BLAKE2b runs 12 rounds over these 10 rows, so rounds 10 and 11 reuse rows 0 and 1.
SIGMA = (
    ( 0,  1,  2,  3,  4,  5,  6,  7,  8,  9, 10, 11, 12, 13, 14, 15),
    (14, 10,  4,  8,  9, 15, 13,  6,  1, 12,  0,  2, 11,  7,  5,  3),
    (11,  8, 12,  0,  5,  2, 15, 13, 10, 14,  3,  6,  7,  1,  9,  4),
    ( 7,  9,  3,  1, 13, 12, 11, 14,  2,  6,  5, 10,  4,  0, 15,  8),
    ( 9,  0,  5,  7,  2,  4, 10, 15, 14,  1, 11, 12,  6,  8,  3, 13),
    ( 2, 12,  6, 10,  0, 11,  8,  3,  4, 13,  7,  5, 15, 14,  1,  9),
    (12,  5,  1, 15, 14, 13,  4, 10,  0,  7,  6,  3,  9,  2,  8, 11),
    (13, 11,  7, 14, 12,  1,  3,  9,  5,  0, 15,  4,  8,  6,  2, 10),
    ( 6, 15, 14,  9, 11,  3,  0,  8, 12,  2, 13,  7,  1,  4, 10,  5),
    (10,  2,  8,  4,  7,  6,  1,  5, 15, 11,  9, 14,  3, 12, 13,  0),
)

# Working-vector positions for the 8 G calls of a round: 4 columns, then 4 diagonals.
G_INDEX_MAP = (
    (0, 4,  8, 12),
    (1, 5,  9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7,  8, 13),
    (3, 4,  9, 14),
)

BLAKE2B_ROTATIONS = (32, 24, 16, 63)
BLAKE2S_ROTATIONS = (16, 12, 8, 7)

# fan-out = 1, depth = 1; key length goes in byte 1, digest length in byte 0.
PARAMETER_BLOCK_BASE = 0x01010000


@dataclass(frozen=True, slots=True)
class Blake2Params:
    """Everything that differs between BLAKE2b and BLAKE2s."""

    name: str
    ops: WordOps
    iv: tuple[int, ...]
    rotations: tuple[int, int, int, int]
    rounds: int
    block_size: int
    max_digest_size: int
    max_key_size: int


BLAKE2B_PARAMS = Blake2Params(
    name="BLAKE2b",
    ops=WORD64,
    iv=BLAKE2B_IV,
    rotations=BLAKE2B_ROTATIONS,
    rounds=12,
    block_size=128,
    max_digest_size=64,
    max_key_size=64,
)

BLAKE2S_PARAMS = Blake2Params(
    name="BLAKE2s",
    ops=WORD32,
    iv=BLAKE2S_IV,
    rotations=BLAKE2S_ROTATIONS,
    rounds=10,
    block_size=64,
    max_digest_size=32,
    max_key_size=32,
)


def parameter_word(key_length: int, digest_length: int) -> int:
    """Encode the first word of the BLAKE2 parameter block."""

    return PARAMETER_BLOCK_BASE ^ (key_length << 8) ^ digest_length
