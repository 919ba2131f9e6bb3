"""Fixed-width unsigned word arithmetic.

Both BLAKE2 variants run the same compression code; everything that depends on
the word width (masking, rotation, little-endian codec) lives on a
:class:`WordOps` instance.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

_STRUCT_CODES = {32: "I", 64: "Q"}


@dataclass(frozen=True, slots=True)
class WordOps:
    """Arithmetic on unsigned words of ``bits`` width."""

    bits: int
    mask: int
    code: str

    @classmethod
    def of_width(cls, bits: int) -> "WordOps":
        if bits not in _STRUCT_CODES:
            raise ValueError(f"unsupported word width: {bits}")
        return cls(bits=bits, mask=(1 << bits) - 1, code=_STRUCT_CODES[bits])

    @property
    def size(self) -> int:
        """Word size in bytes."""

        return self.bits // 8

    def add(self, *terms: int) -> int:
        """Sum ``terms`` modulo ``2**bits``."""

        return sum(terms) & self.mask

    def rotr(self, x: int, n: int) -> int:
        return ((x >> n) | (x << (self.bits - n))) & self.mask

    def split(self, value: int) -> tuple[int, int]:
        """Split a double-width value into ``(low, high)`` words."""

        return value & self.mask, (value >> self.bits) & self.mask

    def words_from_bytes(self, buf: bytes) -> list[int]:
        return list(struct.unpack(f"<{len(buf) // self.size}{self.code}", buf))

    def bytes_from_words(self, words: list[int] | tuple[int, ...]) -> bytes:
        return struct.pack(f"<{len(words)}{self.code}", *words)


WORD32 = WordOps.of_width(32)
WORD64 = WordOps.of_width(64)
