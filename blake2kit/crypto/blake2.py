"""Pure-Python BLAKE2b and BLAKE2s (RFC 7693).

Both engines share :func:`~blake2kit.crypto.compress.compress`; they differ only
in the :class:`~blake2kit.crypto.constants.Blake2Params` they carry. Engines hold
no mutable state, so one instance can serve any number of threads.

Salt, personalization and tree-hashing parameters are not supported: their
parameter-block fields are always zero.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import ClassVar, Final

from ..config import Variant
from .compress import compress
from .constants import BLAKE2B_PARAMS, BLAKE2S_PARAMS, Blake2Params, parameter_word
from .errors import InvalidParameterError

_LOGGER: Final = logging.getLogger(__name__)


def _iter_blocks(data: bytes, key: bytes, block_size: int) -> Iterator[tuple[bytes, int, bool]]:
    """Yield ``(padded_block, bytes_absorbed, is_last)`` in compression order.

    The key block counts as a full block. An empty final block is produced
    only when there is neither key nor data.
    """

    if key:
        yield key.ljust(block_size, b"\x00"), block_size, not data
    if data or not key:
        view = memoryview(data)
        last_start = max(len(data) - 1, 0) // block_size * block_size
        for start in range(0, last_start + 1, block_size):
            chunk = bytes(view[start:start + block_size])
            yield chunk.ljust(block_size, b"\x00"), len(chunk), start == last_start


class Blake2Engine:
    """Stateless single-shot BLAKE2 driver bound to one parameter set."""

    params: ClassVar[Blake2Params]
    variant: ClassVar[Variant]

    @property
    def block_size(self) -> int:
        return self.params.block_size

    @property
    def max_digest_size(self) -> int:
        return self.params.max_digest_size

    @property
    def max_key_size(self) -> int:
        return self.params.max_key_size

    def validate(self, output_length: int, key_length: int) -> None:
        """Check digest and key lengths against this variant's limits.

        Raises:
            InvalidParameterError: If either length is out of range.
        """

        name = self.params.name
        if (
            not isinstance(output_length, int)
            or isinstance(output_length, bool)
            or not 1 <= output_length <= self.max_digest_size
        ):
            raise InvalidParameterError(
                "output_length", output_length, f"in range 1..{self.max_digest_size} for {name}"
            )
        if key_length > self.max_key_size:
            raise InvalidParameterError(
                "key length", key_length, f"in range 0..{self.max_key_size} for {name}"
            )

    def hash(self, data: bytes, key: bytes | None = None, output_length: int | None = None) -> bytes:
        """Compute the digest of ``data``.

        Args:
            data: Message bytes (any bytes-like object).
            key: Optional key; ``None`` or empty means unkeyed hashing.
            output_length: Digest size in bytes. Defaults to the variant maximum.

        Returns:
            ``output_length`` digest bytes.

        Raises:
            InvalidParameterError: If the digest or key length is out of range.
        """

        params = self.params
        if output_length is None:
            output_length = params.max_digest_size
        key = bytes(key or b"")
        self.validate(output_length, len(key))
        data = bytes(data)

        state = list(params.iv)
        state[0] ^= parameter_word(len(key), output_length)

        counter = 0
        blocks = 0
        for block, absorbed, is_last in _iter_blocks(data, key, params.block_size):
            counter += absorbed
            state = compress(params, state, block, counter, is_last)
            blocks += 1

        _LOGGER.debug(
            "%s: %d bytes in %d blocks (keyed=%s), %d byte digest",
            params.name, len(data), blocks, bool(key), output_length,
        )
        return params.ops.bytes_from_words(state)[:output_length]


class Blake2bEngine(Blake2Engine):
    """BLAKE2b: 64-bit words, 128-byte blocks, 12 rounds."""

    params = BLAKE2B_PARAMS
    variant = Variant.BLAKE2B


class Blake2sEngine(Blake2Engine):
    """BLAKE2s: 32-bit words, 64-byte blocks, 10 rounds."""

    params = BLAKE2S_PARAMS
    variant = Variant.BLAKE2S


def engine_for(variant: Variant | str) -> Blake2Engine:
    """Return the engine for ``variant`` (enum member, ``"blake2b"``, ``"s"``, ...).

    Raises:
        InvalidParameterError: If ``variant`` names no BLAKE2 parameter set.
    """

    try:
        parsed = Variant.parse(variant)
    except ValueError:
        raise InvalidParameterError("variant", variant, "one of blake2b, blake2s") from None
    return Blake2bEngine() if parsed is Variant.BLAKE2B else Blake2sEngine()


def blake2_hash(
    data: bytes,
    key: bytes | None = None,
    variant: Variant | str = Variant.BLAKE2B,
    output_length: int | None = None,
) -> bytes:
    """Hash ``data`` with the selected BLAKE2 variant.

    This is the single entry point used by the tool layer and the CLI.
    """

    return engine_for(variant).hash(data, key, output_length)
