"""Caller-side BLAKE2 hash tool.

Turns text or file contents into hex digests the way the interactive hash
tool presents them: text is UTF-8 encoded, the key may be given as text, and
results are rendered in both lowercase and uppercase hex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional, Union

from .config import OUTPUT_LENGTH_OPTIONS, HashConfig, HexCase, Variant
from .crypto.blake2 import blake2_hash
from .crypto.errors import InvalidParameterError

_LOGGER: Final = logging.getLogger(__name__)

Data = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class HashResult:
    """A computed digest plus its hex renderings."""

    digest: bytes
    variant: Variant
    output_length: int

    @property
    def lower(self) -> str:
        return self.digest.hex()

    @property
    def upper(self) -> str:
        return self.digest.hex().upper()

    def hex(self, case: HexCase = HexCase.LOWER) -> str:
        return self.upper if case is HexCase.UPPER else self.lower

    @property
    def label(self) -> str:
        """Algorithm label such as ``BLAKE2b-256``."""
        prefix = "BLAKE2b" if self.variant is Variant.BLAKE2B else "BLAKE2s"
        return f"{prefix}-{self.output_length * 8}"


def output_length_options(variant: Union[Variant, str]) -> tuple[int, ...]:
    """Digest lengths (bytes) offered for ``variant``."""
    return OUTPUT_LENGTH_OPTIONS[Variant.parse(variant)]


class Blake2Tool:
    """
    Hash text or files with BLAKE2b / BLAKE2s.

    Example:
        >>> tool = Blake2Tool()
        >>> tool.calculate("abc", output_length=64).lower[:16]
        'ba80a53f981c4d0d'
    """

    def __init__(self, config: Optional[HashConfig] = None) -> None:
        """
        Initialize the tool.

        Args:
            config: Hashing defaults. If not provided, :class:`HashConfig`
                   defaults are used (BLAKE2b, 32-byte digest).
        """
        self.config = config or HashConfig()

    def _encode(self, value: Data) -> bytes:
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)

    def _encode_key(self, key: Optional[Data]) -> Optional[bytes]:
        if key is None:
            return None
        if isinstance(key, str):
            return key.encode(self.config.key_encoding) if key else None
        return bytes(key) or None

    def effective_output_length(self, variant: Variant, output_length: Optional[int]) -> int:
        """
        Resolve the digest length for ``variant``.

        Lengths above the variant maximum are clamped when
        ``config.clamp_digest_size`` is set; otherwise they are passed through
        and rejected by the engine.
        """
        length = self.config.digest_size if output_length is None else output_length
        if self.config.clamp_digest_size and length > variant.max_digest_size:
            _LOGGER.warning(
                "%s digest length %d clamped to %d", variant.value, length, variant.max_digest_size
            )
            length = variant.max_digest_size
        return length

    def calculate(
        self,
        data: Data,
        key: Optional[Data] = None,
        variant: Union[Variant, str, None] = None,
        output_length: Optional[int] = None,
    ) -> Optional[HashResult]:
        """
        Hash ``data``.

        Args:
            data: Text (UTF-8 encoded before hashing) or raw bytes.
            key: Optional key as text or bytes. Empty means unkeyed.
            variant: BLAKE2 variant; defaults to the configured one.
            output_length: Digest length in bytes; defaults to the configured one.

        Returns:
            The result, or ``None`` when ``data`` is blank text.

        Raises:
            InvalidParameterError: If the key is too long or the digest
                length is out of range after clamping.
        """
        if isinstance(data, str) and not data.strip():
            return None

        try:
            resolved = Variant.parse(variant if variant is not None else self.config.variant)
        except ValueError:
            raise InvalidParameterError("variant", variant, "one of blake2b, blake2s") from None
        length = self.effective_output_length(resolved, output_length)
        digest = blake2_hash(self._encode(data), self._encode_key(key), resolved, length)
        return HashResult(digest=digest, variant=resolved, output_length=length)

    def hash_file(
        self,
        path: Union[str, Path],
        key: Optional[Data] = None,
        variant: Union[Variant, str, None] = None,
        output_length: Optional[int] = None,
    ) -> HashResult:
        """
        Hash the raw bytes of the file at ``path``.

        Raises:
            OSError: If the file cannot be read.
            InvalidParameterError: As for :meth:`calculate`.
        """
        data = Path(path).read_bytes()
        _LOGGER.debug("hashing %s (%d bytes)", path, len(data))
        result = self.calculate(data, key=key, variant=variant, output_length=output_length)
        assert result is not None
        return result

    def example(self) -> HashResult:
        """Hash the configured example input."""
        result = self.calculate(self.config.example_input)
        assert result is not None
        return result
