"""blake2kit: pure-Python BLAKE2b / BLAKE2s hashing."""

__version__ = "0.1.0"
__author__ = "blake2kit Team"

from .config import Config, HashConfig, HexCase, Variant
from .crypto import (
    Blake2bEngine,
    Blake2sEngine,
    InvalidParameterError,
    blake2_hash,
    blake2b_digest,
    blake2s_digest,
)
from .tool import Blake2Tool, HashResult

__all__ = [
    "Blake2Tool",
    "Blake2bEngine",
    "Blake2sEngine",
    "Config",
    "HashConfig",
    "HashResult",
    "HexCase",
    "InvalidParameterError",
    "Variant",
    "blake2_hash",
    "blake2b_digest",
    "blake2s_digest",
]
