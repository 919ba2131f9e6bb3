"""BLAKE2 hashing primitives for blake2kit.

The engines in :mod:`blake2kit.crypto.blake2` are written from scratch in pure
Python. :mod:`blake2kit.crypto.reference` wraps the vetted implementation from
:pypi:`cryptography` and is used only to cross-check them.
"""

from __future__ import annotations

from .blake2 import (
    Blake2bEngine,
    Blake2Engine,
    Blake2sEngine,
    blake2_hash,
    engine_for,
)
from .compress import compress, mix
from .constants import BLAKE2B_PARAMS, BLAKE2S_PARAMS, Blake2Params
from .errors import (
    CryptoError,
    InvalidParameterError,
    SelfTestError,
)
from .hashes import blake2b_digest, blake2s_digest
from .reference import reference_digest
from .selftest import SelfTestReport, run_selftest
from .words import WORD32, WORD64, WordOps

__all__ = [
    "BLAKE2B_PARAMS",
    "BLAKE2S_PARAMS",
    "Blake2bEngine",
    "Blake2Engine",
    "Blake2Params",
    "Blake2sEngine",
    "CryptoError",
    "InvalidParameterError",
    "SelfTestError",
    "SelfTestReport",
    "WORD32",
    "WORD64",
    "WordOps",
    "blake2_hash",
    "blake2b_digest",
    "blake2s_digest",
    "compress",
    "engine_for",
    "mix",
    "reference_digest",
    "run_selftest",
]
