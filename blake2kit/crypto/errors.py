"""Shared exceptions for :mod:`blake2kit.crypto`.

The library raises a small set of domain-specific exceptions so callers can
tell a bad request apart from a broken implementation.
"""

from __future__ import annotations

from typing import Any


class CryptoError(Exception):
    """Base error for hashing operations."""


class InvalidParameterError(CryptoError, ValueError):
    """Raised when a digest length, key length or variant is out of range.

    Always raised before any block is compressed.
    """

    def __init__(self, parameter: str, value: Any, allowed: str) -> None:
        self.parameter = parameter
        self.value = value
        self.allowed = allowed
        super().__init__(f"{parameter} must be {allowed}, got {value!r}")


class SelfTestError(CryptoError):
    """Raised when a known-answer vector or backend cross-check does not match."""
