"""Test configuration for blake2kit package."""

import pytest

from blake2kit.crypto.selftest import paint_test_input


@pytest.fixture
def painted():
    """Factory for deterministic test input of a given length."""
    return paint_test_input


@pytest.fixture
def sample_config():
    """Provide a BLAKE2s configuration for testing."""
    from blake2kit.config import HashConfig, Variant
    return HashConfig(variant=Variant.BLAKE2S, digest_size=16)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove blake2kit environment overrides."""
    from blake2kit.config import ENV_DIGEST_SIZE, ENV_HEX_CASE, ENV_VARIANT
    for name in (ENV_VARIANT, ENV_DIGEST_SIZE, ENV_HEX_CASE):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
