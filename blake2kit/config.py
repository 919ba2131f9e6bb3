"""Configuration management for blake2kit."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Any, Optional, List
from enum import Enum
import os


class Variant(Enum):
    """BLAKE2 parameter sets."""
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"

    @classmethod
    def parse(cls, value: "Variant | str") -> "Variant":
        """Accept an enum member, its value, or the short forms ``b`` / ``s``."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ("b", "2b"):
            text = "blake2b"
        elif text in ("s", "2s"):
            text = "blake2s"
        return cls(text)

    @property
    def max_digest_size(self) -> int:
        return 64 if self is Variant.BLAKE2B else 32

    @property
    def max_key_size(self) -> int:
        return 64 if self is Variant.BLAKE2B else 32


class HexCase(Enum):
    """Rendering of hex digests."""
    LOWER = "lower"
    UPPER = "upper"


# Digest lengths offered per variant, in bytes.
OUTPUT_LENGTH_OPTIONS: Dict[Variant, tuple[int, ...]] = {
    Variant.BLAKE2B: (16, 32, 48, 64),
    Variant.BLAKE2S: (16, 32),
}

ENV_VARIANT = "BLAKE2KIT_VARIANT"
ENV_DIGEST_SIZE = "BLAKE2KIT_DIGEST_SIZE"
ENV_HEX_CASE = "BLAKE2KIT_HEX_CASE"


@dataclass
class HashConfig:
    """Hashing defaults used by the tool layer and the CLI."""

    variant: Variant = Variant.BLAKE2B
    digest_size: int = 32
    hex_case: HexCase = HexCase.LOWER
    key_encoding: str = "utf-8"
    clamp_digest_size: bool = True
    example_input: str = "Hello, World!"


class Config:
    """
    Configuration manager for blake2kit.

    Values are resolved from the environment first, then from custom
    overrides, then from :class:`HashConfig` defaults.
    """

    def __init__(self, defaults: Optional[HashConfig] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            defaults: Base configuration. A plain :class:`HashConfig` if omitted.
        """
        self._defaults = defaults or HashConfig()
        self._custom_config: Dict[str, Any] = {}

    def set_custom_config(self, key: str, value: Any) -> None:
        """
        Set custom configuration value.

        Args:
            key: Configuration key.
            value: Configuration value.
        """
        self._custom_config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Checks custom config first, then falls back to the defaults.

        Args:
            key: Configuration key.
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        if key in self._custom_config:
            return self._custom_config[key]

        if hasattr(self._defaults, key):
            return getattr(self._defaults, key)

        return default

    def get_from_environment(self, key: str, env_var: str, default: Any = None) -> Any:
        """
        Get configuration value from environment variable or config.

        Args:
            key: Configuration key.
            env_var: Environment variable name.
            default: Default value.

        Returns:
            Configuration value from environment or config.
        """
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value
        return self.get(key, default)

    def hash_config(self) -> HashConfig:
        """
        Build the effective :class:`HashConfig`.

        Raises:
            ValueError: If an environment or custom value cannot be parsed.
        """
        variant = Variant.parse(self.get_from_environment("variant", ENV_VARIANT))
        digest_size = int(self.get_from_environment("digest_size", ENV_DIGEST_SIZE))
        hex_case = self.get_from_environment("hex_case", ENV_HEX_CASE)
        if not isinstance(hex_case, HexCase):
            hex_case = HexCase(str(hex_case).strip().lower())
        return replace(
            self._defaults,
            variant=variant,
            digest_size=digest_size,
            hex_case=hex_case,
            key_encoding=self.get("key_encoding"),
            clamp_digest_size=self.get("clamp_digest_size"),
            example_input=self.get("example_input"),
        )

    def validate(self) -> List[str]:
        """
        Validate current configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = []
        try:
            config = self.hash_config()
        except ValueError as exc:
            return [f"unparseable configuration: {exc}"]

        if config.digest_size < 1:
            errors.append("digest_size must be positive")

        if not config.clamp_digest_size and config.digest_size > config.variant.max_digest_size:
            errors.append(
                f"digest_size must be at most {config.variant.max_digest_size} for {config.variant.value}"
            )

        try:
            "".encode(config.key_encoding)
        except LookupError:
            errors.append(f"unknown key_encoding: {config.key_encoding}")

        return errors
