# SPDX-License-Identifier: MIT
"""Parser configuration.

This module provides the ParserConfig dataclass that controls how lenient
version parsing is. It can be built from an already-loaded mapping such as a
``[tool.samurai]`` table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConfigError(ValueError):
    """Raised when parser configuration is invalid."""

    pass


class ExtraPartsPolicy(str, Enum):
    """What to do with a fourth or later dotted segment."""

    REJECT = "reject"
    TRUNCATE = "truncate"

    @classmethod
    def from_name(cls, name: str) -> "ExtraPartsPolicy":
        """Look up a policy by its (case-insensitive) name.

        Raises:
            ConfigError: If the name is not a known policy
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ConfigError(
                f"extra-parts must be a string, got {type(name).__name__}"
            )
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ConfigError(
                f"Unknown extra-parts policy {name!r} (expected one of: {choices})"
            ) from None


# Keys accepted by ParserConfig.from_dict, mapped to field names
_CONFIG_KEYS = {
    "extra-parts": "extra_parts",
    "extra_parts": "extra_parts",
}


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for parsing version strings.

    Attributes:
        extra_parts: Policy for version strings with more than three
            segments. ``REJECT`` raises TooManyPartsError, ``TRUNCATE``
            keeps the first three segments and drops the rest unchecked.
    """

    extra_parts: ExtraPartsPolicy = ExtraPartsPolicy.REJECT

    @property
    def truncates(self) -> bool:
        return self.extra_parts is ExtraPartsPolicy.TRUNCATE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParserConfig":
        """Create a ParserConfig from a parsed configuration table.

        Args:
            data: Mapping of option names to values, e.g. the
                ``[tool.samurai]`` table of a loaded pyproject.toml

        Returns:
            ParserConfig instance

        Raises:
            ConfigError: If the mapping has unknown keys or invalid values
        """
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _CONFIG_KEYS.get(key)
            if field_name is None:
                raise ConfigError(f"Unknown configuration key: {key!r}")
            if field_name in kwargs:
                raise ConfigError(f"Duplicate configuration key: {key!r}")
            kwargs[field_name] = ExtraPartsPolicy.from_name(value)

        return cls(**kwargs)


DEFAULT_CONFIG = ParserConfig()
