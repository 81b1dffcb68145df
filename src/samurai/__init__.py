# SPDX-License-Identifier: MIT
"""Semantic version parsing, ordering and range checks.

This package provides a MAJOR.MINOR.PATCH version type, its total ordering,
and a small range-pattern language (=, <, >, <=, >=, ^, ~).

Example:
    >>> from samurai import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.5.7")
    >>> version.minor
    5
    >>>
    >>> version.check("^1.2.9")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

import logging

__version__ = "0.1.0"

from .errors import (
    VersionError,
    ParseError,
    InvalidSegmentError,
    TooManyPartsError,
    PatternError,
    NoVersionFoundError,
    UnknownOperatorError,
)
from .config import (
    ParserConfig,
    ExtraPartsPolicy,
    DEFAULT_CONFIG,
    ConfigError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_version,
    MAX_COMPONENT,
)
from .compare import (
    compare_versions,
    version_key,
)
from .pattern import (
    Pattern,
    split_pattern,
    OPERATORS,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "version_key",
    # Range patterns
    "Pattern",
    "split_pattern",
    "OPERATORS",
    # Configuration
    "ParserConfig",
    "ExtraPartsPolicy",
    "DEFAULT_CONFIG",
    "ConfigError",
    # Errors
    "VersionError",
    "ParseError",
    "InvalidSegmentError",
    "TooManyPartsError",
    "PatternError",
    "NoVersionFoundError",
    "UnknownOperatorError",
]
