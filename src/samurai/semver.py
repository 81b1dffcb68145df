# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports the numeric MAJOR[.MINOR[.PATCH]] core only; missing trailing
segments default to 0:
- "10"    -> 10.0.0
- "6.9"   -> 6.9.0
- "1.8.9" -> 1.8.9
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import InvalidSegmentError, ParseError, TooManyPartsError

logger = logging.getLogger(__name__)

# Every component must fit in an unsigned 32-bit integer
MAX_COMPONENT = 2**32 - 1

# A segment is one or more ASCII digits: no sign, whitespace or "_"
SEGMENT_PATTERN = re.compile(r"[0-9]+")

_FIELDS = ("major", "minor", "patch")


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (incompatible API changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in _FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Version.{name} must be an int, got {type(value).__name__}"
                )
            if not 0 <= value <= MAX_COMPONENT:
                raise ValueError(
                    f"Version.{name} must be between 0 and {MAX_COMPONENT}, got {value}"
                )

    @classmethod
    def new(cls, major: int, minor: int, patch: int) -> "Version":
        """Create a version from its three components."""
        return cls(major, minor, patch)

    @classmethod
    def parse(cls, version_string: str, config: Optional[ParserConfig] = None) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, config)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def compare(self, other: "Version") -> int:
        """Three-way comparison with another version.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        for attr in _FIELDS:
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def is_compatible(self, other: "Version") -> bool:
        """Check that no breaking change happened going from ``other`` up to this version.

        Below 1.0.0 any minor bump may break, so a zero-major version is only
        compatible when it is also featureless.

        Examples:
            >>> Version(1, 5, 7).is_compatible(Version(1, 2, 9))
            True
            >>> Version(1, 5, 7).is_compatible(Version(0, 8, 1))
            False
        """
        if self.major == 0:
            return self.is_featureless(other)

        return self >= other and self.as_tuple() < (other.major + 1, 0, 0)

    def is_featureless(self, other: "Version") -> bool:
        """Check that no feature was added going from ``other`` up to this version.

        Examples:
            >>> Version(1, 5, 7).is_featureless(Version(1, 5, 4))
            True
            >>> Version(1, 5, 7).is_featureless(Version(1, 6, 2))
            False
        """
        return self >= other and self.as_tuple() < (other.major, other.minor + 1, 0)

    def check(self, pattern: str, config: Optional[ParserConfig] = None) -> bool:
        """Check this version against a range pattern such as ``"^1.2.9"``.

        Args:
            pattern: An operator (=, <, >, <=, >=, ^, ~) immediately
                followed by a version string
            config: Parser configuration for the version part of the pattern

        Returns:
            True if this version satisfies the pattern

        Raises:
            NoVersionFoundError: If the pattern contains no version
            UnknownOperatorError: If the operator is not recognized
            ParseError: If the version part of the pattern is invalid

        Examples:
            >>> Version(1, 5, 7).check("^1.2.9")
            True
            >>> Version(1, 5, 7).check("~1.5.4")
            True
        """
        from .pattern import Pattern

        return Pattern.parse(pattern, config).matches(self)


def _parse_segment(version_string: str, segment: str) -> int:
    if not SEGMENT_PATTERN.fullmatch(segment):
        logger.debug("Rejecting segment %r of version %r", segment, version_string)
        raise InvalidSegmentError(version_string, segment)

    digits = segment.lstrip("0") or "0"
    if len(digits) > len(str(MAX_COMPONENT)) or int(digits) > MAX_COMPONENT:
        logger.debug("Segment %r of version %r is out of range", segment, version_string)
        raise InvalidSegmentError(version_string, segment)
    return int(digits)


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: One to three dot-separated non-negative integers
            (MAJOR[.MINOR[.PATCH]])
        config: Parser configuration, defaults to DEFAULT_CONFIG

    Returns:
        A Version object with parsed components

    Raises:
        InvalidSegmentError: If a segment is not a valid integer
        TooManyPartsError: If there are more than three segments and the
            configuration rejects extra parts
        ParseError: If the input is not a string

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3)

        >>> parse_version("6.9")
        Version(major=6, minor=9, patch=0)
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    config = config or DEFAULT_CONFIG
    segments = version_string.split(".")

    if len(segments) > 3 and config.truncates:
        logger.debug(
            "Truncating version %r to its first three segments (dropped %d)",
            version_string,
            len(segments) - 3,
        )
        segments = segments[:3]

    numbers = [_parse_segment(version_string, segment) for segment in segments]

    if len(numbers) > 3:
        logger.debug("Version %r has %d parts", version_string, len(numbers))
        raise TooManyPartsError(version_string, len(numbers))

    numbers.extend([0] * (3 - len(numbers)))
    return Version(*numbers)


def is_valid_version(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid version.

    Args:
        version_string: The string to validate
        config: Parser configuration, defaults to DEFAULT_CONFIG

    Returns:
        True if the string parses as a version, False otherwise

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1.0.0.0")
        False
    """
    try:
        parse_version(version_string, config)
    except ParseError:
        return False
    return True
