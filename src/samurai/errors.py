# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing versions and range patterns.

All of them derive from ``ValueError`` so callers handling untrusted input
can catch either the whole family or one specific failure.
"""

from __future__ import annotations


class VersionError(ValueError):
    """Base class for version and pattern failures."""

    def __init__(self, text: str, message: str = ""):
        self.text = text
        self.message = message or f"Invalid version: {text!r}"
        super().__init__(self.message)


class ParseError(VersionError):
    """Raised when a version string cannot be parsed."""


class InvalidSegmentError(ParseError):
    """Raised when a dotted segment is not a non-negative decimal integer."""

    def __init__(self, text: str, segment: str):
        self.segment = segment
        super().__init__(text, f"Invalid version segment {segment!r} in {text!r}")


class TooManyPartsError(ParseError):
    """Raised when a version string has more than three segments."""

    def __init__(self, text: str, count: int):
        self.count = count
        super().__init__(
            text, f"Too many parts in {text!r}: expected at most 3, got {count}"
        )


class PatternError(VersionError):
    """Raised when a range pattern cannot be evaluated."""


class NoVersionFoundError(PatternError):
    """Raised when a pattern contains no digit to start a version from."""

    def __init__(self, text: str):
        super().__init__(text, f"No version found in pattern {text!r}")


class UnknownOperatorError(PatternError):
    """Raised when the operator in front of a pattern's version is not recognized."""

    def __init__(self, text: str, operator: str):
        self.operator = operator
        super().__init__(text, f"Unknown operator {operator!r} in pattern {text!r}")
