# SPDX-License-Identifier: MIT
"""Range patterns: an operator immediately followed by a version.

    =1.2.3   equal to 1.2.3
    <1.2.3   older than 1.2.3
    >1.2.3   newer than 1.2.3
    <=1.2.3  not newer than 1.2.3
    >=1.2.3  not older than 1.2.3
    ^1.2.3   no breaking change since 1.2.3
    ~1.2.3   no new feature since 1.2.3

The operator is everything in front of the first numeric character and is
matched as a whole token, so ">=" is never read as ">".
"""

from __future__ import annotations

import logging
import operator as _op
from dataclasses import dataclass
from typing import Callable, Optional

from .config import ParserConfig
from .errors import NoVersionFoundError, PatternError, UnknownOperatorError
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

Predicate = Callable[[Version, Version], bool]

OPERATORS: tuple[tuple[str, Predicate], ...] = (
    ("=", _op.eq),
    ("<", _op.lt),
    (">", _op.gt),
    ("<=", _op.le),
    (">=", _op.ge),
    ("^", Version.is_compatible),
    ("~", Version.is_featureless),
)

_PREDICATES: dict[str, Predicate] = dict(OPERATORS)


def _find_version_start(text: str) -> int:
    for index, char in enumerate(text):
        # Unicode numerals count here; the segment parser rejects non-ASCII ones
        if char.isnumeric():
            return index
    return -1


def split_pattern(
    pattern: str, config: Optional[ParserConfig] = None
) -> tuple[str, Version]:
    """Split a pattern into its operator token and version.

    The operator is not validated here.

    Raises:
        NoVersionFoundError: If the pattern contains no digit
        ParseError: If the version part is invalid
    """
    if not isinstance(pattern, str):
        raise PatternError(
            str(pattern), f"Pattern must be a string, got {type(pattern).__name__}"
        )

    start = _find_version_start(pattern)
    if start < 0:
        raise NoVersionFoundError(pattern)

    return pattern[:start], parse_version(pattern[start:], config)


@dataclass(frozen=True)
class Pattern:
    """A parsed range pattern that can be checked against many versions.

    Attributes:
        operator: One of the tokens in OPERATORS
        version: The version the operator compares against
    """

    operator: str
    version: Version

    def __post_init__(self) -> None:
        if not isinstance(self.version, Version):
            raise TypeError(
                f"Pattern.version must be a Version, got {type(self.version).__name__}"
            )
        if self.operator not in _PREDICATES:
            raise UnknownOperatorError(f"{self.operator}{self.version}", self.operator)

    def __str__(self) -> str:
        return f"{self.operator}{self.version}"

    @classmethod
    def parse(cls, pattern: str, config: Optional[ParserConfig] = None) -> "Pattern":
        """Parse a pattern string such as ``">=1.2"``.

        Args:
            pattern: Operator token immediately followed by a version
            config: Parser configuration for the version part

        Returns:
            A Pattern object

        Raises:
            NoVersionFoundError: If the pattern contains no version
            UnknownOperatorError: If the operator is not recognized
            ParseError: If the version part is invalid
        """
        token, version = split_pattern(pattern, config)
        if token not in _PREDICATES:
            logger.debug("Unknown operator %r in pattern %r", token, pattern)
            raise UnknownOperatorError(pattern, token)
        return cls(token, version)

    def matches(self, version: Version) -> bool:
        """Return True if ``version`` satisfies this pattern."""
        return _PREDICATES[self.operator](version, self.version)
