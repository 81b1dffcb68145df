# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Ordering is lexicographic over (major, minor, patch).
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0", "1.0.0")
        0
        >>> compare_versions("2.0.0", "1.0.0")
        1
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: Union[str, Version]) -> tuple[int, int, int]:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.10.0", "2", "1.9.3"], key=version_key)
        ['1.9.3', '1.10.0', '2']
    """
    return _coerce(version).as_tuple()
