# SPDX-License-Identifier: MIT
"""Unit tests for range pattern evaluation."""

import pytest

from samurai import (
    OPERATORS,
    ExtraPartsPolicy,
    InvalidSegmentError,
    NoVersionFoundError,
    ParserConfig,
    Pattern,
    PatternError,
    TooManyPartsError,
    UnknownOperatorError,
    Version,
    split_pattern,
)


class TestCheck:
    """Tests for Version.check."""

    def test_less_than(self):
        """Test the < operator."""
        assert Version(7, 8, 9).check("<8.5.8") is True
        assert Version(8, 5, 8).check("<8.5.8") is False

    def test_greater_than(self):
        """Test the > and >= operators."""
        v = Version(5, 2, 8)
        assert v.check(">5.1.9") is True
        assert v.check(">=5.1.9") is True
        assert Version(1, 2, 7).check(">1.2.5") is True

    def test_equal(self):
        """Test the = operator."""
        assert Version(6, 9, 9).check("=6.9.9") is True
        assert Version(6, 9, 9).check("=6.9") is False

    def test_less_equal(self):
        """Test the <= operator on its boundary."""
        assert Version(2, 0, 0).check("<=2") is True
        assert Version(2, 0, 1).check("<=2") is False

    def test_greater_equal_is_not_greater(self):
        """Test that >= is matched as one token, not as >."""
        assert Version(5, 1, 9).check(">=5.1.9") is True
        assert Version(5, 1, 9).check(">5.1.9") is False

    def test_caret(self):
        """Test the ^ operator."""
        assert Version(8, 10, 5).check("^8.9.1") is True
        assert Version(9, 0, 0).check("^8.9.1") is False
        assert Version(0, 10, 5).check("^0.9.20") is False

    def test_tilde(self):
        """Test the ~ operator."""
        assert Version(30, 11, 21).check("~30.11.20") is True
        assert Version(30, 12, 0).check("~30.11.20") is False

    def test_short_pattern_versions(self):
        """Test that pattern versions default-fill missing segments."""
        assert Version(1, 4, 0).check("^1") is True
        assert Version(1, 4, 2).check("~1.4") is True


class TestPatternErrors:
    """Tests for invalid patterns."""

    def test_unknown_operator(self):
        """Test that garbage in front of the version is rejected."""
        with pytest.raises(UnknownOperatorError) as exc_info:
            Version(1, 0, 69).check("seeya5.8.10")
        assert exc_info.value.operator == "seeya"

    def test_missing_operator(self):
        """Test that a bare version has the empty operator."""
        with pytest.raises(UnknownOperatorError) as exc_info:
            Version(1, 0, 0).check("1.0.0")
        assert exc_info.value.operator == ""

    @pytest.mark.parametrize("token", ["==", "=>", "=<", "<>", "^^", "~>", " >=", ">= ", "v", "!="])
    def test_tokens_are_matched_exactly(self, token):
        """Test that near-miss tokens are not accepted."""
        with pytest.raises(UnknownOperatorError):
            Version(1, 0, 0).check(f"{token}1.0.0")

    @pytest.mark.parametrize("pattern", ["", "^", ">=", "latest", "x.y.z"])
    def test_no_version(self, pattern):
        """Test patterns without any digit."""
        with pytest.raises(NoVersionFoundError):
            Version(1, 0, 0).check(pattern)

    def test_parse_error_propagates(self):
        """Test that an invalid version part raises the parse error."""
        with pytest.raises(InvalidSegmentError):
            Version(1, 0, 0).check(">=1.x")

    def test_too_many_parts_propagates(self):
        """Test that too many version parts raise the parse error."""
        with pytest.raises(TooManyPartsError):
            Version(1, 0, 0).check("^1.0.0.0")

    def test_config_applies_to_pattern_version(self):
        """Test that the parser config is used for the version part."""
        config = ParserConfig(extra_parts=ExtraPartsPolicy.TRUNCATE)
        assert Version(1, 0, 0).check("^1.0.0.0", config) is True

    def test_very_long_version_in_pattern(self):
        """Test that an oversized version part raises a parse error."""
        with pytest.raises(InvalidSegmentError):
            Version(1, 0, 0).check(">=" + "9" * 5000)

    def test_unicode_numeral_starts_version(self):
        """Test that a non-ASCII numeral ends the operator and fails as a segment."""
        with pytest.raises(InvalidSegmentError) as exc_info:
            Version(1, 0, 0).check("^١.0")
        assert exc_info.value.segment == "١"

    def test_unicode_numeral_alone(self):
        """Test that a lone non-ASCII numeral is found as the version."""
        with pytest.raises(InvalidSegmentError):
            Version(1, 0, 0).check("^١")

    def test_non_string_pattern(self):
        """Test that non-string patterns raise error."""
        with pytest.raises(PatternError):
            Version(1, 0, 0).check(None)  # type: ignore

    def test_errors_are_value_errors(self):
        """Test that pattern errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Version(1, 0, 0).check("nothing")


class TestSplitPattern:
    """Tests for split_pattern function."""

    def test_split(self):
        """Test splitting operator from version."""
        assert split_pattern(">=1.2") == (">=", Version(1, 2, 0))

    def test_split_does_not_validate_operator(self):
        """Test that any token is returned as is."""
        assert split_pattern("seeya5.8.10") == ("seeya", Version(5, 8, 10))

    def test_split_without_operator(self):
        """Test splitting a bare version."""
        assert split_pattern("3") == ("", Version(3, 0, 0))


class TestPattern:
    """Tests for the Pattern object."""

    def test_parse(self):
        """Test parsing a pattern."""
        pattern = Pattern.parse("^8.9.1")
        assert pattern.operator == "^"
        assert pattern.version == Version(8, 9, 1)

    def test_str(self):
        """Test pattern string representation."""
        assert str(Pattern.parse("~1.5")) == "~1.5.0"

    def test_matches_many(self):
        """Test reusing one pattern across versions."""
        pattern = Pattern.parse("^1.2.9")
        candidates = [Version(1, 2, 8), Version(1, 2, 9), Version(1, 9, 0), Version(2, 0, 0)]
        assert [v for v in candidates if pattern.matches(v)] == [Version(1, 2, 9), Version(1, 9, 0)]

    def test_direct_construction_validates_version(self):
        """Test that building a Pattern with a non-Version fails."""
        with pytest.raises(TypeError):
            Pattern("=", "1.0.0")  # type: ignore

    def test_direct_construction_validates_operator(self):
        """Test that building a Pattern with an unknown operator fails."""
        with pytest.raises(UnknownOperatorError):
            Pattern("=>", Version(1, 0, 0))

    def test_equality(self):
        """Test that equal patterns compare equal."""
        assert Pattern.parse(">=1") == Pattern(">=", Version(1, 0, 0))

    def test_operator_table(self):
        """Test the recognized operator tokens."""
        assert [token for token, _ in OPERATORS] == ["=", "<", ">", "<=", ">=", "^", "~"]
