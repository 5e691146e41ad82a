"""Tests for Go duration parsing."""

import pytest

from gotest_teamcity.utils.durations import MILLISECOND, SECOND, parse_duration, to_milliseconds


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("0.00s", 0),
        ("0.01s", 10 * MILLISECOND),
        ("1.5s", 1500 * MILLISECOND),
        ("-0.25s", -250 * MILLISECOND),
        ("+2s", 2 * SECOND),
        ("1m30s", 90 * SECOND),
        ("1h", 3600 * SECOND),
        ("300ms", 300 * MILLISECOND),
        ("1.s", SECOND),
        (".5s", 500 * MILLISECOND),
        ("10µs", 10_000),
        ("7ns", 7),
    ])
    def test_valid(self, text, expected):
        """Valid duration expressions parse to nanoseconds."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "-", "s", ".s", "1", "1.2.3s", "5sec", "1s2"])
    def test_invalid(self, text):
        """Malformed expressions return None."""
        assert parse_duration(text) is None


class TestToMilliseconds:
    """Tests for millisecond truncation."""

    def test_truncates_toward_zero(self):
        """Fractions of a millisecond are dropped in both directions."""
        assert to_milliseconds(1_999_999) == 1
        assert to_milliseconds(-1_999_999) == -1
        assert to_milliseconds(0) == 0
