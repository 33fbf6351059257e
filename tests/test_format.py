"""Tests for metadata value formatting."""

import pytest

from gh_mirror.format import format_bool, format_optional_int


class TestFormatOptionalInt:
    """Tests for format_optional_int."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            (0, "0"),
            (42, "42"),
            (-123, "-123"),
            (999999, "999999"),
        ],
        ids=["none", "zero", "positive", "negative", "large"],
    )
    def test_format_optional_int(self, value: int | None, expected: str) -> None:
        """Test decimal formatting of optional integers."""
        assert format_optional_int(value) == expected


class TestFormatBool:
    """Tests for format_bool."""

    def test_true(self) -> None:
        assert format_bool(True) == "1"

    def test_false(self) -> None:
        assert format_bool(False) == "0"
