"""Tests for command-line value parsing."""

from __future__ import annotations

import pytest

from lzdatagen.exceptions import ArgumentError
from lzdatagen.parsing import MAX_U64, parse_float, parse_integer, parse_size


class TestParseInteger:
    """Base-0 integer parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("42", 42),
            ("0x2A", 42),
            ("0X2a", 42),
            ("052", 42),
            ("18446744073709551615", MAX_U64),
            ("0xFFFFFFFFFFFFFFFF", MAX_U64),
            ("+5", 5),
            (" \t7", 7),
            ("-0", 0),
            ("-1", MAX_U64),
            ("-0x2A", MAX_U64 - 41),
            ("-18446744073709551615", 1),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Decimal, hex and octal forms are accepted, signed ones wrap modulo 2^64."""
        assert parse_integer(text) == expected

    @pytest.mark.parametrize("text", ["", "x", "0x", "12a", "-", "+-1", "- 1", "1.0", "089", "7 "])
    def test_invalid(self, text: str) -> None:
        """Anything else is rejected."""
        with pytest.raises(ArgumentError, match="not an integer"):
            parse_integer(text)

    def test_overflow(self) -> None:
        """Values beyond 64 bits are rejected."""
        with pytest.raises(ArgumentError, match="64 bits"):
            parse_integer("18446744073709551616")
        with pytest.raises(ArgumentError, match="64 bits"):
            parse_integer("-18446744073709551616")


class TestParseSize:
    """Sizes with binary-multiple suffixes."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1", 1),
            ("4096", 4096),
            ("1k", 1024),
            ("64K", 65536),
            ("1m", 1 << 20),
            ("3M", 3 << 20),
            ("2g", 2 << 30),
            ("1T", 1 << 40),
            ("0x10k", 16 << 10),
            ("010", 8),
            ("0", 0),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Plain numbers and each suffix are accepted."""
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", ["", "k", "1.5m", "1kb", "1p", "12 ", "-1k", " 1k", "+1k"])
    def test_invalid(self, text: str) -> None:
        """Malformed sizes are rejected."""
        with pytest.raises(ArgumentError, match="not a size"):
            parse_size(text)

    def test_overflow(self) -> None:
        """Sizes that overflow 64 bits after scaling are rejected."""
        with pytest.raises(ArgumentError, match="64 bits"):
            parse_size("16777216t")

    def test_largest_scaled(self) -> None:
        """The largest terabyte count that still fits is accepted."""
        assert parse_size("16777215t") == 16777215 << 40


class TestParseFloat:
    """Floating point values."""

    @pytest.mark.parametrize("text, expected", [("3", 3.0), ("1.5", 1.5), ("1e2", 100.0)])
    def test_valid(self, text: str, expected: float) -> None:
        """Ordinary numbers parse."""
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3"])
    def test_not_a_number(self, text: str) -> None:
        """Non-numeric text is rejected."""
        with pytest.raises(ArgumentError, match="not a floating point value"):
            parse_float(text)

    @pytest.mark.parametrize("text", ["inf", "-inf", "nan", "1e999"])
    def test_non_finite(self, text: str) -> None:
        """Infinite and NaN values are rejected."""
        with pytest.raises(ArgumentError, match="out of range"):
            parse_float(text)
