"""
Parsing of numeric command-line values.

Integers follow the C `strtoull` base-0 convention:

  - "0x1F" or "0X1F": hexadecimal
  - "017":            octal (leading zero)
  - "15":             decimal

Leading whitespace and one sign are accepted, and a negative value wraps
modulo 2^64, so "-1" is the largest 64-bit integer. Sizes take no sign.

Sizes accept one optional binary-multiple suffix, case-insensitive::

    k = 2^10    m = 2^20    g = 2^30    t = 2^40
"""

from __future__ import annotations

import math
import re
from typing import Final

from .exceptions import ArgumentError

MAX_U64: Final = (1 << 64) - 1

SIZE_SUFFIXES: Final = {
    "k": 1 << 10,
    "m": 1 << 20,
    "g": 1 << 30,
    "t": 1 << 40,
}
"""Multiplier for each size suffix."""

_INTEGER_RE: Final = re.compile(r"(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_SIGNED_INTEGER_RE: Final = re.compile(r"[ \t\n\v\f\r]*([+-]?)" + _INTEGER_RE.pattern)
_SIZE_RE: Final = re.compile(_INTEGER_RE.pattern + r"([kKmMgGtT]?)")


def _to_int(digits: str) -> int:
    if digits[:2] in ("0x", "0X"):
        return int(digits[2:], 16)
    if digits.startswith("0"):
        return int(digits, 8)
    return int(digits)


def parse_integer(text: str) -> int:
    """
    Parse a 64-bit integer, wrapping negative values to unsigned.

    Raises:
        ArgumentError: If `text` is not an integer or exceeds 64 bits.
    """
    match = _SIGNED_INTEGER_RE.fullmatch(text)
    if match is None:
        raise ArgumentError(f"not an integer: {text!r}")

    sign, digits = match.groups()
    value = _to_int(digits)
    if value > MAX_U64:
        raise ArgumentError(f"integer exceeds 64 bits: {text!r}")
    if sign == "-":
        value = -value & MAX_U64
    return value


def parse_size(text: str) -> int:
    """
    Parse a byte count with an optional k/m/g/t suffix.

    Examples:
        "4096" -> 4096, "64k" -> 65536, "1M" -> 1048576, "0x10k" -> 16384

    Raises:
        ArgumentError: If `text` is malformed or the size exceeds 64 bits.
    """
    match = _SIZE_RE.fullmatch(text)
    if match is None:
        raise ArgumentError(f"not a size: {text!r}")

    digits, suffix = match.groups()
    value = _to_int(digits) * SIZE_SUFFIXES.get(suffix.lower(), 1)
    if value > MAX_U64:
        raise ArgumentError(f"size exceeds 64 bits: {text!r}")
    return value


def parse_float(text: str) -> float:
    """
    Parse a finite floating point value.

    Raises:
        ArgumentError: If `text` is not a number, or is infinite or NaN.
    """
    try:
        value = float(text)
    except ValueError as e:
        raise ArgumentError(f"not a floating point value: {text!r}") from e

    if not math.isfinite(value):
        raise ArgumentError(f"value out of range: {text!r}")
    return value
