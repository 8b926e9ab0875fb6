"""
Amount normalization for locale-ambiguous numeric strings.

Each rule is a separate step so it can be tested on its own:

1. strip_whitespace       "1 234,5"   -> "1234,5"
2. drop_dot_grouping      "1.234,56"  -> "1234,56"
3. drop_comma_grouping    "1,234.5"   -> "1234.5"
4. convert_decimal_comma  "1234,56"   -> "1234.56"

A separator followed by exactly three digits is always read as a grouping
mark, so "1,234" is 1234 and never 1.234.
"""

from __future__ import annotations

import math
import re

_WHITESPACE = re.compile(r"\s+")
_DOT_GROUPING = re.compile(r"\.(?=\d{3}(?:\D|$))", re.ASCII)
_COMMA_GROUPING = re.compile(r",(?=\d{3}(?:\D|$))", re.ASCII)
_DECIMAL_COMMA = re.compile(r",(\d{1,2})$", re.ASCII)
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class AmountParseError(ValueError):
    """Raised when an amount has non-numeric residue after normalization."""


def strip_whitespace(value: str) -> str:
    return _WHITESPACE.sub("", value)


def drop_dot_grouping(value: str) -> str:
    return _DOT_GROUPING.sub("", value)


def drop_comma_grouping(value: str) -> str:
    return _COMMA_GROUPING.sub("", value)


def convert_decimal_comma(value: str) -> str:
    return _DECIMAL_COMMA.sub(r".\1", value)


NORMALIZATION_STEPS = (
    strip_whitespace,
    drop_dot_grouping,
    drop_comma_grouping,
    convert_decimal_comma,
)


def canonicalize_amount(value: str) -> str:
    """Apply every normalization step in order and return the residue."""
    for step in NORMALIZATION_STEPS:
        value = step(value)
    return value


def normalize_amount(value: str) -> float:
    """
    Convert a free-form numeric string into a float.

    An empty residue is 0. Anything that is not a plain decimal literal
    (including "nan" and "inf") raises AmountParseError.
    """
    residue = canonicalize_amount(value)
    if residue == "":
        return 0.0
    if not _DECIMAL_LITERAL.fullmatch(residue):
        raise AmountParseError(f"not a number: {value!r}")

    amount = float(residue)
    # "1e400" overflows to inf; rejected rather than kept as an infinite sale
    if not math.isfinite(amount):
        raise AmountParseError(f"out of range: {value!r}")
    return amount
