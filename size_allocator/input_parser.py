"""
size_allocator/input_parser.py
------------------------------
Tolerant numeric parsing for values that arrive as raw form text.

Quantities stay as text while a user edits them and are parsed only when an
allocation is computed.  Anything that cannot be read as a finite number
becomes the fallback (0 by default) instead of raising.
"""

from __future__ import annotations

import math
import numbers
import re


# Longest leading numeric prefix, e.g. "12abc" -> "12", "-.5e3x" -> "-.5e3".
_NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_WHITESPACE_RE = re.compile(r"\s")

# Partial input a user may be half-way through typing.
_INCOMPLETE = {"", "-", ",", "."}


def to_number(value, fallback: float = 0.0) -> float:
    """
    Parse *value* into a finite float, returning *fallback* when it can't.

    Rules:
      - real numbers pass through when finite
      - all whitespace is removed (``"1 200"`` -> 1200.0)
      - the first decimal comma is read as a point (``"2,5"`` -> 2.5)
      - trailing garbage is ignored (``"12pcs"`` -> 12.0)
    """
    if isinstance(value, numbers.Real):
        number = float(value)
        return number if math.isfinite(number) else fallback

    text = _WHITESPACE_RE.sub("", str(value))
    if text in _INCOMPLETE:
        return fallback

    match = _NUMBER_PREFIX_RE.match(text.replace(",", ".", 1))
    if match is None:
        return fallback

    try:
        number = float(match.group(0))
    except (ValueError, OverflowError):
        return fallback
    return number if math.isfinite(number) else fallback


def to_quantity(value) -> float:
    """Parse a sales or stock figure; negatives are clamped to 0."""
    return max(0.0, to_number(value, 0.0))


def to_order_total(value) -> int:
    """Parse the total order field: whole pieces, never negative."""
    return int(math.floor(max(0.0, to_number(value, 0.0))))


def to_share(value) -> float:
    """Parse a variant share, clamped to [0, 1]."""
    return min(1.0, max(0.0, to_number(value, 0.0)))
