"""Permissive number parsing for raw form input."""

from __future__ import annotations
import math
import re
from typing import Any

_INT_PREFIX = re.compile(r"[+-]?\d+")
_DECIMAL_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _prefix(pattern: re.Pattern, raw: Any) -> str:
    if raw is None:
        return ""
    match = pattern.match(str(raw).lstrip())
    return match.group(0) if match else ""


def parse_int(raw: Any) -> int:
    """
    Parse a tyre count the way a lenient form field reads it.

    Takes the leading integer part and ignores the rest:
        '10'   -> 10
        '10.9' -> 10
        '7 pcs'-> 7
    Empty, unparseable, negative or out-of-range input gives 0.
    """
    text = _prefix(_INT_PREFIX, raw)
    if not text:
        return 0
    value = float(text)
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(value)


def parse_decimal(raw: Any) -> float:
    """
    Parse a price, distance or cost field.

    Takes the longest leading decimal literal:
        '4500.50' -> 4500.5
        '1e3'     -> 1000.0
        '.5km'    -> 0.5
    Empty, unparseable, non-finite or negative input gives 0.0.
    """
    text = _prefix(_DECIMAL_PREFIX, raw)
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value <= 0:
        return 0.0
    return value
