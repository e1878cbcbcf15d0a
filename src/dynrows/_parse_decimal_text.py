"""Parse decimal text (as produced by numeric columns) into a float."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from dynrows.errors import CellDecodeError

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_SPECIAL_PATTERN = re.compile(r"[+-]?(?:nan|inf|infinity)", re.IGNORECASE | re.ASCII)


def _parse_decimal_text(text: str) -> float:
    if _SPECIAL_PATTERN.fullmatch(text):
        return float(text)
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise CellDecodeError(f"Invalid decimal text: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise CellDecodeError(f"Decimal text out of float64 range: {text!r}")
    return value


def _native_to_float(value: Decimal | int | float) -> float:
    """Coerce a driver-native number, rejecting values float64 cannot hold."""
    if isinstance(value, float):
        return value
    try:
        result = float(value)
    except (ValueError, OverflowError) as exc:
        raise CellDecodeError(f"Invalid numeric value: {value!r}") from exc
    if math.isinf(result) and not (isinstance(value, Decimal) and value.is_infinite()):
        raise CellDecodeError(f"Numeric value out of float64 range: {value!r}")
    return result
