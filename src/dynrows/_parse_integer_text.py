import re

from dynrows.errors import CellDecodeError

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _check_int64(value: int) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise CellDecodeError(f"Integer out of 64-bit range: {value}")
    return value


def _parse_integer_text(text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise CellDecodeError(f"Invalid integer text: {text!r}")
    return _check_int64(int(text))
