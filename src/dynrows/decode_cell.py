"""Apply a decode strategy to a single raw cell."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from decimal import Decimal

from dynrows._parse_decimal_text import _native_to_float, _parse_decimal_text
from dynrows.convert_array_elements import convert_array_elements
from dynrows.DecodeStrategy import DecodeStrategy
from dynrows.decoded_value import DecodedValue, Opaque
from dynrows.errors import CellDecodeError
from dynrows.parse_array_literal import parse_array_literal

_RAW_TEXT_TYPES = (bytes, bytearray, memoryview, str)
_NATIVE_SCALARS = (bool, int, float, str)


def _raw_text(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return bytes(raw).decode("utf-8")  # type: ignore[arg-type]
    except UnicodeDecodeError as exc:
        raise CellDecodeError(f"Raw cell is not valid UTF-8: {exc}") from exc


def _decode_array(raw: object, strategy: DecodeStrategy) -> DecodedValue:
    if isinstance(raw, (list, tuple)):
        return convert_array_elements(raw, strategy)
    if not isinstance(raw, _RAW_TEXT_TYPES):
        raise CellDecodeError(f"Unsupported raw array cell: {type(raw).__name__}")
    return convert_array_elements(parse_array_literal(raw), strategy)


def _decode_numeric(raw: object, _strategy: DecodeStrategy) -> DecodedValue:
    if isinstance(raw, bool):
        raise CellDecodeError(f"Boolean raw cell for numeric column: {raw!r}")
    if isinstance(raw, (Decimal, int, float)):
        return _native_to_float(raw)
    if not isinstance(raw, _RAW_TEXT_TYPES):
        raise CellDecodeError(f"Unsupported raw numeric cell: {type(raw).__name__}")
    return _parse_decimal_text(_raw_text(raw))


def _decode_uuid(raw: object, _strategy: DecodeStrategy) -> DecodedValue:
    if isinstance(raw, uuid.UUID):
        return str(raw)
    if not isinstance(raw, _RAW_TEXT_TYPES):
        raise CellDecodeError(f"Unsupported raw uuid cell: {type(raw).__name__}")
    return _raw_text(raw)


def _passthrough(raw: object, _strategy: DecodeStrategy) -> DecodedValue:
    if raw is None or isinstance(raw, _NATIVE_SCALARS):
        return raw  # type: ignore[return-value]
    if isinstance(raw, list):
        return [_passthrough(item, _strategy) for item in raw]
    return Opaque(raw)


_DECODERS: dict[DecodeStrategy, Callable[[object, DecodeStrategy], DecodedValue]] = {
    DecodeStrategy.TEXT_ARRAY: _decode_array,
    DecodeStrategy.FLOAT_ARRAY: _decode_array,
    DecodeStrategy.INT_ARRAY: _decode_array,
    DecodeStrategy.BOOL_ARRAY: _decode_array,
    DecodeStrategy.NUMERIC_TEXT: _decode_numeric,
    DecodeStrategy.UUID_TEXT: _decode_uuid,
    DecodeStrategy.PASSTHROUGH: _passthrough,
}


def decode_cell(raw: object, strategy: DecodeStrategy) -> DecodedValue:
    """Decode ``raw`` with ``strategy``. SQL NULL (``None``) stays ``None``.

    Raises:
        CellDecodeError: If the raw cell cannot be decoded by the strategy.
    """
    if raw is None:
        return None
    return _DECODERS[strategy](raw, strategy)
