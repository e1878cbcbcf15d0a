"""Convert array literal elements to the element type of an array strategy."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal

from dynrows._parse_boolean_text import _parse_boolean_text
from dynrows._parse_decimal_text import _native_to_float, _parse_decimal_text
from dynrows._parse_integer_text import _check_int64, _parse_integer_text
from dynrows.DecodeStrategy import DecodeStrategy
from dynrows.decoded_value import Scalar
from dynrows.errors import ArrayLiteralError, CellDecodeError


def _to_text(element: object) -> str:
    return element if isinstance(element, str) else str(element)


def _to_float(element: object) -> float:
    if isinstance(element, bool):
        raise CellDecodeError(f"Boolean element in numeric array: {element!r}")
    if isinstance(element, str):
        return _parse_decimal_text(element)
    if isinstance(element, (Decimal, int, float)):
        return _native_to_float(element)
    raise CellDecodeError(f"Invalid numeric element: {element!r}")


def _to_int(element: object) -> int:
    if isinstance(element, bool):
        raise CellDecodeError(f"Boolean element in integer array: {element!r}")
    if isinstance(element, int):
        return _check_int64(element)
    if isinstance(element, str):
        return _parse_integer_text(element)
    raise CellDecodeError(f"Invalid integer element: {element!r}")


def _to_bool(element: object) -> bool:
    if isinstance(element, bool):
        return element
    if isinstance(element, str):
        return _parse_boolean_text(element)
    raise CellDecodeError(f"Invalid boolean element: {element!r}")


_ELEMENT_CONVERTERS: dict[DecodeStrategy, Callable[[object], Scalar]] = {
    DecodeStrategy.TEXT_ARRAY: _to_text,
    DecodeStrategy.FLOAT_ARRAY: _to_float,
    DecodeStrategy.INT_ARRAY: _to_int,
    DecodeStrategy.BOOL_ARRAY: _to_bool,
}


def convert_array_elements(elements: Iterable[object], strategy: DecodeStrategy) -> list[Scalar]:
    """Return ``elements`` converted for ``strategy``; ``None`` elements are kept.

    Raises:
        ArrayLiteralError: If any element cannot be converted.
        ValueError: If ``strategy`` is not an array strategy.
    """
    converter = _ELEMENT_CONVERTERS.get(strategy)
    if converter is None:
        raise ValueError(f"Not an array strategy: {strategy}")
    converted: list[Scalar] = []
    for index, element in enumerate(elements):
        if element is None:
            converted.append(None)
            continue
        try:
            converted.append(converter(element))
        except CellDecodeError as exc:
            raise ArrayLiteralError(f"Element {index}: {exc}") from exc
    return converted
