"""Decoded value variants and the absent-value marker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Opaque:
    """A driver-native value outside the scalar variants (datetime, Decimal, dict, ...)."""

    value: Any


Scalar: TypeAlias = float | str | bool | int | None
DecodedValue: TypeAlias = Scalar | list[Scalar] | list["DecodedValue"] | Opaque


class _Absent:
    """Marker for a column key missing from a decoded row mapping."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()
