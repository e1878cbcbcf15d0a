"""Custom error types used in dynrows."""

from __future__ import annotations

from enum import StrEnum


class DecodeErrorKind(StrEnum):
    """Categories of decode failures.

    Attributes:
        SCHEMA_INTROSPECTION: The cursor could not report its column metadata.
        SCAN: The cursor could not deposit a raw cell for the current row.
        CELL_DECODE: A raw cell could not be converted by its column's strategy.
    """

    SCHEMA_INTROSPECTION = "schema_introspection"
    SCAN = "scan"
    CELL_DECODE = "cell_decode"


class DecodeError(Exception):
    """Raised when a result set cannot be decoded."""

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        *,
        column: str | None = None,
        row_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.column = column
        self.row_index = row_index

    def __str__(self) -> str:
        message = super().__str__()
        details = []
        if self.row_index is not None:
            details.append(f"row={self.row_index}")
        if self.column is not None:
            details.append(f"column={self.column!r}")
        if not details:
            return f"[{self.kind}] {message}"
        return f"[{self.kind}] {message} ({', '.join(details)})"


class CellDecodeError(ValueError):
    """A single raw cell could not be decoded."""


class ArrayLiteralError(CellDecodeError):
    """A raw cell is not a valid one-dimensional array literal."""


__all__ = [
    "ArrayLiteralError",
    "CellDecodeError",
    "DecodeError",
    "DecodeErrorKind",
]
