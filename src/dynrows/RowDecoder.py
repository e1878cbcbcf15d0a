"""Decode an executed cursor into one mapping per row."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from dynrows.ColumnDescriptor import ColumnDescriptor
from dynrows.config import Settings
from dynrows.decode_cell import decode_cell
from dynrows.DecodeStrategy import DecodeStrategy
from dynrows.decoded_value import DecodedValue
from dynrows.errors import ArrayLiteralError, CellDecodeError, DecodeError, DecodeErrorKind
from dynrows.ports.cursor import Cursor
from dynrows.resolve_decode_strategy import DecodePlan, build_decode_plan
from dynrows.utils.logger import get_logger

logger = get_logger(__name__)

DecodedRow = dict[str, DecodedValue]


class _Unscanned:
    def __repr__(self) -> str:
        return "UNSCANNED"


UNSCANNED = _Unscanned()


def fetch_column_descriptors(cursor: Cursor) -> Sequence[ColumnDescriptor]:
    """Return the cursor's descriptors or raise a schema introspection DecodeError."""
    try:
        return list(cursor.column_descriptors())
    except Exception as exc:  # noqa: BLE001
        raise DecodeError(
            DecodeErrorKind.SCHEMA_INTROSPECTION,
            f"Cursor could not report column descriptors: {exc}",
        ) from exc


def fetch_column_names(cursor: Cursor) -> list[str]:
    """Return the cursor's column names or raise a schema introspection DecodeError."""
    try:
        return list(cursor.column_names())
    except Exception as exc:  # noqa: BLE001
        raise DecodeError(
            DecodeErrorKind.SCHEMA_INTROSPECTION,
            f"Cursor could not report column names: {exc}",
        ) from exc


@dataclass
class RowDecoder:
    """Turn every row of a cursor into a ``{column name: decoded value}`` mapping.

    Columns sharing a name collapse to one key; the later column wins.
    Without ``strict_decoding`` a cell that fails to scan or decode is left
    out of its row's mapping, so rows need not share a key set.
    """

    settings: Settings = field(default_factory=Settings)

    def decode(self, cursor: Cursor) -> list[DecodedRow]:
        descriptors = fetch_column_descriptors(cursor)
        plan = build_decode_plan(descriptors)
        logger.debug("Resolved decode plan: %s", plan)
        rows: list[DecodedRow] = []
        while cursor.advance():
            slots = self._scan_row(cursor, len(plan), len(rows))
            rows.append(self._decode_row(plan, slots, len(rows)))
        logger.debug("Decoded %d rows across %d columns", len(rows), len(plan))
        return rows

    def _scan_row(self, cursor: Cursor, width: int, row_index: int) -> list[object]:
        slots: list[object] = [UNSCANNED] * width
        try:
            cursor.scan_current_row(slots)
        except Exception as exc:  # noqa: BLE001
            if self.settings.strict_decoding:
                raise DecodeError(
                    DecodeErrorKind.SCAN,
                    f"Cursor failed to scan row: {exc}",
                    row_index=row_index,
                ) from exc
            logger.warning("Scan failed for row %d: %s", row_index, exc)
        return slots

    def _decode_row(self, plan: DecodePlan, slots: list[object], row_index: int) -> DecodedRow:
        row: DecodedRow = {}
        for (name, strategy), raw in zip(plan, slots, strict=True):
            if raw is UNSCANNED:
                self._on_unscanned(name, row_index)
                continue
            try:
                row[name] = decode_cell(raw, strategy)
            except CellDecodeError as exc:
                fallback = self._on_cell_failure(name, strategy, row_index, exc)
                if fallback is not None:
                    row[name] = fallback
        return row

    def _on_unscanned(self, name: str, row_index: int) -> None:
        if self.settings.strict_decoding:
            raise DecodeError(
                DecodeErrorKind.SCAN,
                "Cursor did not deposit a value for the column",
                column=name,
                row_index=row_index,
            )
        logger.warning("No scanned value for column %r in row %d; omitting", name, row_index)

    def _on_cell_failure(
        self,
        name: str,
        strategy: DecodeStrategy,
        row_index: int,
        exc: CellDecodeError,
    ) -> list[DecodedValue] | None:
        if self.settings.strict_decoding:
            raise DecodeError(
                DecodeErrorKind.CELL_DECODE,
                str(exc),
                column=name,
                row_index=row_index,
            ) from exc
        if strategy.is_array and isinstance(exc, ArrayLiteralError):
            logger.warning(
                "Malformed array for column %r in row %d; using empty list: %s",
                name,
                row_index,
                exc,
            )
            return []
        logger.warning("Could not decode column %r in row %d; omitting: %s", name, row_index, exc)
        return None
