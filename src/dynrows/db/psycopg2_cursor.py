"""Adapt a psycopg2 cursor to the dynrows Cursor port."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

import psycopg2.extensions
from psycopg2.extensions import cursor as PgCursor  # noqa: N812

from dynrows.ColumnDescriptor import ColumnDescriptor
from dynrows.db.pg_type_names import PG_TYPE_NAMES, pg_type_name
from dynrows.resolve_decode_strategy import resolve_decode_strategy
from dynrows.utils.logger import get_logger

logger = get_logger(__name__)

RAW_TEXT_OIDS: tuple[int, ...] = tuple(
    sorted(
        oid
        for oid, name in PG_TYPE_NAMES.items()
        if resolve_decode_strategy(name).needs_raw_text
    )
)


def _keep_raw_text(value: str | None, _cursor: Any) -> str | None:
    return value


RAW_TEXT_CASTER = psycopg2.extensions.new_type(RAW_TEXT_OIDS, "DYNROWS_RAW_TEXT", _keep_raw_text)


def register_raw_text_casters(scope: Any) -> None:
    """Make ``scope`` (a connection or cursor) return raw text for decoded types.

    psycopg2 picks typecasters when a query executes, so this must run before
    ``execute`` on the cursor (or on its connection).
    """
    psycopg2.extensions.register_type(RAW_TEXT_CASTER, scope)


class Psycopg2Cursor:
    """Expose a psycopg2 cursor through ``column_descriptors``/``advance``/``scan_current_row``.

    Wrap the cursor before executing the query so numeric, uuid and array
    columns arrive in the engine's text encoding::

        adapter = Psycopg2Cursor(conn.cursor())
        adapter.raw.execute("SELECT ...")
        rows = decode_to_mappings(adapter)
    """

    def __init__(self, pg_cursor: PgCursor, *, register_casters: bool = True) -> None:
        self.raw = pg_cursor
        self._current: tuple[Any, ...] | None = None
        if register_casters:
            register_raw_text_casters(pg_cursor)

    def _description(self) -> tuple[Any, ...]:
        description = self.raw.description
        if description is None:
            raise LookupError("psycopg2 cursor has no result description; was a query executed?")
        return description

    def column_descriptors(self) -> list[ColumnDescriptor]:
        descriptors = [
            ColumnDescriptor(name=column.name, type_name=pg_type_name(column.type_code))
            for column in self._description()
        ]
        logger.debug("psycopg2 column descriptors: %s", descriptors)
        return descriptors

    def column_names(self) -> list[str]:
        return [column.name for column in self._description()]

    def advance(self) -> bool:
        self._current = self.raw.fetchone()
        return self._current is not None

    def scan_current_row(self, slots: MutableSequence[object]) -> None:
        if self._current is None:
            raise LookupError("No current row; call advance() first")
        if len(self._current) != len(slots):
            raise ValueError(
                f"Row has {len(self._current)} cells but {len(slots)} slots were supplied"
            )
        for index, value in enumerate(self._current):
            slots[index] = value
