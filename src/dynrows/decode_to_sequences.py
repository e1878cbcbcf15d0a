from __future__ import annotations

from typing import Any

from dynrows.config import Settings
from dynrows.decoded_value import ABSENT
from dynrows.ports.cursor import Cursor
from dynrows.RowDecoder import RowDecoder, fetch_column_names
from dynrows.RowProjector import RowProjector


def decode_to_sequences(
    cursor: Cursor,
    settings: Settings | None = None,
    *,
    absent: Any = ABSENT,
) -> list[list[Any]]:
    """Decode every remaining row of ``cursor`` into a list aligned with column order.

    Column names are read once, before any row is consumed, and reused for
    the projection. Cells omitted from a row's mapping become ``absent``.

    Raises:
        DecodeError: As for ``decode_to_mappings``.
    """
    names = fetch_column_names(cursor)
    rows = RowDecoder(settings or Settings()).decode(cursor)
    return RowProjector(absent=absent).project_with_names(names, rows)
