from __future__ import annotations

from dynrows.config import Settings
from dynrows.ports.cursor import Cursor
from dynrows.RowDecoder import DecodedRow, RowDecoder


def decode_to_mappings(cursor: Cursor, settings: Settings | None = None) -> list[DecodedRow]:
    """Decode every remaining row of ``cursor`` into a ``{column name: value}`` mapping.

    Columns sharing a name collapse to one key holding the later column's value.

    Raises:
        DecodeError: If the cursor cannot report its columns, or, with
            ``settings.strict_decoding``, if any cell fails to scan or decode.
    """
    return RowDecoder(settings or Settings()).decode(cursor)
