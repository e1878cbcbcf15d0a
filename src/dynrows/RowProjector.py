"""Re-flatten decoded row mappings into positional rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from dynrows.decoded_value import ABSENT
from dynrows.ports.cursor import Cursor
from dynrows.RowDecoder import fetch_column_names


@dataclass(frozen=True)
class RowProjector:
    """Project ``{name: value}`` rows onto the cursor's column order.

    A name missing from a mapping resolves to ``absent``; duplicated column
    names all resolve to the single value stored under that name.
    """

    absent: Any = ABSENT

    def project(self, cursor: Cursor, rows: Iterable[Mapping[str, Any]]) -> list[list[Any]]:
        return self.project_with_names(fetch_column_names(cursor), rows)

    def project_with_names(
        self,
        names: Sequence[str],
        rows: Iterable[Mapping[str, Any]],
    ) -> list[list[Any]]:
        return [[row.get(name, self.absent) for name in names] for row in rows]
