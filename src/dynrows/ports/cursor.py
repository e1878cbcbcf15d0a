"""Cursor port abstraction."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Protocol

from dynrows.ColumnDescriptor import ColumnDescriptor


class Cursor(Protocol):
    """An executed query positioned before its first row.

    The cursor is owned by the caller and must not be shared while a decode
    call is consuming it.
    """

    def column_descriptors(self) -> Sequence[ColumnDescriptor]:
        """Return the ordered column descriptors of the active query."""

    def column_names(self) -> Sequence[str]:
        """Return the ordered column names of the active query."""

    def advance(self) -> bool:
        """Move to the next row; return False once the rows are exhausted."""

    def scan_current_row(self, slots: MutableSequence[object]) -> None:
        """Deposit the current row's raw cells into ``slots`` by column position."""
