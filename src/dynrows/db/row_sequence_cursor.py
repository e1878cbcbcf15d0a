"""In-memory cursor over pre-fetched rows."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass, field

from dynrows.ColumnDescriptor import ColumnDescriptor


@dataclass
class RowSequenceCursor:
    """Replay captured raw rows through the Cursor port.

    Each row must hold one raw cell per descriptor, in descriptor order.
    """

    descriptors: Sequence[ColumnDescriptor]
    rows: Iterable[Sequence[object]] = field(default_factory=list)
    _pending: deque[Sequence[object]] = field(default_factory=deque, init=False, repr=False)
    _current: Sequence[object] | None = field(default=None, init=False, repr=False)
    rows_consumed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.descriptors = list(self.descriptors)
        self._pending = deque(self.rows)

    @classmethod
    def from_pairs(
        cls,
        columns: Iterable[tuple[str, str]],
        rows: Iterable[Sequence[object]] = (),
    ) -> RowSequenceCursor:
        """Build a cursor from ``(name, type_name)`` pairs."""
        return cls([ColumnDescriptor(name, type_name) for name, type_name in columns], rows)

    def column_descriptors(self) -> list[ColumnDescriptor]:
        return list(self.descriptors)

    def column_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.descriptors]

    def advance(self) -> bool:
        if not self._pending:
            self._current = None
            return False
        self._current = self._pending.popleft()
        self.rows_consumed += 1
        return True

    def scan_current_row(self, slots: MutableSequence[object]) -> None:
        if self._current is None:
            raise LookupError("No current row; call advance() first")
        if len(self._current) != len(slots):
            raise ValueError(
                f"Row has {len(self._current)} cells but {len(slots)} slots were supplied"
            )
        for index, value in enumerate(self._current):
            slots[index] = value
