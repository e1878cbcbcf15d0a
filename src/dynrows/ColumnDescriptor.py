from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    """One result column as reported by the cursor.

    ``type_name`` uses the engine vocabulary (``INT4``, ``NUMERIC``, ``_TEXT``).
    Names are not guaranteed unique across a result set.
    """

    name: str
    type_name: str
