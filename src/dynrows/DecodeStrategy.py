from enum import StrEnum


class DecodeStrategy(StrEnum):
    """
    Closed set of decode strategies a column can resolve to.

    Attributes:
        TEXT_ARRAY: Array literal decoded into a list of strings.
        FLOAT_ARRAY: Array literal decoded into a list of floats.
        INT_ARRAY: Array literal decoded into a list of integers.
        BOOL_ARRAY: Array literal decoded into a list of booleans.
        NUMERIC_TEXT: Decimal text decoded into a float.
        UUID_TEXT: UUID text kept verbatim as a string.
        PASSTHROUGH: Natively scanned value kept as produced by the driver.
    """

    TEXT_ARRAY = "text_array"
    FLOAT_ARRAY = "float_array"
    INT_ARRAY = "int_array"
    BOOL_ARRAY = "bool_array"
    NUMERIC_TEXT = "numeric_text"
    UUID_TEXT = "uuid_text"
    PASSTHROUGH = "passthrough"

    @property
    def is_array(self) -> bool:
        return self in _ARRAY_STRATEGIES

    @property
    def needs_raw_text(self) -> bool:
        """Whether the strategy expects the engine's text encoding rather than a driver value."""
        return self is not DecodeStrategy.PASSTHROUGH


_ARRAY_STRATEGIES = frozenset(
    {
        DecodeStrategy.TEXT_ARRAY,
        DecodeStrategy.FLOAT_ARRAY,
        DecodeStrategy.INT_ARRAY,
        DecodeStrategy.BOOL_ARRAY,
    }
)
