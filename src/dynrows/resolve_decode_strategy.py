"""Map declared column type names to decode strategies."""

from __future__ import annotations

from collections.abc import Iterable

from dynrows.ColumnDescriptor import ColumnDescriptor
from dynrows.DecodeStrategy import DecodeStrategy

# Postgres type names; a leading underscore marks the array type of the element.
DECODE_TABLE: dict[str, DecodeStrategy] = {
    "_TEXT": DecodeStrategy.TEXT_ARRAY,
    "_UUID": DecodeStrategy.TEXT_ARRAY,
    "_NUMERIC": DecodeStrategy.FLOAT_ARRAY,
    "_DECIMAL": DecodeStrategy.FLOAT_ARRAY,
    "_INT4": DecodeStrategy.INT_ARRAY,
    "_BOOL": DecodeStrategy.BOOL_ARRAY,
    "NUMERIC": DecodeStrategy.NUMERIC_TEXT,
    "DECIMAL": DecodeStrategy.NUMERIC_TEXT,
    "UUID": DecodeStrategy.UUID_TEXT,
}

DecodePlan = list[tuple[str, DecodeStrategy]]


def resolve_decode_strategy(type_name: str | None) -> DecodeStrategy:
    """Return the strategy for a declared type name, falling back to passthrough."""
    if not type_name:
        return DecodeStrategy.PASSTHROUGH
    return DECODE_TABLE.get(type_name.strip().upper(), DecodeStrategy.PASSTHROUGH)


def build_decode_plan(descriptors: Iterable[ColumnDescriptor]) -> DecodePlan:
    """Resolve every column's strategy once, in cursor column order."""
    return [
        (descriptor.name, resolve_decode_strategy(descriptor.type_name))
        for descriptor in descriptors
    ]
