import pytest

from dynrows.ColumnDescriptor import ColumnDescriptor
from dynrows.DecodeStrategy import DecodeStrategy
from dynrows.resolve_decode_strategy import build_decode_plan, resolve_decode_strategy


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("_TEXT", DecodeStrategy.TEXT_ARRAY),
        ("_UUID", DecodeStrategy.TEXT_ARRAY),
        ("_NUMERIC", DecodeStrategy.FLOAT_ARRAY),
        ("_DECIMAL", DecodeStrategy.FLOAT_ARRAY),
        ("_INT4", DecodeStrategy.INT_ARRAY),
        ("_BOOL", DecodeStrategy.BOOL_ARRAY),
        ("NUMERIC", DecodeStrategy.NUMERIC_TEXT),
        ("DECIMAL", DecodeStrategy.NUMERIC_TEXT),
        ("UUID", DecodeStrategy.UUID_TEXT),
        ("INT4", DecodeStrategy.PASSTHROUGH),
        ("TEXT", DecodeStrategy.PASSTHROUGH),
        ("BOOL", DecodeStrategy.PASSTHROUGH),
        ("_INT8", DecodeStrategy.PASSTHROUGH),
        ("GEOMETRY", DecodeStrategy.PASSTHROUGH),
        ("", DecodeStrategy.PASSTHROUGH),
        (None, DecodeStrategy.PASSTHROUGH),
    ],
)
def test_resolve_decode_strategy(type_name, expected: DecodeStrategy) -> None:
    assert resolve_decode_strategy(type_name) is expected


def test_resolve_is_case_insensitive() -> None:
    assert resolve_decode_strategy(" numeric ") is DecodeStrategy.NUMERIC_TEXT
    assert resolve_decode_strategy("_text") is DecodeStrategy.TEXT_ARRAY


def test_build_decode_plan_keeps_column_order_and_duplicates() -> None:
    plan = build_decode_plan(
        [
            ColumnDescriptor("id", "INT4"),
            ColumnDescriptor("price", "NUMERIC"),
            ColumnDescriptor("id", "_INT4"),
        ]
    )
    assert plan == [
        ("id", DecodeStrategy.PASSTHROUGH),
        ("price", DecodeStrategy.NUMERIC_TEXT),
        ("id", DecodeStrategy.INT_ARRAY),
    ]


def test_strategy_flags() -> None:
    assert DecodeStrategy.BOOL_ARRAY.is_array
    assert not DecodeStrategy.UUID_TEXT.is_array
    assert DecodeStrategy.UUID_TEXT.needs_raw_text
    assert not DecodeStrategy.PASSTHROUGH.needs_raw_text
