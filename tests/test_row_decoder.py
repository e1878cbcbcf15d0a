import logging
import unittest
from decimal import Decimal
from unittest.mock import patch

from dynrows.ColumnDescriptor import ColumnDescriptor
from dynrows.config import Settings
from dynrows.errors import DecodeError, DecodeErrorKind
from dynrows.resolve_decode_strategy import build_decode_plan
from dynrows.RowDecoder import RowDecoder
from tests.cursor_fakes import BrokenSchemaCursor, PartialScanCursor, make_cursor

_COLUMNS = [
    ("id", "INT4"),
    ("name", "TEXT"),
    ("price", "NUMERIC"),
    ("ref", "UUID"),
    ("tags", "_TEXT"),
    ("scores", "_NUMERIC"),
    ("counts", "_INT4"),
    ("flags", "_BOOL"),
    ("active", "BOOL"),
]


class RowDecoderTests(unittest.TestCase):
    def test_decodes_every_supported_type(self) -> None:
        cursor = make_cursor(
            _COLUMNS,
            [
                (
                    1,
                    "widget",
                    b"12.50",
                    b"123e4567-e89b-12d3-a456-426614174000",
                    b'{a,"b c"}',
                    b"{1.5,2}",
                    b"{1,2,3}",
                    b"{t,f}",
                    True,
                )
            ],
        )

        rows = RowDecoder().decode(cursor)

        self.assertEqual(
            rows,
            [
                {
                    "id": 1,
                    "name": "widget",
                    "price": 12.5,
                    "ref": "123e4567-e89b-12d3-a456-426614174000",
                    "tags": ["a", "b c"],
                    "scores": [1.5, 2.0],
                    "counts": [1, 2, 3],
                    "flags": [True, False],
                    "active": True,
                }
            ],
        )

    def test_zero_rows_yield_empty_list(self) -> None:
        rows = RowDecoder().decode(make_cursor(_COLUMNS, []))
        self.assertEqual(rows, [])
        self.assertIsInstance(rows, list)

    def test_rows_keep_cursor_order(self) -> None:
        cursor = make_cursor([("id", "INT4")], [(3,), (1,), (2,)])
        self.assertEqual(RowDecoder().decode(cursor), [{"id": 3}, {"id": 1}, {"id": 2}])

    def test_invalid_numeric_omits_only_that_cell(self) -> None:
        cursor = make_cursor(
            [("id", "INT4"), ("price", "NUMERIC"), ("ref", "UUID")],
            [(1, b"NaNgarbage", b"abc"), (2, b"3.5", b"def")],
        )

        with self.assertLogs("dynrows.RowDecoder", level=logging.WARNING) as captured:
            rows = RowDecoder().decode(cursor)

        self.assertEqual(rows[0], {"id": 1, "ref": "abc"})
        self.assertNotIn("price", rows[0])
        self.assertEqual(rows[1], {"id": 2, "price": 3.5, "ref": "def"})
        self.assertIn("'price'", captured.output[0])

    def test_out_of_grammar_numbers_are_omitted_or_emptied(self) -> None:
        cursor = make_cursor(
            [
                ("id", "INT4"),
                ("price", "NUMERIC"),
                ("big", "NUMERIC"),
                ("n", "_INT4"),
                ("s", "_NUMERIC"),
            ],
            [
                (
                    1,
                    "\u0661\u0662.\u0665".encode(),
                    b"1" + b"0" * 400,
                    "{\uff11\uff12}".encode(),
                    b"{1e400}",
                ),
                (2, Decimal("sNaN"), b"2.5", b"{3}", b"{0.5}"),
            ],
        )

        with self.assertLogs("dynrows.RowDecoder", level=logging.WARNING):
            rows = RowDecoder().decode(cursor)

        self.assertEqual(rows[0], {"id": 1, "n": [], "s": []})
        self.assertEqual(rows[1], {"id": 2, "big": 2.5, "n": [3], "s": [0.5]})

    def test_strict_mode_raises_on_invalid_numeric(self) -> None:
        cursor = make_cursor([("id", "INT4"), ("price", "DECIMAL")], [(1, b"NaNgarbage")])

        with self.assertRaises(DecodeError) as ctx:
            RowDecoder(Settings(strict_decoding=True)).decode(cursor)

        self.assertEqual(ctx.exception.kind, DecodeErrorKind.CELL_DECODE)
        self.assertEqual(ctx.exception.column, "price")
        self.assertEqual(ctx.exception.row_index, 0)
        self.assertIsNotNone(ctx.exception.__cause__)

    def test_malformed_array_becomes_empty_list(self) -> None:
        cursor = make_cursor([("tags", "_TEXT")], [(b"not-an-array",)])
        with self.assertLogs("dynrows.RowDecoder", level=logging.WARNING):
            rows = RowDecoder().decode(cursor)
        self.assertEqual(rows, [{"tags": []}])

    def test_strict_mode_raises_on_malformed_array(self) -> None:
        cursor = make_cursor([("tags", "_TEXT")], [(b"not-an-array",)])
        with self.assertRaises(DecodeError) as ctx:
            RowDecoder(Settings(strict_decoding=True)).decode(cursor)
        self.assertEqual(ctx.exception.kind, DecodeErrorKind.CELL_DECODE)

    def test_duplicate_names_last_column_wins(self) -> None:
        cursor = make_cursor([("id", "INT4"), ("id", "INT4")], [(1, 2)])
        self.assertEqual(RowDecoder().decode(cursor), [{"id": 2}])

    def test_null_cells_decode_to_none(self) -> None:
        cursor = make_cursor([("price", "NUMERIC"), ("tags", "_TEXT")], [(None, None)])
        self.assertEqual(RowDecoder().decode(cursor), [{"price": None, "tags": None}])

    def test_schema_failure_consumes_no_rows(self) -> None:
        cursor = BrokenSchemaCursor()

        with self.assertRaises(DecodeError) as ctx:
            RowDecoder().decode(cursor)

        self.assertEqual(ctx.exception.kind, DecodeErrorKind.SCHEMA_INTROSPECTION)
        self.assertIs(ctx.exception.__cause__, cursor.error)
        self.assertEqual(cursor.advance_calls, 0)
        self.assertEqual(cursor.scan_calls, 0)

    def test_unfilled_slots_are_omitted(self) -> None:
        cursor = PartialScanCursor(
            [ColumnDescriptor("id", "INT4"), ColumnDescriptor("name", "TEXT")],
            [(1, "a")],
            filled=1,
        )
        with self.assertLogs("dynrows.RowDecoder", level=logging.WARNING):
            rows = RowDecoder().decode(cursor)
        self.assertEqual(rows, [{"id": 1}])

    def test_scan_exception_is_logged_and_filled_cells_kept(self) -> None:
        cursor = PartialScanCursor(
            [ColumnDescriptor("id", "INT4"), ColumnDescriptor("name", "TEXT")],
            [(1, "a"), (2, "b")],
            filled=1,
            raise_after_fill=True,
        )
        with self.assertLogs("dynrows.RowDecoder", level=logging.WARNING) as captured:
            rows = RowDecoder().decode(cursor)
        self.assertEqual(rows, [{"id": 1}, {"id": 2}])
        self.assertTrue(any("Scan failed for row 0" in line for line in captured.output))

    def test_strict_mode_raises_on_scan_exception(self) -> None:
        cursor = PartialScanCursor(
            [ColumnDescriptor("id", "INT4")],
            [(1,)],
            filled=1,
            raise_after_fill=True,
        )
        with self.assertRaises(DecodeError) as ctx:
            RowDecoder(Settings(strict_decoding=True)).decode(cursor)
        self.assertEqual(ctx.exception.kind, DecodeErrorKind.SCAN)
        self.assertEqual(ctx.exception.row_index, 0)

    def test_strict_mode_raises_on_unfilled_slot(self) -> None:
        cursor = PartialScanCursor(
            [ColumnDescriptor("id", "INT4"), ColumnDescriptor("name", "TEXT")],
            [(1, "a")],
            filled=1,
        )
        with self.assertRaises(DecodeError) as ctx:
            RowDecoder(Settings(strict_decoding=True)).decode(cursor)
        self.assertEqual(ctx.exception.kind, DecodeErrorKind.SCAN)
        self.assertEqual(ctx.exception.column, "name")

    def test_plan_is_resolved_once_per_decode(self) -> None:
        cursor = make_cursor([("id", "INT4")], [(1,), (2,), (3,)])
        with patch(
            "dynrows.RowDecoder.build_decode_plan",
            wraps=build_decode_plan,
        ) as build:
            RowDecoder().decode(cursor)
        build.assert_called_once()


if __name__ == "__main__":
    unittest.main()
