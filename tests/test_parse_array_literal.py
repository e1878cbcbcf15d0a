import pytest

from dynrows.errors import ArrayLiteralError, CellDecodeError
from dynrows.parse_array_literal import parse_array_literal


def test_empty_array_yields_empty_list() -> None:
    assert parse_array_literal("{}") == []
    assert parse_array_literal(b"{}") == []
    assert parse_array_literal("{ }") == []


def test_unquoted_elements() -> None:
    assert parse_array_literal(b"{1,2,3}") == ["1", "2", "3"]


def test_quoted_elements_keep_delimiters_and_escapes() -> None:
    assert parse_array_literal('{"a,b","c\\"d","e\\\\f"}') == ["a,b", 'c"d', "e\\f"]


def test_null_elements() -> None:
    assert parse_array_literal("{a,NULL,null}") == ["a", None, None]


def test_quoted_null_is_text() -> None:
    assert parse_array_literal('{"NULL"}') == ["NULL"]


def test_escaped_null_is_text() -> None:
    assert parse_array_literal("{\\NULL}") == ["NULL"]


def test_whitespace_around_elements_is_ignored() -> None:
    assert parse_array_literal(" { a , \"b\" ,c } ") == ["a", "b", "c"]


def test_inner_spaces_in_unquoted_element_are_kept() -> None:
    assert parse_array_literal("{hello world}") == ["hello world"]


def test_dimension_decoration_is_ignored() -> None:
    assert parse_array_literal("[0:2]={7,8,9}") == ["7", "8", "9"]


def test_memoryview_input() -> None:
    assert parse_array_literal(memoryview(b"{x}")) == ["x"]


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "1,2,3",
        "{1,2",
        '{"abc}',
        "{{1,2},{3,4}}",
        "{1,,2}",
        "{1,2}x",
        "{}x",
        '{"a"b}',
        "[1:2{1,2}",
        b"{\xff}",
    ],
)
def test_malformed_literals_raise(raw) -> None:
    with pytest.raises(ArrayLiteralError):
        parse_array_literal(raw)


def test_array_literal_error_is_a_cell_decode_error() -> None:
    assert issubclass(ArrayLiteralError, CellDecodeError)
    assert issubclass(ArrayLiteralError, ValueError)
