"""Parse one-dimensional Postgres array literals such as ``{1,2,"a b",NULL}``."""

from __future__ import annotations

import re

from dynrows.errors import ArrayLiteralError

_DIMENSIONS_PATTERN = re.compile(r"^(\[-?\d+:-?\d+\])+=")
_DELIMITER = ","
_NULL_TOKEN = "NULL"


def _as_text(raw: bytes | bytearray | memoryview | str) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return bytes(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ArrayLiteralError(f"Array literal is not valid UTF-8: {exc}") from exc


def _strip_dimensions(text: str) -> str:
    if not text.startswith("["):
        return text
    match = _DIMENSIONS_PATTERN.match(text)
    if match is None:
        raise ArrayLiteralError(f"Malformed array dimensions: {text!r}")
    return text[match.end() :]


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_quoted(text: str, pos: int) -> tuple[str, int]:
    """Read a double-quoted element starting at the opening quote."""
    chars: list[str] = []
    pos += 1
    while pos < len(text):
        char = text[pos]
        if char == "\\":
            pos += 1
            if pos >= len(text):
                break
            chars.append(text[pos])
        elif char == '"':
            return "".join(chars), pos + 1
        else:
            chars.append(char)
        pos += 1
    raise ArrayLiteralError(f"Unterminated quoted element in array literal: {text!r}")


def _read_unquoted(text: str, pos: int) -> tuple[str | None, int]:
    chars: list[str] = []
    escaped = False
    while pos < len(text) and text[pos] not in (_DELIMITER, "}"):
        char = text[pos]
        if char in ('"', "{"):
            raise ArrayLiteralError(f"Unexpected {char!r} in array literal: {text!r}")
        if char == "\\":
            pos += 1
            if pos >= len(text):
                break
            escaped = True
            char = text[pos]
        chars.append(char)
        pos += 1
    token = "".join(chars).strip()
    if not token:
        raise ArrayLiteralError(f"Empty element in array literal: {text!r}")
    if not escaped and token.upper() == _NULL_TOKEN:
        return None, pos
    return token, pos


def parse_array_literal(raw: bytes | bytearray | memoryview | str) -> list[str | None]:
    """Return the elements of a one-dimensional array literal as text.

    Unquoted ``NULL`` becomes ``None``; a quoted ``"NULL"`` stays a string.
    Nested (multi-dimensional) arrays are rejected.

    Raises:
        ArrayLiteralError: If the literal is malformed.
    """
    text = _strip_dimensions(_as_text(raw).strip())
    if not text.startswith("{") or not text.endswith("}"):
        raise ArrayLiteralError(f"Array literal must be enclosed in braces: {text!r}")
    pos = _skip_whitespace(text, 1)
    if text[pos] == "}":
        if pos != len(text) - 1:
            raise ArrayLiteralError(f"Trailing characters after array literal: {text!r}")
        return []
    elements: list[str | None] = []
    while True:
        pos = _skip_whitespace(text, pos)
        if pos >= len(text):
            raise ArrayLiteralError(f"Unterminated array literal: {text!r}")
        if text[pos] == "{":
            raise ArrayLiteralError(f"Nested arrays are not supported: {text!r}")
        if text[pos] == '"':
            element, pos = _read_quoted(text, pos)
        else:
            element, pos = _read_unquoted(text, pos)
        elements.append(element)
        pos = _skip_whitespace(text, pos)
        if pos >= len(text):
            raise ArrayLiteralError(f"Unterminated array literal: {text!r}")
        if text[pos] == _DELIMITER:
            pos += 1
            continue
        if text[pos] == "}" and pos == len(text) - 1:
            return elements
        raise ArrayLiteralError(f"Unexpected {text[pos]!r} in array literal: {text!r}")
