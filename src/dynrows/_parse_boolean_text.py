from dynrows.errors import CellDecodeError

_TRUE_TOKENS = frozenset({"t", "true"})
_FALSE_TOKENS = frozenset({"f", "false"})


def _parse_boolean_text(text: str) -> bool:
    token = text.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise CellDecodeError(f"Invalid boolean text: {text!r}")
