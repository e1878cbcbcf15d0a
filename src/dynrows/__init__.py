"""dynrows package entrypoints."""

from dynrows.ColumnDescriptor import ColumnDescriptor
from dynrows.config import Settings, get_settings
from dynrows.decode_to_mappings import decode_to_mappings
from dynrows.decode_to_sequences import decode_to_sequences
from dynrows.DecodeStrategy import DecodeStrategy
from dynrows.decoded_value import ABSENT, DecodedValue, Opaque
from dynrows.errors import DecodeError, DecodeErrorKind
from dynrows.ports.cursor import Cursor
from dynrows.RowDecoder import RowDecoder
from dynrows.RowProjector import RowProjector

__all__ = [
    "ABSENT",
    "ColumnDescriptor",
    "Cursor",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeStrategy",
    "DecodedValue",
    "Opaque",
    "RowDecoder",
    "RowProjector",
    "Settings",
    "decode_to_mappings",
    "decode_to_sequences",
    "get_settings",
]
