"""External encodings of keys, signatures and seeds."""

from .charsets import Charset, charset_names
from .codec import FormatCodec
from .formats import (
    ConcatenatedBinary,
    EncodingVariant,
    SerializedText,
    Structured,
    TextEncodedBinary,
    format_names,
    is_text_format,
    parse_format,
)

__all__ = [
    "Charset",
    "ConcatenatedBinary",
    "EncodingVariant",
    "FormatCodec",
    "SerializedText",
    "Structured",
    "TextEncodedBinary",
    "charset_names",
    "format_names",
    "is_text_format",
    "parse_format",
]
