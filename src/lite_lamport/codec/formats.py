"""
The external packagings of keys and signatures.

Keys and signatures are both ordered sequences of 32-byte entries, and both
can be handed to callers in one of four shapes:

- `Structured`: a list of strings, each entry text-encoded on its own.
- `SerializedText`: the structured list written out as a JSON array.
- `ConcatenatedBinary`: the entries joined into one `bytes` buffer.
- `TextEncodedBinary`: that buffer rendered as text in some charset.

Format names come from configuration. The accepted names are `object`,
`json`, `buffer`, or any charset name (e.g. `base64`), which selects the
text-encoded binary form in that charset.
"""

from __future__ import annotations

from typing import Union

from lite_lamport.types import StrictBaseModel

from .charsets import Charset, charset_names


class Structured(StrictBaseModel):
    """A `list[str]`, one text-encoded string per entry."""

    def __str__(self) -> str:
        return "object"


class SerializedText(StrictBaseModel):
    """JSON array text of the structured form."""

    def __str__(self) -> str:
        return "json"


class ConcatenatedBinary(StrictBaseModel):
    """Raw `bytes`: entries back to back, 32 bytes each, no prefix or padding."""

    def __str__(self) -> str:
        return "buffer"


class TextEncodedBinary(StrictBaseModel):
    """The concatenated binary form rendered as text."""

    charset: Charset
    """Charset used to render the whole buffer."""

    def __str__(self) -> str:
        return self.charset.value


EncodingVariant = Union[Structured, SerializedText, ConcatenatedBinary, TextEncodedBinary]
"""Closed set of packagings shared by keys and signatures."""

_NAMED_FORMATS: dict[str, EncodingVariant] = {
    "object": Structured(),
    "json": SerializedText(),
    "buffer": ConcatenatedBinary(),
}


def format_names() -> list[str]:
    """Every accepted format name."""
    return [*_NAMED_FORMATS, *charset_names()]


def parse_format(name: str) -> EncodingVariant:
    """
    Map a configured format name to its packaging.

    Args:
        name: `object`, `json`, `buffer`, or a charset name.

    Returns:
        The matching encoding variant.

    Raises:
        ValueError: If `name` is not recognized.
    """
    normalized = name.strip().lower()
    if normalized in _NAMED_FORMATS:
        return _NAMED_FORMATS[normalized]
    try:
        return TextEncodedBinary(charset=Charset.from_name(normalized))
    except ValueError:
        raise ValueError(
            f"Unknown format {name!r}. Supported: {', '.join(format_names())}"
        ) from None


def is_text_format(variant: EncodingVariant) -> bool:
    """Whether the encoded form is a single `str`, i.e. printable and file-friendly."""
    return isinstance(variant, (SerializedText, TextEncodedBinary))
