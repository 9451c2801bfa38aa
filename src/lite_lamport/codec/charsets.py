"""
Text charsets for rendering raw bytes.

A charset turns bytes into text and back. The same set of names is used for
three independent settings: how each hash entry is written inside the
structured forms, how a whole concatenated buffer is written in the
text-encoded form, and how seeds are written.

Decoding is strict. Characters outside the alphabet, bad padding, or
non-canonical trailing bits raise `InvalidFormatError` instead of being
silently dropped.
"""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum

from lite_lamport.types.exceptions import InvalidFormatError

_BASE64URL_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


class Charset(Enum):
    """
    Enumerates the recognized byte-to-text charsets.

    Attributes:
        value (str): The canonical name (e.g. "base64url").
        aliases (tuple[str, ...]): Other names accepted for the same charset.
    """

    def __init__(self, value: str, aliases: tuple[str, ...]):
        """
        Initializes the charset.

        Args:
            value: The canonical name.
            aliases: Alternative names, e.g. "binary" for "latin1".
        """
        self._value_ = value
        self.aliases = aliases

    HEX = ("hex", ())
    """Lowercase hexadecimal, two characters per byte. Decoding is case-insensitive."""

    BASE64 = ("base64", ())
    """Standard base64 with `=` padding."""

    BASE64URL = ("base64url", ("base64-url",))
    """URL-safe base64, written without padding. Padded input is also accepted."""

    BASE32 = ("base32", ())
    """RFC 4648 base32 with `=` padding."""

    LATIN1 = ("latin1", ("binary",))
    """One character per byte, code points 0-255."""

    @classmethod
    def from_name(cls, name: str) -> "Charset":
        """
        Look up a charset by canonical name or alias.

        Raises:
            ValueError: If `name` is not recognized.
        """
        normalized = name.strip().lower()
        for charset in cls:
            if normalized == charset.value or normalized in charset.aliases:
                return charset
        raise ValueError(f"Unknown charset {name!r}. Supported: {', '.join(charset_names())}")

    def encode_text(self, data: bytes) -> str:
        """Render `data` as text in this charset."""
        data = bytes(data)
        match self:
            case Charset.HEX:
                return data.hex()
            case Charset.BASE64:
                return base64.b64encode(data).decode("ascii")
            case Charset.BASE64URL:
                return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
            case Charset.BASE32:
                return base64.b32encode(data).decode("ascii")
            case Charset.LATIN1:
                return data.decode("latin-1")

    def decode_text(self, text: str, kind: str = "value") -> bytes:
        """
        Parse text written in this charset back into bytes.

        Args:
            text: The encoded text.
            kind: What is being decoded, for the error message.

        Raises:
            InvalidFormatError: If `text` is not a string or is not valid in
                this charset.
        """
        if not isinstance(text, str):
            raise InvalidFormatError(kind, f"expected {self.value} text, got {type(text).__name__}")
        try:
            match self:
                case Charset.HEX:
                    return base64.b16decode(text, casefold=True)
                case Charset.BASE64:
                    return base64.b64decode(text, validate=True)
                case Charset.BASE64URL:
                    return _decode_base64url(text)
                case Charset.BASE32:
                    return base64.b32decode(text)
                case Charset.LATIN1:
                    return text.encode("latin-1")
        except (binascii.Error, ValueError) as e:
            raise InvalidFormatError(kind, f"is not valid {self.value} text ({e})") from e
        raise AssertionError(f"unhandled charset {self!r}")


def _decode_base64url(text: str) -> bytes:
    """Decode URL-safe base64 with or without trailing padding."""
    unpadded = text.rstrip("=")
    if not _BASE64URL_ALPHABET.fullmatch(unpadded):
        raise ValueError("contains characters outside the base64url alphabet")
    padding = -len(unpadded) % 4
    if padding == 3:
        raise ValueError("has an impossible length")
    if len(text) != len(unpadded) and len(text) != len(unpadded) + padding:
        raise ValueError("has incorrect padding")
    data = base64.urlsafe_b64decode(unpadded + "=" * padding)
    # Reject text whose unused trailing bits are set.
    if base64.urlsafe_b64encode(data).decode("ascii").rstrip("=") != unpadded:
        raise ValueError("is not canonically encoded")
    return data


def charset_names() -> list[str]:
    """Every accepted charset name, canonical names first."""
    names = [charset.value for charset in Charset]
    names.extend(alias for charset in Charset for alias in charset.aliases)
    return names
