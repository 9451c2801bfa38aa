"""Exception hierarchy for the Lamport signature library."""

from __future__ import annotations


class LamportError(Exception):
    """
    Base exception for all errors raised by this library.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidFormatError(LamportError, ValueError):
    """
    Raised when an encoded key or signature cannot be decoded.

    Covers every shape violation: wrong container type, wrong entry count,
    entries that do not decode to exactly 32 bytes, buffers whose length is
    not a whole number of entries, and undecodable text or JSON.

    Attributes:
        kind: What was being decoded ("key", "signature", "seed", ...).
        detail: Description of what went wrong.
    """

    def __init__(self, kind: str, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"The specified {kind} was in an invalid format: {detail}")


class SeedTooShortError(LamportError, ValueError):
    """
    Raised when a seed decodes to fewer bytes than the minimum seed length.

    The usual cause is decoding the seed with the wrong charset, e.g. a hex
    seed read as base64.

    Attributes:
        expected: Minimum number of bytes.
        actual: Number of bytes the seed decoded to.
        encoding: The charset the seed was decoded with.
    """

    def __init__(self, *, expected: int, actual: int, encoding: str) -> None:
        self.expected = expected
        self.actual = actual
        self.encoding = encoding
        super().__init__(
            f"The specified seed encoded as {encoding} did not meet the minimum seed "
            f"length requirement of {expected} bytes (got {actual}) - "
            f"Check that the seed encoding is correct"
        )
