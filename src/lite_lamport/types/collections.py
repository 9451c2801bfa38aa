"""Fixed-length and bounded sequences of fixed-size byte entries."""

from __future__ import annotations

from typing import (
    Any,
    ClassVar,
    Generic,
    Iterator,
    Sequence,
    Type,
    TypeVar,
    cast,
    overload,
)

from pydantic import Field, field_serializer, field_validator
from typing_extensions import Self

from .base import StrictBaseModel
from .byte_arrays import BaseBytes
from .exceptions import InvalidFormatError

T = TypeVar("T")
"""
Generic type parameter for the entry type.

Concrete subclasses bind it to a `BaseBytes` subclass, e.g.
`class Keys(BytesVector[Bytes32])`, so that `keys[0]` is typed as `Bytes32`.
"""


def _coerce_entries(cls: Any, value: Any) -> tuple[BaseBytes, ...]:
    """Convert every element of `value` to `cls.ELEMENT_TYPE`."""
    if isinstance(value, (str, bytes, bytearray)) or not hasattr(value, "__iter__"):
        raise TypeError(f"{cls.__name__} expects a sequence of entries, got {type(value).__name__}")
    return tuple(
        item if isinstance(item, cls.ELEMENT_TYPE) else cast(Any, cls.ELEMENT_TYPE)(item)
        for item in value
    )


def _split_entries(cls: Any, data: bytes) -> list[BaseBytes]:
    """Slice a concatenated buffer into `ELEMENT_TYPE` entries."""
    stride = cls.ELEMENT_TYPE.get_byte_length()
    if len(data) % stride != 0:
        raise InvalidFormatError(
            cls.KIND,
            f"was {len(data)} bytes but expected it to be a multiple of {stride}",
        )
    return [
        cls.ELEMENT_TYPE(data[offset : offset + stride]) for offset in range(0, len(data), stride)
    ]


class _BytesSequence(StrictBaseModel, Generic[T]):
    """
    Shared behavior of `BytesVector` and `BytesList`.

    Entries are stored as an immutable tuple. The binary form is the plain
    concatenation of the entries: no length prefix, no padding. The entry
    count is implied by the total length.
    """

    ELEMENT_TYPE: ClassVar[Type[BaseBytes]]
    """The fixed-size byte type of each entry."""

    KIND: ClassVar[str] = "sequence"
    """Name used in error messages ("key", "signature", ...)."""

    data: Sequence[T] = Field(default_factory=tuple)
    """
    The immutable sequence of entries.

    Accepts lists or tuples on input; stored as a tuple after validation.
    """

    @field_serializer("data", when_used="json")
    def _serialize_data(self, value: Sequence[T]) -> list[str]:
        """Serialize entries to JSON as 0x-prefixed hex."""
        return ["0x" + cast(BaseBytes, item).hex() for item in value]

    def encode_bytes(self) -> bytes:
        """Concatenate all entries into one buffer."""
        return b"".join(cast(BaseBytes, item) for item in self.data)

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        """Iterate over entries."""
        return iter(self.data)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        """Access entry(ies) by index or slice."""
        return self.data[index]

    @property
    def elements(self) -> list[T]:
        """Return the entries as a typed list."""
        return list(self.data)


class BytesVector(_BytesSequence[T]):
    """
    Sequence of exactly `LENGTH` fixed-size entries.

    Subclasses must define:
        ELEMENT_TYPE: The `BaseBytes` type of each entry
        LENGTH: The exact number of entries
    """

    LENGTH: ClassVar[int]
    """The exact number of entries."""

    @field_validator("data", mode="before")
    @classmethod
    def _validate_vector_data(cls, v: Any) -> tuple[BaseBytes, ...]:
        """Validate and convert input to a typed tuple of exactly LENGTH entries."""
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define ELEMENT_TYPE and LENGTH")

        typed_values = _coerce_entries(cls, v)
        if len(typed_values) != cls.LENGTH:
            raise ValueError(
                f"{cls.__name__} requires exactly {cls.LENGTH} entries, got {len(typed_values)}"
            )
        return typed_values

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the exact byte length of the concatenated form."""
        return cls.ELEMENT_TYPE.get_byte_length() * cls.LENGTH

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Rebuild a vector from its concatenated form.

        Raises:
            InvalidFormatError: If `data` is not exactly `LENGTH` entries long.
        """
        expected = cls.get_byte_length()
        if len(data) != expected:
            raise InvalidFormatError(
                cls.KIND, f"had an invalid length - Was {len(data)} but expected {expected} bytes"
            )
        return cls(data=_split_entries(cls, data))


class BytesList(_BytesSequence[T]):
    """
    Sequence of between 0 and `LIMIT` fixed-size entries.

    Subclasses must define:
        ELEMENT_TYPE: The `BaseBytes` type of each entry
        LIMIT: The maximum number of entries
    """

    LIMIT: ClassVar[int]
    """The maximum number of entries."""

    @field_validator("data", mode="before")
    @classmethod
    def _validate_list_data(cls, v: Any) -> tuple[BaseBytes, ...]:
        """Validate and convert input to a typed tuple of at most LIMIT entries."""
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LIMIT"):
            raise TypeError(f"{cls.__name__} must define ELEMENT_TYPE and LIMIT")

        typed_values = _coerce_entries(cls, v)
        if len(typed_values) > cls.LIMIT:
            raise ValueError(
                f"{cls.__name__} exceeds limit of {cls.LIMIT}, got {len(typed_values)}"
            )
        return typed_values

    @classmethod
    def get_max_byte_length(cls) -> int:
        """Get the largest possible byte length of the concatenated form."""
        return cls.ELEMENT_TYPE.get_byte_length() * cls.LIMIT

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Rebuild a list from its concatenated form.

        Raises:
            InvalidFormatError: If `data` holds more than `LIMIT` entries or
                is not a whole number of entries.
        """
        max_length = cls.get_max_byte_length()
        if len(data) > max_length:
            raise InvalidFormatError(
                cls.KIND,
                f"had an invalid length - Was {len(data)} but expected no more than "
                f"{max_length} bytes",
            )
        return cls(data=_split_entries(cls, data))
