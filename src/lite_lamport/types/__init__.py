"""Reusable type definitions for the Lamport signature library."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32
from .collections import BytesList, BytesVector
from .exceptions import InvalidFormatError, LamportError, SeedTooShortError

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes32",
    "BytesList",
    "BytesVector",
    "CamelModel",
    "StrictBaseModel",
    # Exceptions
    "LamportError",
    "InvalidFormatError",
    "SeedTooShortError",
]
