"""
Encodes and decodes keys and signatures in their configured packagings.

There are two independent axes:

- The packaging (`key_format` / `signature_format`), one of the variants in
  `formats`.
- The entry charset (`hash_encoding`), which only matters for the structured
  and JSON packagings, where every 32-byte entry is written as its own string.

The binary packagings never depend on the entry charset: the same key in
`buffer` or `hex` form is identical whatever `hash_encoding` is set to.

Every decode failure is reported as `InvalidFormatError`.
"""

from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from lite_lamport.ots.containers import PrivateKey, PublicKey, Signature
from lite_lamport.ots.types import HashDigest
from lite_lamport.types import BytesList, BytesVector, StrictBaseModel
from lite_lamport.types.exceptions import InvalidFormatError

from .charsets import Charset
from .formats import (
    ConcatenatedBinary,
    EncodingVariant,
    SerializedText,
    Structured,
    TextEncodedBinary,
)

KeyT = TypeVar("KeyT", PrivateKey, PublicKey)
ContainerT = TypeVar("ContainerT", PrivateKey, PublicKey, Signature)


class FormatCodec(StrictBaseModel):
    """Converts keys and signatures to and from their external forms."""

    key_format: EncodingVariant
    """Packaging of private and public keys."""

    signature_format: EncodingVariant
    """Packaging of signatures."""

    hash_encoding: Charset
    """Charset of each entry in the structured and JSON packagings."""

    def encode_key(self, key: PrivateKey | PublicKey) -> Any:
        """Render a key in the configured key packaging."""
        return self._encode(key, self.key_format)

    def decode_key(self, encoded: Any, key_type: Type[KeyT] = PublicKey) -> KeyT:
        """
        Parse a key from the configured key packaging.

        Private and public keys share one shape; `key_type` picks the
        container to build.

        Raises:
            InvalidFormatError: If `encoded` is not a well-formed key.
        """
        return self._decode(encoded, self.key_format, key_type)

    def encode_signature(self, signature: Signature) -> Any:
        """Render a signature in the configured signature packaging."""
        return self._encode(signature, self.signature_format)

    def decode_signature(self, encoded: Any) -> Signature:
        """
        Parse a signature from the configured signature packaging.

        Raises:
            InvalidFormatError: If `encoded` is not a well-formed signature.
        """
        return self._decode(encoded, self.signature_format, Signature)

    def _encode(
        self, container: PrivateKey | PublicKey | Signature, variant: EncodingVariant
    ) -> Any:
        match variant:
            case Structured():
                return self._to_structured(container)
            case SerializedText():
                return json.dumps(self._to_structured(container), separators=(",", ":"))
            case ConcatenatedBinary():
                return container.encode_bytes()
            case TextEncodedBinary(charset=charset):
                return charset.encode_text(container.encode_bytes())
        raise TypeError(f"Unsupported encoding variant: {variant!r}")

    def _decode(self, encoded: Any, variant: EncodingVariant, cls: Type[ContainerT]) -> ContainerT:
        match variant:
            case Structured():
                return self._from_structured(encoded, cls)
            case SerializedText():
                return self._from_structured(self._parse_json(encoded, cls.KIND), cls)
            case ConcatenatedBinary():
                if not isinstance(encoded, (bytes, bytearray, memoryview)):
                    raise InvalidFormatError(
                        cls.KIND, f"expected a bytes buffer, got {type(encoded).__name__}"
                    )
                return cls.decode_bytes(bytes(encoded))
            case TextEncodedBinary(charset=charset):
                return cls.decode_bytes(charset.decode_text(encoded, cls.KIND))
        raise TypeError(f"Unsupported encoding variant: {variant!r}")

    def _to_structured(self, container: PrivateKey | PublicKey | Signature) -> list[str]:
        return [self.hash_encoding.encode_text(entry) for entry in container]

    def _from_structured(self, items: Any, cls: Type[ContainerT]) -> ContainerT:
        kind = cls.KIND
        if not isinstance(items, (list, tuple)):
            raise InvalidFormatError(kind, f"expected an array, got {type(items).__name__}")

        if issubclass(cls, BytesVector) and len(items) != cls.LENGTH:
            raise InvalidFormatError(
                kind, f"contained {len(items)} items but expected {cls.LENGTH} items"
            )
        if issubclass(cls, BytesList) and len(items) > cls.LIMIT:
            raise InvalidFormatError(
                kind, f"contained {len(items)} items but expected no more than {cls.LIMIT} items"
            )

        entries = []
        for position, item in enumerate(items):
            raw = self.hash_encoding.decode_text(item, kind)
            if len(raw) != HashDigest.LENGTH:
                raise InvalidFormatError(
                    kind,
                    f"item {position} decoded to {len(raw)} bytes "
                    f"but expected {HashDigest.LENGTH} bytes",
                )
            entries.append(HashDigest(raw))
        return cls(data=entries)

    @staticmethod
    def _parse_json(text: Any, kind: str) -> Any:
        if not isinstance(text, (str, bytes, bytearray)):
            raise InvalidFormatError(kind, f"expected JSON text, got {type(text).__name__}")
        try:
            return json.loads(text)
        except ValueError as e:
            raise InvalidFormatError(kind, f"is not valid JSON ({e})") from e
        except RecursionError as e:
            raise InvalidFormatError(kind, "is nested too deeply to be valid JSON") from e
