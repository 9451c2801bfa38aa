"""Settings loader.

A `LiteLamport` instance is configured once from `LamportSettings`. Settings
can be built in code or loaded from YAML:

    KEY_FORMAT: json
    SIGNATURE_FORMAT: hex
    HASH_ENCODING: base64
    SEED_ENCODING: hex
    HASH_ALGORITHM: sha256

Every key is optional; missing keys fall back to the defaults in
`lite_lamport.config`, which the environment can override.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field, ValidationError, field_validator, model_validator

from lite_lamport import config
from lite_lamport.codec import Charset, EncodingVariant, parse_format
from lite_lamport.ots.constants import PROD_CONFIG
from lite_lamport.ots.hasher import Hasher
from lite_lamport.types import StrictBaseModel


class LamportSettings(StrictBaseModel):
    """
    Encoding and primitive choices for a `LiteLamport` instance.

    Field names use UPPERCASE aliases in YAML. Pydantic maps them to
    snake_case Python attributes; the snake_case names are accepted too.
    """

    key_format: str = Field(default=config.KEY_FORMAT, alias="KEY_FORMAT")
    """Packaging of keys: `object`, `json`, `buffer`, or a charset name."""

    signature_format: str = Field(default=config.SIGNATURE_FORMAT, alias="SIGNATURE_FORMAT")
    """Packaging of signatures: `object`, `json`, `buffer`, or a charset name."""

    hash_encoding: str = Field(default=config.HASH_ENCODING, alias="HASH_ENCODING")
    """Charset of each entry in the `object` and `json` packagings."""

    seed_encoding: str = Field(default=config.SEED_ENCODING, alias="SEED_ENCODING")
    """Charset of seeds."""

    hash_algorithm: str = Field(default=config.HASH_ALGORITHM, alias="HASH_ALGORITHM")
    """`hashlib` name of the hash; its digest must be 32 bytes."""

    @field_validator("key_format", "signature_format")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Reject format names that no packaging answers to."""
        parse_format(v)
        return v.strip().lower()

    @field_validator("hash_encoding", "seed_encoding")
    @classmethod
    def check_charset(cls, v: str) -> str:
        """Reject unknown charset names."""
        Charset.from_name(v)
        return v.strip().lower()

    @model_validator(mode="after")
    def check_hash_algorithm(self) -> LamportSettings:
        """The algorithm must exist in `hashlib` and produce 32-byte digests."""
        try:
            self.hasher()
        except ValidationError as e:
            raise ValueError(
                f"Unsupported HASH_ALGORITHM {self.hash_algorithm!r}: {e.errors()[0]['msg']}"
            ) from e
        return self

    @property
    def key_variant(self) -> EncodingVariant:
        """The packaging selected by `key_format`."""
        return parse_format(self.key_format)

    @property
    def signature_variant(self) -> EncodingVariant:
        """The packaging selected by `signature_format`."""
        return parse_format(self.signature_format)

    @property
    def hash_charset(self) -> Charset:
        """The charset selected by `hash_encoding`."""
        return Charset.from_name(self.hash_encoding)

    @property
    def seed_charset(self) -> Charset:
        """The charset selected by `seed_encoding`."""
        return Charset.from_name(self.seed_encoding)

    def hasher(self) -> Hasher:
        """Build the hash collaborators for `hash_algorithm`."""
        return Hasher(config=PROD_CONFIG, algorithm=self.hash_algorithm)

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> LamportSettings:
        """
        Load settings from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml(cls, content: str) -> LamportSettings:
        """
        Load settings from a YAML string.

        Useful for testing or programmatic config generation.
        """
        data = yaml.safe_load(content)
        return cls.model_validate(data or {})
