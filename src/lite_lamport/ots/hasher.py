"""
Defines the hash and keyed-hash primitives used by the signature scheme.

The scheme needs two collaborators:

- `Hash(bytes) -> 32 bytes`: a one-way, collision resistant hash. It hashes
  messages and turns private key entries into public key entries.
- `KeyedHash(key, bytes) -> 32 bytes`: a keyed hash (HMAC) that derives
  private key entries from a seed.

Both are built on a `hashlib` algorithm. SHA-256 is the default; any other
`hashlib` algorithm with a 32-byte digest (e.g. `sha3_256`, `blake2s`) can be
selected, but keys made with one algorithm are useless under another.
"""

from __future__ import annotations

import hashlib
import hmac

from pydantic import model_validator

from lite_lamport.types import StrictBaseModel

from .constants import PROD_CONFIG, LamportConfig
from .types import HashDigest

DEFAULT_HASH_ALGORITHM: str = "sha256"
"""The `hashlib` algorithm used when none is configured."""


def supported_hash_algorithms(config: LamportConfig = PROD_CONFIG) -> list[str]:
    """List the `hashlib` algorithms whose digest size matches `config`."""
    supported = []
    for name in sorted(hashlib.algorithms_available):
        try:
            size = hashlib.new(name).digest_size
        except (ValueError, TypeError):
            continue
        if size == config.HASH_LEN_BYTES:
            supported.append(name)
    return supported


class Hasher(StrictBaseModel):
    """An instance of the hash collaborators for a given config and algorithm."""

    config: LamportConfig
    """Configuration parameters; fixes the required digest length."""

    algorithm: str = DEFAULT_HASH_ALGORITHM
    """Name of the `hashlib` algorithm backing both primitives."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Hasher":
        """Reject subclasses to prevent type confusion attacks."""
        if type(self.config) is not LamportConfig:
            raise TypeError("config must be exactly LamportConfig, not a subclass")
        return self

    @model_validator(mode="after")
    def check_digest_size(self) -> "Hasher":
        """The algorithm must exist and produce exactly one entry's worth of bytes."""
        try:
            size = hashlib.new(self.algorithm).digest_size
        except ValueError as e:
            raise ValueError(f"Unknown hash algorithm: {self.algorithm!r}") from e
        if size != self.config.HASH_LEN_BYTES:
            raise ValueError(
                f"Hash algorithm {self.algorithm!r} produces {size}-byte digests, "
                f"expected {self.config.HASH_LEN_BYTES}"
            )
        return self

    def digest(self, data: bytes) -> HashDigest:
        """
        Applies the one-way hash.

        Args:
            data: The bytes to hash.

        Returns:
            The 32-byte digest.
        """
        return HashDigest(hashlib.new(self.algorithm, bytes(data)).digest())

    def keyed(self, key: bytes, message: bytes) -> HashDigest:
        """
        Applies the keyed hash, HMAC over the configured algorithm.

        Args:
            key: The secret key, e.g. a seed.
            message: The bytes to authenticate.

        Returns:
            The 32-byte MAC.
        """
        return HashDigest(hmac.new(key, message, self.algorithm).digest())


PROD_HASHER = Hasher(config=PROD_CONFIG)
"""SHA-256 / HMAC-SHA-256, the primitives of the reference scheme."""
