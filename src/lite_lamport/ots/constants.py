"""
Defines the sizes and configuration preset of the Lamport one-time
signature scheme.

A key holds one secret per bit of the signed message vector. That vector is
the 256-bit message digest followed by an 8-bit checksum, so keys have
256 + 8 = 264 entries of 32 bytes each.
"""

from pydantic import BaseModel, ConfigDict
from typing_extensions import Final


class LamportConfig(BaseModel):
    """A model holding the size constants of a Lamport preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    HASH_LEN_BYTES: int
    """Byte length of one hash digest, and so of every key and signature entry."""

    CHECKSUM_LEN_BYTES: int
    """Byte length of the checksum appended to the message digest bits."""

    SEED_LEN_BYTES: int
    """Minimum byte length of a seed used for deterministic key generation."""

    @property
    def MESSAGE_DIGEST_BITS(self) -> int:  # noqa: N802
        """Number of bits taken from the message digest."""
        return 8 * self.HASH_LEN_BYTES

    @property
    def CHECKSUM_BITS(self) -> int:  # noqa: N802
        """Number of bits taken from the checksum."""
        return 8 * self.CHECKSUM_LEN_BYTES

    @property
    def ENTRY_COUNT(self) -> int:  # noqa: N802
        """
        Number of entries in a private or public key.

        Also the upper bound on the number of entries in a signature.
        """
        return self.MESSAGE_DIGEST_BITS + self.CHECKSUM_BITS

    @property
    def CHECKSUM_MODULUS(self) -> int:  # noqa: N802
        """
        The checksum is reduced modulo this value to fit in `CHECKSUM_LEN_BYTES`.

        With a one-byte checksum the true zero-bit count (0..256) wraps, so an
        all-zero digest gets the same checksum as an all-one digest: 0.
        """
        return 1 << self.CHECKSUM_BITS


PROD_CONFIG: Final = LamportConfig(
    HASH_LEN_BYTES=32,
    CHECKSUM_LEN_BYTES=1,
    SEED_LEN_BYTES=32,
)
"""The configuration used by SHA-256 based Lamport signatures."""

HASH_LEN_BYTES: Final = PROD_CONFIG.HASH_LEN_BYTES
"""Byte length of a single key or signature entry."""

SEED_LEN_BYTES: Final = PROD_CONFIG.SEED_LEN_BYTES
"""Minimum byte length of a seed."""

KEY_SIG_ENTRY_COUNT: Final = PROD_CONFIG.ENTRY_COUNT
"""Entries in a key; maximum entries in a signature."""
