"""
Turns a message into the bit vector that selects signature entries.

### Why a Checksum

Signing reveals the private key entries at the 1-bits of the message digest.
On its own this is forgeable: an attacker holding a signature knows every
entry at a 1-bit, so any other message whose digest only has 1-bits where
the signed digest had them can be signed with entries already revealed.

Appending the number of 0-bits closes that hole. A forged digest whose
1-bits are a strict subset of the signed digest's 1-bits has more 0-bits,
so its checksum is larger. A larger number cannot have its 1-bits contained
in the 1-bits of a smaller one, so the forged checksum needs at least one
entry that was never revealed.

### Layout

    bits[0:256]   = Hash(message), most significant bit of each byte first
    bits[256:264] = (count of 0-bits in bits[0:256]) mod 256, MSB first

The count ranges over 0..256 but only one byte is kept, so the all-zero
digest wraps to checksum 0. This is the behavior of existing signatures and
is preserved as-is.
"""

from __future__ import annotations

from typing import Sequence

from .constants import PROD_CONFIG, LamportConfig
from .hasher import Hasher


def encode_message(message: bytes | bytearray | str) -> bytes:
    """Return the bytes that get hashed for `message`; text is UTF-8 encoded."""
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise TypeError(f"Message must be bytes or str, got {type(message).__name__}")


def bytes_to_bits(data: bytes) -> list[int]:
    """Unpack every byte of `data` into 8 bits, most significant first."""
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def digest_to_bits(digest: bytes) -> list[int]:
    """Unpack a message digest into its bits, most significant bit of each byte first."""
    return bytes_to_bits(digest)


def compute_checksum(bits: Sequence[int], config: LamportConfig = PROD_CONFIG) -> int:
    """
    Count the 0-bits of the digest, reduced to fit the checksum.

    Args:
        bits: The digest bits.
        config: Supplies the checksum width.

    Returns:
        `sum(1 - bit) mod 2^CHECKSUM_BITS`.
    """
    return sum(1 - bit for bit in bits) % config.CHECKSUM_MODULUS


def checksum_to_bits(checksum: int, config: LamportConfig = PROD_CONFIG) -> list[int]:
    """Unpack the checksum into `CHECKSUM_BITS` bits, most significant first."""
    return bytes_to_bits(checksum.to_bytes(config.CHECKSUM_LEN_BYTES, "big"))


def message_bits(hasher: Hasher, message: bytes | str) -> list[int]:
    """
    Build the full bit vector for `message`.

    Args:
        hasher: Provides the message hash.
        message: The message; text is UTF-8 encoded.

    Returns:
        `ENTRY_COUNT` bits: digest bits followed by checksum bits.
    """
    config = hasher.config
    bits = digest_to_bits(hasher.digest(encode_message(message)))
    bits.extend(checksum_to_bits(compute_checksum(bits, config), config))
    return bits
