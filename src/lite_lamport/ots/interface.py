"""
Defines the core interface for the Lamport one-time signature scheme.

High-level functions (`key_gen`, `key_gen_from_seed`,
`public_from_private`, `sign`, `verify`) on decoded, structured values.
Encodings for transport live in `lite_lamport.codec`.
"""

from __future__ import annotations

import hmac
from typing import Tuple

from ..types.exceptions import SeedTooShortError
from .constants import PROD_CONFIG, LamportConfig
from .containers import PrivateKey, PublicKey, Signature
from .hasher import PROD_HASHER, Hasher
from .message_hash import message_bits
from .rand import PROD_RAND, Rand
from .types import HashDigest


class LamportScheme:
    """Instance of the Lamport one-time signature scheme for a given config."""

    def __init__(self, config: LamportConfig, hasher: Hasher, rand: Rand):
        """Initializes the scheme with a specific parameter set and primitives."""
        if hasher.config != config or rand.config != config:
            raise ValueError("hasher and rand must use the scheme's config")
        self.config = config
        self.hasher = hasher
        self.rand = rand

    def public_from_private(self, private_key: PrivateKey) -> PublicKey:
        """
        Derives the public key matching `private_key`.

        Each public entry is the hash of the private entry at the same index.
        """
        return PublicKey(data=[self.hasher.digest(entry) for entry in private_key])

    def key_gen(self) -> Tuple[PrivateKey, PublicKey]:
        """
        Generates a new key pair from the secure random source.

        This is a **randomized** algorithm: every entry of the private key is
        an independent draw of 32 random bytes.

        Returns:
            A tuple containing the `PrivateKey` and `PublicKey`.
        """
        private_key = PrivateKey(data=[self.rand.digest() for _ in range(self.config.ENTRY_COUNT)])
        return private_key, self.public_from_private(private_key)

    def key_gen_from_seed(
        self, seed: bytes | bytearray, index: int = 0
    ) -> Tuple[PrivateKey, PublicKey]:
        """
        Derives a key pair from a master seed and a key index.

        This is a **deterministic** algorithm. Entry `i` of the private key is

            KeyedHash(key=seed, message=f"{index}-{i}")

        so the same `(seed, index)` always gives the same key pair and
        different indices give unrelated one-time key pairs. Callers issue
        one-time keys in sequence by incrementing `index`; reusing an index
        reuses a key.

        Args:
            seed: The master secret, at least `SEED_LEN_BYTES` long.
            index: Non-negative key index.

        Returns:
            A tuple containing the `PrivateKey` and `PublicKey`.

        Raises:
            SeedTooShortError: If the seed is shorter than `SEED_LEN_BYTES`.
            ValueError: If `index` is negative.
        """
        if len(seed) < self.config.SEED_LEN_BYTES:
            raise SeedTooShortError(
                expected=self.config.SEED_LEN_BYTES, actual=len(seed), encoding="raw bytes"
            )
        if index < 0:
            raise ValueError(f"Key index must be non-negative, got {index}")

        private_key = PrivateKey(
            data=[
                self.hasher.keyed(seed, f"{index}-{i}".encode("utf-8"))
                for i in range(self.config.ENTRY_COUNT)
            ]
        )
        return private_key, self.public_from_private(private_key)

    def sign(self, message: bytes | str, private_key: PrivateKey) -> Signature:
        """
        Produces a signature for `message`.

        **CRITICAL SECURITY WARNING**: A private key must **NEVER** sign two
        different messages. Each signature reveals the secrets at the 1-bits
        of its message vector; two signatures together reveal enough to forge
        signatures on further messages. The scheme does not track usage.

        ### Signing Algorithm

        1.  Hash the message and unpack the digest into 256 bits.
        2.  Append the 8 checksum bits (see `message_hash`).
        3.  Reveal private key entry `i` for every bit `i` that is set, in
            order of `i`.

        Args:
            message: The message to sign; text is UTF-8 encoded.
            private_key: The private key to consume.

        Returns:
            The resulting `Signature`, with one entry per set bit.
        """
        bits = message_bits(self.hasher, message)
        return Signature(data=[entry for bit, entry in zip(bits, private_key, strict=True) if bit])

    def verify(self, message: bytes | str, signature: Signature, public_key: PublicKey) -> bool:
        """
        Verifies a signature against a public key and message.

        This is a **deterministic** algorithm and it is total: malformed
        signatures or keys make it return `False`, never raise.

        ### Verification Algorithm

        1.  Rebuild the message bit vector exactly as `sign` does.
        2.  Walk the bit positions in order with a cursor into the signature.
            A 0-bit is skipped. A 1-bit consumes the next signature entry,
            whose hash must equal the public key entry at that position.
        3.  Fail as soon as an entry is missing or a hash does not match.

        Entries left over after the walk are ignored; they cannot help a
        forger because every required position has already been checked.

        Args:
            message: The message that was supposedly signed.
            signature: The signature to check.
            public_key: The public key to verify against.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        if not isinstance(signature, Signature) or not isinstance(public_key, PublicKey):
            return False
        if len(public_key) != self.config.ENTRY_COUNT:
            return False

        bits = message_bits(self.hasher, message)

        cursor = 0
        for position, bit in enumerate(bits):
            if not bit:
                continue
            if cursor >= len(signature):
                return False
            revealed: HashDigest = signature[cursor]
            cursor += 1
            if not hmac.compare_digest(self.hasher.digest(revealed), public_key[position]):
                return False
        return True


PROD_SIGNATURE_SCHEME = LamportScheme(PROD_CONFIG, PROD_HASHER, PROD_RAND)
"""An instance using SHA-256 and the OS entropy pool."""

DEFAULT_SIGNATURE_SCHEME = PROD_SIGNATURE_SCHEME
"""The default signature scheme to use."""
