"""
End-to-end tests for the Lamport one-time signature scheme.
"""

from __future__ import annotations

import hashlib
import hmac

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from lite_lamport.ots import (
    PROD_CONFIG,
    PROD_HASHER,
    PROD_RAND,
    PROD_SIGNATURE_SCHEME,
    HashDigest,
    Hasher,
    LamportConfig,
    LamportScheme,
    PrivateKey,
    PublicKey,
    Signature,
)
from lite_lamport.ots.message_hash import message_bits
from lite_lamport.types import SeedTooShortError
from tests.lite_lamport.helpers import FIXED_SEED

SCHEME = PROD_SIGNATURE_SCHEME

KeyPair = tuple[PrivateKey, PublicKey]


def _first_set_position(message: bytes | str) -> int:
    """Position of the first 1-bit in the message vector."""
    return message_bits(PROD_HASHER, message).index(1)


class TestKeyGeneration:
    """Tests for random and seeded key generation."""

    def test_random_key_shape(self) -> None:
        """Random keys have 264 entries of 32 bytes each."""
        private_key, public_key = SCHEME.key_gen()

        assert len(private_key) == len(public_key) == 264
        assert all(len(entry) == 32 for entry in private_key)

    def test_random_keys_differ(self) -> None:
        """Two random key pairs share no private entries."""
        first, _ = SCHEME.key_gen()
        second, _ = SCHEME.key_gen()
        assert set(first).isdisjoint(second)

    def test_public_entries_are_hashes_of_private_entries(
        self, seeded_key_pair: KeyPair
    ) -> None:
        """Public entry i is Hash(private entry i)."""
        private_key, public_key = seeded_key_pair
        for secret, public in zip(private_key, public_key, strict=True):
            assert public == hashlib.sha256(secret).digest()

    def test_public_from_private_matches_key_gen(self, seeded_key_pair: KeyPair) -> None:
        """Deriving the public key again gives the same public key."""
        private_key, public_key = seeded_key_pair
        assert SCHEME.public_from_private(private_key) == public_key

    def test_seeded_entries_are_hmac_of_index_and_position(
        self, seeded_key_pair: KeyPair
    ) -> None:
        """Private entry i is HMAC-SHA256(seed, "{index}-{i}")."""
        private_key, _ = seeded_key_pair
        for i in (0, 1, 263):
            expected = hmac.new(FIXED_SEED, f"0-{i}".encode(), "sha256").digest()
            assert private_key[i] == expected

    def test_seeded_generation_is_deterministic(self) -> None:
        """The same seed and index always give the same key pair."""
        assert SCHEME.key_gen_from_seed(FIXED_SEED, 5) == SCHEME.key_gen_from_seed(FIXED_SEED, 5)

    def test_different_indices_give_different_keys(self) -> None:
        """Each index yields an unrelated key pair."""
        first, _ = SCHEME.key_gen_from_seed(FIXED_SEED, 0)
        second, _ = SCHEME.key_gen_from_seed(FIXED_SEED, 1)
        assert set(first).isdisjoint(second)

    def test_default_index_is_zero(self, seeded_key_pair: KeyPair) -> None:
        """Omitting the index is the same as index 0."""
        assert SCHEME.key_gen_from_seed(FIXED_SEED) == seeded_key_pair

    def test_longer_seeds_are_accepted(self) -> None:
        """The seed length is a minimum, not an exact size."""
        private_key, _ = SCHEME.key_gen_from_seed(FIXED_SEED + b"\x00" * 32)
        assert len(private_key) == 264

    def test_short_seed_is_rejected(self) -> None:
        """A seed shorter than 32 bytes raises SeedTooShortError."""
        with pytest.raises(SeedTooShortError) as exc_info:
            SCHEME.key_gen_from_seed(FIXED_SEED[:31])

        assert exc_info.value.expected == 32
        assert exc_info.value.actual == 31

    def test_negative_index_is_rejected(self) -> None:
        """Key indices start at zero."""
        with pytest.raises(ValueError, match="non-negative"):
            SCHEME.key_gen_from_seed(FIXED_SEED, -1)

    def test_scheme_requires_matching_configs(self) -> None:
        """Collaborators built for another config are refused."""
        other = LamportConfig(HASH_LEN_BYTES=32, CHECKSUM_LEN_BYTES=1, SEED_LEN_BYTES=64)
        with pytest.raises(ValueError, match="config"):
            LamportScheme(other, PROD_HASHER, PROD_RAND)


class TestSignAndVerify:
    """Tests for signing and verification on structured values."""

    def test_hello_world_roundtrip(self, seeded_key_pair: KeyPair) -> None:
        """A signature verifies for its message and fails for another."""
        private_key, public_key = seeded_key_pair
        signature = SCHEME.sign("hello world", private_key)

        assert SCHEME.verify("hello world", signature, public_key)
        assert not SCHEME.verify("hello there", signature, public_key)

    def test_flipping_any_message_bit_fails(self, seeded_key_pair: KeyPair) -> None:
        """Changing a single bit anywhere in the message invalidates the signature."""
        private_key, public_key = seeded_key_pair
        message = b"hello world"
        signature = SCHEME.sign(message, private_key)

        for position in range(len(message) * 8):
            flipped = bytearray(message)
            flipped[position // 8] ^= 0x80 >> (position % 8)
            assert not SCHEME.verify(bytes(flipped), signature, public_key), position

    def test_signature_length_is_popcount(self, seeded_key_pair: KeyPair) -> None:
        """One entry is revealed per set bit of the message vector."""
        private_key, _ = seeded_key_pair
        signature = SCHEME.sign(b"abc", private_key)
        assert len(signature) == sum(message_bits(PROD_HASHER, b"abc"))

    def test_signature_reveals_entries_in_position_order(
        self, seeded_key_pair: KeyPair
    ) -> None:
        """The signature lists private entries at 1-bits, lowest position first."""
        private_key, _ = seeded_key_pair
        bits = message_bits(PROD_HASHER, b"abc")
        expected = [private_key[i] for i, bit in enumerate(bits) if bit]
        assert list(SCHEME.sign(b"abc", private_key)) == expected

    def test_signing_is_deterministic(self, seeded_key_pair: KeyPair) -> None:
        """Signing the same message twice gives the same signature."""
        private_key, _ = seeded_key_pair
        assert SCHEME.sign(b"abc", private_key) == SCHEME.sign(b"abc", private_key)

    def test_wrong_public_key_fails(self, seeded_key_pair: KeyPair) -> None:
        """A signature does not verify under another key pair's public key."""
        private_key, _ = seeded_key_pair
        _, other_public_key = SCHEME.key_gen_from_seed(FIXED_SEED, 1)
        signature = SCHEME.sign(b"abc", private_key)
        assert not SCHEME.verify(b"abc", signature, other_public_key)

    def test_extra_trailing_entries_are_ignored(self, seeded_key_pair: KeyPair) -> None:
        """Entries after the last one the walk consumes do not affect the result."""
        private_key, public_key = seeded_key_pair
        signature = SCHEME.sign(b"abc", private_key)
        assert len(signature) < 264

        padded = Signature(data=[*signature, HashDigest.zero()])
        assert SCHEME.verify(b"abc", padded, public_key)

    def test_missing_entry_fails(self, seeded_key_pair: KeyPair) -> None:
        """Dropping the last entry exhausts the signature before the walk ends."""
        private_key, public_key = seeded_key_pair
        signature = SCHEME.sign(b"abc", private_key)
        truncated = Signature(data=signature[:-1])
        assert not SCHEME.verify(b"abc", truncated, public_key)

    def test_empty_signature_fails(self, seeded_key_pair: KeyPair) -> None:
        """No message vector is all zeros in practice, so an empty signature fails."""
        _, public_key = seeded_key_pair
        assert not SCHEME.verify(b"abc", Signature(data=[]), public_key)

    def test_swapped_entries_fail(self, seeded_key_pair: KeyPair) -> None:
        """The order of revealed entries matters."""
        private_key, public_key = seeded_key_pair
        entries = list(SCHEME.sign(b"abc", private_key))
        entries[0], entries[1] = entries[1], entries[0]
        assert not SCHEME.verify(b"abc", Signature(data=entries), public_key)

    @pytest.mark.parametrize("position", [0, 1, -1])
    def test_mutated_signature_entry_fails(self, seeded_key_pair: KeyPair, position: int) -> None:
        """Flipping one bit of any revealed entry breaks verification."""
        private_key, public_key = seeded_key_pair
        entries = list(SCHEME.sign(b"abc", private_key))
        mutated = bytearray(entries[position])
        mutated[0] ^= 0x01
        entries[position] = HashDigest(mutated)
        assert not SCHEME.verify(b"abc", Signature(data=entries), public_key)

    def test_mutated_public_key_fails(self, seeded_key_pair: KeyPair) -> None:
        """Changing a public entry the signature relies on breaks verification."""
        private_key, public_key = seeded_key_pair
        signature = SCHEME.sign(b"abc", private_key)

        entries = list(public_key)
        entries[_first_set_position(b"abc")] = HashDigest.zero()
        assert not SCHEME.verify(b"abc", signature, PublicKey(data=entries))

    @pytest.mark.parametrize(
        "signature, public_key",
        [
            pytest.param([b"\x00" * 32], None, id="signature is a list"),
            pytest.param(None, None, id="signature is None"),
            pytest.param(Signature(data=[]), "not a key", id="public key is a string"),
        ],
    )
    def test_wrong_types_return_false(
        self, seeded_key_pair: KeyPair, signature: object, public_key: object
    ) -> None:
        """Verification is total: unexpected types give False, not an exception."""
        _, real_public_key = seeded_key_pair
        assert not SCHEME.verify(
            b"abc",
            signature,  # type: ignore[arg-type]
            public_key if public_key is not None else real_public_key,  # type: ignore[arg-type]
        )

    def test_signature_verify_convenience(self, seeded_key_pair: KeyPair) -> None:
        """`Signature.verify` delegates to the scheme."""
        private_key, public_key = seeded_key_pair
        signature = SCHEME.sign(b"abc", private_key)
        assert signature.verify(public_key, b"abc", SCHEME)

    def test_other_hash_algorithm(self) -> None:
        """The scheme works over any 32-byte hashlib algorithm."""
        hasher = Hasher(config=PROD_CONFIG, algorithm="sha3_256")
        scheme = LamportScheme(PROD_CONFIG, hasher, PROD_RAND)
        private_key, public_key = scheme.key_gen_from_seed(FIXED_SEED)

        signature = scheme.sign(b"abc", private_key)
        assert scheme.verify(b"abc", signature, public_key)
        assert not SCHEME.verify(b"abc", signature, public_key)

    @settings(max_examples=25)
    @given(message=st.binary(max_size=64), other=st.binary(max_size=64))
    def test_roundtrip_property(
        self, seeded_key_pair: KeyPair, message: bytes, other: bytes
    ) -> None:
        """Every message verifies under its own signature and no other message does."""
        assume(message != other)
        private_key, public_key = seeded_key_pair
        signature = SCHEME.sign(message, private_key)

        assert SCHEME.verify(message, signature, public_key)
        assert not SCHEME.verify(other, signature, public_key)
