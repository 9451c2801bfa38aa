"""
Tests for strict type checking in the scheme's collaborator classes.

These tests verify that the Pydantic-based collaborators reject config
subclasses and wrong hash algorithms, so only approved parameter sets are used.
"""

import pytest
from pydantic import ValidationError

from lite_lamport.ots.constants import PROD_CONFIG, LamportConfig
from lite_lamport.ots.hasher import PROD_HASHER, Hasher, supported_hash_algorithms
from lite_lamport.ots.rand import PROD_RAND, Rand


def _subclassed_config() -> LamportConfig:
    class CustomConfig(LamportConfig):
        pass

    custom_config = LamportConfig.__new__(CustomConfig)
    custom_config.__dict__.update(PROD_CONFIG.__dict__)
    return custom_config


class TestHasherStrictTypes:
    """Tests for Hasher strict type checking."""

    def test_hasher_accepts_exact_type(self) -> None:
        """Hasher initialization succeeds with exact type."""
        hasher = Hasher(config=PROD_CONFIG)
        assert hasher.config == PROD_CONFIG
        assert hasher.algorithm == "sha256"

    def test_hasher_rejects_subclass_config(self) -> None:
        """Hasher rejects LamportConfig subclass."""
        with pytest.raises(TypeError, match="config must be exactly LamportConfig"):
            Hasher(config=_subclassed_config())

    def test_hasher_rejects_wrong_type_config(self) -> None:
        """Hasher rejects completely wrong type for config."""

        class RandomClass:
            pass

        with pytest.raises((TypeError, ValidationError)):
            Hasher(config=RandomClass())  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "algorithm, message",
        [
            pytest.param("sha512", "produces 64-byte digests", id="digest too long"),
            pytest.param("sha1", "produces 20-byte digests", id="digest too short"),
            pytest.param("no-such-hash", "Unknown hash algorithm", id="unknown"),
        ],
    )
    def test_hasher_rejects_unsuitable_algorithms(self, algorithm: str, message: str) -> None:
        """Only 32-byte hashlib algorithms are accepted."""
        with pytest.raises(ValidationError, match=message):
            Hasher(config=PROD_CONFIG, algorithm=algorithm)

    def test_supported_algorithms_include_sha256(self) -> None:
        """The default algorithm is always listed, and every entry is usable."""
        supported = supported_hash_algorithms()
        assert "sha256" in supported
        assert "sha512" not in supported

    def test_hasher_frozen(self) -> None:
        """Hasher is immutable (frozen)."""
        with pytest.raises(ValidationError):
            PROD_HASHER.algorithm = "sha3_256"


class TestRandStrictTypes:
    """Tests for Rand strict type checking."""

    def test_rand_accepts_exact_type(self) -> None:
        """Rand initialization succeeds with exact type."""
        rand = Rand(config=PROD_CONFIG)
        assert rand.config == PROD_CONFIG

    def test_rand_rejects_subclass_config(self) -> None:
        """Rand rejects LamportConfig subclass."""
        with pytest.raises(TypeError, match="config must be exactly LamportConfig"):
            Rand(config=_subclassed_config())

    def test_rand_frozen(self) -> None:
        """Rand is immutable (frozen)."""
        with pytest.raises(ValidationError):
            PROD_RAND.config = PROD_CONFIG

    def test_rand_sizes(self) -> None:
        """Entries and seeds are drawn at their configured sizes."""
        assert len(PROD_RAND.digest()) == 32
        assert len(PROD_RAND.seed()) == 32
        assert PROD_RAND.seed() != PROD_RAND.seed()


class TestLamportConfig:
    """Tests for the size constants."""

    def test_prod_sizes(self) -> None:
        """SHA-256 with a one-byte checksum gives 264 entries."""
        assert PROD_CONFIG.MESSAGE_DIGEST_BITS == 256
        assert PROD_CONFIG.CHECKSUM_BITS == 8
        assert PROD_CONFIG.ENTRY_COUNT == 264
        assert PROD_CONFIG.CHECKSUM_MODULUS == 256

    def test_config_rejects_unknown_fields(self) -> None:
        """Config presets cannot carry stray fields."""
        with pytest.raises(ValidationError):
            LamportConfig(
                HASH_LEN_BYTES=32,
                CHECKSUM_LEN_BYTES=1,
                SEED_LEN_BYTES=32,
                EXTRA=1,  # type: ignore[call-arg]
            )
