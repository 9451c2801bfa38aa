"""
The configured entry point of the library.

`LiteLamport` ties the pieces together: it is built once from
`LamportSettings`, and from then on every operation takes and returns keys,
signatures and seeds in their configured external encodings.

    lamport = LiteLamport(key_format="json", hash_encoding="hex")
    private_key, public_key = lamport.generate_keys()
    signature = lamport.sign("hello world", private_key)
    assert lamport.verify("hello world", signature, public_key)

A private key must sign at most one message. Nothing here tracks usage.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Type, TypeVar

from lite_lamport.codec import FormatCodec
from lite_lamport.ots.constants import PROD_CONFIG
from lite_lamport.ots.containers import PrivateKey, PublicKey, Signature
from lite_lamport.ots.interface import LamportScheme
from lite_lamport.ots.rand import PROD_RAND
from lite_lamport.ots.secret import SecretBuffer
from lite_lamport.settings import LamportSettings
from lite_lamport.types import CamelModel, LamportError, SeedTooShortError

logger = logging.getLogger(__name__)

KeyT = TypeVar("KeyT", PrivateKey, PublicKey)


class KeyPair(CamelModel):
    """
    An encoded key pair.

    Unpacks like a tuple, private key first:

        private_key, public_key = lamport.generate_keys()

    Dumps with camelCase keys (`privateKey`, `publicKey`).
    """

    model_config = CamelModel.model_config | {"frozen": True}

    private_key: Any
    """The encoded private key. **MUST BE KEPT CONFIDENTIAL.**"""

    public_key: Any
    """The encoded public key."""

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        """Yield the private key, then the public key."""
        yield self.private_key
        yield self.public_key


class LiteLamport:
    """Lamport one-time signatures over encoded keys, signatures and seeds."""

    def __init__(self, settings: LamportSettings | None = None, **overrides: Any):
        """
        Configure the instance.

        Args:
            settings: Base settings. Defaults come from `lite_lamport.config`.
            overrides: Individual settings by field name, e.g.
                `key_format="json"`. Applied on top of `settings`.

        Raises:
            pydantic.ValidationError: If a format, charset or hash algorithm
                is not recognized.
        """
        if settings is None:
            settings = LamportSettings.model_validate(overrides)
        elif overrides:
            settings = LamportSettings.model_validate(settings.model_dump() | overrides)
        self.settings = settings

        self.codec = FormatCodec(
            key_format=settings.key_variant,
            signature_format=settings.signature_variant,
            hash_encoding=settings.hash_charset,
        )
        self.seed_charset = settings.seed_charset
        self.scheme = LamportScheme(PROD_CONFIG, settings.hasher(), PROD_RAND)

    def generate_seed(self) -> str:
        """Draw a fresh random seed, encoded in the seed charset."""
        with SecretBuffer(self.scheme.rand.seed()) as seed:
            return self.seed_charset.encode_text(seed)

    def generate_keys(self) -> KeyPair:
        """Generate a key pair from the secure random source."""
        private_key, public_key = self.scheme.key_gen()
        logger.debug("Generated random key pair")
        return self._key_pair(private_key, public_key)

    def generate_keys_from_seed(self, seed: str, index: int = 0) -> KeyPair:
        """
        Derive the key pair at `index` from a seed.

        The same seed and index always give the same key pair. Use a new
        index for every key pair issued from one seed.

        Args:
            seed: The seed, encoded in the seed charset.
            index: Non-negative key index.

        Raises:
            InvalidFormatError: If `seed` is not valid text in the seed charset.
            SeedTooShortError: If the seed decodes to fewer than 32 bytes.
            ValueError: If `index` is negative.
        """
        with SecretBuffer(self.seed_charset.decode_text(seed, "seed")) as raw_seed:
            if len(raw_seed) < self.scheme.config.SEED_LEN_BYTES:
                raise SeedTooShortError(
                    expected=self.scheme.config.SEED_LEN_BYTES,
                    actual=len(raw_seed),
                    encoding=self.seed_charset.value,
                )
            private_key, public_key = self.scheme.key_gen_from_seed(raw_seed, index)
        logger.debug("Derived key pair at index %d from seed", index)
        return self._key_pair(private_key, public_key)

    def get_public_key_from_private_key(self, private_key: Any) -> Any:
        """
        Derive the encoded public key of an encoded private key.

        Raises:
            InvalidFormatError: If `private_key` is not a well-formed key.
        """
        decoded = self.codec.decode_key(private_key, PrivateKey)
        return self.codec.encode_key(self.scheme.public_from_private(decoded))

    def sign(self, message: bytes | str, private_key: Any) -> Any:
        """
        Sign `message` with an encoded private key.

        **The private key must not be used again afterwards.**

        Args:
            message: The message; text is UTF-8 encoded.
            private_key: The encoded private key.

        Returns:
            The encoded signature.

        Raises:
            InvalidFormatError: If `private_key` is not a well-formed key.
        """
        decoded = self.codec.decode_key(private_key, PrivateKey)
        return self.codec.encode_signature(self.scheme.sign(message, decoded))

    def verify(self, message: bytes | str, signature: Any, public_key: Any) -> bool:
        """
        Check an encoded signature against a message and an encoded public key.

        Never raises for malformed signatures or keys; they simply do not
        verify. The message itself must be bytes or text.

        Returns:
            `True` if the signature is valid, `False` otherwise.

        Raises:
            TypeError: If `message` is neither bytes nor `str`.
        """
        try:
            decoded_signature = self.codec.decode_signature(signature)
            decoded_public_key = self.codec.decode_key(public_key, PublicKey)
        except (LamportError, ValueError, TypeError) as e:
            logger.debug("Rejecting undecodable signature or public key: %s", e)
            return False

        if not self.scheme.verify(message, decoded_signature, decoded_public_key):
            logger.debug("Signature does not match message and public key")
            return False
        return True

    def decode_key(self, encoded: Any, key_type: Type[KeyT] = PublicKey) -> KeyT:
        """Parse an encoded key; see `FormatCodec.decode_key`."""
        return self.codec.decode_key(encoded, key_type)

    def encode_key(self, key: PrivateKey | PublicKey) -> Any:
        """Render a key in the configured key packaging."""
        return self.codec.encode_key(key)

    def decode_signature(self, encoded: Any) -> Signature:
        """Parse an encoded signature; see `FormatCodec.decode_signature`."""
        return self.codec.decode_signature(encoded)

    def encode_signature(self, signature: Signature) -> Any:
        """Render a signature in the configured signature packaging."""
        return self.codec.encode_signature(signature)

    def _key_pair(self, private_key: PrivateKey, public_key: PublicKey) -> KeyPair:
        return KeyPair(
            private_key=self.codec.encode_key(private_key),
            public_key=self.codec.encode_key(public_key),
        )
