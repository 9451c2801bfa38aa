"""Random data generator for the Lamport signature scheme."""

import secrets

from pydantic import model_validator

from lite_lamport.types import StrictBaseModel

from .constants import PROD_CONFIG, LamportConfig
from .types import HashDigest


class Rand(StrictBaseModel):
    """An instance of the random data generator for a given config."""

    config: LamportConfig
    """Configuration parameters for the random generator."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Rand":
        """Reject subclasses to prevent type confusion attacks."""
        if type(self.config) is not LamportConfig:
            raise TypeError("config must be exactly LamportConfig, not a subclass")
        return self

    def draw(self, length: int) -> bytes:
        """Draws `length` uniformly random bytes from the OS entropy pool."""
        return secrets.token_bytes(length)

    def digest(self) -> HashDigest:
        """Generates one random private key entry."""
        return HashDigest(self.draw(self.config.HASH_LEN_BYTES))

    def seed(self) -> bytes:
        """Generates a fresh seed of the minimum seed length."""
        return self.draw(self.config.SEED_LEN_BYTES)


PROD_RAND = Rand(config=PROD_CONFIG)
"""An instance configured for production-level parameters."""
