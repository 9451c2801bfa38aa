"""
This package provides the Lamport one-time signature scheme on decoded,
structured keys and signatures.

It exposes the core data structures and the main interface functions.
"""

from .constants import KEY_SIG_ENTRY_COUNT, PROD_CONFIG, LamportConfig
from .containers import PrivateKey, PublicKey, Signature
from .hasher import PROD_HASHER, Hasher
from .interface import DEFAULT_SIGNATURE_SCHEME, PROD_SIGNATURE_SCHEME, LamportScheme
from .rand import PROD_RAND, Rand
from .secret import SecretBuffer
from .types import HashDigest

__all__ = [
    "LamportScheme",
    "LamportConfig",
    "Hasher",
    "Rand",
    "HashDigest",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "SecretBuffer",
    "KEY_SIG_ENTRY_COUNT",
    "PROD_CONFIG",
    "PROD_HASHER",
    "PROD_RAND",
    "PROD_SIGNATURE_SCHEME",
    "DEFAULT_SIGNATURE_SCHEME",
]
