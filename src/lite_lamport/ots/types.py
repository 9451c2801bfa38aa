"""Base types for the Lamport signature scheme."""

from ..types.byte_arrays import BaseBytes
from .constants import HASH_LEN_BYTES


class HashDigest(BaseBytes):
    """
    A single 32-byte hash value.

    This is the unit of every private key entry (a random or derived secret),
    every public key entry (the hash of the matching secret), and every
    signature entry (a revealed secret).
    """

    LENGTH = HASH_LEN_BYTES
