"""
Data containers for the Lamport one-time signature scheme.

This module defines the high-level containers: PrivateKey, PublicKey and
Signature. All three are ordered sequences of 32-byte `HashDigest` entries;
they differ only in how many entries they may hold.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types.collections import BytesList, BytesVector
from .constants import KEY_SIG_ENTRY_COUNT
from .types import HashDigest

if TYPE_CHECKING:
    from .interface import LamportScheme


class PrivateKey(BytesVector[HashDigest]):
    """
    The secret component of a key pair. **MUST BE KEPT CONFIDENTIAL.**

    Exactly 264 independent secrets, one per bit position of the message bit
    vector. Signing reveals roughly half of them, so a private key must sign
    at most one message.
    """

    ELEMENT_TYPE = HashDigest
    LENGTH = KEY_SIG_ENTRY_COUNT
    KIND = "key"


class PublicKey(BytesVector[HashDigest]):
    """
    The public component of a key pair.

    Entry `i` is the hash of private key entry `i`. A public key is always
    derived from its private key and never built independently.
    """

    ELEMENT_TYPE = HashDigest
    LENGTH = KEY_SIG_ENTRY_COUNT
    KIND = "key"


class Signature(BytesList[HashDigest]):
    """
    A signature produced by `LamportScheme.sign`.

    Holds the private key entries at the positions where the message bit
    vector has a 1, in position order. Its length is therefore the number of
    set bits and varies from message to message.
    """

    ELEMENT_TYPE = HashDigest
    LIMIT = KEY_SIG_ENTRY_COUNT
    KIND = "signature"

    def verify(
        self,
        public_key: PublicKey,
        message: bytes | str,
        scheme: "LamportScheme",
    ) -> bool:
        """
        Verify the signature against a public key and message.

        This is a convenience method that delegates to `scheme.verify()`.

        Args:
            public_key: The public key to verify against.
            message: The message that was supposedly signed.
            scheme: The scheme instance to use for verification.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        return scheme.verify(message, self, public_key)
