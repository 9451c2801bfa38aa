"""
Shared pytest fixtures for all lite_lamport tests.

Key generation hashes 264 entries, so key pairs are built once per module
where a test only reads them.
"""

from __future__ import annotations

import pytest

from lite_lamport.client import LiteLamport
from lite_lamport.ots import PROD_SIGNATURE_SCHEME, PrivateKey, PublicKey
from tests.lite_lamport.helpers import FIXED_SEED


@pytest.fixture(scope="module")
def seeded_key_pair() -> tuple[PrivateKey, PublicKey]:
    """A key pair derived from `FIXED_SEED` at index 0."""
    return PROD_SIGNATURE_SCHEME.key_gen_from_seed(FIXED_SEED, 0)


@pytest.fixture
def lamport() -> LiteLamport:
    """A facade with the default settings."""
    return LiteLamport()
