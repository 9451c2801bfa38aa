"""Shared values for lite_lamport tests."""

FIXED_SEED = bytes(range(32))
"""A 32-byte seed for deterministic key pairs."""

__all__ = ["FIXED_SEED"]
