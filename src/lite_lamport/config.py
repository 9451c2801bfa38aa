"""
Process-wide defaults for the Lamport signature library.

Each default can be overridden from the environment. Values are read once,
at import time, and checked against the recognized names.
"""

import os

from lite_lamport.codec import charset_names, format_names
from lite_lamport.ots.hasher import DEFAULT_HASH_ALGORITHM

_SUPPORTED_FORMATS: list[str] = format_names()
_SUPPORTED_CHARSETS: list[str] = charset_names()


def _from_env(name: str, default: str, supported: list[str]) -> str:
    value = os.environ.get(name, default).strip().lower()
    if value not in supported:
        raise ValueError(
            f"Invalid {name} environment variable: '{value}'. Supported values: {supported}"
        )
    return value


KEY_FORMAT = _from_env("LITE_LAMPORT_KEY_FORMAT", "base64", _SUPPORTED_FORMATS)
"""Default packaging of keys. Defaults to 'base64'."""

SIGNATURE_FORMAT = _from_env("LITE_LAMPORT_SIGNATURE_FORMAT", "base64", _SUPPORTED_FORMATS)
"""Default packaging of signatures. Defaults to 'base64'."""

HASH_ENCODING = _from_env("LITE_LAMPORT_HASH_ENCODING", "base64", _SUPPORTED_CHARSETS)
"""Default charset of entries in the structured forms. Defaults to 'base64'."""

SEED_ENCODING = _from_env("LITE_LAMPORT_SEED_ENCODING", "base64", _SUPPORTED_CHARSETS)
"""Default charset of seeds. Defaults to 'base64'."""

HASH_ALGORITHM = DEFAULT_HASH_ALGORITHM
"""The `hashlib` algorithm behind Hash and KeyedHash."""
