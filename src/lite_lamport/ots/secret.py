"""
Scope-bounded handling of secret bytes.

Seeds and private key material are single-use. While they are in memory in
a mutable buffer we own, they should be overwritten as soon as the operation
that needed them finishes, whether it returned or raised.

Python `bytes` objects are immutable and may be copied by the interpreter,
so they cannot be wiped. Only material held in a `SecretBuffer` is cleared.
"""

from __future__ import annotations

from types import TracebackType


def wipe(buffer: bytearray) -> None:
    """Overwrite `buffer` with zeros in place, keeping its length."""
    buffer[:] = bytes(len(buffer))


class SecretBuffer:
    """
    A `bytearray` that is zero-filled when its `with` block exits.

    Usage::

        with SecretBuffer(decode_seed(text)) as seed:
            keys = scheme.key_gen_from_seed(seed, index)
        # seed is all zeros here, even if key_gen_from_seed raised
    """

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._buffer = bytearray(data)

    def __enter__(self) -> bytearray:
        return self._buffer

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.wipe()

    def wipe(self) -> None:
        """Zero the buffer now."""
        wipe(self._buffer)

    @property
    def is_wiped(self) -> bool:
        """Whether every byte of the buffer is zero."""
        return not any(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._buffer)} secret bytes>)"
