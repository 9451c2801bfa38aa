"""Tests for fixed-length byte types."""

import pytest
from pydantic import BaseModel, ValidationError

from lite_lamport.ots import HashDigest
from lite_lamport.types import Bytes32


class TestBytes32:
    """Construction, coercion and length checks."""

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(b"\x11" * 32, id="bytes"),
            pytest.param(bytearray(b"\x11" * 32), id="bytearray"),
            pytest.param(memoryview(b"\x11" * 32), id="memoryview"),
            pytest.param("11" * 32, id="hex"),
            pytest.param("0x" + "11" * 32, id="0x-prefixed hex"),
            pytest.param([0x11] * 32, id="list of ints"),
        ],
    )
    def test_coercion(self, value: object) -> None:
        """Every supported input form gives the same value."""
        assert Bytes32(value) == b"\x11" * 32

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_rejects_wrong_length(self, length: int) -> None:
        """Only exactly 32 bytes are accepted."""
        with pytest.raises(ValueError, match="expects exactly 32 bytes"):
            Bytes32(b"\x00" * length)

    def test_rejects_out_of_range_ints(self) -> None:
        """Integers must fit in a byte."""
        with pytest.raises(ValueError):
            Bytes32([256] * 32)

    def test_zero(self) -> None:
        """`zero` is all zero bytes."""
        assert Bytes32.zero() == b"\x00" * 32

    def test_repr_and_hex(self) -> None:
        """The repr names the type and shows hex."""
        value = Bytes32(b"\xab" * 32)
        assert value.hex() == "ab" * 32
        assert repr(value) == f"Bytes32({'ab' * 32})"

    def test_hashable(self) -> None:
        """Equal values collapse in a set."""
        raw = b"\x01" * 32
        assert len({Bytes32(raw), Bytes32(raw)}) == 1

    def test_decode_bytes(self) -> None:
        """`decode_bytes` checks the length."""
        assert Bytes32.decode_bytes(b"\x05" * 32).encode_bytes() == b"\x05" * 32
        with pytest.raises(ValueError):
            Bytes32.decode_bytes(b"\x05" * 3)


class TestPydanticIntegration:
    """Byte types used as model fields."""

    class Holder(BaseModel):
        value: HashDigest

    def test_validates_bytes(self) -> None:
        """Raw bytes are converted to the field type."""
        holder = self.Holder(value=b"\x02" * 32)
        assert type(holder.value) is HashDigest

    def test_rejects_wrong_length(self) -> None:
        """Short values fail validation."""
        with pytest.raises(ValidationError):
            self.Holder(value=b"\x02" * 31)

    def test_serializes_to_hex(self) -> None:
        """JSON dumps use hex."""
        holder = self.Holder(value=b"\x02" * 32)
        assert holder.model_dump(mode="json") == {"value": "02" * 32}
