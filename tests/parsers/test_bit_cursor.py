"""Testes para parsers.bit_cursor."""

from __future__ import annotations

import pytest

from aml_decoder.domain.errors import MalformedInputError
from aml_decoder.parsers.bit_cursor import BitCursor, BitField


class TestBitField:
    """Testes para BitField."""

    @pytest.mark.parametrize("width", [0, -1, 65])
    def test_invalid_width_raises(self, width: int) -> None:
        with pytest.raises(ValueError, match="invalid field width"):
            BitField(name="x", width=width)

    def test_defaults(self) -> None:
        field = BitField(name="x", width=8)
        assert field.signed is False
        assert field.scale == 1
        assert field.offset == 0


class TestBitCursor:
    """Testes para BitCursor."""

    def test_lsb_order_reads_low_bits_first(self) -> None:
        cursor = BitCursor(bytes([0b1010_0011]))
        assert cursor.read_bits(4) == 0b0011
        assert cursor.read_bits(4) == 0b1010

    def test_msb_order_reads_high_bits_first(self) -> None:
        cursor = BitCursor(bytes([0b1010_0011]), order="msb")
        assert cursor.read_bits(4) == 0b1010
        assert cursor.read_bits(4) == 0b0011

    def test_read_crosses_octet_boundary_lsb(self) -> None:
        # septeto 2 de "hellohello" começa no bit 7 do primeiro octeto
        cursor = BitCursor(bytes.fromhex("E832"))
        assert cursor.read_bits(7) == 0x68
        assert cursor.read_bits(7) == 0x65

    def test_read_crosses_octet_boundary_msb(self) -> None:
        cursor = BitCursor(bytes([0xFF, 0x00]), order="msb")
        cursor.read_bits(4)
        assert cursor.read_bits(8) == 0xF0

    def test_position_and_remaining(self) -> None:
        cursor = BitCursor(b"\x00\x00")
        assert cursor.bit_length == 16
        cursor.read_bits(5)
        assert cursor.position == 5
        assert cursor.remaining == 11

    def test_signed_field_uses_twos_complement(self) -> None:
        cursor = BitCursor(bytes([0xFF]), order="msb")
        assert cursor.read(BitField(name="v", width=8, signed=True)) == -1

    def test_signed_positive_value(self) -> None:
        cursor = BitCursor(bytes([0x7F]), order="msb")
        assert cursor.read(BitField(name="v", width=8, signed=True)) == 127

    def test_scale_and_offset_are_applied(self) -> None:
        cursor = BitCursor(bytes([200]), order="msb")
        field = BitField(name="lat", width=8, scale=0.5, offset=-90)
        assert cursor.read(field) == pytest.approx(10.0)

    def test_unscaled_field_returns_int(self) -> None:
        value = BitCursor(bytes([7])).read(BitField(name="n", width=8))
        assert isinstance(value, int)

    def test_read_schema_in_declared_order(self) -> None:
        cursor = BitCursor(bytes([0x12, 0x34]), order="msb")
        values = cursor.read_schema(
            [BitField(name="a", width=4), BitField(name="b", width=4), BitField(name="c", width=8)]
        )
        assert values == {"a": 0x1, "b": 0x2, "c": 0x34}

    def test_read_past_end_raises_without_consuming(self) -> None:
        cursor = BitCursor(b"\x01")
        cursor.read_bits(3)
        with pytest.raises(MalformedInputError) as exc_info:
            cursor.read_bits(6)
        assert exc_info.value.reason == "read_past_end_of_buffer"
        assert cursor.position == 3

    def test_empty_buffer_raises(self) -> None:
        with pytest.raises(MalformedInputError):
            BitCursor(b"").read_bits(1)

    def test_invalid_order_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid bit order"):
            BitCursor(b"\x00", order="middle")  # type: ignore[arg-type]
