"""Tests for wkgeo.io.wkb_buffer module."""

from __future__ import annotations

import struct

import pytest

from wkgeo.exceptions import UnexpectedEndOfStreamError
from wkgeo.io.byte_order import ByteOrder
from wkgeo.io.wkb_buffer import WKBBuffer


class TestWKBBuffer:
    """Tests for the WKBBuffer cursor."""

    def test_read_byte_advances_one(self) -> None:
        buffer = WKBBuffer(b"\x01\x02")
        assert buffer.read_byte() == 1
        assert buffer.position == 1
        assert buffer.remaining == 1

    def test_read_uint32_respects_byte_order(self) -> None:
        buffer = WKBBuffer(b"\x00\x00\x00\x07\x07\x00\x00\x00")
        assert buffer.read_uint32(ByteOrder.BIG_ENDIAN) == 7
        assert buffer.read_uint32(ByteOrder.LITTLE_ENDIAN) == 7
        assert buffer.is_at_end()

    def test_read_double(self) -> None:
        buffer = WKBBuffer(struct.pack(">d", 1.5) + struct.pack("<d", -2.25))
        assert buffer.read_double(ByteOrder.BIG_ENDIAN) == 1.5
        assert buffer.read_double(ByteOrder.LITTLE_ENDIAN) == -2.25

    def test_read_doubles(self) -> None:
        buffer = WKBBuffer(struct.pack("<3d", 1.0, 2.0, 3.0))
        assert buffer.read_doubles(3, ByteOrder.LITTLE_ENDIAN) == (1.0, 2.0, 3.0)
        assert buffer.position == 24

    def test_read_zero_doubles(self) -> None:
        buffer = WKBBuffer(b"")
        assert buffer.read_doubles(0, ByteOrder.LITTLE_ENDIAN) == ()

    def test_read_past_end_raises(self) -> None:
        buffer = WKBBuffer(b"\x01\x00\x00")
        buffer.read_byte()

        with pytest.raises(UnexpectedEndOfStreamError) as exc_info:
            buffer.read_uint32(ByteOrder.LITTLE_ENDIAN)

        error = exc_info.value
        assert error.offset == 1
        assert error.requested == 4
        assert error.available == 2

    def test_failed_read_leaves_position_unchanged(self) -> None:
        buffer = WKBBuffer(b"\x00" * 10)
        buffer.read_uint32(ByteOrder.BIG_ENDIAN)

        with pytest.raises(UnexpectedEndOfStreamError):
            buffer.read_double(ByteOrder.BIG_ENDIAN)

        assert buffer.position == 4
        assert buffer.remaining == 6

    def test_empty_buffer_is_at_end(self) -> None:
        buffer = WKBBuffer(b"")
        assert buffer.is_at_end()
        with pytest.raises(UnexpectedEndOfStreamError):
            buffer.read_byte()
