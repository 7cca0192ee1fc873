"""Tests for wkgeo.io.wkb_writer module."""

from __future__ import annotations

import math
import struct

import pytest

from wkgeo.config import settings
from wkgeo.geometry import (
    CircularString,
    CompoundCurve,
    CoordinateSystem,
    GeometryCollection,
    LineString,
    MultiPoint,
    Point,
    Polygon,
)
from wkgeo.io.byte_order import ByteOrder, machine_byte_order
from wkgeo.io.wkb_reader import WKBReader
from wkgeo.io.wkb_writer import WKBWriter

LITTLE = WKBWriter(ByteOrder.LITTLE_ENDIAN)
BIG = WKBWriter(ByteOrder.BIG_ENDIAN)


class TestWKBWriter:
    """Tests for WKBWriter output layout."""

    def test_little_endian_point(self) -> None:
        assert LITTLE.write_hex(Point.xy(1, 2)) == (
            "0101000000000000000000F03F0000000000000040"
        )

    def test_big_endian_point(self) -> None:
        assert BIG.write_hex(Point.xy(1, 2)) == (
            "00000000013FF00000000000004000000000000000"
        )

    def test_extended_type_code(self) -> None:
        data = LITTLE.write(Point.xyzm(1, 2, 3, 4))
        assert struct.unpack_from("<I", data, 1) == (3001,)
        assert struct.unpack_from("<4d", data, 5) == (1.0, 2.0, 3.0, 4.0)

    def test_empty_point_writes_nan(self) -> None:
        data = LITTLE.write(Point.empty(CoordinateSystem.xyz()))
        values = struct.unpack_from("<3d", data, 5)
        assert len(data) == 5 + 24
        assert all(math.isnan(v) for v in values)

    def test_polygon_rings_are_raw_point_lists(self, square: Polygon) -> None:
        data = LITTLE.write(square)
        # header, ring count, point count, 5 points
        assert len(data) == 5 + 4 + 4 + 5 * 16
        assert struct.unpack_from("<II", data, 5) == (1, 5)

    def test_multipoint_members_are_headered(self) -> None:
        data = BIG.write(MultiPoint.of(Point.xy(1, 2), Point.xy(3, 4)))
        assert struct.unpack_from(">BII", data, 0) == (0, 4, 2)
        # first member header follows the count
        assert struct.unpack_from(">BI", data, 9) == (0, 1)

    def test_empty_collection(self) -> None:
        data = LITTLE.write(GeometryCollection.empty())
        assert data == struct.pack("<BII", 1, 7, 0)

    def test_compound_curve_round_trip(self) -> None:
        curve = CompoundCurve.of(
            CircularString.of(Point.xy(0, 0), Point.xy(1, 1), Point.xy(2, 0)),
            LineString.of(Point.xy(2, 0), Point.xy(3, 0)),
        )
        assert WKBReader().read(BIG.write(curve)) == curve

    def test_write_hex_is_uppercase(self) -> None:
        text = LITTLE.write_hex(Point.xy(0.5, -1))
        assert text == text.upper()


class TestDefaultByteOrder:
    """The writer's default byte order comes from configuration."""

    def test_default_is_native(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "WKB_BYTE_ORDER", "native")
        assert WKBWriter().byte_order is machine_byte_order()

    @pytest.mark.parametrize(
        ("configured", "expected"),
        [("big", ByteOrder.BIG_ENDIAN), ("little", ByteOrder.LITTLE_ENDIAN)],
    )
    def test_configured_order(
        self,
        monkeypatch: pytest.MonkeyPatch,
        configured: str,
        expected: ByteOrder,
    ) -> None:
        monkeypatch.setattr(settings, "WKB_BYTE_ORDER", configured)
        writer = WKBWriter()
        assert writer.byte_order is expected
        assert writer.write(Point.xy(1, 2))[0] == expected

    def test_as_binary_uses_configured_order(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "WKB_BYTE_ORDER", "big")
        assert Point.xy(1, 2).as_binary()[0] == ByteOrder.BIG_ENDIAN
        assert Point.xy(1, 2).as_binary(ByteOrder.LITTLE_ENDIAN)[0] == 1
