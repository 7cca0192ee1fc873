"""Tests for the top-level wkgeo entry points."""

from __future__ import annotations

import pytest

import wkgeo
from wkgeo import ByteOrder, GeometryError, Point, Polygon


def test_read_wkt() -> None:
    polygon = wkgeo.read_wkt("POLYGON ((0 0, 1 0, 1 1, 0 0))", srid=4326)
    assert isinstance(polygon, Polygon)
    assert polygon.srid == 4326


def test_read_wkb_accepts_bytearray() -> None:
    data = bytearray(wkgeo.write_wkb(Point.xy(1, 2), ByteOrder.BIG_ENDIAN))
    assert wkgeo.read_wkb(data) == Point.xy(1, 2)


def test_write_wkt() -> None:
    assert wkgeo.write_wkt(Point.xym(1, 2, 3)) == "POINT M (1 2 3)"


def test_write_wkb_byte_order() -> None:
    assert wkgeo.write_wkb(Point.xy(1, 2), ByteOrder.LITTLE_ENDIAN)[0] == 1


def test_errors_share_a_root() -> None:
    with pytest.raises(GeometryError):
        wkgeo.read_wkt("POINT (1 2")
    with pytest.raises(GeometryError):
        wkgeo.read_wkb(b"\x01")


def test_version() -> None:
    assert wkgeo.__version__
