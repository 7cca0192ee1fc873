"""wkgeo: Well-Known Binary and Well-Known Text geometry I/O.

Reads and writes OGC Simple Features geometries, including the ISO curve and
surface kinds, in 2D, Z, M and ZM, and provides lazy proxies that defer
parsing until a geometry's structure is needed.

Example:
    import wkgeo

    polygon = wkgeo.read_wkt("POLYGON ((0 0, 1 0, 1 1, 0 0))", srid=4326)
    wkb = wkgeo.write_wkb(polygon)
    assert wkgeo.read_wkb(wkb, srid=4326) == polygon
"""

from __future__ import annotations

from wkgeo.exceptions import (
    CoordinateSystemError,
    EmptyGeometryError,
    GeometryError,
    GeometryIOError,
    InvalidByteOrderError,
    InvalidGeometryError,
    NestingTooDeepError,
    TrailingDataError,
    UnexpectedEndOfStreamError,
    UnexpectedGeometryError,
    UnexpectedTokenError,
    UnsupportedPlatformError,
    UnsupportedWKBTypeError,
)
from wkgeo.geometry import (
    TIN,
    CircularString,
    CompoundCurve,
    CoordinateSystem,
    CurvePolygon,
    Geometry,
    GeometryCollection,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    PolyhedralSurface,
    Triangle,
)
from wkgeo.io import ByteOrder, WKBReader, WKBWriter, WKTReader, WKTWriter
from wkgeo.proxy import GeometryProxy, proxy_for_kind

__version__ = "0.1.0"


def read_wkb(data: bytes | bytearray | memoryview, srid: int = 0) -> Geometry:
    """Decode one geometry from WKB bytes."""
    return WKBReader().read(bytes(data), srid)


def read_wkt(text: str, srid: int = 0) -> Geometry:
    """Decode one geometry from WKT."""
    return WKTReader().read(text, srid)


def write_wkb(geometry: Geometry, byte_order: ByteOrder | None = None) -> bytes:
    """Encode a geometry as WKB, in the configured byte order by default."""
    return WKBWriter(byte_order).write(geometry)


def write_wkt(geometry: Geometry) -> str:
    """Encode a geometry as WKT."""
    return WKTWriter().write(geometry)


__all__ = [
    "TIN",
    "ByteOrder",
    "CircularString",
    "CompoundCurve",
    "CoordinateSystem",
    "CoordinateSystemError",
    "CurvePolygon",
    "EmptyGeometryError",
    "Geometry",
    "GeometryCollection",
    "GeometryError",
    "GeometryIOError",
    "GeometryKind",
    "GeometryProxy",
    "InvalidByteOrderError",
    "InvalidGeometryError",
    "NestingTooDeepError",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "PolyhedralSurface",
    "TrailingDataError",
    "Triangle",
    "UnexpectedEndOfStreamError",
    "UnexpectedGeometryError",
    "UnexpectedTokenError",
    "UnsupportedPlatformError",
    "UnsupportedWKBTypeError",
    "__version__",
    "read_wkb",
    "read_wkt",
    "proxy_for_kind",
    "write_wkb",
    "write_wkt",
]
