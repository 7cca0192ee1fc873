"""Geometry kinds and their WKB/WKT identifiers."""

from __future__ import annotations

from enum import IntEnum

from wkgeo.exceptions import UnsupportedWKBTypeError


class GeometryKind(IntEnum):
    """Concrete geometry kinds, valued by their 2D WKB type code.

    The abstract OGC kinds (Geometry=0, MultiCurve=11, MultiSurface=12,
    Curve=13, Surface=14) have no value type and are not listed.
    """

    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7
    CIRCULARSTRING = 8
    COMPOUNDCURVE = 9
    CURVEPOLYGON = 10
    POLYHEDRALSURFACE = 15
    TIN = 16
    TRIANGLE = 17

    @property
    def keyword(self) -> str:
        """Return the WKT keyword for this kind (e.g. "LINESTRING")."""
        return self.name

    @property
    def type_name(self) -> str:
        """Return the OGC type name (e.g. "LineString")."""
        return _TYPE_NAMES[self]


_TYPE_NAMES: dict[GeometryKind, str] = {
    GeometryKind.POINT: "Point",
    GeometryKind.LINESTRING: "LineString",
    GeometryKind.POLYGON: "Polygon",
    GeometryKind.MULTIPOINT: "MultiPoint",
    GeometryKind.MULTILINESTRING: "MultiLineString",
    GeometryKind.MULTIPOLYGON: "MultiPolygon",
    GeometryKind.GEOMETRYCOLLECTION: "GeometryCollection",
    GeometryKind.CIRCULARSTRING: "CircularString",
    GeometryKind.COMPOUNDCURVE: "CompoundCurve",
    GeometryKind.CURVEPOLYGON: "CurvePolygon",
    GeometryKind.POLYHEDRALSURFACE: "PolyhedralSurface",
    GeometryKind.TIN: "TIN",
    GeometryKind.TRIANGLE: "Triangle",
}

# Members below this many collection levels are rejected by the readers
MAX_NESTING_DEPTH = 100

_KINDS_BY_CODE: dict[int, GeometryKind] = {kind.value: kind for kind in GeometryKind}
_KINDS_BY_KEYWORD: dict[str, GeometryKind] = {kind.keyword: kind for kind in GeometryKind}


def kind_from_code(code: int) -> GeometryKind:
    """Look up the kind for a 2D (base) WKB type code.

    Args:
        code: Base type code, i.e. the extended code modulo 1000.

    Returns:
        The matching GeometryKind.

    Raises:
        UnsupportedWKBTypeError: If no concrete kind has this code.
    """
    kind = _KINDS_BY_CODE.get(code)
    if kind is None:
        raise UnsupportedWKBTypeError(code)
    return kind


def kind_from_keyword(keyword: str) -> GeometryKind | None:
    """Look up a kind by its WKT keyword, case-insensitively."""
    return _KINDS_BY_KEYWORD.get(keyword.upper())
