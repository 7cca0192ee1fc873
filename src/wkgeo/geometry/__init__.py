"""Geometry values for wkgeo.

This package provides the immutable geometry types that the WKB and WKT
readers construct, plus the construction interface the readers call.

Key Components:
    - CoordinateSystem: Z/M flags and SRID shared by a geometry and its members
    - GeometryKind: Concrete kinds keyed by their base WKB type code
    - Point, LineString, Polygon, ...: Frozen geometry value types
    - build_geometry: Construction interface used by the readers

Example:
    from wkgeo.geometry import LineString, Point

    line = LineString.of(Point.xy(0, 0), Point.xy(1, 1))
    line.num_points  # 2
    line.as_text()  # 'LINESTRING (0 0, 1 1)'
"""

from wkgeo.geometry.coordinates import CoordinateSystem
from wkgeo.geometry.kinds import (
    MAX_NESTING_DEPTH,
    GeometryKind,
    kind_from_code,
    kind_from_keyword,
)
from wkgeo.geometry.types import (
    GEOMETRY_CLASSES,
    TIN,
    CircularString,
    CompoundCurve,
    CurvePolygon,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    PolyhedralSurface,
    Triangle,
    build_geometry,
    geometry_class,
)

__all__ = [
    "GEOMETRY_CLASSES",
    "MAX_NESTING_DEPTH",
    "TIN",
    "CircularString",
    "CompoundCurve",
    "CoordinateSystem",
    "CurvePolygon",
    "Geometry",
    "GeometryCollection",
    "GeometryKind",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "PolyhedralSurface",
    "Triangle",
    "build_geometry",
    "geometry_class",
    "kind_from_code",
    "kind_from_keyword",
]
