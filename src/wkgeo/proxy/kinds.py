"""Proxy classes bound to each concrete geometry kind."""

from __future__ import annotations

from wkgeo.exceptions import UnsupportedWKBTypeError
from wkgeo.geometry.kinds import GeometryKind
from wkgeo.geometry.types import (
    TIN,
    CircularString,
    CompoundCurve,
    CurvePolygon,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    PolyhedralSurface,
    Triangle,
)
from wkgeo.proxy.base import GeometryProxy


class PointProxy(GeometryProxy[Point]):
    geometry_class = Point


class LineStringProxy(GeometryProxy[LineString]):
    geometry_class = LineString


class CircularStringProxy(GeometryProxy[CircularString]):
    geometry_class = CircularString


class CompoundCurveProxy(GeometryProxy[CompoundCurve]):
    geometry_class = CompoundCurve


class PolygonProxy(GeometryProxy[Polygon]):
    geometry_class = Polygon


class TriangleProxy(GeometryProxy[Triangle]):
    geometry_class = Triangle


class CurvePolygonProxy(GeometryProxy[CurvePolygon]):
    geometry_class = CurvePolygon


class GeometryCollectionProxy(GeometryProxy[GeometryCollection]):
    geometry_class = GeometryCollection


class MultiPointProxy(GeometryProxy[MultiPoint]):
    geometry_class = MultiPoint


class MultiLineStringProxy(GeometryProxy[MultiLineString]):
    geometry_class = MultiLineString


class MultiPolygonProxy(GeometryProxy[MultiPolygon]):
    geometry_class = MultiPolygon


class PolyhedralSurfaceProxy(GeometryProxy[PolyhedralSurface]):
    geometry_class = PolyhedralSurface


class TINProxy(GeometryProxy[TIN]):
    geometry_class = TIN


PROXY_CLASSES: dict[GeometryKind, type[GeometryProxy]] = {
    cls.geometry_class.kind: cls
    for cls in (
        PointProxy,
        LineStringProxy,
        CircularStringProxy,
        CompoundCurveProxy,
        PolygonProxy,
        TriangleProxy,
        CurvePolygonProxy,
        GeometryCollectionProxy,
        MultiPointProxy,
        MultiLineStringProxy,
        MultiPolygonProxy,
        PolyhedralSurfaceProxy,
        TINProxy,
    )
}


def proxy_for_kind(kind: GeometryKind | int) -> type[GeometryProxy]:
    """Return the proxy class for a geometry kind.

    Raises:
        UnsupportedWKBTypeError: If kind is not a supported base type code.
    """
    try:
        return PROXY_CLASSES[GeometryKind(kind)]
    except ValueError:
        raise UnsupportedWKBTypeError(int(kind)) from None
