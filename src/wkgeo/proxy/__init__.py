"""Lazy geometry proxies.

Key Components:
    - GeometryProxy: Parses its WKB or WKT payload on first use
    - PointProxy, LineStringProxy, ...: Proxies bound to one geometry kind
    - proxy_for_kind: Proxy class lookup by GeometryKind

Example:
    from wkgeo.proxy import PolygonProxy

    proxy = PolygonProxy.from_binary(wkb, srid=4326)
    proxy.as_binary()  # stored bytes, nothing parsed
    proxy.exterior_ring  # parses once
"""

from wkgeo.proxy.base import GeometryProxy, RawGeometryPayload
from wkgeo.proxy.kinds import (
    PROXY_CLASSES,
    CircularStringProxy,
    CompoundCurveProxy,
    CurvePolygonProxy,
    GeometryCollectionProxy,
    LineStringProxy,
    MultiLineStringProxy,
    MultiPointProxy,
    MultiPolygonProxy,
    PointProxy,
    PolygonProxy,
    PolyhedralSurfaceProxy,
    TINProxy,
    TriangleProxy,
    proxy_for_kind,
)

__all__ = [
    "PROXY_CLASSES",
    "CircularStringProxy",
    "CompoundCurveProxy",
    "CurvePolygonProxy",
    "GeometryCollectionProxy",
    "GeometryProxy",
    "LineStringProxy",
    "MultiLineStringProxy",
    "MultiPointProxy",
    "MultiPolygonProxy",
    "PointProxy",
    "PolygonProxy",
    "PolyhedralSurfaceProxy",
    "RawGeometryPayload",
    "TINProxy",
    "TriangleProxy",
    "proxy_for_kind",
]
