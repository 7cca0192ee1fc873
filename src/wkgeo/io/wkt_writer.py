"""Well-Known Text writer.

Output form: ``KIND[ Z| M| ZM] (body)`` or ``KIND[ Z| M| ZM] EMPTY``.
Numbers are written in their shortest round-trippable form, integral values
without a fractional part. NaN and infinite coordinates have no WKT form and
are rejected.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from wkgeo.exceptions import InvalidGeometryError
from wkgeo.geometry.kinds import GeometryKind
from wkgeo.geometry.types import Geometry, LineString, Point

# Larger integral floats print in exponent form to stay exact
_MAX_PLAIN_INTEGER = 1e16

# Kinds whose body is a list of bare coordinates
_POINT_LISTS = frozenset(
    {GeometryKind.LINESTRING, GeometryKind.CIRCULARSTRING, GeometryKind.MULTIPOINT}
)
# Kinds whose body is a list of untagged member bodies
_BODY_LISTS = frozenset(
    {
        GeometryKind.POLYGON,
        GeometryKind.TRIANGLE,
        GeometryKind.MULTILINESTRING,
        GeometryKind.MULTIPOLYGON,
        GeometryKind.POLYHEDRALSURFACE,
        GeometryKind.TIN,
    }
)
# Kinds whose members are bare LineStrings or tagged curves
_CURVE_LISTS = frozenset({GeometryKind.COMPOUNDCURVE, GeometryKind.CURVEPOLYGON})


def format_number(value: float) -> str:
    """Format a coordinate value for WKT.

    Raises:
        InvalidGeometryError: If the value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise InvalidGeometryError(f"Coordinate {value!r} cannot be written as WKT")
    if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(value)


class WKTWriter:
    """Serializes geometries to Well-Known Text."""

    def write(self, geometry: Geometry) -> str:
        """Serialize a geometry and all its members.

        Raises:
            InvalidGeometryError: If a coordinate is NaN or infinite.
        """
        return self._tagged(geometry)

    def _tagged(self, geometry: Geometry) -> str:
        keyword = geometry.kind.keyword
        suffix = geometry.coordinate_system.dimension_suffix
        header = f"{keyword} {suffix}" if suffix else keyword
        return f"{header} {self._body(geometry)}"

    def _body(self, geometry: Geometry) -> str:
        if geometry.is_empty:
            return "EMPTY"

        kind = geometry.kind
        if isinstance(geometry, Point):
            return f"({self._coordinates(geometry)})"

        members: tuple[Geometry, ...] = geometry.members  # type: ignore[attr-defined]
        if kind in _POINT_LISTS:
            return self._list(self._coordinates(point) for point in members)  # type: ignore[arg-type]
        if kind in _BODY_LISTS:
            return self._list(self._body(member) for member in members)
        if kind in _CURVE_LISTS:
            return self._list(self._curve_member(member) for member in members)
        return self._list(self._tagged(member) for member in members)

    def _curve_member(self, member: Geometry) -> str:
        # Non-empty LineStrings are written bare; other curves keep their tag
        if type(member) is LineString and not member.is_empty:
            return self._body(member)
        return self._tagged(member)

    @staticmethod
    def _coordinates(point: Point) -> str:
        if point.is_empty:
            return "EMPTY"
        return " ".join(format_number(value) for value in point.coordinates)

    @staticmethod
    def _list(items: Iterable[str]) -> str:
        return f"({', '.join(items)})"
