"""Immutable geometry value types.

Every geometry is a frozen dataclass carrying a CoordinateSystem. Composite
geometries hold their parts in a single ``members`` tuple and expose them
under the OGC names (points, rings, geometries, curves, patches). Structural
rules are enforced at construction; geometric validity (ring closure,
self-intersection) is not checked.

Indexed accessors named ``*_n`` follow the OGC convention and are 1-based;
Python indexing on sequences (``geometry[i]``) is 0-based.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, ClassVar, Self

from wkgeo.exceptions import (
    CoordinateSystemError,
    EmptyGeometryError,
    InvalidGeometryError,
    UnexpectedGeometryError,
)
from wkgeo.geometry.coordinates import CoordinateSystem
from wkgeo.geometry.kinds import GeometryKind

if TYPE_CHECKING:
    from wkgeo.io.byte_order import ByteOrder


@dataclass(frozen=True, repr=False)
class Geometry(ABC):
    """Base class for all geometry values."""

    kind: ClassVar[GeometryKind]
    topological_dimension: ClassVar[int]

    coordinate_system: CoordinateSystem

    @property
    def srid(self) -> int:
        """Return the spatial reference identifier."""
        return self.coordinate_system.srid

    @property
    def geometry_type(self) -> str:
        """Return the OGC type name, e.g. "MultiPolygon"."""
        return self.kind.type_name

    @property
    def coordinate_dimension(self) -> int:
        """Return the number of values per coordinate (2 to 4)."""
        return self.coordinate_system.coordinate_dimension

    @property
    def spatial_dimension(self) -> int:
        """Return 3 if coordinates carry Z, else 2."""
        return self.coordinate_system.spatial_dimension

    @property
    def dimension(self) -> int:
        """Return the topological dimension (0 point, 1 curve, 2 surface)."""
        return self.topological_dimension

    @property
    def is_3d(self) -> bool:
        """Return whether coordinates carry a Z value."""
        return self.coordinate_system.has_z

    @property
    def is_measured(self) -> bool:
        """Return whether coordinates carry an M value."""
        return self.coordinate_system.has_m

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """Return whether the geometry has no coordinates."""

    @abstractmethod
    def with_srid(self, srid: int) -> Self:
        """Return a copy of this geometry, and all its members, with another SRID."""

    @abstractmethod
    def swap_xy(self) -> Self:
        """Return a copy of this geometry with X and Y exchanged."""

    @abstractmethod
    def to_array(self) -> list[Any]:
        """Return the coordinates as nested lists of floats."""

    def as_text(self) -> str:
        """Serialize to Well-Known Text.

        Raises:
            InvalidGeometryError: If a coordinate is NaN or infinite.
        """
        from wkgeo.io.wkt_writer import WKTWriter  # noqa: PLC0415

        return WKTWriter().write(self)

    def as_binary(self, byte_order: ByteOrder | None = None) -> bytes:
        """Serialize to Well-Known Binary.

        Args:
            byte_order: Output byte order. Defaults to the configured order.
        """
        from wkgeo.io.wkb_writer import WKBWriter  # noqa: PLC0415

        return WKBWriter(byte_order).write(self)

    @classmethod
    def from_text(cls, wkt: str, srid: int = 0) -> Self:
        """Parse Well-Known Text, requiring the result to be of this class.

        Raises:
            GeometryIOError: If the text is malformed.
            UnexpectedGeometryError: If the text describes another kind.
        """
        from wkgeo.io.wkt_reader import WKTReader  # noqa: PLC0415

        return cls._expect(WKTReader().read(wkt, srid))

    @classmethod
    def from_binary(cls, wkb: bytes, srid: int = 0) -> Self:
        """Parse Well-Known Binary, requiring the result to be of this class.

        Raises:
            GeometryIOError: If the bytes are malformed.
            UnexpectedGeometryError: If the bytes describe another kind.
        """
        from wkgeo.io.wkb_reader import WKBReader  # noqa: PLC0415

        return cls._expect(WKBReader().read(wkb, srid))

    @classmethod
    def _expect(cls, geometry: Geometry) -> Self:
        if not isinstance(geometry, cls):
            raise UnexpectedGeometryError(
                f"Expected {cls.__name__}, got {type(geometry).__name__}"
            )
        return geometry

    def __repr__(self) -> str:
        try:
            body: object = self.as_text()
        except InvalidGeometryError:
            # NaN and infinite coordinates have no WKT form
            body = self.to_array()
        return f"{type(self).__name__}({body!r}, srid={self.srid})"


@dataclass(frozen=True, repr=False)
class Point(Geometry):
    """A single position. The empty point has all coordinates set to None."""

    kind: ClassVar[GeometryKind] = GeometryKind.POINT
    topological_dimension: ClassVar[int] = 0

    x: float | None = None
    y: float | None = None
    z: float | None = None
    m: float | None = None

    def __post_init__(self) -> None:
        cs = self.coordinate_system
        values = (self.x, self.y, self.z, self.m)
        if self.x is None:
            if any(v is not None for v in values):
                raise InvalidGeometryError("Empty point cannot carry coordinates")
            return

        if self.y is None:
            raise InvalidGeometryError("Point is missing its Y coordinate")
        if (self.z is not None) != cs.has_z:
            raise InvalidGeometryError(
                f"Point Z value does not match coordinate system (has_z={cs.has_z})"
            )
        if (self.m is not None) != cs.has_m:
            raise InvalidGeometryError(
                f"Point M value does not match coordinate system (has_m={cs.has_m})"
            )

        # Frozen dataclass: coerce through object.__setattr__
        for name, value in zip(("x", "y", "z", "m"), values, strict=True):
            if value is not None:
                object.__setattr__(self, name, float(value))

    @classmethod
    def from_coordinates(
        cls,
        coordinate_system: CoordinateSystem,
        coordinates: Sequence[float],
    ) -> Point:
        """Build a point from X, Y, [Z], [M] values in that order.

        An empty sequence yields the empty point.

        Raises:
            InvalidGeometryError: If the number of values does not match
                the coordinate system.
        """
        if not coordinates:
            return cls(coordinate_system)

        expected = coordinate_system.coordinate_dimension
        if len(coordinates) != expected:
            raise InvalidGeometryError(
                f"Expected {expected} coordinates, got {len(coordinates)}"
            )

        x, y, *rest = coordinates
        z = rest.pop(0) if coordinate_system.has_z else None
        m = rest.pop(0) if coordinate_system.has_m else None
        return cls(coordinate_system, x, y, z, m)

    @classmethod
    def xy(cls, x: float, y: float, srid: int = 0) -> Point:
        """Create a 2D point."""
        return cls(CoordinateSystem.xy(srid), x, y)

    @classmethod
    def xyz(cls, x: float, y: float, z: float, srid: int = 0) -> Point:
        """Create a point with Z."""
        return cls(CoordinateSystem.xyz(srid), x, y, z)

    @classmethod
    def xym(cls, x: float, y: float, m: float, srid: int = 0) -> Point:
        """Create a point with M."""
        return cls(CoordinateSystem.xym(srid), x, y, None, m)

    @classmethod
    def xyzm(cls, x: float, y: float, z: float, m: float, srid: int = 0) -> Point:
        """Create a point with Z and M."""
        return cls(CoordinateSystem.xyzm(srid), x, y, z, m)

    @classmethod
    def empty(cls, coordinate_system: CoordinateSystem | None = None) -> Point:
        """Create an empty point."""
        return cls(coordinate_system or CoordinateSystem.xy())

    @property
    def is_empty(self) -> bool:
        return self.x is None

    @property
    def coordinates(self) -> tuple[float, ...]:
        """Return X, Y, [Z], [M]; an empty tuple for the empty point."""
        return tuple(v for v in (self.x, self.y, self.z, self.m) if v is not None)

    def with_srid(self, srid: int) -> Point:
        return replace(self, coordinate_system=self.coordinate_system.with_srid(srid))

    def swap_xy(self) -> Point:
        return replace(self, x=self.y, y=self.x)

    def to_array(self) -> list[Any]:
        return list(self.coordinates)


@dataclass(frozen=True, repr=False)
class _Composite(Geometry):
    """A geometry made of member geometries sharing one coordinate system."""

    member_types: ClassVar[tuple[type[Geometry], ...]] = ()

    members: tuple[Geometry, ...] = ()

    def __post_init__(self) -> None:
        members = tuple(self.members)
        object.__setattr__(self, "members", members)

        cs = self.coordinate_system
        for member in members:
            if not isinstance(member, self.member_types):
                allowed = ", ".join(t.__name__ for t in self.member_types)
                raise UnexpectedGeometryError(
                    f"{type(self).__name__} cannot contain {type(member).__name__} "
                    f"(allowed: {allowed})"
                )
            member_cs = member.coordinate_system
            if not member_cs.same_dimensions(cs):
                raise CoordinateSystemError(
                    f"{type(self).__name__} {cs.dimension_suffix or 'XY'} cannot "
                    f"contain a {member_cs.dimension_suffix or 'XY'} "
                    f"{type(member).__name__}"
                )
            if member_cs.srid != cs.srid:
                raise CoordinateSystemError(
                    f"{type(self).__name__} with SRID {cs.srid} cannot contain "
                    f"a member with SRID {member_cs.srid}"
                )

        self._validate()

    def _validate(self) -> None:
        """Check kind-specific structural rules."""

    @classmethod
    def of(cls, *members: Geometry) -> Self:
        """Create a geometry from members, taking their coordinate system.

        Raises:
            InvalidGeometryError: If no members are given; use empty() instead.
        """
        if not members:
            raise InvalidGeometryError(
                f"{cls.__name__}.of() needs at least one member; use empty()"
            )
        return cls(members[0].coordinate_system, members)

    @classmethod
    def empty(cls, coordinate_system: CoordinateSystem | None = None) -> Self:
        """Create an empty geometry of this kind."""
        return cls(coordinate_system or CoordinateSystem.xy())

    @property
    def is_empty(self) -> bool:
        return not self.members

    def with_srid(self, srid: int) -> Self:
        return replace(
            self,
            coordinate_system=self.coordinate_system.with_srid(srid),
            members=tuple(member.with_srid(srid) for member in self.members),
        )

    def swap_xy(self) -> Self:
        return replace(self, members=tuple(member.swap_xy() for member in self.members))

    def to_array(self) -> list[Any]:
        return [member.to_array() for member in self.members]

    def _member_n(self, n: int, what: str) -> Any:
        if not 1 <= n <= len(self.members):
            raise IndexError(f"{what} {n} out of range [1, {len(self.members)}]")
        return self.members[n - 1]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.members)

    def __getitem__(self, index: int) -> Any:
        return self.members[index]


class _CurveAccessors(ABC):
    """Start/end point accessors shared by every curve kind."""

    members: tuple[Geometry, ...]

    @property
    def start_point(self) -> Point:
        """Return the first point of the curve."""
        points = self._all_points()
        if not points:
            raise EmptyGeometryError(f"{type(self).__name__} is empty")
        return points[0]

    @property
    def end_point(self) -> Point:
        """Return the last point of the curve."""
        points = self._all_points()
        if not points:
            raise EmptyGeometryError(f"{type(self).__name__} is empty")
        return points[-1]

    @property
    def is_closed(self) -> bool:
        """Return whether the start and end points coincide."""
        points = self._all_points()
        return bool(points) and points[0] == points[-1]

    @abstractmethod
    def _all_points(self) -> tuple[Point, ...]:
        """Return every point of the curve in order."""


@dataclass(frozen=True, repr=False)
class LineString(_CurveAccessors, _Composite):
    """A curve with linear interpolation between points."""

    kind: ClassVar[GeometryKind] = GeometryKind.LINESTRING
    topological_dimension: ClassVar[int] = 1
    member_types: ClassVar[tuple[type[Geometry], ...]] = (Point,)

    def _validate(self) -> None:
        if len(self.members) == 1:
            raise InvalidGeometryError(
                f"{type(self).__name__} must have at least 2 points, got 1"
            )
        if any(point.is_empty for point in self.members):
            raise InvalidGeometryError(f"{type(self).__name__} cannot contain empty points")

    def _all_points(self) -> tuple[Point, ...]:
        return self.points

    @property
    def points(self) -> tuple[Point, ...]:
        """Return the points of the curve."""
        return self.members  # type: ignore[return-value]

    @property
    def num_points(self) -> int:
        """Return the number of points."""
        return len(self.members)

    def point_n(self, n: int) -> Point:
        """Return the nth point (1-based)."""
        return self._member_n(n, "Point")


@dataclass(frozen=True, repr=False)
class CircularString(LineString):
    """A curve made of circular arcs, each defined by three points."""

    kind: ClassVar[GeometryKind] = GeometryKind.CIRCULARSTRING

    def _validate(self) -> None:
        super()._validate()
        count = len(self.members)
        if count and (count < 3 or count % 2 == 0):
            raise InvalidGeometryError(
                f"CircularString must have an odd number of points (>= 3), got {count}"
            )


@dataclass(frozen=True, repr=False)
class CompoundCurve(_CurveAccessors, _Composite):
    """A contiguous sequence of LineString and CircularString segments."""

    kind: ClassVar[GeometryKind] = GeometryKind.COMPOUNDCURVE
    topological_dimension: ClassVar[int] = 1
    member_types: ClassVar[tuple[type[Geometry], ...]] = (LineString,)

    def _validate(self) -> None:
        curves = self.curves
        for curve in curves:
            if curve.is_empty:
                raise InvalidGeometryError("CompoundCurve cannot contain empty curves")
        for previous, current in zip(curves, curves[1:], strict=False):
            if previous.end_point != current.start_point:
                raise InvalidGeometryError(
                    "CompoundCurve segments must be contiguous: "
                    f"{previous.end_point.to_array()} != {current.start_point.to_array()}"
                )

    def _all_points(self) -> tuple[Point, ...]:
        if not self.curves:
            return ()
        return (self.curves[0].start_point, self.curves[-1].end_point)

    @property
    def curves(self) -> tuple[LineString, ...]:
        """Return the member curves."""
        return self.members  # type: ignore[return-value]

    @property
    def num_curves(self) -> int:
        """Return the number of member curves."""
        return len(self.members)

    def curve_n(self, n: int) -> LineString:
        """Return the nth curve (1-based)."""
        return self._member_n(n, "Curve")

    @property
    def points(self) -> tuple[Point, ...]:
        """Return all points, sharing the joints between segments."""
        if not self.curves:
            return ()
        points = list(self.curves[0].points)
        for curve in self.curves[1:]:
            points.extend(curve.points[1:])
        return tuple(points)


@dataclass(frozen=True, repr=False)
class _Surface(_Composite):
    """A planar surface bounded by rings, exterior first."""

    topological_dimension: ClassVar[int] = 2

    @property
    def rings(self) -> tuple[Any, ...]:
        """Return all rings, exterior first."""
        return self.members

    @property
    def exterior_ring(self) -> Any:
        """Return the exterior ring."""
        if not self.members:
            raise EmptyGeometryError(f"{type(self).__name__} is empty")
        return self.members[0]

    @property
    def interior_rings(self) -> tuple[Any, ...]:
        """Return the interior rings (holes)."""
        return self.members[1:]

    @property
    def num_interior_rings(self) -> int:
        """Return the number of interior rings."""
        return max(0, len(self.members) - 1)

    def interior_ring_n(self, n: int) -> Any:
        """Return the nth interior ring (1-based)."""
        if not 1 <= n <= self.num_interior_rings:
            raise IndexError(
                f"Interior ring {n} out of range [1, {self.num_interior_rings}]"
            )
        return self.members[n]


@dataclass(frozen=True, repr=False)
class Polygon(_Surface):
    """A surface bounded by linear rings."""

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON
    member_types: ClassVar[tuple[type[Geometry], ...]] = (LineString,)

    def _validate(self) -> None:
        for ring in self.members:
            if type(ring) is not LineString:
                raise UnexpectedGeometryError(
                    f"{type(self).__name__} rings must be LineStrings, "
                    f"got {type(ring).__name__}"
                )


@dataclass(frozen=True, repr=False)
class Triangle(Polygon):
    """A polygon with a single ring of three distinct vertices."""

    kind: ClassVar[GeometryKind] = GeometryKind.TRIANGLE

    def _validate(self) -> None:
        super()._validate()
        if len(self.members) > 1:
            raise InvalidGeometryError("Triangle cannot have interior rings")
        if self.members and len(self.members[0]) != 4:  # noqa: PLR2004
            raise InvalidGeometryError(
                f"Triangle ring must have exactly 4 points, got {len(self.members[0])}"
            )


@dataclass(frozen=True, repr=False)
class CurvePolygon(_Surface):
    """A surface bounded by rings that may contain circular arcs."""

    kind: ClassVar[GeometryKind] = GeometryKind.CURVEPOLYGON
    member_types: ClassVar[tuple[type[Geometry], ...]] = (LineString, CompoundCurve)


@dataclass(frozen=True, repr=False)
class GeometryCollection(_Composite):
    """A heterogeneous collection of geometries."""

    kind: ClassVar[GeometryKind] = GeometryKind.GEOMETRYCOLLECTION
    topological_dimension: ClassVar[int] = 0
    member_types: ClassVar[tuple[type[Geometry], ...]] = (Geometry,)

    @property
    def dimension(self) -> int:
        return max((member.dimension for member in self.members), default=0)

    @property
    def geometries(self) -> tuple[Any, ...]:
        """Return the member geometries."""
        return self.members

    @property
    def num_geometries(self) -> int:
        """Return the number of member geometries."""
        return len(self.members)

    def geometry_n(self, n: int) -> Any:
        """Return the nth geometry (1-based)."""
        return self._member_n(n, "Geometry")


@dataclass(frozen=True, repr=False)
class MultiPoint(GeometryCollection):
    """A collection of points."""

    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOINT
    member_types: ClassVar[tuple[type[Geometry], ...]] = (Point,)

    @property
    def dimension(self) -> int:
        return 0


@dataclass(frozen=True, repr=False)
class MultiLineString(GeometryCollection):
    """A collection of line strings."""

    kind: ClassVar[GeometryKind] = GeometryKind.MULTILINESTRING
    member_types: ClassVar[tuple[type[Geometry], ...]] = (LineString,)

    @property
    def dimension(self) -> int:
        return 1

    def _validate(self) -> None:
        for member in self.members:
            if type(member) is not LineString:
                raise UnexpectedGeometryError(
                    f"MultiLineString cannot contain {type(member).__name__}"
                )


@dataclass(frozen=True, repr=False)
class MultiPolygon(GeometryCollection):
    """A collection of polygons."""

    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOLYGON
    member_types: ClassVar[tuple[type[Geometry], ...]] = (Polygon,)

    @property
    def dimension(self) -> int:
        return 2


@dataclass(frozen=True, repr=False)
class PolyhedralSurface(_Composite):
    """A contiguous collection of polygon patches sharing edges."""

    kind: ClassVar[GeometryKind] = GeometryKind.POLYHEDRALSURFACE
    topological_dimension: ClassVar[int] = 2
    member_types: ClassVar[tuple[type[Geometry], ...]] = (Polygon,)

    @property
    def patches(self) -> tuple[Any, ...]:
        """Return the polygon patches."""
        return self.members

    @property
    def num_patches(self) -> int:
        """Return the number of patches."""
        return len(self.members)

    def patch_n(self, n: int) -> Any:
        """Return the nth patch (1-based)."""
        return self._member_n(n, "Patch")


@dataclass(frozen=True, repr=False)
class TIN(PolyhedralSurface):
    """A triangulated irregular network: a polyhedral surface of triangles."""

    kind: ClassVar[GeometryKind] = GeometryKind.TIN
    member_types: ClassVar[tuple[type[Geometry], ...]] = (Triangle,)


GEOMETRY_CLASSES: dict[GeometryKind, type[Geometry]] = {
    cls.kind: cls
    for cls in (
        Point,
        LineString,
        CircularString,
        CompoundCurve,
        Polygon,
        Triangle,
        CurvePolygon,
        MultiPoint,
        MultiLineString,
        MultiPolygon,
        GeometryCollection,
        PolyhedralSurface,
        TIN,
    )
}


def geometry_class(kind: GeometryKind) -> type[Geometry]:
    """Return the value type for a geometry kind."""
    return GEOMETRY_CLASSES[kind]


def build_geometry(
    kind: GeometryKind,
    has_z: bool,
    has_m: bool,
    members: Sequence[float] | Sequence[Geometry],
    srid: int = 0,
) -> Geometry:
    """Construct a geometry from decoded parts.

    This is the construction interface used by the WKB and WKT readers.

    Args:
        kind: Kind of geometry to build.
        has_z: Whether the geometry declares Z values.
        has_m: Whether the geometry declares M values.
        members: Coordinate values for a point (empty for the empty point),
            otherwise the member geometries.
        srid: Spatial reference identifier.

    Returns:
        The constructed geometry.

    Raises:
        InvalidGeometryError: If the parts violate the kind's structure.
        CoordinateSystemError: If members mix dimensionality.
        UnexpectedGeometryError: If a member is of a kind the parent forbids.
    """
    cs = CoordinateSystem(has_z=has_z, has_m=has_m, srid=srid)
    cls = GEOMETRY_CLASSES[kind]
    if cls is Point:
        values = [float(v) for v in members]  # type: ignore[arg-type]
        if values and all(math.isnan(v) for v in values):
            return Point(cs)
        return Point.from_coordinates(cs, values)
    return cls(cs, tuple(members))  # type: ignore[call-arg]
