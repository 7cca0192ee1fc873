"""Well-Known Binary reader.

Recursive descent over a WKB stream. Every geometry starts with a header
(byte order marker and extended type code); the payload that follows depends
on the kind:

- Point: the coordinate values.
- LineString, CircularString: a point count and the points.
- Polygon, Triangle: a ring count, each ring a point count and the points.
- Every other kind: a member count and the members, each a complete WKB
  geometry with its own header and dimensionality.
"""

from __future__ import annotations

import binascii
from collections.abc import Callable

from wkgeo.exceptions import GeometryIOError, NestingTooDeepError, TrailingDataError
from wkgeo.geometry.kinds import MAX_NESTING_DEPTH, GeometryKind
from wkgeo.geometry.types import Geometry, LineString, build_geometry
from wkgeo.io.byte_order import ByteOrder, machine_byte_order
from wkgeo.io.wkb_buffer import WKBBuffer
from wkgeo.io.wkb_types import WKBType, decode_wkb_type


class WKBReader:
    """Builds geometries out of Well-Known Binary data.

    Usage:
        reader = WKBReader()
        geometry = reader.read(wkb_bytes, srid=4326)

    The reader is stateless between calls and may be shared.

    Args:
        max_depth: Deepest member nesting accepted; the top-level geometry
            is at depth 0.
    """

    def __init__(self, max_depth: int = MAX_NESTING_DEPTH) -> None:
        self.max_depth = max_depth
        # Refuses to run on platforms whose doubles are not 64-bit IEEE
        machine_byte_order()
        self._payload_readers: dict[
            GeometryKind, Callable[[WKBBuffer, ByteOrder, WKBType, int, int], Geometry]
        ] = {
            GeometryKind.POINT: self._read_point,
            GeometryKind.LINESTRING: self._read_curve,
            GeometryKind.CIRCULARSTRING: self._read_curve,
            GeometryKind.POLYGON: self._read_polygon,
            GeometryKind.TRIANGLE: self._read_polygon,
            GeometryKind.MULTIPOINT: self._read_members,
            GeometryKind.MULTILINESTRING: self._read_members,
            GeometryKind.MULTIPOLYGON: self._read_members,
            GeometryKind.GEOMETRYCOLLECTION: self._read_members,
            GeometryKind.COMPOUNDCURVE: self._read_members,
            GeometryKind.CURVEPOLYGON: self._read_members,
            GeometryKind.POLYHEDRALSURFACE: self._read_members,
            GeometryKind.TIN: self._read_members,
        }

    def read(self, data: bytes, srid: int = 0) -> Geometry:
        """Read exactly one geometry from WKB data.

        Args:
            data: The WKB bytes.
            srid: SRID assigned to the geometry and all its members.

        Returns:
            The decoded geometry.

        Raises:
            GeometryIOError: If the data is malformed, including
                TrailingDataError when bytes remain after the geometry.
                NestingTooDeepError when members nest deeper than max_depth.
            InvalidGeometryError: If the decoded parts violate the kind's structure.
            CoordinateSystemError: If members mix dimensionality.
            UnexpectedGeometryError: If a member's kind is not allowed in its parent.
        """
        buffer = WKBBuffer(data)
        geometry = self.read_geometry(buffer, srid)

        if not buffer.is_at_end():
            raise TrailingDataError(
                f"Unexpected data at end of WKB stream ({buffer.remaining} byte(s))",
                position=buffer.position,
            )

        return geometry

    def read_hex(self, text: str, srid: int = 0) -> Geometry:
        """Read exactly one geometry from hexadecimal WKB.

        Raises:
            GeometryIOError: If the text is not valid hexadecimal, or for any
                reason read() would raise it.
        """
        try:
            data = binascii.unhexlify(text.strip())
        except (binascii.Error, ValueError) as e:
            raise GeometryIOError(f"Invalid hexadecimal WKB: {e}") from e
        return self.read(data, srid)

    def read_geometry(self, buffer: WKBBuffer, srid: int, depth: int = 0) -> Geometry:
        """Read one geometry, header included, from the current buffer position."""
        if depth > self.max_depth:
            raise NestingTooDeepError(self.max_depth, position=buffer.position)
        byte_order = ByteOrder.from_marker(buffer.read_byte())
        wkb_type = decode_wkb_type(buffer.read_uint32(byte_order))
        read_payload = self._payload_readers[wkb_type.kind]
        return read_payload(buffer, byte_order, wkb_type, srid, depth)

    def _read_coordinates(
        self,
        buffer: WKBBuffer,
        byte_order: ByteOrder,
        wkb_type: WKBType,
        count: int,
    ) -> list[tuple[float, ...]]:
        dimension = 2 + int(wkb_type.has_z) + int(wkb_type.has_m)
        values = buffer.read_doubles(count * dimension, byte_order)
        return [values[i : i + dimension] for i in range(0, len(values), dimension)]

    def _read_point(
        self,
        buffer: WKBBuffer,
        byte_order: ByteOrder,
        wkb_type: WKBType,
        srid: int,
        depth: int,
    ) -> Geometry:
        (coordinates,) = self._read_coordinates(buffer, byte_order, wkb_type, 1)
        return build_geometry(
            GeometryKind.POINT, wkb_type.has_z, wkb_type.has_m, coordinates, srid
        )

    def _read_points(
        self,
        buffer: WKBBuffer,
        byte_order: ByteOrder,
        wkb_type: WKBType,
        srid: int,
    ) -> list[Geometry]:
        count = buffer.read_uint32(byte_order)
        return [
            build_geometry(
                GeometryKind.POINT, wkb_type.has_z, wkb_type.has_m, coordinates, srid
            )
            for coordinates in self._read_coordinates(buffer, byte_order, wkb_type, count)
        ]

    def _read_curve(
        self,
        buffer: WKBBuffer,
        byte_order: ByteOrder,
        wkb_type: WKBType,
        srid: int,
        depth: int,
    ) -> Geometry:
        points = self._read_points(buffer, byte_order, wkb_type, srid)
        return build_geometry(wkb_type.kind, wkb_type.has_z, wkb_type.has_m, points, srid)

    def _read_polygon(
        self,
        buffer: WKBBuffer,
        byte_order: ByteOrder,
        wkb_type: WKBType,
        srid: int,
        depth: int,
    ) -> Geometry:
        ring_count = buffer.read_uint32(byte_order)
        rings: list[Geometry] = []
        for _ in range(ring_count):
            points = self._read_points(buffer, byte_order, wkb_type, srid)
            rings.append(
                build_geometry(
                    LineString.kind, wkb_type.has_z, wkb_type.has_m, points, srid
                )
            )
        return build_geometry(wkb_type.kind, wkb_type.has_z, wkb_type.has_m, rings, srid)

    def _read_members(
        self,
        buffer: WKBBuffer,
        byte_order: ByteOrder,
        wkb_type: WKBType,
        srid: int,
        depth: int,
    ) -> Geometry:
        count = buffer.read_uint32(byte_order)
        # Each member carries its own header, so its own byte order and dimensions
        members = [self.read_geometry(buffer, srid, depth + 1) for _ in range(count)]
        return build_geometry(
            wkb_type.kind, wkb_type.has_z, wkb_type.has_m, members, srid
        )
