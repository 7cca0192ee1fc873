"""Well-Known Binary writer.

Writes ISO WKB with extended type codes. Empty points are written with NaN
coordinates, the convention shared by PostGIS and GEOS.
"""

from __future__ import annotations

import io
import math
import struct

from wkgeo.geometry.types import (
    Geometry,
    LineString,
    Point,
    Polygon,
)
from wkgeo.io.byte_order import ByteOrder, machine_byte_order
from wkgeo.io.wkb_types import encode_wkb_type


class WKBWriter:
    """Serializes geometries to Well-Known Binary.

    Args:
        byte_order: Output byte order. Defaults to the configured
            WKB_BYTE_ORDER setting, which itself defaults to the machine order.
    """

    def __init__(self, byte_order: ByteOrder | None = None) -> None:
        machine_byte_order()
        if byte_order is None:
            from wkgeo.config import settings  # noqa: PLC0415

            byte_order = settings.wkb_byte_order()
        self.byte_order = byte_order
        self._prefix = byte_order.struct_prefix

    def write(self, geometry: Geometry) -> bytes:
        """Serialize a geometry and all its members."""
        stream = io.BytesIO()
        self._write_geometry(stream, geometry)
        return stream.getvalue()

    def write_hex(self, geometry: Geometry) -> str:
        """Serialize a geometry as uppercase hexadecimal WKB."""
        return self.write(geometry).hex().upper()

    def _write_geometry(self, stream: io.BytesIO, geometry: Geometry) -> None:
        cs = geometry.coordinate_system
        type_code = encode_wkb_type(geometry.kind, cs.has_z, cs.has_m)
        stream.write(struct.pack(f"{self._prefix}BI", self.byte_order, type_code))

        if isinstance(geometry, Point):
            self._write_point(stream, geometry)
        elif isinstance(geometry, LineString):
            self._write_points(stream, geometry.points)
        elif isinstance(geometry, Polygon):
            self._write_count(stream, len(geometry.rings))
            for ring in geometry.rings:
                self._write_points(stream, ring.points)
        else:
            members = geometry.members  # type: ignore[attr-defined]
            self._write_count(stream, len(members))
            for member in members:
                self._write_geometry(stream, member)

    def _write_count(self, stream: io.BytesIO, count: int) -> None:
        stream.write(struct.pack(f"{self._prefix}I", count))

    def _write_point(self, stream: io.BytesIO, point: Point) -> None:
        if point.is_empty:
            values: tuple[float, ...] = (math.nan,) * point.coordinate_dimension
        else:
            values = point.coordinates
        stream.write(struct.pack(f"{self._prefix}{len(values)}d", *values))

    def _write_points(self, stream: io.BytesIO, points: tuple[Point, ...]) -> None:
        self._write_count(stream, len(points))
        for point in points:
            self._write_point(stream, point)
