"""Well-Known Text reader.

Grammar driver over WKTTokenStream. A geometry is a kind keyword, an optional
dimension word (Z, M or ZM), then either EMPTY or a parenthesised body whose
shape depends on the kind. Keywords are case-insensitive.
"""

from __future__ import annotations

from collections.abc import Callable

from wkgeo.exceptions import (
    NestingTooDeepError,
    TrailingDataError,
    UnexpectedTokenError,
)
from wkgeo.geometry.kinds import MAX_NESTING_DEPTH, GeometryKind, kind_from_keyword
from wkgeo.geometry.types import Geometry, build_geometry
from wkgeo.io.byte_order import machine_byte_order
from wkgeo.io.wkt_tokenizer import CLOSER, OPENER, WKTTokenStream

_DIMENSIONS: dict[str, tuple[bool, bool]] = {
    "Z": (True, False),
    "M": (False, True),
    "ZM": (True, True),
}
_EMPTY = "EMPTY"

# Kinds whose members are rings, and the kind each ring list builds
_RING_MEMBERS: dict[GeometryKind, GeometryKind] = {
    GeometryKind.MULTIPOLYGON: GeometryKind.POLYGON,
    GeometryKind.POLYHEDRALSURFACE: GeometryKind.POLYGON,
    GeometryKind.TIN: GeometryKind.TRIANGLE,
}


class _Header:
    """Kind and dimensionality read from the start of a geometry."""

    __slots__ = ("depth", "has_m", "has_z", "is_empty", "kind", "srid")

    def __init__(
        self,
        kind: GeometryKind,
        has_z: bool,
        has_m: bool,
        is_empty: bool,
        srid: int,
        depth: int,
    ) -> None:
        self.kind = kind
        self.has_z = has_z
        self.has_m = has_m
        self.is_empty = is_empty
        self.srid = srid
        self.depth = depth

    @property
    def dimension(self) -> int:
        return 2 + int(self.has_z) + int(self.has_m)

    def build(
        self,
        members: list[float] | list[Geometry],
        kind: GeometryKind | None = None,
    ) -> Geometry:
        return build_geometry(
            kind or self.kind, self.has_z, self.has_m, members, self.srid
        )


class WKTReader:
    """Builds geometries out of Well-Known Text.

    Usage:
        reader = WKTReader()
        geometry = reader.read("POINT Z (1 2 3)", srid=4326)

    Args:
        max_depth: Deepest member nesting accepted; the top-level geometry
            is at depth 0.
    """

    def __init__(self, max_depth: int = MAX_NESTING_DEPTH) -> None:
        self.max_depth = max_depth
        # Shares the platform check with the binary path
        machine_byte_order()
        self._body_readers: dict[
            GeometryKind, Callable[[WKTTokenStream, _Header], Geometry]
        ] = {
            GeometryKind.POINT: self._read_point_text,
            GeometryKind.LINESTRING: self._read_curve_text,
            GeometryKind.CIRCULARSTRING: self._read_curve_text,
            GeometryKind.POLYGON: self._read_polygon_text,
            GeometryKind.TRIANGLE: self._read_polygon_text,
            GeometryKind.MULTIPOINT: self._read_multipoint_text,
            GeometryKind.MULTILINESTRING: self._read_multilinestring_text,
            GeometryKind.MULTIPOLYGON: self._read_ring_lists_text,
            GeometryKind.POLYHEDRALSURFACE: self._read_ring_lists_text,
            GeometryKind.TIN: self._read_ring_lists_text,
            GeometryKind.GEOMETRYCOLLECTION: self._read_collection_text,
            GeometryKind.COMPOUNDCURVE: self._read_curve_members_text,
            GeometryKind.CURVEPOLYGON: self._read_curve_members_text,
        }

    def read(self, text: str, srid: int = 0) -> Geometry:
        """Read exactly one geometry from WKT.

        Args:
            text: The WKT string.
            srid: SRID assigned to the geometry and all its members.

        Returns:
            The decoded geometry.

        Raises:
            UnexpectedTokenError: If the text violates the WKT grammar,
                including an unknown kind keyword.
            NestingTooDeepError: If members nest deeper than max_depth.
            TrailingDataError: If tokens remain after the geometry.
            UnexpectedGeometryError: If a member's kind is not allowed in its parent.
            InvalidGeometryError: If the decoded parts violate the kind's structure.
            CoordinateSystemError: If members mix dimensionality.
        """
        stream = WKTTokenStream.from_text(text)
        geometry = self.read_geometry(stream, srid)

        token = stream.peek()
        if token is not None:
            raise TrailingDataError(
                f"Unexpected '{token.text}' after end of geometry",
                position=token.position,
            )

        return geometry

    def read_geometry(
        self, stream: WKTTokenStream, srid: int, depth: int = 0
    ) -> Geometry:
        """Read one tagged geometry from the current stream position."""
        if depth > self.max_depth:
            token = stream.peek()
            raise NestingTooDeepError(
                self.max_depth, position=token.position if token else None
            )
        header = self._read_header(stream, srid, depth)
        if header.is_empty:
            return header.build([])
        return self._body_readers[header.kind](stream, header)

    def _read_header(
        self, stream: WKTTokenStream, srid: int, depth: int
    ) -> _Header:
        token = stream.peek()
        keyword = stream.next_word()
        kind = kind_from_keyword(keyword)
        if kind is None:
            raise UnexpectedTokenError(
                "geometry type",
                keyword,
                position=token.position if token else None,
            )

        has_z = has_m = False
        word = stream.peek_word()
        if word is not None and word.upper() in _DIMENSIONS:
            has_z, has_m = _DIMENSIONS[stream.next_word().upper()]
            word = stream.peek_word()

        is_empty = False
        if word is not None:
            if word.upper() != _EMPTY:
                token = stream.peek()
                raise UnexpectedTokenError(
                    "dimension, EMPTY or '('",
                    word,
                    position=token.position if token else None,
                )
            stream.next_word()
            is_empty = True

        return _Header(kind, has_z, has_m, is_empty, srid, depth)

    def _read_list(
        self,
        stream: WKTTokenStream,
        read_item: Callable[[], Geometry],
    ) -> list[Geometry]:
        """Read '(' item {',' item} ')', or EMPTY for no items."""
        word = stream.peek_word()
        if word is not None and word.upper() == _EMPTY:
            stream.next_word()
            return []

        stream.expect_opener()
        items: list[Geometry] = []
        while True:
            items.append(read_item())
            if stream.next_closer_or_comma() == CLOSER:
                return items

    def _read_point(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        values = [stream.next_number() for _ in range(header.dimension)]
        return header.build(values, GeometryKind.POINT)

    def _read_point_list(self, stream: WKTTokenStream, header: _Header) -> list[Geometry]:
        return self._read_list(stream, lambda: self._read_point(stream, header))

    def _read_ring_list(self, stream: WKTTokenStream, header: _Header) -> list[Geometry]:
        return self._read_list(
            stream,
            lambda: header.build(
                self._read_point_list(stream, header), GeometryKind.LINESTRING
            ),
        )

    def _read_point_text(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        stream.expect_opener()
        point = self._read_point(stream, header)
        stream.expect_closer()
        return point

    def _read_curve_text(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        return header.build(self._read_point_list(stream, header))

    def _read_polygon_text(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        return header.build(self._read_ring_list(stream, header))

    def _read_multipoint_text(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        def read_member() -> Geometry:
            # Members may be written bare (1 2), parenthesised ((1 2)) or EMPTY
            word = stream.peek_word()
            if word is not None and word.upper() == _EMPTY:
                stream.next_word()
                return header.build([], GeometryKind.POINT)
            token = stream.peek()
            if token is not None and token.text == OPENER:
                return self._read_point_text(stream, header)
            return self._read_point(stream, header)

        return header.build(self._read_list(stream, read_member))

    def _read_multilinestring_text(
        self, stream: WKTTokenStream, header: _Header
    ) -> Geometry:
        return header.build(
            self._read_list(
                stream,
                lambda: header.build(
                    self._read_point_list(stream, header), GeometryKind.LINESTRING
                ),
            )
        )

    def _read_ring_lists_text(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        member_kind = _RING_MEMBERS[header.kind]
        return header.build(
            self._read_list(
                stream,
                lambda: header.build(self._read_ring_list(stream, header), member_kind),
            )
        )

    def _read_collection_text(self, stream: WKTTokenStream, header: _Header) -> Geometry:
        return header.build(
            self._read_list(
                stream,
                lambda: self.read_geometry(stream, header.srid, header.depth + 1),
            )
        )

    def _read_curve_members_text(
        self, stream: WKTTokenStream, header: _Header
    ) -> Geometry:
        def read_member() -> Geometry:
            # A bare point list is a LineString; anything else is tagged
            if stream.peek_is_opener_or_word():
                return header.build(
                    self._read_point_list(stream, header), GeometryKind.LINESTRING
                )
            return self.read_geometry(stream, header.srid, header.depth + 1)

        return header.build(self._read_list(stream, read_member))
