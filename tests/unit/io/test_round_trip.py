"""Property tests: the writers produce input the readers accept unchanged."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from wkgeo.geometry import (
    CoordinateSystem,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    Point,
    Polygon,
)
from wkgeo.io.byte_order import ByteOrder
from wkgeo.io.wkb_reader import WKBReader
from wkgeo.io.wkb_writer import WKBWriter
from wkgeo.io.wkt_reader import WKTReader
from wkgeo.io.wkt_writer import WKTWriter

coordinate_values = st.floats(allow_nan=False, allow_infinity=False, width=64)

coordinate_systems = st.builds(
    CoordinateSystem,
    has_z=st.booleans(),
    has_m=st.booleans(),
    srid=st.sampled_from([0, 4326, 3857]),
)


@st.composite
def points(draw: st.DrawFn, cs: CoordinateSystem) -> Point:
    values = draw(
        st.lists(
            coordinate_values,
            min_size=cs.coordinate_dimension,
            max_size=cs.coordinate_dimension,
        )
    )
    return Point.from_coordinates(cs, values)


@st.composite
def linestrings(draw: st.DrawFn, cs: CoordinateSystem) -> LineString:
    members = draw(st.lists(points(cs), min_size=2, max_size=6))
    return LineString(cs, tuple(members))


@st.composite
def geometries(draw: st.DrawFn) -> Geometry:
    cs = draw(coordinate_systems)
    simple = st.one_of(
        points(cs),
        st.just(Point.empty(cs)),
        linestrings(cs),
        st.builds(lambda ring: Polygon(cs, (ring,)), linestrings(cs)),
        st.builds(lambda ps: MultiPoint(cs, tuple(ps)), st.lists(points(cs), max_size=4)),
        st.builds(
            lambda ls: MultiLineString(cs, tuple(ls)),
            st.lists(linestrings(cs), max_size=3),
        ),
    )
    return draw(
        st.one_of(
            simple,
            st.builds(
                lambda gs: GeometryCollection(cs, tuple(gs)),
                st.lists(simple, max_size=3),
            ),
        )
    )


@given(geometry=geometries(), byte_order=st.sampled_from(list(ByteOrder)))
def test_wkb_round_trip(geometry: Geometry, byte_order: ByteOrder) -> None:
    data = WKBWriter(byte_order).write(geometry)
    assert WKBReader().read(data, srid=geometry.srid) == geometry


@given(geometry=geometries())
def test_wkt_round_trip(geometry: Geometry) -> None:
    text = WKTWriter().write(geometry)
    assert WKTReader().read(text, srid=geometry.srid) == geometry


@given(geometry=geometries())
def test_wkt_is_stable_after_one_round_trip(geometry: Geometry) -> None:
    text = WKTWriter().write(geometry)
    assert WKTWriter().write(WKTReader().read(text)) == text
