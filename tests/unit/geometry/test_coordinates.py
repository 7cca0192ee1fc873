"""Tests for wkgeo.geometry.coordinates and wkgeo.geometry.kinds."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wkgeo.exceptions import UnsupportedWKBTypeError
from wkgeo.geometry.coordinates import CoordinateSystem
from wkgeo.geometry.kinds import GeometryKind, kind_from_code, kind_from_keyword


class TestCoordinateSystem:
    """Tests for the CoordinateSystem model."""

    @pytest.mark.parametrize(
        ("cs", "dimension", "spatial", "suffix"),
        [
            (CoordinateSystem.xy(), 2, 2, ""),
            (CoordinateSystem.xyz(), 3, 3, "Z"),
            (CoordinateSystem.xym(), 3, 2, "M"),
            (CoordinateSystem.xyzm(), 4, 3, "ZM"),
        ],
    )
    def test_dimensions(
        self, cs: CoordinateSystem, dimension: int, spatial: int, suffix: str
    ) -> None:
        assert cs.coordinate_dimension == dimension
        assert cs.spatial_dimension == spatial
        assert cs.dimension_suffix == suffix

    def test_is_immutable(self) -> None:
        cs = CoordinateSystem.xy()
        with pytest.raises(ValidationError):
            cs.srid = 4326  # type: ignore[misc]

    def test_with_srid(self) -> None:
        cs = CoordinateSystem.xyz(srid=4326)
        moved = cs.with_srid(3857)
        assert moved.srid == 3857
        assert moved.has_z
        assert cs.with_srid(4326) is cs

    def test_same_dimensions_ignores_srid(self) -> None:
        assert CoordinateSystem.xym(4326).same_dimensions(CoordinateSystem.xym(0))
        assert not CoordinateSystem.xym().same_dimensions(CoordinateSystem.xyz())

    def test_equality_and_hash(self) -> None:
        a = CoordinateSystem(has_z=True, srid=4326)
        b = CoordinateSystem.xyz(4326)
        assert a == b
        assert hash(a) == hash(b)


class TestGeometryKind:
    """Tests for GeometryKind lookups."""

    def test_codes(self) -> None:
        assert GeometryKind.POINT == 1
        assert GeometryKind.CURVEPOLYGON == 10
        assert GeometryKind.POLYHEDRALSURFACE == 15
        assert GeometryKind.TRIANGLE == 17

    def test_keyword_and_type_name(self) -> None:
        assert GeometryKind.MULTILINESTRING.keyword == "MULTILINESTRING"
        assert GeometryKind.MULTILINESTRING.type_name == "MultiLineString"
        assert GeometryKind.TIN.type_name == "TIN"

    def test_kind_from_code(self) -> None:
        assert kind_from_code(9) is GeometryKind.COMPOUNDCURVE

    @pytest.mark.parametrize("code", [0, 11, 12, 13, 14, 18])
    def test_abstract_and_unknown_codes(self, code: int) -> None:
        with pytest.raises(UnsupportedWKBTypeError):
            kind_from_code(code)

    def test_kind_from_keyword(self) -> None:
        assert kind_from_keyword("circularString") is GeometryKind.CIRCULARSTRING
        assert kind_from_keyword("MULTISURFACE") is None
