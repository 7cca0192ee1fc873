"""Tests for wkgeo.io.wkb_types module."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wkgeo.exceptions import UnsupportedWKBTypeError
from wkgeo.geometry.kinds import GeometryKind
from wkgeo.io.wkb_types import MAX_WKB_TYPE, WKBType, decode_wkb_type, encode_wkb_type


class TestDecodeWKBType:
    """Tests for decode_wkb_type()."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (1, WKBType(GeometryKind.POINT, has_z=False, has_m=False)),
            (1001, WKBType(GeometryKind.POINT, has_z=True, has_m=False)),
            (2002, WKBType(GeometryKind.LINESTRING, has_z=False, has_m=True)),
            (3003, WKBType(GeometryKind.POLYGON, has_z=True, has_m=True)),
            (17, WKBType(GeometryKind.TRIANGLE, has_z=False, has_m=False)),
            (1016, WKBType(GeometryKind.TIN, has_z=True, has_m=False)),
        ],
    )
    def test_known_codes(self, code: int, expected: WKBType) -> None:
        assert decode_wkb_type(code) == expected

    @pytest.mark.parametrize("code", [MAX_WKB_TYPE, 4001, -1, 2**32 - 1])
    def test_out_of_range_codes(self, code: int) -> None:
        with pytest.raises(UnsupportedWKBTypeError) as exc_info:
            decode_wkb_type(code)
        assert exc_info.value.code == code

    @pytest.mark.parametrize("code", [0, 11, 12, 14, 18, 999, 1011, 3999])
    def test_unknown_base_kinds_report_full_code(self, code: int) -> None:
        with pytest.raises(UnsupportedWKBTypeError, match=f"Unsupported WKB type: {code}"):
            decode_wkb_type(code)


class TestEncodeWKBType:
    """Tests for encode_wkb_type()."""

    def test_dimension_offsets(self) -> None:
        assert encode_wkb_type(GeometryKind.MULTIPOLYGON, False, False) == 6
        assert encode_wkb_type(GeometryKind.MULTIPOLYGON, True, False) == 1006
        assert encode_wkb_type(GeometryKind.MULTIPOLYGON, False, True) == 2006
        assert encode_wkb_type(GeometryKind.MULTIPOLYGON, True, True) == 3006

    @given(
        kind=st.sampled_from(list(GeometryKind)),
        has_z=st.booleans(),
        has_m=st.booleans(),
    )
    def test_decode_inverts_encode(
        self, kind: GeometryKind, has_z: bool, has_m: bool
    ) -> None:
        code = encode_wkb_type(kind, has_z, has_m)
        assert 0 <= code < MAX_WKB_TYPE
        assert decode_wkb_type(code) == WKBType(kind, has_z, has_m)
