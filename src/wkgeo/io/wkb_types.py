"""Extended WKB type codes.

ISO WKB folds dimensionality into the type code as
``dimension_code * 1000 + base_kind`` where the dimension code is
0 (XY), 1 (XYZ), 2 (XYM) or 3 (XYZM).
"""

from __future__ import annotations

from typing import NamedTuple

from wkgeo.exceptions import UnsupportedWKBTypeError
from wkgeo.geometry.kinds import GeometryKind, kind_from_code

MAX_WKB_TYPE = 4000


class WKBType(NamedTuple):
    """A decoded WKB type code."""

    kind: GeometryKind
    has_z: bool
    has_m: bool


def decode_wkb_type(code: int) -> WKBType:
    """Split an extended WKB type code into kind and dimensionality.

    Args:
        code: The type code read from the stream.

    Returns:
        The geometry kind and its Z/M flags.

    Raises:
        UnsupportedWKBTypeError: If the code is outside [0, 4000) or its
            base kind is not a concrete geometry kind.

    Example:
        >>> decode_wkb_type(1001)
        WKBType(kind=<GeometryKind.POINT: 1>, has_z=True, has_m=False)
    """
    if code < 0 or code >= MAX_WKB_TYPE:
        raise UnsupportedWKBTypeError(code)

    base, dimension = code % 1000, code // 1000
    try:
        kind = kind_from_code(base)
    except UnsupportedWKBTypeError:
        # Report the full code, not just its base
        raise UnsupportedWKBTypeError(code) from None

    return WKBType(kind=kind, has_z=dimension in (1, 3), has_m=dimension in (2, 3))


def encode_wkb_type(kind: GeometryKind, has_z: bool, has_m: bool) -> int:
    """Compose the extended WKB type code for a kind and dimensionality."""
    dimension = (1 if has_z else 0) + (2 if has_m else 0)
    return dimension * 1000 + kind.value
