"""Coordinate system descriptor for geometries.

This module provides an immutable Pydantic model describing the
dimensionality (Z and/or M) and spatial reference of a geometry. Every
geometry and every member of a composite geometry carries one.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field


class CoordinateSystem(BaseModel, frozen=True):
    """Dimensionality and spatial reference of a geometry.

    Attributes:
        has_z: Whether coordinates carry a Z (elevation) value.
        has_m: Whether coordinates carry an M (measure) value.
        srid: Spatial reference identifier; 0 when unknown.
    """

    has_z: bool = Field(default=False, description="Coordinates carry Z")
    has_m: bool = Field(default=False, description="Coordinates carry M")
    srid: int = Field(default=0, description="Spatial reference identifier")

    @property
    def coordinate_dimension(self) -> int:
        """Return the number of values per coordinate (2 to 4)."""
        return 2 + int(self.has_z) + int(self.has_m)

    @property
    def spatial_dimension(self) -> int:
        """Return the number of spatial values per coordinate (2 or 3)."""
        return 3 if self.has_z else 2

    @property
    def dimension_suffix(self) -> str:
        """Return the WKT dimension keyword: "", "Z", "M" or "ZM"."""
        return ("Z" if self.has_z else "") + ("M" if self.has_m else "")

    def with_srid(self, srid: int) -> CoordinateSystem:
        """Return a copy of this coordinate system with another SRID."""
        if srid == self.srid:
            return self
        return CoordinateSystem(has_z=self.has_z, has_m=self.has_m, srid=srid)

    def same_dimensions(self, other: CoordinateSystem) -> bool:
        """Check whether two coordinate systems agree on Z and M."""
        return self.has_z == other.has_z and self.has_m == other.has_m

    @classmethod
    def xy(cls, srid: int = 0) -> Self:
        """Create a 2D coordinate system."""
        return cls(has_z=False, has_m=False, srid=srid)

    @classmethod
    def xyz(cls, srid: int = 0) -> Self:
        """Create a coordinate system with Z."""
        return cls(has_z=True, has_m=False, srid=srid)

    @classmethod
    def xym(cls, srid: int = 0) -> Self:
        """Create a coordinate system with M."""
        return cls(has_z=False, has_m=True, srid=srid)

    @classmethod
    def xyzm(cls, srid: int = 0) -> Self:
        """Create a coordinate system with Z and M."""
        return cls(has_z=True, has_m=True, srid=srid)
