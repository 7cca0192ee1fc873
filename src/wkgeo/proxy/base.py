"""Lazy geometry proxies.

A proxy holds serialized WKB or WKT and its SRID, and stands in for the
geometry it encodes. The data is parsed the first time something needs the
geometry's structure; the SRID and the stored serialization are available
without parsing.

Loading is exactly-once: concurrent first accesses share one parse and all
see its result or its exception. A failed parse is not remembered, so the
next access tries again.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

from wkgeo.geometry.types import Geometry
from wkgeo.utils.logging import get_logger

if TYPE_CHECKING:
    from wkgeo.geometry.coordinates import CoordinateSystem
    from wkgeo.geometry.kinds import GeometryKind
    from wkgeo.io.byte_order import ByteOrder

logger = get_logger(__name__)

G = TypeVar("G", bound=Geometry)


@dataclass(frozen=True)
class RawGeometryPayload:
    """Serialized geometry data held by a proxy.

    Attributes:
        data: WKB bytes or WKT text.
        is_binary: True for WKB, False for WKT.
        srid: SRID the geometry is decoded with.
    """

    data: bytes | str
    is_binary: bool
    srid: int = 0


class _LoadAttempt:
    """One in-flight load, shared by every thread that waits on it."""

    __slots__ = ("done", "error", "result")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.result: Geometry | None = None
        self.error: BaseException | None = None


class GeometryProxy(Generic[G]):
    """Stand-in for a geometry that parses its payload on first use.

    Subclasses bind ``geometry_class`` to one concrete geometry type; loading
    fails with UnexpectedGeometryError if the payload encodes another kind.

    Usage:
        proxy = LineStringProxy.from_text("LINESTRING (0 0, 1 1)", srid=4326)
        proxy.srid  # no parsing
        proxy.as_text()  # no parsing, returns the stored text
        proxy.num_points  # parses once, then forwards
    """

    geometry_class: ClassVar[type[Geometry]] = Geometry

    def __init__(self, data: bytes | str, is_binary: bool, srid: int = 0) -> None:
        """Create an unloaded proxy.

        Args:
            data: WKB bytes when is_binary, otherwise WKT text.
            is_binary: Whether data is WKB.
            srid: SRID of the geometry.

        Raises:
            TypeError: If data does not match is_binary.
        """
        if is_binary:
            if not isinstance(data, bytes | bytearray | memoryview):
                raise TypeError(f"WKB payload must be bytes, got {type(data).__name__}")
            data = bytes(data)
        elif not isinstance(data, str):
            raise TypeError(f"WKT payload must be str, got {type(data).__name__}")

        self._payload = RawGeometryPayload(data=data, is_binary=is_binary, srid=srid)
        self._geometry: G | None = None
        self._attempt: _LoadAttempt | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_text(cls, wkt: str, srid: int = 0) -> Self:
        """Create a proxy over WKT."""
        return cls(wkt, is_binary=False, srid=srid)

    @classmethod
    def from_binary(cls, wkb: bytes, srid: int = 0) -> Self:
        """Create a proxy over WKB."""
        return cls(wkb, is_binary=True, srid=srid)

    @staticmethod
    def for_kind(kind: GeometryKind | int) -> type[GeometryProxy[Any]]:
        """Return the proxy class bound to a geometry kind.

        Raises:
            UnsupportedWKBTypeError: If kind is not a supported base type code.
        """
        from wkgeo.proxy.kinds import proxy_for_kind  # noqa: PLC0415

        return proxy_for_kind(kind)

    @property
    def payload(self) -> RawGeometryPayload:
        """Return the serialized data this proxy was created with."""
        return self._payload

    @property
    def is_loaded(self) -> bool:
        """Return whether the payload has been parsed."""
        return self._geometry is not None

    @property
    def geometry(self) -> G:
        """Return the underlying geometry, parsing the payload on first use.

        Raises:
            GeometryIOError: If the payload is malformed.
            InvalidGeometryError: If the payload violates the kind's structure.
            CoordinateSystemError: If the payload mixes dimensionality.
            UnexpectedGeometryError: If the payload is not of the proxied kind.
        """
        geometry = self._geometry
        if geometry is not None:
            return geometry
        return self._load()

    def _load(self) -> G:
        with self._lock:
            if self._geometry is not None:
                return self._geometry
            attempt = self._attempt
            owner = attempt is None
            if attempt is None:
                attempt = self._attempt = _LoadAttempt()

        if not owner:
            attempt.done.wait()
            if attempt.error is not None:
                raise attempt.error
            return attempt.result  # type: ignore[return-value]

        try:
            geometry = self._parse()
        except BaseException as e:
            attempt.error = e
            with self._lock:
                self._attempt = None
            attempt.done.set()
            raise

        with self._lock:
            self._geometry = geometry
            self._attempt = None
        attempt.result = geometry
        attempt.done.set()
        return geometry

    def _parse(self) -> G:
        payload = self._payload
        if payload.is_binary:
            geometry = self.geometry_class.from_binary(payload.data, payload.srid)  # type: ignore[arg-type]
        else:
            geometry = self.geometry_class.from_text(payload.data, payload.srid)  # type: ignore[arg-type]
        logger.debug(
            "Materialized geometry proxy",
            proxy=type(self).__name__,
            geometry_type=geometry.geometry_type,
            binary=payload.is_binary,
        )
        return geometry  # type: ignore[return-value]

    # Answered from the payload, without loading

    @property
    def srid(self) -> int:
        """Return the SRID the proxy was created with."""
        return self._payload.srid

    def as_text(self) -> str:
        """Return WKT; the stored text when the payload is WKT."""
        if not self._payload.is_binary:
            return self._payload.data  # type: ignore[return-value]
        return self.geometry.as_text()

    def as_binary(self, byte_order: ByteOrder | None = None) -> bytes:
        """Return WKB; the stored bytes when the payload is WKB.

        Args:
            byte_order: Requested byte order. The stored bytes are only
                returned as-is when no byte order is requested.
        """
        if self._payload.is_binary and byte_order is None:
            return self._payload.data  # type: ignore[return-value]
        return self.geometry.as_binary(byte_order)

    # Forwarded to the loaded geometry

    @property
    def coordinate_system(self) -> CoordinateSystem:
        return self.geometry.coordinate_system

    @property
    def kind(self) -> GeometryKind:
        return self.geometry.kind

    @property
    def geometry_type(self) -> str:
        return self.geometry.geometry_type

    @property
    def coordinate_dimension(self) -> int:
        return self.geometry.coordinate_dimension

    @property
    def spatial_dimension(self) -> int:
        return self.geometry.spatial_dimension

    @property
    def dimension(self) -> int:
        return self.geometry.dimension

    @property
    def is_3d(self) -> bool:
        return self.geometry.is_3d

    @property
    def is_measured(self) -> bool:
        return self.geometry.is_measured

    @property
    def is_empty(self) -> bool:
        return self.geometry.is_empty

    def with_srid(self, srid: int) -> G:
        return self.geometry.with_srid(srid)

    def swap_xy(self) -> G:
        return self.geometry.swap_xy()

    def to_array(self) -> list[Any]:
        return self.geometry.to_array()

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the proxy itself
        if name.startswith("_") or not hasattr(self.geometry_class, name):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return getattr(self.geometry, name)

    def __len__(self) -> int:
        return len(self.geometry)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.geometry)  # type: ignore[call-overload]

    def __getitem__(self, index: int) -> Any:
        return self.geometry[index]  # type: ignore[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GeometryProxy):
            other = other.geometry
        return self.geometry == other

    def __hash__(self) -> int:
        return hash(self.geometry)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "unloaded"
        encoding = "WKB" if self._payload.is_binary else "WKT"
        return f"{type(self).__name__}({encoding}, srid={self.srid}, {state})"
