"""Custom exceptions for geometry I/O.

These exceptions carry the context needed to report malformed WKB/WKT input
precisely: stream offsets, offending type codes, and the literal token that
broke the grammar. None of them derive from ValueError, so they pass through
validation layers unchanged.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base exception for all wkgeo errors."""


class GeometryIOError(GeometryError):
    """Raised when serialized geometry data cannot be decoded."""


class UnsupportedPlatformError(GeometryIOError):
    """Raised when the platform cannot encode or decode WKB.

    This error is raised when:
    - The native byte order is neither big nor little endian
    - The native double is not a 64-bit IEEE value
    """


class UnexpectedEndOfStreamError(GeometryIOError):
    """Raised when a WKB read runs past the end of the buffer."""

    def __init__(self, *, offset: int, requested: int, available: int) -> None:
        """Initialize with the failed read's position.

        Args:
            offset: Buffer offset at which the read was attempted.
            requested: Number of bytes the read needed.
            available: Number of bytes left in the buffer.
        """
        self.offset = offset
        self.requested = requested
        self.available = available
        super().__init__(
            f"Unexpected end of stream: needed {requested} byte(s) at offset "
            f"{offset}, {available} available"
        )


class InvalidByteOrderError(GeometryIOError):
    """Raised when a WKB byte order marker is neither 0 nor 1."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid WKB byte order marker: {value}")


class UnsupportedWKBTypeError(GeometryIOError):
    """Raised when a WKB type code is out of range or names no known kind."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unsupported WKB type: {code}")


class TrailingDataError(GeometryIOError):
    """Raised when input remains after a complete top-level geometry."""

    def __init__(self, message: str, *, position: int) -> None:
        self.position = position
        super().__init__(f"{message} (position: {position})")


class NestingTooDeepError(GeometryIOError):
    """Raised when members nest deeper than the reader allows."""

    def __init__(self, limit: int, *, position: int | None = None) -> None:
        self.limit = limit
        self.position = position
        super().__init__(
            f"Geometry nesting exceeds {limit} level(s) (position: {position})"
        )


class UnexpectedTokenError(GeometryIOError):
    """Raised when a WKT token does not fit the grammar.

    Attributes:
        expected: Human-readable description of what the grammar wanted.
        found: Literal text of the token encountered, or None at end of stream.
        position: Character offset of the token, or None at end of stream.
    """

    def __init__(
        self,
        expected: str,
        found: str | None,
        *,
        position: int | None = None,
    ) -> None:
        self.expected = expected
        self.found = found
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the message with the literal offending token."""
        if self.found is None:
            return f"Expected {self.expected} but encountered end of stream"
        return (
            f"Expected {self.expected} but encountered '{self.found}' "
            f"(position: {self.position})"
        )


class InvalidGeometryError(GeometryError):
    """Raised when decoded data does not describe a constructible geometry.

    This error is raised when:
    - A curve has too few points for its kind
    - A circular string has an even number of points
    - A triangle ring does not have exactly four points
    - Consecutive compound curve members do not share endpoints
    """


class EmptyGeometryError(GeometryError):
    """Raised when an operation needs a non-empty geometry."""


class CoordinateSystemError(GeometryError):
    """Raised when the members of a geometry mix dimensionality."""


class UnexpectedGeometryError(GeometryError):
    """Raised when a geometry is not of the kind the caller requires."""
