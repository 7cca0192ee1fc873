"""Forward-only reader over a WKB byte buffer."""

from __future__ import annotations

import struct

from wkgeo.exceptions import UnexpectedEndOfStreamError
from wkgeo.io.byte_order import ByteOrder

_UINT32 = {order: struct.Struct(f"{order.struct_prefix}I") for order in ByteOrder}
_DOUBLE = {order: struct.Struct(f"{order.struct_prefix}d") for order in ByteOrder}


class WKBBuffer:
    """Cursor over an immutable byte buffer with explicit endianness per read.

    Each read advances the offset by its fixed width. Reading past the end
    raises UnexpectedEndOfStreamError and leaves the offset unchanged.
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        """Return the offset of the next unread byte."""
        return self._position

    @property
    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def is_at_end(self) -> bool:
        """Return whether every byte has been read."""
        return self._position >= len(self._data)

    def _take(self, size: int) -> int:
        """Reserve ``size`` bytes and return their starting offset."""
        available = self.remaining
        if size > available:
            raise UnexpectedEndOfStreamError(
                offset=self._position, requested=size, available=available
            )
        start = self._position
        self._position += size
        return start

    def read_byte(self) -> int:
        """Read one unsigned byte."""
        return self._data[self._take(1)]

    def read_uint32(self, byte_order: ByteOrder) -> int:
        """Read a 4-byte unsigned integer."""
        fmt = _UINT32[byte_order]
        return fmt.unpack_from(self._data, self._take(fmt.size))[0]

    def read_double(self, byte_order: ByteOrder) -> float:
        """Read an 8-byte IEEE double."""
        fmt = _DOUBLE[byte_order]
        return fmt.unpack_from(self._data, self._take(fmt.size))[0]

    def read_doubles(self, count: int, byte_order: ByteOrder) -> tuple[float, ...]:
        """Read ``count`` consecutive doubles."""
        start = self._take(8 * count)
        return struct.unpack_from(f"{byte_order.struct_prefix}{count}d", self._data, start)
