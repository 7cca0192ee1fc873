"""Byte order detection for WKB encoding.

WKB coordinate decoding assumes 64-bit IEEE doubles. The machine byte order
is detected once per process and cached; the readers and writers look it up
when they are constructed, never per read.
"""

from __future__ import annotations

import functools
import struct
from enum import IntEnum

from wkgeo.exceptions import InvalidByteOrderError, UnsupportedPlatformError
from wkgeo.utils.logging import get_logger

logger = get_logger(__name__)

# 0x61626364 packs to ASCII "abcd" on big endian machines
_SAMPLE = 0x61626364
_SAMPLE_BIG = b"abcd"
_SAMPLE_LITTLE = b"dcba"


class ByteOrder(IntEnum):
    """WKB byte order marker values."""

    BIG_ENDIAN = 0
    LITTLE_ENDIAN = 1

    @property
    def struct_prefix(self) -> str:
        """Return the struct format prefix for this byte order."""
        return ">" if self is ByteOrder.BIG_ENDIAN else "<"

    @classmethod
    def from_marker(cls, value: int) -> ByteOrder:
        """Interpret a WKB byte order marker.

        Raises:
            InvalidByteOrderError: If the value is neither 0 nor 1.
        """
        if value == cls.BIG_ENDIAN:
            return cls.BIG_ENDIAN
        if value == cls.LITTLE_ENDIAN:
            return cls.LITTLE_ENDIAN
        raise InvalidByteOrderError(value)


def check_double_is_64_bit() -> None:
    """Verify the native double is an 8-byte value.

    Raises:
        UnsupportedPlatformError: If doubles are not 64 bits wide.
    """
    size = struct.calcsize("=d")
    if size != 8:  # noqa: PLR2004
        raise UnsupportedPlatformError(
            f"The double type is not 64 bit on this platform ({size} bytes)"
        )


def detect_byte_order(packed_sample: bytes) -> ByteOrder:
    """Classify the native packing of the sample value.

    Args:
        packed_sample: 0x61626364 packed as a native unsigned 32-bit integer.

    Raises:
        UnsupportedPlatformError: If the packing is neither big nor little endian.
    """
    if packed_sample == _SAMPLE_BIG:
        return ByteOrder.BIG_ENDIAN
    if packed_sample == _SAMPLE_LITTLE:
        return ByteOrder.LITTLE_ENDIAN
    raise UnsupportedPlatformError(
        "Cannot determine the machine byte order "
        f"(sample packed as {packed_sample!r})"
    )


@functools.cache
def machine_byte_order() -> ByteOrder:
    """Return the machine byte order, detected once per process.

    Raises:
        UnsupportedPlatformError: If doubles are not 64 bits wide or the
            byte order cannot be determined.
    """
    check_double_is_64_bit()
    byte_order = detect_byte_order(struct.pack("=L", _SAMPLE))
    logger.debug("Detected machine byte order", byte_order=byte_order.name)
    return byte_order
