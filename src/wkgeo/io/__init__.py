"""WKB and WKT encoding and decoding.

Key Components:
    - ByteOrder, machine_byte_order: Byte order markers and platform detection
    - WKBBuffer: Forward-only cursor over WKB bytes
    - decode_wkb_type, encode_wkb_type: Extended (ISO) WKB type codes
    - WKBReader, WKBWriter: Binary format
    - tokenize, WKTTokenStream: WKT tokens and the cursor the grammar reads
    - WKTReader, WKTWriter: Text format

Example:
    from wkgeo.io import WKBReader, WKTReader

    point = WKTReader().read("POINT Z (1 2 3)", srid=4326)
    same = WKBReader().read(point.as_binary(), srid=4326)
    assert same == point
"""

from wkgeo.io.byte_order import (
    ByteOrder,
    check_double_is_64_bit,
    detect_byte_order,
    machine_byte_order,
)
from wkgeo.io.wkb_buffer import WKBBuffer
from wkgeo.io.wkb_reader import WKBReader
from wkgeo.io.wkb_types import MAX_WKB_TYPE, WKBType, decode_wkb_type, encode_wkb_type
from wkgeo.io.wkb_writer import WKBWriter
from wkgeo.io.wkt_reader import WKTReader
from wkgeo.io.wkt_tokenizer import Token, TokenKind, WKTTokenStream, tokenize
from wkgeo.io.wkt_writer import WKTWriter, format_number

__all__ = [
    "MAX_WKB_TYPE",
    "ByteOrder",
    "Token",
    "TokenKind",
    "WKBBuffer",
    "WKBReader",
    "WKBType",
    "WKBWriter",
    "WKTReader",
    "WKTTokenStream",
    "WKTWriter",
    "check_double_is_64_bit",
    "decode_wkb_type",
    "detect_byte_order",
    "encode_wkb_type",
    "format_number",
    "machine_byte_order",
    "tokenize",
]
