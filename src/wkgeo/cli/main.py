"""wkgeo CLI - convert and inspect WKB and WKT geometries.

Input is either WKT or hexadecimal WKB; the format is detected from the text.
Pass "-" to read the input from stdin.
"""

from __future__ import annotations

import json
import string
import sys
from enum import Enum
from typing import Annotated, Any

import typer

from wkgeo import __version__
from wkgeo.config import ConfigError, settings
from wkgeo.exceptions import GeometryError
from wkgeo.geometry.types import Geometry
from wkgeo.io.byte_order import ByteOrder, machine_byte_order
from wkgeo.io.wkb_reader import WKBReader
from wkgeo.io.wkb_writer import WKBWriter
from wkgeo.io.wkt_reader import WKTReader
from wkgeo.utils.logging import (
    configure_logging,
    get_logger,
    set_correlation_context,
)

app = typer.Typer(
    name="wkgeo",
    help="wkgeo: Well-Known Binary and Well-Known Text geometry tools",
    add_completion=False,
)

_HEX_DIGITS = frozenset(string.hexdigits)


class OutputFormat(str, Enum):
    """Serialization written by convert."""

    wkt = "wkt"
    wkb = "wkb"  # hexadecimal


class ByteOrderOption(str, Enum):
    """WKB byte order choice."""

    native = "native"
    big = "big"
    little = "little"


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"wkgeo {__version__}")


@app.command()
def convert(
    geometry_input: Annotated[
        str,
        typer.Argument(
            metavar="INPUT", help="WKT or hexadecimal WKB, or '-' to read stdin"
        ),
    ],
    to: Annotated[
        OutputFormat, typer.Option("--to", "-t", help="Output format")
    ] = OutputFormat.wkt,
    srid: Annotated[
        int | None,
        typer.Option("--srid", help="SRID of the input (default: DEFAULT_SRID)"),
    ] = None,
    byte_order: Annotated[
        ByteOrderOption | None,
        typer.Option(
            "--byte-order", help="WKB output byte order (default: WKB_BYTE_ORDER)"
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
) -> None:
    """Convert a geometry between WKT and hexadecimal WKB."""
    _configure_logging(verbose)

    logger = get_logger(__name__)

    geometry = _read_or_exit(geometry_input, srid)
    try:
        if to is OutputFormat.wkt:
            output = geometry.as_text()
        else:
            output = WKBWriter(_resolve_byte_order(byte_order)).write_hex(geometry)
    except (ConfigError, GeometryError) as e:
        logger.info("Failed to encode geometry", error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(output)


@app.command()
def info(
    geometry_input: Annotated[
        str,
        typer.Argument(
            metavar="INPUT", help="WKT or hexadecimal WKB, or '-' to read stdin"
        ),
    ],
    srid: Annotated[
        int | None,
        typer.Option("--srid", help="SRID of the input (default: DEFAULT_SRID)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
) -> None:
    """Describe a geometry: kind, dimensions, SRID and emptiness."""
    _configure_logging(verbose)

    geometry = _read_or_exit(geometry_input, srid)
    summary = _summarize(geometry)

    if json_output:
        typer.echo(json.dumps(summary))
        return

    for key, value in summary.items():
        typer.echo(f"{key}: {value}")


# =============================================================================
# Helpers
# =============================================================================


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


def _is_hex_wkb(text: str) -> bool:
    # WKB starts with its byte order marker, 00 or 01
    return (
        len(text) >= 2
        and len(text) % 2 == 0
        and text[:2] in ("00", "01")
        and all(c in _HEX_DIGITS for c in text)
    )


def _read_geometry(geometry_input: str, srid: int) -> Geometry:
    """Decode WKT or hexadecimal WKB, detecting which one the text is."""
    text = sys.stdin.read() if geometry_input == "-" else geometry_input
    text = text.strip()

    if _is_hex_wkb(text):
        set_correlation_context(source="wkb", srid=srid)
        return WKBReader().read_hex(text, srid)

    set_correlation_context(source="wkt", srid=srid)
    return WKTReader().read(text, srid)


def _read_or_exit(geometry_input: str, srid: int | None) -> Geometry:
    logger = get_logger(__name__)
    if srid is None:
        srid = settings.DEFAULT_SRID

    try:
        return _read_geometry(geometry_input, srid)
    except GeometryError as e:
        logger.info("Failed to decode geometry", error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _resolve_byte_order(option: ByteOrderOption | None) -> ByteOrder | None:
    if option is None:
        return None
    if option is ByteOrderOption.big:
        return ByteOrder.BIG_ENDIAN
    if option is ByteOrderOption.little:
        return ByteOrder.LITTLE_ENDIAN
    return machine_byte_order()


def _summarize(geometry: Geometry) -> dict[str, Any]:
    summary: dict[str, Any] = {
        "type": geometry.geometry_type,
        "srid": geometry.srid,
        "empty": geometry.is_empty,
        "dimension": geometry.dimension,
        "coordinate_dimension": geometry.coordinate_dimension,
        "has_z": geometry.is_3d,
        "has_m": geometry.is_measured,
    }
    members = getattr(geometry, "members", None)
    if members is not None:
        summary["members"] = len(members)
    return summary
