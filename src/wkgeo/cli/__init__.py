"""CLI module for wkgeo.

Provides the command-line interface for converting and inspecting
WKB and WKT geometries.
"""

from __future__ import annotations

from wkgeo.cli.main import ByteOrderOption, OutputFormat, app

__all__ = ["ByteOrderOption", "OutputFormat", "app"]
