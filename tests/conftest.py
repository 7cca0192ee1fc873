"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from wkgeo.config import Settings
from wkgeo.geometry import CoordinateSystem, LineString, Point, Polygon
from wkgeo.utils.logging import clear_correlation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        DEFAULT_SRID=0,
        WKB_BYTE_ORDER="little",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def square_ring() -> LineString:
    """A closed 2D unit square ring."""
    return LineString.of(
        Point.xy(0, 0), Point.xy(1, 0), Point.xy(1, 1), Point.xy(0, 1), Point.xy(0, 0)
    )


@pytest.fixture
def square(square_ring: LineString) -> Polygon:
    """A 2D unit square polygon without holes."""
    return Polygon.of(square_ring)


@pytest.fixture
def xyz() -> CoordinateSystem:
    """A coordinate system with Z."""
    return CoordinateSystem.xyz()
