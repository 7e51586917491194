"""Shared pytest fixtures for the geometry validity test suite."""

from __future__ import annotations

import pytest

from geo_validity_check.models.geometry import LineString, MultiPolygon, Polygon
from geo_validity_check.predicates.orientation import AdaptiveOrientation, ExactOrientation
from geo_validity_check.predicates.segments import Predicates

# ---------------------------------------------------------------------------
# Coordinate fixtures
# ---------------------------------------------------------------------------

SQUARE = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (0.0, 0.0)]

LEAKING_EXTERIOR = [(0.5, 0.5), (3.0, 0.5), (3.0, 2.5), (0.5, 2.5), (0.5, 0.5)]

# Vertex (3.5, 1) lies outside LEAKING_EXTERIOR.
LEAKING_HOLE = [(1.0, 1.0), (1.0, 2.0), (2.5, 2.0), (3.5, 1.0), (1.0, 1.0)]

BOWTIE = [(0.0, 0.0), (4.0, 0.0), (0.0, 2.0), (4.0, 2.0), (0.0, 0.0)]


def square(x0: float, y0: float, size: float) -> list[tuple[float, float]]:
    """Return a closed, counter-clockwise axis-aligned square ring."""
    return [
        (x0, y0),
        (x0 + size, y0),
        (x0 + size, y0 + size),
        (x0, y0 + size),
        (x0, y0),
    ]


# ---------------------------------------------------------------------------
# Predicate fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def exact_predicates() -> Predicates:
    """Predicates backed by exact rational orientation."""
    return Predicates(ExactOrientation())


@pytest.fixture()
def adaptive_predicates() -> Predicates:
    """Predicates backed by the adaptive (default) orientation."""
    return Predicates(AdaptiveOrientation())


@pytest.fixture(params=["exact", "adaptive"])
def predicates(request: pytest.FixtureRequest) -> Predicates:
    """Predicates over each built-in orientation backend."""
    if request.param == "exact":
        return Predicates(ExactOrientation())
    return Predicates(AdaptiveOrientation())


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_polygon() -> Polygon:
    """A valid 4x4 square polygon without holes."""
    return Polygon(LineString(SQUARE))


@pytest.fixture()
def polygon_with_hole() -> Polygon:
    """A valid 4x4 square polygon with one interior ring."""
    return Polygon(LineString(SQUARE), (LineString(square(1.0, 1.0, 2.0)),))


@pytest.fixture()
def leaking_hole_polygon() -> Polygon:
    """A rectangle whose interior ring leaves the exterior ring."""
    return Polygon(LineString(LEAKING_EXTERIOR), (LineString(LEAKING_HOLE),))


@pytest.fixture()
def duplicated_leaking_multipolygon(leaking_hole_polygon: Polygon) -> MultiPolygon:
    """Two identical copies of the leaking-hole polygon."""
    return MultiPolygon((leaking_hole_polygon, leaking_hole_polygon))
