"""Geometry validity checking.

Checks planar geometries against the OGC Simple Features validity rules
and reports every violation with its position, instead of a bare
yes/no answer.  Geometric decisions rely on exact orientation tests, so
nearly collinear or touching configurations are classified correctly.
"""

from geo_validity_check.models.geometry import (
    Coord,
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
    Triangle,
)
from geo_validity_check.models.problems import Problem, ProblemAtPosition, ProblemReport
from geo_validity_check.validators import (
    UnsupportedGeometryError,
    explain_invalidity,
    is_valid,
    validate,
    validity_report,
)

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "Geometry",
    "GeometryCollection",
    "Line",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Problem",
    "ProblemAtPosition",
    "ProblemReport",
    "Rect",
    "Triangle",
    "UnsupportedGeometryError",
    "explain_invalidity",
    "is_valid",
    "validate",
    "validity_report",
]
