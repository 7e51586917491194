"""Data models.

Defines the data structures used throughout the engine:
- Geometry types: Coord, Point, Line, Triangle, Rect, LineString, Polygon,
  MultiPoint, MultiLineString, MultiPolygon, GeometryCollection
- Problem report: Problem, positions, ProblemAtPosition, ProblemReport
- Report schema: pydantic ValidityReport for structured output
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
from geo_validity_check.models.problems import (
    CoordinatePosition,
    ExteriorRing,
    GeometryCollectionPosition,
    InteriorRing,
    LinePosition,
    LineStringPosition,
    MultiLineStringPosition,
    MultiPointPosition,
    MultiPolygonPosition,
    PointPosition,
    PolygonPosition,
    Problem,
    ProblemAtPosition,
    ProblemPosition,
    ProblemReport,
    RectPosition,
    SegmentsPosition,
    TrianglePosition,
)

__all__ = [
    "Coord",
    "CoordinatePosition",
    "ExteriorRing",
    "Geometry",
    "GeometryCollection",
    "GeometryCollectionPosition",
    "InteriorRing",
    "Line",
    "LinePosition",
    "LineString",
    "LineStringPosition",
    "MultiLineString",
    "MultiLineStringPosition",
    "MultiPoint",
    "MultiPointPosition",
    "MultiPolygon",
    "MultiPolygonPosition",
    "Point",
    "PointPosition",
    "Polygon",
    "PolygonPosition",
    "Problem",
    "ProblemAtPosition",
    "ProblemPosition",
    "ProblemReport",
    "Rect",
    "RectPosition",
    "SegmentsPosition",
    "Triangle",
    "TrianglePosition",
]
