"""Validity rules for points, lines, triangles and rectangles.

- Point: the coordinate is finite.
- Line: both endpoints finite and distinct (a zero-length line is invalid).
- Triangle: vertices finite, pairwise distinct and not collinear.
- Rect: the defining ``min``/``max`` coordinates are finite, which makes
  all four implied corners finite.  Axis alignment is structural.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geo_validity_check.models.problems import (
    CoordinatePosition,
    LinePosition,
    PointPosition,
    Problem,
    RectPosition,
    TrianglePosition,
)
from geo_validity_check.predicates.segments import is_finite

if TYPE_CHECKING:
    from geo_validity_check.models.geometry import Line, Point, Rect, Triangle
    from geo_validity_check.models.problems import ProblemReportBuilder
    from geo_validity_check.predicates.segments import Predicates


def validate_point(point: Point, report: ProblemReportBuilder, predicates: Predicates) -> None:
    if not is_finite(point.coord):
        report.add(Problem.NOT_FINITE, PointPosition())


def validate_line(line: Line, report: ProblemReportBuilder, predicates: Predicates) -> None:
    for i, coord in enumerate(line.coords()):
        if not is_finite(coord):
            report.add(Problem.NOT_FINITE, LinePosition(CoordinatePosition(i)))

    if line.start == line.end:
        report.add(Problem.IDENTICAL_COORDS, LinePosition(CoordinatePosition(0)))


def validate_triangle(
    triangle: Triangle, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    """Report non-finite, repeated and collinear vertices.

    A repeated vertex is reported at the lower index of the pair: vertex 0
    when it equals vertex 1 or 2, vertex 1 when it equals vertex 2.
    Collinearity is only tested when all three vertices are finite.
    """
    a, b, c = triangle.coords()
    finite = True
    for i, coord in enumerate((a, b, c)):
        if not is_finite(coord):
            report.add(Problem.NOT_FINITE, TrianglePosition(CoordinatePosition(i)))
            finite = False

    if a == b or a == c:
        report.add(Problem.IDENTICAL_COORDS, TrianglePosition(CoordinatePosition(0)))
    if b == c:
        report.add(Problem.IDENTICAL_COORDS, TrianglePosition(CoordinatePosition(1)))

    if finite and predicates.collinear(a, b, c):
        report.add(Problem.COLLINEAR_COORDS, TrianglePosition())


def validate_rect(rect: Rect, report: ProblemReportBuilder, predicates: Predicates) -> None:
    for i, coord in enumerate((rect.min, rect.max)):
        if not is_finite(coord):
            report.add(Problem.NOT_FINITE, RectPosition(CoordinatePosition(i)))
