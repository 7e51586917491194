"""Validity rules for open linestrings.

A linestring is valid when it has at least two coordinates, every
coordinate is finite, and at least two of them differ.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geo_validity_check.core.constants import MIN_LINESTRING_COORDS
from geo_validity_check.models.problems import (
    CoordinatePosition,
    LineStringPosition,
    Problem,
)
from geo_validity_check.predicates.segments import is_finite

if TYPE_CHECKING:
    from geo_validity_check.models.geometry import LineString
    from geo_validity_check.models.problems import ProblemReportBuilder
    from geo_validity_check.predicates.segments import Predicates


def validate_linestring(
    linestring: LineString, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    """Report non-finite coordinates, then too-few or all-equal points.

    ``ALL_POINTS_EQUAL`` needs at least two coordinates, all finite: with
    fewer, ``TOO_FEW_POINTS`` already covers it, and a non-finite
    coordinate is never equal to anything.
    """
    coords = linestring.coords

    all_finite = True
    for i, coord in enumerate(coords):
        if not is_finite(coord):
            report.add(Problem.NOT_FINITE, LineStringPosition(CoordinatePosition(i)))
            all_finite = False

    if len(coords) < MIN_LINESTRING_COORDS:
        report.add(Problem.TOO_FEW_POINTS, LineStringPosition())
    elif all_finite and all(c == coords[0] for c in coords[1:]):
        report.add(Problem.ALL_POINTS_EQUAL, LineStringPosition())
