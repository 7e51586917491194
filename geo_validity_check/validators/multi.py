"""Validity rules for MultiPoint, MultiLineString and MultiPolygon.

Each member is validated with its single-geometry validator and its
problems are re-positioned under the member index.  MultiPolygon adds a
pairwise check over all unordered member pairs: two members may touch
at isolated points, but must not be identical, cross, overlap, or share
a boundary segment.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from geo_validity_check.models.problems import (
    MultiLineStringPosition,
    MultiPointPosition,
    MultiPolygonPosition,
    Problem,
)
from geo_validity_check.predicates.segments import RingLocation, is_finite
from geo_validity_check.validators.linear import validate_linestring
from geo_validity_check.validators.polygon import (
    piece_midpoints,
    rings_properly_cross,
    rings_share_segment,
    validate_polygon,
)
from geo_validity_check.validators.ring import RingChain

if TYPE_CHECKING:
    from geo_validity_check.models.geometry import (
        Coord,
        MultiLineString,
        MultiPoint,
        MultiPolygon,
        Polygon,
    )
    from geo_validity_check.models.problems import ProblemReportBuilder
    from geo_validity_check.predicates.segments import Predicates


def validate_multipoint(
    multipoint: MultiPoint, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    for i, point in enumerate(multipoint.points):
        if not is_finite(point.coord):
            report.add(Problem.NOT_FINITE, MultiPointPosition(i))


def validate_multilinestring(
    multilinestring: MultiLineString, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    for i, linestring in enumerate(multilinestring.linestrings):
        with report.nested(lambda pos, i=i: MultiLineStringPosition(i, pos)):
            validate_linestring(linestring, report, predicates)


def validate_multipolygon(
    multipolygon: MultiPolygon, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    for i, polygon in enumerate(multipolygon.polygons):
        with report.nested(lambda pos, i=i: MultiPolygonPosition(i, pos)):
            validate_polygon(polygon, report, predicates)

    for (i, first), (j, second) in itertools.combinations(enumerate(multipolygon.polygons), 2):
        problem = polygons_problem(first, second, predicates)
        if problem is not None:
            report.add(problem, MultiPolygonPosition(i, other_member=j))


# ---------------------------------------------------------------------------
# Polygon pairs
# ---------------------------------------------------------------------------


def _usable_rings(polygon: Polygon) -> tuple[RingChain | None, list[RingChain]]:
    exterior = RingChain.from_coords(polygon.exterior.coords)
    holes = [RingChain.from_coords(r.coords) for r in polygon.interiors]
    return (
        exterior if exterior.is_usable() else None,
        [h for h in holes if h.is_usable()],
    )


def _same_ring(a: Polygon, b: Polygon) -> bool:
    first, second = a.exterior.coords, b.exterior.coords
    return len(first) == len(second) and all(p == q for p, q in zip(first, second))


def _in_area(
    pt: Coord, exterior: RingChain, holes: list[RingChain], predicates: Predicates
) -> bool:
    """Return ``True`` when *pt* lies strictly inside the polygon area."""
    if predicates.point_in_ring(pt, exterior.vertices) is not RingLocation.INSIDE:
        return False
    return all(
        predicates.point_in_ring(pt, hole.vertices) is RingLocation.OUTSIDE for hole in holes
    )


def _reaches_into_area(
    ring: RingChain, exterior: RingChain, holes: list[RingChain], predicates: Predicates
) -> bool:
    """Return ``True`` when a vertex or an edge piece of *ring* lies inside the area."""
    points = itertools.chain(
        ring.vertices, piece_midpoints(ring, [exterior, *holes], predicates)
    )
    return any(_in_area(pt, exterior, holes, predicates) for pt in points)


def polygons_problem(first: Polygon, second: Polygon, predicates: Predicates) -> Problem | None:
    """Classify two MultiPolygon members; the first matching relation wins.

    Only members whose exterior ring is usable (enough points, all
    finite) are compared; their own problems are reported per member.
    Exteriors crossing each other is ``POLYGONS_CROSS``; any other proper
    crossing involves a hole and means the areas overlap.
    """
    first_exterior, first_holes = _usable_rings(first)
    second_exterior, second_holes = _usable_rings(second)
    if first_exterior is None or second_exterior is None:
        return None

    if _same_ring(first, second):
        return Problem.DUPLICATE_POLYGON
    if rings_properly_cross(first_exterior, second_exterior, predicates):
        return Problem.POLYGONS_CROSS
    if any(
        rings_properly_cross(a, b, predicates)
        for a, b in itertools.chain(
            itertools.product((first_exterior, *first_holes), second_holes),
            itertools.product(first_holes, (second_exterior,)),
        )
    ):
        return Problem.POLYGONS_OVERLAP
    if _reaches_into_area(
        first_exterior, second_exterior, second_holes, predicates
    ) or _reaches_into_area(second_exterior, first_exterior, first_holes, predicates):
        return Problem.POLYGONS_OVERLAP
    if any(
        rings_share_segment(a, b, predicates)
        for a in (first_exterior, *first_holes)
        for b in (second_exterior, *second_holes)
    ):
        return Problem.POLYGONS_TOUCH_ON_A_LINE
    return None
