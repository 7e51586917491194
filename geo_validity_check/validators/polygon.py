"""Validity rules for polygons.

A polygon is valid when (OGC Simple Features, PostGIS semantics):

- its exterior and interior rings are each valid rings;
- every interior ring lies inside the exterior ring (touching the
  exterior at isolated points is allowed, sharing a segment is not);
- interior rings neither cross, nest inside one another, nor share a
  segment (touching at isolated points is allowed).

Each step adds its own problems; no step stops the others.  Steps that
rely on point-in-ring tests only run for rings where those tests are
defined (enough points, all finite).
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from geo_validity_check.models.geometry import Coord
from geo_validity_check.models.problems import (
    ExteriorRing,
    InteriorRing,
    PolygonPosition,
    Problem,
)
from geo_validity_check.predicates.segments import RingLocation, is_finite
from geo_validity_check.validators.ring import RingChain, validate_ring

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from geo_validity_check.models.geometry import Polygon
    from geo_validity_check.models.problems import ProblemReportBuilder
    from geo_validity_check.predicates.segments import Predicates
    from geo_validity_check.validators.ring import Segment


def validate_polygon(
    polygon: Polygon, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    exterior = validate_ring(
        polygon.exterior,
        report,
        predicates,
        lambda at: PolygonPosition(ExteriorRing(), at),
    )
    interiors = [
        validate_ring(
            ring,
            report,
            predicates,
            lambda at, k=k: PolygonPosition(InteriorRing(k), at),
        )
        for k, ring in enumerate(polygon.interiors)
    ]

    if exterior.is_usable():
        for k, interior in enumerate(interiors):
            problem = containment_problem(exterior, interior, predicates)
            if problem is Problem.INTERIOR_RING_NOT_CONTAINED:
                report.add(problem, PolygonPosition(InteriorRing(k)))
            elif problem is not None:
                report.add(problem, PolygonPosition(InteriorRing(k), other_ring=ExteriorRing()))

    for (i, first), (j, second) in itertools.combinations(enumerate(interiors), 2):
        if not (first.is_usable() and second.is_usable()):
            continue
        problem = interior_rings_problem(first, second, predicates)
        if problem is not None:
            report.add(problem, PolygonPosition(InteriorRing(i), other_ring=InteriorRing(j)))


# ---------------------------------------------------------------------------
# Ring relations
# ---------------------------------------------------------------------------


def rings_properly_cross(a: RingChain, b: RingChain, predicates: Predicates) -> bool:
    return any(
        predicates.segments_properly_cross(s.start, s.end, t.start, t.end)
        for s in a.finite_segments()
        for t in b.finite_segments()
    )


def rings_share_segment(a: RingChain, b: RingChain, predicates: Predicates) -> bool:
    return any(
        predicates.segments_overlap(s.start, s.end, t.start, t.end)
        for s in a.finite_segments()
        for t in b.finite_segments()
    )


def has_vertex_inside(a: RingChain, b: RingChain, predicates: Predicates) -> bool:
    """Return ``True`` when a finite vertex of *a* lies strictly inside *b*."""
    return any(
        is_finite(v) and predicates.point_in_ring(v, b.vertices) is RingLocation.INSIDE
        for v in a.vertices
    )


# ---------------------------------------------------------------------------
# Edge pieces
# ---------------------------------------------------------------------------


def _midpoint(p: Coord, q: Coord) -> Coord:
    # Halve first so huge coordinates cannot overflow.
    return Coord(p.x / 2 + q.x / 2, p.y / 2 + q.y / 2)


def _distance_along(segment: Segment) -> Callable[[Coord], float]:
    start = segment.start
    if start.x != segment.end.x:
        return lambda p: abs(p.x - start.x)
    return lambda p: abs(p.y - start.y)


def edge_pieces(
    ring: RingChain, others: Sequence[RingChain], predicates: Predicates
) -> Iterator[tuple[Coord, Coord]]:
    """Yield the pieces of *ring*'s segments that leave the boundary of *others*.

    Each finite segment is cut at every vertex of *others* lying on it,
    and pieces running along a segment of *others* are dropped.  When no
    segment of *ring* properly crosses a segment of *others*, the open
    part of each remaining piece meets no ring of *others*, so one point
    of it (its midpoint) tells whether the whole piece is inside or
    outside each of them.
    """
    cut_points = [v for other in others for v in other.vertices if is_finite(v)]
    other_segments = [s for other in others for s in other.finite_segments()]

    for segment in ring.finite_segments():
        cuts = {segment.start, segment.end}
        cuts.update(
            v for v in cut_points if predicates.point_on_segment(v, segment.start, segment.end)
        )
        points = sorted(cuts, key=_distance_along(segment))
        for p, q in zip(points, points[1:]):
            if any(predicates.segments_overlap(p, q, t.start, t.end) for t in other_segments):
                continue
            yield p, q


def piece_midpoints(
    ring: RingChain, others: Sequence[RingChain], predicates: Predicates
) -> Iterator[Coord]:
    for p, q in edge_pieces(ring, others, predicates):
        yield _midpoint(p, q)


def has_piece_at(
    a: RingChain, b: RingChain, location: RingLocation, predicates: Predicates
) -> bool:
    """Return ``True`` when some edge piece of *a* lies at *location* relative to *b*.

    Only meaningful when *a* does not properly cross *b*.
    """
    return any(
        predicates.point_in_ring(m, b.vertices) is location
        for m in piece_midpoints(a, [b], predicates)
    )


def containment_problem(
    exterior: RingChain, interior: RingChain, predicates: Predicates
) -> Problem | None:
    """Classify how *interior* sits in *exterior* (which must be usable).

    Reported once per ring: ``INTERIOR_RING_NOT_CONTAINED`` when a vertex
    falls outside, a segment properly crosses the exterior, or a piece of
    a segment runs outside between two boundary points; otherwise
    ``RINGS_TOUCH_ON_A_LINE`` when the two rings share a segment.
    """
    outside = any(
        is_finite(v) and predicates.point_in_ring(v, exterior.vertices) is RingLocation.OUTSIDE
        for v in interior.vertices
    )
    if outside or rings_properly_cross(interior, exterior, predicates):
        return Problem.INTERIOR_RING_NOT_CONTAINED
    if has_piece_at(interior, exterior, RingLocation.OUTSIDE, predicates):
        return Problem.INTERIOR_RING_NOT_CONTAINED
    if rings_share_segment(interior, exterior, predicates):
        return Problem.RINGS_TOUCH_ON_A_LINE
    return None


def interior_rings_problem(
    first: RingChain, second: RingChain, predicates: Predicates
) -> Problem | None:
    """Classify two usable interior rings; the first matching relation wins.

    The rings overlap when a vertex or an edge piece of either lies
    strictly inside the other.
    """
    if rings_properly_cross(first, second, predicates):
        return Problem.INTERIOR_RINGS_CROSS
    if has_vertex_inside(first, second, predicates) or has_vertex_inside(
        second, first, predicates
    ):
        return Problem.INTERIOR_RINGS_OVERLAP
    if has_piece_at(first, second, RingLocation.INSIDE, predicates) or has_piece_at(
        second, first, RingLocation.INSIDE, predicates
    ):
        return Problem.INTERIOR_RINGS_OVERLAP
    if rings_share_segment(first, second, predicates):
        return Problem.RINGS_TOUCH_ON_A_LINE
    return None
