"""Segment and ring predicates derived from the orientation predicate.

Everything here is built from three ingredients only: the injected
orientation predicate, exact float comparisons, and finiteness checks.
None of these functions may be called with non-finite coordinates;
validators filter those out first (see ``is_finite``).
"""

from __future__ import annotations

import enum
import math
from typing import TYPE_CHECKING

from geo_validity_check.predicates.orientation import (
    Orientation,
    OrientationPredicate,
    get_orientation,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from geo_validity_check.models.geometry import Coord


def is_finite(coord: Coord) -> bool:
    """Return ``True`` when neither component is NaN or infinite."""
    return math.isfinite(coord.x) and math.isfinite(coord.y)


class RingLocation(enum.Enum):
    """Location of a point relative to a closed ring."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_BOUNDARY = "on_boundary"


def _in_box(p: Coord, a: Coord, b: Coord) -> bool:
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)


class Predicates:
    """Robust geometric predicates over an injected orientation backend.

    Args:
        orientation: Orientation backend.  Defaults to the registered
            default backend (``"adaptive"``).
    """

    def __init__(self, orientation: OrientationPredicate | None = None) -> None:
        self.backend = orientation if orientation is not None else get_orientation()

    def orientation(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        return self.backend.orientation(a, b, c)

    def collinear(self, a: Coord, b: Coord, c: Coord) -> bool:
        return self.orientation(a, b, c) is Orientation.COLLINEAR

    def point_on_segment(self, p: Coord, a: Coord, b: Coord) -> bool:
        """Return ``True`` when *p* lies on the closed segment ``a-b``."""
        return _in_box(p, a, b) and self.collinear(a, b, p)

    # -- segment pairs ------------------------------------------------------

    def segments_intersect(self, p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
        """Return ``True`` when the closed segments share at least one point."""
        o1 = self.orientation(p1, p2, q1)
        o2 = self.orientation(p1, p2, q2)
        o3 = self.orientation(q1, q2, p1)
        o4 = self.orientation(q1, q2, p2)

        if o1 is not o2 and o3 is not o4:
            return True

        collinear = Orientation.COLLINEAR
        return (
            (o1 is collinear and _in_box(q1, p1, p2))
            or (o2 is collinear and _in_box(q2, p1, p2))
            or (o3 is collinear and _in_box(p1, q1, q2))
            or (o4 is collinear and _in_box(p2, q1, q2))
        )

    def segments_properly_cross(self, p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
        """Return ``True`` when the segments meet at one point interior to both."""
        o1 = self.orientation(p1, p2, q1)
        o2 = self.orientation(p1, p2, q2)
        o3 = self.orientation(q1, q2, p1)
        o4 = self.orientation(q1, q2, p2)

        if Orientation.COLLINEAR in (o1, o2, o3, o4):
            return False
        return o1 is not o2 and o3 is not o4

    def segments_overlap(self, p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
        """Return ``True`` when the segments share a sub-segment of positive length."""
        if p1 == p2 or q1 == q2:
            return False
        if not (self.collinear(p1, p2, q1) and self.collinear(p1, p2, q2)):
            return False

        # Collinear and non-degenerate: compare along the axis the line spans.
        if p1.x != p2.x:
            p_lo, p_hi = sorted((p1.x, p2.x))
            q_lo, q_hi = sorted((q1.x, q2.x))
        else:
            p_lo, p_hi = sorted((p1.y, p2.y))
            q_lo, q_hi = sorted((q1.y, q2.y))
        return max(p_lo, q_lo) < min(p_hi, q_hi)

    def segments_touch_only(self, p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
        """Return ``True`` when the segments share exactly one point, an endpoint."""
        return (
            self.segments_intersect(p1, p2, q1, q2)
            and not self.segments_properly_cross(p1, p2, q1, q2)
            and not self.segments_overlap(p1, p2, q1, q2)
        )

    # -- rings --------------------------------------------------------------

    def point_in_ring(self, pt: Coord, ring: Sequence[Coord]) -> RingLocation:
        """Locate *pt* relative to *ring* by counting crossings of a ray to +x.

        The ring is treated as closed whether or not its last coordinate
        repeats the first.  Whether an edge passes to the right of *pt* is
        decided by the orientation predicate, so points on or very near an
        edge are classified exactly.
        """
        if not ring:
            return RingLocation.OUTSIDE

        vertices = list(ring)
        if vertices[0] != vertices[-1]:
            vertices.append(vertices[0])

        crossings = 0
        for a, b in zip(vertices, vertices[1:]):
            if self.point_on_segment(pt, a, b):
                return RingLocation.ON_BOUNDARY
            if (a.y > pt.y) != (b.y > pt.y):
                turn = self.orientation(a, b, pt)
                if b.y > a.y and turn is Orientation.COUNTER_CLOCKWISE:
                    crossings += 1
                elif b.y < a.y and turn is Orientation.CLOCKWISE:
                    crossings += 1

        return RingLocation.INSIDE if crossings % 2 else RingLocation.OUTSIDE
