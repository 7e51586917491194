"""Validity rules for closed rings (polygon boundaries).

A ring is valid when it is closed, every coordinate is finite, it keeps
at least four coordinates once consecutive repeats are collapsed (three
distinct vertices plus the closing one), and it is simple: segments only
meet their two neighbours, and only at the shared vertex.

The checks run on a ``RingChain``: the ring implicitly closed with
consecutive repeated coordinates collapsed.  The chain remembers the
original index of each vertex so problems point back into the caller's
coordinates, and it is returned to the polygon validator for the
containment and ring-pair checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geo_validity_check.core.constants import MIN_RING_COORDS
from geo_validity_check.models.problems import (
    CoordinatePosition,
    Problem,
    SegmentsPosition,
)
from geo_validity_check.predicates.segments import is_finite

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from geo_validity_check.models.geometry import Coord, LineString
    from geo_validity_check.models.problems import (
        Locator,
        ProblemPosition,
        ProblemReportBuilder,
    )
    from geo_validity_check.predicates.segments import Predicates


@dataclass(frozen=True, slots=True)
class Segment:
    """One ring segment; ``index`` is the original index of its start vertex."""

    index: int
    start: Coord
    end: Coord

    def is_finite(self) -> bool:
        return is_finite(self.start) and is_finite(self.end)


@dataclass(frozen=True, slots=True)
class RingChain:
    """A ring implicitly closed, with consecutive repeats collapsed.

    Attributes:
        vertices: Chain vertices; the last one repeats the first.
        indices: Original coordinate index of each vertex.
    """

    vertices: tuple[Coord, ...]
    indices: tuple[int, ...]

    @classmethod
    def from_coords(cls, coords: Sequence[Coord]) -> RingChain:
        vertices: list[Coord] = []
        indices: list[int] = []
        for i, coord in enumerate(coords):
            if vertices and coord == vertices[-1]:
                continue
            vertices.append(coord)
            indices.append(i)

        if len(vertices) > 1 and vertices[0] != vertices[-1]:
            vertices.append(vertices[0])
            indices.append(indices[0])
        return cls(tuple(vertices), tuple(indices))

    def has_enough_points(self) -> bool:
        return len(self.vertices) >= MIN_RING_COORDS

    def is_finite(self) -> bool:
        return all(is_finite(v) for v in self.vertices)

    def is_usable(self) -> bool:
        """Return ``True`` when area predicates (point-in-ring) are defined."""
        return self.has_enough_points() and self.is_finite()

    def segments(self) -> list[Segment]:
        return [
            Segment(self.indices[k], self.vertices[k], self.vertices[k + 1])
            for k in range(len(self.vertices) - 1)
        ]

    def finite_segments(self) -> list[Segment]:
        return [s for s in self.segments() if s.is_finite()]


def validate_ring(
    ring: LineString,
    report: ProblemReportBuilder,
    predicates: Predicates,
    position: Callable[[Locator], ProblemPosition],
) -> RingChain:
    """Check one ring and return its chain for the callers' follow-up checks.

    Args:
        ring: The ring coordinates.
        report: Builder receiving the problems.
        predicates: Robust predicates.
        position: Builds the problem position from a locator inside the
            ring (``None`` for the whole ring).
    """
    coords = ring.coords

    for i, coord in enumerate(coords):
        if not is_finite(coord):
            report.add(Problem.NOT_FINITE, position(CoordinatePosition(i)))

    if coords:
        first, last = coords[0], coords[-1]
        if is_finite(first) and is_finite(last) and first != last:
            report.add(Problem.RING_NOT_CLOSED, position(CoordinatePosition(len(coords) - 1)))

    chain = RingChain.from_coords(coords)
    if not chain.has_enough_points():
        report.add(Problem.TOO_FEW_POINTS, position(None))
        return chain

    for first, second in self_intersections(chain, predicates):
        report.add(
            Problem.SELF_INTERSECTION,
            position(SegmentsPosition(first.index, second.index)),
        )
    return chain


def self_intersections(chain: RingChain, predicates: Predicates) -> list[tuple[Segment, Segment]]:
    """Return every pair of ring segments that meet where they should not.

    Neighbouring segments (including the last and the first) share a
    vertex by construction; they are only reported when they also overlap
    along a line, i.e. the ring folds back on itself.  Any contact between
    non-neighbouring segments is reported, touching included.  Segments
    with a non-finite endpoint are skipped.
    """
    segments = chain.segments()
    n = len(segments)
    pairs: list[tuple[Segment, Segment]] = []

    for i in range(n):
        s = segments[i]
        if not s.is_finite():
            continue
        for j in range(i + 1, n):
            t = segments[j]
            if not t.is_finite():
                continue
            adjacent = j == i + 1 or (i == 0 and j == n - 1)
            if adjacent:
                hit = predicates.segments_overlap(s.start, s.end, t.start, t.end)
            else:
                hit = predicates.segments_intersect(s.start, s.end, t.start, t.end)
            if hit:
                pairs.append((s, t))
    return pairs
