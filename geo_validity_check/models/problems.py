"""Problem report model: the *what* and the *where* of each violation.

- ``Problem``: closed enumeration of violation kinds.  Members are plain
  tags; the human-readable message is derived when formatting.
- Positions: small frozen dataclasses locating a problem.  Multi-part and
  collection positions wrap the position of their member, so positions
  compose (``interior ring 0 of polygon 1 of the MultiPolygon``).
- ``ProblemAtPosition``: one ``(problem, position)`` pair.
- ``ProblemReport``: the immutable, ordered result of one validation pass.
- ``ProblemReportBuilder``: the collector validators append to while a
  report is being built.
"""

from __future__ import annotations

import contextlib
import enum
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


# ---------------------------------------------------------------------------
# Problem kinds
# ---------------------------------------------------------------------------


class Problem(enum.Enum):
    """Kind of validity violation.

    Values:
        NOT_FINITE: A coordinate component is NaN or infinite.
        TOO_FEW_POINTS: A linestring or ring has too few (distinct) coordinates.
        ALL_POINTS_EQUAL: Every coordinate of a linestring is the same.
        IDENTICAL_COORDS: Two coordinates that must differ are equal.
        COLLINEAR_COORDS: The vertices of a triangle are collinear.
        RING_NOT_CLOSED: A ring's first and last coordinates differ.
        SELF_INTERSECTION: Two segments of one ring intersect.
        INTERIOR_RING_NOT_CONTAINED: An interior ring leaves the exterior ring.
        RINGS_TOUCH_ON_A_LINE: Two rings of a polygon share a segment.
        INTERIOR_RINGS_CROSS: Two interior rings cross each other.
        INTERIOR_RINGS_OVERLAP: An interior ring lies inside another one.
        DUPLICATE_POLYGON: Two polygons of a MultiPolygon are identical.
        POLYGONS_CROSS: Two polygons of a MultiPolygon cross each other.
        POLYGONS_OVERLAP: Two polygons of a MultiPolygon share an area.
        POLYGONS_TOUCH_ON_A_LINE: Two polygons of a MultiPolygon share a segment.
    """

    NOT_FINITE = "not_finite"
    TOO_FEW_POINTS = "too_few_points"
    ALL_POINTS_EQUAL = "all_points_equal"
    IDENTICAL_COORDS = "identical_coords"
    COLLINEAR_COORDS = "collinear_coords"
    RING_NOT_CLOSED = "ring_not_closed"
    SELF_INTERSECTION = "self_intersection"
    INTERIOR_RING_NOT_CONTAINED = "interior_ring_not_contained"
    RINGS_TOUCH_ON_A_LINE = "rings_touch_on_a_line"
    INTERIOR_RINGS_CROSS = "interior_rings_cross"
    INTERIOR_RINGS_OVERLAP = "interior_rings_overlap"
    DUPLICATE_POLYGON = "duplicate_polygon"
    POLYGONS_CROSS = "polygons_cross"
    POLYGONS_OVERLAP = "polygons_overlap"
    POLYGONS_TOUCH_ON_A_LINE = "polygons_touch_on_a_line"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def __str__(self) -> str:
        return self.message


_MESSAGES: dict[Problem, str] = {
    Problem.NOT_FINITE: "Coordinate is not finite",
    Problem.TOO_FEW_POINTS: "Too few points",
    Problem.ALL_POINTS_EQUAL: "All points are equal",
    Problem.IDENTICAL_COORDS: "Identical coordinates",
    Problem.COLLINEAR_COORDS: "Collinear coordinates",
    Problem.RING_NOT_CLOSED: "Ring is not closed",
    Problem.SELF_INTERSECTION: "Ring has a self-intersection",
    Problem.INTERIOR_RING_NOT_CONTAINED: (
        "Interior ring is not contained in the exterior ring"
    ),
    Problem.RINGS_TOUCH_ON_A_LINE: "Rings touch on a line",
    Problem.INTERIOR_RINGS_CROSS: "Interior rings cross",
    Problem.INTERIOR_RINGS_OVERLAP: "Interior rings overlap",
    Problem.DUPLICATE_POLYGON: "Polygons are identical",
    Problem.POLYGONS_CROSS: "Polygons cross",
    Problem.POLYGONS_OVERLAP: "Polygons overlap",
    Problem.POLYGONS_TOUCH_ON_A_LINE: "Polygons touch on a line",
}


# ---------------------------------------------------------------------------
# Locators inside a coordinate sequence
# ---------------------------------------------------------------------------


class _Structured:
    """Mixin giving positions a stable ``to_dict()`` with a ``kind`` key."""

    __slots__ = ()

    kind: str = ""

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"kind": self.kind}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            data[f.name] = value.to_dict() if isinstance(value, _Structured) else value
        return data


@dataclass(frozen=True, slots=True)
class CoordinatePosition(_Structured):
    """A single vertex, by index."""

    index: int

    kind = "coordinate"

    def __str__(self) -> str:
        return f"coordinate {self.index}"


@dataclass(frozen=True, slots=True)
class SegmentsPosition(_Structured):
    """Two segments, each named by the index of its start vertex."""

    first: int
    second: int

    kind = "segments"

    def __str__(self) -> str:
        return f"segments {self.first} and {self.second}"


Locator = Union[CoordinatePosition, SegmentsPosition, None]


# ---------------------------------------------------------------------------
# Ring roles
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExteriorRing(_Structured):
    kind = "exterior_ring"

    def __str__(self) -> str:
        return "exterior ring"


@dataclass(frozen=True, slots=True)
class InteriorRing(_Structured):
    index: int

    kind = "interior_ring"

    def __str__(self) -> str:
        return f"interior ring {self.index}"


RingRole = Union[ExteriorRing, InteriorRing]


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


def _join(*parts: object) -> str:
    return " of ".join(str(p) for p in parts if p is not None)


class _Position(_Structured):
    """Base for geometry positions.

    ``parts()`` lists the locating phrases innermost first, without the
    geometry itself; ``str()`` appends ``the <Geometry>``.
    """

    __slots__ = ()

    geometry: str = ""

    def parts(self) -> list[str]:
        raise NotImplementedError

    def __str__(self) -> str:
        return _join(*self.parts(), f"the {self.geometry}")


@dataclass(frozen=True, slots=True)
class PointPosition(_Position):
    kind = "point"
    geometry = "Point"

    def parts(self) -> list[str]:
        return []


@dataclass(frozen=True, slots=True)
class _CoordinateSequencePosition(_Position):
    at: Locator = None

    def parts(self) -> list[str]:
        return [] if self.at is None else [str(self.at)]


@dataclass(frozen=True, slots=True)
class LinePosition(_CoordinateSequencePosition):
    kind = "line"
    geometry = "Line"


@dataclass(frozen=True, slots=True)
class TrianglePosition(_CoordinateSequencePosition):
    kind = "triangle"
    geometry = "Triangle"


@dataclass(frozen=True, slots=True)
class RectPosition(_CoordinateSequencePosition):
    kind = "rect"
    geometry = "Rect"


@dataclass(frozen=True, slots=True)
class LineStringPosition(_CoordinateSequencePosition):
    kind = "linestring"
    geometry = "LineString"


@dataclass(frozen=True, slots=True)
class PolygonPosition(_Position):
    """A ring of a polygon, optionally a vertex/segments of it or a second ring."""

    ring: RingRole
    at: Locator = None
    other_ring: RingRole | None = None

    kind = "polygon"
    geometry = "Polygon"

    def parts(self) -> list[str]:
        ring = str(self.ring)
        if self.other_ring is not None:
            ring = f"{ring} and {self.other_ring}"
        return [_join(self.at, ring)]


@dataclass(frozen=True, slots=True)
class MultiPointPosition(_Position):
    member: int

    kind = "multipoint"
    geometry = "MultiPoint"

    def parts(self) -> list[str]:
        return [f"point {self.member}"]


@dataclass(frozen=True, slots=True)
class MultiLineStringPosition(_Position):
    member: int
    inner: LineStringPosition = LineStringPosition()

    kind = "multilinestring"
    geometry = "MultiLineString"

    def parts(self) -> list[str]:
        return [*self.inner.parts(), f"linestring {self.member}"]


@dataclass(frozen=True, slots=True)
class MultiPolygonPosition(_Position):
    """A member polygon (or a pair of members) of a MultiPolygon."""

    member: int
    inner: PolygonPosition | None = None
    other_member: int | None = None

    kind = "multipolygon"
    geometry = "MultiPolygon"

    def parts(self) -> list[str]:
        inner = [] if self.inner is None else self.inner.parts()
        if self.other_member is not None:
            return [*inner, f"polygons {self.member} and {self.other_member}"]
        return [*inner, f"polygon {self.member}"]


@dataclass(frozen=True, slots=True)
class GeometryCollectionPosition(_Position):
    """A member of a collection, wrapping the member's own position."""

    member: int
    inner: ProblemPosition

    kind = "geometrycollection"
    geometry = "GeometryCollection"

    def parts(self) -> list[str]:
        return [*self.inner.parts(), f"{self.inner.geometry} {self.member}"]


ProblemPosition = Union[
    PointPosition,
    LinePosition,
    TrianglePosition,
    RectPosition,
    LineStringPosition,
    PolygonPosition,
    MultiPointPosition,
    MultiLineStringPosition,
    MultiPolygonPosition,
    GeometryCollectionPosition,
]


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ProblemAtPosition:
    """A problem, at a given position, found while checking a geometry."""

    problem: Problem
    position: ProblemPosition

    def __str__(self) -> str:
        return f"{self.problem} at {self.position}"

    def to_dict(self) -> dict[str, object]:
        return {
            "problem": self.problem.value,
            "message": self.problem.message,
            "position": self.position.to_dict(),
            "description": str(self.position),
        }


@dataclass(frozen=True, slots=True)
class ProblemReport:
    """All the problems found while checking one geometry.

    An empty report means the geometry is valid.  Problems are kept in
    discovery order: depth-first over the geometry's members, and rule
    order within each validator.
    """

    problems: tuple[ProblemAtPosition, ...] = ()

    def is_empty(self) -> bool:
        return not self.problems

    def __len__(self) -> int:
        return len(self.problems)

    def __iter__(self) -> Iterator[ProblemAtPosition]:
        return iter(self.problems)

    def __getitem__(self, index: int) -> ProblemAtPosition:
        return self.problems[index]

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self.problems)

    def kinds(self) -> list[Problem]:
        """Return the problem kinds in report order."""
        return [p.problem for p in self.problems]

    def to_dict(self) -> dict[str, object]:
        return {
            "valid": self.is_empty(),
            "problems": [p.to_dict() for p in self.problems],
        }


class ProblemReportBuilder:
    """Collects problems during one validation pass.

    Validators receive the builder and append to it.  Nested validators
    run inside ``nested()`` so the positions they emit are wrapped into
    the enclosing geometry's position::

        with builder.nested(lambda pos: MultiPolygonPosition(2, pos)):
            validate_polygon(polygon, builder, predicates)
    """

    def __init__(self) -> None:
        self._problems: list[ProblemAtPosition] = []
        self._wrappers: list[Callable[[ProblemPosition], ProblemPosition]] = []

    def add(self, problem: Problem, position: ProblemPosition) -> None:
        for wrap in reversed(self._wrappers):
            position = wrap(position)
        self._problems.append(ProblemAtPosition(problem, position))

    @contextlib.contextmanager
    def nested(
        self, wrap: Callable[[ProblemPosition], ProblemPosition]
    ) -> Iterator[None]:
        self._wrappers.append(wrap)
        try:
            yield
        finally:
            self._wrappers.pop()

    def __len__(self) -> int:
        return len(self._problems)

    def finish(self) -> ProblemReport:
        return ProblemReport(tuple(self._problems))
