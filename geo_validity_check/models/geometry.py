"""Planar geometry types inspected by the validity engine.

A deliberately small, read-only geometry model: the engine only needs to
iterate coordinates, rings and members.  All types are frozen dataclasses;
constructors accept ``Coord`` instances or plain ``(x, y)`` pairs and
normalise them to ``Coord``.

Storage is faithful: nothing is repaired or closed on construction, so
an unclosed polygon ring or a NaN coordinate reaches the validators as
given and is reported there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


@dataclass(frozen=True, slots=True, eq=False)
class Coord:
    """A planar coordinate.

    Equality follows IEEE float semantics component by component, so a
    coordinate holding ``NaN`` is never equal to anything, itself included.
    """

    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coord):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Coord({self.x!r}, {self.y!r})"


CoordLike = Union[Coord, "Sequence[float]"]


def as_coord(value: CoordLike) -> Coord:
    """Return *value* as a ``Coord``.

    Raises:
        TypeError: If *value* is neither a ``Coord`` nor an ``(x, y)`` pair.
    """
    if isinstance(value, Coord):
        return value
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        msg = f"Expected a Coord or an (x, y) pair, got {value!r}"
        raise TypeError(msg) from exc
    return Coord(float(x), float(y))


def _coords(values: Iterable[CoordLike]) -> tuple[Coord, ...]:
    return tuple(as_coord(v) for v in values)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """A single coordinate."""

    coord: Coord

    def __post_init__(self) -> None:
        object.__setattr__(self, "coord", as_coord(self.coord))

    @classmethod
    def from_xy(cls, x: float, y: float) -> Point:
        return cls(Coord(x, y))

    @property
    def x(self) -> float:
        return self.coord.x

    @property
    def y(self) -> float:
        return self.coord.y


@dataclass(frozen=True, slots=True)
class Line:
    """A single edge between two coordinates."""

    start: Coord
    end: Coord

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_coord(self.start))
        object.__setattr__(self, "end", as_coord(self.end))

    def coords(self) -> tuple[Coord, Coord]:
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three vertices; valid only when distinct and not collinear."""

    a: Coord
    b: Coord
    c: Coord

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", as_coord(self.a))
        object.__setattr__(self, "b", as_coord(self.b))
        object.__setattr__(self, "c", as_coord(self.c))

    def coords(self) -> tuple[Coord, Coord, Coord]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle defined by its ``min`` and ``max`` corners."""

    min: Coord
    max: Coord

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", as_coord(self.min))
        object.__setattr__(self, "max", as_coord(self.max))

    @classmethod
    def from_corners(cls, c1: CoordLike, c2: CoordLike) -> Rect:
        """Build a rectangle from any two opposite corners."""
        p, q = as_coord(c1), as_coord(c2)
        return cls(
            Coord(min(p.x, q.x), min(p.y, q.y)),
            Coord(max(p.x, q.x), max(p.y, q.y)),
        )

    def corners(self) -> tuple[Coord, Coord, Coord, Coord]:
        """Return the four corners, counter-clockwise from ``min``."""
        return (
            self.min,
            Coord(self.max.x, self.min.y),
            self.max,
            Coord(self.min.x, self.max.y),
        )


# ---------------------------------------------------------------------------
# Linear and areal types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LineString:
    """An ordered, open sequence of coordinates.

    Also used for polygon rings, which are expected (and checked) to be
    closed.
    """

    coords: tuple[Coord, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _coords(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coords)

    def lines(self) -> Iterator[Line]:
        """Yield the consecutive segments of the linestring."""
        for start, end in zip(self.coords, self.coords[1:]):
            yield Line(start, end)

    def is_closed(self) -> bool:
        return bool(self.coords) and self.coords[0] == self.coords[-1]


@dataclass(frozen=True, slots=True)
class Polygon:
    """One exterior ring and zero or more interior rings (holes)."""

    exterior: LineString
    interiors: tuple[LineString, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", _as_linestring(self.exterior))
        object.__setattr__(
            self, "interiors", tuple(_as_linestring(r) for r in self.interiors)
        )

    def rings(self) -> Iterator[LineString]:
        """Yield the exterior ring followed by the interior rings."""
        yield self.exterior
        yield from self.interiors


def _as_linestring(value: LineString | Iterable[CoordLike]) -> LineString:
    if isinstance(value, LineString):
        return value
    return LineString(tuple(value))


# ---------------------------------------------------------------------------
# Multi-part types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MultiPoint:
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "points",
            tuple(p if isinstance(p, Point) else Point(p) for p in self.points),
        )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


@dataclass(frozen=True, slots=True)
class MultiLineString:
    linestrings: tuple[LineString, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "linestrings", tuple(_as_linestring(ls) for ls in self.linestrings)
        )

    def __len__(self) -> int:
        return len(self.linestrings)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.linestrings)


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(self.polygons))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """A heterogeneous, possibly nested, sequence of geometries."""

    geometries: tuple[Geometry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "geometries", tuple(self.geometries))

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)


Geometry = Union[
    Point,
    Line,
    LineString,
    Polygon,
    Triangle,
    Rect,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

GEOMETRY_TYPES: tuple[type, ...] = (
    Point,
    Line,
    LineString,
    Polygon,
    Triangle,
    Rect,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)


def geometry_type_name(geometry: object) -> str:
    """Return the geometry kind name used in messages (e.g. ``"Polygon"``)."""
    return type(geometry).__name__
