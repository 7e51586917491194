"""Conversion from shapely geometries.

Lets callers check geometries they already hold as shapely objects
(parsed from WKT, GeoJSON, shapefiles, ...) with this engine and get a
positioned problem report instead of shapely's single-reason
``explain_validity`` string.

Only x/y are kept; z values are dropped.  Shapely closes polygon rings
on construction, so converted rings are always closed.  An empty shapely
point converts to a point with NaN coordinates (reported as not finite).

Empty geometries are not treated as valid the way shapely treats them:
there is no empty geometry type here, so an empty polygon converts to a
polygon with an empty exterior and reports ``TOO_FEW_POINTS`` (as does an
empty linestring), and an empty point reports ``NOT_FINITE``.  Empty
multi-geometries and collections convert to empty containers, which are
valid.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from geo_validity_check.core.exceptions import InputError
from geo_validity_check.models.geometry import (
    Coord,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from geo_validity_check.models.geometry import Geometry

logger = logging.getLogger("geo_validity_check.adapters.shapely_interop")


class ShapelyConversionError(InputError):
    """Raised when an object cannot be converted from shapely."""

    default_operation = "from_shapely"
    default_code = "SHAPELY_CONVERSION_FAILED"


def _xy(coords: Iterable[Any]) -> list[Coord]:
    return [Coord(float(c[0]), float(c[1])) for c in coords]


def _point(geom: Any) -> Point:
    coords = _xy(geom.coords)
    if not coords:
        return Point(Coord(math.nan, math.nan))
    return Point(coords[0])


def _polygon(geom: Any) -> Polygon:
    if geom.is_empty:
        return Polygon(LineString())
    return Polygon(
        LineString(_xy(geom.exterior.coords)),
        tuple(LineString(_xy(ring.coords)) for ring in geom.interiors),
    )


def from_shapely(geom: Any) -> Geometry:
    """Convert a shapely geometry into the engine's geometry model.

    Args:
        geom: A shapely ``Point``, ``LineString``, ``LinearRing``,
            ``Polygon``, ``MultiPoint``, ``MultiLineString``,
            ``MultiPolygon`` or ``GeometryCollection``.

    Raises:
        ShapelyConversionError: If *geom* is not a supported shapely geometry.
    """
    from shapely.geometry.base import BaseGeometry

    if not isinstance(geom, BaseGeometry):
        msg = f"Expected a shapely geometry, got {type(geom).__name__}"
        raise ShapelyConversionError(msg)

    kind = geom.geom_type
    if kind == "Point":
        return _point(geom)
    if kind in ("LineString", "LinearRing"):
        return LineString(_xy(geom.coords))
    if kind == "Polygon":
        return _polygon(geom)
    if kind == "MultiPoint":
        return MultiPoint(tuple(_point(p) for p in geom.geoms))
    if kind == "MultiLineString":
        return MultiLineString(tuple(LineString(_xy(ls.coords)) for ls in geom.geoms))
    if kind == "MultiPolygon":
        return MultiPolygon(tuple(_polygon(p) for p in geom.geoms))
    if kind == "GeometryCollection":
        logger.debug("Converting GeometryCollection with %d member(s)", len(geom.geoms))
        return GeometryCollection(tuple(from_shapely(g) for g in geom.geoms))

    msg = f"Unsupported shapely geometry type: {kind}"
    raise ShapelyConversionError(msg)
