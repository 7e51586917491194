"""Tests for the shapely adapter.

Covers: conversion of every shapely geometry type, z dropping, empty
geometries, rejection of non-shapely objects, and agreement with
shapely's own ``is_valid`` on clear-cut polygons and multipolygons.
"""

from __future__ import annotations

import math

import pytest
from shapely import wkt
from shapely.geometry import GeometryCollection as ShapelyCollection
from shapely.geometry import LinearRing
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from geo_validity_check import (
    Coord,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Problem,
    is_valid,
    validate,
)
from geo_validity_check.adapters import ShapelyConversionError, from_shapely


class TestFromShapely:
    def test_point(self) -> None:
        assert from_shapely(ShapelyPoint(1.5, 2.0)) == Point((1.5, 2.0))

    def test_point_drops_z(self) -> None:
        assert from_shapely(ShapelyPoint(1.0, 2.0, 3.0)) == Point((1.0, 2.0))

    def test_empty_point_is_not_finite(self) -> None:
        point = from_shapely(ShapelyPoint())
        assert isinstance(point, Point)
        assert math.isnan(point.x)
        assert validate(point).kinds() == [Problem.NOT_FINITE]

    def test_linestring(self) -> None:
        result = from_shapely(ShapelyLineString([(0, 0, 5), (1, 1, 5)]))
        assert result == LineString([(0, 0), (1, 1)])

    def test_linear_ring(self) -> None:
        result = from_shapely(LinearRing([(0, 0), (1, 0), (1, 1)]))
        assert isinstance(result, LineString)
        assert result.is_closed()

    def test_polygon_with_hole(self) -> None:
        shell = [(0, 0), (4, 0), (4, 4), (0, 4)]
        hole = [(1, 1), (2, 1), (2, 2), (1, 2)]
        result = from_shapely(ShapelyPolygon(shell, [hole]))

        assert isinstance(result, Polygon)
        assert result.exterior.coords[0] == Coord(0, 0)
        assert result.exterior.is_closed()
        assert len(result.interiors) == 1
        assert result.interiors[0].is_closed()

    def test_empty_polygon(self) -> None:
        result = from_shapely(ShapelyPolygon())
        assert result == Polygon(LineString())
        assert validate(result).kinds() == [Problem.TOO_FEW_POINTS]

    def test_empty_linestring_too_few_points(self) -> None:
        result = from_shapely(ShapelyLineString())
        assert result == LineString()
        assert validate(result).kinds() == [Problem.TOO_FEW_POINTS]

    def test_empty_containers_valid(self) -> None:
        assert is_valid(from_shapely(ShapelyMultiPolygon()))
        assert is_valid(from_shapely(ShapelyCollection()))

    def test_multi_geometries(self) -> None:
        assert isinstance(from_shapely(wkt.loads("MULTIPOINT ((0 0), (1 1))")), MultiPoint)
        assert isinstance(
            from_shapely(wkt.loads("MULTILINESTRING ((0 0, 1 1), (2 2, 3 3))")),
            MultiLineString,
        )
        result = from_shapely(
            ShapelyMultiPolygon([ShapelyPolygon([(0, 0), (1, 0), (1, 1)])])
        )
        assert isinstance(result, MultiPolygon)
        assert len(result) == 1

    def test_nested_collection(self) -> None:
        inner = ShapelyCollection([ShapelyPoint(0, 0)])
        result = from_shapely(ShapelyCollection([inner, ShapelyLineString([(0, 0), (1, 1)])]))
        assert result == GeometryCollection(
            [GeometryCollection([Point((0, 0))]), LineString([(0, 0), (1, 1)])]
        )

    def test_rejects_non_geometry(self) -> None:
        with pytest.raises(ShapelyConversionError, match="Expected a shapely geometry"):
            from_shapely([(0, 0), (1, 1)])

    def test_error_category(self) -> None:
        with pytest.raises(ShapelyConversionError) as info:
            from_shapely("POINT (0 0)")
        assert info.value.category == "input"


@pytest.mark.parametrize(
    "text",
    [
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0))",
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0), (1 1, 3 1, 3 3, 1 3, 1 1))",
        "POLYGON ((0 0, 4 0, 0 2, 4 2, 0 0))",
        "POLYGON ((0 0, 4 0, 4 4, 2 4, 2 6, 2 4, 0 4, 0 0))",
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0), (5 5, 6 5, 6 6, 5 6, 5 5))",
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0), (0 2, 2 1, 3 2, 2 3, 0 2))",
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0), (0 2, 0 1, 2 1, 3 2, 2 3, 0 2))",
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0), (1 2, 2 1, 3 2, 2 3, 1 2),"
        " (3 2, 3.5 1, 3.75 2, 3.5 3, 3 2))",
        "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0), (1 1, 2 1, 2 2, 1 2, 1 1),"
        " (1.5 1.5, 2.5 1.5, 2.5 2.5, 1.5 2.5, 1.5 1.5))",
        "MULTIPOLYGON (((0 0, 1 0, 1 1, 0 1, 0 0)), ((1 1, 2 1, 2 2, 1 2, 1 1)))",
        "MULTIPOLYGON (((0 0, 1 0, 1 1, 0 1, 0 0)), ((1 0, 2 0, 2 1, 1 1, 1 0)))",
        "MULTIPOLYGON (((0 0, 2 0, 2 2, 0 2, 0 0)), ((1 1, 3 1, 3 3, 1 3, 1 1)))",
        "POLYGON ((0 0, 4 0, 4 2, 2 2, 2 4, 0 4, 0 0), (4 2, 2 4, 1 1, 4 2))",
        "POLYGON ((-1 -1, 5 -1, 5 5, -1 5, -1 -1), (0 0, 4 0, 4 4, 0 4, 0 0),"
        " (2 0, 4 2, 2 4, 0 2, 2 0))",
        "MULTIPOLYGON (((0 0, 4 0, 4 4, 0 4, 0 0)), ((1 1, 2 1, 2 2, 1 2, 1 1)))",
        "MULTIPOLYGON (((0 0, 4 0, 4 4, 0 4, 0 0)), ((2 0, 4 2, 2 4, 0 2, 2 0)))",
    ],
    ids=[
        "square",
        "square_with_hole",
        "bowtie",
        "spike",
        "hole_outside",
        "hole_touches_shell_at_point",
        "hole_shares_shell_edge",
        "holes_touch_at_point",
        "holes_cross",
        "polygons_touch_at_point",
        "polygons_touch_on_line",
        "polygons_cross",
        "hole_edge_leaves_concave_shell",
        "holes_share_area",
        "polygons_nested",
        "polygons_inscribed",
    ],
)
def test_agrees_with_shapely(text: str) -> None:
    geometry = wkt.loads(text)
    assert is_valid(from_shapely(geometry)) is geometry.is_valid
