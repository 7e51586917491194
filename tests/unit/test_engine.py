"""Tests for the public validation API.

Covers: validate / is_valid / explain_invalidity / validity_report,
dispatch and unsupported inputs, backend selection through config or
injection, identical verdicts across backends, repeatability and
debug logging.
"""

from __future__ import annotations

import logging
import math

import pytest

from geo_validity_check import (
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Problem,
    Rect,
    Triangle,
    UnsupportedGeometryError,
    explain_invalidity,
    is_valid,
    validate,
    validity_report,
)
from geo_validity_check.core.config import ValidityConfig
from geo_validity_check.core.exceptions import InputError
from geo_validity_check.models.geometry import Coord
from geo_validity_check.models.report_schema import SCHEMA_VERSION, ValidityReport
from geo_validity_check.predicates.orientation import (
    AdaptiveOrientation,
    ExactOrientation,
    Orientation,
    UnknownOrientationError,
)


def _square(x0: float, y0: float, size: float) -> list[tuple[float, float]]:
    return [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size), (x0, y0)]


GEOMETRIES = {
    "point": Point((1, 2)),
    "point_nan": Point((math.nan, 2)),
    "line": Line((0, 0), (1, 0)),
    "line_zero": Line((1, 1), (1, 1)),
    "linestring": LineString([(0, 0), (1, 1)]),
    "linestring_equal": LineString([(0, 0), (0, 0)]),
    "linestring_nan": LineString([(0, 0), (math.nan, math.nan), (1, 1)]),
    "triangle": Triangle((0, 0), (1, 0), (0, 1)),
    "triangle_degenerate": Triangle((0, 0), (0, 0), (4, 4)),
    "rect": Rect((0, 0), (1, 1)),
    "polygon": Polygon(_square(0, 0, 4), (_square(1, 1, 2),)),
    "polygon_bowtie": Polygon([(0, 0), (4, 0), (0, 2), (4, 2), (0, 0)]),
    "polygon_leaking": Polygon(
        [(0.5, 0.5), (3, 0.5), (3, 2.5), (0.5, 2.5), (0.5, 0.5)],
        ([(1, 1), (1, 2), (2.5, 2), (3.5, 1), (1, 1)],),
    ),
    "multipoint": MultiPoint([(0, 0), (1, 1)]),
    "multilinestring": MultiLineString([[(0, 0), (1, 1)]]),
    "multipolygon": MultiPolygon([Polygon(_square(0, 0, 1)), Polygon(_square(1, 1, 1))]),
    "multipolygon_touch": MultiPolygon([Polygon(_square(0, 0, 1)), Polygon(_square(1, 0, 1))]),
    "collection": GeometryCollection([Point((0, 0)), LineString([(0, 0), (1, 0)])]),
    "collection_invalid": GeometryCollection([Point((0, 0)), LineString([(0, 0)])]),
}

VALID = {
    "point",
    "line",
    "linestring",
    "triangle",
    "rect",
    "polygon",
    "multipoint",
    "multilinestring",
    "multipolygon",
    "collection",
}


@pytest.fixture(params=sorted(GEOMETRIES))
def named_geometry(request: pytest.FixtureRequest):
    return request.param, GEOMETRIES[request.param]


class TestPublicApi:
    def test_is_valid(self, named_geometry) -> None:
        name, geometry = named_geometry
        assert is_valid(geometry) is (name in VALID)

    def test_is_valid_matches_explain_invalidity(self, named_geometry) -> None:
        _, geometry = named_geometry
        assert is_valid(geometry) is (explain_invalidity(geometry) is None)

    def test_explain_invalidity_returns_report(self) -> None:
        report = explain_invalidity(GEOMETRIES["linestring_equal"])
        assert report is not None
        assert report.kinds() == [Problem.ALL_POINTS_EQUAL]

    def test_validate_is_repeatable(self, named_geometry) -> None:
        _, geometry = named_geometry
        assert validate(geometry) == validate(geometry)

    def test_backends_give_identical_reports(self, named_geometry) -> None:
        _, geometry = named_geometry
        exact = validate(geometry, orientation=ExactOrientation())
        adaptive = validate(geometry, orientation=AdaptiveOrientation())
        assert exact == adaptive


class TestDecomposition:
    """A valid multi-part geometry has only valid members."""

    @pytest.mark.parametrize("name", ["multipoint", "multilinestring", "multipolygon"])
    def test_members_valid(self, name: str) -> None:
        geometry = GEOMETRIES[name]
        assert is_valid(geometry)
        assert all(is_valid(member) for member in geometry)

    def test_collection_members_valid(self) -> None:
        collection = GEOMETRIES["collection"]
        assert all(is_valid(member) for member in collection)


class TestDispatch:
    def test_unsupported_type(self) -> None:
        with pytest.raises(UnsupportedGeometryError, match="Cannot validate 'str'"):
            validate("POINT (0 0)")  # type: ignore[arg-type]

    def test_unsupported_is_input_error(self) -> None:
        with pytest.raises(InputError) as info:
            is_valid(Coord(0, 0))  # type: ignore[arg-type]
        assert info.value.code == "UNSUPPORTED_GEOMETRY"
        assert info.value.operation == "validate"

    def test_unsupported_collection_member(self) -> None:
        with pytest.raises(UnsupportedGeometryError):
            validate(GeometryCollection([Point((0, 0)), (1, 2)]))  # type: ignore[list-item]

    def test_subclass_dispatch(self) -> None:
        class LabelledPoint(Point):
            pass

        assert not is_valid(LabelledPoint((math.inf, 0)))


class TestBackendSelection:
    def test_config_selects_backend(self) -> None:
        config = ValidityConfig(orientation_backend="exact")
        assert is_valid(GEOMETRIES["polygon"], config=config)

    def test_unknown_backend_in_config(self) -> None:
        config = ValidityConfig(orientation_backend="missing")
        with pytest.raises(UnknownOrientationError):
            validate(GEOMETRIES["point"], config=config)

    def test_injected_backend_is_used(self) -> None:
        calls: list[int] = []

        class Counting:
            def orientation(self, a: Coord, b: Coord, c: Coord) -> Orientation:
                calls.append(1)
                return ExactOrientation().orientation(a, b, c)

        assert is_valid(GEOMETRIES["polygon"], orientation=Counting())
        assert calls

    def test_injected_backend_overrides_config(self) -> None:
        config = ValidityConfig(orientation_backend="missing")
        assert is_valid(GEOMETRIES["triangle"], config=config, orientation=ExactOrientation())


class TestValidityReport:
    def test_valid(self) -> None:
        result = validity_report(GEOMETRIES["polygon"])
        assert isinstance(result, ValidityReport)
        assert result.valid is True
        assert result.problem_count == 0
        assert result.problems == []
        assert result.geometry_type == "Polygon"
        assert result.schema_version == SCHEMA_VERSION

    def test_invalid(self) -> None:
        result = validity_report(GEOMETRIES["linestring_nan"])
        assert result.valid is False
        assert result.problem_count == 1
        record = result.problems[0]
        assert record.problem == "not_finite"
        assert record.message == "Coordinate is not finite"
        assert record.description == "coordinate 1 of the LineString"
        assert record.position == {
            "kind": "linestring",
            "at": {"kind": "coordinate", "index": 1},
        }

    def test_json_round_trip(self) -> None:
        result = validity_report(GEOMETRIES["polygon_leaking"])
        assert ValidityReport.model_validate_json(result.model_dump_json()) == result

    def test_json_payload(self) -> None:
        payload = validity_report(GEOMETRIES["multipolygon_touch"]).model_dump(mode="json")
        assert payload["geometry_type"] == "MultiPolygon"
        assert payload["problems"][0]["problem"] == "polygons_touch_on_a_line"
        assert payload["problems"][0]["position"]["other_member"] == 1


class TestLogging:
    def test_debug_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="geo_validity_check.validators"):
            validate(GEOMETRIES["linestring_equal"])
        assert "Validating LineString" in caplog.text
        assert "LineString checked: 1 problem(s)" in caplog.text
