"""Top-level dispatch and public validation API.

``validate`` picks the validator matching the geometry kind, runs it
with a fresh ``ProblemReportBuilder`` and returns the finished, immutable
report.  Every call is independent: no state is shared between calls, so
the same geometry always yields the same report.

Usage::

    from geo_validity_check import LineString, explain_invalidity

    report = explain_invalidity(LineString([(0, 0), (0, 0)]))
    if report is not None:
        print(report)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geo_validity_check.core.config import ValidityConfig
from geo_validity_check.core.exceptions import InputError
from geo_validity_check.models.geometry import (
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
    Triangle,
    geometry_type_name,
)
from geo_validity_check.models.problems import ProblemReport, ProblemReportBuilder
from geo_validity_check.predicates.orientation import get_orientation
from geo_validity_check.predicates.segments import Predicates
from geo_validity_check.validators.collection import validate_collection
from geo_validity_check.validators.linear import validate_linestring
from geo_validity_check.validators.multi import (
    validate_multilinestring,
    validate_multipoint,
    validate_multipolygon,
)
from geo_validity_check.validators.polygon import validate_polygon
from geo_validity_check.validators.primitives import (
    validate_line,
    validate_point,
    validate_rect,
    validate_triangle,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from geo_validity_check.models.geometry import Geometry
    from geo_validity_check.models.report_schema import ValidityReport
    from geo_validity_check.predicates.orientation import OrientationPredicate

logger = logging.getLogger("geo_validity_check.validators")


class UnsupportedGeometryError(InputError):
    """Raised when ``validate`` receives an object that is not a geometry."""

    default_operation = "validate"
    default_code = "UNSUPPORTED_GEOMETRY"


def _validate_collection(
    collection: GeometryCollection, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    validate_collection(collection, report, predicates, validate_geometry)


_VALIDATORS: dict[type, Callable[..., None]] = {
    Point: validate_point,
    Line: validate_line,
    LineString: validate_linestring,
    Polygon: validate_polygon,
    Triangle: validate_triangle,
    Rect: validate_rect,
    MultiPoint: validate_multipoint,
    MultiLineString: validate_multilinestring,
    MultiPolygon: validate_multipolygon,
    GeometryCollection: _validate_collection,
}


def validate_geometry(
    geometry: Geometry, report: ProblemReportBuilder, predicates: Predicates
) -> None:
    """Dispatch *geometry* to the validator for its kind.

    Raises:
        UnsupportedGeometryError: If *geometry* is not one of the geometry types.
    """
    validator = _VALIDATORS.get(type(geometry))
    if validator is None:
        for kind, candidate in _VALIDATORS.items():
            if isinstance(geometry, kind):
                validator = candidate
                break
        else:
            expected = ", ".join(kind.__name__ for kind in _VALIDATORS)
            msg = f"Cannot validate {type(geometry).__name__!r}; expected one of: {expected}"
            raise UnsupportedGeometryError(msg)
    validator(geometry, report, predicates)


def _predicates(
    config: ValidityConfig | None, orientation: OrientationPredicate | None
) -> Predicates:
    if orientation is not None:
        return Predicates(orientation)
    config = config or ValidityConfig()
    return Predicates(get_orientation(config.orientation_backend))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate(
    geometry: Geometry,
    *,
    config: ValidityConfig | None = None,
    orientation: OrientationPredicate | None = None,
) -> ProblemReport:
    """Check *geometry* and return every problem found.

    Args:
        geometry: Any geometry variant, including nested collections.
        config: Engine configuration; defaults to ``ValidityConfig()``.
        orientation: Orientation backend overriding the configured one.

    Returns:
        A ``ProblemReport``; empty when the geometry is valid.

    Raises:
        UnsupportedGeometryError: If *geometry* is not a geometry.
        UnknownOrientationError: If the configured backend is not registered.
    """
    predicates = _predicates(config, orientation)
    builder = ProblemReportBuilder()
    kind = geometry_type_name(geometry)

    logger.debug("Validating %s", kind)
    validate_geometry(geometry, builder, predicates)
    report = builder.finish()
    logger.debug("%s checked: %d problem(s)", kind, len(report))
    return report


def is_valid(
    geometry: Geometry,
    *,
    config: ValidityConfig | None = None,
    orientation: OrientationPredicate | None = None,
) -> bool:
    """Return ``True`` when *geometry* has no validity problem."""
    return validate(geometry, config=config, orientation=orientation).is_empty()


def explain_invalidity(
    geometry: Geometry,
    *,
    config: ValidityConfig | None = None,
    orientation: OrientationPredicate | None = None,
) -> ProblemReport | None:
    """Return the problem report, or ``None`` when *geometry* is valid."""
    report = validate(geometry, config=config, orientation=orientation)
    return None if report.is_empty() else report


def validity_report(
    geometry: Geometry,
    *,
    config: ValidityConfig | None = None,
    orientation: OrientationPredicate | None = None,
) -> ValidityReport:
    """Return the structured, JSON-serialisable report for *geometry*."""
    from geo_validity_check.models.report_schema import build_validity_report

    report = validate(geometry, config=config, orientation=orientation)
    return build_validity_report(geometry_type_name(geometry), report)
