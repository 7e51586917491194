"""Validity rules for geometry collections.

A collection is valid when every member is valid.  Members are validated
through the same dispatch as top-level geometries, so nested collections
recurse naturally; collections are trees, so no cycle check is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geo_validity_check.models.problems import GeometryCollectionPosition

if TYPE_CHECKING:
    from collections.abc import Callable

    from geo_validity_check.models.geometry import Geometry, GeometryCollection
    from geo_validity_check.models.problems import ProblemReportBuilder
    from geo_validity_check.predicates.segments import Predicates

    MemberValidator = Callable[[Geometry, ProblemReportBuilder, Predicates], None]


def validate_collection(
    collection: GeometryCollection,
    report: ProblemReportBuilder,
    predicates: Predicates,
    validate_member: MemberValidator,
) -> None:
    for i, geometry in enumerate(collection.geometries):
        with report.nested(lambda pos, i=i: GeometryCollectionPosition(i, pos)):
            validate_member(geometry, report, predicates)
