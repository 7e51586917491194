"""Pydantic schema for structured validity reports.

``ProblemReport`` renders as text for people; this schema is its
machine-readable counterpart for logs, APIs and stored audit records.
Field names are stable and versioned through ``schema_version``.

Example output (``model_dump(mode="json")``)::

    {
        "schema_version": "validity-report-v1",
        "geometry_type": "LineString",
        "valid": false,
        "problem_count": 1,
        "problems": [
            {
                "problem": "all_points_equal",
                "message": "All points are equal",
                "position": {"kind": "linestring", "at": null},
                "description": "the LineString"
            }
        ]
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from geo_validity_check.models.problems import ProblemAtPosition, ProblemReport

SCHEMA_VERSION = "validity-report-v1"


class ProblemRecord(BaseModel):
    """One reported problem.

    Attributes:
        problem: Stable problem code (``Problem`` value, e.g. ``"not_finite"``).
        message: Human-readable problem message.
        position: Structured position; every level carries a ``kind`` key.
        description: Human-readable position phrase.
    """

    problem: str
    message: str
    position: dict[str, Any] = Field(default_factory=dict)
    description: str = ""

    @classmethod
    def from_problem(cls, item: ProblemAtPosition) -> ProblemRecord:
        return cls(
            problem=item.problem.value,
            message=item.problem.message,
            position=item.position.to_dict(),
            description=str(item.position),
        )


class ValidityReport(BaseModel):
    """Structured validity report for one geometry.

    Attributes:
        schema_version: Version tag of this schema.
        geometry_type: Kind of the checked geometry (e.g. ``"Polygon"``).
        valid: ``True`` when no problem was found.
        problem_count: Number of problems.
        problems: Problems in discovery order.
    """

    schema_version: str = SCHEMA_VERSION
    geometry_type: str
    valid: bool
    problem_count: int = 0
    problems: list[ProblemRecord] = Field(default_factory=list)


def build_validity_report(geometry_type: str, report: ProblemReport) -> ValidityReport:
    problems = [ProblemRecord.from_problem(item) for item in report]
    return ValidityReport(
        geometry_type=geometry_type,
        valid=report.is_empty(),
        problem_count=len(problems),
        problems=problems,
    )
