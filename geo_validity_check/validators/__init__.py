"""Validity rules per geometry kind and the top-level dispatch.

- primitives: Point, Line, Triangle, Rect
- linear: open LineString
- ring: closed polygon rings (simplicity, closure, size)
- polygon: Polygon (rings, containment, ring pairs)
- multi: MultiPoint, MultiLineString, MultiPolygon
- collection: GeometryCollection
- engine: dispatch and the public ``validate`` / ``is_valid`` /
  ``explain_invalidity`` / ``validity_report`` functions
"""

from geo_validity_check.validators.engine import (
    UnsupportedGeometryError,
    explain_invalidity,
    is_valid,
    validate,
    validate_geometry,
    validity_report,
)

__all__ = [
    "UnsupportedGeometryError",
    "explain_invalidity",
    "is_valid",
    "validate",
    "validate_geometry",
    "validity_report",
]
