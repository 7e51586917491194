"""Robust geometric predicates.

- orientation: exact-sign orientation backends and their registry
- segments: finiteness check, segment-pair predicates, point-in-ring
"""

from geo_validity_check.predicates.orientation import (
    AdaptiveOrientation,
    ExactOrientation,
    Orientation,
    OrientationPredicate,
    UnknownOrientationError,
    available_orientations,
    get_orientation,
    register_orientation,
)
from geo_validity_check.predicates.segments import Predicates, RingLocation, is_finite

__all__ = [
    "AdaptiveOrientation",
    "ExactOrientation",
    "Orientation",
    "OrientationPredicate",
    "Predicates",
    "RingLocation",
    "UnknownOrientationError",
    "available_orientations",
    "get_orientation",
    "is_finite",
    "register_orientation",
]
