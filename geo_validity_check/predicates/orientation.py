"""Orientation predicate backends and their registry.

Every geometric decision the validators make reduces to the sign of

    | ax - cx   ay - cy |
    | bx - cx   by - cy |

for three points ``a``, ``b``, ``c``.  Plain floating-point evaluation
of that determinant gets the sign wrong for nearly collinear inputs, so
two exact backends are provided:

- ``ExactOrientation``: evaluates the determinant with ``fractions.Fraction``
  (every finite float converts to a Fraction exactly).
- ``AdaptiveOrientation``: evaluates in floating point, accepts the result
  when it clears Shewchuk's static error bound, and otherwise defers to
  ``ExactOrientation``.

Backends are registered by name in a lazy registry; ``register_orientation``
lets callers (and tests) plug in another implementation.
"""

from __future__ import annotations

import enum
import logging
import math
import sys
from fractions import Fraction
from typing import TYPE_CHECKING, Protocol

from geo_validity_check.core.constants import (
    ADAPTIVE_ORIENTATION,
    DEFAULT_ORIENTATION,
    EXACT_ORIENTATION,
)
from geo_validity_check.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from geo_validity_check.models.geometry import Coord

logger = logging.getLogger(__name__)


class Orientation(enum.Enum):
    """Turn direction of the path ``a -> b -> c``."""

    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1

    @classmethod
    def from_sign(cls, value: float | Fraction) -> Orientation:
        if value > 0:
            return cls.COUNTER_CLOCKWISE
        if value < 0:
            return cls.CLOCKWISE
        return cls.COLLINEAR


class OrientationPredicate(Protocol):
    """Exact-sign orientation of three finite points."""

    def orientation(self, a: Coord, b: Coord, c: Coord) -> Orientation: ...


class UnknownOrientationError(ConfigurationError):
    """Raised when an unregistered orientation backend is requested."""

    default_operation = "get_orientation"
    default_code = "UNKNOWN_ORIENTATION_BACKEND"


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


class ExactOrientation:
    """Orientation by exact rational arithmetic."""

    def orientation(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        cx, cy = Fraction(c.x), Fraction(c.y)
        det = (Fraction(a.x) - cx) * (Fraction(b.y) - cy) - (Fraction(a.y) - cy) * (
            Fraction(b.x) - cx
        )
        return Orientation.from_sign(det)


# Relative error bound of the floating-point determinant (Shewchuk 1997).
_EPSILON = sys.float_info.epsilon / 2
CCW_ERROR_BOUND = (3.0 + 16.0 * _EPSILON) * _EPSILON

# Below this magnitude the products may have lost precision to underflow.
_UNDERFLOW_GUARD = 1e-290


class AdaptiveOrientation:
    """Floating-point orientation with an exact fallback near zero."""

    def __init__(self, fallback: OrientationPredicate | None = None) -> None:
        self._fallback = fallback or ExactOrientation()

    def orientation(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        detleft = (a.x - c.x) * (b.y - c.y)
        detright = (a.y - c.y) * (b.x - c.x)
        det = detleft - detright
        errbound = CCW_ERROR_BOUND * (abs(detleft) + abs(detright))

        if (
            math.isfinite(det)
            and math.isfinite(errbound)
            and abs(det) >= errbound
            and abs(det) > _UNDERFLOW_GUARD
        ):
            return Orientation.from_sign(det)
        return self._fallback.orientation(a, b, c)


# ---------------------------------------------------------------------------
# Lazy registry
# ---------------------------------------------------------------------------

_ORIENTATION_REGISTRY: dict[str, Callable[[], OrientationPredicate]] = {}


def _register_builtin_orientations() -> None:
    """Register the built-in backends (called once, on first use)."""
    _ORIENTATION_REGISTRY[ADAPTIVE_ORIENTATION] = AdaptiveOrientation
    _ORIENTATION_REGISTRY[EXACT_ORIENTATION] = ExactOrientation


def _ensure_registry() -> None:
    if not _ORIENTATION_REGISTRY:
        _register_builtin_orientations()


def register_orientation(
    name: str,
    loader: Callable[[], OrientationPredicate],
) -> None:
    """Register a custom orientation backend.

    Args:
        name: Backend name (e.g. ``"my_backend"``).
        loader: A zero-argument callable returning a predicate instance.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Orientation backend name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _ORIENTATION_REGISTRY[name] = loader
    logger.debug("Registered orientation backend: %s", name)


def available_orientations() -> list[str]:
    """Return the names of all registered backends."""
    _ensure_registry()
    return list(_ORIENTATION_REGISTRY)


def get_orientation(name: str = DEFAULT_ORIENTATION) -> OrientationPredicate:
    """Create the orientation backend registered under *name*.

    Raises:
        UnknownOrientationError: If no backend has that name.
    """
    _ensure_registry()
    loader = _ORIENTATION_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_ORIENTATION_REGISTRY))
        msg = f"Unknown orientation backend '{name}'. Available: {available}"
        raise UnknownOrientationError(msg)
    return loader()
