"""Shared constants used across the engine.

Centralises the minimum sizes, backend names and environment variable
names used across the predicate layer, validators and configuration.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Minimum sizes (OGC Simple Features)
# ---------------------------------------------------------------------------

MIN_LINESTRING_COORDS: int = 2
"""A linestring needs at least two coordinates."""

MIN_RING_COORDS: int = 4
"""Three distinct vertices plus the closing duplicate."""

# ---------------------------------------------------------------------------
# Orientation backends
# ---------------------------------------------------------------------------

ADAPTIVE_ORIENTATION: str = "adaptive"
"""Floating-point filter with an exact rational fallback (default)."""

EXACT_ORIENTATION: str = "exact"
"""Exact rational arithmetic for every call (reference backend)."""

DEFAULT_ORIENTATION: str = ADAPTIVE_ORIENTATION

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

ENV_ORIENTATION: str = "GEO_VALIDITY_ORIENTATION"
