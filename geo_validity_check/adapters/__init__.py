"""Interop with third-party geometry libraries.

- shapely_interop: convert shapely geometries to the engine's model
"""

from geo_validity_check.adapters.shapely_interop import ShapelyConversionError, from_shapely

__all__ = ["ShapelyConversionError", "from_shapely"]
