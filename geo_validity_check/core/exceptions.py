"""Unified exception taxonomy.

Invalid geometry is never an exception: it is reported through a
``ProblemReport``.  Exceptions are reserved for caller mistakes (passing
something that is not a geometry) and for bad configuration.  Every
exception inherits from ``GeoValidityError`` and carries structured
context fields for consistent handling and diagnostics.

Taxonomy categories
-------------------
- ``InputError``: the caller passed an unusable object.
- ``ConfigurationError``: configuration or backend selection is invalid.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeoValidityError(Exception):
    """Base exception for all library errors.

    Attributes:
        message: Human-readable error description.
        operation: Operation where the error occurred
            (e.g. ``"validate"``, ``"from_shapely"``).
        code: Machine-readable error code (e.g. ``"UNSUPPORTED_GEOMETRY"``).
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, InputError):
            return "input"
        if isinstance(self, ConfigurationError):
            return "configuration"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class InputError(GeoValidityError):
    """The caller passed an object the engine cannot inspect."""


class ConfigurationError(GeoValidityError):
    """Configuration values or backend names are invalid."""
