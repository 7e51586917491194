"""Engine configuration loaded from environment variables.

All configuration values have sensible defaults; callers that do not
care about configuration never need to build one.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is not
    acceptable.  This catches bad configuration at startup instead of
    on the first ``validate`` call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geo_validity_check.core.constants import (
    DEFAULT_ORIENTATION,
    ENV_ORIENTATION,
)
from geo_validity_check.core.exceptions import ConfigurationError


class ConfigValidationError(ConfigurationError):
    """Raised when a configuration value is invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the accepted values.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ValidityConfig:
    """Immutable engine configuration.

    Attributes:
        orientation_backend: Name of the registered orientation backend
            (``"adaptive"`` or ``"exact"`` out of the box).
    """

    orientation_backend: str = DEFAULT_ORIENTATION

    @classmethod
    def from_env(cls) -> ValidityConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is empty or names an
                unknown orientation backend.
        """
        config = cls(
            orientation_backend=os.getenv(ENV_ORIENTATION, DEFAULT_ORIENTATION).strip().lower(),
        )
        _validate(config)
        return config


def _validate(config: ValidityConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    from geo_validity_check.predicates.orientation import available_orientations

    if not config.orientation_backend:
        raise ConfigValidationError(
            ENV_ORIENTATION,
            config.orientation_backend,
            "must not be empty",
        )

    known = available_orientations()
    if config.orientation_backend not in known:
        raise ConfigValidationError(
            ENV_ORIENTATION,
            config.orientation_backend,
            f"must be one of {', '.join(sorted(known))}",
        )
