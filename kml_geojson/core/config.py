"""Converter configuration loaded from environment variables.

All values have defaults matching the converter's constructor, so a
bare ``ConverterConfig()`` behaves exactly like ``KmlToGeojson()``.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a boolean
    variable holds anything other than a recognised true/false word.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_geojson.core.exceptions import ValidationError

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(ValidationError):
    """Raised when a configuration value cannot be interpreted.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        include_altitude: Emit ``[lon, lat, alt]`` coordinates instead of
            ``[lon, lat]``.  Affects every coordinate the converter produces.
        validate_geometries: Drop features whose coordinates contain
            non-numeric components (opt-in post-check).
    """

    include_altitude: bool = True
    validate_geometries: bool = False

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Reads ``KML_GEOJSON_INCLUDE_ALTITUDE`` and
        ``KML_GEOJSON_VALIDATE_GEOMETRIES``.

        Raises:
            ConfigValidationError: If a value is not a recognised boolean word.
        """
        return cls(
            include_altitude=_env_bool("KML_GEOJSON_INCLUDE_ALTITUDE", default=True),
            validate_geometries=_env_bool("KML_GEOJSON_VALIDATE_GEOMETRIES", default=False),
        )


def _env_bool(key: str, *, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigValidationError(
        key,
        raw,
        f"must be one of {sorted(_TRUE_WORDS | _FALSE_WORDS)}",
    )
