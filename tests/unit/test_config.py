"""Tests for converter configuration.

Covers:
- Default values match the KmlToGeojson constructor
- Loading from environment variables
- Boolean word parsing (case, whitespace, blanks)
- Fail-fast validation of unrecognised values
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from kml_geojson.converter import KmlToGeojson
from kml_geojson.core.config import ConfigValidationError, ConverterConfig

_ENV_KEYS = ("KML_GEOJSON_INCLUDE_ALTITUDE", "KML_GEOJSON_VALIDATE_GEOMETRIES")


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}


class TestConverterConfigDefaults:
    """Verify default configuration values."""

    def test_default_include_altitude(self) -> None:
        cfg = ConverterConfig()
        assert cfg.include_altitude is True

    def test_default_validate_geometries(self) -> None:
        cfg = ConverterConfig()
        assert cfg.validate_geometries is False

    def test_defaults_match_converter(self) -> None:
        converter = KmlToGeojson()
        cfg = ConverterConfig()
        assert converter.include_altitude == cfg.include_altitude
        assert converter.validate_geometries == cfg.validate_geometries

    def test_frozen(self) -> None:
        cfg = ConverterConfig()
        with pytest.raises(AttributeError):
            cfg.include_altitude = False  # type: ignore[misc]


class TestConverterConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "KML_GEOJSON_INCLUDE_ALTITUDE": "false",
            "KML_GEOJSON_VALIDATE_GEOMETRIES": "true",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = ConverterConfig.from_env()

        assert cfg.include_altitude is False
        assert cfg.validate_geometries is True

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            cfg = ConverterConfig.from_env()

        assert cfg == ConverterConfig()

    def test_blank_value_uses_default(self) -> None:
        with patch.dict(os.environ, {"KML_GEOJSON_INCLUDE_ALTITUDE": "   "}, clear=False):
            cfg = ConverterConfig.from_env()

        assert cfg.include_altitude is True

    @pytest.mark.parametrize("word", ["1", "TRUE", " Yes ", "on"])
    def test_true_words(self, word: str) -> None:
        with patch.dict(os.environ, {"KML_GEOJSON_VALIDATE_GEOMETRIES": word}, clear=False):
            cfg = ConverterConfig.from_env()

        assert cfg.validate_geometries is True

    @pytest.mark.parametrize("word", ["0", "False", "no", " OFF"])
    def test_false_words(self, word: str) -> None:
        with patch.dict(os.environ, {"KML_GEOJSON_INCLUDE_ALTITUDE": word}, clear=False):
            cfg = ConverterConfig.from_env()

        assert cfg.include_altitude is False


class TestConfigValidation:
    """Fail-fast validation of environment values."""

    def test_unrecognised_word_raises(self) -> None:
        with (
            patch.dict(os.environ, {"KML_GEOJSON_INCLUDE_ALTITUDE": "maybe"}, clear=False),
            pytest.raises(ConfigValidationError, match="KML_GEOJSON_INCLUDE_ALTITUDE"),
        ):
            ConverterConfig.from_env()

    def test_error_carries_key_and_value(self) -> None:
        with patch.dict(os.environ, {"KML_GEOJSON_VALIDATE_GEOMETRIES": "2"}, clear=False):
            with pytest.raises(ConfigValidationError) as exc_info:
                ConverterConfig.from_env()

        err = exc_info.value
        assert err.key == "KML_GEOJSON_VALIDATE_GEOMETRIES"
        assert err.value == "2"
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
