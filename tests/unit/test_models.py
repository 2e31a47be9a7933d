"""Tests for output, style and schema models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kml_geojson.models import (
    ConversionResult,
    FeatureCollection,
    FieldType,
    KmlFeature,
    KmlFolder,
    KmlStyle,
)


class TestKmlFolder:
    def test_frozen(self) -> None:
        folder = KmlFolder(folder_id="f", name="A")
        assert folder.parent_folder_id is None
        with pytest.raises(ValidationError):
            folder.name = "B"  # type: ignore[misc]


class TestKmlFeature:
    """Feature model."""

    def test_defaults(self) -> None:
        feature = KmlFeature(id="x", geometry={"type": "Point", "coordinates": [1.0, 2.0]})
        assert feature.type == "Feature"
        assert feature.properties == {}
        assert feature.geometry_type == "Point"
        assert feature.folder_id is None

    def test_folder_id_from_properties(self) -> None:
        feature = KmlFeature(
            id="x",
            geometry={"type": "Point", "coordinates": [1.0, 2.0]},
            properties={"folder_id": "f1"},
        )
        assert feature.folder_id == "f1"

    def test_rejects_other_type(self) -> None:
        with pytest.raises(ValidationError):
            KmlFeature(type="Other", id="x", geometry={})  # type: ignore[arg-type]


class TestConversionResult:
    """Batch result envelope."""

    def test_empty(self) -> None:
        result = ConversionResult()
        assert result.to_dict() == {
            "folders": [],
            "geojson": {"type": "FeatureCollection", "features": []},
        }

    def test_features_shortcut(self) -> None:
        feature = KmlFeature(id="x", geometry={"type": "Point", "coordinates": [0.0, 0.0]})
        result = ConversionResult(geojson=FeatureCollection(features=[feature]))
        assert result.features == [feature]


class TestStyleAndSchemaModels:
    def test_style_lookup(self) -> None:
        style = KmlStyle("s", {"line-width": 2.0})
        assert "line-width" in style
        assert style.get("line-width") == 2.0
        assert style.get("icon-size") is None

    def test_field_type_flags(self) -> None:
        assert FieldType.USHORT.is_integer
        assert FieldType.DOUBLE.is_float
        assert not FieldType.BOOL.is_integer
        assert FieldType.from_declared("wstring") is None
