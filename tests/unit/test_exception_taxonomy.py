"""Tests for the converter exception taxonomy.

Validates:
- ConversionError hierarchy and structured attributes
- Category classification (validation, document, conversion)
- ``to_error_dict()`` produces stable payload keys
- XML syntax errors stay outside the hierarchy
"""

from __future__ import annotations

import pytest
from lxml import etree

from kml_geojson.converter import KmlToGeojson
from kml_geojson.core.config import ConfigValidationError
from kml_geojson.core.exceptions import (
    ConversionError,
    DocumentError,
    KmlDocumentError,
    ValidationError,
)


class TestConversionErrorBase:
    """ConversionError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ConversionError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert str(err) == "boom"

    def test_custom_attributes(self) -> None:
        err = ConversionError("fail", stage="walk", code="WALK_FAILED")
        assert err.stage == "walk"
        assert err.code == "WALK_FAILED"

    def test_base_category(self) -> None:
        assert ConversionError("x").category == "conversion"


class TestCategories:
    """Category classification by concrete class."""

    def test_validation_category(self) -> None:
        assert ValidationError("x").category == "validation"

    def test_document_category(self) -> None:
        assert DocumentError("x").category == "document"

    def test_kml_document_error_defaults(self) -> None:
        err = KmlDocumentError("no root")
        assert err.category == "document"
        assert err.stage == "parse_document"
        assert err.code == "KML_ROOT_MISSING"

    def test_config_error_is_validation(self) -> None:
        err = ConfigValidationError("KEY", "bad", "nope")
        assert isinstance(err, ValidationError)
        assert err.category == "validation"
        assert err.message == "Invalid configuration KEY='bad': nope"

    def test_kwarg_overrides_default_code(self) -> None:
        err = KmlDocumentError("x", code="CUSTOM")
        assert err.code == "CUSTOM"
        assert err.stage == "parse_document"


class TestErrorDict:
    """``to_error_dict()`` payload shape."""

    def test_stable_keys(self) -> None:
        payload = KmlDocumentError("no root").to_error_dict()
        assert payload == {
            "category": "document",
            "code": "KML_ROOT_MISSING",
            "stage": "parse_document",
            "message": "no root",
        }


class TestRaisedByConverter:
    """Exceptions surfaced by the public converter."""

    def test_missing_kml_root(self, no_kml_root_xml: str) -> None:
        with pytest.raises(KmlDocumentError) as exc_info:
            KmlToGeojson().parse(no_kml_root_xml)
        assert "gpx" in exc_info.value.message

    def test_xml_syntax_error_not_wrapped(self, not_xml_kml: str) -> None:
        with pytest.raises(etree.XMLSyntaxError) as exc_info:
            KmlToGeojson().parse(not_xml_kml)
        assert not isinstance(exc_info.value, ConversionError)
