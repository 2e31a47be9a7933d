"""Data models and schemas.

Defines the data structures used throughout the converter:
- KmlFolder / KmlFeature / FeatureCollection / ConversionResult: output contract
- KmlStyle / KmlStyleMap: decoded style tables
- KmlSchema / FieldType: typed extended-data declarations
"""

from kml_geojson.models.feature import (
    ConversionResult,
    FeatureCollection,
    KmlFeature,
    KmlFolder,
)
from kml_geojson.models.schema import FieldType, KmlSchema
from kml_geojson.models.style import KmlStyle, KmlStyleMap

__all__ = [
    "ConversionResult",
    "FeatureCollection",
    "FieldType",
    "KmlFeature",
    "KmlFolder",
    "KmlSchema",
    "KmlStyle",
    "KmlStyleMap",
]
