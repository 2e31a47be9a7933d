"""KML to GeoJSON converter.

Converts KML documents into a flat list of folder records and a GeoJSON
FeatureCollection, with styles, style maps and typed extended data
resolved into per-feature properties.  Supports batch conversion and
callback-driven streaming in document order.
"""

from kml_geojson.converter import KmlToGeojson, kml_to_geojson
from kml_geojson.models import ConversionResult, FeatureCollection, KmlFeature, KmlFolder

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "FeatureCollection",
    "KmlFeature",
    "KmlFolder",
    "KmlToGeojson",
    "kml_to_geojson",
]
