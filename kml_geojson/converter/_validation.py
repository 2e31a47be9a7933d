"""Opt-in geometry diagnostics.

The converter passes coordinates through as parsed, NaN components
included.  These helpers let callers check results afterwards, or make
the converter drop such features (``validate_geometries=True``):

- ``geometry_is_valid``: every coordinate component is a real number
- ``find_invalid_features``: ids of features failing that check
- ``to_shapely`` / ``explain_geometry``: topological checks via shapely
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry

    from kml_geojson.models.feature import ConversionResult

logger = logging.getLogger("kml_geojson.converter.validation")


def geometry_is_valid(geometry: dict[str, Any]) -> bool:
    """Return ``False`` if any coordinate component is NaN or non-numeric."""
    for component in _iter_components(geometry):
        if isinstance(component, bool) or not isinstance(component, int | float):
            break
        if math.isnan(component):
            break
    else:
        return True

    logger.warning("Geometry is invalid: %s", json.dumps(geometry))
    return False


def find_invalid_features(result: ConversionResult) -> list[str]:
    """Return the ids of features whose geometry fails ``geometry_is_valid``."""
    return [feature.id for feature in result.features if not geometry_is_valid(feature.geometry)]


def to_shapely(geometry: dict[str, Any]) -> BaseGeometry:
    """Convert a converter geometry dict into a shapely geometry.

    Polygons carry a single ring, which is wrapped into GeoJSON's
    ring-list form before conversion.

    Raises:
        ValueError: If the geometry type is unknown or the coordinates
            cannot form a shapely geometry.
    """
    from shapely.geometry import GeometryCollection, shape

    geometry_type = geometry.get("type")
    if geometry_type == "GeometryCollection":
        return GeometryCollection([to_shapely(member) for member in geometry.get("geometries", [])])
    if geometry_type == "Polygon":
        return shape({"type": "Polygon", "coordinates": [geometry.get("coordinates", [])]})
    if geometry_type in ("Point", "LineString"):
        return shape(geometry)
    msg = f"Unsupported geometry type: {geometry_type!r}"
    raise ValueError(msg)


def explain_geometry(geometry: dict[str, Any]) -> str:
    """Return shapely's validity explanation (``"Valid Geometry"`` when valid)."""
    from shapely.errors import ShapelyError
    from shapely.validation import explain_validity

    try:
        shapely_geometry = to_shapely(geometry)
    except (ValueError, TypeError, ShapelyError) as exc:
        return f"Cannot build geometry: {exc}"
    return explain_validity(shapely_geometry)


def _iter_components(geometry: dict[str, Any]) -> Iterator[object]:
    if geometry.get("type") == "GeometryCollection":
        for member in geometry.get("geometries", []):
            yield from _iter_components(member)
        return
    yield from _flatten(geometry.get("coordinates", []))


def _flatten(value: object) -> Iterator[object]:
    if isinstance(value, list | tuple):
        for item in value:
            yield from _flatten(item)
    else:
        yield value
