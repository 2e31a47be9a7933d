"""Placemark → GeoJSON feature assembly.

A placemark's geometry comes from its first direct ``Point``,
``LineString``, ``Polygon`` or ``MultiGeometry`` child (checked in that
order).  Placemarks without usable geometry are dropped.  Properties are
layered as: name/description/folder_id, then ``extended_data``, then
resolved style properties (not applied to GeometryCollection features).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kml_geojson.converter._extended_data import parse_extended_data
from kml_geojson.converter._geometry import PLACEMARK_GEOMETRY_TAGS, GeometryKind, parse_geometry
from kml_geojson.converter._styles import resolve_style_properties
from kml_geojson.converter._tree import child_text, find_first, local_name
from kml_geojson.converter._validation import geometry_is_valid
from kml_geojson.core.constants import (
    TAG_DESCRIPTION,
    TAG_EXTENDED_DATA,
    TAG_NAME,
    TAG_STYLE_URL,
)
from kml_geojson.models.feature import KmlFeature

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.converter._walker import WalkContext

logger = logging.getLogger("kml_geojson.converter.placemark")


def parse_placemark(
    element: _Element, folder_id: str | None, context: WalkContext
) -> KmlFeature | None:
    """Build a feature from a ``<Placemark>``, or ``None`` if it has no geometry."""
    geometry_elem = _find_geometry_element(element)
    if geometry_elem is None:
        logger.debug("Skipping Placemark without geometry element")
        return None

    kind = GeometryKind.from_tag(local_name(geometry_elem))
    geometry = parse_geometry(geometry_elem, include_altitude=context.include_altitude)
    if kind is None or geometry is None:
        logger.debug("Skipping Placemark with empty <%s>", local_name(geometry_elem))
        return None

    if context.validate_geometries and not geometry_is_valid(geometry):
        return None

    properties: dict[str, Any] = {
        "name": child_text(element, TAG_NAME) or "",
        "description": child_text(element, TAG_DESCRIPTION) or "",
        "folder_id": folder_id,
    }

    extended_data_elem = find_first(element, TAG_EXTENDED_DATA, direct_child=True)
    if extended_data_elem is not None:
        properties["extended_data"] = parse_extended_data(
            extended_data_elem, context.tables.schemas
        )

    style_url = child_text(element, TAG_STYLE_URL)
    if style_url and kind is not GeometryKind.GEOMETRY_COLLECTION:
        properties.update(
            resolve_style_properties(
                style_url, kind, context.tables.styles, context.tables.style_maps
            )
        )

    return KmlFeature(id=context.id_strategy(element), geometry=geometry, properties=properties)


def _find_geometry_element(element: _Element) -> _Element | None:
    for tag in PLACEMARK_GEOMETRY_TAGS:
        geometry_elem = find_first(element, tag, direct_child=True)
        if geometry_elem is not None:
            return geometry_elem
    return None
