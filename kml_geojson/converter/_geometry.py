"""KML geometry element → GeoJSON-form geometry dict.

Supported elements and the GeoJSON type they become:

- ``Point``         → ``Point`` (single coordinate)
- ``LineString``    → ``LineString`` (coordinate list)
- ``Polygon``       → ``Polygon`` (coordinate list of the first ring found,
  normally ``outerBoundaryIs``)
- ``MultiGeometry`` → ``GeometryCollection`` of its direct Point,
  LineString and Polygon children, in that order

A MultiGeometry nested inside another MultiGeometry is not descended
into.  Any other element yields no geometry.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, assert_never

from kml_geojson.converter._coordinates import parse_coordinate, parse_coordinates
from kml_geojson.converter._tree import find_all, find_first, local_name, text_content
from kml_geojson.core.constants import FILL_PREFIX, ICON_PREFIX, LINE_PREFIX, TAG_COORDINATES

if TYPE_CHECKING:
    from lxml.etree import _Element


class GeometryKind(str, Enum):
    """Geometry kinds the converter produces."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @classmethod
    def from_tag(cls, tag: str) -> GeometryKind | None:
        """Map a KML geometry tag to its kind, or ``None`` if unsupported."""
        return _TAG_TO_KIND.get(tag)

    @property
    def style_prefix(self) -> str | None:
        """The style property prefix that applies to this kind, if any."""
        if self is GeometryKind.POINT:
            return ICON_PREFIX
        if self is GeometryKind.LINE_STRING:
            return LINE_PREFIX
        if self is GeometryKind.POLYGON:
            return FILL_PREFIX
        if self is GeometryKind.GEOMETRY_COLLECTION:
            return None
        assert_never(self)


_TAG_TO_KIND: dict[str, GeometryKind] = {
    "Point": GeometryKind.POINT,
    "LineString": GeometryKind.LINE_STRING,
    "Polygon": GeometryKind.POLYGON,
    "MultiGeometry": GeometryKind.GEOMETRY_COLLECTION,
}

# Placemark geometry lookup order; the first direct child found wins.
PLACEMARK_GEOMETRY_TAGS: tuple[str, ...] = ("Point", "LineString", "Polygon", "MultiGeometry")

# Children of a MultiGeometry that become collection members.
COLLECTION_MEMBER_TAGS: tuple[str, ...] = ("Point", "LineString", "Polygon")


def parse_geometry(element: _Element, *, include_altitude: bool = True) -> dict[str, Any] | None:
    """Parse a KML geometry element.

    Returns:
        A GeoJSON-form geometry dict, or ``None`` when the element is
        not a supported geometry or has no usable coordinates.
    """
    kind = GeometryKind.from_tag(local_name(element))
    if kind is None:
        return None

    if kind is GeometryKind.GEOMETRY_COLLECTION:
        return _parse_collection(element, include_altitude=include_altitude)

    coordinates_elem = find_first(element, TAG_COORDINATES)
    if coordinates_elem is None:
        return None
    text = text_content(coordinates_elem)

    if kind is GeometryKind.POINT:
        coordinate = parse_coordinate(text, include_altitude=include_altitude)
        if coordinate is None:
            return None
        return {"type": kind.value, "coordinates": coordinate}

    if kind is GeometryKind.LINE_STRING or kind is GeometryKind.POLYGON:
        coordinates = parse_coordinates(text, include_altitude=include_altitude)
        if not coordinates:
            return None
        return {"type": kind.value, "coordinates": coordinates}

    assert_never(kind)


def _parse_collection(element: _Element, *, include_altitude: bool) -> dict[str, Any]:
    members: list[_Element] = []
    for tag in COLLECTION_MEMBER_TAGS:
        members.extend(find_all(element, tag, direct_child=True))

    geometries: list[dict[str, Any]] = []
    for member in members:
        geometry = parse_geometry(member, include_altitude=include_altitude)
        if geometry is not None:
            geometries.append(geometry)

    return {"type": GeometryKind.GEOMETRY_COLLECTION.value, "geometries": geometries}
