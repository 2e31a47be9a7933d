"""Shared converter constants — single source of truth.

Centralises KML tag names, namespaces and the flat style-property
vocabulary used by the style resolver and the placemark assembler.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
"""KML 2.2 namespace (also carries the ``kml:id`` attribute of gx elements)."""

# ---------------------------------------------------------------------------
# Element and attribute names (local names, namespace-agnostic)
# ---------------------------------------------------------------------------

TAG_KML = "kml"
TAG_PLACEMARK = "Placemark"
TAG_FOLDER = "Folder"
TAG_NAME = "name"
TAG_DESCRIPTION = "description"
TAG_STYLE_URL = "styleUrl"
TAG_COORDINATES = "coordinates"
TAG_EXTENDED_DATA = "ExtendedData"

TAG_STYLE = "Style"
TAG_CASCADING_STYLE = "CascadingStyle"
TAG_STYLE_MAP = "StyleMap"
TAG_PAIR = "Pair"
TAG_KEY = "key"

TAG_SCHEMA = "Schema"
TAG_SIMPLE_FIELD = "SimpleField"
TAG_SCHEMA_DATA = "SchemaData"
TAG_SIMPLE_DATA = "SimpleData"
TAG_DATA = "Data"
TAG_VALUE = "value"

ATTR_ID = "id"
ATTR_NAME = "name"
ATTR_TYPE = "type"
ATTR_SCHEMA_URL = "schemaUrl"
ATTR_KML_ID = f"{{{KML_NAMESPACE}}}id"

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_FOLDER_NAME = "Untitled folder"
HIGHLIGHT_PREFIX = "highlight-"
STYLE_MAP_NORMAL = "normal"
STYLE_MAP_HIGHLIGHT = "highlight"

# LabelStyle scale is expressed in pixels relative to a 16px base font.
LABEL_BASE_SIZE_PX = 16

# ---------------------------------------------------------------------------
# Style property vocabulary
# ---------------------------------------------------------------------------

ICON_COLOR = "icon-color"
ICON_OPACITY = "icon-opacity"
ICON_SIZE = "icon-size"
ICON_IMAGE = "icon-image"
LINE_COLOR = "line-color"
LINE_OPACITY = "line-opacity"
LINE_WIDTH = "line-width"
FILL_COLOR = "fill-color"
FILL_OPACITY = "fill-opacity"
FILL_OUTLINE_COLOR = "fill-outline-color"
TEXT_COLOR = "text-color"
TEXT_OPACITY = "text-opacity"
TEXT_SIZE = "text-size"

STYLE_PROPERTY_KEYS: tuple[str, ...] = (
    ICON_COLOR,
    ICON_OPACITY,
    ICON_SIZE,
    ICON_IMAGE,
    LINE_COLOR,
    LINE_OPACITY,
    LINE_WIDTH,
    FILL_COLOR,
    FILL_OPACITY,
    FILL_OUTLINE_COLOR,
    TEXT_COLOR,
    TEXT_OPACITY,
    TEXT_SIZE,
)

ICON_PREFIX = "icon-"
LINE_PREFIX = "line-"
FILL_PREFIX = "fill-"
