"""Style and StyleMap resolution.

Two id-keyed tables are built once per document:

- **styles**: every ``<Style id="...">``, plus the first ``<Style>``
  inside each ``<gx:CascadingStyle kml:id="...">`` under the wrapper's id
- **style maps**: every ``<StyleMap id="...">`` with its normal and
  highlight ``<Pair>`` references

A placemark's ``styleUrl`` is resolved against a style map first, then
against a plain style.  Style maps contribute the normal style's
properties plus ``highlight-`` prefixed properties for values the
highlight style changes.  The merged properties are finally filtered
to the placemark's geometry kind (icon → Point, line → LineString,
fill → Polygon; text properties apply to every kind).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kml_geojson.converter._colors import kml_color, parse_scale, round_half_up
from kml_geojson.converter._tree import find_first, iter_tagged, text_content
from kml_geojson.core.constants import (
    ATTR_ID,
    ATTR_KML_ID,
    FILL_COLOR,
    FILL_OPACITY,
    FILL_OUTLINE_COLOR,
    FILL_PREFIX,
    HIGHLIGHT_PREFIX,
    ICON_COLOR,
    ICON_IMAGE,
    ICON_OPACITY,
    ICON_PREFIX,
    ICON_SIZE,
    LABEL_BASE_SIZE_PX,
    LINE_COLOR,
    LINE_OPACITY,
    LINE_PREFIX,
    LINE_WIDTH,
    STYLE_MAP_HIGHLIGHT,
    STYLE_MAP_NORMAL,
    TAG_CASCADING_STYLE,
    TAG_KEY,
    TAG_PAIR,
    TAG_STYLE,
    TAG_STYLE_MAP,
    TAG_STYLE_URL,
    TEXT_COLOR,
    TEXT_OPACITY,
    TEXT_SIZE,
)
from kml_geojson.models.style import KmlStyle, KmlStyleMap

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.converter._geometry import GeometryKind

logger = logging.getLogger("kml_geojson.converter.styles")

_GEOMETRY_PREFIXES = (ICON_PREFIX, LINE_PREFIX, FILL_PREFIX)


# ---------------------------------------------------------------------------
# Style element decoding
# ---------------------------------------------------------------------------


def parse_style(element: _Element, style_id: str) -> KmlStyle:
    """Decode a ``<Style>`` element into the flat property vocabulary."""
    properties: dict[str, Any] = {}

    icon_style = find_first(element, "IconStyle")
    if icon_style is not None:
        _decode_color(icon_style, properties, ICON_COLOR, ICON_OPACITY)
        scale = _decode_scale(icon_style, "scale")
        if scale is not None:
            properties[ICON_SIZE] = scale
        icon = find_first(icon_style, "Icon")
        href = find_first(icon, "href") if icon is not None else None
        if href is not None:
            image = text_content(href).strip()
            if image:
                properties[ICON_IMAGE] = image

    line_style = find_first(element, "LineStyle")
    if line_style is not None:
        _decode_color(line_style, properties, LINE_COLOR, LINE_OPACITY)
        width = _decode_scale(line_style, "width")
        if width is not None:
            properties[LINE_WIDTH] = width

    poly_style = find_first(element, "PolyStyle")
    if poly_style is not None:
        color = _decode_color(poly_style, properties, FILL_COLOR, FILL_OPACITY)
        if color is not None:
            properties[FILL_OUTLINE_COLOR] = color

    label_style = find_first(element, "LabelStyle")
    if label_style is not None:
        _decode_color(label_style, properties, TEXT_COLOR, TEXT_OPACITY)
        scale = _decode_scale(label_style, "scale")
        if scale is not None:
            properties[TEXT_SIZE] = round_half_up(scale * LABEL_BASE_SIZE_PX)

    return KmlStyle(style_id=style_id, properties=properties)


def _decode_color(
    sub_style: _Element, properties: dict[str, Any], color_key: str, opacity_key: str
) -> str | None:
    """Write decoded color/opacity for *sub_style*; return the color."""
    color_elem = find_first(sub_style, "color")
    if color_elem is None:
        return None
    color, opacity = kml_color(text_content(color_elem))
    if color is not None:
        properties[color_key] = color
    if opacity is not None:
        properties[opacity_key] = opacity
    return color


def _decode_scale(sub_style: _Element, tag: str) -> float | None:
    scale_elem = find_first(sub_style, tag)
    if scale_elem is None:
        return None
    return parse_scale(text_content(scale_elem))


# ---------------------------------------------------------------------------
# Document tables
# ---------------------------------------------------------------------------


def build_style_tables(
    kml_root: _Element,
) -> tuple[dict[str, KmlStyle], dict[str, KmlStyleMap]]:
    """Scan the document once for styles and style maps.

    The first definition of a duplicated id wins.

    Returns:
        ``(styles, style_maps)`` keyed by id.
    """
    styles: dict[str, KmlStyle] = {}
    for style_elem in iter_tagged(kml_root, TAG_STYLE):
        style_id = style_elem.get(ATTR_ID)
        if style_id is None:
            continue
        styles.setdefault(style_id, parse_style(style_elem, style_id))

    for wrapper in iter_tagged(kml_root, TAG_CASCADING_STYLE):
        style_id = wrapper.get(ATTR_KML_ID) or wrapper.get(ATTR_ID) or ""
        inner = find_first(wrapper, TAG_STYLE)
        if inner is not None:
            styles.setdefault(style_id, parse_style(inner, style_id))

    style_maps: dict[str, KmlStyleMap] = {}
    for map_elem in iter_tagged(kml_root, TAG_STYLE_MAP):
        map_id = map_elem.get(ATTR_ID)
        if map_id is None:
            continue
        style_maps.setdefault(map_id, _parse_style_map(map_elem, map_id))

    logger.debug("Collected %d style(s), %d style map(s)", len(styles), len(style_maps))
    return styles, style_maps


def _parse_style_map(element: _Element, map_id: str) -> KmlStyleMap:
    references: dict[str, str] = {}
    for pair in iter_tagged(element, TAG_PAIR):
        key_elem = find_first(pair, TAG_KEY)
        url_elem = find_first(pair, TAG_STYLE_URL)
        if key_elem is None or url_elem is None:
            continue
        key = text_content(key_elem).strip()
        references[key] = text_content(url_elem).strip().removeprefix("#")

    return KmlStyleMap(
        id=map_id,
        normal=references.get(STYLE_MAP_NORMAL),
        highlight=references.get(STYLE_MAP_HIGHLIGHT),
    )


# ---------------------------------------------------------------------------
# Placemark resolution
# ---------------------------------------------------------------------------


def resolve_style_properties(
    style_url: str,
    kind: GeometryKind,
    styles: dict[str, KmlStyle],
    style_maps: dict[str, KmlStyleMap],
) -> dict[str, Any]:
    """Resolve a placemark's ``styleUrl`` into feature properties.

    Returns an empty dict when the reference resolves to nothing.
    """
    ref = style_url.strip().removeprefix("#")
    if not ref:
        return {}

    merged: dict[str, Any] = {}
    style_map = style_maps.get(ref)
    if style_map is not None:
        normal = styles.get(style_map.normal) if style_map.normal else None
        highlight = styles.get(style_map.highlight) if style_map.highlight else None
        if normal is not None:
            merged.update(normal.properties)
        if highlight is not None:
            for key, value in highlight.properties.items():
                if normal is not None and key in normal and normal.get(key) == value:
                    continue
                merged[HIGHLIGHT_PREFIX + key] = value
    else:
        style = styles.get(ref)
        if style is None:
            logger.debug("Unresolved style reference %r", ref)
            return {}
        merged.update(style.properties)

    return filter_style_properties(merged, kind)


def filter_style_properties(properties: dict[str, Any], kind: GeometryKind) -> dict[str, Any]:
    """Drop icon/line/fill properties (and highlight variants) foreign to *kind*."""
    allowed = kind.style_prefix
    filtered: dict[str, Any] = {}
    for key, value in properties.items():
        prefix = _geometry_prefix(key)
        if prefix is not None and prefix != allowed:
            continue
        filtered[key] = value
    return filtered


def _geometry_prefix(key: str) -> str | None:
    base = key.removeprefix(HIGHLIGHT_PREFIX)
    for prefix in _GEOMETRY_PREFIXES:
        if base.startswith(prefix):
            return prefix
    return None
