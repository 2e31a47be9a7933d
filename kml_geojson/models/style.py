"""Data models for resolved KML styles and style maps.

A ``KmlStyle`` is the flat, already-decoded form of a ``<Style>``
element: KML's nested IconStyle/LineStyle/PolyStyle/LabelStyle blocks
become a single mapping keyed by the property vocabulary in
``kml_geojson.core.constants``.  A ``KmlStyleMap`` links one logical
style id to a normal/highlight pair of ``KmlStyle`` ids.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class KmlStyle:
    """A decoded ``<Style>`` element.

    Attributes:
        style_id: The element's ``id`` (or the ``kml:id`` of an enclosing
            ``gx:CascadingStyle``).
        properties: Decoded style properties, e.g. ``{"line-color": "#ff0000"}``.
            Unset or invalid sub-fields are absent.
    """

    style_id: str
    properties: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any:
        """Return the property value for *key*, or ``None`` when unset."""
        return self.properties.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.properties


@dataclass(frozen=True, slots=True)
class KmlStyleMap:
    """A ``<StyleMap>`` pairing normal and highlight style references.

    Attributes:
        id: The style map's ``id``.
        normal: Style id used for the normal state (``#`` stripped).
        highlight: Style id used for the highlight state (``#`` stripped).
    """

    id: str
    normal: str | None = None
    highlight: str | None = None
