"""Pydantic output models for a KML → GeoJSON conversion.

These models are the converter's output contract:

- **KmlFolder**: one record per ``<Folder>`` element, linked to its parent
- **KmlFeature**: one GeoJSON feature per ``<Placemark>`` that yields geometry
- **FeatureCollection**: the GeoJSON envelope around the features
- **ConversionResult**: folders plus feature collection (batch mode)

Geometries are plain GeoJSON-form dicts (``{"type": ..., "coordinates": ...}``
or ``{"type": "GeometryCollection", "geometries": [...]}``).  Coordinates are
not validated here; NaN components pass through unchanged.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class KmlFolder(BaseModel):
    """A folder record describing one level of the document hierarchy.

    Attributes:
        folder_id: Identifier assigned to the folder.
        name: Folder name (``"Untitled folder"`` when the element has none).
        parent_folder_id: Id of the enclosing folder, ``None`` at the root.
    """

    model_config = ConfigDict(frozen=True)

    folder_id: str
    name: str
    parent_folder_id: str | None = None


class KmlFeature(BaseModel):
    """A GeoJSON feature built from a ``<Placemark>``.

    ``properties`` always carries ``name``, ``description`` and
    ``folder_id``; ``extended_data`` and style-derived keys are optional.
    """

    type: Literal["Feature"] = "Feature"
    id: str
    geometry: dict[str, Any]
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def geometry_type(self) -> str:
        return str(self.geometry.get("type", ""))

    @property
    def folder_id(self) -> str | None:
        return self.properties.get("folder_id")


class FeatureCollection(BaseModel):
    """GeoJSON ``FeatureCollection`` envelope."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[KmlFeature] = Field(default_factory=list)


class ConversionResult(BaseModel):
    """Batch conversion output: folder records plus a feature collection."""

    folders: list[KmlFolder] = Field(default_factory=list)
    geojson: FeatureCollection = Field(default_factory=FeatureCollection)

    @property
    def features(self) -> list[KmlFeature]:
        """Shortcut for ``geojson.features``."""
        return self.geojson.features

    def to_dict(self) -> dict[str, Any]:
        """Serialise to plain dicts and lists (ready for ``json.dumps``)."""
        return self.model_dump()
