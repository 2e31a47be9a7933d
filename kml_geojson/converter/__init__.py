"""KML → GeoJSON conversion — composable pipeline.

Converts a KML document into folder records and a GeoJSON
FeatureCollection, resolving styles, style maps and typed extended
data into per-feature properties.

The pipeline is split into focused stages:
- **_tree**: lxml parsing and namespace-agnostic element lookup
- **_colors** / **_coordinates**: KML color, scale and coordinate text
- **_geometry**: geometry elements → GeoJSON-form geometry dicts
- **_styles**: Style / StyleMap tables and per-placemark resolution
- **_extended_data**: Schema tables and typed ExtendedData coercion
- **_placemark** / **_folders**: feature and folder record assembly
- **_walker**: document-order traversal (batch and streaming)
- **_validation**: opt-in geometry diagnostics

Supported KML structures:
- Point, LineString, Polygon and MultiGeometry Placemarks
- Nested Folder hierarchies (folder ids threaded to descendants)
- Style, gx:CascadingStyle and StyleMap (normal + highlight) styling
- ExtendedData/Data and Schema/SchemaData typed metadata
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kml_geojson.converter._colors import KmlColor, kml_color, parse_scale
from kml_geojson.converter._coordinates import parse_coordinate, parse_coordinates
from kml_geojson.converter._geometry import GeometryKind, parse_geometry
from kml_geojson.converter._tree import parse_document
from kml_geojson.converter._validation import (
    explain_geometry,
    find_invalid_features,
    geometry_is_valid,
    to_shapely,
)
from kml_geojson.converter._walker import (
    DocumentTables,
    FeatureCallback,
    FolderCallback,
    NodeKind,
    WalkContext,
    stream_walk,
    walk,
)
from kml_geojson.models.feature import ConversionResult, FeatureCollection
from kml_geojson.utils.identifiers import (
    IdGenerator,
    IdStrategy,
    strategy_from_generator,
    uuid4_generator,
)

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.core.config import ConverterConfig

logger = logging.getLogger("kml_geojson.converter")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "DocumentTables",
    "FeatureCallback",
    "FolderCallback",
    "GeometryKind",
    "KmlColor",
    "KmlToGeojson",
    "NodeKind",
    "explain_geometry",
    "find_invalid_features",
    "geometry_is_valid",
    "kml_color",
    "kml_to_geojson",
    "parse_coordinate",
    "parse_coordinates",
    "parse_geometry",
    "parse_scale",
    "to_shapely",
]


class KmlToGeojson:
    """Convert KML documents to folder records plus a GeoJSON FeatureCollection.

    Args:
        include_altitude: Emit ``[lon, lat, alt]`` coordinates (default)
            instead of ``[lon, lat]``.
        id_generator: Zero-argument id source used when a call supplies
            no identifier strategy.  Defaults to random UUID4 strings.
        validate_geometries: Drop features whose coordinates contain
            NaN or non-numeric components.
    """

    def __init__(
        self,
        include_altitude: bool = True,
        *,
        id_generator: IdGenerator = uuid4_generator,
        validate_geometries: bool = False,
    ) -> None:
        self.include_altitude = include_altitude
        self.id_generator = id_generator
        self.validate_geometries = validate_geometries

    @classmethod
    def from_config(
        cls, config: ConverterConfig, *, id_generator: IdGenerator = uuid4_generator
    ) -> KmlToGeojson:
        """Build a converter from a ``ConverterConfig``."""
        return cls(
            config.include_altitude,
            id_generator=id_generator,
            validate_geometries=config.validate_geometries,
        )

    def parse(
        self, kml_content: str | bytes, id_strategy: IdStrategy | None = None
    ) -> ConversionResult:
        """Convert a whole document and return every folder and feature.

        Args:
            kml_content: KML document text.
            id_strategy: Maps each Folder/Placemark element to its id.
                Supply a deterministic strategy (e.g.
                ``kml_geojson.utils.identifiers.path_identifier``) for
                reproducible ids across conversions.

        Raises:
            lxml.etree.XMLSyntaxError: If the text is not well-formed XML.
            KmlDocumentError: If the document has no ``<kml>`` element.
        """
        kml_root, context = self._prepare(kml_content, id_strategy)
        folders, features = walk(kml_root, None, context)
        logger.info(
            "Converted KML document: %d folder(s), %d feature(s)",
            len(folders),
            len(features),
        )
        return ConversionResult(folders=folders, geojson=FeatureCollection(features=features))

    async def stream_parse(
        self,
        kml_content: str | bytes,
        on_folder: FolderCallback,
        on_feature: FeatureCallback,
        id_strategy: IdStrategy | None = None,
    ) -> None:
        """Convert a document, delivering records to callbacks in document order.

        Callbacks may be plain functions or coroutine functions; each
        returned awaitable is awaited before the walk continues.  An
        exception raised by a callback ends the walk and propagates.

        Raises:
            lxml.etree.XMLSyntaxError: If the text is not well-formed XML.
            KmlDocumentError: If the document has no ``<kml>`` element.
        """
        kml_root, context = self._prepare(kml_content, id_strategy)
        await stream_walk(kml_root, None, context, on_folder, on_feature)
        logger.info("Streamed KML document")

    def _prepare(
        self, kml_content: str | bytes, id_strategy: IdStrategy | None
    ) -> tuple[_Element, WalkContext]:
        kml_root = parse_document(kml_content)
        context = WalkContext(
            tables=DocumentTables.from_document(kml_root),
            id_strategy=id_strategy or strategy_from_generator(self.id_generator),
            include_altitude=self.include_altitude,
            validate_geometries=self.validate_geometries,
        )
        return kml_root, context


def kml_to_geojson(
    kml_content: str | bytes,
    *,
    include_altitude: bool = True,
    id_strategy: IdStrategy | None = None,
) -> dict[str, Any]:
    """Convert a KML document to a plain ``{"folders": ..., "geojson": ...}`` dict."""
    converter = KmlToGeojson(include_altitude)
    return converter.parse(kml_content, id_strategy).to_dict()
