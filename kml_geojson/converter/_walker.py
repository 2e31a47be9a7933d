"""Depth-first document traversal (batch and streaming).

The walker visits elements in document order (pre-order).  Each element
is classified as a Placemark, a Folder or anything else; placemarks
become features, folders become folder records and switch the folder
scope for their own descendants.  Every element's children are visited
regardless of its kind.

Batch mode returns the collected lists, each recursive call owning its
own lists.  Streaming mode hands each record to a callback instead and
awaits any awaitable the callback returns before moving on, so
callbacks observe strict document order and never interleave.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, assert_never

from kml_geojson.converter._extended_data import build_schema_table
from kml_geojson.converter._folders import parse_folder
from kml_geojson.converter._placemark import parse_placemark
from kml_geojson.converter._styles import build_style_tables
from kml_geojson.converter._tree import local_name
from kml_geojson.core.constants import TAG_FOLDER, TAG_PLACEMARK

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.models.feature import KmlFeature, KmlFolder
    from kml_geojson.models.schema import KmlSchema
    from kml_geojson.models.style import KmlStyle, KmlStyleMap
    from kml_geojson.utils.identifiers import IdStrategy

FolderCallback = Callable[["KmlFolder"], Awaitable[None] | None]
FeatureCallback = Callable[["KmlFeature"], Awaitable[None] | None]


class NodeKind(Enum):
    """How the walker treats an element."""

    PLACEMARK = "Placemark"
    FOLDER = "Folder"
    OTHER = "Other"

    @classmethod
    def of(cls, element: _Element) -> NodeKind:
        name = local_name(element)
        if name == TAG_PLACEMARK:
            return cls.PLACEMARK
        if name == TAG_FOLDER:
            return cls.FOLDER
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class DocumentTables:
    """Id-keyed lookup tables built once per document, read-only during the walk."""

    styles: dict[str, KmlStyle]
    style_maps: dict[str, KmlStyleMap]
    schemas: dict[str, KmlSchema]

    @classmethod
    def from_document(cls, kml_root: _Element) -> DocumentTables:
        styles, style_maps = build_style_tables(kml_root)
        return cls(styles=styles, style_maps=style_maps, schemas=build_schema_table(kml_root))


@dataclass(frozen=True, slots=True)
class WalkContext:
    """Per-conversion settings threaded through the traversal."""

    tables: DocumentTables
    id_strategy: IdStrategy
    include_altitude: bool = True
    validate_geometries: bool = False


def walk(
    node: _Element, folder_id: str | None, context: WalkContext
) -> tuple[list[KmlFolder], list[KmlFeature]]:
    """Collect folders and features from *node* and its subtree, in document order."""
    folders: list[KmlFolder] = []
    features: list[KmlFeature] = []

    kind = NodeKind.of(node)
    if kind is NodeKind.PLACEMARK:
        feature = parse_placemark(node, folder_id, context)
        if feature is not None:
            features.append(feature)
    elif kind is NodeKind.FOLDER:
        folder = parse_folder(node, folder_id, context.id_strategy)
        folders.append(folder)
        folder_id = folder.folder_id
    elif kind is NodeKind.OTHER:
        pass
    else:
        assert_never(kind)

    for child in node.iterchildren():
        child_folders, child_features = walk(child, folder_id, context)
        folders.extend(child_folders)
        features.extend(child_features)

    return folders, features


async def stream_walk(
    node: _Element,
    folder_id: str | None,
    context: WalkContext,
    on_folder: FolderCallback,
    on_feature: FeatureCallback,
) -> None:
    """Deliver folders and features from *node* and its subtree to callbacks.

    An exception raised by a callback propagates and ends the walk.
    """
    kind = NodeKind.of(node)
    if kind is NodeKind.PLACEMARK:
        feature = parse_placemark(node, folder_id, context)
        if feature is not None:
            await _deliver(on_feature, feature)
    elif kind is NodeKind.FOLDER:
        folder = parse_folder(node, folder_id, context.id_strategy)
        await _deliver(on_folder, folder)
        folder_id = folder.folder_id
    elif kind is NodeKind.OTHER:
        pass
    else:
        assert_never(kind)

    for child in node.iterchildren():
        await stream_walk(child, folder_id, context, on_folder, on_feature)


async def _deliver(callback: Callable[[Any], Any], item: Any) -> None:
    result = callback(item)
    if inspect.isawaitable(result):
        await result
