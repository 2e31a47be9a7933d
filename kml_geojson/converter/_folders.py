"""Folder record creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kml_geojson.converter._tree import child_text
from kml_geojson.core.constants import DEFAULT_FOLDER_NAME, TAG_NAME
from kml_geojson.models.feature import KmlFolder

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.utils.identifiers import IdStrategy


def parse_folder(
    element: _Element, parent_folder_id: str | None, id_strategy: IdStrategy
) -> KmlFolder:
    """Create the record for a ``<Folder>`` visited under *parent_folder_id*.

    The name comes from the folder's own ``<name>`` child, falling back
    to ``"Untitled folder"``.
    """
    name = child_text(element, TAG_NAME)
    return KmlFolder(
        folder_id=id_strategy(element),
        name=DEFAULT_FOLDER_NAME if name is None else name,
        parent_folder_id=parent_folder_id,
    )
