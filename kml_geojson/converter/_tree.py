"""Element-tree access helpers for the converter.

The converter only needs four things from the XML tree: descendant
lookup by tag name (document order, optionally restricted to direct
children), attribute lookup, text content and parent links.  lxml
provides all four; these helpers match elements by *local* name so
documents with or without the KML default namespace behave the same.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from kml_geojson.core.constants import TAG_KML
from kml_geojson.core.exceptions import KmlDocumentError

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_geojson.converter")


def parse_document(content: str | bytes) -> _Element:
    """Parse KML text and return its ``<kml>`` element.

    ``str`` input is encoded as UTF-8 and any encoding declared in the
    XML prolog is overridden; ``bytes`` input honours the declaration.

    Raises:
        lxml.etree.XMLSyntaxError: If the text is not well-formed XML
            (propagated from lxml unchanged).
        KmlDocumentError: If the tree has no ``<kml>`` element.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if isinstance(content, str):
        data = content.encode("utf-8")
        parser = etree.XMLParser(
            encoding="utf-8", resolve_entities=False, no_network=True, huge_tree=False
        )
    else:
        data = content
        parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)

    root: _Element = etree.fromstring(data, parser=parser)

    if local_name(root) == TAG_KML:
        return root
    kml_root = find_first(root, TAG_KML)
    if kml_root is None:
        msg = f"No <kml> element found; root element is <{local_name(root)}>"
        raise KmlDocumentError(msg)
    return kml_root


def local_name(element: _Element) -> str:
    """Return the tag name without namespace; ``""`` for comments and PIs."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def iter_tagged(node: _Element, tag: str, *, direct_child: bool = False) -> Iterator[_Element]:
    """Yield elements named *tag* below *node* in document order."""
    candidates = node.iterchildren() if direct_child else node.iterdescendants()
    for element in candidates:
        if local_name(element) == tag:
            yield element


def find_all(node: _Element, tag: str, *, direct_child: bool = False) -> list[_Element]:
    """Return all elements named *tag* below *node* in document order."""
    return list(iter_tagged(node, tag, direct_child=direct_child))


def find_first(node: _Element, tag: str, *, direct_child: bool = False) -> _Element | None:
    """Return the first element named *tag* below *node*, or ``None``."""
    return next(iter_tagged(node, tag, direct_child=direct_child), None)


def text_content(element: _Element) -> str:
    """Concatenated text of *element* and all its descendants."""
    return "".join(element.itertext())


def child_text(node: _Element, tag: str) -> str | None:
    """Text content of the first direct child named *tag*, or ``None``."""
    child = find_first(node, tag, direct_child=True)
    if child is None:
        return None
    return text_content(child)
