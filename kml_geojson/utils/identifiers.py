"""Identifier strategies for folders and features.

An *identifier strategy* maps a source element to an id string.  The
converter never calls a global id facility directly: it receives a
strategy per call, or builds one from the zero-argument generator it
was constructed with.

- ``strategy_from_generator(uuid4_generator)`` — random ids (default).
- ``path_identifier`` — stable for the same document across conversions,
  which makes re-importing a document idempotent.
- ``content_identifier`` — stable for identical element content, even
  across different documents.
"""

from __future__ import annotations

import hashlib
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING

from kml_geojson.core.constants import KML_NAMESPACE

if TYPE_CHECKING:
    from lxml.etree import _Element

IdGenerator = Callable[[], str]
IdStrategy = Callable[["_Element"], str]

# Fixed namespace so UUIDv5 ids are reproducible between processes.
KML_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, KML_NAMESPACE)


def uuid4_generator() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


def strategy_from_generator(generator: IdGenerator) -> IdStrategy:
    """Wrap a zero-argument generator as a strategy that ignores the element."""

    def _strategy(_element: _Element) -> str:
        return generator()

    return _strategy


def path_identifier(element: _Element) -> str:
    """Return a UUIDv5 derived from the element's XPath in its document.

    Two conversions of the same document yield the same id for the
    same element.
    """
    path = element.getroottree().getpath(element)
    return str(uuid.uuid5(KML_ID_NAMESPACE, path))


def content_identifier(element: _Element) -> str:
    """Return a UUIDv5 derived from the element's canonical XML form."""
    from lxml import etree  # type: ignore[attr-defined]

    canonical = etree.tostring(element, method="c14n")
    digest = hashlib.sha256(canonical).hexdigest()
    return str(uuid.uuid5(KML_ID_NAMESPACE, digest))
