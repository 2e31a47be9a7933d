"""Schema registry and ExtendedData resolution.

Handles both KML metadata patterns:
- ``ExtendedData/SchemaData/SimpleData`` — typed fields declared by a
  ``<Schema>`` element, coerced to int/float/bool/str.
- ``ExtendedData/Data/value`` — untyped key-value pairs, kept as strings.

Typed values are resolved first; untyped ``Data`` values are applied
afterwards and win on name collisions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kml_geojson.converter._colors import parse_float_prefix, parse_int_prefix
from kml_geojson.converter._tree import find_first, iter_tagged, text_content
from kml_geojson.core.constants import (
    ATTR_ID,
    ATTR_NAME,
    ATTR_SCHEMA_URL,
    ATTR_TYPE,
    TAG_DATA,
    TAG_SCHEMA,
    TAG_SCHEMA_DATA,
    TAG_SIMPLE_DATA,
    TAG_SIMPLE_FIELD,
    TAG_VALUE,
)
from kml_geojson.models.schema import FieldType, KmlSchema

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_geojson.converter.extended_data")


def build_schema_table(kml_root: _Element) -> dict[str, KmlSchema]:
    """Collect every ``<Schema id="...">`` keyed by id (first definition wins)."""
    schemas: dict[str, KmlSchema] = {}
    for schema_elem in iter_tagged(kml_root, TAG_SCHEMA):
        schema_id = schema_elem.get(ATTR_ID)
        if schema_id is None:
            continue
        fields: dict[str, str] = {}
        for simple_field in iter_tagged(schema_elem, TAG_SIMPLE_FIELD):
            name = simple_field.get(ATTR_NAME)
            declared = simple_field.get(ATTR_TYPE)
            if name is not None and declared is not None:
                fields[name] = declared
        schemas.setdefault(schema_id, KmlSchema(id=schema_id, fields=fields))

    logger.debug("Collected %d schema(s)", len(schemas))
    return schemas


def coerce_value(text: str, field_type: FieldType) -> Any:
    """Coerce raw ``SimpleData`` text to the declared type.

    Returns ``None`` when a numeric type has no numeric prefix.
    """
    if field_type is FieldType.STRING:
        return text
    if field_type is FieldType.BOOL:
        return text.strip() == "true"
    if field_type.is_integer:
        return parse_int_prefix(text)
    if field_type.is_float:
        return parse_float_prefix(text)
    return None


def parse_extended_data(element: _Element, schemas: dict[str, KmlSchema]) -> dict[str, Any]:
    """Resolve an ``<ExtendedData>`` element into a flat mapping.

    A ``schemaUrl`` must be a same-document ``#id`` reference.  Unknown
    schemas, undeclared fields and uncoercible values are skipped.  The
    result may be empty.
    """
    extended_data: dict[str, Any] = {}

    for schema_data in iter_tagged(element, TAG_SCHEMA_DATA):
        schema_url = (schema_data.get(ATTR_SCHEMA_URL) or "").strip()
        schema_ref = schema_url[1:] if schema_url.startswith("#") else ""
        schema = schemas.get(schema_ref) if schema_ref else None
        if schema is None:
            logger.debug("Unresolved schema reference %r", schema_url)
            continue

        for simple_data in iter_tagged(schema_data, TAG_SIMPLE_DATA):
            name = simple_data.get(ATTR_NAME)
            if not name:
                continue
            field_type = schema.field_type(name)
            if field_type is None:
                continue
            value = coerce_value(text_content(simple_data), field_type)
            if value is None:
                logger.debug("Skipping uncoercible %s value for field %r", field_type.value, name)
                continue
            extended_data[name] = value

    for data in iter_tagged(element, TAG_DATA):
        name = data.get(ATTR_NAME)
        value_elem = find_first(data, TAG_VALUE)
        value = text_content(value_elem) if value_elem is not None else ""
        if not name or not value:
            continue
        extended_data[name] = value

    return extended_data
