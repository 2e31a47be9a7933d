"""Data model for KML ``<Schema>`` declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FieldType(str, Enum):
    """``SimpleField`` types that produce typed extended-data values."""

    STRING = "string"
    INT = "int"
    UINT = "uint"
    SHORT = "short"
    USHORT = "ushort"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"

    @classmethod
    def from_declared(cls, declared: str) -> FieldType | None:
        """Return the member for a declared type name, or ``None`` if unsupported."""
        try:
            return cls(declared)
        except ValueError:
            return None

    @property
    def is_integer(self) -> bool:
        return self in (FieldType.INT, FieldType.UINT, FieldType.SHORT, FieldType.USHORT)

    @property
    def is_float(self) -> bool:
        return self in (FieldType.FLOAT, FieldType.DOUBLE)


@dataclass(frozen=True, slots=True)
class KmlSchema:
    """A ``<Schema>`` element with its declared fields.

    Attributes:
        id: The schema's ``id`` attribute.
        fields: Mapping of ``SimpleField`` name to declared type text.
            Types outside ``FieldType`` are kept as declared but never
            produce a value.
    """

    id: str
    fields: dict[str, str] = field(default_factory=dict)

    def field_type(self, name: str) -> FieldType | None:
        """Return the coercion type for field *name*, or ``None``."""
        declared = self.fields.get(name)
        if declared is None:
            return None
        return FieldType.from_declared(declared)
