"""Converter exception taxonomy.

The converter degrades rather than fails: unresolvable references,
missing geometry and bad numeric text are skipped, never raised.  The
exceptions below cover the few conditions that cannot be degraded.

Taxonomy categories
-------------------
- ``ValidationError`` — invalid caller input or configuration.
- ``DocumentError``   — the input parses as XML but is not a usable KML document.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.

XML syntax errors raised by ``lxml`` are not part of this
hierarchy; they propagate to the caller unchanged.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all converter-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Converter stage where the error occurred
            (e.g. ``"config"``, ``"parse_document"``).
        code: Machine-readable error code (e.g. ``"KML_ROOT_MISSING"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, DocumentError):
            return "document"
        return "conversion"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ConversionError):
    """Invalid caller input or configuration."""


class DocumentError(ConversionError):
    """Well-formed XML that cannot be treated as a KML document."""

    default_stage = "parse_document"


class KmlDocumentError(DocumentError):
    """Raised when the parsed tree contains no ``<kml>`` element."""

    default_code = "KML_ROOT_MISSING"
