"""Color and scalar decoders for KML style values.

KML colors are ``aabbggrr`` hex strings; GeoJSON styling conventions
expect ``#rrggbb`` plus a separate 0..1 opacity.  Numeric style and
data values are read with leading-prefix semantics (``"2.5px"`` is
``2.5``) and anything without a numeric prefix is treated as unset.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class KmlColor(NamedTuple):
    """Decoded color: ``color`` hex string and ``opacity`` in [0, 1]."""

    color: str | None
    opacity: float | None


def parse_float_prefix(text: str | None) -> float | None:
    """Parse the leading decimal number in *text*, or return ``None``."""
    if not text:
        return None
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_int_prefix(text: str | None) -> int | None:
    """Parse the leading integer in *text*, or return ``None``."""
    if not text:
        return None
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def kml_color(text: str | None) -> KmlColor:
    """Decode a KML color.

    - ``rgb`` / ``rrggbb`` (optionally ``#``-prefixed) pass through
      unchanged with no opacity.
    - ``aabbggrr`` becomes ``#rrggbb`` with ``opacity = aa / 255``.
    - Anything else decodes to ``(None, None)``.
    """
    value = (text or "").strip().removeprefix("#")

    if len(value) in (3, 6):
        return KmlColor(value, None)

    if len(value) == 8:
        try:
            opacity: float | None = int(value[0:2], 16) / 255
        except ValueError:
            opacity = None
        return KmlColor("#" + value[6:8] + value[4:6] + value[2:4], opacity)

    return KmlColor(None, None)


def parse_scale(text: str | None) -> float | None:
    """Decode a scale/width value; ``None`` unless it is a finite number."""
    value = parse_float_prefix(text)
    if value is None or not math.isfinite(value):
        return None
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, rounding halves up (``2.5`` -> ``3``)."""
    return math.floor(value + 0.5)
