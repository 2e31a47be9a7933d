"""KML coordinate text parsing.

KML writes a coordinate as ``lon,lat[,alt]`` and a coordinate list as
whitespace-separated coordinate tokens.  Output coordinates are lists
(``[lon, lat]`` or ``[lon, lat, alt]``) so they drop straight into
GeoJSON geometries.
"""

from __future__ import annotations

import math

from kml_geojson.converter._colors import parse_float_prefix


def parse_coordinate(text: str | None, *, include_altitude: bool = True) -> list[float] | None:
    """Parse a single ``lon,lat[,alt]`` coordinate.

    The text is trimmed and split on commas; whitespace around each
    component is ignored, so ``" 10 , 20 "`` is ``[10, 20, 0]``.  A
    missing altitude defaults to ``0``; a present but non-numeric one
    becomes NaN.

    Returns:
        ``[lon, lat]`` or ``[lon, lat, alt]``, or ``None`` when *text*
        is empty or lon/lat are not numeric.
    """
    if not text or not text.strip():
        return None

    parts = text.strip().split(",")
    lon = parse_float_prefix(parts[0])
    lat = parse_float_prefix(parts[1]) if len(parts) > 1 else None
    if lon is None or lat is None:
        return None

    if not include_altitude:
        return [lon, lat]

    altitude = 0.0
    if len(parts) > 2:
        parsed = parse_float_prefix(parts[2])
        altitude = math.nan if parsed is None else parsed
    return [lon, lat, altitude]


def parse_coordinates(text: str | None, *, include_altitude: bool = True) -> list[list[float]]:
    """Parse a whitespace-separated coordinate list.

    Empty and invalid tokens are dropped; the result may be empty.
    """
    if not text:
        return []
    coordinates: list[list[float]] = []
    for token in text.split():
        coordinate = parse_coordinate(token, include_altitude=include_altitude)
        if coordinate is not None:
            coordinates.append(coordinate)
    return coordinates
