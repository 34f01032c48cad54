"""Geo primitives: YAIXM coordinate/distance literals and flat-earth math.

Positions are projected with an equirectangular approximation (one degree
of latitude is 60 NM, longitude scaled by the cosine of latitude).  That is
adequate for airspace circles and arcs of a few tens of miles.
"""

from __future__ import annotations

import logging
import math
import re

from asselect.contracts.common import LatLon
from asselect.errors import MalformedCoordinateError, MalformedDistanceError

logger = logging.getLogger(__name__)

NM_TO_METRES = 1852.0
KM_TO_METRES = 1000.0
METRES_PER_DEGREE = 60 * NM_TO_METRES

# DDMMSS[NS] DDDMMSS[EW], e.g. "515812N 0001550W"
_LATLON_RE = re.compile(r"^(\d{2})(\d{2})(\d{2})([NS])\s(\d{3})(\d{2})(\d{2})([EW])$")


def parse_coordinate(literal: str) -> LatLon:
    """Convert a 16 character YAIXM lat/lon literal to decimal degrees.

    South and west are negative.

    Raises:
        MalformedCoordinateError: wrong length/shape or out of range field.
    """
    if not isinstance(literal, str) or len(literal) != 16:
        raise MalformedCoordinateError(str(literal), "expected 16 characters")

    match = _LATLON_RE.match(literal)
    if match is None:
        raise MalformedCoordinateError(literal)

    lat_d, lat_m, lat_s, ns, lon_d, lon_m, lon_s, ew = match.groups()
    lat = _dms(literal, int(lat_d), int(lat_m), int(lat_s), 90)
    lon = _dms(literal, int(lon_d), int(lon_m), int(lon_s), 180)
    if ns == "S":
        lat = -lat
    if ew == "W":
        lon = -lon
    return (lat, lon)


def _dms(literal: str, deg: int, mins: int, secs: int, limit: int) -> float:
    if mins >= 60 or secs >= 60:
        raise MalformedCoordinateError(literal, "minutes/seconds out of range")
    value = deg + mins / 60 + secs / 3600
    if value > limit:
        raise MalformedCoordinateError(literal, "degrees out of range")
    return value


def parse_distance(literal: str) -> float:
    """Convert a YAIXM distance such as ``"5 nm"`` or ``"3 km"`` to metres.

    Only ``nm`` and ``km`` appear in the data.  Any other unit token is read
    as kilometres, with a warning.

    Raises:
        MalformedDistanceError: missing unit or unparsable magnitude.
    """
    parts = literal.split() if isinstance(literal, str) else []
    if len(parts) != 2:
        raise MalformedDistanceError(str(literal))

    try:
        magnitude = float(parts[0])
    except ValueError:
        raise MalformedDistanceError(literal) from None
    if not math.isfinite(magnitude) or magnitude < 0:
        raise MalformedDistanceError(literal)

    unit = parts[1]
    if unit == "nm":
        return magnitude * NM_TO_METRES
    if unit != "km":
        logger.warning("Unknown distance unit %r in %r, assuming km", unit, literal)
    return magnitude * KM_TO_METRES


def offset_point(centre: LatLon, distance_m: float, bearing_deg: float) -> LatLon:
    """Point at a distance and true bearing from ``centre``."""
    lat, lon = centre
    theta = math.radians(bearing_deg)
    dlat = distance_m * math.cos(theta) / METRES_PER_DEGREE
    dlon = distance_m * math.sin(theta) / (METRES_PER_DEGREE * math.cos(math.radians(lat)))
    return (lat + dlat, lon + dlon)


def bearing_from(centre: LatLon, point: LatLon) -> float:
    """True bearing (0-360) of ``point`` as seen from ``centre``."""
    dy = point[0] - centre[0]
    dx = (point[1] - centre[1]) * math.cos(math.radians(centre[0]))
    return math.degrees(math.atan2(dx, dy)) % 360


def format_latlon(point: LatLon) -> str:
    """OpenAir coordinate text, e.g. ``51:58:12 N 000:15:50 W``."""
    lat, lon = point
    return f"{_fmt_dms(lat, 2)} {'S' if lat < 0 else 'N'} {_fmt_dms(lon, 3)} {'W' if lon < 0 else 'E'}"


def _fmt_dms(value: float, width: int) -> str:
    total = round(abs(value) * 3600)
    deg, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)
    return f"{deg:0{width}d}:{mins:02d}:{secs:02d}"
