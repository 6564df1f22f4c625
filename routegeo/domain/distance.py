"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of radius ``EARTH_RADIUS_KM``.  The
equatorial radius (6378 km) is used rather than the mean radius
(6371 km); the choice shows up in the second decimal of every figure
we display, so it lives here as a named constant and nowhere else.

Road distance, when available, comes from the routing service in metres
and only needs ``meters_to_km`` / ``format_distance``.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

from .entities import Coordinate

EARTH_RADIUS_KM = 6_378.0
DISTANCE_DECIMALS = 2


def _central_angle(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # Float error can push h a hair past 1 near antipodes.
    h = min(1.0, max(0.0, h))
    return 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def haversine_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Return the unrounded great-circle distance in **km** between two points."""
    return radius_km * _central_angle(lat1, lng1, lat2, lng2)


def central_angle(a: Coordinate, b: Coordinate) -> float:
    """Return the angle subtended at the Earth's centre by *a* and *b*, in radians."""
    return _central_angle(a.latitude, a.longitude, b.latitude, b.longitude)


def distance(
    a: Coordinate, b: Coordinate, radius_km: float = EARTH_RADIUS_KM
) -> float:
    """Great-circle distance between *a* and *b* in km, rounded to 2 decimals."""
    km = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude, radius_km)
    return round(km, DISTANCE_DECIMALS)


def meters_to_km(meters: float) -> float:
    return round(meters / 1000, DISTANCE_DECIMALS)


def format_distance(km: float) -> str:
    """Render a distance the way the map screen shows it, e.g. ``"357.12 km"``."""
    return f"{km:.{DISTANCE_DECIMALS}f} km"
