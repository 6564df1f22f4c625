"""
Route path helpers.

* ``path_from_geojson`` -- OSRM ``geometries=geojson`` gives ``[lon, lat]``
  positions; the rest of the code base works in ``(lat, lon)``.
* ``path_length_km``    -- sum of great-circle hops along a path.
* ``fit_region``        -- the map viewport that shows every point, used
  to frame origin and destination together.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .distance import DISTANCE_DECIMALS, EARTH_RADIUS_KM, haversine_km
from .entities import (
    DEFAULT_LATITUDE_DELTA,
    DEFAULT_LONGITUDE_DELTA,
    Coordinate,
    Path,
    Region,
)


def path_from_geojson(coordinates: Iterable[Sequence[float]]) -> Path:
    """Convert GeoJSON LineString positions into a ``Path``.

    Positions may carry a third (altitude) element, which is dropped.
    """
    path: Path = []
    for i, position in enumerate(coordinates):
        if len(position) < 2:
            raise ValueError(
                f"GeoJSON position {i} needs at least [lon, lat], got {list(position)!r}"
            )
        lon, lat = position[0], position[1]
        path.append(Coordinate(float(lat), float(lon)))
    return path


def path_length_km(path: Sequence[Coordinate], radius_km: float = EARTH_RADIUS_KM) -> float:
    """Total length of *path* in km.  Rounded once, after summing."""
    total = 0.0
    for prev, cur in zip(path, path[1:]):
        total += haversine_km(
            prev.latitude, prev.longitude,
            cur.latitude, cur.longitude,
            radius_km,
        )
    return round(total, DISTANCE_DECIMALS)


def fit_region(coordinates: Iterable[Coordinate], padding: float = 0.2) -> Region:
    """
    Smallest ``Region`` that shows all *coordinates*, plus *padding*.

    *padding* is a fraction of the bounding box added on each side.  The
    spans never shrink below the single-point defaults so a very short
    route is not zoomed in to street level.

    A route crossing the antimeridian is framed across it: when shifting
    negative longitudes by 360 gives a narrower box, that box is used and
    its centre is wrapped back into [-180, 180).
    """
    points = list(coordinates)
    if not points:
        raise ValueError("Cannot fit a region to an empty set of coordinates")
    if padding < 0:
        raise ValueError(f"padding must be non-negative, got {padding!r}")

    lats = [p.latitude for p in points]
    lngs = [p.longitude for p in points]
    min_lat, max_lat = min(lats), max(lats)
    min_lng, max_lng = min(lngs), max(lngs)
    lng_span = max_lng - min_lng
    lng_center = (min_lng + max_lng) / 2

    shifted = [lng + 360 if lng < 0 else lng for lng in lngs]
    shifted_span = max(shifted) - min(shifted)
    if shifted_span < lng_span:
        lng_span = shifted_span
        lng_center = (max(shifted) + min(shifted)) / 2
        lng_center = (lng_center + 180) % 360 - 180

    scale = 1 + 2 * padding
    return Region(
        latitude=(min_lat + max_lat) / 2,
        longitude=lng_center,
        latitude_delta=max((max_lat - min_lat) * scale, DEFAULT_LATITUDE_DELTA),
        longitude_delta=max(lng_span * scale, DEFAULT_LONGITUDE_DELTA),
    )
