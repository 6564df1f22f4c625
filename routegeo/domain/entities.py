"""
Geographic value objects.

Every value here is immutable and owned by whoever receives it; nothing
in the domain layer keeps a reference after returning.
"""

from __future__ import annotations

from dataclasses import dataclass

# Spans used by the map screen when it centres on a single point.
DEFAULT_LATITUDE_DELTA = 0.0922
DEFAULT_LONGITUDE_DELTA = 0.0421


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


# Route order is significant: it is the order the line is drawn in.
Path = list[Coordinate]


@dataclass(frozen=True)
class Region:
    """A map viewport: centre point plus latitude / longitude spans in degrees."""

    latitude: float
    longitude: float
    latitude_delta: float = DEFAULT_LATITUDE_DELTA
    longitude_delta: float = DEFAULT_LONGITUDE_DELTA

    @property
    def center(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)
