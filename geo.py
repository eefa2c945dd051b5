"""Great-circle distance and nearest-cafe ranking.

Distances are in kilometers on a sphere of radius 6371 km.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass(frozen=True)
class Candidate:
    """A point of interest eligible for ranking."""

    id: str
    coordinate: Coordinate
    name: str | None = None


@dataclass(frozen=True)
class RankedResult:
    candidate: Candidate
    distance_km: float

    @property
    def distance_m(self) -> float:
        return self.distance_km * 1000.0


def distance(origin: Coordinate, target: Coordinate) -> float:
    """Haversine distance in km. Inputs are not validated."""
    if not all(math.isfinite(v) for v in (origin.lat, origin.lon, target.lat, target.lon)):
        # math.sin raises on infinities where IEEE arithmetic gives NaN.
        return math.nan
    lat1 = math.radians(origin.lat)
    lat2 = math.radians(target.lat)
    dlat = math.radians(target.lat - origin.lat)
    dlon = math.radians(target.lon - origin.lon)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Out-of-range latitudes and rounding near antipodes can leave a outside [0, 1].
    if a < 0.0:
        a = 0.0
    elif a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def nearest(origin: Coordinate, candidates: Iterable[Candidate], k: int) -> list[RankedResult]:
    """Return the k candidates closest to origin, ascending by distance.

    Equidistant candidates keep their input order.
    """
    if k <= 0:
        return []
    ranked = [RankedResult(candidate=c, distance_km=distance(origin, c.coordinate)) for c in candidates]
    ranked.sort(key=lambda r: r.distance_km)
    return ranked[:k]
