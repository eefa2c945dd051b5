"""Turn caller-supplied coordinates into a success/failure location result."""

from __future__ import annotations

import math
from dataclasses import dataclass

from geo import Coordinate


LOCATION_MISSING = "Location is not available"
LOCATION_INVALID = "Unable to retrieve your location"


@dataclass(frozen=True)
class LocationResult:
    coordinate: Coordinate | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.coordinate is not None


def resolve_location(lat, lon) -> LocationResult:
    if lat is None or lon is None:
        return LocationResult(error=LOCATION_MISSING)
    try:
        lat_f = float(lat)
        lon_f = float(lon)
    except (TypeError, ValueError):
        return LocationResult(error=LOCATION_INVALID)
    if not (math.isfinite(lat_f) and math.isfinite(lon_f)):
        return LocationResult(error=LOCATION_INVALID)
    if not (-90.0 <= lat_f <= 90.0 and -180.0 <= lon_f <= 180.0):
        return LocationResult(error=LOCATION_INVALID)
    return LocationResult(coordinate=Coordinate(lat=lat_f, lon=lon_f))
