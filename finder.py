"""Nearby-café query: location + Overpass fetch + distance ranking."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from finder_config import SearchConfig, get_search_config
from geo import Candidate, Coordinate, RankedResult, nearest
from ingest_cafes import CafeSourceError, fetch_cafes
from location import LocationResult


FETCH_FAILED = "Failed to fetch coffee shops"
NO_RESULTS = "No coffee shops found nearby."


@dataclass
class NearbyResult:
    status: str  # ok | no_results | location_error | fetch_error
    origin: Coordinate | None = None
    items: list[RankedResult] = field(default_factory=list)
    error: str | None = None
    message: str | None = None

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "origin": {"lat": self.origin.lat, "lon": self.origin.lon} if self.origin else None,
            "count": len(self.items),
            "items": [
                {
                    "id": item.candidate.id,
                    "name": item.candidate.name,
                    "lat": item.candidate.coordinate.lat,
                    "lon": item.candidate.coordinate.lon,
                    "distance_km": round(item.distance_km, 2),
                }
                for item in self.items
            ],
            "error": self.error,
            "message": self.message,
        }


def find_nearby_cafes(
    location: LocationResult,
    limit: int | None = None,
    radius_m: int | None = None,
    config: SearchConfig | None = None,
    fetcher: Callable[..., list[Candidate]] = fetch_cafes,
) -> NearbyResult:
    if not location.ok:
        return NearbyResult(status="location_error", error=location.error)

    config = config or get_search_config()
    origin = location.coordinate
    k = config.limit if limit is None else limit

    try:
        radius = config.radius_m if radius_m is None else radius_m
        candidates = fetcher(origin, radius, config)
    except CafeSourceError:
        return NearbyResult(status="fetch_error", origin=origin, error=FETCH_FAILED)

    items = nearest(origin, candidates, k)
    if not items:
        return NearbyResult(status="no_results", origin=origin, message=NO_RESULTS)
    return NearbyResult(status="ok", origin=origin, items=items)
