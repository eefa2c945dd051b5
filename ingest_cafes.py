"""Fetch cafés around a point from the OSM Overpass API."""

from __future__ import annotations

import math

import requests

from finder_config import SearchConfig, get_search_config
from geo import Candidate, Coordinate


UNKNOWN_NAME = "Unknown"


class CafeSourceError(RuntimeError):
    """Overpass could not be reached or returned an unusable payload."""


def build_overpass_query(origin: Coordinate, radius_m: int, timeout_s: float = 30) -> str:
    around = f"around:{int(radius_m)},{origin.lat},{origin.lon}"
    # Server-side timeout must not outlive the HTTP client's.
    server_timeout = max(1, int(timeout_s))
    return f"""
[out:json][timeout:{server_timeout}];
(
  node["amenity"="cafe"]({around});
  way["amenity"="cafe"]({around});
  relation["amenity"="cafe"]({around});
);
out center tags;
"""


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _display_name(raw) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return UNKNOWN_NAME


def parse_elements(payload: dict) -> list[Candidate]:
    elements = payload.get("elements", []) if isinstance(payload, dict) else []
    cafes = []
    for el in elements if isinstance(elements, list) else []:
        if not isinstance(el, dict):
            continue
        # Nodes have lat/lon directly; ways/relations use 'center'
        center = _as_dict(el.get("center"))
        lat = el.get("lat", center.get("lat"))
        lon = el.get("lon", center.get("lon"))
        if lat is None or lon is None or el.get("id") is None:
            continue
        try:
            lat_f = float(lat)
            lon_f = float(lon)
        except (TypeError, ValueError):
            continue
        if not (math.isfinite(lat_f) and math.isfinite(lon_f)):
            continue
        if not (-90.0 <= lat_f <= 90.0 and -180.0 <= lon_f <= 180.0):
            continue

        tags = _as_dict(el.get("tags"))
        cafes.append(
            Candidate(
                id=f"{el.get('type', 'node')}/{el['id']}",
                coordinate=Coordinate(lat=lat_f, lon=lon_f),
                name=_display_name(tags.get("name")),
            )
        )
    return cafes


def fetch_cafes(
    origin: Coordinate,
    radius_m: int | None = None,
    config: SearchConfig | None = None,
) -> list[Candidate]:
    config = config or get_search_config()
    query = build_overpass_query(
        origin,
        config.radius_m if radius_m is None else radius_m,
        config.timeout_s,
    )
    try:
        r = requests.post(
            config.overpass_url,
            data={"data": query},
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout_s,
        )
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as exc:
        raise CafeSourceError(f"Overpass request failed: {exc}") from exc
    except ValueError as exc:
        raise CafeSourceError("Overpass returned invalid JSON") from exc
    return parse_elements(data)
