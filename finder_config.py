"""Search defaults for the coffee finder, overridable from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    overpass_url: str
    radius_m: int
    limit: int
    timeout_s: float
    user_agent: str


DEFAULT_CONFIG = SearchConfig(
    overpass_url="https://overpass-api.de/api/interpreter",
    radius_m=5000,
    limit=5,
    timeout_s=30.0,
    user_agent="CoffeeFinder/0.1",
)


def _env_number(name: str, default, cast):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def get_search_config() -> SearchConfig:
    return SearchConfig(
        overpass_url=os.environ.get("COFFEE_FINDER_OVERPASS_URL", "").strip() or DEFAULT_CONFIG.overpass_url,
        radius_m=_env_number("COFFEE_FINDER_RADIUS_M", DEFAULT_CONFIG.radius_m, int),
        limit=_env_number("COFFEE_FINDER_LIMIT", DEFAULT_CONFIG.limit, int),
        timeout_s=_env_number("COFFEE_FINDER_TIMEOUT_S", DEFAULT_CONFIG.timeout_s, float),
        user_agent=os.environ.get("COFFEE_FINDER_USER_AGENT", "").strip() or DEFAULT_CONFIG.user_agent,
    )
