"""FastAPI server for the coffee finder."""
from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from finder import find_nearby_cafes
from finder_config import get_search_config
from location import resolve_location

app = FastAPI(title="Coffee Finder", version="0.1.0")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

CONFIG = get_search_config()
print(
    f"Search defaults: radius_m={CONFIG.radius_m}, limit={CONFIG.limit}, "
    f"overpass={CONFIG.overpass_url}"
)


class Origin(BaseModel):
    lat: float
    lon: float


class NearbyItem(BaseModel):
    id: str
    name: str | None = None
    lat: float
    lon: float
    distance_km: float = Field(ge=0)


class NearbyResponse(BaseModel):
    status: str
    origin: Origin | None = None
    count: int = 0
    items: list[NearbyItem] = Field(default_factory=list)
    error: str | None = None
    message: str | None = None


# ---------- Endpoints ----------

@app.get("/api/nearby", response_model=NearbyResponse)
def nearby_cafes(
    lat: float | None = Query(None, description="Latitude in decimal degrees"),
    lon: float | None = Query(None, description="Longitude in decimal degrees"),
    limit: int | None = Query(None, ge=1, le=50),
    radius_m: int | None = Query(None, ge=100, le=50_000),
):
    """Return the cafés closest to (lat, lon), nearest first."""
    location = resolve_location(lat, lon)
    result = find_nearby_cafes(location, limit=limit, radius_m=radius_m, config=CONFIG)
    return result.to_dict()


@app.get("/api/config")
def search_config():
    """Return the active search defaults."""
    return {
        "radius_m": CONFIG.radius_m,
        "limit": CONFIG.limit,
        "overpass_url": CONFIG.overpass_url,
    }
