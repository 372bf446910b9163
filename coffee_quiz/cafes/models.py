from __future__ import annotations

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    lat: float
    lng: float


class Cafe(BaseModel):
    id: str
    name: str
    address: str
    lat: float
    lng: float
    distance: int | None = Field(default=None, description="Metres from the search centre")
    opening_hours: str | None = None
    is_open_now: bool | None = None
    osm_link: str
    tags: list[str] = Field(default_factory=list)


class CafeSearchResult(BaseModel):
    cafes: list[Cafe] = Field(default_factory=list)
    query: str = ""
    center: Coordinates
    radius: int
    total_found: int = 0

    @classmethod
    def empty(cls, lat: float, lng: float, radius: int, query: str = "") -> CafeSearchResult:
        return cls(query=query, center=Coordinates(lat=lat, lng=lng), radius=radius)


class GeocodingResult(BaseModel):
    lat: float
    lng: float
    display_name: str
    city: str | None = None
    country: str | None = None


class CafeSearchParams(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    radius: int = Field(default=2000, ge=100, le=50000)
    query: str = ""
    limit: int = Field(default=10, ge=1, le=20)
