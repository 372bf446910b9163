from __future__ import annotations

import logging
import math
import time
from abc import ABC, abstractmethod
from typing import Any

import requests

from .config import DEFAULT_CAFE_CONFIG, CafeConfig
from .models import Cafe, CafeSearchParams, CafeSearchResult, GeocodingResult

logger = logging.getLogger(__name__)

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
OVERPASS_URL = "https://overpass-api.de/api/interpreter"
PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"
GEOCODE_BASE_URL = "https://maps.googleapis.com/maps/api/geocode"

EARTH_RADIUS_M = 6371e3
_MAX_HOURS_LENGTH = 50


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> int:
    """Great-circle distance between two coordinates, in whole metres."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_M * c)


def simplify_opening_hours(hours: str | None) -> str | None:
    """OSM opening_hours can be arbitrarily complex; long values collapse."""
    if not hours:
        return None
    if len(hours) > _MAX_HOURS_LENGTH:
        return "Hours vary"
    return hours


def _first_present(*values: Any) -> Any:
    return next(v for v in values if v is not None)


def request_with_retries(
    method: str,
    url: str,
    config: CafeConfig = DEFAULT_CAFE_CONFIG,
    timeout: float | None = None,
    **kwargs: Any,
) -> requests.Response:
    """
    Issue an HTTP request, retrying on errors and non-2xx responses.

    The last response is returned even when it is not OK; the last
    exception is re-raised once retries run out.
    """
    headers = {
        "User-Agent": config.user_agent,
        "Accept": "application/json",
        **kwargs.pop("headers", {}),
    }
    retries_left = config.retries
    while True:
        try:
            response = requests.request(
                method, url, headers=headers, timeout=timeout or config.timeout, **kwargs,
            )
        except requests.RequestException:
            if retries_left <= 0:
                raise
            logger.debug("Request to %s failed, retrying", url, exc_info=True)
        else:
            if response.ok or retries_left <= 0:
                return response
            logger.debug("Request to %s returned %s, retrying", url, response.status_code)
        retries_left -= 1
        time.sleep(config.retry_delay)


class CafeProvider(ABC):
    """Pluggable source of cafe listings and geocoding."""

    name: str = "base"

    def __init__(self, config: CafeConfig = DEFAULT_CAFE_CONFIG):
        self.config = config

    @abstractmethod
    def search_cafes(self, params: CafeSearchParams) -> CafeSearchResult:
        """Return cafes around ``params.lat``/``params.lng``, nearest first."""

    @abstractmethod
    def geocode_city(self, city: str) -> GeocodingResult | None:
        """Resolve a free-form city name, or ``None`` if it cannot be found."""


def build_overpass_query(lat: float, lng: float, radius: int) -> str:
    around = f"(around:{radius},{lat},{lng})"
    return "\n".join([
        "[out:json][timeout:25];",
        "(",
        f'  node["amenity"="cafe"]{around};',
        f'  way["amenity"="cafe"]{around};',
        f'  node["cuisine"~"coffee"]{around};',
        f'  node["shop"="coffee"]{around};',
        ");",
        "out center body;",
    ])


class OSMProvider(CafeProvider):
    """OpenStreetMap: Nominatim for geocoding, Overpass for cafes. No key needed."""

    name = "OpenStreetMap"

    def geocode_city(self, city: str) -> GeocodingResult | None:
        try:
            response = request_with_retries(
                "GET",
                f"{NOMINATIM_BASE_URL}/search",
                self.config,
                params={"q": city, "format": "json", "limit": "1", "addressdetails": "1"},
            )
            if not response.ok:
                logger.warning("Nominatim geocoding failed with status %s", response.status_code)
                return None

            results = response.json()
            if not results:
                return None

            top = results[0]
            address = top.get("address") or {}
            return GeocodingResult(
                lat=float(top["lat"]),
                lng=float(top["lon"]),
                display_name=top.get("display_name", city),
                city=address.get("city") or address.get("town") or address.get("village"),
                country=address.get("country"),
            )
        except Exception:
            logger.warning("Geocoding %r via Nominatim failed", city, exc_info=True)
            return None

    def _to_cafe(self, element: dict[str, Any], params: CafeSearchParams) -> Cafe:
        tags = element.get("tags") or {}
        center = element.get("center") or {}
        lat = _first_present(element.get("lat"), center.get("lat"), params.lat)
        lng = _first_present(element.get("lon"), center.get("lon"), params.lng)

        address_parts = [
            tags[key]
            for key in ("addr:housenumber", "addr:street", "addr:city")
            if tags.get(key)
        ]

        cafe_tags: list[str] = []
        if "coffee" in tags.get("cuisine", ""):
            cafe_tags.append("specialty")
        if tags.get("internet_access") == "wlan":
            cafe_tags.append("wifi")
        if tags.get("outdoor_seating") == "yes":
            cafe_tags.append("outdoor")

        return Cafe(
            id=f"osm-{element['type']}-{element['id']}",
            name=tags.get("name", "Unknown Cafe"),
            address=" ".join(address_parts) if address_parts else "Address not available",
            lat=lat,
            lng=lng,
            distance=haversine_distance(params.lat, params.lng, lat, lng),
            opening_hours=simplify_opening_hours(tags.get("opening_hours")),
            osm_link=f"https://www.openstreetmap.org/{element['type']}/{element['id']}",
            tags=cafe_tags,
        )

    def search_cafes(self, params: CafeSearchParams) -> CafeSearchResult:
        empty = CafeSearchResult.empty(params.lat, params.lng, params.radius, params.query)
        try:
            response = request_with_retries(
                "POST",
                OVERPASS_URL,
                self.config,
                timeout=self.config.overpass_timeout,
                data={"data": build_overpass_query(params.lat, params.lng, params.radius)},
            )
            if not response.ok:
                logger.warning("Overpass search failed with status %s", response.status_code)
                return empty

            elements = response.json().get("elements", [])
            cafes = [
                self._to_cafe(el, params)
                for el in elements
                if (el.get("tags") or {}).get("name")
            ]
            cafes.sort(key=lambda c: c.distance or 0)

            return CafeSearchResult(
                cafes=cafes[:params.limit],
                query=params.query,
                center=empty.center,
                radius=params.radius,
                total_found=len(elements),
            )
        except Exception:
            logger.warning("Overpass cafe search failed", exc_info=True)
            return empty


class GooglePlacesProvider(CafeProvider):
    """Google Geocoding + Places Nearby Search. Needs ``GOOGLE_PLACES_API_KEY``."""

    name = "Google Places"

    def geocode_city(self, city: str) -> GeocodingResult | None:
        if not self.config.google_places_api_key:
            logger.warning("Google Places API key not configured")
            return None

        try:
            response = request_with_retries(
                "GET",
                f"{GEOCODE_BASE_URL}/json",
                self.config,
                params={"address": city, "key": self.config.google_places_api_key},
            )
            data = response.json()
            if data.get("status") != "OK" or not data.get("results"):
                return None

            top = data["results"][0]
            city_name = country = None
            for component in top.get("address_components", []):
                if "locality" in component.get("types", []):
                    city_name = component.get("long_name")
                if "country" in component.get("types", []):
                    country = component.get("long_name")

            location = top["geometry"]["location"]
            return GeocodingResult(
                lat=location["lat"],
                lng=location["lng"],
                display_name=top.get("formatted_address", city),
                city=city_name,
                country=country,
            )
        except Exception:
            logger.warning("Geocoding %r via Google failed", city, exc_info=True)
            return None

    def search_cafes(self, params: CafeSearchParams) -> CafeSearchResult:
        empty = CafeSearchResult.empty(params.lat, params.lng, params.radius, params.query)
        if not self.config.google_places_api_key:
            logger.warning("Google Places API key not configured")
            return empty

        try:
            response = request_with_retries(
                "GET",
                f"{PLACES_BASE_URL}/nearbysearch/json",
                self.config,
                params={
                    "location": f"{params.lat},{params.lng}",
                    "radius": str(params.radius),
                    "type": "cafe",
                    "keyword": "coffee",
                    "key": self.config.google_places_api_key,
                },
            )
            data = response.json()
            if data.get("status") != "OK":
                logger.warning("Google Places search failed: %s", data.get("status"))
                return empty

            places = data.get("results", [])
            cafes = []
            for place in places[:params.limit]:
                location = place["geometry"]["location"]
                cafes.append(Cafe(
                    id=f"google-{place['place_id']}",
                    name=place["name"],
                    address=place.get("vicinity") or "Address not available",
                    lat=location["lat"],
                    lng=location["lng"],
                    distance=haversine_distance(
                        params.lat, params.lng, location["lat"], location["lng"],
                    ),
                    is_open_now=(place.get("opening_hours") or {}).get("open_now"),
                    osm_link=f"https://www.google.com/maps/place/?q=place_id:{place['place_id']}",
                    tags=["cafe"] if "cafe" in place.get("types", []) else [],
                ))

            return CafeSearchResult(
                cafes=cafes,
                query=params.query,
                center=empty.center,
                radius=params.radius,
                total_found=len(places),
            )
        except Exception:
            logger.warning("Google Places cafe search failed", exc_info=True)
            return empty
