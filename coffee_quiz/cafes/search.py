from __future__ import annotations

import logging

from .cache import cache_get, cache_set
from .config import DEFAULT_CAFE_CONFIG, CafeConfig
from .models import CafeSearchParams, CafeSearchResult, GeocodingResult
from .providers import CafeProvider, GooglePlacesProvider, OSMProvider

logger = logging.getLogger(__name__)


def get_active_provider(config: CafeConfig = DEFAULT_CAFE_CONFIG) -> CafeProvider:
    """Google Places when a key is configured, otherwise OpenStreetMap."""
    if config.google_places_api_key:
        return GooglePlacesProvider(config)
    return OSMProvider(config)


def search_cafes(
    params: CafeSearchParams,
    config: CafeConfig = DEFAULT_CAFE_CONFIG,
) -> CafeSearchResult:
    cached = cache_get(params.lat, params.lng, params.radius, ttl=config.cache_duration)
    if cached is not None:
        return cached

    provider = get_active_provider(config)
    result = provider.search_cafes(params)
    logger.info(
        "%s returned %d cafes near (%.3f, %.3f)",
        provider.name, len(result.cafes), params.lat, params.lng,
    )

    # Only non-empty results are cached.
    if result.cafes:
        cache_set(
            params.lat, params.lng, params.radius, params.query, result,
            ttl=config.cache_duration,
        )
    return result


def geocode_city(city: str, config: CafeConfig = DEFAULT_CAFE_CONFIG) -> GeocodingResult | None:
    return get_active_provider(config).geocode_city(city)
