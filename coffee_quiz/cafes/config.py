from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CafeConfig:
    google_places_api_key: str = os.getenv("GOOGLE_PLACES_API_KEY", "")
    cache_duration: int = int(os.getenv("CAFE_CACHE_DURATION", "3600"))
    rate_limit: int = int(os.getenv("CAFE_SEARCH_RATE_LIMIT", "30"))
    rate_window: float = 60.0
    default_radius: int = 2000
    default_limit: int = 10
    timeout: float = 10.0
    overpass_timeout: float = 15.0
    retries: int = 2
    retry_delay: float = 1.0
    user_agent: str = "CoffeeQuiz/1.0 (cafe-suggestions)"


DEFAULT_CAFE_CONFIG = CafeConfig()
