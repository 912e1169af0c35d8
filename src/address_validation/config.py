"""Service configuration read from the environment (and a local .env file)."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import getenv

from dotenv import load_dotenv

from .scorer import SIMILARITY_THRESHOLD

DEFAULT_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def _parse_float(value: str, default: float) -> float:
    try:
        return float(value) if value else default
    except ValueError:
        return default


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value) if value else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    host: str = field(default_factory=lambda: getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _parse_int(getenv("PORT", ""), 3000))
    google_api_key: str = field(default_factory=lambda: getenv("GOOGLE_MAPS_GEOCODING_API_KEY", ""))
    geocoding_url: str = field(
        default_factory=lambda: getenv("GOOGLE_MAPS_GEOCODING_API_URL") or DEFAULT_GEOCODING_URL
    )
    request_timeout: float = field(
        default_factory=lambda: _parse_float(getenv("GEOCODING_TIMEOUT", ""), 10.0)
    )
    similarity_threshold: float = field(
        default_factory=lambda: _parse_float(
            getenv("ADDRESS_SIMILARITY_THRESHOLD", ""), SIMILARITY_THRESHOLD
        )
    )
    log_level: str = field(default_factory=lambda: getenv("LOG_LEVEL", "info"))


def load_settings() -> Settings:
    """Load ``.env`` (without overriding the process environment) and build Settings."""
    load_dotenv()
    return Settings()
