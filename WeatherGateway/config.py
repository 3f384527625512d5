"""Environment configuration for the weather gateway."""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from weather_service import DEFAULT_CACHE_TTL_SECONDS
from weatherapi_provider import WeatherApiProvider

DEFAULT_PORT = 3000
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    port: int = DEFAULT_PORT
    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS
    base_url: str = WeatherApiProvider.BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def _parse_number(name: str, raw: str, cast):
    try:
        return cast(raw)
    except ValueError as exc:
        raise SystemExit(f"Invalid {name}: {raw!r}") from exc


def load_config() -> Settings:
    """Read settings from the process environment (and a .env file, if any)."""
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY", "")
    port = os.getenv("PORT", str(DEFAULT_PORT))
    cache_ttl = os.getenv("WEATHER_CACHE_TTL", str(DEFAULT_CACHE_TTL_SECONDS))
    base_url = os.getenv("WEATHER_API_BASE_URL", WeatherApiProvider.BASE_URL)
    timeout = os.getenv("WEATHER_API_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))

    if not api_key:
        logging.warning("WEATHER_API_KEY is not set; upstream requests will be rejected")

    settings = Settings(
        api_key=api_key,
        port=_parse_number("PORT", port, int),
        cache_ttl_seconds=_parse_number("WEATHER_CACHE_TTL", cache_ttl, float),
        base_url=base_url,
        timeout=_parse_number("WEATHER_API_TIMEOUT", timeout, float),
    )
    logging.info(
        "Configuration loaded: port=%s cache_ttl=%ss base_url=%s timeout=%ss",
        settings.port,
        settings.cache_ttl_seconds,
        settings.base_url,
        settings.timeout,
    )
    return settings
