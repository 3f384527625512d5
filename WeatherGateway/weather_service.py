"""Weather gateway: read-through caching in front of a weather provider."""
import logging
from typing import Tuple

from weather_cache import ExpiringCache
from weather_data import CurrentWeather, Forecast, Location
from weather_mapper import map_current_weather, map_forecast, map_search_results
from weather_provider import WeatherProviderBase

DEFAULT_CACHE_TTL_SECONDS = 15 * 60
DEFAULT_FORECAST_DAYS = 3


class WeatherGateway:
    """
    Service that wraps a weather provider with an expiring cache.

    Current conditions and forecasts are served from memory while fresh
    (default: 15 minutes) and fetched upstream otherwise. Location search
    always goes upstream.

    Provider failures propagate unchanged: nothing is retried, nothing is
    cached, and stale entries are never served as a fallback.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
    ):
        """
        Initialize weather gateway.

        Args:
            provider: Upstream weather provider
            cache_ttl_seconds: How long a fetched result is served from cache
        """
        self.provider = provider
        self.cache_ttl_seconds = cache_ttl_seconds

        self.current_cache = ExpiringCache(cache_ttl_seconds)
        self.forecast_cache = ExpiringCache(cache_ttl_seconds)

    @staticmethod
    def current_key(location: str) -> str:
        # Not normalized: "Paris" and "paris" are separate entries
        return f"current_{location}"

    @staticmethod
    def forecast_key(location: str, days: int) -> str:
        return f"forecast_{location}_{days}"

    def get_current_weather(self, location: str) -> CurrentWeather:
        """
        Get current conditions for a location, using cache if still fresh.

        Returns:
            CurrentWeather: Snapshot (the cached object itself on a hit)

        Raises:
            WeatherProviderError: If the upstream request fails
        """
        key = self.current_key(location)
        cached = self.current_cache.get(key)
        if cached is not None:
            logging.debug(f"Cache hit for {key!r}")
            return cached

        logging.info(f"Cache miss for {key!r}, fetching current conditions")
        raw = self.provider.get_current(location)
        weather = map_current_weather(raw)
        self.current_cache.set(key, weather)
        return weather

    def get_forecast(self, location: str, days: int = DEFAULT_FORECAST_DAYS) -> Forecast:
        """
        Get a daily forecast for a location, using cache if still fresh.

        ``days`` is passed to the provider as given; each day count is cached
        separately.

        Raises:
            WeatherProviderError: If the upstream request fails
        """
        key = self.forecast_key(location, days)
        cached = self.forecast_cache.get(key)
        if cached is not None:
            logging.debug(f"Cache hit for {key!r}")
            return cached

        logging.info(f"Cache miss for {key!r}, fetching {days}-day forecast")
        raw = self.provider.get_forecast(location, days)
        forecast = map_forecast(raw)
        logging.debug(f"Forecast for {location!r} has {len(forecast.forecast)} days")
        self.forecast_cache.set(key, forecast)
        return forecast

    def search_locations(self, query: str) -> Tuple[Location, ...]:
        """
        Search locations matching a query. Results are never cached.

        Raises:
            WeatherProviderError: If the upstream request fails
        """
        logging.info(f"Searching locations for {query!r}")
        return map_search_results(self.provider.search(query))
