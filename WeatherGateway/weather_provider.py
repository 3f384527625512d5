"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

DEFAULT_ERROR_MESSAGE = "An error occurred with the weather service"


class WeatherProviderBase(ABC):
    """Abstract base class for upstream weather data providers.

    Providers return the raw decoded JSON payload. Translation into the
    domain model is done by the gateway.
    """

    @abstractmethod
    def get_current(self, location: str) -> Dict[str, Any]:
        """
        Fetch current conditions (with air quality) for a location.

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass

    @abstractmethod
    def get_forecast(self, location: str, days: int) -> Dict[str, Any]:
        """
        Fetch a multi-day forecast (with air quality) for a location.

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass

    @abstractmethod
    def search(self, query: str) -> List[Dict[str, Any]]:
        """
        Search locations matching a free-text query.

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when an upstream weather request fails."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
