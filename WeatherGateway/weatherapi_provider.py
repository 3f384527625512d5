"""WeatherAPI.com provider implementation."""
import logging
from typing import Any, Dict, List

import requests

from weather_provider import DEFAULT_ERROR_MESSAGE, WeatherProviderBase, WeatherProviderError


class WeatherApiProvider(WeatherProviderBase):
    """
    Weather provider using the WeatherAPI.com v1 REST API.

    Docs: https://www.weatherapi.com/docs/
    Every request is authenticated with the API key as a query parameter.
    """

    BASE_URL = "http://api.weatherapi.com/v1"

    def __init__(self, api_key: str, base_url: str = BASE_URL, timeout: float = 10):
        """
        Initialize WeatherAPI provider.

        Args:
            api_key: WeatherAPI.com API key
            base_url: API root, without trailing slash
            timeout: HTTP request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_current(self, location: str) -> Dict[str, Any]:
        return self._request("current.json", {"q": location, "aqi": "yes"})

    def get_forecast(self, location: str, days: int) -> Dict[str, Any]:
        return self._request("forecast.json", {"q": location, "days": days, "aqi": "yes"})

    def search(self, query: str) -> List[Dict[str, Any]]:
        return self._request("search.json", {"q": query})

    def _request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """
        Issue a GET against an API endpoint and return the decoded JSON body.

        Raises:
            WeatherProviderError: On network errors, non-2xx responses or
                undecodable bodies
        """
        url = f"{self.base_url}/{endpoint}"
        params = {"key": self.api_key, **params}

        # Exception text from requests includes the full URL (and so the API
        # key); it goes to the log only, never into the raised message.
        try:
            logging.info(f"Making WeatherAPI request: {url} q={params.get('q')!r}")
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise WeatherProviderError(DEFAULT_ERROR_MESSAGE) from e

        logging.info(f"API response status: {response.status_code}")
        if not response.ok:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response)

        try:
            return response.json()
        except ValueError as e:
            logging.error(f"Failed to decode API response: {e}")
            raise WeatherProviderError(DEFAULT_ERROR_MESSAGE) from e

    def _handle_error_response(self, response: requests.Response) -> None:
        """Parse and raise error from a WeatherAPI error response."""
        message = DEFAULT_ERROR_MESSAGE
        try:
            error_data = response.json()
            logging.error(f"WeatherAPI error response: {error_data}")
            error = error_data.get("error") if isinstance(error_data, dict) else None
            if isinstance(error, dict) and error.get("message"):
                message = error["message"]
        except ValueError:
            # Not JSON, keep the generic message
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")

        raise WeatherProviderError(message, status_code=response.status_code)
