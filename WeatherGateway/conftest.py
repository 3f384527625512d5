"""Shared fixtures: sample WeatherAPI payloads and an in-memory provider."""
import copy

import pytest

from weather_provider import WeatherProviderBase


class MockProvider(WeatherProviderBase):
    """Provider double that records every upstream call."""

    def __init__(self, current=None, forecast=None, search=None, raise_error=None):
        self.current_response = current
        self.forecast_response = forecast
        self.search_response = search
        self.raise_error = raise_error
        self.calls = []

    @property
    def call_count(self):
        return len(self.calls)

    def _respond(self, call, response):
        self.calls.append(call)
        if self.raise_error:
            raise self.raise_error
        return copy.deepcopy(response)

    def get_current(self, location):
        return self._respond(("current", location), self.current_response)

    def get_forecast(self, location, days):
        return self._respond(("forecast", location, days), self.forecast_response)

    def search(self, query):
        return self._respond(("search", query), self.search_response)


def _hour(time, temp_c, text, precip_mm=0.0):
    return {
        "time_epoch": 0,
        "time": time,
        "temp_c": temp_c,
        "temp_f": round(temp_c * 9 / 5 + 32, 1),
        "condition": {"text": text, "icon": "//cdn.weatherapi.com/x.png", "code": 1003},
        "wind_kph": 11.2,
        "wind_dir": "SW",
        "precip_mm": precip_mm,
        "humidity": 70,
    }


@pytest.fixture
def sample_current_response():
    """Sample WeatherAPI current.json response (aqi=yes)."""
    return {
        "location": {
            "name": "Berlin",
            "region": "Berlin",
            "country": "Germany",
            "lat": 52.52,
            "lon": 13.4,
            "tz_id": "Europe/Berlin",
            "localtime_epoch": 1718000000,
            "localtime": "2024-06-10 8:13",
        },
        "current": {
            "last_updated": "2024-06-10 08:00",
            "temp_c": 18.5,
            "temp_f": 65.3,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "icon": "//cdn.weatherapi.com/116.png", "code": 1003},
            "wind_mph": 8.1,
            "wind_kph": 13.0,
            "wind_degree": 250,
            "wind_dir": "WSW",
            "humidity": 72,
            "feelslike_c": 17.9,
            "feelslike_f": 64.2,
            "uv": 4.0,
            "air_quality": {
                "co": 230.3,
                "no2": 13.5,
                "o3": 68.7,
                "so2": 2.1,
                "pm2_5": 6.4,
                "pm10": 9.8,
                "us-epa-index": 1,
                "gb-defra-index": 2,
            },
        },
    }


@pytest.fixture
def sample_forecast_response():
    """Sample WeatherAPI forecast.json response with two days of two hours each."""
    return {
        "location": {
            "name": "Tokyo",
            "region": "Tokyo",
            "country": "Japan",
            "lat": 35.69,
            "lon": 139.69,
            "localtime": "2024-06-10 15:13",
        },
        "current": {"temp_c": 24.0},
        "forecast": {
            "forecastday": [
                {
                    "date": "2024-06-10",
                    "day": {
                        "maxtemp_c": 27.1,
                        "mintemp_c": 19.4,
                        "avgtemp_c": 22.8,
                        "maxwind_kph": 18.7,
                        "totalprecip_mm": 1.2,
                        "avghumidity": 68,
                        "condition": {"text": "Patchy rain nearby", "code": 1063},
                    },
                    "astro": {"sunrise": "04:25 AM", "sunset": "06:55 PM"},
                    "hour": [
                        _hour("2024-06-10 00:00", 20.1, "Clear"),
                        _hour("2024-06-10 01:00", 19.8, "Clear", precip_mm=0.1),
                    ],
                },
                {
                    "date": "2024-06-11",
                    "day": {
                        "maxtemp_c": 25.0,
                        "mintemp_c": 18.2,
                        "avgtemp_c": 21.0,
                        "maxwind_kph": 12.2,
                        "totalprecip_mm": 0.0,
                        "avghumidity": 60,
                        "condition": {"text": "Sunny", "code": 1000},
                    },
                    "astro": {"sunrise": "04:25 AM", "sunset": "06:56 PM"},
                    "hour": [
                        _hour("2024-06-11 00:00", 19.0, "Clear"),
                        _hour("2024-06-11 01:00", 18.6, "Mist"),
                    ],
                },
            ]
        },
    }


@pytest.fixture
def sample_search_response():
    """Sample WeatherAPI search.json response."""
    return [
        {"id": 2801268, "name": "London", "region": "City of London, Greater London",
         "country": "United Kingdom", "lat": 51.52, "lon": -0.11, "url": "london-city-of-london"},
        {"id": 315398, "name": "London", "region": "Ontario",
         "country": "Canada", "lat": 42.98, "lon": -81.25, "url": "london-ontario-canada"},
    ]


@pytest.fixture
def mock_provider(sample_current_response, sample_forecast_response, sample_search_response):
    return MockProvider(
        current=sample_current_response,
        forecast=sample_forecast_response,
        search=sample_search_response,
    )
