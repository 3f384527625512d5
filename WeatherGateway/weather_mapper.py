"""Translate WeatherAPI.com payloads into the domain model.

Fields are read with ``dict.get`` throughout: a payload missing a field
yields ``None`` for it instead of an exception.
"""
from typing import Any, Dict, List, Optional, Tuple

from weather_data import (
    AirQuality,
    CurrentConditions,
    CurrentWeather,
    DailyForecast,
    Forecast,
    HourlyForecast,
    Location,
)


def _condition_text(block: Dict[str, Any]) -> Optional[str]:
    return (block.get("condition") or {}).get("text")


def map_location(raw: Dict[str, Any], include_local_time: bool = False) -> Location:
    raw = raw or {}
    return Location(
        name=raw.get("name"),
        region=raw.get("region"),
        country=raw.get("country"),
        lat=raw.get("lat"),
        lon=raw.get("lon"),
        local_time=raw.get("localtime") if include_local_time else None,
    )


def map_air_quality(raw: Dict[str, Any]) -> AirQuality:
    return AirQuality(
        co=raw.get("co"),
        no2=raw.get("no2"),
        o3=raw.get("o3"),
        so2=raw.get("so2"),
        pm2_5=raw.get("pm2_5"),
        pm10=raw.get("pm10"),
        us_epa_index=raw.get("us-epa-index"),
        gb_defra_index=raw.get("gb-defra-index"),
    )


def map_current_weather(data: Dict[str, Any]) -> CurrentWeather:
    """Map a ``current.json`` response to a CurrentWeather snapshot."""
    current = data.get("current") or {}
    air_quality = current.get("air_quality")

    return CurrentWeather(
        location=map_location(data.get("location"), include_local_time=True),
        current=CurrentConditions(
            temp_c=current.get("temp_c"),
            temp_f=current.get("temp_f"),
            condition=_condition_text(current),
            wind_kph=current.get("wind_kph"),
            wind_dir=current.get("wind_dir"),
            humidity=current.get("humidity"),
            feels_like_c=current.get("feelslike_c"),
            feels_like_f=current.get("feelslike_f"),
            uv=current.get("uv"),
            air_quality=map_air_quality(air_quality) if air_quality else None,
        ),
    )


def map_hourly(hour: Dict[str, Any]) -> HourlyForecast:
    return HourlyForecast(
        time=hour.get("time"),
        temp_c=hour.get("temp_c"),
        condition=_condition_text(hour),
        wind_kph=hour.get("wind_kph"),
        wind_dir=hour.get("wind_dir"),
        precipitation=hour.get("precip_mm"),
        humidity=hour.get("humidity"),
    )


def map_daily(forecast_day: Dict[str, Any]) -> DailyForecast:
    day = forecast_day.get("day") or {}
    astro = forecast_day.get("astro") or {}

    # Hours are kept in the order the provider sent them
    hourly = tuple(map_hourly(h) for h in forecast_day.get("hour") or [])

    return DailyForecast(
        date=forecast_day.get("date"),
        max_temp_c=day.get("maxtemp_c"),
        min_temp_c=day.get("mintemp_c"),
        avg_temp_c=day.get("avgtemp_c"),
        max_wind_kph=day.get("maxwind_kph"),
        total_precip_mm=day.get("totalprecip_mm"),
        avg_humidity=day.get("avghumidity"),
        condition=_condition_text(day),
        sunrise=astro.get("sunrise"),
        sunset=astro.get("sunset"),
        hourly=hourly,
    )


def map_forecast(data: Dict[str, Any]) -> Forecast:
    """Map a ``forecast.json`` response to a Forecast."""
    forecast_days = (data.get("forecast") or {}).get("forecastday") or []
    return Forecast(
        location=map_location(data.get("location")),
        forecast=tuple(map_daily(d) for d in forecast_days),
    )


def map_search_results(results: List[Dict[str, Any]]) -> Tuple[Location, ...]:
    """Map a ``search.json`` response; search hits carry no local time."""
    return tuple(map_location(r) for r in results or [])
