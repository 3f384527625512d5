"""Weather domain model - immutable data structures independent of any API."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Location:
    name: str
    region: str
    country: str
    lat: float
    lon: float
    local_time: Optional[str] = None  # only set for current conditions

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "name": self.name,
            "region": self.region,
            "country": self.country,
            "lat": self.lat,
            "lon": self.lon,
        }
        if self.local_time is not None:
            result["localTime"] = self.local_time
        return result


@dataclass(frozen=True)
class AirQuality:
    """Pollutant concentrations and national indices, as reported upstream."""
    co: Optional[float]
    no2: Optional[float]
    o3: Optional[float]
    so2: Optional[float]
    pm2_5: Optional[float]
    pm10: Optional[float]
    us_epa_index: Optional[int]
    gb_defra_index: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "co": self.co,
            "no2": self.no2,
            "o3": self.o3,
            "so2": self.so2,
            "pm2_5": self.pm2_5,
            "pm10": self.pm10,
            "us-epa-index": self.us_epa_index,
            "gb-defra-index": self.gb_defra_index,
        }


@dataclass(frozen=True)
class CurrentConditions:
    temp_c: float
    temp_f: float
    condition: str  # e.g., "Partly cloudy"
    wind_kph: float
    wind_dir: str  # 16-point compass, e.g., "WSW"
    humidity: int
    feels_like_c: float
    feels_like_f: float
    uv: float
    air_quality: Optional[AirQuality] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tempC": self.temp_c,
            "tempF": self.temp_f,
            "condition": self.condition,
            "windKph": self.wind_kph,
            "windDir": self.wind_dir,
            "humidity": self.humidity,
            "feelsLikeC": self.feels_like_c,
            "feelsLikeF": self.feels_like_f,
            "uv": self.uv,
            "airQuality": self.air_quality.to_dict() if self.air_quality else None,
        }


@dataclass(frozen=True)
class CurrentWeather:
    """Snapshot of current conditions at a location."""
    location: Location
    current: CurrentConditions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "current": self.current.to_dict(),
        }


@dataclass(frozen=True)
class HourlyForecast:
    time: str
    temp_c: float
    condition: str
    wind_kph: float
    wind_dir: str
    precipitation: float  # mm
    humidity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "tempC": self.temp_c,
            "condition": self.condition,
            "windKph": self.wind_kph,
            "windDir": self.wind_dir,
            "precipitation": self.precipitation,
            "humidity": self.humidity,
        }


@dataclass(frozen=True)
class DailyForecast:
    date: str
    max_temp_c: float
    min_temp_c: float
    avg_temp_c: float
    max_wind_kph: float
    total_precip_mm: float
    avg_humidity: float
    condition: str
    sunrise: str
    sunset: str
    hourly: Tuple[HourlyForecast, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "maxTempC": self.max_temp_c,
            "minTempC": self.min_temp_c,
            "avgTempC": self.avg_temp_c,
            "maxWindKph": self.max_wind_kph,
            "totalPrecipMm": self.total_precip_mm,
            "avgHumidity": self.avg_humidity,
            "condition": self.condition,
            "sunrise": self.sunrise,
            "sunset": self.sunset,
            "hourly": [h.to_dict() for h in self.hourly],
        }


@dataclass(frozen=True)
class Forecast:
    location: Location
    forecast: Tuple[DailyForecast, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "forecast": [d.to_dict() for d in self.forecast],
        }
