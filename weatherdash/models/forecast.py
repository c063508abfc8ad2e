"""Open-Meteo forecast data models.

Hourly and daily values are ``None`` where the provider sent ``null``,
which it does for some variables near the end of the forecast range.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float  # °C
    wind_speed: float  # km/h
    condition_code: int


@dataclass(frozen=True)
class HourlyPoint:
    timestamp: datetime  # local time at the location
    temperature: float | None
    humidity: float | None  # %
    wind_speed: float | None
    precipitation_chance: float | None  # %
    condition_code: int | None


@dataclass(frozen=True)
class DailyPoint:
    sunrise: datetime
    sunset: datetime
    uv_index_max: float | None
    temp_max: float | None
    temp_min: float | None
    condition_code: int | None


@dataclass(frozen=True)
class ForecastSnapshot:
    current: CurrentConditions
    hourly: tuple[HourlyPoint, ...]
    daily: tuple[DailyPoint, ...]
    timezone: str = ""
