"""Weather readings for a location."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import tzinfo

from skycast.geolocation import GeoLocationData


@dataclass(frozen=True)
class WeatherData:
    """Current conditions and today's temperature range for a location."""

    location: GeoLocationData
    temperature: int
    highest_temperature: int
    lowest_temperature: int
    weather_code: int
    is_day: bool
    timezone: tzinfo


@dataclass(frozen=True)
class DetailedWeatherData(WeatherData):
    """Full forecast for a location: current, hourly and weekly values.

    Today's highest and lowest temperatures are taken from the first
    entries of the weekly forecast.
    """

    highest_temperature: int = field(init=False)
    lowest_temperature: int = field(init=False)
    wind_speed: int
    wind_gusts: int
    wind_direction: int
    apparent_temperature: int
    precipitation: int
    snow_depth: float
    uv_index: int
    humidity: int
    visibility: int
    pressure: int
    hourly_temperature: Sequence[int]
    full_hourly_temperature: Sequence[int]
    hourly_code: Sequence[int]
    hourly_is_day: Sequence[bool]
    hourly_time_stamp: Sequence[str]
    weekly_max_temp: Sequence[int]
    weekly_min_temp: Sequence[int]
    weekly_code: Sequence[int]
    sunrise: Sequence[str]
    sunset: Sequence[str]
    weekly_day_name: Sequence[str]

    def __post_init__(self) -> None:
        for name in (
            "hourly_temperature",
            "full_hourly_temperature",
            "hourly_code",
            "hourly_is_day",
            "hourly_time_stamp",
            "weekly_max_temp",
            "weekly_min_temp",
            "weekly_code",
            "sunrise",
            "sunset",
            "weekly_day_name",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if not self.weekly_max_temp or not self.weekly_min_temp:
            raise ValueError("weekly temperature forecasts must not be empty")
        object.__setattr__(self, "highest_temperature", self.weekly_max_temp[0])
        object.__setattr__(self, "lowest_temperature", self.weekly_min_temp[0])