"""Clients for the forecast and geocoding web services."""

from __future__ import annotations

import configparser
from collections.abc import Callable, Mapping
from datetime import datetime
from os import PathLike
from typing import Any, Union

import requests

from skycast.geolocation import GeoLocationData
from skycast.parser import (
    ParseError,
    parse_detailed_weather_data,
    parse_geocoding_data,
    parse_weather_data,
)
from skycast.settings import Settings
from skycast.weather_data import DetailedWeatherData, WeatherData

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODING_URL = "https://api.opencagedata.com/geocode/v1/json"
TRANSFER_TIMEOUT = 2.0

NETWORK_ERROR_MESSAGE = (
    "Error occured while fetching weather data. "
    "Please check your internet connection."
)
PARSE_ERROR_MESSAGE = "Error occured while parsing API response,"

_WEATHER_CURRENT = "temperature_2m,weather_code,is_day"
_WEATHER_DAILY = "temperature_2m_max,temperature_2m_min"
_DETAILED_CURRENT = (
    "temperature_2m,weather_code,is_day,wind_speed_10m,apparent_temperature,"
    "snow_depth,relative_humidity_2m,visibility,pressure_msl,uv_index,"
    "wind_direction_10m,wind_gusts_10m"
)
_DETAILED_DAILY = (
    "temperature_2m_max,temperature_2m_min,weather_code,sunrise,sunset,precipitation_sum"
)
_DETAILED_HOURLY = "temperature_2m,weather_code,is_day,precipitation"

StrPath = Union[str, "PathLike[str]"]


class ApiError(Exception):
    """A request to a web service failed or returned unusable data."""


def _number(value: float) -> str:
    """Format a coordinate with six significant digits and no trailing zeros."""
    return f"{value:g}"


def weather_query(location: GeoLocationData, settings: Settings) -> dict[str, str]:
    """Query parameters asking for current conditions and today's range."""
    return {
        "latitude": _number(location.latitude),
        "longitude": _number(location.longitude),
        "current": _WEATHER_CURRENT,
        "daily": _WEATHER_DAILY,
        "timezone": "auto",
        "temperature_unit": settings.temperature_unit.api_parameter(),
    }


def detailed_weather_query(location: GeoLocationData, settings: Settings) -> dict[str, str]:
    """Query parameters asking for the full current, hourly and daily forecast."""
    return {
        "latitude": _number(location.latitude),
        "longitude": _number(location.longitude),
        "current": _DETAILED_CURRENT,
        "daily": _DETAILED_DAILY,
        "timezone": "auto",
        "hourly": _DETAILED_HOURLY,
        "temperature_unit": settings.temperature_unit.api_parameter(),
        "wind_speed_unit": settings.wind_speed_unit.api_parameter(),
        "precipitation_unit": settings.precipitation_unit.api_parameter(),
    }


def load_api_key(config_path: StrPath) -> str:
    """Read the geocoding key from the Key entry of the [API] section of an INI file.

    A missing or unreadable file, or a missing entry, gives an empty key.
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(config_path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError):
        return ""
    return parser.get("API", "Key", fallback="")


class _ApiHandler:
    """Shared HTTP handling: one session and a transfer timeout."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = TRANSFER_TIMEOUT,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def _get(self, url: str, params: Mapping[str, str]) -> requests.Response:
        try:
            response = self._session.get(url, params=dict(params), timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as error:
            raise ApiError(NETWORK_ERROR_MESSAGE) from error
        return response


class WeatherAPI(_ApiHandler):
    """Fetches current conditions for a location."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        timeout: float = TRANSFER_TIMEOUT,
    ) -> None:
        super().__init__(session, timeout)
        self.settings = settings if settings is not None else Settings()

    def fetch_data(self, location: GeoLocationData) -> WeatherData:
        """Return the weather at a location; raises ApiError on failure."""
        response = self._get(FORECAST_URL, weather_query(location, self.settings))
        try:
            return parse_weather_data(response.content, location)
        except ParseError as error:
            raise ApiError(PARSE_ERROR_MESSAGE) from error


class DetailedWeatherAPI(_ApiHandler):
    """Fetches the full forecast for a location."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        timeout: float = TRANSFER_TIMEOUT,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(session, timeout)
        self.settings = settings if settings is not None else Settings()
        self._clock = clock

    def fetch_data(self, location: GeoLocationData) -> DetailedWeatherData:
        """Return the full forecast at a location; raises ApiError on failure."""
        response = self._get(FORECAST_URL, detailed_weather_query(location, self.settings))
        now = self._clock() if self._clock is not None else None
        try:
            return parse_detailed_weather_data(response.content, location, now)
        except ParseError as error:
            raise ApiError(PARSE_ERROR_MESSAGE) from error


class GeocodingAPI(_ApiHandler):
    """Looks up places by name."""

    def __init__(
        self,
        api_key: str = "",
        session: requests.Session | None = None,
        timeout: float = TRANSFER_TIMEOUT,
    ) -> None:
        super().__init__(session, timeout)
        self.api_key = api_key

    def geocode_city(self, location: str) -> list[GeoLocationData]:
        """Places matching a name; failures and empty answers give no places."""
        try:
            response = self._get(GEOCODING_URL, {"q": location, "key": self.api_key})
        except ApiError:
            return []
        try:
            document: Any = response.json()
        except ValueError:
            return []
        if not isinstance(document, dict):
            return []
        results = document.get("results")
        if not isinstance(results, list) or not results:
            return []
        return parse_geocoding_data(results)