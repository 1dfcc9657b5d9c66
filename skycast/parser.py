"""Turning forecast and geocoding service responses into data objects."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from skycast.geolocation import GeoLocationData
from skycast.weather_data import DetailedWeatherData, WeatherData

_HOURS_SHOWN = 24
_DAYS_SHOWN = 7
_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


class ParseError(ValueError):
    """A service response could not be turned into weather data."""


def _to_float(value: Any) -> float:
    """Numeric JSON value as a float; anything else reads as zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _round(value: Any) -> int:
    """Round half away from zero; non-numbers and non-finite values give zero."""
    number = _to_float(value)
    if not math.isfinite(number):
        return 0
    if number >= 0:
        return int(math.floor(number + 0.5))
    return int(math.ceil(number - 0.5))


def _to_int(value: Any) -> int:
    """Integral JSON value as an int; anything else reads as zero."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return 0


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _at(values: list[Any], index: int) -> Any:
    """Element at a position, or None when the position lies outside the list."""
    return values[index] if 0 <= index < len(values) else None


def _load_object(json_data: str | bytes) -> dict[str, Any]:
    try:
        document = json.loads(json_data)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise ParseError("Invalid JSON data") from error
    if not isinstance(document, dict):
        raise ParseError("Invalid JSON data")
    return document


def _timezone(timezone_id: str) -> ZoneInfo:
    if not timezone_id:
        raise ParseError("Invalid timezone ID")
    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as error:
        raise ParseError("Invalid timezone ID") from error


def _day_name(text: str) -> str:
    """English weekday name of a yyyy-MM-dd date; an invalid date gives ''."""
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        return ""
    try:
        day = date(*(int(part) for part in match.groups()))
    except ValueError:
        return ""
    return _DAY_NAMES[day.weekday()]


def parse_weather_data(json_data: str | bytes, location: GeoLocationData) -> WeatherData:
    """Read current conditions and today's range from a forecast response.

    Raises ParseError when the document is not valid JSON, lacks the
    timezone, current or daily fields, names an unknown timezone or has
    empty daily temperature lists.
    """
    document = _load_object(json_data)
    if not all(key in document for key in ("timezone", "current", "daily")):
        raise ParseError("Missing required JSON fields")

    zone = _timezone(_to_str(document["timezone"]))

    current = _as_dict(document["current"])
    daily = _as_dict(document["daily"])
    daily_max = _as_list(daily.get("temperature_2m_max"))
    daily_min = _as_list(daily.get("temperature_2m_min"))
    if not daily_max or not daily_min:
        raise ParseError("Daily temperature arrays are empty")

    return WeatherData(
        location=location,
        temperature=_round(current.get("temperature_2m")),
        highest_temperature=_round(daily_max[0]),
        lowest_temperature=_round(daily_min[0]),
        weather_code=_to_int(current.get("weather_code")),
        is_day=bool(_to_int(current.get("is_day"))),
        timezone=zone,
    )


def parse_detailed_weather_data(
    json_data: str | bytes,
    location: GeoLocationData,
    now: datetime | None = None,
) -> DetailedWeatherData:
    """Read the full forecast from a forecast response.

    The hourly forecast covers 24 entries starting with the hour that
    contains ``now`` (the current time when not given), and the weekly
    forecast covers seven days. Values missing from the response read as
    zero or an empty string. Raises ParseError when the document is not a
    JSON object or names an unknown timezone.
    """
    document = _load_object(json_data)
    zone = _timezone(_to_str(document.get("timezone")))

    current = _as_dict(document.get("current"))
    daily = _as_dict(document.get("daily"))
    hourly = _as_dict(document.get("hourly"))

    if now is None:
        now = datetime.now(timezone.utc)
    formatted_now = now.astimezone(zone).strftime("%Y-%m-%dT%H:%M")

    hourly_times = _as_list(hourly.get("time"))
    start = next(
        (
            index - 1
            for index, entry in enumerate(hourly_times)
            if formatted_now < _to_str(entry)
        ),
        -1,
    )

    hourly_temps = _as_list(hourly.get("temperature_2m"))
    hourly_codes = _as_list(hourly.get("weather_code"))
    hourly_is_day = _as_list(hourly.get("is_day"))
    hours = range(start, start + _HOURS_SHOWN)

    weekly_codes = _as_list(daily.get("weather_code"))
    weekly_sunrise = _as_list(daily.get("sunrise"))
    weekly_sunset = _as_list(daily.get("sunset"))
    weekly_days = _as_list(daily.get("time"))
    weekly_precipitation = _as_list(daily.get("precipitation_sum"))
    weekly_max = _as_list(daily.get("temperature_2m_max"))
    weekly_min = _as_list(daily.get("temperature_2m_min"))
    days = range(_DAYS_SHOWN)

    return DetailedWeatherData(
        location=location,
        temperature=_round(current.get("temperature_2m")),
        weather_code=_to_int(current.get("weather_code")),
        is_day=bool(_to_int(current.get("is_day"))),
        timezone=zone,
        wind_speed=_round(current.get("wind_speed_10m")),
        wind_gusts=_round(current.get("wind_gusts_10m")),
        wind_direction=_round(current.get("wind_direction_10m")),
        apparent_temperature=_round(current.get("apparent_temperature")),
        precipitation=_round(_at(weekly_precipitation, 0)),
        snow_depth=_to_float(current.get("snow_depth")),
        uv_index=_round(current.get("uv_index")),
        humidity=_round(current.get("relative_humidity_2m")),
        visibility=_round(current.get("visibility")),
        pressure=_round(current.get("pressure_msl")),
        hourly_temperature=[_round(_at(hourly_temps, i)) for i in hours],
        full_hourly_temperature=[_round(value) for value in hourly_temps],
        hourly_code=[_to_int(_at(hourly_codes, i)) for i in hours],
        hourly_is_day=[bool(_to_int(_at(hourly_is_day, i))) for i in hours],
        hourly_time_stamp=[_to_str(_at(hourly_times, i))[11:16] for i in hours],
        weekly_max_temp=[_round(_at(weekly_max, i)) for i in days],
        weekly_min_temp=[_round(_at(weekly_min, i)) for i in days],
        weekly_code=[_round(_at(weekly_codes, i)) for i in days],
        sunrise=[_to_str(_at(weekly_sunrise, i)) for i in days],
        sunset=[_to_str(_at(weekly_sunset, i)) for i in days],
        weekly_day_name=[_day_name(_to_str(_at(weekly_days, i))) for i in days],
    )


def parse_geocoding_data(results: Iterable[Any]) -> list[GeoLocationData]:
    """Read places from the results list of a geocoding response.

    Results without a formatted name or coordinates, and those whose name
    starts with a digit, are skipped. The display name is the part of the
    formatted name before its first comma.
    """
    locations: list[GeoLocationData] = []
    for result in results:
        if not isinstance(result, Mapping):
            continue

        place = result.get("formatted")
        if not isinstance(place, str):
            continue
        if place and place[0].isdecimal():
            continue

        geometry = result.get("geometry")
        if not isinstance(geometry, Mapping):
            continue
        if "lat" not in geometry or "lng" not in geometry:
            continue

        country = ""
        components = result.get("components")
        if isinstance(components, Mapping) and isinstance(components.get("country"), str):
            country = components["country"]

        renamed_place = place.split(",", 1)[0].strip() if "," in place else place

        locations.append(
            GeoLocationData(
                place=place,
                renamed_place=renamed_place,
                latitude=_to_float(geometry["lat"]),
                longitude=_to_float(geometry["lng"]),
                country=country,
            )
        )
    return locations