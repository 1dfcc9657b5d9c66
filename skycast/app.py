"""The weather application: saved places, forecasts and place search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from skycast.api import (
    ApiError,
    DetailedWeatherAPI,
    GeocodingAPI,
    StrPath,
    WeatherAPI,
    load_api_key,
)
from skycast.geolocation import GeoLocationData
from skycast.settings import Settings
from skycast.weather_data import DetailedWeatherData, WeatherData

DEFAULT_SETTINGS_PATH = "../Serialization/settings.json"
USER_LOCATION_NAME = "My location"


def _default_config_path() -> Path:
    return Path(sys.argv[0]).resolve().parent / "config.ini"


class WeatherApp:
    """Ties the user's settings to the forecast and geocoding services."""

    def __init__(
        self,
        settings: Settings | None = None,
        settings_path: StrPath = DEFAULT_SETTINGS_PATH,
        *,
        api_key: str | None = None,
        weather_api: WeatherAPI | None = None,
        detailed_api: DetailedWeatherAPI | None = None,
        geocoding_api: GeocodingAPI | None = None,
    ) -> None:
        self.settings_path = settings_path
        self.settings = settings if settings is not None else Settings.from_file(settings_path)
        self.weather_api = weather_api if weather_api is not None else WeatherAPI(self.settings)
        self.detailed_api = (
            detailed_api if detailed_api is not None else DetailedWeatherAPI(self.settings)
        )
        if geocoding_api is None:
            key = api_key if api_key is not None else load_api_key(_default_config_path())
            geocoding_api = GeocodingAPI(key)
        self.geocoding_api = geocoding_api

    def saved_locations_data(self) -> list[WeatherData | ApiError]:
        """Weather for every saved place, in order; a failed fetch gives its error."""
        results: list[WeatherData | ApiError] = []
        for location in self.settings.saved_locations:
            try:
                results.append(self.location_data(location))
            except ApiError as error:
                results.append(error)
        return results

    def location_data(self, location: GeoLocationData) -> WeatherData:
        return self.weather_api.fetch_data(location)

    def detailed_data(self, location: GeoLocationData) -> DetailedWeatherData:
        return self.detailed_api.fetch_data(location)

    def search(self, query: str) -> list[GeoLocationData]:
        return self.geocoding_api.geocode_city(query)

    def save(self) -> None:
        """Write the settings to the settings file."""
        self.settings.save(self.settings_path)


def _summary(data: WeatherData, settings: Settings) -> str:
    unit = settings.temperature_unit.symbol()
    return (
        f"{data.location.renamed_place}: {data.temperature}{unit} "
        f"(high {data.highest_temperature}{unit}, low {data.lowest_temperature}{unit})"
    )


def _details(data: DetailedWeatherData, settings: Settings) -> list[str]:
    temp = settings.temperature_unit.symbol()
    wind = settings.wind_speed_unit.symbol()
    rain = settings.precipitation_unit.symbol()
    distance = settings.precipitation_unit.visibility_symbol()
    lines = [
        data.location.place or data.location.renamed_place,
        f"Now: {data.temperature}{temp}, feels like {data.apparent_temperature}{temp}",
        f"Wind: {data.wind_speed} {wind}, gusts {data.wind_gusts} {wind}, "
        f"direction {data.wind_direction}°",
        f"Humidity: {data.humidity}%  UV index: {data.uv_index}  "
        f"Precipitation: {data.precipitation} {rain}",
        f"Visibility: {data.visibility} {distance}  Pressure: {data.pressure} hPa  "
        f"Snow depth: {data.snow_depth}",
        "Hourly:",
    ]
    lines.extend(
        f"  {stamp}  {value}{temp}"
        for stamp, value in zip(data.hourly_time_stamp, data.hourly_temperature)
    )
    lines.append("Daily:")
    lines.extend(
        f"  {name}  {high}{temp} / {low}{temp}  sunrise {rise}  sunset {set_}"
        for name, high, low, rise, set_ in zip(
            data.weekly_day_name,
            data.weekly_max_temp,
            data.weekly_min_temp,
            data.sunrise,
            data.sunset,
        )
    )
    return lines


def _run(app: WeatherApp, command: str, query: str | None) -> int:
    if command == "list":
        results = app.saved_locations_data()
        if not results:
            print("No saved locations.")
        for result in results:
            if isinstance(result, ApiError):
                print(result, file=sys.stderr)
            else:
                print(_summary(result, app.settings))
        return 0

    places = app.search(query or "")
    if command == "search":
        if not places:
            print("No places found.")
        for place in places:
            print(f"{place.place}  ({place.latitude:g}, {place.longitude:g})")
        return 0

    if not places:
        print("No places found.", file=sys.stderr)
        return 1
    location = places[0]

    if command == "add":
        if location.renamed_place == USER_LOCATION_NAME or location in app.settings.saved_locations:
            print(f"{location.renamed_place} is already saved.")
        else:
            app.settings.saved_locations.append(location)
            print(f"Saved {location.renamed_place}.")
        return 0

    for line in _details(app.detailed_data(location), app.settings):
        print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="skycast", description="Weather forecasts.")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS_PATH, help="settings file")
    parser.add_argument("--config", default=None, help="INI file holding the geocoding key")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("list", help="weather for the saved places")
    for name, text in (
        ("search", "look up places by name"),
        ("show", "full forecast for the first matching place"),
        ("add", "save the first matching place"),
    ):
        commands.add_parser(name, help=text).add_argument("query")
    args = parser.parse_args(argv)

    config_path = args.config if args.config is not None else _default_config_path()
    app = WeatherApp(settings_path=args.settings, api_key=load_api_key(config_path))

    try:
        status = _run(app, args.command or "list", getattr(args, "query", None))
    except ApiError as error:
        print(error, file=sys.stderr)
        status = 1
    finally:
        try:
            app.save()
        except OSError as error:
            print(f"Could not save settings: {error}", file=sys.stderr)
    return status