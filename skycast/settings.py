"""User preferences: measurement units, location sharing and saved places."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from skycast.geolocation import GeoLocationData
from skycast.serializer import Serializable, StrPath, load, save

ICON_BASE_PATH = "../Resources/weatherIcons/"


class TemperatureUnit(Enum):
    CELSIUS = 0
    FAHRENHEIT = 1

    def api_parameter(self) -> str:
        """Value of the forecast service's temperature_unit parameter."""
        return {
            TemperatureUnit.CELSIUS: "celsius",
            TemperatureUnit.FAHRENHEIT: "fahrenheit",
        }[self]

    def symbol(self) -> str:
        return {
            TemperatureUnit.CELSIUS: "°C",
            TemperatureUnit.FAHRENHEIT: "°F",
        }[self]

    def display_name(self) -> str:
        return {
            TemperatureUnit.CELSIUS: "Celsius",
            TemperatureUnit.FAHRENHEIT: "Fahrenheit",
        }[self]


class WindSpeedUnit(Enum):
    KMH = 0
    MPH = 1
    MS = 2
    KNOTS = 3

    def api_parameter(self) -> str:
        """Value of the forecast service's wind_speed_unit parameter."""
        return {
            WindSpeedUnit.KMH: "kmh",
            WindSpeedUnit.MPH: "mph",
            WindSpeedUnit.MS: "ms",
            WindSpeedUnit.KNOTS: "kn",
        }[self]

    def symbol(self) -> str:
        return {
            WindSpeedUnit.KMH: "km/h",
            WindSpeedUnit.MPH: "mph",
            WindSpeedUnit.MS: "m/s",
            WindSpeedUnit.KNOTS: "kn",
        }[self]

    def display_name(self) -> str:
        return {
            WindSpeedUnit.KMH: "Kilometres per hour",
            WindSpeedUnit.MPH: "Miles per hour",
            WindSpeedUnit.MS: "Metres per second",
            WindSpeedUnit.KNOTS: "Knots",
        }[self]


class PrecipitationUnit(Enum):
    MILLIMETRES = 0
    INCHES = 1

    def api_parameter(self) -> str:
        """Value of the forecast service's precipitation_unit parameter."""
        return {
            PrecipitationUnit.MILLIMETRES: "mm",
            PrecipitationUnit.INCHES: "inch",
        }[self]

    def symbol(self) -> str:
        return {
            PrecipitationUnit.MILLIMETRES: "mm",
            PrecipitationUnit.INCHES: "in",
        }[self]

    def display_name(self) -> str:
        return {
            PrecipitationUnit.MILLIMETRES: "Millimetres",
            PrecipitationUnit.INCHES: "Inches",
        }[self]

    def visibility_symbol(self) -> str:
        """Visibility unit, which the forecast service ties to the precipitation unit."""
        return {
            PrecipitationUnit.MILLIMETRES: "m",
            PrecipitationUnit.INCHES: "ft",
        }[self]


_E = TypeVar("_E", bound=Enum)


def _coerce_unit(enum_cls: type[_E], value: Any) -> _E:
    """Read a unit stored as its number or its name; anything else gives the first unit."""
    default = next(iter(enum_cls))
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        try:
            return enum_cls(value)
        except ValueError:
            return default
    if isinstance(value, str):
        try:
            return enum_cls[value]
        except KeyError:
            pass
        try:
            return enum_cls(int(value))
        except ValueError:
            return default
    return default


@dataclass
class Settings(Serializable):
    """The user's preferences."""

    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    wind_speed_unit: WindSpeedUnit = WindSpeedUnit.KMH
    precipitation_unit: PrecipitationUnit = PrecipitationUnit.MILLIMETRES
    share_location: bool = False
    saved_locations: list[GeoLocationData] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "shareLocation": self.share_location,
            "temperatureUnit": self.temperature_unit.value,
            "windSpeedUnit": self.wind_speed_unit.value,
            "precipitationUnit": self.precipitation_unit.value,
            "locations": [location.to_dict() for location in self.saved_locations],
        }

    def load_dict(self, mapping: Mapping[str, Any]) -> None:
        self.share_location = bool(mapping.get("shareLocation", False))
        self.temperature_unit = _coerce_unit(TemperatureUnit, mapping.get("temperatureUnit"))
        self.wind_speed_unit = _coerce_unit(WindSpeedUnit, mapping.get("windSpeedUnit"))
        self.precipitation_unit = _coerce_unit(
            PrecipitationUnit, mapping.get("precipitationUnit")
        )
        locations = mapping.get("locations")
        if not isinstance(locations, list):
            locations = []
        self.saved_locations = [
            GeoLocationData.from_dict(entry if isinstance(entry, Mapping) else {})
            for entry in locations
        ]

    @classmethod
    def from_file(cls, filepath: StrPath) -> Settings:
        """Read settings from a JSON file; a missing file gives the defaults."""
        settings = cls()
        load(settings, filepath)
        return settings

    def save(self, filepath: StrPath) -> None:
        save(self, filepath)


_DAY_NIGHT_ICONS: dict[int, tuple[str, str]] = {
    0: ("Sunny.png", "Clear.png"),
    1: ("PartlyCloudyDay.png", "PartlyCloudyNight.png"),
    2: ("Cloudy.png", "Cloudy.png"),
    3: ("Overcast.png", "Overcast.png"),
    45: ("Fog.png", "Fog.png"),
    48: ("FreezingFog.png", "FreezingFog.png"),
    51: ("ModRain.png", "ModRain.png"),
    53: ("ModRain.png", "ModRain.png"),
    55: ("ModRain.png", "ModRain.png"),
    56: ("FreezingDrizzle.png", "FreezingDrizzle.png"),
    57: ("FreezingDrizzle.png", "FreezingDrizzle.png"),
    61: ("ModRain.png", "ModRain.png"),
    63: ("HeavyRain.png", "HeavyRain.png"),
    65: ("HeavyRainSwrsDay.png", "HeavyRainSwrsNight.png"),
    66: ("FreezingRain.png", "FreezingRain.png"),
    67: ("FreezingRain.png", "FreezingRain.png"),
    71: ("ModSnow.png", "ModSnow.png"),
    73: ("HeavySnow.png", "HeavySnow.png"),
    75: ("HeavySnowSwrsDay.png", "HeavySnowSwrsNight.png"),
    77: ("IsoSnowSwrsDay.png", "IsoSnowSwrsNight.png"),
    80: ("IsoRainSwrsDay.png", "IsoRainSwrsNight.png"),
    81: ("ModRainSwrsDay.png", "ModRainSwrsNight.png"),
    82: ("HeavyRainSwrsDay.png", "HeavyRainSwrsNight.png"),
    85: ("IsoSnowSwrsDay.png", "IsoSnowSwrsNight.png"),
    86: ("HeavySnowSwrsDay.png", "HeavySnowSwrsNight.png"),
    95: ("PartCloudRainThunderDay.png", "PartCloudRainThunderNight.png"),
    96: ("PartCloudSleetSnowThunderDay.png", "PartCloudSleetSnowThunderNight.png"),
    99: ("PartCloudSleetSnowThunderDay.png", "PartCloudSleetSnowThunderNight.png"),
}


def weather_code_to_icon(weather_code: int, is_day: bool) -> str:
    """Path of the icon for a WMO weather code; unknown codes show clouds."""
    day_icon, night_icon = _DAY_NIGHT_ICONS.get(weather_code, ("Cloudy.png", "Cloudy.png"))
    return ICON_BASE_PATH + (day_icon if is_day else night_icon)