"""Named geographic locations."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _coordinate_key(value: float) -> float | None:
    """Map NaN to None so that two unset coordinates compare equal."""
    return None if math.isnan(value) else value


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True, eq=False)
class GeoLocationData:
    """A place with its display name, coordinates and country.

    Two locations are equal when their coordinates are equal; the names
    play no part in the comparison.
    """

    place: str = ""
    renamed_place: str = ""
    latitude: float = math.nan
    longitude: float = math.nan
    country: str = ""

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    def _key(self) -> tuple[float | None, float | None]:
        return (_coordinate_key(self.latitude), _coordinate_key(self.longitude))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoLocationData):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_dict(self) -> dict[str, Any]:
        """Return the location as a plain mapping suitable for JSON."""
        return {
            "place": self.place,
            "renamedPlace": self.renamed_place,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> GeoLocationData:
        """Build a location from a mapping; missing values become empty or zero."""
        return cls(
            place=_as_str(mapping.get("place")),
            renamed_place=_as_str(mapping.get("renamedPlace")),
            latitude=_as_float(mapping.get("latitude")),
            longitude=_as_float(mapping.get("longitude")),
            country=_as_str(mapping.get("country")),
        )

    def with_renamed_place(self, renamed_place: str) -> GeoLocationData:
        """Return a copy carrying a new display name."""
        return dataclasses.replace(self, renamed_place=renamed_place)