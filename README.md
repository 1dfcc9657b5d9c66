# skycast

Weather for the places you care about. skycast gets current conditions, a
24-hour outlook and a 7-day forecast from the Open-Meteo forecast service. It
looks up places by name through the OpenCage geocoding service. It keeps your
saved places and preferred units in a JSON settings file.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
skycast [--settings FILE] [--config FILE] [list | search QUERY | show QUERY | add QUERY]
```

- `list` (also the default when no command is given) prints a one-line summary
  for each saved place. The summary gives the current temperature and today's
  high and low. A place whose fetch fails gets its error message on stderr.
- `search QUERY` prints the places that match a name, with their coordinates.
- `show QUERY` prints the full forecast for the first matching place. This
  covers the current conditions, wind, humidity, UV index, precipitation,
  visibility, pressure and snow depth, then 24 hourly temperatures, then seven
  days of highs, lows, sunrise and sunset.
- `add QUERY` adds the first matching place to the saved places, unless it is
  already saved.

`--settings` names the settings file. The default is
`../Serialization/settings.json`, relative to the current directory. The
command writes the settings back to this file when it finishes. If the file
cannot be written, it prints a message on stderr.

`--config` names the INI file that holds the geocoding key. By default the
command reads `config.ini` from the directory of the running script.

The command exits with status 1 in these cases:

- a forecast request fails
- `show` or `add` finds no matching place

## Place search

Searching by name needs an API key for the geocoding service. Put the key in an
INI file:

```
[API]
Key = placeholder
```

`skycast.api.load_api_key(config_path)` reads the key from such a file. It
returns an empty string if the file or the entry is missing.

## Library use

```python
from skycast.geolocation import GeoLocationData
from skycast.settings import Settings
from skycast.api import WeatherAPI, DetailedWeatherAPI, GeocodingAPI

settings = Settings.from_file("settings.json")   # defaults if the file is missing
berlin = GeoLocationData(
    place="Berlin, Germany",
    renamed_place="Berlin",
    latitude=52.52,
    longitude=13.41,
    country="Germany",
)

summary = WeatherAPI(settings).fetch_data(berlin)
print(summary.temperature, summary.highest_temperature, summary.lowest_temperature)

detailed = DetailedWeatherAPI(settings).fetch_data(berlin)
print(detailed.hourly_time_stamp, detailed.weekly_day_name)

places = GeocodingAPI(api_key="placeholder").geocode_city("Berlin")

settings.saved_locations.append(berlin)
settings.save("settings.json")
```

`skycast.app.WeatherApp` combines the settings with the three clients. Its
methods are:

- `saved_locations_data()`
- `location_data()`
- `detailed_data()`
- `search()`
- `save()`

### Locations

`GeoLocationData` is an immutable record. Two locations are equal when their
coordinates are equal, whatever their names. It offers:

- `to_dict()` and `GeoLocationData.from_dict()` to convert to and from a mapping
- `with_renamed_place()` to get a copy with a new display name

### Errors

`WeatherAPI.fetch_data` and `DetailedWeatherAPI.fetch_data` raise
`skycast.api.ApiError` in two cases:

- the request fails or times out; the timeout is 2 seconds by default
- the response cannot be parsed

`GeocodingAPI.geocode_city` returns an empty list on any failure.

`weather_query` and `detailed_weather_query` build the query parameters that
go to the forecast service.

### Units

`Settings` holds a `TemperatureUnit`, a `WindSpeedUnit`, a `PrecipitationUnit`,
a `share_location` flag and the list `saved_locations`. Each unit gives:

- `api_parameter()`, the value sent to the forecast service
- `symbol()`, such as `°C` or `km/h`
- `display_name()`, such as `Celsius` or `Kilometres per hour`

`PrecipitationUnit.visibility_symbol()` gives the unit for visibility. It is
`m` or `ft`, depending on the precipitation unit.

`skycast.settings.weather_code_to_icon(weather_code, is_day)` gives the icon
path for a WMO weather code, under `../Resources/weatherIcons/`. Unknown codes
give the cloudy icon.

### Parsing

`skycast.parser` turns forecast and geocoding responses into data objects.

- `parse_weather_data` reads a forecast response into a `WeatherData`.
- `parse_detailed_weather_data` reads a forecast response into a
  `DetailedWeatherData`. The optional `now` argument picks the starting hour of
  the 24-hour outlook.
- `parse_geocoding_data` reads a list of geocoding results into
  `GeoLocationData` objects.

`parse_weather_data` and `parse_detailed_weather_data` raise `ParseError` when a
forecast response cannot be used.

### Saving objects

`skycast.serializer` defines `Serializable` and the functions `save` and `load`.
They write an object to an indented JSON file and read it back.

## What skycast does not do

skycast has no graphical interface. It draws no temperature graphs or maps, and
it does not detect your own position. You give every place by name or by
coordinates.