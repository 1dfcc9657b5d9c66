import pytest
import responses

from skycast.api import FORECAST_URL, GEOCODING_URL, NETWORK_ERROR_MESSAGE, ApiError
from skycast.app import WeatherApp, main
from skycast.geolocation import GeoLocationData
from skycast.settings import Settings, TemperatureUnit

BELGRADE = GeoLocationData("Belgrade, Serbia", "Belgrade", 44.8125, 20.4375, "Serbia")
NOVI_SAD = GeoLocationData("Novi Sad, Serbia", "Novi Sad", 45.25, 19.8125, "Serbia")

WEATHER_BODY = {
    "timezone": "UTC",
    "current": {"temperature_2m": 21.0, "weather_code": 3, "is_day": 1},
    "daily": {"temperature_2m_max": [25.0], "temperature_2m_min": [12.0]},
}

GEOCODING_BODY = {
    "results": [
        {
            "formatted": "Belgrade, Serbia",
            "geometry": {"lat": 44.8125, "lng": 20.4375},
            "components": {"country": "Serbia"},
        }
    ]
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def _detailed_body():
    days = [f"2024-01-0{d}" for d in range(1, 8)]
    return {
        "timezone": "UTC",
        "current": {"temperature_2m": 5.0, "apparent_temperature": 2.0},
        "hourly": {"time": [], "temperature_2m": []},
        "daily": {
            "time": days,
            "sunrise": days,
            "sunset": days,
            "precipitation_sum": [3.0] * 7,
            "temperature_2m_max": [10.0] * 7,
            "temperature_2m_min": [1.0] * 7,
            "weather_code": [2] * 7,
        },
    }


def _app(tmp_path, settings=None):
    return WeatherApp(
        settings if settings is not None else Settings(),
        tmp_path / "settings.json",
        api_key="placeholder",
    )


def _config(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[API]\nKey=placeholder\n", encoding="utf-8")
    return str(path)


def test_location_data(tmp_path, mocked):
    mocked.add(responses.GET, FORECAST_URL, json=WEATHER_BODY)
    data = _app(tmp_path).location_data(BELGRADE)
    assert data.location == BELGRADE
    assert data.temperature == 21


def test_saved_locations_keep_order_and_report_failures(tmp_path, mocked):
    mocked.add(responses.GET, FORECAST_URL, json=WEATHER_BODY)
    mocked.add(responses.GET, FORECAST_URL, status=500)
    app = _app(tmp_path, Settings(saved_locations=[BELGRADE, NOVI_SAD]))
    results = app.saved_locations_data()
    assert len(results) == 2
    assert results[0].location == BELGRADE
    assert isinstance(results[1], ApiError)
    assert str(results[1]) == NETWORK_ERROR_MESSAGE


def test_no_saved_locations_gives_no_results(tmp_path):
    assert _app(tmp_path).saved_locations_data() == []


def test_detailed_data(tmp_path, mocked):
    mocked.add(responses.GET, FORECAST_URL, json=_detailed_body())
    data = _app(tmp_path).detailed_data(BELGRADE)
    assert data.location == BELGRADE
    assert data.apparent_temperature == 2
    assert data.highest_temperature == 10


def test_search(tmp_path, mocked):
    mocked.add(responses.GET, GEOCODING_URL, json=GEOCODING_BODY)
    assert _app(tmp_path).search("Belgrade") == [BELGRADE]


def test_save_round_trip(tmp_path):
    settings = Settings(
        temperature_unit=TemperatureUnit.FAHRENHEIT,
        share_location=True,
        saved_locations=[BELGRADE, NOVI_SAD],
    )
    _app(tmp_path, settings).save()
    loaded = Settings.from_file(tmp_path / "settings.json")
    assert loaded.saved_locations == [BELGRADE, NOVI_SAD]
    assert loaded.temperature_unit is TemperatureUnit.FAHRENHEIT
    assert loaded.share_location is True


def test_settings_read_from_file(tmp_path):
    path = tmp_path / "settings.json"
    Settings(saved_locations=[NOVI_SAD]).save(path)
    app = WeatherApp(settings_path=path, api_key="placeholder")
    assert app.settings.saved_locations == [NOVI_SAD]
    assert app.settings.saved_locations[0].renamed_place == "Novi Sad"


def test_main_search(tmp_path, capsys, mocked):
    mocked.add(responses.GET, GEOCODING_URL, json=GEOCODING_BODY)
    status = main(
        ["--settings", str(tmp_path / "s.json"), "--config", _config(tmp_path), "search", "Bel"]
    )
    assert status == 0
    assert "Belgrade, Serbia" in capsys.readouterr().out


def test_main_list(tmp_path, capsys, mocked):
    path = tmp_path / "s.json"
    Settings(saved_locations=[BELGRADE]).save(path)
    mocked.add(responses.GET, FORECAST_URL, json=WEATHER_BODY)
    status = main(["--settings", str(path), "--config", _config(tmp_path), "list"])
    output = capsys.readouterr().out
    assert status == 0
    assert "Belgrade" in output
    assert "21°C" in output


def test_main_add_saves_location(tmp_path, mocked):
    path = tmp_path / "s.json"
    mocked.add(responses.GET, GEOCODING_URL, json=GEOCODING_BODY)
    status = main(["--settings", str(path), "--config", _config(tmp_path), "add", "Belgrade"])
    assert status == 0
    assert Settings.from_file(path).saved_locations == [BELGRADE]


def test_main_show_reports_api_error(tmp_path, capsys, mocked):
    mocked.add(responses.GET, GEOCODING_URL, json=GEOCODING_BODY)
    mocked.add(responses.GET, FORECAST_URL, status=500)
    status = main(
        ["--settings", str(tmp_path / "s.json"), "--config", _config(tmp_path), "show", "Bel"]
    )
    assert status == 1
    assert NETWORK_ERROR_MESSAGE in capsys.readouterr().err


@pytest.mark.parametrize("command", ["show", "add"])
def test_main_without_matches_fails(tmp_path, command, mocked):
    mocked.add(responses.GET, GEOCODING_URL, json={"results": []})
    status = main(
        ["--settings", str(tmp_path / "s.json"), "--config", _config(tmp_path), command, "zzz"]
    )
    assert status == 1