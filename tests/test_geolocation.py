import math

import pytest

from skycast.geolocation import GeoLocationData


@pytest.fixture
def belgrade():
    return GeoLocationData(
        place="Belgrade, Serbia",
        renamed_place="Belgrade",
        latitude=44.8,
        longitude=20.46,
        country="Serbia",
    )


def test_equality_uses_coordinates_only(belgrade):
    other = GeoLocationData(renamed_place="Home", latitude=44.8, longitude=20.46)
    assert belgrade == other


def test_different_coordinates_are_not_equal(belgrade):
    other = GeoLocationData(
        place=belgrade.place,
        renamed_place=belgrade.renamed_place,
        latitude=45.0,
        longitude=20.46,
        country=belgrade.country,
    )
    assert not (belgrade == other)


def test_hash_matches_equality(belgrade):
    other = GeoLocationData(renamed_place="Elsewhere", latitude=44.8, longitude=20.46)
    assert hash(belgrade) == hash(other)
    assert len({belgrade, other}) == 1


def test_default_locations_are_equal():
    first = GeoLocationData()
    assert math.isnan(first.latitude)
    assert first == GeoLocationData()


def test_to_dict_keys(belgrade):
    assert belgrade.to_dict() == {
        "place": "Belgrade, Serbia",
        "renamedPlace": "Belgrade",
        "latitude": 44.8,
        "longitude": 20.46,
        "country": "Serbia",
    }


def test_round_trip_keeps_all_fields(belgrade):
    restored = GeoLocationData.from_dict(belgrade.to_dict())
    assert restored.to_dict() == belgrade.to_dict()


def test_from_dict_missing_values():
    restored = GeoLocationData.from_dict({})
    assert restored.place == ""
    assert restored.renamed_place == ""
    assert restored.country == ""
    assert restored.coordinates == (0.0, 0.0)


def test_with_renamed_place(belgrade):
    renamed = belgrade.with_renamed_place("Home")
    assert renamed.renamed_place == "Home"
    assert renamed.place == belgrade.place
    assert belgrade.renamed_place == "Belgrade"
    assert renamed == belgrade


def test_list_index_finds_by_coordinates(belgrade):
    saved = [GeoLocationData(renamed_place="A", latitude=1.0, longitude=2.0), belgrade]
    probe = GeoLocationData(renamed_place="My location", latitude=44.8, longitude=20.46)
    assert saved.index(probe) == 1


def test_is_immutable(belgrade):
    with pytest.raises(AttributeError):
        belgrade.place = "Other"
    assert belgrade.place == "Belgrade, Serbia"