import pytest

from app.data.cities import CITY_TO_IATA, city_catalog, get_iata_code, supported_cities


@pytest.mark.parametrize("city, code", [
    ("lahore", "LHE"),
    ("Lahore", "LHE"),
    ("  DUBAI  ", "DXB"),
    ("new york", "JFK"),
    ("Kuala Lumpur", "KUL"),
    ("rawalpindi", "ISB"),
    ("islamabad", "ISB"),
    ("makkah", "JED"),
    ("jeddah", "JED"),
])
def test_table_lookup(city, code):
    assert get_iata_code(city) == code


@pytest.mark.parametrize("text, code", [
    ("lhe", "LHE"),
    ("JFK", "JFK"),
    (" ist ", "IST"),
    ("xyz", "XYZ"),
])
def test_three_letter_codes_pass_through(text, code):
    assert get_iata_code(text) == code


@pytest.mark.parametrize("text", [None, "", "   ", "nowhere", "lahor", "new-york", "ab", "a1c", "abcd"])
def test_unknown_input_resolves_to_none(text):
    assert get_iata_code(text) is None


def test_every_table_entry_resolves_to_its_code():
    for city, code in CITY_TO_IATA.items():
        assert get_iata_code(city.upper()) == code


def test_supported_cities_lists_table_keys():
    assert supported_cities() == list(CITY_TO_IATA)
    assert "lahore" in supported_cities()


def test_city_catalog_capitalises_names():
    catalog = city_catalog()

    assert len(catalog) == len(CITY_TO_IATA)
    assert {"name": "Lahore", "code": "LHE"} in catalog
    assert {"name": "New york", "code": "JFK"} in catalog
