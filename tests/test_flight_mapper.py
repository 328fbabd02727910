import pytest

from app.core.exceptions import OfferTranslationError
from app.schemas.flight import FlightRecord
from app.services.flight_mapper import (
    display_city,
    format_clock,
    format_duration,
    parse_duration,
    round_price,
    stops_label,
    translate_offer,
    translate_offers,
)


# === Field formatters ===

@pytest.mark.parametrize("raw, expected", [
    ("PT2H30M", "2h 30m"),
    ("PT3H", "3h"),
    ("PT45M", "45m"),
    ("PT10H5M", "10h 5m"),
    ("P1DT2H", "26h"),
    ("P1DT2H15M", "26h 15m"),
    ("PT0M", "0m"),
])
def test_format_duration(raw, expected):
    assert format_duration(raw) == expected


@pytest.mark.parametrize("raw", ["", "2H30M", "PT", "P", "PTxH", "1 hour"])
def test_parse_duration_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_duration(raw)


@pytest.mark.parametrize("segments, label", [
    (1, "Non-stop"),
    (2, "1 Stop"),
    (3, "2 Stops"),
    (5, "4 Stops"),
])
def test_stops_label(segments, label):
    assert stops_label(segments) == label


@pytest.mark.parametrize("total, expected", [
    ("45000.50", 45001),
    ("199.49", 199),
    ("199.5", 200),
    ("300.00", 300),
    ("300", 300),
    (1234.4, 1234),
])
def test_round_price(total, expected):
    assert round_price(total) == expected


@pytest.mark.parametrize("total", ["45000.50", "199.49", "300", "0.5"])
def test_round_price_is_idempotent(total):
    once = round_price(total)
    assert round_price(once) == once


def test_round_price_rejects_non_numeric():
    with pytest.raises(ValueError):
        round_price("free")


@pytest.mark.parametrize("timestamp, clock", [
    ("2025-03-02T14:30:00", "02:30 PM"),
    ("2025-03-02T00:05:00", "12:05 AM"),
    ("2025-03-02T09:00", "09:00 AM"),
])
def test_format_clock(timestamp, clock):
    assert format_clock(timestamp) == clock


def test_display_city():
    assert display_city("lahore") == "Lahore"
    assert display_city("NEW YORK") == "New york"
    assert display_city(" dXB ") == "Dxb"


# === Offer translation ===

def test_translate_direct_offer(make_offer, carriers):
    record = translate_offer(make_offer(), "lahore", "DUBAI", carriers, "LHE", "DXB")

    assert isinstance(record, FlightRecord)
    assert record.id == "amadeus_1"
    assert record.flight_number == "PK203"
    assert record.airline == "PAKISTAN INTERNATIONAL AIRLINES"
    assert record.origin == "Lahore"
    assert record.destination == "Dubai"
    assert record.from_code == "LHE"
    assert record.to_code == "DXB"
    assert record.departure_time == "02:30 PM"
    assert record.arrival_time == "05:45 PM"
    assert record.departure_date == "2025-03-02T14:30:00"
    assert record.duration == "3h 15m"
    assert record.price == 45001
    assert record.currency == "PKR"
    assert record.stops == "Non-stop"
    assert record.available_seats == 4
    assert record.cabin_class == "ECONOMY"
    assert record.booking_class == "Y"
    assert record.source == "amadeus"
    assert len(record.segments) == 1
    assert record.segments[0].aircraft == "320"


def test_connecting_offer_uses_last_segment_arrival(make_offer, carriers):
    record = translate_offer(make_offer(stops=2), "lahore", "dubai", carriers)

    assert record.stops == "2 Stops"
    assert record.arrival_time == "09:10 PM"
    assert record.to_code == "DXB"
    assert [s.carrier_code for s in record.segments] == ["PK", "PK", "WY"]


def test_unknown_carrier_falls_back_to_code(make_offer):
    record = translate_offer(make_offer(), "lahore", "dubai", carriers={})

    assert record.airline == "PK"


def test_missing_seat_count_defaults_to_nine(make_offer, carriers):
    record = translate_offer(make_offer(seats=None), "lahore", "dubai", carriers)

    assert record.available_seats == 9


def test_record_serialises_with_wire_names(make_offer, carriers):
    payload = translate_offer(make_offer(), "lahore", "dubai", carriers).model_dump(by_alias=True)

    assert payload["_id"] == "amadeus_1"
    assert payload["from"] == "Lahore"
    assert payload["to"] == "Dubai"
    assert payload["class"] == "ECONOMY"
    assert payload["flightNumber"] == "PK203"
    assert payload["availableSeats"] == 4
    assert payload["segments"][0]["carrierCode"] == "PK"


@pytest.mark.parametrize("overrides", [
    {"cabin": None},
    {"booking_class": None},
])
def test_missing_fare_details_fail_translation(make_offer, carriers, overrides):
    with pytest.raises(OfferTranslationError):
        translate_offer(make_offer(**overrides), "lahore", "dubai", carriers)


def test_missing_itinerary_fails_translation(make_offer, carriers):
    offer = make_offer()
    offer["itineraries"] = []

    with pytest.raises(OfferTranslationError):
        translate_offer(offer, "lahore", "dubai", carriers)


def test_malformed_duration_fails_translation(make_offer, carriers):
    with pytest.raises(OfferTranslationError):
        translate_offer(make_offer(duration="three hours"), "lahore", "dubai", carriers)


def test_batch_drops_only_bad_offers(make_offer, carriers):
    offers = [make_offer("1"), make_offer("2", booking_class=None), make_offer("3")]

    records = translate_offers(offers, "lahore", "dubai", carriers)

    assert [r.id for r in records] == ["amadeus_1", "amadeus_3"]


@pytest.mark.parametrize("raw", [150, None, 2.5, ["PT2H"]])
def test_parse_duration_rejects_non_strings(raw):
    with pytest.raises(ValueError):
        parse_duration(raw)


@pytest.mark.parametrize("offer", [None, "1", 42, ["id", "1"]])
def test_non_object_offer_fails_translation(offer, carriers):
    with pytest.raises(OfferTranslationError):
        translate_offer(offer, "lahore", "dubai", carriers)


def test_non_object_fare_details_fail_translation(make_offer, carriers):
    offer = make_offer()
    offer["travelerPricings"][0]["fareDetailsBySegment"] = ["ECONOMY"]

    with pytest.raises(OfferTranslationError):
        translate_offer(offer, "lahore", "dubai", carriers)


def test_batch_survives_non_string_duration_and_null_entries(make_offer, carriers):
    offers = [None, make_offer("1", duration=150), "garbage", make_offer("2")]

    records = translate_offers(offers, "lahore", "dubai", carriers)

    assert [r.id for r in records] == ["amadeus_2"]
