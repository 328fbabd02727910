import re
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.schemas.booking import BookingCreate, CarBookingDetails, FlightBookingDetails
from app.services.booking_service import (
    BookingService,
    generate_booking_reference,
    to_base36,
)


def flight_booking(**overrides):
    data = {
        "bookingType": "flight",
        "serviceId": "amadeus_1",
        "customerInfo": {
            "firstName": "Ayesha",
            "lastName": "Khan",
            "email": "ayesha@skyroute.io",
            "phone": "+92 300 1234567",
        },
        "bookingDetails": {
            "passengers": 2,
            "from": "Lahore",
            "to": "Dubai",
            "flightNumber": "PK203",
            "seatPreference": "window",
        },
        "totalAmount": 90002,
    }
    data.update(overrides)
    return BookingCreate.model_validate(data)


# === Reference ===

@pytest.mark.parametrize("value, encoded", [
    (0, "0"),
    (9, "9"),
    (10, "A"),
    (35, "Z"),
    (36, "10"),
    (1295, "ZZ"),
])
def test_to_base36(value, encoded):
    assert to_base36(value) == encoded


def test_booking_reference_encodes_epoch_millis():
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)

    reference = generate_booking_reference(now)

    assert re.fullmatch(r"BK[0-9A-Z]+", reference)
    assert int(reference[2:], 36) == int(now.timestamp() * 1000)


def test_booking_references_differ_across_milliseconds():
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)

    assert generate_booking_reference(now) != generate_booking_reference(now + timedelta(milliseconds=1))


# === Request validation ===

def test_details_schema_selected_by_booking_type():
    flight = flight_booking()
    car = BookingCreate.model_validate({
        "bookingType": "car",
        "serviceId": "65f0c0ffee0000000000000a",
        "totalAmount": 15000,
        "bookingDetails": {"pickupDate": "2025-03-02", "days": 3},
    })

    assert isinstance(flight.root.booking_details, FlightBookingDetails)
    assert isinstance(car.root.booking_details, CarBookingDetails)
    assert car.root.booking_details.days == 3


@pytest.mark.parametrize("overrides", [
    {"bookingType": "hotel"},
    {"bookingDetails": {"passengers": 0}},
    {"totalAmount": -1},
    {"serviceId": ""},
])
def test_invalid_booking_rejected(overrides):
    with pytest.raises(ValidationError):
        flight_booking(**overrides)


# === Service ===

async def test_create_booking_confirms_and_marks_paid(booking_repo):
    service = BookingService(booking_repo)
    now = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)

    result = await service.create_booking("user-1", flight_booking(), now=now)

    assert result.message == "Booking created successfully"
    booking = result.booking
    assert booking.booking_reference == generate_booking_reference(now)
    assert booking.user_id == "user-1"
    assert booking.booking_type == "flight"
    assert booking.service_id == "amadeus_1"
    assert booking.payment_status == "completed"
    assert booking.booking_status == "confirmed"
    assert booking.total_amount == 90002
    assert booking.customer_info.email == "ayesha@skyroute.io"


async def test_booking_details_keep_wire_names_and_extra_keys(booking_repo):
    service = BookingService(booking_repo)

    await service.create_booking("user-1", flight_booking())

    details = booking_repo.bookings[0].booking_details
    assert details["passengers"] == 2
    assert details["from"] == "Lahore"
    assert details["flightNumber"] == "PK203"
    assert details["seatPreference"] == "window"


async def test_list_user_bookings_only_returns_own_newest_first(booking_repo):
    service = BookingService(booking_repo)
    base = datetime(2025, 3, 1, tzinfo=timezone.utc)
    await service.create_booking("user-1", flight_booking(), now=base)
    await service.create_booking("user-2", flight_booking(), now=base + timedelta(minutes=1))
    await service.create_booking("user-1", flight_booking(serviceId="amadeus_2"), now=base + timedelta(minutes=2))

    result = await service.list_user_bookings("user-1")

    assert result.count == 2
    assert [b.service_id for b in result.bookings] == ["amadeus_2", "amadeus_1"]
