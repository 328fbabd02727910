import os
import re
import sys
from datetime import datetime, timedelta
from pathlib import Path
from types import SimpleNamespace

import pytest
from bson import ObjectId

# 1. Force the root directory into sys.path
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# 2. Environment for settings, before any app import
os.environ["JWT_SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["ENVIRONMENT"] = "testing"
os.environ["AMADEUS_CLIENT_ID"] = ""
os.environ["AMADEUS_CLIENT_SECRET"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from app.core.exceptions import PersistenceError  # noqa: E402
from app.repositories.flight_repository import build_stored_flight_query  # noqa: E402
from integrations.travel_apis.amadeus import ProviderResult  # noqa: E402


# ================================================================
# AMADEUS PAYLOADS
# ================================================================

def _segment(origin, destination, depart_at, arrive_at, carrier="PK", number="203"):
    return {
        "departure": {"iataCode": origin, "at": depart_at},
        "arrival": {"iataCode": destination, "at": arrive_at},
        "carrierCode": carrier,
        "number": number,
        "aircraft": {"code": "320"},
        "duration": "PT3H15M",
    }


@pytest.fixture
def make_offer():
    """Factory for raw flight-offers entries"""

    def _make(
        offer_id="1",
        total="45000.50",
        currency="PKR",
        duration="PT3H15M",
        cabin="ECONOMY",
        booking_class="Y",
        seats=4,
        stops=0,
    ):
        segments = [_segment("LHE", "DXB", "2025-03-02T14:30:00", "2025-03-02T17:45:00")]
        if stops:
            segments = [
                _segment("LHE", "KHI", "2025-03-02T14:30:00", "2025-03-02T16:15:00"),
            ]
            for i in range(stops - 1):
                segments.append(
                    _segment("KHI", "MCT", "2025-03-02T18:00:00", "2025-03-02T19:00:00", number=str(500 + i))
                )
            segments.append(_segment("MCT", "DXB", "2025-03-02T20:00:00", "2025-03-02T21:10:00", carrier="WY", number="601"))

        fare = {}
        if cabin:
            fare["cabin"] = cabin
        if booking_class:
            fare["class"] = booking_class

        offer = {
            "type": "flight-offer",
            "id": offer_id,
            "itineraries": [{"duration": duration, "segments": segments}],
            "price": {"currency": currency, "total": total, "grandTotal": total},
            "travelerPricings": [{"travelerId": "1", "fareDetailsBySegment": [fare]}],
        }
        if seats is not None:
            offer["numberOfBookableSeats"] = seats
        return offer

    return _make


CARRIERS = {"PK": "PAKISTAN INTERNATIONAL AIRLINES", "WY": "OMAN AIR"}


@pytest.fixture
def carriers():
    return dict(CARRIERS)


def offers_result(offers):
    return ProviderResult.ok({"data": offers, "dictionaries": {"carriers": dict(CARRIERS)}})


# ================================================================
# FAKES
# ================================================================

class FakeAmadeusClient:
    """Records calls and answers with preset ProviderResults"""

    def __init__(
        self,
        offers=None,
        locations=None,
        metrics=None,
        configured=True
    ):
        self.offers = offers or ProviderResult.ok({"data": []})
        self.locations = locations or ProviderResult.ok({"data": []})
        self.metrics = metrics or ProviderResult.ok({"data": []})
        self.configured = configured
        self.calls = []

    def is_configured(self):
        return self.configured

    async def search_flight_offers(self, **kwargs):
        self.calls.append(("search_flight_offers", kwargs))
        return self.offers

    async def search_locations(self, keyword, sub_type="AIRPORT,CITY"):
        self.calls.append(("search_locations", {"keyword": keyword, "sub_type": sub_type}))
        return self.locations

    async def itinerary_price_metrics(self, origin, destination, departure_date):
        self.calls.append((
            "itinerary_price_metrics",
            {"origin": origin, "destination": destination, "departure_date": departure_date},
        ))
        return self.metrics

    async def close(self):
        pass


def stored_flight(**overrides):
    data = {
        "id": ObjectId(),
        "flight_number": "PK203",
        "airline": "PIA",
        "origin": "Lahore",
        "destination": "Dubai",
        "departure_time": "02:30 PM",
        "arrival_time": "05:45 PM",
        "departure_date": datetime(2025, 3, 2, 14, 30),
        "duration": "3h 15m",
        "price": 52000.0,
        "stops": "Non-stop",
        "total_seats": 180,
        "available_seats": 40,
        "flight_class": "Economy",
        "status": "scheduled",
    }
    data.update(overrides)
    return SimpleNamespace(**data)


class FakeFlightRepository:
    """Applies the real query builder's regex and day window in memory"""

    def __init__(self, flights=None, error=None):
        self.flights = flights if flights is not None else []
        self.error = error
        self.calls = []

    async def search_stored(self, origin=None, destination=None, departure_date=None):
        self.calls.append((origin, destination, departure_date))
        if self.error:
            raise self.error

        query = build_stored_flight_query(origin, destination, departure_date)

        def matches(flight):
            for field in ("origin", "destination"):
                if field in query:
                    if not re.search(query[field]["$regex"], getattr(flight, field), re.IGNORECASE):
                        return False
            if "departure_date" in query:
                window = query["departure_date"]
                if not (window["$gte"] <= flight.departure_date < window["$lt"]):
                    return False
            return True

        return sorted((f for f in self.flights if matches(f)), key=lambda f: f.price)

    async def list_flights(self, limit=50):
        return self.flights[:limit]


class FakeUserRepository:
    def __init__(self):
        self.users = {}

    async def email_exists(self, email):
        return email.lower() in self.users

    async def get_by_email(self, email):
        return self.users.get(email.lower())

    async def create_user(self, data):
        user = SimpleNamespace(id=ObjectId(), created_at=datetime.utcnow(), **data)
        self.users[data["email"]] = user
        return user


class FakeBookingRepository:
    def __init__(self):
        self.bookings = []

    async def create_booking(self, data):
        booking = SimpleNamespace(id=ObjectId(), **data)
        self.bookings.append(booking)
        return booking

    async def list_for_user(self, user_id):
        own = [b for b in self.bookings if b.user_id == user_id]
        return sorted(own, key=lambda b: b.created_at, reverse=True)


class FakeCatalogRepository:
    def __init__(self, items=None):
        self.items = items or []
        self.calls = []

    async def search(self, *args):
        self.calls.append(args)
        return list(self.items)

    async def get_by_id(self, id):
        for item in self.items:
            if str(item.id) == id:
                return item
        return None


class FailingFlightRepository(FakeFlightRepository):
    def __init__(self):
        super().__init__(error=PersistenceError("connection refused"))


# ================================================================
# FIXTURES
# ================================================================

@pytest.fixture
def flight_repo():
    return FakeFlightRepository(flights=[
        stored_flight(),
        stored_flight(flight_number="EK623", airline="Emirates", price=61000.0),
        stored_flight(flight_number="PK213", origin="Karachi", price=43000.0),
        stored_flight(
            flight_number="PK205",
            price=48000.0,
            departure_date=datetime(2025, 3, 3, 9, 0),
        ),
    ])


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def booking_repo():
    return FakeBookingRepository()


@pytest.fixture
def request_time():
    return datetime(2025, 3, 1, 10, 0)


@pytest.fixture
def expired_delta():
    return timedelta(seconds=-1)
