"""
Skyroute Backend - Application Constants
Centralized constants used throughout the application
"""

from enum import Enum


# === Bookings ===
class BookingType(str, Enum):
    """Kinds of service a booking can reference"""
    FLIGHT = "flight"
    CAR = "car"
    TOUR = "tour"
    TRANSPORTATION = "transportation"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


BOOKING_REFERENCE_PREFIX = "BK"


# === Flights ===
class FlightClass(str, Enum):
    """Cabin classes for stored flights"""
    ECONOMY = "Economy"
    BUSINESS = "Business"
    FIRST = "First"


class FlightSource(str, Enum):
    """Provenance marker carried by every flight record"""
    AMADEUS = "amadeus"
    DATABASE = "database"


# Response-level source labels
AMADEUS_RESPONSE_SOURCE = "Amadeus API"
DATABASE_RESPONSE_SOURCE = FlightSource.DATABASE.value
FALLBACK_MESSAGE = "Amadeus API unavailable, showing cached results"

DEFAULT_TRAVEL_CLASS = "ECONOMY"
DEFAULT_AVAILABLE_SEATS = 9
STORED_FLIGHTS_LIST_LIMIT = 50
PRICE_ANALYSIS_LEAD_DAYS = 7
AIRPORT_KEYWORD_MIN_LENGTH = 2


# === Cars ===
class CarType(str, Enum):
    SEDAN = "Sedan"
    SUV = "SUV"
    LUXURY = "Luxury"
    ECONOMY = "Economy"
    VAN = "Van"


class Transmission(str, Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"
