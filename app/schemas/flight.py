"""
Skyroute Backend - Flight Schemas
Provider-sourced flight records, stored flights and search responses
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from app.core.constants import FlightClass, FlightSource
from app.schemas.base import CamelSchema, DocumentSchema


# ================================================================
# PROVIDER-SOURCED FLIGHTS
# ================================================================

class FlightSegmentRecord(CamelSchema):
    """One leg of a provider itinerary, as returned by the provider"""
    departure: Dict[str, Any]
    arrival: Dict[str, Any]
    carrier_code: str
    flight_number: str
    aircraft: Optional[str] = None


class FlightRecord(CamelSchema):
    """Flight offer translated into the internal flight shape (never persisted)"""
    id: str = Field(..., alias="_id")
    flight_number: str
    airline: str
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    from_code: str
    to_code: str
    departure_time: str
    arrival_time: str
    departure_date: str
    duration: str
    price: int
    currency: str
    stops: str
    available_seats: int
    cabin_class: str = Field(..., alias="class")
    booking_class: str
    source: FlightSource = FlightSource.AMADEUS
    segments: List[FlightSegmentRecord] = Field(default_factory=list)


# ================================================================
# STORED FLIGHTS
# ================================================================

class StoredFlightResponse(DocumentSchema):
    """Flight read from the local flights collection"""
    flight_number: str
    airline: str
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    departure_date: Optional[datetime] = None
    duration: Optional[str] = None
    price: Optional[float] = None
    stops: str = "Non-stop"
    total_seats: Optional[int] = None
    available_seats: Optional[int] = None
    flight_class: FlightClass = Field(FlightClass.ECONOMY, alias="class")
    status: str = "scheduled"
    source: FlightSource = FlightSource.DATABASE


class StoredFlightListResponse(CamelSchema):
    flights: List[StoredFlightResponse]
    source: str = FlightSource.DATABASE.value


# ================================================================
# SEARCH
# ================================================================

class FlightSearchParams(CamelSchema):
    """Resolved parameters echoed back with provider results"""
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    date: str
    return_date: Optional[str] = None
    adults: int = 1
    travel_class: str = "ECONOMY"


class FlightSearchResponse(CamelSchema):
    """Search answered by the provider"""
    flights: List[FlightRecord]
    count: int
    source: str
    search_params: FlightSearchParams


class FallbackSearchResponse(CamelSchema):
    """Search answered from stored flights because the provider failed"""
    flights: List[StoredFlightResponse]
    count: int
    source: str
    message: str


# ================================================================
# PROVIDER PROXIES
# ================================================================

class AirportLocation(CamelSchema):
    name: Optional[str] = None
    iata_code: Optional[str] = None
    city_name: Optional[str] = None
    country_name: Optional[str] = None
    type: Optional[str] = None


class AirportSearchResponse(CamelSchema):
    locations: List[AirportLocation]
    count: int


class PriceAnalysisResponse(CamelSchema):
    price_metrics: List[Dict[str, Any]]


class ProviderConnectionResponse(CamelSchema):
    status: str
    test_result: Optional[Dict[str, Any]] = None
    message: str
