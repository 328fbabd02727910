"""
Skyroute Backend - Catalog Schemas
Response schemas for cars, tours, transportation and supported cities
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.core.constants import CarType, FuelType, Transmission
from app.schemas.base import CamelSchema, DocumentSchema


# ================================================================
# CARS
# ================================================================

class CarResponse(DocumentSchema):
    car_name: str
    brand: str
    model: Optional[str] = None
    year: Optional[int] = None
    type: CarType = CarType.SEDAN
    seats: Optional[int] = None
    transmission: Transmission = Transmission.AUTOMATIC
    fuel_type: FuelType = FuelType.PETROL
    price_per_day: Optional[float] = None
    location: Optional[str] = None
    available: bool = True
    features: List[str] = Field(default_factory=list)
    image: Optional[str] = None


class CarListResponse(CamelSchema):
    cars: List[CarResponse]
    count: int


# ================================================================
# TOURS
# ================================================================

class TourResponse(DocumentSchema):
    title: str
    destination: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    includes: List[str] = Field(default_factory=list)
    excludes: List[str] = Field(default_factory=list)
    itinerary: List[str] = Field(default_factory=list)
    max_people: Optional[int] = None
    available_slots: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    image: Optional[str] = None
    rating: float = 4.5


class TourListResponse(CamelSchema):
    tours: List[TourResponse]
    count: int


# ================================================================
# TRANSPORTATION
# ================================================================

class TransportationResponse(DocumentSchema):
    type: str
    route: str
    origin: Optional[str] = Field(None, alias="from")
    destination: Optional[str] = Field(None, alias="to")
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    price: Optional[float] = None
    seats: Optional[int] = None
    available_seats: Optional[int] = None
    amenities: List[str] = Field(default_factory=list)
    date: Optional[datetime] = None


class TransportationListResponse(CamelSchema):
    transportation: List[TransportationResponse]
    count: int


# ================================================================
# CITIES
# ================================================================

class CityResponse(CamelSchema):
    name: str
    code: str


class CityListResponse(CamelSchema):
    cities: List[CityResponse]
    count: int
