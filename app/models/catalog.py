"""
Skyroute Backend - Catalog Document Models
Car rentals, tour packages and ground transportation
"""

from datetime import datetime
from typing import List, Optional

from beanie import Document
from pydantic import Field

from app.core.constants import CarType, FuelType, Transmission


class Car(Document):
    """Rental car"""

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

    class Settings:
        name = "cars"


class Tour(Document):
    """Tour package"""

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

    class Settings:
        name = "tours"


class Transportation(Document):
    """Bus, coach or train service on a fixed route"""

    type: str
    route: str
    origin: Optional[str] = None
    destination: Optional[str] = None
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    price: Optional[float] = None
    seats: Optional[int] = None
    available_seats: Optional[int] = None
    amenities: List[str] = Field(default_factory=list)
    date: Optional[datetime] = None

    class Settings:
        name = "transportation"
