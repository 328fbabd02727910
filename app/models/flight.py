"""
Skyroute Backend - Stored Flight Document Model
Locally maintained flights, used when the live provider is unavailable
"""

from datetime import datetime
from typing import Optional

import pymongo
from beanie import Document
from pydantic import Field

from app.core.constants import FlightClass


class Flight(Document):
    """Flight record kept in the local database"""

    flight_number: str
    airline: str
    origin: str
    destination: str
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    departure_date: Optional[datetime] = None
    duration: Optional[str] = None
    price: Optional[float] = None
    stops: str = "Non-stop"
    total_seats: Optional[int] = None
    available_seats: Optional[int] = None
    flight_class: FlightClass = FlightClass.ECONOMY
    status: str = "scheduled"

    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "flights"
        indexes = [
            [("origin", pymongo.ASCENDING), ("destination", pymongo.ASCENDING)],
            [("price", pymongo.ASCENDING)],
        ]
