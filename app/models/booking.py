"""
Skyroute Backend - Booking Document Model
"""

from datetime import datetime
from typing import Any, Dict, Optional

import pymongo
from beanie import Document, Indexed
from pydantic import BaseModel, Field

from app.core.constants import BookingStatus, BookingType, PaymentStatus


class CustomerSnapshot(BaseModel):
    """Customer contact details as given at booking time"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Booking(Document):
    """
    Booking of a flight, car, tour or transportation service.
    Users and services are referenced by id only.
    """

    booking_reference: Indexed(str, unique=True)
    user_id: Indexed(str)
    booking_type: BookingType
    service_id: str
    customer_info: CustomerSnapshot = Field(default_factory=CustomerSnapshot)
    booking_details: Dict[str, Any] = Field(default_factory=dict)
    total_amount: float = 0.0
    payment_status: PaymentStatus = PaymentStatus.PENDING
    booking_status: BookingStatus = BookingStatus.CONFIRMED
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "bookings"
        indexes = [
            [("user_id", pymongo.ASCENDING), ("created_at", pymongo.DESCENDING)],
        ]
