"""
Skyroute Backend - Booking Service
"""

import string
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from app.core.constants import BOOKING_REFERENCE_PREFIX, BookingStatus, PaymentStatus
from app.repositories.booking_repository import BookingRepository, booking_repository
from app.schemas.booking import (
    BookingCreate,
    BookingCreateResponse,
    BookingListResponse,
    BookingResponse,
)


_BASE36_DIGITS = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_booking_reference(now: Optional[datetime] = None) -> str:
    """'BK' followed by the current epoch milliseconds in base 36"""
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    return f"{BOOKING_REFERENCE_PREFIX}{to_base36(millis)}"


class BookingService:
    """Service class for creating and listing bookings"""

    def __init__(self, repository: Optional[BookingRepository] = None):
        self.repository = repository or booking_repository

    async def create_booking(
        self,
        user_id: str,
        data: BookingCreate,
        now: Optional[datetime] = None
    ) -> BookingCreateResponse:
        """
        Record a booking for the authenticated user

        Payment is not processed; bookings are stored as paid and confirmed.

        Args:
            user_id: ID of the authenticated user
            data: Validated booking request

        Returns:
            The stored booking
        """
        request = data.root
        now = now or datetime.now(timezone.utc)

        booking = await self.repository.create_booking({
            "booking_reference": generate_booking_reference(now),
            "user_id": user_id,
            "booking_type": request.booking_type,
            "service_id": request.service_id,
            "customer_info": request.customer_info.model_dump(),
            "booking_details": request.booking_details.model_dump(
                by_alias=True, exclude_none=True, mode="json"
            ),
            "total_amount": request.total_amount,
            "payment_status": PaymentStatus.COMPLETED,
            "booking_status": BookingStatus.CONFIRMED,
            "created_at": now,
        })

        logger.info(f"Booking created: {booking.booking_reference} ({request.booking_type}) for user {user_id}")

        return BookingCreateResponse(
            message="Booking created successfully",
            booking=BookingResponse.model_validate(booking),
        )

    async def list_user_bookings(self, user_id: str) -> BookingListResponse:
        """A user's bookings, newest first"""
        bookings = [
            BookingResponse.model_validate(b)
            for b in await self.repository.list_for_user(user_id)
        ]
        return BookingListResponse(bookings=bookings, count=len(bookings))


booking_service = BookingService()
