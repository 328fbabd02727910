"""
Skyroute Backend - Booking Repository
"""

from typing import Any, Dict, List

from app.models.booking import Booking
from app.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """Repository for Booking document operations"""

    def __init__(self):
        super().__init__(Booking)

    async def create_booking(self, data: Dict[str, Any]) -> Booking:
        return await self.create(Booking(**data))

    async def list_for_user(self, user_id: str) -> List[Booking]:
        """A user's bookings, newest first"""
        return await self.find({"user_id": user_id}, sort_field="created_at", sort_order=-1)


# Singleton instance
booking_repository = BookingRepository()
