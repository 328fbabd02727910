"""
Skyroute Backend - Booking API Endpoints
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_booking_service, get_current_user_id
from app.schemas.booking import BookingCreate, BookingCreateResponse, BookingListResponse
from app.services.booking_service import BookingService


router = APIRouter()


@router.post(
    "",
    response_model=BookingCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a booking",
    description="""
    Book a flight, car, tour or transportation service.

    `bookingDetails` is validated against the schema for `bookingType`.
    """
)
async def create_booking(
    data: BookingCreate,
    user_id: str = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service)
):
    return await service.create_booking(user_id, data)


@router.get(
    "/my-bookings",
    response_model=BookingListResponse,
    summary="List my bookings",
    description="Bookings of the authenticated user, newest first"
)
async def my_bookings(
    user_id: str = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service)
):
    return await service.list_user_bookings(user_id)
