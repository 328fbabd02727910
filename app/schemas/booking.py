"""
Skyroute Backend - Booking Schemas
Booking requests are a tagged union on `bookingType`; each service type
has its own details schema, validated before anything is stored.
"""

from datetime import date, datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel

from app.core.constants import BookingStatus, BookingType, PaymentStatus
from app.schemas.base import CamelSchema, DocumentSchema


class CustomerInfo(CamelSchema):
    """Contact snapshot taken at booking time"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


# ================================================================
# PER-TYPE DETAILS
# ================================================================

class BookingDetails(CamelSchema):
    """Known keys are type-checked; anything else the client sends is kept"""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    notes: Optional[str] = None


class FlightBookingDetails(BookingDetails):
    passengers: int = Field(1, ge=1, le=9)
    travel_class: Optional[str] = None
    departure_date: Optional[str] = None
    origin: Optional[str] = Field(None, alias="from")
    destination: Optional[str] = Field(None, alias="to")
    flight_number: Optional[str] = None
    airline: Optional[str] = None


class CarBookingDetails(BookingDetails):
    pickup_date: Optional[date] = None
    return_date: Optional[date] = None
    pickup_location: Optional[str] = None
    days: Optional[int] = Field(None, ge=1)


class TourBookingDetails(BookingDetails):
    travelers: int = Field(1, ge=1)
    start_date: Optional[date] = None


class TransportationBookingDetails(BookingDetails):
    passengers: int = Field(1, ge=1)
    travel_date: Optional[date] = None
    seat_numbers: List[str] = Field(default_factory=list)


# ================================================================
# REQUESTS
# ================================================================

class _BookingCreateBase(CamelSchema):
    service_id: str = Field(..., min_length=1)
    customer_info: CustomerInfo = Field(default_factory=CustomerInfo)
    total_amount: float = Field(..., ge=0)


class FlightBookingCreate(_BookingCreateBase):
    booking_type: Literal["flight"]
    booking_details: FlightBookingDetails = Field(default_factory=FlightBookingDetails)


class CarBookingCreate(_BookingCreateBase):
    booking_type: Literal["car"]
    booking_details: CarBookingDetails = Field(default_factory=CarBookingDetails)


class TourBookingCreate(_BookingCreateBase):
    booking_type: Literal["tour"]
    booking_details: TourBookingDetails = Field(default_factory=TourBookingDetails)


class TransportationBookingCreate(_BookingCreateBase):
    booking_type: Literal["transportation"]
    booking_details: TransportationBookingDetails = Field(
        default_factory=TransportationBookingDetails
    )


AnyBookingCreate = Annotated[
    Union[
        FlightBookingCreate,
        CarBookingCreate,
        TourBookingCreate,
        TransportationBookingCreate,
    ],
    Field(discriminator="booking_type"),
]


class BookingCreate(RootModel[AnyBookingCreate]):
    """Booking request body, dispatched on bookingType"""


# ================================================================
# RESPONSES
# ================================================================

class BookingResponse(DocumentSchema):
    booking_reference: str
    user_id: str
    booking_type: BookingType
    service_id: str
    customer_info: CustomerInfo
    booking_details: Dict[str, Any] = Field(default_factory=dict)
    total_amount: float
    payment_status: PaymentStatus
    booking_status: BookingStatus
    created_at: Optional[datetime] = None


class BookingCreateResponse(CamelSchema):
    message: str
    booking: BookingResponse


class BookingListResponse(CamelSchema):
    bookings: List[BookingResponse]
    count: int
