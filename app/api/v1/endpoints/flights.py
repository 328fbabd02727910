"""
Skyroute Backend - Flight API Endpoints
Live search, stored flights, airport autocomplete and price analysis
"""

from datetime import date
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_flight_service
from app.core.constants import DEFAULT_TRAVEL_CLASS
from app.schemas.flight import (
    AirportSearchResponse,
    FallbackSearchResponse,
    FlightSearchResponse,
    PriceAnalysisResponse,
    StoredFlightListResponse,
)
from app.services.flight_service import FlightSearchService


router = APIRouter()
airports_router = APIRouter()


# ==========================================
# FLIGHTS
# ==========================================

@router.get(
    "/search",
    response_model=Union[FlightSearchResponse, FallbackSearchResponse],
    summary="Search flights",
    description="""
    Search live flight offers between two cities.

    Cities may be given by name (e.g. Lahore, New York) or airport code.
    When the flight provider is unavailable, matching stored flights are
    returned with `source: "database"`.
    """
)
async def search_flights(
    origin: Optional[str] = Query(None, alias="from", description="Origin city or airport code"),
    destination: Optional[str] = Query(None, alias="to", description="Destination city or airport code"),
    departure_date: Optional[date] = Query(None, alias="date", description="Departure date (YYYY-MM-DD), defaults to tomorrow"),
    return_date: Optional[date] = Query(None, alias="returnDate", description="Return date for round trips"),
    adults: int = Query(1, ge=1, le=9),
    travel_class: str = Query(DEFAULT_TRAVEL_CLASS, alias="travelClass"),
    service: FlightSearchService = Depends(get_flight_service)
):
    return await service.search_flights(
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        return_date=return_date,
        adults=adults,
        travel_class=travel_class,
    )


@router.get(
    "",
    response_model=StoredFlightListResponse,
    summary="List stored flights"
)
async def list_flights(
    service: FlightSearchService = Depends(get_flight_service)
):
    return await service.list_flights()


@router.get(
    "/price-analysis",
    response_model=PriceAnalysisResponse,
    summary="Route price analysis",
    description="Historical price quartiles for a route, for a departure one week from today"
)
async def price_analysis(
    origin: Optional[str] = Query(None, alias="from"),
    destination: Optional[str] = Query(None, alias="to"),
    service: FlightSearchService = Depends(get_flight_service)
):
    return await service.price_analysis(origin, destination)


# ==========================================
# AIRPORTS
# ==========================================

@airports_router.get(
    "/search",
    response_model=AirportSearchResponse,
    summary="Airport autocomplete"
)
async def search_airports(
    keyword: Optional[str] = Query(None, description="At least 2 characters"),
    service: FlightSearchService = Depends(get_flight_service)
):
    return await service.search_airports(keyword)
