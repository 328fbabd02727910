"""
Skyroute Backend - System Endpoints
Health and flight provider connectivity checks
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_flight_service
from app.core.config import settings
from app.schemas.base import HealthCheckResponse
from app.schemas.flight import ProviderConnectionResponse
from app.services.flight_service import FlightSearchService


router = APIRouter()


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Health check"
)
async def health():
    return HealthCheckResponse(
        message="Server is running",
        amadeus="Configured" if settings.amadeus_configured else "Not Configured",
    )


@router.get(
    "/test-amadeus",
    response_model=ProviderConnectionResponse,
    summary="Test Amadeus connection",
    description="Performs a fixed airport lookup against the flight provider"
)
async def test_amadeus(
    service: FlightSearchService = Depends(get_flight_service)
):
    return await service.test_connection()
