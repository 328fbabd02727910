"""
Skyroute Backend - Car Rental API Endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from app.api.deps import get_catalog_service
from app.schemas.catalog import CarListResponse, CarResponse
from app.services.catalog_service import CatalogService


router = APIRouter()


@router.get(
    "",
    response_model=CarListResponse,
    summary="List available cars",
    description="Available cars, cheapest daily rate first"
)
async def list_cars(
    car_type: Optional[str] = Query(None, alias="type", description="Sedan, SUV, Luxury, Economy or Van"),
    location: Optional[str] = Query(None, description="Pickup location (partial match)"),
    service: CatalogService = Depends(get_catalog_service)
):
    return await service.list_cars(car_type, location)


@router.get(
    "/{car_id}",
    response_model=CarResponse,
    summary="Get car by ID"
)
async def get_car(
    car_id: str = Path(..., description="Car ID"),
    service: CatalogService = Depends(get_catalog_service)
):
    return await service.get_car(car_id)
