"""
Skyroute Backend - Tour Package API Endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from app.api.deps import get_catalog_service
from app.schemas.catalog import TourListResponse, TourResponse
from app.services.catalog_service import CatalogService


router = APIRouter()


@router.get(
    "",
    response_model=TourListResponse,
    summary="List tour packages"
)
async def list_tours(
    destination: Optional[str] = Query(None, description="Destination (partial match)"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    service: CatalogService = Depends(get_catalog_service)
):
    return await service.list_tours(destination, min_price, max_price)


@router.get(
    "/{tour_id}",
    response_model=TourResponse,
    summary="Get tour by ID"
)
async def get_tour(
    tour_id: str = Path(..., description="Tour ID"),
    service: CatalogService = Depends(get_catalog_service)
):
    return await service.get_tour(tour_id)
