"""
Skyroute Backend - Supported Cities Endpoint
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_catalog_service
from app.schemas.catalog import CityListResponse
from app.services.catalog_service import CatalogService


router = APIRouter()


@router.get(
    "",
    response_model=CityListResponse,
    summary="List supported cities",
    description="Cities that flight search accepts by name, with their airport codes"
)
async def list_cities(
    service: CatalogService = Depends(get_catalog_service)
):
    return service.list_cities()
