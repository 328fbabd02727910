"""
Skyroute Backend - Ground Transportation API Endpoints
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_catalog_service
from app.schemas.catalog import TransportationListResponse
from app.services.catalog_service import CatalogService


router = APIRouter()


@router.get(
    "",
    response_model=TransportationListResponse,
    summary="List transportation",
    description="Buses, trains and other ground services, cheapest first"
)
async def list_transportation(
    transport_type: Optional[str] = Query(None, alias="type"),
    origin: Optional[str] = Query(None, alias="from"),
    destination: Optional[str] = Query(None, alias="to"),
    travel_date: Optional[date] = Query(None, alias="date"),
    service: CatalogService = Depends(get_catalog_service)
):
    return await service.list_transportation(transport_type, origin, destination, travel_date)
