"""
Skyroute Backend - Catalog Service
Read-only listings for cars, tours, transportation and cities
"""

from datetime import date
from typing import Optional

from app.core.exceptions import CarNotFoundError, TourNotFoundError
from app.data.cities import city_catalog
from app.repositories.catalog_repository import (
    CarRepository,
    TourRepository,
    TransportationRepository,
    car_repository,
    tour_repository,
    transportation_repository,
)
from app.schemas.catalog import (
    CarListResponse,
    CarResponse,
    CityListResponse,
    CityResponse,
    TourListResponse,
    TourResponse,
    TransportationListResponse,
    TransportationResponse,
)


class CatalogService:
    """Service class for browsing bookable inventory"""

    def __init__(
        self,
        cars: Optional[CarRepository] = None,
        tours: Optional[TourRepository] = None,
        transportation: Optional[TransportationRepository] = None
    ):
        self.cars = cars or car_repository
        self.tours = tours or tour_repository
        self.transportation = transportation or transportation_repository

    # === Cars ===

    async def list_cars(
        self,
        car_type: Optional[str] = None,
        location: Optional[str] = None
    ) -> CarListResponse:
        cars = [CarResponse.model_validate(c) for c in await self.cars.search(car_type, location)]
        return CarListResponse(cars=cars, count=len(cars))

    async def get_car(self, car_id: str) -> CarResponse:
        """Raises CarNotFoundError for unknown or malformed ids"""
        car = await self.cars.get_by_id(car_id)
        if not car:
            raise CarNotFoundError(car_id)
        return CarResponse.model_validate(car)

    # === Tours ===

    async def list_tours(
        self,
        destination: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None
    ) -> TourListResponse:
        found = await self.tours.search(destination, min_price, max_price)
        tours = [TourResponse.model_validate(t) for t in found]
        return TourListResponse(tours=tours, count=len(tours))

    async def get_tour(self, tour_id: str) -> TourResponse:
        tour = await self.tours.get_by_id(tour_id)
        if not tour:
            raise TourNotFoundError(tour_id)
        return TourResponse.model_validate(tour)

    # === Transportation ===

    async def list_transportation(
        self,
        transport_type: Optional[str] = None,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        travel_date: Optional[date] = None
    ) -> TransportationListResponse:
        found = await self.transportation.search(transport_type, origin, destination, travel_date)
        items = [TransportationResponse.model_validate(t) for t in found]
        return TransportationListResponse(transportation=items, count=len(items))

    # === Cities ===

    def list_cities(self) -> CityListResponse:
        cities = [CityResponse(**c) for c in city_catalog()]
        return CityListResponse(cities=cities, count=len(cities))


catalog_service = CatalogService()
