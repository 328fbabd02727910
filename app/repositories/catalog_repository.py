"""
Skyroute Backend - Catalog Repositories
Filtered reads over cars, tours and transportation
"""

from datetime import date
from typing import Any, Dict, List, Optional

from app.models.catalog import Car, Tour, Transportation
from app.repositories.base import BaseRepository, contains_ci, same_day


# === Query builders ===

def build_car_query(
    car_type: Optional[str] = None,
    location: Optional[str] = None
) -> Dict[str, Any]:
    query: Dict[str, Any] = {"available": True}
    if car_type:
        query["type"] = car_type
    if location:
        query["location"] = contains_ci(location)
    return query


def build_tour_query(
    destination: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None
) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    if destination:
        query["destination"] = contains_ci(destination)
    if min_price is not None or max_price is not None:
        price: Dict[str, float] = {}
        if min_price is not None:
            price["$gte"] = min_price
        if max_price is not None:
            price["$lte"] = max_price
        query["price"] = price
    return query


def build_transportation_query(
    transport_type: Optional[str] = None,
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    travel_date: Optional[date] = None
) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    if transport_type:
        query["type"] = transport_type
    if origin:
        query["origin"] = contains_ci(origin)
    if destination:
        query["destination"] = contains_ci(destination)
    if travel_date:
        query["date"] = same_day(travel_date)
    return query


# === Repositories ===

class CarRepository(BaseRepository[Car]):
    def __init__(self):
        super().__init__(Car)

    async def search(
        self,
        car_type: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[Car]:
        """Available cars, cheapest daily rate first"""
        query = build_car_query(car_type, location)
        return await self.find(query, sort_field="price_per_day", sort_order=1)


class TourRepository(BaseRepository[Tour]):
    def __init__(self):
        super().__init__(Tour)

    async def search(
        self,
        destination: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None
    ) -> List[Tour]:
        query = build_tour_query(destination, min_price, max_price)
        return await self.find(query, sort_field="price", sort_order=1)


class TransportationRepository(BaseRepository[Transportation]):
    def __init__(self):
        super().__init__(Transportation)

    async def search(
        self,
        transport_type: Optional[str] = None,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        travel_date: Optional[date] = None
    ) -> List[Transportation]:
        query = build_transportation_query(transport_type, origin, destination, travel_date)
        return await self.find(query, sort_field="price", sort_order=1)


# Singleton instances
car_repository = CarRepository()
tour_repository = TourRepository()
transportation_repository = TransportationRepository()
