"""
Skyroute Backend - Flight Repository
Read access to locally stored flights
"""

from datetime import date
from typing import Any, Dict, List, Optional

from app.core.constants import STORED_FLIGHTS_LIST_LIMIT
from app.models.flight import Flight
from app.repositories.base import BaseRepository, contains_ci, same_day


def build_stored_flight_query(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    departure_date: Optional[date] = None
) -> Dict[str, Any]:
    """
    Match on the city text the user typed, not on resolved codes,
    optionally restricted to one departure day.
    """
    query: Dict[str, Any] = {}
    if origin:
        query["origin"] = contains_ci(origin)
    if destination:
        query["destination"] = contains_ci(destination)
    if departure_date:
        query["departure_date"] = same_day(departure_date)
    return query


class FlightRepository(BaseRepository[Flight]):
    """Repository for stored Flight documents"""

    def __init__(self):
        super().__init__(Flight)

    async def search_stored(
        self,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        departure_date: Optional[date] = None
    ) -> List[Flight]:
        """Stored flights on a route, cheapest first"""
        query = build_stored_flight_query(origin, destination, departure_date)
        return await self.find(query, sort_field="price", sort_order=1)

    async def list_flights(self, limit: int = STORED_FLIGHTS_LIST_LIMIT) -> List[Flight]:
        return await self.find({}, sort_field="_id", sort_order=1, limit=limit)


# Singleton instance
flight_repository = FlightRepository()
