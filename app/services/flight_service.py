"""
Skyroute Backend - Flight Search Service
Live flight search through Amadeus with a stored-flights fallback
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from loguru import logger

from app.core.config import settings
from app.core.constants import (
    AIRPORT_KEYWORD_MIN_LENGTH,
    AMADEUS_RESPONSE_SOURCE,
    DATABASE_RESPONSE_SOURCE,
    DEFAULT_TRAVEL_CLASS,
    FALLBACK_MESSAGE,
    PRICE_ANALYSIS_LEAD_DAYS,
)
from app.core.exceptions import (
    ClientInputError,
    UnknownCityError,
    UpstreamProviderError,
)
from app.data.cities import get_iata_code, supported_cities
from app.repositories.flight_repository import FlightRepository, flight_repository
from app.schemas.flight import (
    AirportLocation,
    AirportSearchResponse,
    FallbackSearchResponse,
    FlightSearchParams,
    FlightSearchResponse,
    PriceAnalysisResponse,
    ProviderConnectionResponse,
    StoredFlightListResponse,
    StoredFlightResponse,
)
from app.services.flight_mapper import translate_offers
from integrations.travel_apis.amadeus import (
    AmadeusClient,
    ProviderResult,
    carrier_names,
    location_summaries,
)


SearchResult = Union[FlightSearchResponse, FallbackSearchResponse]


class FlightSearchService:
    """
    Flight search orchestration.

    A request moves through input validation, city resolution and one
    provider call. Provider failures of any kind are answered from the
    stored flights collection instead of being surfaced to the client.
    """

    def __init__(
        self,
        amadeus_client: AmadeusClient,
        repository: Optional[FlightRepository] = None
    ):
        self.amadeus = amadeus_client
        self.repository = repository or flight_repository

    # ================================================================
    # SEARCH
    # ================================================================

    async def search_flights(
        self,
        origin: Optional[str],
        destination: Optional[str],
        departure_date: Optional[date] = None,
        return_date: Optional[date] = None,
        adults: int = 1,
        travel_class: str = DEFAULT_TRAVEL_CLASS,
        now: Optional[datetime] = None
    ) -> SearchResult:
        """
        Search flights between two cities.

        Args:
            origin: City name or airport code the user typed
            destination: City name or airport code the user typed
            departure_date: Travel date, defaults to 24 hours from now
            return_date: Return date, passed through to the provider
            adults: Number of adult travelers
            travel_class: Cabin class, case-insensitive
            now: Request time, for deterministic date defaults

        Returns:
            Provider results, or stored flights when the provider failed

        Raises:
            ClientInputError: If origin or destination is missing
            UnknownCityError: If a city cannot be resolved to a code
            PersistenceError: If the fallback query fails
        """
        missing = [
            name for name, value in (("from", origin), ("to", destination))
            if not value or not value.strip()
        ]
        if missing:
            raise ClientInputError(
                f"Missing required parameter(s): {', '.join(missing)}",
                details={"missing": missing}
            )

        from_code = get_iata_code(origin)
        to_code = get_iata_code(destination)

        unresolved = [
            text for text, code in ((origin, from_code), (destination, to_code))
            if code is None
        ]
        if unresolved:
            raise UnknownCityError(unresolved, supported_cities())

        now = now or datetime.utcnow()
        search_date = departure_date or (now + timedelta(hours=24)).date()
        cabin = (travel_class or DEFAULT_TRAVEL_CLASS).upper()

        logger.info(f"Searching flights {from_code} -> {to_code} on {search_date.isoformat()}")

        result = await self.amadeus.search_flight_offers(
            origin=from_code,
            destination=to_code,
            departure_date=search_date,
            adults=adults,
            travel_class=cabin,
            currency=settings.FLIGHT_SEARCH_CURRENCY,
            max_results=settings.FLIGHT_SEARCH_MAX_RESULTS,
            return_date=return_date,
        )

        if not result.success:
            logger.warning(f"Amadeus flight search failed ({result.error}), using stored flights")
            return await self._search_stored(origin, destination, departure_date)

        offers = result.data if result.data is not None else []
        if not isinstance(offers, list):
            logger.warning(
                f"Amadeus returned {type(offers).__name__} instead of an offer list, using stored flights"
            )
            return await self._search_stored(origin, destination, departure_date)

        flights = translate_offers(
            offers,
            requested_from=origin,
            requested_to=destination,
            carriers=carrier_names(result),
            from_code=from_code,
            to_code=to_code,
        )
        logger.info(f"Found {len(flights)} flights")

        return FlightSearchResponse(
            flights=flights,
            count=len(flights),
            source=AMADEUS_RESPONSE_SOURCE,
            search_params=FlightSearchParams(
                origin=from_code,
                destination=to_code,
                date=search_date.isoformat(),
                return_date=return_date.isoformat() if return_date else None,
                adults=adults,
                travel_class=cabin,
            ),
        )

    async def _search_stored(
        self,
        origin: str,
        destination: str,
        departure_date: Optional[date]
    ) -> FallbackSearchResponse:
        """Match stored flights on the raw request text"""
        stored = await self.repository.search_stored(origin, destination, departure_date)
        flights = [StoredFlightResponse.model_validate(f) for f in stored]
        return FallbackSearchResponse(
            flights=flights,
            count=len(flights),
            source=DATABASE_RESPONSE_SOURCE,
            message=FALLBACK_MESSAGE,
        )

    async def list_flights(self) -> StoredFlightListResponse:
        stored = await self.repository.list_flights()
        return StoredFlightListResponse(
            flights=[StoredFlightResponse.model_validate(f) for f in stored],
            source=DATABASE_RESPONSE_SOURCE,
        )

    # ================================================================
    # PROVIDER PROXIES
    # ================================================================

    @staticmethod
    def _raise_for_failure(result: ProviderResult) -> None:
        if not result.success:
            raise UpstreamProviderError(
                message=result.error or "Request failed",
                details={"statusCode": result.status_code} if result.status_code else None
            )

    async def search_airports(self, keyword: Optional[str]) -> AirportSearchResponse:
        """
        Airport and city autocomplete.

        Raises:
            ClientInputError: If the keyword is shorter than two characters
            UpstreamProviderError: If the provider call fails
        """
        keyword = (keyword or "").strip()
        if len(keyword) < AIRPORT_KEYWORD_MIN_LENGTH:
            raise ClientInputError(
                f"Keyword must be at least {AIRPORT_KEYWORD_MIN_LENGTH} characters",
                field="keyword"
            )

        result = await self.amadeus.search_locations(keyword, sub_type="AIRPORT,CITY")
        self._raise_for_failure(result)

        locations = [
            AirportLocation.model_validate(loc)
            for loc in location_summaries(result.data or [])
        ]
        return AirportSearchResponse(locations=locations, count=len(locations))

    async def price_analysis(
        self,
        origin: Optional[str],
        destination: Optional[str],
        now: Optional[datetime] = None
    ) -> PriceAnalysisResponse:
        """Price quartiles for a route, one week out"""
        from_code = get_iata_code(origin)
        to_code = get_iata_code(destination)
        if not from_code or not to_code:
            raise ClientInputError("Invalid city names")

        now = now or datetime.utcnow()
        departure = (now + timedelta(days=PRICE_ANALYSIS_LEAD_DAYS)).date()

        result = await self.amadeus.itinerary_price_metrics(from_code, to_code, departure)
        self._raise_for_failure(result)

        return PriceAnalysisResponse(price_metrics=result.data or [])

    async def test_connection(self) -> ProviderConnectionResponse:
        """Probe the provider with a fixed location lookup"""
        result = await self.amadeus.search_locations("Lahore", sub_type="AIRPORT")
        if not result.success:
            logger.error(f"Amadeus connection test failed: {result.error}")
            raise UpstreamProviderError(
                message=result.error or "Connection failed",
                details={
                    "hint": "Check AMADEUS_CLIENT_ID and AMADEUS_CLIENT_SECRET in your .env file",
                }
            )

        locations = result.data or []
        return ProviderConnectionResponse(
            status="Amadeus API Working!",
            test_result=locations[0] if locations else None,
            message="Amadeus integration successful",
        )
