"""
Skyroute Backend - Amadeus Self-Service Integration
Flight offers, airport/city lookup and itinerary price metrics

Credentials: https://developers.amadeus.com/ (test environment is free)
"""

from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger
from pydantic import BaseModel, Field


class ProviderResult(BaseModel):
    """Outcome of one provider call. Failures are values, not exceptions."""

    success: bool
    data: Any = None
    dictionaries: Dict[str, Any] = Field(default_factory=dict)
    error: Optional[str] = None
    status_code: Optional[int] = None
    details: Any = None

    @classmethod
    def ok(cls, payload: Dict[str, Any]) -> "ProviderResult":
        return cls(
            success=True,
            data=payload.get("data"),
            dictionaries=payload.get("dictionaries") or {},
            status_code=200,
        )

    @classmethod
    def fail(
        cls,
        error: str,
        status_code: Optional[int] = None,
        details: Any = None
    ) -> "ProviderResult":
        return cls(success=False, error=error, status_code=status_code, details=details)


class AmadeusClient:
    """
    Amadeus Self-Service API client.

    One instance is created at startup and shared by all requests; the
    only state it keeps is the OAuth2 access token and its expiry.
    Every public method returns a ProviderResult and never raises for
    transport, authentication or API errors.
    """

    TOKEN_ENDPOINT = "/v1/security/oauth2/token"
    FLIGHT_OFFERS_ENDPOINT = "/v2/shopping/flight-offers"
    LOCATIONS_ENDPOINT = "/v1/reference-data/locations"
    PRICE_METRICS_ENDPOINT = "/v1/analytics/itinerary-price-metrics"

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        base_url: str = "https://test.api.amadeus.com",
        timeout: float = 15.0
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._access_token: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None

    @classmethod
    def from_settings(cls, settings) -> "AmadeusClient":
        return cls(
            client_id=settings.AMADEUS_CLIENT_ID,
            client_secret=settings.AMADEUS_CLIENT_SECRET,
            base_url=settings.AMADEUS_BASE_URL,
            timeout=settings.AMADEUS_TIMEOUT_SECONDS,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def is_configured(self) -> bool:
        """Check if Amadeus credentials are configured"""
        return bool(self.client_id and self.client_secret)

    # ================================================================
    # AUTHENTICATION
    # ================================================================

    def _token_valid(self) -> bool:
        return bool(
            self._access_token
            and self._token_expires_at
            and datetime.utcnow() < self._token_expires_at
        )

    async def _get_access_token(self) -> Optional[str]:
        """Client-credentials grant; token is reused until 60s before expiry"""
        if self._token_valid():
            return self._access_token

        response = await self.client.post(
            self.TOKEN_ENDPOINT,
            data={
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"}
        )

        if response.status_code != 200:
            logger.error(f"Amadeus token request failed: {response.status_code} - {response.text}")
            return None

        data = response.json()
        self._access_token = data["access_token"]
        expires_in = int(data.get("expires_in", 1799)) - 60
        self._token_expires_at = datetime.utcnow() + timedelta(seconds=expires_in)
        logger.info("Amadeus token refreshed")
        return self._access_token

    def _clear_token(self) -> None:
        self._access_token = None
        self._token_expires_at = None

    # ================================================================
    # REQUESTS
    # ================================================================

    @staticmethod
    def _error_details(response: httpx.Response) -> Any:
        try:
            return response.json().get("errors", response.text)
        except ValueError:
            return response.text

    async def _request(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> ProviderResult:
        """Authenticated GET against the Amadeus API"""
        if not self.is_configured():
            return ProviderResult.fail(
                "Amadeus credentials not configured. Set AMADEUS_CLIENT_ID and AMADEUS_CLIENT_SECRET."
            )

        try:
            token = await self._get_access_token()
            if not token:
                return ProviderResult.fail("Amadeus authentication failed", status_code=401)

            response = await self.client.get(
                endpoint,
                params=params or {},
                headers={"Authorization": f"Bearer {token}"}
            )

            if response.status_code == 401:
                # Token revoked before its advertised expiry
                self._clear_token()
                token = await self._get_access_token()
                if not token:
                    return ProviderResult.fail("Amadeus authentication failed", status_code=401)
                response = await self.client.get(
                    endpoint,
                    params=params or {},
                    headers={"Authorization": f"Bearer {token}"}
                )

            if response.status_code == 200:
                payload = response.json()
                if not isinstance(payload, dict):
                    return ProviderResult.fail(f"Unexpected Amadeus payload: {type(payload).__name__}")
                return ProviderResult.ok(payload)

            if response.status_code == 429:
                return ProviderResult.fail(
                    "Rate limit exceeded",
                    status_code=429,
                    details=self._error_details(response)
                )

            logger.error(f"Amadeus error: {response.status_code} - {response.text}")
            return ProviderResult.fail(
                f"API error: {response.status_code}",
                status_code=response.status_code,
                details=self._error_details(response)
            )

        except httpx.TimeoutException:
            logger.error(f"Amadeus request timeout: {endpoint}")
            return ProviderResult.fail("Request timeout")
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"Amadeus request failed: {endpoint}: {e}")
            return ProviderResult.fail(str(e))

    # ================================================================
    # FLIGHT OFFERS
    # ================================================================

    async def search_flight_offers(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        adults: int = 1,
        travel_class: str = "ECONOMY",
        currency: str = "PKR",
        max_results: int = 50,
        return_date: Optional[date] = None
    ) -> ProviderResult:
        """
        Search flight offers.

        Args:
            origin: Origin IATA code
            destination: Destination IATA code
            departure_date: Departure date
            adults: Number of adult travelers
            travel_class: ECONOMY, PREMIUM_ECONOMY, BUSINESS or FIRST
            currency: Currency prices are quoted in
            max_results: Cap on returned offers
            return_date: Return date for round trips

        Returns:
            ProviderResult whose data is the list of raw offers and whose
            dictionaries carry the carrier-code to name mapping
        """
        params = {
            "originLocationCode": origin,
            "destinationLocationCode": destination,
            "departureDate": departure_date.isoformat(),
            "adults": adults,
            "travelClass": travel_class,
            "currencyCode": currency,
            "max": max_results,
        }
        if return_date:
            params["returnDate"] = return_date.isoformat()

        return await self._request(self.FLIGHT_OFFERS_ENDPOINT, params)

    # ================================================================
    # LOCATIONS
    # ================================================================

    async def search_locations(
        self,
        keyword: str,
        sub_type: str = "AIRPORT,CITY"
    ) -> ProviderResult:
        """Keyword search for airports and cities"""
        return await self._request(
            self.LOCATIONS_ENDPOINT,
            {"keyword": keyword, "subType": sub_type}
        )

    # ================================================================
    # ANALYTICS
    # ================================================================

    async def itinerary_price_metrics(
        self,
        origin: str,
        destination: str,
        departure_date: date
    ) -> ProviderResult:
        """Historical price quartiles for a route and date"""
        return await self._request(
            self.PRICE_METRICS_ENDPOINT,
            {
                "originIataCode": origin,
                "destinationIataCode": destination,
                "departureDate": departure_date.isoformat(),
            }
        )


def carrier_names(result: ProviderResult) -> Dict[str, str]:
    """Carrier-code dictionary from a flight-offers result"""
    return result.dictionaries.get("carriers") or {}


def location_summaries(locations: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce raw location entries to the fields the frontend uses"""
    return [
        {
            "name": loc.get("name"),
            "iataCode": loc.get("iataCode"),
            "cityName": (loc.get("address") or {}).get("cityName"),
            "countryName": (loc.get("address") or {}).get("countryName"),
            "type": loc.get("subType"),
        }
        for loc in locations
    ]
