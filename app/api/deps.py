"""
Skyroute Backend - API Dependencies
FastAPI dependencies for authentication and service access
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import AuthenticationError, InvalidTokenError
from app.core.security import TokenData, verify_token
from app.services.auth_service import AuthService, auth_service
from app.services.booking_service import BookingService, booking_service
from app.services.catalog_service import CatalogService, catalog_service
from app.services.flight_service import FlightSearchService


# Bearer scheme for JWT
security = HTTPBearer(auto_error=False)


# === Token Dependencies ===

async def get_token_data(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> TokenData:
    """
    Extract and validate token data from Authorization header.
    Missing token is 401; malformed, tampered or expired token is 403.
    """
    if not credentials:
        raise AuthenticationError("Access token required")

    token_data = verify_token(credentials.credentials)
    if not token_data:
        raise InvalidTokenError()
    return token_data


async def get_current_user_id(
    token_data: TokenData = Depends(get_token_data)
) -> str:
    return token_data.user_id


# === Service Dependencies ===

def get_flight_service(request: Request) -> FlightSearchService:
    """Flight service built at startup around the shared Amadeus client"""
    return request.app.state.flight_service


def get_auth_service() -> AuthService:
    return auth_service


def get_catalog_service() -> CatalogService:
    return catalog_service


def get_booking_service() -> BookingService:
    return booking_service
