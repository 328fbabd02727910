"""
Skyroute Backend - Custom Exceptions
Centralized exception classes for consistent error handling
"""

from typing import Any, Dict, List, Optional


class AppException(Exception):
    """
    Base application exception.
    All custom exceptions should inherit from this.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# === Client Input Errors ===

class ClientInputError(AppException):
    """Missing or invalid request fields"""

    def __init__(
        self,
        message: str = "Invalid request",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if field:
            details = {"field": field, **(details or {})}
        super().__init__(
            message=message,
            status_code=400,
            error_code="CLIENT_INPUT_ERROR",
            details=details
        )


class UnknownCityError(ClientInputError):
    """City text could not be resolved to a location code"""

    def __init__(self, unresolved: List[str], supported_cities: List[str]):
        names = ", ".join(unresolved)
        super().__init__(
            message=f"Unknown city: {names}. Please use city name or IATA code.",
            details={
                "unresolved": unresolved,
                "supportedCities": supported_cities,
            }
        )
        self.error_code = "UNKNOWN_CITY"
        self.unresolved = unresolved


class DuplicateEmailError(ClientInputError):
    """Email already registered"""

    def __init__(self, email: str):
        super().__init__("Email already registered", field="email")
        self.error_code = "EMAIL_EXISTS"
        self.email = email


# === Authentication Errors ===

class AuthenticationError(AppException):
    """Authentication failed or credentials missing"""

    def __init__(
        self,
        message: str = "Access token required",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details
        )


class InvalidCredentialsError(AppException):
    """Invalid login credentials"""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="INVALID_CREDENTIALS"
        )


class InvalidTokenError(AppException):
    """Token is malformed, tampered with or expired"""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(
            message=message,
            status_code=403,
            error_code="INVALID_TOKEN"
        )


# === Not Found Errors ===

class NotFoundError(AppException):
    """Resource not found"""

    def __init__(
        self,
        resource: str = "Resource",
        identifier: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f"{resource} not found"
        if identifier:
            details = {"id": identifier, **(details or {})}
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details
        )


class CarNotFoundError(NotFoundError):
    """Car not found"""

    def __init__(self, identifier: Optional[str] = None):
        super().__init__("Car", identifier)


class TourNotFoundError(NotFoundError):
    """Tour not found"""

    def __init__(self, identifier: Optional[str] = None):
        super().__init__("Tour", identifier)


# === External Service Errors ===

class UpstreamProviderError(AppException):
    """Third-party provider call failed"""

    def __init__(
        self,
        service: str = "Amadeus",
        message: str = "External service error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"{service}: {message}",
            status_code=500,
            error_code="UPSTREAM_PROVIDER_ERROR",
            details=details
        )
        self.service = service


class OfferTranslationError(Exception):
    """A single provider offer lacks data required for translation"""

    def __init__(self, offer_id: Optional[str], reason: str):
        self.offer_id = offer_id
        self.reason = reason
        super().__init__(f"Offer {offer_id}: {reason}")


# === Database Errors ===

class PersistenceError(AppException):
    """Storage layer failure"""

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            error_code="DATABASE_ERROR",
            details=details
        )
