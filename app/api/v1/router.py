"""
Skyroute Backend - API V1 Router
Main router for API version 1 endpoints
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    auth,
    bookings,
    cars,
    cities,
    flights,
    system,
    tours,
    transportation,
)


api_router = APIRouter()


# === Auth Routes ===
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"]
)


# === Flight Routes ===
api_router.include_router(
    flights.router,
    prefix="/flights",
    tags=["Flights"]
)

api_router.include_router(
    flights.airports_router,
    prefix="/airports",
    tags=["Flights"]
)


# === Car Rental Routes ===
api_router.include_router(
    cars.router,
    prefix="/cars",
    tags=["Cars"]
)


# === Tour Routes ===
api_router.include_router(
    tours.router,
    prefix="/tours",
    tags=["Tours"]
)


# === Transportation Routes ===
api_router.include_router(
    transportation.router,
    prefix="/transportation",
    tags=["Transportation"]
)


# === City Routes ===
api_router.include_router(
    cities.router,
    prefix="/cities",
    tags=["Cities"]
)


# === Booking Routes ===
api_router.include_router(
    bookings.router,
    prefix="/bookings",
    tags=["Bookings"]
)


# === System Routes ===
api_router.include_router(
    system.router,
    tags=["System"]
)
