"""
Skyroute Backend - Main Application
FastAPI application entry point with comprehensive setup
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.database import DatabaseManager, close_database, init_database
from app.core.exceptions import AppException
from app.core.logging import setup_logging
from app.schemas.base import ErrorResponse
from app.services.flight_service import FlightSearchService
from integrations.travel_apis.amadeus import AmadeusClient


# === Lifespan Context Manager ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events"""
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} API...")

    await init_database()

    # One provider client per process, shared by every request
    amadeus = AmadeusClient.from_settings(settings)
    app.state.amadeus_client = amadeus
    app.state.flight_service = FlightSearchService(amadeus)

    if not amadeus.is_configured():
        logger.warning("Amadeus credentials missing, flight search will use stored flights")

    base_url = f"http://localhost:{settings.PORT}{settings.API_PREFIX}"
    logger.info(f"Health check: {base_url}/health")
    logger.info(f"Test Amadeus: {base_url}/test-amadeus")
    logger.info(f"Search flights: {base_url}/flights/search?from=Lahore&to=Dubai")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME} API...")
    await amadeus.close()
    await close_database()
    logger.info(f"{settings.APP_NAME} API shutdown complete")


# === FastAPI Application ===

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="""
    Skyroute - Travel Booking API

    ## Features

    * **Flights** - Live search via Amadeus with stored-flight fallback
    * **Cars, Tours, Transportation** - Browse bookable inventory
    * **Bookings** - Book any service with a bearer token
    * **Accounts** - Email/password registration and login
    """,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.SHOW_DOCS else None,
    redoc_url="/redoc" if settings.SHOW_DOCS else None,
    openapi_url="/openapi.json" if settings.SHOW_DOCS else None,
    lifespan=lifespan,
)


# === Middleware ===

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# GZip compression
app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request timing middleware
class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = datetime.utcnow()
        response = await call_next(request)
        process_time = (datetime.utcnow() - start_time).total_seconds() * 1000
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        return response


app.add_middleware(RequestTimingMiddleware)


# === Exception Handlers ===

@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle custom application exceptions"""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.message,
            "error_code": exc.error_code,
            "details": exc.details
        },
        headers=headers
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors"""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "error": "Validation error",
            "error_code": "VALIDATION_ERROR",
            "details": errors
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unexpected error: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "An unexpected error occurred" if settings.is_production else str(exc),
            "error_code": "INTERNAL_SERVER_ERROR"
        }
    )


# === Include Routers ===

app.include_router(
    api_router,
    prefix=settings.API_PREFIX,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)


# === Root Endpoints ===

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint - API information"""
    return {
        "name": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "description": settings.APP_DESCRIPTION,
        "status": "running",
        "docs": "/docs" if settings.SHOW_DOCS else "disabled",
        "api": settings.API_PREFIX
    }


@app.get("/health", tags=["Health"])
async def health_check() -> Dict:
    """
    Liveness probe for load balancers and orchestrators.

    Reports storage connectivity. Client-facing provider status lives at
    {API_PREFIX}/health.
    """
    return {
        "status": "healthy",
        "service": "skyroute-backend",
        "version": settings.APP_VERSION,
        "timestamp": datetime.utcnow().isoformat(),
        "environment": settings.ENVIRONMENT,
        "database": await DatabaseManager.status()
    }


# === Run with Uvicorn (for development) ===

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
