"""
Skyroute Backend - Authentication API Endpoints
Email/password registration and login
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service
from app.schemas.user import AuthResponse, UserLogin, UserRegister
from app.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    description="Create an account and receive an access token valid for 7 days"
)
async def register(
    data: UserRegister,
    service: AuthService = Depends(get_auth_service)
):
    return await service.register(data)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with email and password"
)
async def login(
    data: UserLogin,
    service: AuthService = Depends(get_auth_service)
):
    return await service.login(data)
