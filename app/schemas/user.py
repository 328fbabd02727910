"""
Skyroute Backend - User Schemas
Request and response schemas for registration and login
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.schemas.base import CamelSchema


class UserRegister(CamelSchema):
    """User registration request"""
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class UserLogin(CamelSchema):
    """User login request"""
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class UserSummary(CamelSchema):
    """Public part of the user returned alongside a token"""
    id: str
    first_name: str
    last_name: str
    email: str


class AuthResponse(CamelSchema):
    """Register / login response"""
    message: str
    token: str
    user: UserSummary
