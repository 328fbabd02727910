"""
Skyroute Backend - User Document Model
"""

from typing import Optional

from beanie import Indexed
from pydantic import EmailStr

from app.models.base import BaseDocument


class User(BaseDocument):
    """
    User Document Model
    Travelers who register and book services
    """

    email: Indexed(EmailStr, unique=True)
    password_hash: str
    first_name: str
    last_name: str
    phone: Optional[str] = None

    # Contact address
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    class Settings:
        name = "users"
        use_state_management = True
