"""
Skyroute Backend - User Repository
"""

from typing import Any, Dict, Optional

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User document operations"""

    def __init__(self):
        super().__init__(User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return await self.find_one({"email": email.lower()})

    async def email_exists(self, email: str) -> bool:
        """Check if email exists"""
        return await self.exists("email", email.lower())

    async def create_user(self, data: Dict[str, Any]) -> User:
        """Create a new user"""
        return await self.create(User(**data))


# Singleton instance
user_repository = UserRepository()
