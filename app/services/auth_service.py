"""
Skyroute Backend - Auth Service
Registration and login
"""

from typing import Optional

from loguru import logger
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import DuplicateEmailError, InvalidCredentialsError, PersistenceError
from app.core.security import create_access_token, hash_password, verify_password
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.user import AuthResponse, UserLogin, UserRegister, UserSummary


class AuthService:
    """Service class for account registration and login"""

    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or user_repository

    @staticmethod
    def _auth_response(user, message: str) -> AuthResponse:
        user_id = str(user.id)
        return AuthResponse(
            message=message,
            token=create_access_token(subject=user_id, email=user.email),
            user=UserSummary(
                id=user_id,
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
            ),
        )

    async def register(self, data: UserRegister) -> AuthResponse:
        """
        Register a new user account

        Args:
            data: Registration data

        Returns:
            Token and public user fields

        Raises:
            DuplicateEmailError: If email is already registered
        """
        if await self.repository.email_exists(data.email):
            raise DuplicateEmailError(data.email)

        try:
            user = await self.repository.create_user({
                "email": data.email.lower(),
                "password_hash": hash_password(data.password),
                "first_name": data.first_name,
                "last_name": data.last_name,
                "phone": data.phone,
            })
        except PersistenceError as e:
            # a concurrent registration won the unique email index
            if isinstance(e.__cause__, DuplicateKeyError):
                raise DuplicateEmailError(data.email) from e
            raise

        logger.info(f"New user registered: {user.email}")
        return self._auth_response(user, "User registered successfully")

    async def login(self, data: UserLogin) -> AuthResponse:
        """
        Authenticate by email and password

        Unknown email and wrong password fail identically.

        Raises:
            InvalidCredentialsError: If credentials don't match
        """
        user = await self.repository.get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info(f"User logged in: {user.email}")
        return self._auth_response(user, "Login successful")


auth_service = AuthService()
