"""
Skyroute Backend - Security Module
JWT authentication and password hashing
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel
from loguru import logger

from app.core.config import settings


# Password hashing context. New hashes use argon2; bcrypt hashes still verify.
pwd_context = CryptContext(
    schemes=["argon2", "bcrypt"],
    deprecated="auto"
)


class TokenData(BaseModel):
    """Decoded token data"""
    user_id: str
    email: str
    expires_at: datetime


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognised hash format
        return False


def hash_password(password: str) -> str:
    """Hash a password with a per-hash random salt"""
    return pwd_context.hash(password)


def create_access_token(
    subject: Union[str, Any],
    email: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed access token embedding user id and email

    Args:
        subject: The user ID
        email: The user's email address
        expires_delta: Optional custom lifetime, defaults to ACCESS_TOKEN_EXPIRE_DAYS

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))

    to_encode = {
        "sub": str(subject),
        "id": str(subject),
        "email": email,
        "type": "access",
        "exp": expire,
        "iat": now
    }

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )


def verify_token(token: str) -> Optional[TokenData]:
    """
    Decode and validate an access token

    Signature and expiry are both checked by the decoder.

    Returns:
        TokenData if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None

    if payload.get("type") != "access" or not payload.get("sub") or "exp" not in payload:
        logger.warning("Token is not an access token")
        return None

    return TokenData(
        user_id=payload["sub"],
        email=payload.get("email", ""),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    )
