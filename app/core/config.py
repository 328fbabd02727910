"""
Skyroute Backend - Configuration Management
Centralized settings using Pydantic Settings
"""

from functools import lru_cache
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # === Application Settings ===
    APP_NAME: str = "Skyroute"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Travel & Tours Booking API with live flight search"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"  # development, staging, production

    # === API Settings ===
    API_PREFIX: str = "/api"

    # === Server Settings ===
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = False

    # === Security Settings ===
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # === CORS Settings ===
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # === MongoDB Settings ===
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "travel-booking"
    MONGODB_MAX_POOL_SIZE: int = 100
    MONGODB_MIN_POOL_SIZE: int = 10

    # === Amadeus Settings ===
    # Self-Service credentials: https://developers.amadeus.com/
    AMADEUS_CLIENT_ID: Optional[str] = None
    AMADEUS_CLIENT_SECRET: Optional[str] = None
    AMADEUS_ENVIRONMENT: str = "test"  # test or production
    AMADEUS_TIMEOUT_SECONDS: float = 15.0

    # === Flight Search ===
    FLIGHT_SEARCH_CURRENCY: str = "PKR"
    FLIGHT_SEARCH_MAX_RESULTS: int = 50

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json, text

    # === Documentation ===
    SHOW_DOCS: bool = True

    @property
    def AMADEUS_BASE_URL(self) -> str:
        """Amadeus host for the configured environment"""
        if self.AMADEUS_ENVIRONMENT == "production":
            return "https://api.amadeus.com"
        return "https://test.api.amadeus.com"

    @property
    def amadeus_configured(self) -> bool:
        return bool(self.AMADEUS_CLIENT_ID and self.AMADEUS_CLIENT_SECRET)

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Alias for BACKEND_CORS_ORIGINS"""
        return self.BACKEND_CORS_ORIGINS

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
