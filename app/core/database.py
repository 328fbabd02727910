"""
Skyroute Backend - MongoDB Database Manager
Motor client plus Beanie registration for the booking collections
"""

from typing import List, Optional, Sequence, Type

from beanie import Document, init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from loguru import logger
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.models.booking import Booking
from app.models.catalog import Car, Tour, Transportation
from app.models.flight import Flight
from app.models.user import User


# Every collection the API reads or writes
DOCUMENT_MODELS: List[Type[Document]] = [User, Flight, Car, Tour, Transportation, Booking]


def collection_names(models: Sequence[Type[Document]]) -> List[str]:
    """Collection name each document model is stored under"""
    return [model.Settings.name for model in models]


class DatabaseManager:
    """Owns the single Motor client for the process"""

    _client: Optional[AsyncIOMotorClient] = None

    @classmethod
    async def connect(cls, document_models: Sequence[Type[Document]] = DOCUMENT_MODELS) -> None:
        """
        Open the client, verify the server answers, and register documents

        Raises:
            PyMongoError: If the server is unreachable
        """
        logger.info(f"Connecting to MongoDB database '{settings.MONGODB_DATABASE}'")

        client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            maxPoolSize=settings.MONGODB_MAX_POOL_SIZE,
            minPoolSize=settings.MONGODB_MIN_POOL_SIZE,
            serverSelectionTimeoutMS=5000,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB unreachable at startup: {e}")
            client.close()
            raise

        await init_beanie(
            database=client[settings.MONGODB_DATABASE],
            document_models=list(document_models),
        )
        cls._client = client
        logger.info(f"MongoDB ready, collections: {', '.join(collection_names(document_models))}")

    @classmethod
    async def disconnect(cls) -> None:
        if cls._client is not None:
            cls._client.close()
            cls._client = None
            logger.info("MongoDB connection closed")

    @classmethod
    async def ping(cls) -> bool:
        """True when a client is open and the server answers"""
        if cls._client is None:
            return False
        try:
            await cls._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True

    @classmethod
    async def status(cls) -> str:
        return "connected" if await cls.ping() else "disconnected"


async def init_database() -> None:
    await DatabaseManager.connect()


async def close_database() -> None:
    await DatabaseManager.disconnect()
