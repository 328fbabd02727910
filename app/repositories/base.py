"""
Skyroute Backend - Base Repository
Generic base repository for MongoDB operations using Beanie ODM
"""

import re
from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from beanie import Document, PydanticObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from app.core.exceptions import PersistenceError


# Type variable for document models
ModelType = TypeVar("ModelType", bound=Document)


# === Query helpers ===

def contains_ci(text: str) -> Dict[str, str]:
    """Case-insensitive substring match on literal user text"""
    return {"$regex": re.escape(text.strip()), "$options": "i"}


def same_day(day: date) -> Dict[str, datetime]:
    """Half-open range covering one calendar day"""
    start = datetime.combine(day, time.min)
    return {"$gte": start, "$lt": start + timedelta(days=1)}


@contextmanager
def storage_errors() -> Iterator[None]:
    """Re-raise driver failures as PersistenceError"""
    try:
        yield
    except PyMongoError as e:
        raise PersistenceError(str(e)) from e


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self):
                super().__init__(User)
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize repository with a document model.

        Args:
            model: The Beanie Document model class
        """
        self.model = model

    # === Create ===

    async def create(self, obj: ModelType) -> ModelType:
        """Insert a document and return it with its ID"""
        with storage_errors():
            await obj.insert()
        return obj

    # === Read ===

    async def get_by_id(self, id: str) -> Optional[ModelType]:
        """
        Get document by ID.

        Args:
            id: Document ID string

        Returns:
            Document if found, None otherwise (including malformed IDs)
        """
        try:
            object_id = PydanticObjectId(id)
        except (InvalidId, TypeError):
            return None

        with storage_errors():
            return await self.model.get(object_id)

    async def find(
        self,
        query: Dict[str, Any],
        sort_field: str = "created_at",
        sort_order: int = -1,
        limit: Optional[int] = None
    ) -> List[ModelType]:
        """
        Find documents matching query.

        Args:
            query: MongoDB query dict
            sort_field: Field to sort by
            sort_order: Sort direction (1=asc, -1=desc)
            limit: Maximum to return, unbounded when None

        Returns:
            List of matching documents
        """
        cursor = self.model.find(query).sort((sort_field, sort_order))
        if limit is not None:
            cursor = cursor.limit(limit)

        with storage_errors():
            return await cursor.to_list()

    async def find_one(self, query: Dict[str, Any]) -> Optional[ModelType]:
        with storage_errors():
            return await self.model.find_one(query)

    async def exists(self, field: str, value: Any) -> bool:
        """Check if a document with the field value exists"""
        return await self.find_one({field: value}) is not None
