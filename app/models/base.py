"""
Skyroute Backend - Base Document Model
Base class for all MongoDB document models using Beanie ODM
"""

from datetime import datetime

from beanie import Document, Replace, Save, SaveChanges, before_event
from pydantic import Field


class BaseDocument(Document):
    """
    Base document model with common fields for all collections
    """

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        use_state_management = True
        validate_on_save = True

    @before_event(Replace, Save, SaveChanges)
    def update_timestamp(self) -> None:
        """Update the updated_at timestamp"""
        self.updated_at = datetime.utcnow()
