"""
Skyroute Backend - Base Schemas
Common Pydantic schemas used across the application
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration"""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
    )


class CamelSchema(BaseSchema):
    """Schema exposed to clients with camelCase keys"""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DocumentSchema(CamelSchema):
    """Response schema for a stored document, exposing its id as `_id`"""

    id: str = Field(..., alias="_id")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v: Any) -> str:
        return str(v) if v is not None else v


# === Common Response Schemas ===

class ErrorResponse(BaseSchema):
    """Generic error response"""
    success: bool = False
    error: str
    error_code: Optional[str] = None
    details: Any = None


# === Health Check Schemas ===

class HealthCheckResponse(BaseSchema):
    """Health check response"""
    status: str = "OK"
    message: str
    amadeus: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
