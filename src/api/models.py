"""Pydantic models for API request/response."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from domain.model.user import User


class UserResponse(BaseModel):
    """Response model for a user.

    Serialized with wire names (``_id``, ``displayName``, ...).
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ID")
    email: str
    display_name: str = Field(..., alias="displayName")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            display_name=user.display_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
