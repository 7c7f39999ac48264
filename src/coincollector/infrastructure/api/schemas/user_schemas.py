"""Pydantic schemas for user operations."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, max_length=50, description="Unique username")


class UserLogin(BaseModel):
    """Schema for identifying a registered user by username."""

    username: str = Field(..., min_length=1, max_length=50, description="Registered username")


class UserResponse(BaseModel):
    """Schema for user response."""

    id: str = Field(..., description="User ID")
    username: str

    model_config = ConfigDict(from_attributes=True)
