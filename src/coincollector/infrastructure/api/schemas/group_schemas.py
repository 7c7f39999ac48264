"""Pydantic schemas for group operations."""

from pydantic import BaseModel, Field

from coincollector.domain.entities import Group
from coincollector.infrastructure.api.schemas.collection_schemas import CollectionResponse


class GroupCreate(BaseModel):
    """Schema for creating a group."""

    name: str = Field(..., min_length=1, max_length=100, description="Group name")


class GroupUpdate(BaseModel):
    """Schema for renaming a group."""

    name: str = Field(..., min_length=1, max_length=100, description="Group name")


class GroupResponse(BaseModel):
    """Schema for group response including its collections."""

    id: str = Field(..., description="Group ID")
    name: str
    owner_id: str
    total_collections: int = 0
    total_coins: int = 0
    total_value: int = Field(0, description="Sum of coin values in cents")
    collections: list[CollectionResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, group: Group) -> "GroupResponse":
        return cls(
            id=group.id,
            name=group.name,
            owner_id=group.owner_id,
            total_collections=group.total_collections,
            total_coins=group.total_coins,
            total_value=group.total_value,
            collections=[CollectionResponse.from_entity(c) for c in group.collections],
        )
