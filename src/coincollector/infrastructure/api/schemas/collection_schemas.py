"""Pydantic schemas for collection operations."""

from pydantic import BaseModel, Field

from coincollector.domain.entities import Collection
from coincollector.infrastructure.api.schemas.coin_schemas import CoinResponse


class CollectionCreate(BaseModel):
    """Schema for creating a collection."""

    name: str = Field(..., min_length=1, max_length=100, description="Collection name")
    group_id: str = Field(..., min_length=1, description="ID of the owning group")


class CollectionUpdate(BaseModel):
    """Schema for renaming a collection or moving it to another group."""

    name: str | None = Field(None, min_length=1, max_length=100, description="Collection name")
    group_id: str | None = Field(None, min_length=1, description="Target group ID")


class CollectionResponse(BaseModel):
    """Schema for collection response including its coins."""

    id: str = Field(..., description="Collection ID")
    name: str
    group_id: str
    coin_count: int = Field(0, description="Number of coins in the collection")
    total_value: int = Field(0, description="Sum of coin values in cents")
    coins: list[CoinResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, collection: Collection) -> "CollectionResponse":
        return cls(
            id=collection.id,
            name=collection.name,
            group_id=collection.group_id,
            coin_count=collection.coin_count,
            total_value=collection.total_value,
            coins=[CoinResponse.from_entity(coin) for coin in collection.coins],
        )
