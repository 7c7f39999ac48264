"""API Schemas for request/response validation."""

from coincollector.infrastructure.api.schemas.coin_schemas import (
    CoinCreate,
    CoinResponse,
    CoinUpdate,
)
from coincollector.infrastructure.api.schemas.collection_schemas import (
    CollectionCreate,
    CollectionResponse,
    CollectionUpdate,
)
from coincollector.infrastructure.api.schemas.group_schemas import (
    GroupCreate,
    GroupResponse,
    GroupUpdate,
)
from coincollector.infrastructure.api.schemas.user_schemas import (
    UserCreate,
    UserLogin,
    UserResponse,
)

__all__ = [
    "CoinCreate",
    "CoinResponse",
    "CoinUpdate",
    "CollectionCreate",
    "CollectionResponse",
    "CollectionUpdate",
    "GroupCreate",
    "GroupResponse",
    "GroupUpdate",
    "UserCreate",
    "UserLogin",
    "UserResponse",
]
