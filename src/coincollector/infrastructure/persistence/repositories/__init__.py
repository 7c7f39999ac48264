"""Persistence repositories, one per table.

Every repository is constructed with an open session and only executes
statements on it; transaction boundaries belong to the storage services.
"""

from coincollector.infrastructure.persistence.repositories.coin_repository import (
    CoinRepository,
)
from coincollector.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from coincollector.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from coincollector.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "CoinRepository",
    "CollectionRepository",
    "GroupRepository",
    "UserRepository",
]
