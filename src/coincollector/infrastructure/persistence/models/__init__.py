"""SQLAlchemy models for the CoinCollector tables.

All models inherit from the Base class defined in database.py and are
created on application startup when missing.
"""

from coincollector.infrastructure.persistence.models.coin import CoinModel
from coincollector.infrastructure.persistence.models.collection import CollectionModel
from coincollector.infrastructure.persistence.models.group import GroupModel
from coincollector.infrastructure.persistence.models.user import UserModel

__all__ = [
    "CoinModel",
    "CollectionModel",
    "GroupModel",
    "UserModel",
]
