"""Storage services for the group -> collection -> coin aggregate.

Every operation runs either self-managed (no session passed) or inside a
caller's session; see :mod:`coincollector.domain.services.unit_of_work`.
"""

from coincollector.domain.services.unit_of_work import SaveOutcome, require_id, unit_of_work
from coincollector.domain.services.coin_storage_service import CoinStorageService
from coincollector.domain.services.collection_storage_service import CollectionStorageService
from coincollector.domain.services.group_storage_service import GroupStorageService
from coincollector.domain.services.ownership_service import OwnershipService
from coincollector.domain.services.user_storage_service import UserStorageService

__all__ = [
    "CoinStorageService",
    "CollectionStorageService",
    "GroupStorageService",
    "OwnershipService",
    "SaveOutcome",
    "UserStorageService",
    "require_id",
    "unit_of_work",
]
