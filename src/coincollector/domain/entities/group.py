"""Group entity, the root of the group -> collection -> coin aggregate.

Groups are owned by a single user. The collection list is populated on
read; the collection rows remain authoritative.
"""

import uuid
from dataclasses import dataclass, field

from coincollector.domain.entities.collection import Collection


@dataclass
class Group:
    """A user's group of coin collections.

    Attributes:
        id: Unique identifier (UUID string).
        name: Display name.
        owner_id: ID of the owning user. Never changes.
        collections: Collections attached to this group.
    """

    id: str
    name: str
    owner_id: str
    collections: list[Collection] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate group data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Group ID is required")
        if not self.owner_id or not self.owner_id.strip():
            raise ValueError("Owner ID is required")
        if any(collection is None for collection in self.collections):
            raise ValueError("Collections list contains None element(s)")
        self.collections = list(self.collections)

    @classmethod
    def create(
        cls, name: str, owner_id: str, collections: list[Collection] | None = None
    ) -> "Group":
        """Create a new group with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), name=name, owner_id=owner_id, collections=collections or [])

    def add_collection(self, collection: Collection) -> None:
        """Attach a collection to this group.

        Raises:
            ValueError: If the collection belongs to a different group.
        """
        if collection.group_id != self.id:
            raise ValueError(
                f"Collection {collection.id} belongs to group {collection.group_id}, not {self.id}"
            )
        self.collections.append(collection)

    def remove_collection(self, collection: Collection) -> None:
        if collection in self.collections:
            self.collections.remove(collection)

    @property
    def total_collections(self) -> int:
        return len(self.collections)

    @property
    def total_coins(self) -> int:
        return sum(collection.coin_count for collection in self.collections)

    @property
    def total_value(self) -> int:
        """Sum of all coin values in cents across all collections."""
        return sum(collection.total_value for collection in self.collections)
