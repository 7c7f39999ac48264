"""Collection entity.

A collection belongs to exactly one group and owns a list of coins. The
coin list is an in-memory view assembled on read; the coin rows remain
authoritative.
"""

import uuid
from dataclasses import dataclass, field

from coincollector.domain.entities.coin import Coin


@dataclass
class Collection:
    """A named set of coins inside a group.

    Attributes:
        id: Unique identifier (UUID string).
        name: Display name.
        group_id: ID of the owning group. Can be changed to move the
            collection to another group.
        coins: Coins attached to this collection.
    """

    id: str
    name: str
    group_id: str
    coins: list[Coin] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate collection data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Collection ID is required")
        if not self.group_id or not self.group_id.strip():
            raise ValueError("Group ID is required")
        if any(coin is None for coin in self.coins):
            raise ValueError("Coins list contains None element(s)")
        self.coins = list(self.coins)

    @classmethod
    def create(cls, name: str, group_id: str, coins: list[Coin] | None = None) -> "Collection":
        """Create a new collection with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), name=name, group_id=group_id, coins=coins or [])

    def move_to_group(self, group_id: str) -> None:
        if not group_id or not group_id.strip():
            raise ValueError("Group ID is required")
        self.group_id = group_id

    def add_coin(self, coin: Coin) -> None:
        """Attach a coin to this collection.

        Raises:
            ValueError: If the coin belongs to a different collection.
        """
        if coin.collection_id != self.id:
            raise ValueError(
                f"Coin {coin.id} belongs to collection {coin.collection_id}, not {self.id}"
            )
        self.coins.append(coin)

    def remove_coin(self, coin: Coin) -> None:
        if coin in self.coins:
            self.coins.remove(coin)

    @property
    def coin_count(self) -> int:
        return len(self.coins)

    @property
    def total_value(self) -> int:
        """Sum of all coin values in cents."""
        return sum(coin.value.cents for coin in self.coins)
