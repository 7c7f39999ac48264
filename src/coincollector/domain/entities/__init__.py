"""Domain entities for CoinCollector.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from coincollector.domain.entities.coin import (
    EURO_COIN_START_YEAR,
    Coin,
    CoinCountry,
    CoinValue,
    Mint,
    describe_coin,
)
from coincollector.domain.entities.collection import Collection
from coincollector.domain.entities.group import Group
from coincollector.domain.entities.user import User

__all__ = [
    "EURO_COIN_START_YEAR",
    "Coin",
    "CoinCountry",
    "CoinValue",
    "Collection",
    "Group",
    "Mint",
    "User",
    "describe_coin",
]
