"""Coin entity and the euro coin enumerations it is built from.

A coin is the leaf of the group -> collection -> coin aggregate. Its year,
value and mint data never change after creation; moving a coin to another
collection is done by deleting it and recreating it under a fresh id.
"""

import uuid
from dataclasses import dataclass
from enum import Enum

EURO_COIN_START_YEAR = 1999


class CoinValue(Enum):
    """Euro coin denominations, keyed by their value in cents."""

    ONE_CENT = (1, "1 Cent")
    TWO_CENTS = (2, "2 Cent")
    FIVE_CENTS = (5, "5 Cent")
    TEN_CENTS = (10, "10 Cent")
    TWENTY_CENTS = (20, "20 Cent")
    FIFTY_CENTS = (50, "50 Cent")
    ONE_EURO = (100, "1 Euro")
    TWO_EUROS = (200, "2 Euro")

    def __init__(self, cents: int, display_name: str) -> None:
        self.cents = cents
        self.display_name = display_name

    @classmethod
    def from_cents(cls, cents: int) -> "CoinValue":
        """Look up a denomination by its cent value.

        Raises:
            ValueError: If no euro coin has this value.
        """
        for value in cls:
            if value.cents == cents:
                return value
        raise ValueError(f"Unknown cent value: {cents}")


class CoinCountry(Enum):
    """Countries issuing euro coins, keyed by ISO 3166 alpha-2 code."""

    AUSTRIA = ("AT", "Austria")
    BELGIUM = ("BE", "Belgium")
    CYPRUS = ("CY", "Cyprus")
    GERMANY = ("DE", "Germany")
    ESTONIA = ("EE", "Estonia")
    SPAIN = ("ES", "Spain")
    FINLAND = ("FI", "Finland")
    FRANCE = ("FR", "France")
    GREECE = ("GR", "Greece")
    CROATIA = ("HR", "Croatia")
    IRELAND = ("IE", "Ireland")
    ITALY = ("IT", "Italy")
    LITHUANIA = ("LT", "Lithuania")
    LUXEMBOURG = ("LU", "Luxembourg")
    LATVIA = ("LV", "Latvia")
    MALTA = ("MT", "Malta")
    NETHERLANDS = ("NL", "Netherlands")
    PORTUGAL = ("PT", "Portugal")
    SLOVENIA = ("SI", "Slovenia")
    SLOVAKIA = ("SK", "Slovakia")
    SAN_MARINO = ("SM", "San Marino")
    VATICAN_CITY = ("VA", "Vatican City")
    MONACO = ("MC", "Monaco")
    ANDORRA = ("AD", "Andorra")
    BULGARIA = ("BG", "Bulgaria")

    def __init__(self, iso_code: str, display_name: str) -> None:
        self.iso_code = iso_code
        self.display_name = display_name

    @classmethod
    def from_iso_code(cls, code: str) -> "CoinCountry":
        """Look up a country by ISO code (case-insensitive).

        Raises:
            ValueError: If the code does not belong to a euro-issuing country.
        """
        normalized = (code or "").strip().upper()
        for country in cls:
            if country.iso_code == normalized:
                return country
        raise ValueError(f"Unknown ISO code: {code}")

    @property
    def has_regional_mints(self) -> bool:
        """Whether coins of this country carry a mint mark."""
        return self is CoinCountry.GERMANY


class Mint(Enum):
    """German mint marks."""

    BERLIN = "A"
    MUNICH = "D"
    STUTTGART = "F"
    KARLSRUHE = "G"
    HAMBURG = "J"
    UNKNOWN = "UNKNOWN"

    @property
    def mark(self) -> str:
        return self.value

    @classmethod
    def from_mint_mark(cls, mark: str | None) -> "Mint":
        """Look up a mint by its mark; unknown marks map to UNKNOWN."""
        normalized = (mark or "").strip().upper()
        for mint in cls:
            if mint.value == normalized:
                return mint
        return cls.UNKNOWN


def describe_coin(value: CoinValue, year: int, country: CoinCountry, mint: Mint | None) -> str:
    """Build the default human readable description of a coin."""
    text = f"{value.display_name} coin from {country.display_name}, {year}"
    if mint is not None:
        text += f", mint mark {mint.mark}"
    return text


@dataclass
class Coin:
    """A single euro coin owned by a collection.

    Attributes:
        id: Unique identifier (UUID string).
        year: Minting year, 1999 or later.
        value: Denomination.
        mint_country: Issuing country.
        collection_id: ID of the owning collection.
        mint: Mint mark; only kept for countries with regional mints.
        description: Free text, generated from the other fields when empty.
    """

    id: str
    year: int
    value: CoinValue
    mint_country: CoinCountry
    collection_id: str
    mint: Mint | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate coin data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Coin ID is required")
        if self.year < EURO_COIN_START_YEAR:
            raise ValueError(f"Year must be >= {EURO_COIN_START_YEAR}")
        if not isinstance(self.value, CoinValue):
            raise ValueError("Coin value is required")
        if not isinstance(self.mint_country, CoinCountry):
            raise ValueError("Mint country is required")
        if not self.collection_id or not self.collection_id.strip():
            raise ValueError("Collection ID is required")

        if self.mint_country.has_regional_mints:
            if self.mint is None:
                raise ValueError(f"Mint is required for coins from {self.mint_country.display_name}")
        else:
            self.mint = None

        if not self.description:
            self.description = describe_coin(self.value, self.year, self.mint_country, self.mint)

    @classmethod
    def create(
        cls,
        year: int,
        value: CoinValue,
        mint_country: CoinCountry,
        collection_id: str,
        mint: Mint | None = None,
        description: str | None = None,
    ) -> "Coin":
        """Create a new coin with a freshly generated id."""
        return cls(
            id=str(uuid.uuid4()),
            year=year,
            value=value,
            mint_country=mint_country,
            collection_id=collection_id,
            mint=mint,
            description=description,
        )
