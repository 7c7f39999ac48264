"""Pydantic schemas for coin operations."""

from pydantic import BaseModel, Field, field_validator

from coincollector.domain.entities import EURO_COIN_START_YEAR, Coin, CoinCountry, CoinValue


class CoinCreate(BaseModel):
    """Schema for adding a coin to a collection."""

    year: int = Field(..., ge=EURO_COIN_START_YEAR, description="Minting year")
    value: int = Field(..., description="Denomination in euro cents (1, 2, 5, 10, 20, 50, 100, 200)")
    mint_country: str = Field(..., min_length=2, max_length=2, description="ISO country code")
    mint: str | None = Field(None, max_length=10, description="Mint mark, required for DE")
    description: str | None = Field(None, max_length=1000, description="Free text description")
    collection_id: str = Field(..., min_length=1, description="ID of the owning collection")

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        CoinValue.from_cents(v)
        return v

    @field_validator("mint_country")
    @classmethod
    def validate_mint_country(cls, v: str) -> str:
        return CoinCountry.from_iso_code(v).iso_code


class CoinUpdate(BaseModel):
    """Schema for updating a coin.

    Changing ``collection_id`` recreates the coin under a new id.
    """

    collection_id: str | None = Field(None, min_length=1, description="Target collection ID")
    description: str | None = Field(None, max_length=1000, description="Free text description")


class CoinResponse(BaseModel):
    """Schema for coin response."""

    id: str = Field(..., description="Coin ID")
    year: int
    value: int = Field(..., description="Denomination in euro cents")
    value_display: str = Field(..., description="Human readable denomination")
    mint_country: str = Field(..., description="ISO country code")
    mint: str | None = None
    description: str | None = None
    collection_id: str

    @classmethod
    def from_entity(cls, coin: Coin) -> "CoinResponse":
        return cls(
            id=coin.id,
            year=coin.year,
            value=coin.value.cents,
            value_display=coin.value.display_name,
            mint_country=coin.mint_country.iso_code,
            mint=coin.mint.mark if coin.mint is not None else None,
            description=coin.description,
            collection_id=coin.collection_id,
        )
