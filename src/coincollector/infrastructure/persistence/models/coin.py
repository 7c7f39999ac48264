"""SQLAlchemy model for the coins table."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class CoinModel(Base):
    """SQLAlchemy model for the coins table.

    Attributes:
        id: Primary key (UUID string).
        year: Minting year.
        coin_value: Denomination in cents.
        mint_country: ISO code of the issuing country.
        mint: Mint mark, only set for countries with regional mints.
        description: Free text description.
        collection_id: ID of the owning collection (no database foreign key).
    """

    __tablename__ = "coins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Coin ID (UUID)")
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    coin_value: Mapped[int] = mapped_column(Integer, nullable=False, comment="Value in cents")
    mint_country: Mapped[str] = mapped_column(String(2), nullable=False, comment="ISO country code")
    mint: Mapped[str | None] = mapped_column(String(10), nullable=True, comment="Mint mark")
    description: Mapped[str] = mapped_column(Text, nullable=False)
    collection_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        comment="ID of the owning collection",
    )

    def __repr__(self) -> str:
        return f"<Coin(id={self.id}, coin_value={self.coin_value}, collection_id={self.collection_id})>"
