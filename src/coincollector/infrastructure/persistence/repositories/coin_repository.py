"""Repository for coin database operations."""

from sqlalchemy import delete, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Coin, CoinCountry, CoinValue, Mint
from coincollector.infrastructure.persistence.models import CoinModel

logger = get_logger(__name__)


def coin_to_model(coin: Coin) -> CoinModel:
    return CoinModel(
        id=coin.id,
        year=coin.year,
        coin_value=coin.value.cents,
        mint_country=coin.mint_country.iso_code,
        mint=coin.mint.mark if coin.mint is not None else None,
        description=coin.description,
        collection_id=coin.collection_id,
    )


def coin_from_model(model: CoinModel) -> Coin | None:
    """Build a coin from its row, or None if the row holds invalid data."""
    try:
        country = CoinCountry.from_iso_code(model.mint_country)
        return Coin(
            id=model.id,
            year=model.year,
            value=CoinValue.from_cents(model.coin_value),
            mint_country=country,
            collection_id=model.collection_id,
            mint=Mint.from_mint_mark(model.mint) if country.has_regional_mints else None,
            description=model.description,
        )
    except ValueError as e:
        logger.warning("Invalid coin row", coin_id=model.id, error=str(e))
        return None


class CoinRepository:
    """Repository for coin database operations.

    Works inside the session it is given and never commits, rolls back or
    closes it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, coin: Coin) -> Coin:
        """Insert a coin row.

        Raises:
            IntegrityError: If a row with the same id already exists.
        """
        self.session.add(coin_to_model(coin))
        await self.session.flush()
        logger.info("Coin created", coin_id=coin.id, collection_id=coin.collection_id)
        return coin

    async def read(self, coin_id: str) -> Coin | None:
        """Get a coin by ID.

        Returns:
            The coin if found and valid, None otherwise.
        """
        result = await self.session.execute(select(CoinModel).where(CoinModel.id == coin_id))
        model = result.scalar_one_or_none()
        if model is None:
            logger.debug("Coin not found", coin_id=coin_id)
            return None
        return coin_from_model(model)

    async def update(self, coin: Coin) -> None:
        """Update every column of the coin row in place.

        Raises:
            NoResultFound: If no row with the coin's id exists.
        """
        result = await self.session.execute(
            update(CoinModel)
            .where(CoinModel.id == coin.id)
            .values(
                year=coin.year,
                coin_value=coin.value.cents,
                mint_country=coin.mint_country.iso_code,
                mint=coin.mint.mark if coin.mint is not None else None,
                description=coin.description,
                collection_id=coin.collection_id,
            )
        )
        if result.rowcount != 1:
            raise NoResultFound(f"Coin update affected {result.rowcount} rows: {coin.id}")
        logger.info("Coin updated", coin_id=coin.id, collection_id=coin.collection_id)

    async def delete(self, coin_id: str) -> None:
        """Delete a coin row.

        Raises:
            NoResultFound: If no row with this id exists.
        """
        result = await self.session.execute(delete(CoinModel).where(CoinModel.id == coin_id))
        if result.rowcount != 1:
            raise NoResultFound(f"Coin delete affected {result.rowcount} rows: {coin_id}")
        logger.info("Coin deleted", coin_id=coin_id)

    async def delete_by_collection(self, collection_id: str) -> int:
        """Delete every coin of a collection.

        Returns:
            Number of deleted rows.
        """
        result = await self.session.execute(
            delete(CoinModel).where(CoinModel.collection_id == collection_id)
        )
        logger.info("Coins deleted", collection_id=collection_id, count=result.rowcount)
        return result.rowcount

    async def exists(self, coin_id: str) -> bool:
        result = await self.session.execute(select(CoinModel.id).where(CoinModel.id == coin_id))
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> list[Coin]:
        """Get every coin; rows with invalid data are skipped."""
        result = await self.session.execute(select(CoinModel))
        coins = [coin for coin in map(coin_from_model, result.scalars().all()) if coin is not None]
        logger.debug("Coins read", count=len(coins))
        return coins
