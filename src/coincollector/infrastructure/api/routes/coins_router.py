"""Router for coins."""

from fastapi import APIRouter, HTTPException, Response, status

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Coin, CoinCountry, CoinValue, Mint
from coincollector.infrastructure.api.dependencies import CoinService, CurrentUser, Ownership
from coincollector.infrastructure.api.schemas import CoinCreate, CoinResponse, CoinUpdate

router = APIRouter(tags=["Coins"])
logger = get_logger(__name__)


@router.post(
    "",
    response_model=CoinResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a coin to one of the caller's collections",
)
async def create_coin(
    coin_data: CoinCreate,
    current_user: CurrentUser,
    coin_service: CoinService,
    ownership: Ownership,
) -> CoinResponse:
    await ownership.require_collection_owner(current_user.id, coin_data.collection_id)

    country = CoinCountry.from_iso_code(coin_data.mint_country)
    try:
        coin = Coin.create(
            year=coin_data.year,
            value=CoinValue.from_cents(coin_data.value),
            mint_country=country,
            collection_id=coin_data.collection_id,
            mint=Mint.from_mint_mark(coin_data.mint) if coin_data.mint else None,
            description=coin_data.description,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))

    await coin_service.save(coin)
    return CoinResponse.from_entity(coin)


@router.get("/{coin_id}", response_model=CoinResponse, summary="Get a coin")
async def get_coin(coin_id: str, current_user: CurrentUser, ownership: Ownership) -> CoinResponse:
    coin = await ownership.require_coin_owner(current_user.id, coin_id)
    return CoinResponse.from_entity(coin)


@router.patch("/{coin_id}", response_model=CoinResponse, summary="Update a coin")
async def update_coin(
    coin_id: str,
    coin_data: CoinUpdate,
    current_user: CurrentUser,
    coin_service: CoinService,
    ownership: Ownership,
) -> CoinResponse:
    """Update the description of a coin or move it to another collection.

    A moved coin is recreated and gets a new id.
    """
    coin = await ownership.require_coin_owner(current_user.id, coin_id)

    if coin_data.description is not None:
        coin.description = coin_data.description

    if coin_data.collection_id is not None and coin_data.collection_id != coin.collection_id:
        await ownership.require_collection_owner(current_user.id, coin_data.collection_id)
        coin = await coin_service.move(coin, coin_data.collection_id)
    elif coin_data.description is not None:
        await coin_service.update(coin)

    return CoinResponse.from_entity(coin)


@router.delete("/{coin_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a coin")
async def delete_coin(
    coin_id: str,
    current_user: CurrentUser,
    coin_service: CoinService,
    ownership: Ownership,
) -> Response:
    await ownership.require_coin_owner(current_user.id, coin_id)
    await coin_service.delete(coin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
