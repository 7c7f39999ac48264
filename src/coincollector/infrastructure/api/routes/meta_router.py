"""Router exposing the euro coin enumerations to clients."""

from fastapi import APIRouter

from coincollector.domain.entities import CoinCountry, CoinValue, Mint

router = APIRouter(tags=["Meta"])


@router.get("/coin-values", summary="List coin denominations")
async def list_coin_values() -> list[dict]:
    return [{"value": value.cents, "display_name": value.display_name} for value in CoinValue]


@router.get("/countries", summary="List euro coin countries")
async def list_countries() -> list[dict]:
    return [
        {
            "iso_code": country.iso_code,
            "display_name": country.display_name,
            "has_regional_mints": country.has_regional_mints,
        }
        for country in CoinCountry
    ]


@router.get("/mints", summary="List mint marks")
async def list_mints() -> list[dict]:
    return [{"mark": mint.mark, "name": mint.name.title()} for mint in Mint]
