"""Integration tests for the collection and coin endpoints."""
import pytest
from fastapi import status

from coincollector.domain.entities import User

pytestmark = pytest.mark.integration


@pytest.fixture
def create_collection(client, auth_headers):
    async def _create_collection(name="C1") -> dict:
        group = (
            await client.post("/api/v1/groups", json={"name": "Travel"}, headers=auth_headers)
        ).json()
        response = await client.post(
            "/api/v1/collections",
            json={"name": name, "group_id": group["id"]},
            headers=auth_headers,
        )
        assert response.status_code == status.HTTP_201_CREATED
        return response.json()

    return _create_collection


def german_coin(collection_id: str, **overrides) -> dict:
    payload = {
        "year": 2002,
        "value": 100,
        "mint_country": "DE",
        "mint": "A",
        "collection_id": collection_id,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_collection_in_unknown_group(client, auth_headers):
    response = await client.post(
        "/api/v1/collections", json={"name": "C1", "group_id": "missing"}, headers=auth_headers
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_add_coin_and_read_collection(client, auth_headers, create_collection):
    collection = await create_collection()

    response = await client.post(
        "/api/v1/coins", json=german_coin(collection["id"]), headers=auth_headers
    )

    assert response.status_code == status.HTTP_201_CREATED
    coin = response.json()
    assert coin["value_display"] == "1 Euro"
    assert coin["mint"] == "A"
    assert coin["mint_country"] == "DE"

    loaded = (
        await client.get(f"/api/v1/collections/{collection['id']}", headers=auth_headers)
    ).json()
    assert loaded["coin_count"] == 1
    assert loaded["total_value"] == 100
    assert loaded["coins"] == [coin]


@pytest.mark.asyncio
async def test_german_coin_without_mint_rejected(client, auth_headers, create_collection):
    collection = await create_collection()

    response = await client.post(
        "/api/v1/coins", json=german_coin(collection["id"], mint=None), headers=auth_headers
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
    assert "Mint is required" in response.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"value": 3}, {"mint_country": "XX"}, {"year": 1998}],
)
async def test_invalid_coin_payload(client, auth_headers, create_collection, overrides):
    collection = await create_collection()

    response = await client.post(
        "/api/v1/coins", json=german_coin(collection["id"], **overrides), headers=auth_headers
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


@pytest.mark.asyncio
async def test_update_coin_description(client, auth_headers, create_collection):
    collection = await create_collection()
    coin = (
        await client.post("/api/v1/coins", json=german_coin(collection["id"]), headers=auth_headers)
    ).json()

    response = await client.patch(
        f"/api/v1/coins/{coin['id']}", json={"description": "Mint condition"}, headers=auth_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == coin["id"]
    reloaded = await client.get(f"/api/v1/coins/{coin['id']}", headers=auth_headers)
    assert reloaded.json()["description"] == "Mint condition"


@pytest.mark.asyncio
async def test_move_coin(client, auth_headers, create_collection):
    source = await create_collection("Source")
    target = await create_collection("Target")
    coin = (
        await client.post("/api/v1/coins", json=german_coin(source["id"]), headers=auth_headers)
    ).json()

    response = await client.patch(
        f"/api/v1/coins/{coin['id']}", json={"collection_id": target["id"]}, headers=auth_headers
    )

    assert response.status_code == status.HTTP_200_OK
    moved = response.json()
    assert moved["collection_id"] == target["id"]
    assert moved["id"] != coin["id"]
    old = await client.get(f"/api/v1/coins/{coin['id']}", headers=auth_headers)
    assert old.status_code == status.HTTP_404_NOT_FOUND
    source_loaded = (
        await client.get(f"/api/v1/collections/{source['id']}", headers=auth_headers)
    ).json()
    assert source_loaded["coins"] == []


@pytest.mark.asyncio
async def test_rename_collection(client, auth_headers, create_collection):
    collection = await create_collection()

    response = await client.patch(
        f"/api/v1/collections/{collection['id']}", json={"name": "Renamed"}, headers=auth_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Renamed"


@pytest.mark.asyncio
async def test_delete_collection_with_coins(client, auth_headers, create_collection):
    collection = await create_collection()
    coin = (
        await client.post("/api/v1/coins", json=german_coin(collection["id"]), headers=auth_headers)
    ).json()

    response = await client.delete(f"/api/v1/collections/{collection['id']}", headers=auth_headers)

    assert response.status_code == status.HTTP_204_NO_CONTENT
    missing = await client.get(f"/api/v1/coins/{coin['id']}", headers=auth_headers)
    assert missing.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_foreign_coin_is_not_found(client, auth_headers, create_collection, user_service):
    collection = await create_collection()
    coin = (
        await client.post("/api/v1/coins", json=german_coin(collection["id"]), headers=auth_headers)
    ).json()
    bob = await user_service.save(User.create("bob"))
    bob_headers = {"X-User-Id": bob.id}

    assert (
        await client.get(f"/api/v1/coins/{coin['id']}", headers=bob_headers)
    ).status_code == status.HTTP_404_NOT_FOUND
    assert (
        await client.delete(f"/api/v1/coins/{coin['id']}", headers=bob_headers)
    ).status_code == status.HTTP_404_NOT_FOUND
    assert (
        await client.post("/api/v1/coins", json=german_coin(collection["id"]), headers=bob_headers)
    ).status_code == status.HTTP_404_NOT_FOUND
