"""Unit tests for the Collection and Group entities."""
import pytest

from coincollector.domain.entities import Coin, CoinCountry, CoinValue, Collection, Group


def _coin(collection_id: str, value: CoinValue = CoinValue.TEN_CENTS) -> Coin:
    return Coin.create(
        year=2005,
        value=value,
        mint_country=CoinCountry.SPAIN,
        collection_id=collection_id,
    )


class TestCollection:
    def test_create(self):
        collection = Collection.create(name="Spain", group_id="grp-1")

        assert collection.id
        assert collection.coins == []
        assert collection.coin_count == 0

    def test_group_id_is_required(self):
        with pytest.raises(ValueError, match="Group ID is required"):
            Collection(id="col-1", name="Spain", group_id="")

    def test_none_coins_are_rejected(self):
        with pytest.raises(ValueError, match="None element"):
            Collection(id="col-1", name="Spain", group_id="grp-1", coins=[None])

    def test_add_coin_and_totals(self):
        collection = Collection.create(name="Spain", group_id="grp-1")
        collection.add_coin(_coin(collection.id, CoinValue.TEN_CENTS))
        collection.add_coin(_coin(collection.id, CoinValue.TWO_EUROS))

        assert collection.coin_count == 2
        assert collection.total_value == 210

    def test_add_coin_of_other_collection(self):
        collection = Collection.create(name="Spain", group_id="grp-1")

        with pytest.raises(ValueError, match="belongs to collection"):
            collection.add_coin(_coin("other"))

    def test_remove_coin(self):
        collection = Collection.create(name="Spain", group_id="grp-1")
        coin = _coin(collection.id)
        collection.add_coin(coin)

        collection.remove_coin(coin)
        collection.remove_coin(coin)

        assert collection.coins == []

    def test_move_to_group(self):
        collection = Collection.create(name="Spain", group_id="grp-1")
        collection.move_to_group("grp-2")

        assert collection.group_id == "grp-2"

        with pytest.raises(ValueError):
            collection.move_to_group(" ")


class TestGroup:
    def test_owner_is_required(self):
        with pytest.raises(ValueError, match="Owner ID is required"):
            Group(id="grp-1", name="Travel", owner_id="")

    def test_add_collection_and_totals(self):
        group = Group.create(name="Travel", owner_id="u1")
        first = Collection.create(name="Spain", group_id=group.id)
        first.add_coin(_coin(first.id, CoinValue.ONE_EURO))
        second = Collection.create(name="Empty", group_id=group.id)

        group.add_collection(first)
        group.add_collection(second)

        assert group.total_collections == 2
        assert group.total_coins == 1
        assert group.total_value == 100

    def test_add_collection_of_other_group(self):
        group = Group.create(name="Travel", owner_id="u1")

        with pytest.raises(ValueError, match="belongs to group"):
            group.add_collection(Collection.create(name="Spain", group_id="other"))

    def test_collection_lists_are_not_shared(self):
        collections = [Collection(id="col-1", name="Spain", group_id="grp-1")]
        group = Group(id="grp-1", name="Travel", owner_id="u1", collections=collections)

        group.remove_collection(collections[0])

        assert group.collections == []
        assert len(collections) == 1
