import pytest
from pydantic import ValidationError

from gilded_rose.inventory import GildedRose
from gilded_rose.schemas import Item


def test_items_have_sell_in_and_quality(make_item):
    inn = GildedRose()
    inn.add_item(make_item("Foo", 10, 5))
    inn.add_item(make_item("Bar", 10, 5))
    for item in inn.items:
        assert hasattr(item, "sell_in")
        assert hasattr(item, "quality")


def test_end_of_day_lowers_both_values(make_item):
    inn = GildedRose()
    inn.add_item(make_item("Foo", 10, 5))
    inn.add_item(make_item("Bar", 10, 5))
    inn.end_of_day()
    assert [item.quality for item in inn.items] == [4, 4]
    assert [item.sell_in for item in inn.items] == [9, 9]


def test_admission_rejects_over_quality_item(make_item):
    inn = GildedRose()
    inn.add_item(make_item("Foo", 10, 69))
    assert len(inn) == 0


def test_admission_accepts_legendary_item(make_item):
    inn = GildedRose()
    inn.add_item(make_item("Sulfuras", 10, 80))
    assert len(inn) == 1


def test_admission_accepts_quality_at_maximum(make_item):
    inn = GildedRose()
    inn.add_item(make_item("Foo", 10, 50))
    assert len(inn) == 1


def test_rejection_is_logged(make_item, caplog):
    inn = GildedRose()
    with caplog.at_level("WARNING"):
        inn.add_item(make_item("Above 50 Item", 10, 69))
    assert "Above 50 Item" in caplog.text


def test_mixed_stock_after_one_day(make_item):
    inn = GildedRose()
    inn.add_item(make_item("Foo", 0, 5))
    inn.add_item(make_item("Bar", 10, 0))
    inn.add_item(make_item("Aged Brie", 10, 0))
    inn.add_item(make_item("Above 50 Item", 10, 69))
    inn.add_item(make_item("Sulfuras", 10, 80))
    inn.add_item(make_item("Backstage passes", 10, 10))
    inn.end_of_day()

    names = [item.name for item in inn.items]
    assert names == ["Foo", "Bar", "Aged Brie", "Sulfuras", "Backstage passes"]
    assert [item.quality for item in inn.items] == [3, 0, 1, 80, 12]
    assert [item.sell_in for item in inn.items] == [-1, 9, 9, 10, 9]


def test_unknown_backstage_name_is_a_normal_item(make_item):
    inn = GildedRose([make_item("Backstage pass", 10, 10)])
    inn.end_of_day()
    assert inn.items[0].quality == 9


def test_end_of_day_on_empty_inventory():
    inn = GildedRose()
    inn.end_of_day()
    assert inn.items == []


def test_end_of_day_replaces_records(make_item):
    original = make_item("Foo", 10, 5)
    inn = GildedRose([original])
    inn.end_of_day()
    assert inn.items[0] is not original
    assert original.quality == 5


def test_items_are_immutable(make_item):
    item = make_item("Foo", 10, 5)
    with pytest.raises(ValidationError):
        item.quality = 1


def test_constructor_copies_the_given_list(make_item):
    stock = [make_item("Foo", 10, 5)]
    inn = GildedRose(stock)
    inn.add_item(make_item("Bar", 10, 5))
    assert len(stock) == 1
    assert len(inn) == 2
