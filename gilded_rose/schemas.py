from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class ItemCategory(str, Enum):
    """
    The categories the daily update rules are keyed on.
    Names are matched exactly; anything unrecognised is a normal item.
    """

    AGED_BRIE = "Aged Brie"
    BACKSTAGE_PASSES = "Backstage passes"
    SULFURAS = "Sulfuras"
    CONJURED = "Conjured"
    NORMAL = "normal"

    @classmethod
    def from_name(cls, name: str) -> "ItemCategory":
        for category in cls:
            if category is not cls.NORMAL and category.value == name:
                return category
        return cls.NORMAL


class Item(BaseModel):
    """
    A single stocked item. Records are immutable: the daily update
    hands back a fresh copy instead of editing the one it was given.
    """

    # populate_by_name lets us build items from CSV rows (aliases) or kwargs
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., alias="Name")
    sell_in: int = Field(..., alias="SellIn")
    quality: int = Field(..., alias="Quality")

    @property
    def category(self) -> ItemCategory:
        return ItemCategory.from_name(self.name)

    @property
    def is_legendary(self) -> bool:
        return self.category is ItemCategory.SULFURAS
