from gilded_rose.inventory import GildedRose
from gilded_rose.rules import QualityUpdateRules, UpdateRules
from gilded_rose.schemas import Item, ItemCategory

__all__ = ["GildedRose", "Item", "ItemCategory", "QualityUpdateRules", "UpdateRules"]
