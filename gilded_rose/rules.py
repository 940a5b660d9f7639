import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from gilded_rose import settings
from gilded_rose.schemas import Item, ItemCategory

logger = logging.getLogger(__name__)


class UpdateRules(ABC):
    """
    Abstract base class for the end-of-day update rules.
    One operation per item category, each taking an item and returning its
    state after one day has passed.
    """

    @abstractmethod
    def aged_brie(self, item: Item) -> Item:
        pass

    @abstractmethod
    def backstage_passes(self, item: Item) -> Item:
        pass

    @abstractmethod
    def sulfuras(self, item: Item) -> Item:
        pass

    @abstractmethod
    def conjured(self, item: Item) -> Item:
        pass

    @abstractmethod
    def normal(self, item: Item) -> Item:
        pass

    def rule_for(self, category: ItemCategory) -> Callable[[Item], Item]:
        """Looks up the rule that handles a category."""
        registry = {
            ItemCategory.AGED_BRIE: self.aged_brie,
            ItemCategory.BACKSTAGE_PASSES: self.backstage_passes,
            ItemCategory.SULFURAS: self.sulfuras,
            ItemCategory.CONJURED: self.conjured,
            ItemCategory.NORMAL: self.normal,
        }
        return registry[category]

    def update_item(self, item: Item) -> Item:
        """Resolves the item's category from its name and applies that rule."""
        updated = self.rule_for(item.category)(item)
        logger.debug(
            f"{item.name}: sell_in {item.sell_in} -> {updated.sell_in}, "
            f"quality {item.quality} -> {updated.quality}"
        )
        return updated


class QualityUpdateRules(UpdateRules):
    """
    The inn's quality rules.

    - Once the sell by date has passed, quality degrades twice as fast
    - The quality of an item is never negative
    - "Aged Brie" increases in quality the older it gets
    - The quality of an item is never more than the maximum (50)
    - "Sulfuras", being legendary, is never sold and never loses quality
    - "Backstage passes" gain quality as the concert approaches: +2 with
      10 days or less, +3 with 5 days or less, and drop to 0 after it
    - "Conjured" items degrade twice as fast as normal items

    Every "past due" check reads sell_in as it was at the start of the day.
    """

    def __init__(
        self,
        maximum_quality: Optional[int] = None,
        minimum_quality: Optional[int] = None,
        legendary_quality: Optional[int] = None,
    ):
        self.maximum_quality = (
            maximum_quality if maximum_quality is not None else settings.MAXIMUM_QUALITY
        )
        self.minimum_quality = (
            minimum_quality if minimum_quality is not None else settings.MINIMUM_QUALITY
        )
        self.legendary_quality = (
            legendary_quality
            if legendary_quality is not None
            else settings.LEGENDARY_QUALITY
        )

    def is_less_than_maximum(self, quality: int) -> bool:
        return quality < self.maximum_quality

    def is_over_minimum(self, quality: int) -> bool:
        return quality > self.minimum_quality

    def increase(self, quality: int) -> int:
        return quality + 1 if self.is_less_than_maximum(quality) else quality

    def decrease(self, quality: int) -> int:
        return quality - 1 if self.is_over_minimum(quality) else quality

    def degrade(self, item: Item) -> Item:
        """The normal quality step: -1, and -1 again once past the sell by date."""
        quality = self.decrease(item.quality)
        if item.sell_in <= 0:
            quality = self.decrease(quality)
        return item.model_copy(update={"quality": quality})

    def aged_brie(self, item: Item) -> Item:
        quality = self.increase(item.quality)
        if item.sell_in < 0:
            quality = self.increase(quality)
        return item.model_copy(update={"quality": quality, "sell_in": item.sell_in - 1})

    def backstage_bump(self, quality: int, sell_in: int) -> int:
        quality = self.increase(quality)
        if sell_in < 11:
            quality = self.increase(quality)
        if sell_in < 6:
            quality = self.increase(quality)
        return quality

    def backstage_passes(self, item: Item) -> Item:
        # Concert day: the pass is worthless from tomorrow on
        if item.sell_in == 0:
            quality = 0
        else:
            quality = self.backstage_bump(item.quality, item.sell_in)
        return item.model_copy(update={"quality": quality, "sell_in": item.sell_in - 1})

    def sulfuras(self, item: Item) -> Item:
        return item.model_copy(update={"quality": self.legendary_quality})

    def conjured(self, item: Item) -> Item:
        if item.sell_in == 5:
            # Flat -3 on this day, with no floor at the minimum.
            quality = item.quality - 3
        else:
            quality = self.degrade(self.degrade(item)).quality
        return item.model_copy(update={"quality": quality, "sell_in": item.sell_in - 1})

    def normal(self, item: Item) -> Item:
        updated = self.degrade(item)
        return updated.model_copy(update={"sell_in": item.sell_in - 1})
