import logging
from typing import Optional

from gilded_rose import settings
from gilded_rose.rules import QualityUpdateRules, UpdateRules
from gilded_rose.schemas import Item

logger = logging.getLogger(__name__)


class GildedRose:
    """
    Gilded Rose Inn stock.

    Pass default items and update rules as necessary. Items handed to the
    constructor are held as given; admission checks only apply to add_item.
    """

    def __init__(
        self,
        items: Optional[list[Item]] = None,
        update_rules: Optional[UpdateRules] = None,
    ):
        self.items: list[Item] = list(items) if items is not None else []
        self.update_rules = update_rules if update_rules is not None else QualityUpdateRules()

    def __len__(self) -> int:
        return len(self.items)

    def add_item(self, item: Item) -> None:
        """Appends an item unless it is non-legendary and over the maximum quality."""
        if not item.is_legendary and item.quality > settings.MAXIMUM_QUALITY:
            logger.warning(
                f"⚠️ Rejected '{item.name}': quality {item.quality} is above "
                f"{settings.MAXIMUM_QUALITY}."
            )
            return

        self.items.append(item)

    def end_of_day(self) -> None:
        """Advances every held item by one day, keeping their order."""
        logger.info(f"Advancing {len(self.items)} item(s) by one day...")
        self.items = [self.update_rules.update_item(item) for item in self.items]
