import logging
from pydantic import ValidationError

from gilded_rose import data_handler, settings
from gilded_rose.inventory import GildedRose
from gilded_rose.logger import setup_logger

logger = logging.getLogger(__name__)


def run_process():
    """
    Loads today's stock, admits it into the inn, advances it by exactly one
    day and saves the resulting snapshot.
    """
    logger.info("--- Starting End of Day Process ---")

    stock_path = settings.INPUT_DIR / settings.STOCK_FILENAME
    try:
        items = data_handler.load_stock(stock_path)
    except ValidationError as e:
        logger.error("❌ Stock validation failed! The data does not match the required schema.")
        logger.error(e)
        return

    if items is None:
        logger.error(f"❌ No stock could be loaded from {stock_path}. Aborting process.")
        return

    inn = GildedRose()
    for item in items:
        inn.add_item(item)

    rejected = len(items) - len(inn)
    if rejected:
        logger.warning(f"⚠️ {rejected} item(s) were rejected at admission.")

    inn.end_of_day()

    logger.info("\n--- Stock After End of Day ---")
    logger.info(data_handler.to_dataframe(inn.items).to_string())

    data_handler.save_outputs(inn.items)

    logger.info("\n--- Process Finished Successfully ---")


if __name__ == "__main__":
    setup_logger()
    run_process()
