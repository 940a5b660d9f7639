import json
import logging
from pathlib import Path
import pandas as pd

from . import settings
from . import utils
from .schemas import Item

logger = logging.getLogger(__name__)


def load_stock(file_path: Path) -> list[Item] | None:
    """
    Reads a stock CSV (Name, SellIn, Quality) into Item models.
    Returns None when the file can't be read. Rows that don't match the
    schema raise pydantic's ValidationError for the caller to handle.
    """
    df = utils.load_csv(file_path)
    if df is None:
        return None

    missing = [col for col in settings.SNAPSHOT_COLUMNS if col not in df.columns]
    if missing:
        logger.error(f"❌ {file_path.name} is missing column(s): {', '.join(missing)}")
        return None

    df = df[settings.SNAPSHOT_COLUMNS]
    items = [Item(**row) for row in df.to_dict("records")]
    logger.info(f"✅ Loaded {len(items)} item(s) from {file_path.name}.")
    return items


def to_dataframe(items: list[Item]) -> pd.DataFrame:
    """Tabulates items using the CSV column names, preserving their order."""
    records = [item.model_dump(by_alias=True) for item in items]
    return pd.DataFrame(records, columns=settings.SNAPSHOT_COLUMNS)


def save_outputs(items: list[Item]) -> Path:
    """Saves the current stock to CSV and conditionally to JSON, with dated filenames."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{settings.SNAPSHOT_FILENAME_BASE}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{settings.SNAPSHOT_FILENAME_BASE}_{date_suffix}.json"

    to_dataframe(items).to_csv(csv_path, index=False)
    logger.info(f"✅ Stock snapshot saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w") as f:
            json_data = [item.model_dump(by_alias=True) for item in items]
            json.dump(json_data, f, indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("Skipping JSON file save as per configuration.")

    return csv_path
