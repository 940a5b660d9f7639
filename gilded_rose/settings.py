import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")

# --- Filename Configuration ---
STOCK_FILENAME = os.getenv("STOCK_FILENAME", "stock.csv")
SNAPSHOT_FILENAME_BASE = os.getenv("SNAPSHOT_FILENAME", "stock_snapshot")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "false").lower() in ("1", "true", "yes")

# --- Quality Bounds ---
# Every category except the legendary one stays inside these bounds.
MAXIMUM_QUALITY = int(os.getenv("MAXIMUM_QUALITY", "50"))
MINIMUM_QUALITY = int(os.getenv("MINIMUM_QUALITY", "0"))
LEGENDARY_QUALITY = int(os.getenv("LEGENDARY_QUALITY", "80"))

# --- Snapshot Column Order ---
SNAPSHOT_COLUMNS = [
    "Name",
    "SellIn",
    "Quality",
]

# --- Logging ---
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
