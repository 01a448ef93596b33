import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent
DATA_DIR = os.environ.get("CARFIND_DATA_DIR", str(BASE_DIR / "data"))
VOCAB_FILE = os.environ.get("CARFIND_VOCAB_FILE", "filtered_car_deals.json")
VOCAB_FIELD = os.environ.get("CARFIND_VOCAB_FIELD", "name")
ASCII_ONLY = os.environ.get("CARFIND_ASCII_ONLY", "false").strip().lower() in ("1", "true", "yes", "on")
LOG_LEVEL = os.environ.get("CARFIND_LOG_LEVEL", "INFO")
