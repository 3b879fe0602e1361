# /app/core/config.py

"""
Runtime configuration for the records backend.

Every setting is read from the environment once, at import time. A `.env`
file in the working directory is loaded first so local development does not
need exported variables.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Storage Backend Selection ---
# "true" stores every collection in the SQL `storage_entries` table,
# anything else keeps one JSON file per collection under DATA_DIR.
USE_SQL_STORAGE = os.getenv("USE_SQL_STORAGE", "false").lower() == "true"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./pravah.db")
DATA_DIR = os.getenv("DATA_DIR", "app/data")

# Every collection entry is stored under this prefix, e.g. "pravah_students".
STORAGE_KEY_PREFIX = os.getenv("STORAGE_KEY_PREFIX", "pravah_")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
