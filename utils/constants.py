import json
import os
from dotenv import load_dotenv
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
Connection settings can be overridden through the environment (or a .env file).
"""

load_dotenv()

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Backend
API_BASE_URL = os.getenv("NURSES_API_URL", _constants["API_BASE_URL"]).rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", _constants["REQUEST_TIMEOUT"]))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", _constants["LOG_LEVEL"]).upper()

# Validation
MIN_AGE = _constants["MIN_AGE"]

# Notifications
MESSAGE_DELAY_SECONDS = float(_constants["MESSAGE_DELAY_SECONDS"])
SUCCESS = "success"
ERROR = "error"

# Table view
PAGE_SIZES = tuple(_constants["PAGE_SIZES"])
DEFAULT_PAGE_SIZE = _constants["DEFAULT_PAGE_SIZE"]
SORT_KEYS = tuple(_constants["SORT_KEYS"])
ASC = "asc"
DESC = "desc"

# Export
EXPORT_SHEET_NAME = _constants["EXPORT_SHEET_NAME"]
EXPORT_COLUMNS = list(_constants["EXPORT_COLUMNS"])

# Fallback error messages
SAVE_ERROR = _constants["SAVE_ERROR"]
DELETE_ERROR = _constants["DELETE_ERROR"]
FETCH_ERROR = _constants["FETCH_ERROR"]
