"""Runtime configuration defaults for persistence and logging."""

from __future__ import annotations

import os

_DATA_DIR_ENV = "FOODCOURT_DATA_DIR"
_LOG_PATH_ENV = "FOODCOURT_LOG_PATH"
_LOG_LEVEL_ENV = "FOODCOURT_LOG_LEVEL"

DATA_DIR = os.environ.get(_DATA_DIR_ENV, "").strip() or "."
LOG_PATH = os.environ.get(_LOG_PATH_ENV, "").strip() or "/tmp/foodcourt.log"
LOG_LEVEL = os.environ.get(_LOG_LEVEL_ENV, "DEBUG").strip().upper() or "DEBUG"

# One file per collection, named after the collection.
USERS = "users"
OWNERS = "owners"
ADMINS = "admins"
RESTAURANTS = "restaurants"
FOODS = "foods"
CART = "cart"
ORDERS = "orders"

COLLECTION_FILES: dict[str, str] = {
    name: f"{name}.json" for name in (USERS, OWNERS, ADMINS, RESTAURANTS, FOODS, CART, ORDERS)
}

SECURITY_CODE_MIN = 1000
SECURITY_CODE_MAX = 9999

# Numeric ids and passwords are 32-bit unsigned.
UNSIGNED_MAX = 2**32 - 1
