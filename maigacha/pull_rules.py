CATEGORY_KEYS = ["common", "rare"]

STORE_DIR_NAME = "maigacha"
STORE_FILE_NAME = "maigacha.json"

# Fatal errors = store file not safe to load
FATAL_MISSING_ITEM_FIELDS = ["name", "category", "weight"]
FATAL_MISSING_RECORD_FIELDS = ["pulled_at", "category", "name"]

DEFAULT_HISTORY_SIZE = 35

DEFAULT_SIMULATIONS = 10_000
MAX_SIMULATIONS = 100_000
