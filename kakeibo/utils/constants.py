APP_NAME = "Kakeibo"
APP_WIDTH = 520
APP_HEIGHT = 760
DB_FILE = "kakeibo.db"

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

STORAGE_KEY = "kakeibo_data"
STORAGE_VERSION_KEY = "kakeibo_data_version"
STORAGE_VERSION = 2
STORAGE_POLL_MS = 1000

MAX_AMOUNT_DIGITS = 8
CURRENCY_SYMBOL = "¥"

TRANSACTION_TYPES = ["expense", "income"]

# Order matters: the last entry of each list is the fallback for unknown ids.
EXPENSE_CATEGORIES = [
    {"id": "food",      "name": "Food"},
    {"id": "daily",     "name": "Daily Goods"},
    {"id": "transport", "name": "Transport"},
    {"id": "fashion",   "name": "Clothing"},
    {"id": "social",    "name": "Social"},
    {"id": "credit",    "name": "Card"},
    {"id": "hobby",     "name": "Hobbies"},
    {"id": "cafe",      "name": "Cafe"},
    {"id": "other",     "name": "Other"},
]

INCOME_CATEGORIES = [
    {"id": "salary",       "name": "Salary"},
    {"id": "bonus",        "name": "Bonus"},
    {"id": "other_income", "name": "Other"},
]
