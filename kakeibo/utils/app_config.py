"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Stores user preferences that must be known before opening the DB (db_folder,
log_level, seed_demo_data). Config lives in ~/.kakeibo/config.json.
"""
import json
import os
from pathlib import Path

CONFIG_DIR = Path.home() / ".kakeibo"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_LOG_LEVEL = "INFO"


def load_config() -> dict:
    """Returns {} on a missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Creates ~/.kakeibo/ if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def get_db_folder() -> str:
    """Return config["db_folder"], or the config directory when unset."""
    return load_config().get("db_folder") or str(CONFIG_DIR)


def set_db_folder(path: str | None) -> None:
    """Update db_folder in config and save."""
    config = load_config()
    if path is None:
        config.pop("db_folder", None)
    else:
        config["db_folder"] = path
    save_config(config)


def get_log_level() -> str:
    return str(load_config().get("log_level", DEFAULT_LOG_LEVEL)).upper()


def seed_demo_data() -> bool:
    """Whether an empty ledger should show the sample transactions."""
    return bool(load_config().get("seed_demo_data", True))
