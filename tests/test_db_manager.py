import os

from kakeibo.database.db_manager import DatabaseManager


def test_initialize_creates_tables_and_default_settings(db):
    tables = {
        row["name"] for row in db.get_connection().execute(
            "SELECT name FROM sqlite_master WHERE type = 'table'"
        )
    }

    assert {"local_storage", "app_settings"} <= tables
    assert db.get_setting("appearance_mode") == "system"
    assert db.get_setting("date_format") == "YYYY/MM/DD"


def test_settings_persist_and_are_not_reseeded(db_path, db):
    db.set_setting("appearance_mode", "dark")

    again = DatabaseManager(db_path)
    try:
        again.initialize()
        assert again.get_setting("appearance_mode") == "dark"
        assert again.get_setting("missing", "fallback") == "fallback"
    finally:
        again.close()


def test_open_in_folder_creates_folder(tmp_path):
    folder = tmp_path / "nested" / "data"

    db = DatabaseManager.open_in_folder(str(folder))
    try:
        assert os.path.isfile(folder / "kakeibo.db")
    finally:
        db.close()
