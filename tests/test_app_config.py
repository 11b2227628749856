import json

import pytest

from kakeibo.utils import app_config


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    folder = tmp_path / "cfg"
    monkeypatch.setattr(app_config, "CONFIG_DIR", folder)
    monkeypatch.setattr(app_config, "CONFIG_FILE", folder / "config.json")
    return folder


def test_defaults_without_file(config_dir):
    assert app_config.load_config() == {}
    assert app_config.get_db_folder() == str(config_dir)
    assert app_config.get_log_level() == "INFO"
    assert app_config.seed_demo_data() is True


def test_corrupt_file_is_ignored(config_dir):
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{broken", encoding="utf-8")

    assert app_config.load_config() == {}


def test_non_object_file_is_ignored(config_dir):
    config_dir.mkdir()
    (config_dir / "config.json").write_text("[1, 2]", encoding="utf-8")

    assert app_config.load_config() == {}


def test_set_and_reset_db_folder(config_dir, tmp_path):
    app_config.set_db_folder(str(tmp_path / "data"))

    assert app_config.get_db_folder() == str(tmp_path / "data")
    assert json.loads((config_dir / "config.json").read_text(encoding="utf-8")) == {
        "db_folder": str(tmp_path / "data"),
    }
    assert not (config_dir / "config.tmp").exists()

    app_config.set_db_folder(None)
    assert app_config.get_db_folder() == str(config_dir)


def test_log_level_and_seed_flag(config_dir):
    app_config.save_config({"log_level": "debug", "seed_demo_data": False})

    assert app_config.get_log_level() == "DEBUG"
    assert app_config.seed_demo_data() is False
