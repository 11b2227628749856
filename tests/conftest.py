"""Pytest configuration and fixtures."""

import time
from datetime import datetime

import pytest

from kakeibo.database.db_manager import DatabaseManager
from kakeibo.database.local_store import LocalStore
from kakeibo.services.category_service import CategoryService
from kakeibo.services.transaction_service import TransactionService

FIXED_NOW = datetime(2024, 5, 15, 12, 0, 0).astimezone()


@pytest.fixture
def db_path(tmp_path):
    """Path of a throwaway SQLite file."""
    return str(tmp_path / "kakeibo.db")


@pytest.fixture
def db(db_path):
    manager = DatabaseManager(db_path)
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def store(db) -> LocalStore:
    return LocalStore(db)


@pytest.fixture
def categories() -> CategoryService:
    return CategoryService()


@pytest.fixture
def make_ledger(store, categories):
    """Build a TransactionService over the shared store with a fixed clock."""

    def _make(initial_records=None, clock=lambda: FIXED_NOW):
        return TransactionService(store, categories, initial_records=initial_records, clock=clock)

    return _make


@pytest.fixture
def tokyo_tz(monkeypatch):
    """Run the test with the process local time zone set to Asia/Tokyo."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
