from datetime import datetime
from typing import Callable

from kakeibo.database.local_store import LocalStore
from kakeibo.database.migrations import migrate_records
from kakeibo.models.category import Category
from kakeibo.models.transaction import Transaction
from kakeibo.services.category_service import CategoryService
from kakeibo.utils.constants import (
    STORAGE_KEY, STORAGE_VERSION, STORAGE_VERSION_KEY, TRANSACTION_TYPES,
)
from kakeibo.utils.date_helpers import now_local, to_iso_timestamp
from kakeibo.utils.log import get_logger

log = get_logger(__name__)

_REQUIRED_FIELDS = ("id", "type", "amount", "categoryId", "date")


def to_record(tx: Transaction) -> dict:
    """Storage form: the category is kept as its id only."""
    return {
        "id": tx.id,
        "type": tx.type,
        "amount": tx.amount,
        "categoryId": tx.category.id,
        "date": tx.date,
        "note": tx.note,
    }


class TransactionService:
    """The ledger: owns the stored transaction list.

    Transactions are immutable; the only mutations are add (prepend) and
    confirmed delete. Every mutation rewrites the whole slot.
    """

    def __init__(
        self,
        store: LocalStore,
        category_service: CategoryService,
        initial_records: list[dict] | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._categories = category_service
        self._initial = list(initial_records or [])
        self._clock = clock
        self._source: list | None = None
        self._cache: list[Transaction] = []
        self._migrate_stored_records()
        self._last_id = self._max_stored_id()

    # ── Queries ──────────────────────────────────────────────────────────────

    def list(self) -> list[Transaction]:
        """All transactions, newest addition first."""
        records = self._records()
        if records is not self._source:
            self._source = records
            self._cache = [
                tx for tx in (self._from_record(r) for r in records) if tx is not None
            ]
        return list(self._cache)

    # ── Mutations ────────────────────────────────────────────────────────────

    def add(
        self,
        type_: str,
        amount: int,
        category: Category,
        note: str = "",
        date: datetime | None = None,
    ) -> Transaction | None:
        """Prepend a new transaction. Returns None (and stores nothing) for a
        zero or empty amount."""
        if type_ not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid type: {type_}")
        value = int(amount) if amount else 0
        if value <= 0:
            log.debug("Ignoring %s with amount %r", type_, amount)
            return None

        tx = Transaction(
            id=self._next_id(),
            type=type_,
            amount=value,
            category=category,
            date=to_iso_timestamp(date or self._clock()),
            note=note or "",
        )
        self._persist([to_record(tx)] + self._records())
        log.info("Added %s %d (%s)", tx.type, tx.amount, tx.category.id)
        return tx

    def delete(self, tx_id: int, confirm: Callable[[], bool]) -> bool:
        """Remove a transaction once `confirm()` returns True.

        Returns False when declined or when no transaction has that id.
        """
        if not confirm():
            return False
        records = self._records()
        remaining = [
            r for r in records if not (isinstance(r, dict) and r.get("id") == tx_id)
        ]
        if len(remaining) == len(records):
            log.debug("Delete of unknown transaction id %s ignored", tx_id)
            return False
        self._persist(remaining)
        log.info("Deleted transaction %s", tx_id)
        return True

    # ── Internals ────────────────────────────────────────────────────────────

    def _records(self) -> list:
        records = self._store.read(STORAGE_KEY, self._initial)
        return records if isinstance(records, list) else self._initial

    def _persist(self, records: list):
        self._store.write(STORAGE_KEY, records)
        if self._store.read(STORAGE_VERSION_KEY) != STORAGE_VERSION:
            self._store.write(STORAGE_VERSION_KEY, STORAGE_VERSION)

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped past every id already stored (including
        # records adopted from another instance)
        now_ms = int(self._clock().timestamp() * 1000)
        self._last_id = max(now_ms, self._last_id + 1, self._max_stored_id() + 1)
        return self._last_id

    def _max_stored_id(self) -> int:
        return max(
            (r["id"] for r in self._records()
             if isinstance(r, dict) and isinstance(r.get("id"), int)
             and not isinstance(r.get("id"), bool)),
            default=0,
        )

    def _from_record(self, record) -> Transaction | None:
        if not isinstance(record, dict) or any(f not in record for f in _REQUIRED_FIELDS):
            log.warning("Skipping malformed stored transaction: %r", record)
            return None
        type_ = record["type"]
        if type_ not in TRANSACTION_TYPES:
            log.warning("Skipping stored transaction with unknown type %r", type_)
            return None
        try:
            return Transaction(
                id=int(record["id"]),
                type=type_,
                amount=int(record["amount"]),
                category=self._categories.resolve(record["categoryId"], type_),
                date=str(record["date"]),
                note=str(record.get("note") or ""),
            )
        except (TypeError, ValueError):
            log.warning("Skipping malformed stored transaction: %r", record)
            return None

    def _migrate_stored_records(self):
        stored = self._store.read(STORAGE_KEY, None)
        if stored is None:
            return
        if not isinstance(stored, list):
            log.warning("Stored %r is not a list; showing initial data", STORAGE_KEY)
            return
        version = self._store.read(STORAGE_VERSION_KEY, 1)
        if not isinstance(version, int) or isinstance(version, bool):
            version = 1
        if version >= STORAGE_VERSION:
            return
        migrated = migrate_records(stored, version)
        self._store.write(STORAGE_KEY, migrated)
        self._store.write(STORAGE_VERSION_KEY, STORAGE_VERSION)
        log.info(
            "Migrated %d stored transactions from version %d to %d",
            len(migrated), version, STORAGE_VERSION,
        )
