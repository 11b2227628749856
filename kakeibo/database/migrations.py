"""Upgrades for records stored under the ledger slot.

Version 1 records embedded the whole category object:
    {"id": 1, "type": "expense", "amount": 800, "category": {"id": "cafe", ...}, ...}
Version 2 (current) stores only the reference:
    {"id": 1, "type": "expense", "amount": 800, "categoryId": "cafe", ...}
"""
from kakeibo.utils.constants import STORAGE_VERSION


def _inline_category_to_reference(record):
    if not isinstance(record, dict) or "categoryId" in record:
        return record
    migrated = {k: v for k, v in record.items() if k != "category"}
    category = record.get("category")
    if isinstance(category, dict):
        migrated["categoryId"] = category.get("id", "")
    elif isinstance(category, str):
        migrated["categoryId"] = category
    else:
        migrated["categoryId"] = ""
    return migrated


# from_version -> step producing from_version + 1
_STEPS = {
    1: lambda records: [_inline_category_to_reference(r) for r in records],
}


def migrate_records(records: list, from_version: int) -> list:
    """Apply every step from `from_version` up to STORAGE_VERSION."""
    version = from_version
    while version < STORAGE_VERSION:
        records = _STEPS[version](records)
        version += 1
    return records
