from datetime import datetime, timedelta

from kakeibo.utils.date_helpers import to_iso_timestamp


def demo_records(now: datetime) -> list[dict]:
    """Sample ledger shown until the user records something."""
    rows = [
        (1, "income",  250000, "salary",  now,                      "This month's pay"),
        (2, "expense", 3500,   "food",    now,                      "Supermarket"),
        (3, "expense", 800,    "cafe",    now - timedelta(days=1),  "Coffee"),
        (4, "expense", 12000,  "fashion", now - timedelta(days=2),  "Shoes"),
    ]
    return [
        {
            "id": id_,
            "type": type_,
            "amount": amount,
            "categoryId": category_id,
            "date": to_iso_timestamp(when),
            "note": note,
        }
        for id_, type_, amount, category_id, when, note in rows
    ]
