from dataclasses import dataclass
from datetime import datetime

from kakeibo.models.category import Category
from kakeibo.utils.date_helpers import parse_timestamp


@dataclass(frozen=True)
class Transaction:
    id: int                 # creation time in epoch milliseconds
    type: str               # 'expense' | 'income'
    amount: int             # whole yen, always positive
    category: Category
    date: str               # ISO 8601 with UTC offset
    note: str = ""

    @property
    def timestamp(self) -> datetime | None:
        """Local-time datetime for `date`, None if it cannot be parsed."""
        return parse_timestamp(self.date)
