from datetime import date

from kakeibo.models.transaction import Transaction
from kakeibo.utils.date_helpers import add_months, format_month, friendly_month, month_of, today


class MonthNavigator:
    """The month currently shown, shared by the Home and Stats tabs.

    Keeps a full date rather than just a month so the day carries over
    between moves (clamped to month end, e.g. Jan 31 -> Feb 29).
    """

    def __init__(self, selected: date | None = None):
        self.selected = selected or today()

    @property
    def month(self) -> str:
        return format_month(self.selected)

    @property
    def label(self) -> str:
        return friendly_month(self.month)

    def change_month(self, diff: int) -> str:
        """Move by `diff` calendar months (-1 previous, +1 next)."""
        self.selected = add_months(self.selected, diff)
        return self.month

    def contains(self, tx: Transaction) -> bool:
        return month_of(tx.date) == self.month
