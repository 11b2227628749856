from kakeibo.models.category import Category
from kakeibo.models.summary import CategoryStat, MonthSummary
from kakeibo.models.transaction import Transaction
from kakeibo.services.category_service import CategoryService
from kakeibo.services.transaction_service import TransactionService
from kakeibo.utils.date_helpers import current_month_str, month_of


def filter_by_month(transactions: list[Transaction], month: str) -> list[Transaction]:
    """Transactions whose local-time date falls in `month` (YYYY-MM)."""
    return [tx for tx in transactions if month_of(tx.date) == month]


def sort_newest_first(transactions: list[Transaction]) -> list[Transaction]:
    """Stable sort by timestamp, latest first; unparsable dates go last."""
    dated = [tx for tx in transactions if tx.timestamp is not None]
    undated = [tx for tx in transactions if tx.timestamp is None]
    return sorted(dated, key=lambda tx: tx.timestamp, reverse=True) + undated


def summarize(transactions: list[Transaction]) -> MonthSummary:
    return MonthSummary(
        income=sum(tx.amount for tx in transactions if tx.type == "income"),
        expense=sum(tx.amount for tx in transactions if tx.type == "expense"),
    )


def category_breakdown(
    transactions: list[Transaction], expense_categories: list[Category]
) -> list[CategoryStat]:
    """Per-category expense totals, largest first, zero totals dropped."""
    total_expense = sum(tx.amount for tx in transactions if tx.type == "expense")
    stats = []
    for category in expense_categories:
        total = sum(
            tx.amount for tx in transactions
            if tx.type == "expense" and tx.category.id == category.id
        )
        if total == 0:
            continue
        percentage = total / total_expense * 100 if total_expense > 0 else 0.0
        stats.append(CategoryStat(category=category, total=total, percentage=percentage))
    # sorted() is stable: equal totals keep catalog order
    return sorted(stats, key=lambda s: s.total, reverse=True)


class ReportService:
    def __init__(self, tx_service: TransactionService, category_service: CategoryService):
        self._tx_svc = tx_service
        self._cat_svc = category_service

    def get_month_transactions(self, month: str | None = None) -> list[Transaction]:
        """Transactions for the month, newest first."""
        m = month or current_month_str()
        return sort_newest_first(filter_by_month(self._tx_svc.list(), m))

    def get_summary(self, month: str | None = None) -> MonthSummary:
        m = month or current_month_str()
        return summarize(filter_by_month(self._tx_svc.list(), m))

    def get_category_breakdown(self, month: str | None = None) -> list[CategoryStat]:
        """Return [CategoryStat, ...] for the stats list and pie chart."""
        m = month or current_month_str()
        return category_breakdown(
            filter_by_month(self._tx_svc.list(), m),
            self._cat_svc.get_expense_categories(),
        )
