from kakeibo.models.category import Category
from kakeibo.utils.constants import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from kakeibo.utils.log import get_logger

log = get_logger(__name__)


def _build(rows: list[dict], type_: str) -> list[Category]:
    return [Category(id=r["id"], name=r["name"], type=type_) for r in rows]


class CategoryService:
    """Read-only catalog of the fixed expense and income categories."""

    def __init__(
        self,
        expense_rows: list[dict] | None = None,
        income_rows: list[dict] | None = None,
    ):
        self._by_type = {
            "expense": _build(expense_rows or EXPENSE_CATEGORIES, "expense"),
            "income": _build(income_rows or INCOME_CATEGORIES, "income"),
        }
        for type_, cats in self._by_type.items():
            ids = [c.id for c in cats]
            if not cats or len(ids) != len(set(ids)):
                raise ValueError(f"{type_} categories must be non-empty with unique ids")

    def get_expense_categories(self) -> list[Category]:
        return list(self._by_type["expense"])

    def get_income_categories(self) -> list[Category]:
        return list(self._by_type["income"])

    def get_for_transaction_type(self, type_: str) -> list[Category]:
        if type_ not in self._by_type:
            raise ValueError(f"Invalid type: {type_}")
        return list(self._by_type[type_])

    def get_default(self, type_: str) -> Category:
        """First category of the list; preselected in the add form."""
        return self.get_for_transaction_type(type_)[0]

    def get_fallback(self, type_: str) -> Category:
        return self.get_for_transaction_type(type_)[-1]

    def resolve(self, category_id: str, type_: str) -> Category:
        """Category with that id, or the list's last ("other") entry."""
        cats = self.get_for_transaction_type(type_)
        for cat in cats:
            if cat.id == category_id:
                return cat
        log.debug("Unknown %s category %r; using %r", type_, category_id, cats[-1].id)
        return cats[-1]
