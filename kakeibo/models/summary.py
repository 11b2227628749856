from dataclasses import dataclass

from kakeibo.models.category import Category


@dataclass(frozen=True)
class MonthSummary:
    income: int = 0
    expense: int = 0

    @property
    def balance(self) -> int:
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryStat:
    category: Category
    total: int
    percentage: float   # 0-100
