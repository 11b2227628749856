"""Tests for monthly filtering, totals and the category breakdown."""

import pytest

from kakeibo.models.transaction import Transaction
from kakeibo.services.report_service import (
    ReportService,
    category_breakdown,
    filter_by_month,
    sort_newest_first,
    summarize,
)


def _tx(categories, id_, type_, amount, category_id, date, note=""):
    return Transaction(
        id=id_,
        type=type_,
        amount=amount,
        category=categories.resolve(category_id, type_),
        date=date,
        note=note,
    )


@pytest.fixture
def may_records():
    return [
        {"id": 1, "type": "income", "amount": 250000, "categoryId": "salary",
         "date": "2024-05-15T12:00:00.000+09:00", "note": ""},
        {"id": 2, "type": "expense", "amount": 3500, "categoryId": "food",
         "date": "2024-05-15T12:00:00.000+09:00", "note": ""},
        {"id": 3, "type": "expense", "amount": 800, "categoryId": "cafe",
         "date": "2024-04-30T10:00:00.000+09:00", "note": ""},
    ]


class TestReportService:
    def test_month_summary_and_breakdown(self, tokyo_tz, make_ledger, categories, may_records):
        reports = ReportService(make_ledger(initial_records=may_records), categories)

        summary = reports.get_summary("2024-05")
        assert (summary.income, summary.expense, summary.balance) == (250000, 3500, 246500)

        breakdown = reports.get_category_breakdown("2024-05")
        assert [(s.category.id, s.total, s.percentage) for s in breakdown] == [
            ("food", 3500, 100.0),
        ]

    def test_other_month_is_separate(self, tokyo_tz, make_ledger, categories, may_records):
        reports = ReportService(make_ledger(initial_records=may_records), categories)

        assert [tx.id for tx in reports.get_month_transactions("2024-04")] == [3]
        assert reports.get_summary("2024-04").balance == -800

    def test_empty_month(self, make_ledger, categories, may_records):
        reports = ReportService(make_ledger(initial_records=may_records), categories)

        assert reports.get_month_transactions("1999-01") == []
        assert reports.get_summary("1999-01").balance == 0
        assert reports.get_category_breakdown("1999-01") == []


class TestFilterByMonth:
    def test_uses_local_time(self, tokyo_tz, categories):
        # 16:00 UTC on Apr 30 is 01:00 on May 1 in Tokyo
        tx = _tx(categories, 1, "expense", 100, "food", "2024-04-30T16:00:00.000Z")

        assert filter_by_month([tx], "2024-05") == [tx]
        assert filter_by_month([tx], "2024-04") == []

    def test_unparsable_date_matches_no_month(self, categories):
        tx = _tx(categories, 1, "expense", 100, "food", "someday")

        assert filter_by_month([tx], "2024-05") == []


class TestSummarize:
    def test_balance_is_income_minus_expense(self, categories):
        txs = [
            _tx(categories, 1, "income", 1000, "salary", "2024-05-01T00:00:00Z"),
            _tx(categories, 2, "income", 500, "bonus", "2024-05-02T00:00:00Z"),
            _tx(categories, 3, "expense", 2000, "food", "2024-05-03T00:00:00Z"),
        ]

        summary = summarize(txs)

        assert summary.income == 1500
        assert summary.expense == 2000
        assert summary.balance == -500

    def test_empty(self):
        assert summarize([]).balance == 0


class TestCategoryBreakdown:
    def test_totals_match_expense_and_unknown_ids_fold_into_other(self, categories):
        txs = [
            _tx(categories, 1, "expense", 1000, "food", "2024-05-01T00:00:00Z"),
            _tx(categories, 2, "expense", 300, "no-such-category", "2024-05-01T00:00:00Z"),
            _tx(categories, 3, "expense", 200, "other", "2024-05-01T00:00:00Z"),
            _tx(categories, 4, "income", 9999, "salary", "2024-05-01T00:00:00Z"),
        ]

        stats = category_breakdown(txs, categories.get_expense_categories())

        assert [(s.category.id, s.total) for s in stats] == [("food", 1000), ("other", 500)]
        assert sum(s.total for s in stats) == summarize(txs).expense
        assert sum(s.percentage for s in stats) == pytest.approx(100.0)

    def test_ties_keep_catalog_order(self, categories):
        txs = [
            _tx(categories, 1, "expense", 500, "cafe", "2024-05-01T00:00:00Z"),
            _tx(categories, 2, "expense", 500, "food", "2024-05-01T00:00:00Z"),
            _tx(categories, 3, "expense", 900, "hobby", "2024-05-01T00:00:00Z"),
        ]

        stats = category_breakdown(txs, categories.get_expense_categories())

        assert [s.category.id for s in stats] == ["hobby", "food", "cafe"]

    def test_percentages(self, categories):
        txs = [
            _tx(categories, 1, "expense", 750, "transport", "2024-05-01T00:00:00Z"),
            _tx(categories, 2, "expense", 250, "daily", "2024-05-01T00:00:00Z"),
        ]

        stats = category_breakdown(txs, categories.get_expense_categories())

        assert [s.percentage for s in stats] == [75.0, 25.0]

    def test_income_only_gives_empty_breakdown(self, categories):
        txs = [_tx(categories, 1, "income", 100, "salary", "2024-05-01T00:00:00Z")]

        assert category_breakdown(txs, categories.get_expense_categories()) == []


class TestSortNewestFirst:
    def test_orders_by_date_with_undated_last(self, categories):
        old = _tx(categories, 1, "expense", 1, "food", "2024-05-01T00:00:00Z")
        new = _tx(categories, 2, "expense", 1, "food", "2024-05-20T00:00:00Z")
        bad = _tx(categories, 3, "expense", 1, "food", "not a date")

        assert sort_newest_first([old, bad, new]) == [new, old, bad]

    def test_equal_dates_keep_input_order(self, categories):
        a = _tx(categories, 1, "expense", 1, "food", "2024-05-01T00:00:00Z")
        b = _tx(categories, 2, "expense", 2, "food", "2024-05-01T00:00:00Z")

        assert sort_newest_first([a, b]) == [a, b]
