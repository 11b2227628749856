import pytest

from kakeibo.utils.amount_input import append_digits, delete_last, is_submittable, parse_amount
from kakeibo.utils.currency import format_signed_yen, format_yen


class TestCurrency:
    @pytest.mark.parametrize("amount, expected", [
        (0, "¥0"),
        (1000, "¥1,000"),
        (246500, "¥246,500"),
        (-500, "-¥500"),
    ])
    def test_format_yen(self, amount, expected):
        assert format_yen(amount) == expected

    def test_signed_by_type(self):
        assert format_signed_yen(3500, "expense") == "-¥3,500"
        assert format_signed_yen(250000, "income") == "+¥250,000"


class TestAmountInput:
    def test_typing_builds_the_number(self):
        text = ""
        for key in ("1", "2", "00"):
            text = append_digits(text, key)

        assert text == "1200"
        assert parse_amount(text) == 1200

    def test_input_stops_at_eight_digits(self):
        text = append_digits("1234567", "00")

        assert text == "123456700"
        assert append_digits(text, "9") == text
        assert append_digits("12345678", "1") == "12345678"

    def test_delete_last(self):
        assert delete_last("120") == "12"
        assert delete_last("") == ""

    @pytest.mark.parametrize("text, ok", [("", False), ("0", False), ("00", False), ("5", True)])
    def test_is_submittable(self, text, ok):
        assert is_submittable(text) is ok

    def test_parse_amount_of_garbage_is_zero(self):
        assert parse_amount("abc") == 0
        assert parse_amount(None) == 0
