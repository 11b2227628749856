from kakeibo.utils.constants import CURRENCY_SYMBOL


def format_yen(amount: int, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format whole yen as a currency string, e.g. '¥1,234' or '-¥500'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(int(amount)):,}"


def format_signed_yen(amount: int, type_: str, symbol: str = CURRENCY_SYMBOL) -> str:
    """'+¥1,000' for income, '-¥1,000' for expense."""
    sign = "+" if type_ == "income" else "-"
    return f"{sign}{symbol}{abs(int(amount)):,}"
