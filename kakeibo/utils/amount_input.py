"""Keypad amount buffer used by the add-transaction form.

The amount is kept as a digit string so leading zeros and the length limit
are easy to handle; it is only converted to an int on submit.
"""
from kakeibo.utils.constants import MAX_AMOUNT_DIGITS


def append_digits(current: str, digits: str) -> str:
    """Append a keypress ("0"-"9" or "00"); ignored once the buffer is full."""
    current = current or ""
    if len(current) >= MAX_AMOUNT_DIGITS:
        return current
    return current + digits


def delete_last(current: str) -> str:
    return (current or "")[:-1]


def parse_amount(text: str) -> int:
    """Integer value of the buffer; 0 when empty or not a number."""
    try:
        return int(text)
    except (TypeError, ValueError):
        return 0


def is_submittable(text: str) -> bool:
    return parse_amount(text) > 0
