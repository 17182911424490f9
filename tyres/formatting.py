"""Currency display helpers (INR, en-IN grouping)."""

from __future__ import annotations
import math

from services.config import CURRENCY_SYMBOL


def _group_indian(whole: str) -> str:
    """
    Group digits the Indian way: last three, then pairs.

    Examples:
        '1234567' -> '12,34,567'
    """
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(value: float) -> str:
    """
    Format value as rupees with two decimals, e.g. '-₹1,23,456.78'.

    Non-finite values render as zero.
    """
    amount = float(value)
    if not math.isfinite(amount):
        amount = 0.0
    text = f"{abs(amount):.2f}"
    whole, frac = text.split(".")
    sign = "-" if amount < 0 and text != "0.00" else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{frac}"


def profit_class(value: float) -> str:
    """'profit' for zero or positive values, 'loss' otherwise."""
    return "profit" if value >= 0 else "loss"
