"""Formatting utilities for currency and dates."""

from decimal import Decimal
from datetime import date, datetime
from typing import Union

DEFAULT_CURRENCY_SYMBOL = "₹"


def format_currency(amount: Union[Decimal, int, float], symbol: str = DEFAULT_CURRENCY_SYMBOL,
                    show_sign: bool = False) -> str:
    """Format an amount as a currency string."""
    amount = Decimal(str(amount))
    if show_sign and amount >= 0:
        return f"+{symbol}{amount:,.2f}"
    elif amount < 0:
        return f"-{symbol}{abs(amount):,.2f}"
    return f"{symbol}{amount:,.2f}"


def format_date(d: Union[date, datetime, str]) -> str:
    """Format a date for display."""
    if isinstance(d, str):
        d = datetime.fromisoformat(d).date()
    elif isinstance(d, datetime):
        d = d.date()
    return d.strftime("%b %d, %Y")


def format_month(month_str: str) -> str:
    """Format a YYYY-MM month string for display."""
    try:
        d = datetime.strptime(month_str, "%Y-%m")
        return d.strftime("%B %Y")
    except ValueError:
        return month_str


def format_days(days: int) -> str:
    """Format a day count with the right plural."""
    return f"{days} day" if abs(days) == 1 else f"{days} days"


def format_change(current: Union[Decimal, int], previous: Union[Decimal, int]) -> str:
    """Format the change between two values as a percentage."""
    if previous == 0:
        if current == 0:
            return "0%"
        return "+100%" if current > 0 else "-100%"

    change = float((current - previous) / abs(previous))
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.1%}"
