"""Turn alert parameters into display text."""

from src.alerts.base import Alert, AlertKind
from src.utils.formatters import DEFAULT_CURRENCY_SYMBOL, format_currency, format_days


def describe_due(days: int) -> str:
    if days < 0:
        return f"is overdue by {format_days(-days)}"
    if days == 0:
        return "is due today"
    if days == 1:
        return "is due tomorrow"
    return f"is due in {days} days"


def render_message(alert: Alert, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Build the human-readable message for an alert."""
    p = alert.params

    def money(value) -> str:
        return format_currency(value, symbol=currency_symbol)

    if alert.kind in (AlertKind.BILL_DUE, AlertKind.BILL_URGENT):
        return f"{p['category']} payment of {money(p['amount'])} {describe_due(p['days_until_due'])}"
    if alert.kind == AlertKind.BUDGET_EXCEEDED:
        return f"{p['category']} expenses exceeded your budget by {money(p['overage'])}"
    if alert.kind == AlertKind.BUDGET_WARNING:
        return f"You've spent {p['percentage']}% of your {p['category']} budget this month"
    if alert.kind == AlertKind.SPENDING_SUMMARY:
        return f"Total expenses: {money(p['total_expenses'])}. Income: {money(p['total_income'])}"
    raise ValueError(f"No message template for {alert.kind}")
