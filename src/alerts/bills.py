"""Upcoming bill detection."""

import logging
from datetime import date

from src.alerts.base import AlertDetector, Alert, AlertInputs, AlertKind, AlertSeverity
from src.alerts.errors import MalformedRecordError
from src.api.models import UpcomingBill

logger = logging.getLogger(__name__)


def days_until(due: date, today: date) -> int:
    """
    Whole calendar days from today to the due date.

    Both sides are dates, so the time of day never shifts the result. For a
    due date at midnight this is the ceiling of the fractional day
    difference measured from the start of today. Negative when overdue.
    """
    return (due - today).days


def due_time_label(days: int) -> str:
    """Short label for the alert list: Today, Tomorrow, N days or Overdue."""
    if days < 0:
        return "Overdue"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    return f"{days} days"


class BillDueDetector(AlertDetector):
    """
    Emits one alert per upcoming bill.

    Bills due within `urgent_days` (including overdue ones) are urgent and
    red; the rest are orange.
    """

    DEFAULT_CONFIG = {
        "urgent_days": 1,
    }

    @property
    def alert_kinds(self) -> tuple[AlertKind, ...]:
        return (AlertKind.BILL_URGENT, AlertKind.BILL_DUE)

    def detect(self, inputs: AlertInputs, today: date) -> list[Alert]:
        alerts = []
        for bill in inputs.bills:
            try:
                alerts.append(self._create_alert(bill, today))
            except MalformedRecordError as e:
                logger.warning(f"Skipping bill: {e}")
        return alerts

    def _check(self, bill: UpcomingBill) -> date:
        if bill.next_due_date is None:
            raise MalformedRecordError("bill", bill.id, "missing next due date")
        if bill.amount <= 0:
            raise MalformedRecordError("bill", bill.id, f"non-positive amount {bill.amount}")
        return bill.next_due_date

    def _create_alert(self, bill: UpcomingBill, today: date) -> Alert:
        due = self._check(bill)
        days = days_until(due, today)
        is_urgent = days <= self.config["urgent_days"]

        return Alert(
            id=f"bill-{bill.id}",
            kind=AlertKind.BILL_URGENT if is_urgent else AlertKind.BILL_DUE,
            severity=AlertSeverity.RED if is_urgent else AlertSeverity.ORANGE,
            title="Bill Due Soon!" if is_urgent else "Upcoming Bill",
            time_label=due_time_label(days),
            params={
                "category": bill.category,
                "amount": bill.amount,
                "days_until_due": days,
                "due_date": due,
            },
        )

    def get_config_schema(self) -> dict:
        return {
            "urgent_days": {
                "type": "int",
                "default": 1,
                "min": 0,
                "max": 7,
                "description": "Bills due within this many days are flagged urgent"
            }
        }
