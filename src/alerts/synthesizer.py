"""Combine the detectors into one ordered alert list."""

from datetime import date, datetime
from typing import Optional, Union

from src.alerts.base import Alert, AlertDetector, AlertInputs
from src.alerts.bills import BillDueDetector
from src.alerts.budgets import BudgetThresholdDetector
from src.alerts.summary import SpendingSummaryDetector
from src.api.models import Budget, MonthlySummary, UpcomingBill

# Output order: bills, then budgets, then the summary
DETECTORS: tuple[type[AlertDetector], ...] = (
    BillDueDetector,
    BudgetThresholdDetector,
    SpendingSummaryDetector,
)


def build_detectors(config: Optional[dict] = None) -> list[AlertDetector]:
    """Instantiate every detector in output order with a shared config dict."""
    return [detector_class(config) for detector_class in DETECTORS]


def synthesize(budgets: list[Budget], summary: MonthlySummary, bills: list[UpcomingBill],
               now: Union[datetime, date], config: Optional[dict] = None) -> list[Alert]:
    """
    Derive alerts from the current budgets, monthly summary and upcoming bills.

    Pure function of its arguments: the clock is passed in as `now`, and only
    its calendar date is used. Records that cannot be evaluated are logged
    and skipped. The rest of the batch still produces alerts.
    """
    today = now.date() if isinstance(now, datetime) else now
    inputs = AlertInputs(budgets=list(budgets), summary=summary, bills=list(bills))

    alerts = []
    for detector in build_detectors(config):
        alerts.extend(detector.detect(inputs, today))
    return alerts
