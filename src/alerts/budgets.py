"""Budget threshold detection."""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from src.alerts.base import AlertDetector, Alert, AlertInputs, AlertKind, AlertSeverity
from src.alerts.errors import MalformedRecordError
from src.api.models import Budget

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


def percent_used(budget: Budget) -> Decimal:
    """Share of the budget already spent, in percent."""
    if budget.amount <= 0:
        raise MalformedRecordError("budget", budget.id, f"non-positive amount {budget.amount}")
    return HUNDRED * budget.spent_amount / budget.amount


def whole_percent(percentage: Decimal) -> int:
    """Round a percentage half-up to a whole number."""
    return int(percentage.to_integral_value(rounding=ROUND_HALF_UP))


class BudgetThresholdDetector(AlertDetector):
    """
    Emits at most one alert per budget.

    Thresholds:
    - spent >= 100% of budget: BUDGET_EXCEEDED (red)
    - spent >= alert threshold: BUDGET_WARNING (orange)

    Budgets without their own threshold use `default_threshold`.
    """

    DEFAULT_CONFIG = {
        "default_threshold": 80,
    }

    @property
    def alert_kinds(self) -> tuple[AlertKind, ...]:
        return (AlertKind.BUDGET_EXCEEDED, AlertKind.BUDGET_WARNING)

    def detect(self, inputs: AlertInputs, today: date) -> list[Alert]:
        alerts = []
        for budget in inputs.budgets:
            try:
                alert = self._check_budget(budget)
            except MalformedRecordError as e:
                logger.warning(f"Skipping budget: {e}")
                continue
            if alert:
                alerts.append(alert)
        return alerts

    def _check_budget(self, budget: Budget) -> Optional[Alert]:
        percentage = percent_used(budget)
        threshold = budget.alert_threshold
        if threshold is None:
            threshold = self.config["default_threshold"]

        if percentage >= HUNDRED:
            return self._create_exceeded_alert(budget, percentage)
        if percentage >= threshold:
            return self._create_warning_alert(budget, percentage, threshold)
        return None

    def _create_exceeded_alert(self, budget: Budget, percentage: Decimal) -> Alert:
        return Alert(
            id=f"budget-over-{budget.id}",
            kind=AlertKind.BUDGET_EXCEEDED,
            severity=AlertSeverity.RED,
            title="Over Budget",
            time_label="Recently",
            params={
                "category": budget.category,
                "budgeted": budget.amount,
                "spent": budget.spent_amount,
                "overage": abs(budget.amount - budget.spent_amount),
                "percentage": whole_percent(percentage),
            },
        )

    def _create_warning_alert(self, budget: Budget, percentage: Decimal, threshold: Decimal) -> Alert:
        return Alert(
            id=f"budget-warning-{budget.id}",
            kind=AlertKind.BUDGET_WARNING,
            severity=AlertSeverity.ORANGE,
            title="Budget Alert",
            time_label="Recently",
            params={
                "category": budget.category,
                "budgeted": budget.amount,
                "spent": budget.spent_amount,
                "percentage": whole_percent(percentage),
                "threshold": threshold,
            },
        )

    def get_config_schema(self) -> dict:
        return {
            "default_threshold": {
                "type": "int",
                "default": 80,
                "min": 0,
                "max": 100,
                "description": "Percent of budget that triggers a warning when the budget sets none"
            }
        }
