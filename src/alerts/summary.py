"""Monthly spending summary."""

from datetime import date

from src.alerts.base import AlertDetector, Alert, AlertInputs, AlertKind, AlertSeverity

SPENDING_SUMMARY_ID = "spending-summary"


class SpendingSummaryDetector(AlertDetector):
    """Emits a single informational alert once anything has been spent this period."""

    @property
    def alert_kinds(self) -> tuple[AlertKind, ...]:
        return (AlertKind.SPENDING_SUMMARY,)

    def detect(self, inputs: AlertInputs, today: date) -> list[Alert]:
        summary = inputs.summary
        if summary.total_expenses <= 0:
            return []

        return [Alert(
            id=SPENDING_SUMMARY_ID,
            kind=AlertKind.SPENDING_SUMMARY,
            severity=AlertSeverity.BLUE,
            title="Monthly Summary",
            time_label="Today",
            params={
                "total_expenses": summary.total_expenses,
                "total_income": summary.total_income,
            },
        )]

    def get_config_schema(self) -> dict:
        return {}
