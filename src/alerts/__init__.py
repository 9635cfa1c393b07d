# Alert synthesis
from src.alerts.base import Alert, AlertKind, AlertSeverity, AlertInputs, AlertDetector
from src.alerts.errors import DataFetchError, MalformedRecordError
from src.alerts.bills import BillDueDetector
from src.alerts.budgets import BudgetThresholdDetector
from src.alerts.summary import SpendingSummaryDetector
from src.alerts.synthesizer import synthesize, build_detectors
from src.alerts.render import render_message
from src.alerts.store import AlertStore
from src.alerts.refresh import AlertRefresher

__all__ = [
    'Alert',
    'AlertKind',
    'AlertSeverity',
    'AlertInputs',
    'AlertDetector',
    'DataFetchError',
    'MalformedRecordError',
    'BillDueDetector',
    'BudgetThresholdDetector',
    'SpendingSummaryDetector',
    'synthesize',
    'build_detectors',
    'render_message',
    'AlertStore',
    'AlertRefresher',
]
