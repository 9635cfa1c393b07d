"""Base alert types and detector interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Optional

from src.api.models import Budget, MonthlySummary, UpcomingBill


class AlertSeverity(Enum):
    """Color-coded urgency levels."""
    RED = "red"
    ORANGE = "orange"
    BLUE = "blue"


class AlertKind(Enum):
    """Kinds of alerts the synthesizer can produce."""
    BILL_DUE = "bill_due"
    BILL_URGENT = "bill_urgent"
    BUDGET_EXCEEDED = "budget_exceeded"
    BUDGET_WARNING = "budget_warning"
    SPENDING_SUMMARY = "spending_summary"


@dataclass(frozen=True)
class AlertInputs:
    """The three datasets a refresh pulls from the data provider."""
    budgets: list[Budget]
    summary: MonthlySummary
    bills: list[UpcomingBill]


@dataclass
class Alert:
    """
    A synthesized notification.

    `params` holds the raw values behind the message (amounts as Decimal,
    categories as str). Turning them into text is done by
    `src.alerts.render.render_message`.
    """
    id: str
    kind: AlertKind
    severity: AlertSeverity
    title: str
    time_label: str
    params: dict[str, Any] = field(default_factory=dict)
    read: bool = False

    def with_read(self, read: bool) -> 'Alert':
        return replace(self, read=read)


class AlertDetector(ABC):
    """Base class for alert detection rules."""

    DEFAULT_CONFIG: dict[str, Any] = {}

    def __init__(self, config: Optional[dict] = None):
        self.config = {**self.DEFAULT_CONFIG, **(config or {})}

    @abstractmethod
    def detect(self, inputs: AlertInputs, today: date) -> list[Alert]:
        """Run detection and return alerts in input order."""
        pass

    @abstractmethod
    def get_config_schema(self) -> dict[str, Any]:
        """Return configuration schema for this detector."""
        pass

    @property
    @abstractmethod
    def alert_kinds(self) -> tuple[AlertKind, ...]:
        """Return the kinds of alerts this detector produces."""
        pass
