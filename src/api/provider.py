"""Data provider interface consumed by the alert refresh."""

from abc import ABC, abstractmethod

from src.api.models import Budget, MonthlySummary, UpcomingBill


class FinanceDataProvider(ABC):
    """Read operations the alert refresh depends on."""

    @abstractmethod
    def list_budgets(self) -> list[Budget]:
        """Budgets for the current period."""
        pass

    @abstractmethod
    def get_monthly_summary(self) -> MonthlySummary:
        """Income and expense totals for the current period."""
        pass

    @abstractmethod
    def list_upcoming_recurring(self) -> list[UpcomingBill]:
        """Recurring transactions due soon."""
        pass
