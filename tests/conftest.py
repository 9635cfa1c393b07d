"""Pytest fixtures for finance dashboard tests."""

import time

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.api.models import Budget, MonthlySummary, UpcomingBill, Transaction
from src.api.provider import FinanceDataProvider


@pytest.fixture
def now():
    """Fixed clock, late in the day to catch time-of-day rounding."""
    return datetime(2025, 3, 15, 21, 30)


@pytest.fixture
def today(now):
    return now.date()


@pytest.fixture
def make_budget():
    """Factory for budgets."""
    def _make(budget_id="b1", category="Groceries", amount=1000, spent=0, threshold=80):
        return Budget(
            id=budget_id,
            category=category,
            amount=Decimal(str(amount)),
            spent_amount=Decimal(str(spent)),
            alert_threshold=threshold,
            month=3,
            year=2025,
        )
    return _make


@pytest.fixture
def make_bill(today):
    """Factory for upcoming bills due a number of days from today."""
    def _make(bill_id="r1", category="Rent", amount=500, days=5):
        return UpcomingBill(
            id=bill_id,
            category=category,
            amount=Decimal(str(amount)),
            next_due_date=today + timedelta(days=days),
        )
    return _make


@pytest.fixture
def empty_summary():
    return MonthlySummary(total_income=Decimal("5000"), total_expenses=Decimal("0"))


@pytest.fixture
def spending_summary():
    return MonthlySummary(total_income=Decimal("5000"), total_expenses=Decimal("3000"))


@pytest.fixture
def sample_transactions():
    """A few months of income and expenses."""
    rows = [
        ("t1", "5000", "INCOME", "Salary", date(2025, 1, 1)),
        ("t2", "1200", "EXPENSE", "Rent", date(2025, 1, 3)),
        ("t3", "300.50", "EXPENSE", "Groceries", date(2025, 1, 20)),
        ("t4", "5000", "INCOME", "Salary", date(2025, 2, 1)),
        ("t5", "1200", "EXPENSE", "Rent", date(2025, 2, 3)),
        ("t6", "150", "EXPENSE", None, date(2025, 2, 14)),
        ("t7", "5200", "INCOME", "Salary", date(2025, 3, 1)),
        ("t8", "1200", "EXPENSE", "Rent", date(2025, 3, 3)),
        ("t9", "420.25", "EXPENSE", "Groceries", date(2025, 3, 10)),
    ]
    return [
        Transaction(id=i, amount=Decimal(a), type=t, category=c, transaction_date=d)
        for i, a, t, c, d in rows
    ]


class StaticProvider(FinanceDataProvider):
    """Provider returning fixed data, with optional failures per call."""

    def __init__(self, budgets=None, summary=None, bills=None, fail=None, delay=0.0):
        self.budgets = budgets or []
        self.summary = summary or MonthlySummary()
        self.bills = bills or []
        self.fail = fail or {}
        self.delay = delay
        self.calls = []

    def _call(self, name, value):
        self.calls.append(name)
        if self.delay:
            time.sleep(self.delay)
        if name in self.fail:
            raise self.fail[name]
        return value

    def list_budgets(self):
        return self._call("budgets", self.budgets)

    def get_monthly_summary(self):
        return self._call("summary", self.summary)

    def list_upcoming_recurring(self):
        return self._call("bills", self.bills)


@pytest.fixture
def provider_factory():
    return StaticProvider
