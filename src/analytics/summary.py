"""Aggregations over transactions for the dashboard and the alert summary."""

from decimal import Decimal

import pandas as pd

from src.api.models import MonthlySummary, Transaction


def summarize_transactions(transactions: list[Transaction], year: int, month: int) -> MonthlySummary:
    """Total income and expenses for one calendar month."""
    in_month = [
        t for t in transactions
        if t.transaction_date.year == year and t.transaction_date.month == month
    ]
    income = sum((t.amount for t in in_month if t.is_income), Decimal(0))
    expenses = sum((t.amount for t in in_month if t.is_expense), Decimal(0))

    return MonthlySummary(
        total_income=income,
        total_expenses=expenses,
        transaction_count=len(in_month),
    )


def transactions_frame(transactions: list[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction."""
    return pd.DataFrame(
        [
            {
                'date': pd.Timestamp(t.transaction_date),
                'type': t.type,
                'category': t.category or 'Other',
                'amount': float(t.amount),
            }
            for t in transactions
        ],
        columns=['date', 'type', 'category', 'amount'],
    )


def category_spending(transactions: list[Transaction]) -> pd.DataFrame:
    """Expense totals per category, largest first."""
    df = transactions_frame(transactions)
    expenses = df[df['type'] == 'EXPENSE']
    if expenses.empty:
        return pd.DataFrame(columns=['category', 'amount'])

    return (
        expenses.groupby('category', as_index=False)['amount']
        .sum()
        .sort_values('amount', ascending=False, kind='stable')
        .reset_index(drop=True)
    )


def monthly_trends(transactions: list[Transaction], months: int = 6) -> pd.DataFrame:
    """
    Income vs expenses for the most recent `months` months with activity.

    Anything that is not INCOME counts as an expense here, matching how
    the trend chart has always been drawn. Amounts are rounded to whole
    units; rows are ordered oldest first.
    """
    df = transactions_frame(transactions)
    if df.empty:
        return pd.DataFrame(columns=['month', 'income', 'expenses'])

    df['month'] = df['date'].dt.strftime('%Y-%m')
    df['income'] = df['amount'].where(df['type'] == 'INCOME', 0.0)
    df['expenses'] = df['amount'].where(df['type'] != 'INCOME', 0.0)

    trend = (
        df.groupby('month', as_index=False)[['income', 'expenses']]
        .sum()
        .sort_values('month')
        .tail(months)
        .reset_index(drop=True)
    )
    trend[['income', 'expenses']] = trend[['income', 'expenses']].round().astype(int)
    return trend
