"""Pydantic models for finance backend data."""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FinanceModel(BaseModel):
    """Base model accepting camelCase backend fields and snake_case names."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Budget(FinanceModel):
    """Budget for one category in one month."""
    id: str
    category: str
    amount: Decimal
    spent_amount: Decimal = Field(
        default=Decimal(0),
        validation_alias=AliasChoices("spentAmount", "spent_amount", "spent"),
    )
    alert_threshold: Optional[Decimal] = Field(
        default=None,
        validation_alias=AliasChoices("alertThreshold", "alert_threshold"),
    )
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value)

    @field_validator("spent_amount", mode="before")
    @classmethod
    def _null_spent_is_zero(cls, value):
        return Decimal(0) if value is None else value

    @property
    def remaining_amount(self) -> Decimal:
        return self.amount - self.spent_amount


class MonthlySummary(FinanceModel):
    """Income and expense totals for the current period."""
    total_income: Decimal = Field(
        default=Decimal(0),
        validation_alias=AliasChoices("totalIncome", "total_income"),
    )
    total_expenses: Decimal = Field(
        default=Decimal(0),
        validation_alias=AliasChoices("totalExpenses", "total_expenses"),
    )
    transaction_count: int = Field(
        default=0,
        validation_alias=AliasChoices("totalTransactions", "transaction_count"),
    )

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expenses


class UpcomingBill(FinanceModel):
    """Next occurrence of a recurring transaction."""
    id: str
    category: str
    amount: Decimal
    next_due_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices("nextDueDate", "next_due_date"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value)


class Transaction(FinanceModel):
    """Backend transaction record."""
    id: str
    amount: Decimal
    type: str
    category: Optional[str] = None
    currency: Optional[str] = None
    transaction_date: date = Field(
        validation_alias=AliasChoices("transactionDate", "transaction_date", "date"),
    )
    description: Optional[str] = None
    merchant: Optional[str] = None
    is_recurring: bool = Field(
        default=False,
        validation_alias=AliasChoices("isRecurring", "is_recurring"),
    )
    recurring_frequency: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("recurringFrequency", "recurring_frequency"),
    )
    next_due_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices("nextDueDate", "next_due_date"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _upper_type(cls, value):
        return str(value).upper()

    @property
    def is_income(self) -> bool:
        return self.type == "INCOME"

    @property
    def is_expense(self) -> bool:
        return self.type == "EXPENSE"
