"""Tests for formatting utilities."""

import pytest
from decimal import Decimal
from datetime import date, datetime

from src.utils.formatters import (
    format_currency,
    format_date,
    format_month,
    format_days,
    format_change
)


class TestFormatCurrency:
    """Tests for currency formatting."""

    def test_format_positive_amount(self):
        """Test formatting positive amount."""
        assert format_currency(Decimal("50")) == "₹50.00"

    def test_format_negative_amount(self):
        """Test formatting negative amount."""
        assert format_currency(Decimal("-25")) == "-₹25.00"

    def test_format_with_sign_positive(self):
        """Test formatting with sign for positive."""
        assert format_currency(Decimal("50"), show_sign=True) == "+₹50.00"

    def test_format_large_amount(self):
        """Test formatting large amount with commas."""
        assert format_currency(Decimal("1234567.891"), symbol="$") == "$1,234,567.89"

    def test_format_int(self):
        """Test formatting a plain int."""
        assert format_currency(200) == "₹200.00"


class TestFormatDate:
    """Tests for date formatting."""

    def test_format_date_object(self):
        """Test formatting a date object."""
        assert format_date(date(2024, 1, 15)) == "Jan 15, 2024"

    def test_format_datetime_object(self):
        """Test formatting a datetime object."""
        assert format_date(datetime(2024, 1, 15, 10, 30)) == "Jan 15, 2024"

    def test_format_date_string(self):
        """Test formatting a date string."""
        assert format_date("2024-01-15") == "Jan 15, 2024"


class TestFormatMonth:
    """Tests for month formatting."""

    def test_format_month(self):
        assert format_month("2024-01") == "January 2024"

    def test_format_invalid_month(self):
        """Test invalid input is returned unchanged."""
        assert format_month("invalid") == "invalid"


class TestFormatDays:
    """Tests for day counts."""

    @pytest.mark.parametrize("days,expected", [(1, "1 day"), (2, "2 days"), (0, "0 days")])
    def test_plural(self, days, expected):
        assert format_days(days) == expected


class TestFormatChange:
    """Tests for change formatting."""

    def test_positive_change(self):
        assert format_change(110, 100) == "+10.0%"

    def test_negative_change(self):
        assert format_change(90, 100) == "-10.0%"

    def test_from_zero(self):
        assert format_change(100, 0) == "+100%"

    def test_zero_to_zero(self):
        assert format_change(0, 0) == "0%"
