"""REST client for the finance backend."""

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional, TypeVar

import requests
from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ValidationError

from src.alerts.errors import MalformedRecordError
from src.analytics.summary import summarize_transactions
from src.api.models import Budget, MonthlySummary, Transaction, UpcomingBill
from src.api.provider import FinanceDataProvider

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """Raised when the backend cannot be reached or returns an error."""

    def __init__(self, path: str, message: str, status_code: Optional[int] = None):
        self.path = path
        self.status_code = status_code
        prefix = f"HTTP {status_code} " if status_code else ""
        super().__init__(f"{prefix}{path}: {message}")


def parse_records(records: list[dict], model: type[ModelT], record_type: str) -> list[ModelT]:
    """Validate raw records, logging and skipping the ones that do not fit the model."""
    parsed = []
    for raw in records:
        try:
            parsed.append(model.model_validate(raw))
        except ValidationError as e:
            err = MalformedRecordError(record_type, raw.get("id") if isinstance(raw, dict) else None,
                                       f"{e.error_count()} validation error(s)")
            logger.warning(f"Skipping record: {err}")
    return parsed


class FinanceClient(FinanceDataProvider):
    """Thin wrapper over the backend's `/api` endpoints."""

    def __init__(self, base_url: str, access_token: str, timeout: float = 10.0,
                 clock: Callable[[], datetime] = datetime.now,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.clock = clock
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        })

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        """GET a path and unwrap the `data` envelope."""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise ApiError(path, "request timed out") from e
        except requests.RequestException as e:
            raise ApiError(path, f"network error: {e}") from e

        if response.status_code != 200:
            raise ApiError(path, response.text[:200], status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise ApiError(path, "invalid JSON in response") from e

        if isinstance(body, dict):
            if body.get("success") is False:
                raise ApiError(path, body.get("message") or "request unsuccessful")
            if "data" in body:
                return body["data"]
        return body

    def _get_list(self, path: str, params: Optional[dict] = None) -> list:
        data = self._get(path, params)
        if not isinstance(data, list):
            raise ApiError(path, "expected a list in data")
        return data

    def list_budgets(self) -> list[Budget]:
        today = self.clock().date()
        raw = self._get_list("/budgets/period", params={"month": today.month, "year": today.year})
        budgets = parse_records(raw, Budget, "budget")
        logger.info(f"Fetched {len(budgets)} budgets for {today:%Y-%m}")
        return budgets

    def get_transactions(self, start: Optional[date] = None, end: Optional[date] = None) -> list[Transaction]:
        """Fetch transactions, optionally limited to a date range."""
        if start is None and end is None:
            raw = self._get_list("/transactions")
        else:
            params = {}
            if start:
                params["startDate"] = start.isoformat()
            if end:
                params["endDate"] = end.isoformat()
            raw = self._get_list("/transactions/filter", params=params)
        transactions = parse_records(raw, Transaction, "transaction")
        logger.info(f"Fetched {len(transactions)} transactions")
        return transactions

    def get_monthly_summary(self) -> MonthlySummary:
        today = self.clock().date()
        start = today.replace(day=1)
        end = start + relativedelta(months=1, days=-1)
        transactions = self.get_transactions(start, end)
        return summarize_transactions(transactions, today.year, today.month)

    def list_upcoming_recurring(self) -> list[UpcomingBill]:
        raw = self._get_list("/transactions/recurring/upcoming")
        bills = parse_records(raw, UpcomingBill, "bill")
        logger.info(f"Fetched {len(bills)} upcoming bills")
        return bills

    def test_connection(self) -> bool:
        """Check that the backend answers its health endpoint."""
        try:
            self._get("/health")
            return True
        except ApiError as e:
            logger.error(f"Health check failed: {e}")
            return False
