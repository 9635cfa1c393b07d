"""Configuration management for the finance dashboard."""

from dataclasses import dataclass, field
from typing import Optional
import streamlit as st

from src.utils.formatters import DEFAULT_CURRENCY_SYMBOL


@dataclass
class AlertThresholds:
    """Alert detection thresholds."""
    default_budget_threshold: int = 80
    urgent_bill_days: int = 1

    def as_detector_config(self) -> dict:
        """Flatten into the config dict the alert detectors read."""
        return {
            "default_threshold": self.default_budget_threshold,
            "urgent_days": self.urgent_bill_days,
        }


@dataclass
class ApiConfig:
    """Backend connection settings."""
    base_url: str = "http://localhost:8080/api"
    timeout_seconds: float = 10.0


@dataclass
class AppConfig:
    """Application configuration."""
    api_token: str
    api: ApiConfig = field(default_factory=ApiConfig)
    alerts: AlertThresholds = field(default_factory=AlertThresholds)
    refresh_timeout_seconds: Optional[float] = 30.0
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


def load_config() -> AppConfig:
    """Load configuration from Streamlit secrets."""
    # Required: API token
    token = st.secrets.get("FINANCE_API_TOKEN")
    if not token:
        raise ValueError("FINANCE_API_TOKEN not found in secrets")

    api_section = st.secrets.get("api", {})
    api = ApiConfig(
        base_url=str(api_section.get("base_url", ApiConfig.base_url)),
        timeout_seconds=float(api_section.get("timeout_seconds", ApiConfig.timeout_seconds)),
    )

    alert_section = st.secrets.get("alert_thresholds", {})
    alerts = AlertThresholds(
        default_budget_threshold=int(alert_section.get("default_budget_threshold", 80)),
        urgent_bill_days=int(alert_section.get("urgent_bill_days", 1)),
    )

    refresh_section = st.secrets.get("refresh", {})
    refresh_timeout = refresh_section.get("timeout_seconds", 30.0)

    display_section = st.secrets.get("display", {})

    return AppConfig(
        api_token=token,
        api=api,
        alerts=alerts,
        refresh_timeout_seconds=float(refresh_timeout) if refresh_timeout else None,
        currency_symbol=str(display_section.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL)),
    )


def get_token_from_secrets() -> Optional[str]:
    """Get API token from secrets, returns None if not found."""
    try:
        return st.secrets.get("FINANCE_API_TOKEN")
    except FileNotFoundError:
        return None


def validate_token(token: str) -> bool:
    """Validate that a token string looks like a bearer token (JWT)."""
    if not token:
        return False
    if " " in token or "\n" in token:
        return False
    # JWTs have three dot-separated segments
    return len(token.split(".")) == 3 and all(token.split("."))
