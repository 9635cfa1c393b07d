"""Tests for configuration helpers."""

from src.utils.config import AlertThresholds, validate_token


class TestValidateToken:
    """Tests for token validation."""

    def test_jwt_shape(self):
        assert validate_token("eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiJ1c2VyIn0.sig") is True

    def test_rejects_empty(self):
        assert validate_token("") is False

    def test_rejects_whitespace(self):
        assert validate_token("a.b c.d") is False

    def test_rejects_wrong_segment_count(self):
        assert validate_token("abc.def") is False
        assert validate_token("a..c") is False


class TestAlertThresholds:
    """Tests for the detector config mapping."""

    def test_as_detector_config(self):
        thresholds = AlertThresholds(default_budget_threshold=70, urgent_bill_days=2)
        assert thresholds.as_detector_config() == {"default_threshold": 70, "urgent_days": 2}
