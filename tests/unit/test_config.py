"""
Unit tests for settings, logging setup and error payloads.
"""

import pytest
import structlog
from pydantic import ValidationError as PydanticValidationError

from config import Settings, get_settings, configure_logging
from exceptions import (
    AppError,
    AlertNotFoundError,
    InvalidStatusTransitionError,
)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.refresh_delay_seconds == 1.0
        assert settings.forecast_horizon_weeks == 12
        assert settings.elapsed_forecast_weeks == 4
        assert settings.alert_on_status_change is True
        assert settings.random_seed is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RANDOM_SEED", "42")
        monkeypatch.setenv("REFRESH_DELAY_SECONDS", "0.25")

        settings = Settings(_env_file=None)

        assert settings.random_seed == 42
        assert settings.refresh_delay_seconds == 0.25

    def test_elapsed_cannot_exceed_horizon(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, forecast_horizon_weeks=4, elapsed_forecast_weeks=5)

    def test_invalid_environment_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, environment="qa")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_is_production(self):
        assert Settings(_env_file=None, environment="production").is_production


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_structlog(self):
        configure_logging(Settings(_env_file=None, log_level="DEBUG"))

        logger = structlog.get_logger("tests")
        logger.info("logging_configured", check=True)

        assert structlog.is_configured()

        structlog.reset_defaults()

    def test_production_uses_json(self):
        configure_logging(Settings(_env_file=None, environment="production"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

        structlog.reset_defaults()


class TestErrors:
    """Tests for error payloads."""

    def test_not_found_payload(self):
        error = AlertNotFoundError("alert-9")

        payload = error.to_dict()

        assert payload["error"]["code"] == "ALERT_NOT_FOUND"
        assert payload["error"]["details"] == {"id": "alert-9"}
        assert isinstance(error, AppError)

    def test_transition_error_lists_allowed(self):
        error = InvalidStatusTransitionError("ordered", "approved", ["received"])

        assert error.details["allowed_transitions"] == ["received"]
        assert "ordered" in error.message
