import pytest
from pydantic import ValidationError

from config import Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.api_key is None
        assert settings.alert_cooldown_seconds == 3600
        assert settings.simulated_recipient_count == 150000
        assert settings.forecast_horizon_days == 7

    def test_prefixed_variables_override(self):
        settings = Settings.from_env({
            "MPULSE_API_KEY": "secret",
            "MPULSE_ALERT_COOLDOWN_SECONDS": "120",
            "MPULSE_DEBUG": "yes",
            "MPULSE_LOG_LEVEL": "debug",
            "MPULSE_CORS_ORIGINS": "http://a.test, http://b.test",
        })

        assert settings.api_key == "secret"
        assert settings.alert_cooldown_seconds == 120
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_unrelated_variables_ignored(self):
        settings = Settings.from_env({"API_KEY": "nope", "MPULSE_NOT_A_FIELD": "x"})
        assert settings.api_key is None

    @pytest.mark.parametrize("days", ["0", "-3"])
    def test_forecast_horizon_must_be_positive(self, days):
        with pytest.raises(ValidationError):
            Settings.from_env({"MPULSE_FORECAST_HORIZON_DAYS": days})

    def test_forecast_horizon_assignment_validated(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.forecast_horizon_days = 0
        assert settings.forecast_horizon_days == 7

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"MPULSE_FETCH_TIMEOUT_SECONDS": "soon"})
