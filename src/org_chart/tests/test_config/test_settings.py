import pytest
from pydantic import ValidationError

from org_chart.config import Settings
from org_chart.validators.config_validators import to_lowercase, to_uppercase


class TestSettings:
    def test_log_level_and_format_are_normalized(self):
        settings = Settings(LOG_LEVEL=" debug ", LOG_FORMAT="JSON")

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "json"

    def test_unknown_log_format_rejected(self):
        with pytest.raises(ValidationError):
            Settings(LOG_FORMAT="xml")

    def test_env_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("SERVICE_NAME", "chart-test")
        monkeypatch.setenv("LOG_TO_STDOUT", "false")

        settings = Settings()

        assert settings.SERVICE_NAME == "chart-test"
        assert settings.LOG_TO_STDOUT is False


def test_case_helpers_pass_none_through():
    assert to_uppercase(None) is None
    assert to_lowercase(None) is None
