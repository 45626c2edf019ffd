"""
Test suite for template engine settings.
"""

import pytest

from template_engine.config import Defaults, Settings, get_settings


@pytest.mark.unit
class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()
        assert settings.descriptive_name_length == Defaults.DESCRIPTIVE_NAME_LENGTH
        assert settings.long_timeout_warning_seconds == 3600
        assert settings.auto_fix_timeout_margin_seconds == 60

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TEMPLATE_ENGINE_LONG_TIMEOUT_WARNING_SECONDS", "1200")
        monkeypatch.setenv("TEMPLATE_ENGINE_CONDITIONAL_MIN_AGENTS", "3")
        settings = Settings()
        assert settings.long_timeout_warning_seconds == 1200
        assert settings.conditional_min_agents == 3

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_to_dict(self):
        data = Settings().to_dict()
        assert data["suggest_more_agents_below"] == Defaults.SUGGEST_MORE_AGENTS_BELOW
