"""Tests for dashboard settings."""

import pytest
from pydantic import ValidationError

from auth_dashboard.config.constants import SyncDefaults
from auth_dashboard.config.settings import DashboardSettings, get_settings


class TestDashboardSettings:
    """Test defaults and environment overrides."""

    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch):
        for name in ("SWITCHBOARD_URL", "POLL_INTERVAL_SECONDS", "ENVIRONMENT", "VERIFY_SSL"):
            monkeypatch.delenv(f"AUTH_DASHBOARD_{name}", raising=False)

    def test_defaults(self):
        settings = DashboardSettings(_env_file=None)

        assert settings.switchboard_url is None
        assert not settings.has_switchboard
        assert settings.poll_interval_seconds == SyncDefaults.POLL_INTERVAL_SECONDS
        assert settings.operation_log_page_size == SyncDefaults.OPERATION_LOG_PAGE_SIZE
        assert settings.token_algorithm == "HS256"
        assert settings.is_development

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("AUTH_DASHBOARD_SWITCHBOARD_URL", "http://localhost:4001/graphql")
        monkeypatch.setenv("AUTH_DASHBOARD_POLL_INTERVAL_SECONDS", "2.5")
        monkeypatch.setenv("AUTH_DASHBOARD_VERIFY_SSL", "false")

        settings = DashboardSettings(_env_file=None)

        assert settings.switchboard_url == "http://localhost:4001/graphql"
        assert settings.poll_interval_seconds == 2.5
        assert settings.verify_ssl is False

    def test_blank_url_means_unconfigured(self):
        settings = DashboardSettings(switchboard_url="   ", _env_file=None)

        assert settings.switchboard_url is None

    def test_production_flag(self):
        assert DashboardSettings(environment="Production", _env_file=None).is_production

    def test_poll_interval_must_be_positive(self):
        with pytest.raises(ValidationError):
            DashboardSettings(poll_interval_seconds=0, _env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
