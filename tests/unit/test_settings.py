"""
Unit Tests for Settings
=======================

Environment parsing, defaults and validation.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import settings as settings_module
from src.config.settings import DEFAULT_WS_TEST_PAGE, Settings, get_settings, reload_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove server variables that a developer shell might set."""
    for name in ("PORT", "HOST", "LOG_LEVEL", "ENVIRONMENT", "SSE_HEARTBEAT_INTERVAL",
                 "WS_HEARTBEAT_INTERVAL", "SHUTDOWN_TIMEOUT", "WS_TEST_PAGE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestSettingsDefaults:
    """Default values."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.app_version == "1.0.0"
        assert settings.sse_heartbeat_interval == 2.0
        assert settings.ws_heartbeat_interval == 5.0
        assert settings.shutdown_timeout is None
        assert settings.ws_test_page == DEFAULT_WS_TEST_PAGE

    def test_bundled_page_exists(self):
        assert DEFAULT_WS_TEST_PAGE.is_file()
        assert DEFAULT_WS_TEST_PAGE.name == "ws-test.html"


@pytest.mark.unit
class TestSettingsEnvironment:
    """Values read from environment variables."""

    def test_port_and_host_from_env(self, clean_env):
        clean_env.setenv("PORT", "9090")
        clean_env.setenv("HOST", "127.0.0.1")

        settings = Settings(_env_file=None)

        assert settings.port == 9090
        assert settings.host == "127.0.0.1"

    def test_lowercase_env_names(self, clean_env):
        clean_env.setenv("port", "7000")

        assert Settings(_env_file=None).port == 7000

    def test_intervals_from_env(self, clean_env):
        clean_env.setenv("SSE_HEARTBEAT_INTERVAL", "0.5")
        clean_env.setenv("WS_HEARTBEAT_INTERVAL", "1.5")

        settings = Settings(_env_file=None)

        assert settings.sse_heartbeat_interval == 0.5
        assert settings.ws_heartbeat_interval == 1.5

    def test_page_path_from_env(self, clean_env, tmp_path):
        page = tmp_path / "page.html"
        clean_env.setenv("WS_TEST_PAGE", str(page))

        assert Settings(_env_file=None).ws_test_page == Path(page)


@pytest.mark.unit
class TestSettingsValidation:
    """Rejected values."""

    @pytest.mark.parametrize("port", [0, 70000, -1])
    def test_port_out_of_range(self, port):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, port=port)

    def test_non_numeric_port(self, clean_env):
        clean_env.setenv("PORT", "http")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="staging")

    def test_log_level_is_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")

    @pytest.mark.parametrize("field", ["sse_heartbeat_interval", "ws_heartbeat_interval"])
    def test_intervals_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})


@pytest.mark.unit
class TestSettingsCache:
    """Process-wide settings instance."""

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setattr(settings_module, "settings", None)

        assert get_settings() is get_settings()

    def test_reload_settings_reads_env_again(self, clean_env):
        clean_env.setattr(settings_module, "settings", None)
        clean_env.setenv("PORT", "8181")
        first = get_settings()

        clean_env.setenv("PORT", "8282")
        reloaded = reload_settings()

        assert first.port == 8181
        assert reloaded.port == 8282
        assert get_settings() is reloaded
