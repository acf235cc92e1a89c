"""Tests for plankton.core.settings."""

import pytest

from plankton.core.errors import ConfigError
from plankton.core.settings import PlanktonSettings, clear_settings_cache, get_settings


class TestPlanktonSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for var in ("LOG_LEVEL", "LOG_JSON", "SERVICE", "ROOT_NAME", "ALLOW_REDEFINE"):
            monkeypatch.delenv(f"PLANKTON_{var}", raising=False)

        settings = PlanktonSettings()

        assert settings.log_level == "INFO"
        assert settings.log_json is None
        assert settings.service == "plankton"
        assert settings.root_name == "Plankton"
        assert settings.allow_redefine is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PLANKTON_LOG_LEVEL", "debug")
        monkeypatch.setenv("PLANKTON_LOG_JSON", "true")
        monkeypatch.setenv("PLANKTON_ROOT_NAME", "Lib")

        settings = PlanktonSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.root_name == "Lib"

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("PLANKTON_NOT_A_FIELD", "x")
        assert PlanktonSettings().root_name == "Plankton"


class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache(self):
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first

    def test_invalid_log_level_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("PLANKTON_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigError, match="Invalid Plankton settings"):
            get_settings()

    def test_dotted_root_name_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("PLANKTON_ROOT_NAME", "A.B")

        with pytest.raises(ConfigError) as exc_info:
            get_settings()

        assert exc_info.value.cause is not None
