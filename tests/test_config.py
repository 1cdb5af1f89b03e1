"""Tests for app configuration."""

from pathlib import Path

import pytest

from photo_studio import config as config_module
from photo_studio.config import AppConfig, get_config, set_config
from photo_studio.constants import BUSY_INTERVAL_SEC, DEFAULT_MODEL
from photo_studio.exceptions import MissingCredentialError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Ignore any local .env file and reset the global config."""
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    for name in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "BUSY_INTERVAL_SEC", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig.from_env()

        assert config.api_key is None
        assert config.model_name == DEFAULT_MODEL
        assert config.busy_interval_sec == BUSY_INTERVAL_SEC

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "secret")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
        monkeypatch.setenv("BUSY_INTERVAL_SEC", "1.5")

        config = AppConfig.from_env()

        assert config.api_key == "secret"
        assert config.model_name == "gemini-test"
        assert config.busy_interval_sec == 1.5

    def test_legacy_key_name(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "legacy")

        assert AppConfig.from_env().api_key == "legacy"

    def test_missing_key_is_fatal(self):
        with pytest.raises(MissingCredentialError, match="GEMINI_API_KEY"):
            AppConfig.from_env().require_api_key()

    def test_require_api_key(self):
        assert AppConfig(api_key="secret").require_api_key() == "secret"


class TestGlobalConfig:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config(self):
        custom = AppConfig(api_key="custom")
        set_config(custom)

        assert get_config() is custom


class TestValidation:
    """Bad settings fail when the config is built, not mid-request."""

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_rejects_non_positive_busy_interval(self, monkeypatch, value):
        monkeypatch.setenv("BUSY_INTERVAL_SEC", value)

        with pytest.raises(ValueError, match="busy_interval_sec"):
            AppConfig.from_env()

    def test_rejects_malformed_busy_interval(self, monkeypatch):
        monkeypatch.setenv("BUSY_INTERVAL_SEC", "fast")

        with pytest.raises(ValueError):
            AppConfig.from_env()

    def test_rejects_non_positive_poll_interval(self):
        with pytest.raises(ValueError, match="poll_interval_sec"):
            AppConfig(poll_interval_sec=0)


def test_log_file_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "studio.log"))

    assert AppConfig.from_env().log_file == Path(tmp_path / "studio.log")
