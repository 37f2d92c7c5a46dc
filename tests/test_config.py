"""Tests for jsonld_decoder.config."""

import logging

import pytest

from jsonld_decoder import config
from jsonld_decoder.config import Settings, configure_logging, load_settings
from jsonld_decoder.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("JSONLD_USER_AGENT", "JSONLD_TIMEOUT", "JSONLD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep load_dotenv() away from any .env in the working tree
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "load_dotenv", lambda: False)


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings() == Settings()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("JSONLD_USER_AGENT", "bot/1.0")
        monkeypatch.setenv("JSONLD_TIMEOUT", "2.5")
        monkeypatch.setenv("JSONLD_LOG_LEVEL", "debug")
        assert load_settings() == Settings(user_agent="bot/1.0", timeout=2.5, log_level="DEBUG")

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("JSONLD_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_negative_timeout(self, monkeypatch):
        monkeypatch.setenv("JSONLD_TIMEOUT", "-1")
        with pytest.raises(ConfigurationError):
            load_settings()


class TestConfigureLogging:
    def test_level_by_name(self, monkeypatch):
        monkeypatch.setattr(config, "_logging_configured", True)
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("info")
            assert root.level == logging.INFO
        finally:
            root.setLevel(previous)

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError):
            configure_logging("chatty")
