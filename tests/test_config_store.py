"""
Tests for persisted endpoint settings and configuration.
"""

import json
import pytest

from sla_monitor.config import Config, TestConfig as _TestConfig, get_config
from sla_monitor.config_store import CONFIG_KEY, ConfigManager


def test_new_settings_have_no_url(tmp_path):
    """A fresh settings file means no URL."""
    manager = ConfigManager(tmp_path / "settings.json")
    assert manager.get_api_url() == ""
    assert not manager.has_api_url()


def test_set_api_url_persists(tmp_path):
    """Saved URLs survive a new manager instance."""
    path = tmp_path / "nested" / "settings.json"
    ConfigManager(path).set_api_url("  https://example.com/api  ")

    reloaded = ConfigManager(path)
    assert reloaded.has_api_url()
    assert reloaded.api_url == "https://example.com/api"
    assert json.loads(path.read_text(encoding="utf-8")) == {CONFIG_KEY: "https://example.com/api"}


@pytest.mark.parametrize("url", ["", "   ", None])
def test_set_api_url_rejects_blank(tmp_path, url):
    """Blank URLs are refused."""
    manager = ConfigManager(tmp_path / "settings.json")
    with pytest.raises(ValueError, match="Please enter a valid API URL"):
        manager.set_api_url(url)


def test_clear_api_url(tmp_path):
    """Clearing removes the stored URL but keeps other settings."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({CONFIG_KEY: "https://example.com/api", "theme": "dark"}), encoding="utf-8")

    manager = ConfigManager(path)
    manager.clear_api_url()

    assert not manager.has_api_url()
    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", json.dumps({CONFIG_KEY: 42})])
def test_unreadable_settings_treated_as_empty(tmp_path, content):
    """Corrupt settings do not break startup."""
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    assert not ConfigManager(path).has_api_url()


def test_get_config_for_test_environment():
    """The test profile disables the log file."""
    config = get_config("test")
    assert isinstance(config, _TestConfig)
    assert config.LOG_FILE == ""
    assert config.EXPORT_PREFIX == "SLA_Report"


def test_config_validation_errors():
    """Invalid settings are rejected."""

    class BadTimeout(Config):
        REQUEST_TIMEOUT = 0

    class BadLogLevel(Config):
        LOG_LEVEL = "LOUD"

    class BadThresholds(Config):
        SLA_GOOD = 90.0

    for config_cls in (BadTimeout, BadLogLevel, BadThresholds):
        with pytest.raises(ValueError):
            config_cls.validate()
