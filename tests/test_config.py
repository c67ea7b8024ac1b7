import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checks import __version__
from checks.config import DEFAULT_LOG_LEVEL, load_settings


def test_load_settings_defaults():
    settings = load_settings()
    assert settings.log_level == DEFAULT_LOG_LEVEL
    assert settings.user_agent == f"check-prometheus-metric/{__version__}"
    assert settings.timeout is None


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("CHECK_PROMETHEUS_UA", "nagios/4")
    monkeypatch.setenv("PROMETHEUS_TIMEOUT", "1.5")

    settings = load_settings()

    assert settings.log_level == "INFO"
    assert settings.user_agent == "nagios/4"
    assert settings.timeout == 1.5


@pytest.mark.parametrize("value", ["0", "-3", "later"])
def test_load_settings_rejects_bad_timeout(monkeypatch, value):
    monkeypatch.setenv("PROMETHEUS_TIMEOUT", value)
    with pytest.raises(ValueError, match="PROMETHEUS_TIMEOUT"):
        load_settings()


def test_load_settings_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        load_settings()
