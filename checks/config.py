"""Environment-driven settings for the check plugin."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from . import __version__

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_USER_AGENT = f"check-prometheus-metric/{__version__}"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    user_agent: str = DEFAULT_USER_AGENT
    # None keeps the HTTP client's default timeout.
    timeout: float | None = None


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
    return level


def _parse_timeout(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ValueError(f"PROMETHEUS_TIMEOUT must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"PROMETHEUS_TIMEOUT must be positive, got {value!r}")
    return timeout


def load_settings() -> Settings:
    """Read settings from ``LOG_LEVEL``, ``CHECK_PROMETHEUS_UA`` and ``PROMETHEUS_TIMEOUT``."""
    return Settings(
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        user_agent=os.getenv("CHECK_PROMETHEUS_UA", DEFAULT_USER_AGENT),
        timeout=_parse_timeout(os.getenv("PROMETHEUS_TIMEOUT")),
    )
