"""Logging configuration for the check plugin.

Stdout carries the plugin status lines, so every handler here writes to
stderr.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from .config import DEFAULT_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(service)s %(message)s"

_HANDLER: logging.Handler | None = None
_PREVIOUS_LEVEL: int | None = None


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str | None):
        super().__init__()
        self._service = service or "check-prometheus-metric"

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = self._service
        return True


def _build_formatter() -> logging.Formatter:
    return JsonFormatter(_LOG_FORMAT)


def configure_logging(service_name: str | None = None, level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structured stderr logging once per process."""
    global _HANDLER, _PREVIOUS_LEVEL
    if _HANDLER is not None:
        return

    root = logging.getLogger()
    _PREVIOUS_LEVEL = root.level
    root.setLevel(level)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(_build_formatter())
    stream_handler.addFilter(_ServiceFilter(service_name))
    root.addHandler(stream_handler)
    _HANDLER = stream_handler


def reset_logging() -> None:
    """Undo ``configure_logging`` for tests."""
    global _HANDLER, _PREVIOUS_LEVEL
    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
        _HANDLER = None
    if _PREVIOUS_LEVEL is not None:
        root.setLevel(_PREVIOUS_LEVEL)
        _PREVIOUS_LEVEL = None
