"""Render check outcomes in the Nagios plugin output format."""

from __future__ import annotations

import sys
from typing import TextIO

from .models import CheckOutcome

DEFAULT_SHORT_TEXT = "an unknown error occurred"


def render(outcome: CheckOutcome) -> str:
    """Return the status line plus the optional detail line."""
    short_text = outcome.short_text or DEFAULT_SHORT_TEXT
    lines = [f"{int(outcome.severity)} - {short_text}"]
    if outcome.long_text:
        lines.append(outcome.long_text)
    return "\n".join(lines) + "\n"


def report(outcome: CheckOutcome, stream: TextIO | None = None) -> int:
    """Write ``outcome`` to stdout and return its exit code."""
    stream = stream or sys.stdout
    stream.write(render(outcome))
    stream.flush()
    return int(outcome.severity)
