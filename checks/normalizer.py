"""Reduce raw Prometheus sample values to comparable integers."""

from __future__ import annotations

import re

from .models import NormalizedValue, ValueKind

_DECIMAL_PATTERN = re.compile(r"-?[0-9]+\.?[0-9]*")

POSITIVE_INFINITY = "+Inf"
NEGATIVE_INFINITY = "-Inf"
NOT_A_NUMBER = "NaN"
NEGATIVE_INFINITY_SENTINEL = -1


def round_half_even(raw: str) -> int:
    """Round a decimal string the way ``printf("%.0f")`` does."""
    return round(float(raw))


def normalize(raw: str | None, warning: int, critical: int) -> NormalizedValue:
    """Classify ``raw`` and map it onto an integer where possible.

    ``+Inf`` becomes ``warning + critical`` so it trips both levels under
    ascending comparators; ``-Inf`` becomes ``-1``, below any non-negative
    threshold. Anything else that is not a plain decimal is returned
    unparsed with its original text.
    """
    raw = raw or ""
    if _DECIMAL_PATTERN.fullmatch(raw):
        return NormalizedValue(kind=ValueKind.NUMBER, raw=raw, number=round_half_even(raw))
    if raw == POSITIVE_INFINITY:
        return NormalizedValue(
            kind=ValueKind.POSITIVE_INFINITY, raw=raw, number=warning + critical
        )
    if raw == NEGATIVE_INFINITY:
        return NormalizedValue(
            kind=ValueKind.NEGATIVE_INFINITY, raw=raw, number=NEGATIVE_INFINITY_SENTINEL
        )
    if raw == NOT_A_NUMBER:
        return NormalizedValue(kind=ValueKind.NAN, raw=raw)
    return NormalizedValue(kind=ValueKind.UNPARSABLE, raw=raw)
