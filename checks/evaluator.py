"""Threshold evaluation for normalized metric values."""

from __future__ import annotations

import logging

from .models import CheckOutcome, MetricQuery, NormalizedValue, Severity, Thresholds, ValueKind

logger = logging.getLogger(__name__)

UNPARSABLE_TEXT = "unable to parse prometheus response"


def classify(number: int, thresholds: Thresholds) -> Severity:
    """Return the severity for ``number``, testing critical before warning."""
    comparator = thresholds.comparator
    if comparator.holds(number, thresholds.critical):
        return Severity.CRITICAL
    if comparator.holds(number, thresholds.warning):
        return Severity.WARNING
    return Severity.OK


def evaluate(value: NormalizedValue, query: MetricQuery, thresholds: Thresholds) -> CheckOutcome:
    """Turn a normalized value into a check outcome; never raises."""
    message = f"{query.name} is {value}"
    if value.is_numeric:
        severity = classify(value.number, thresholds)
        logger.debug(
            "Evaluated %s %s against critical=%s warning=%s: %s",
            value.number,
            thresholds.comparator.value,
            thresholds.critical,
            thresholds.warning,
            severity.name,
        )
        return CheckOutcome(severity=severity, short_text=message)

    if thresholds.nan_ok and value.kind is ValueKind.NAN:
        return CheckOutcome(severity=Severity.OK, short_text=message)

    logger.debug("Unparsable value for %s: %r", query.name, value.raw)
    return CheckOutcome(severity=Severity.UNKNOWN, short_text=UNPARSABLE_TEXT, long_text=message)
