"""Command line entry point for the Prometheus metric check."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from adapters.prometheus import fetch_value

from .config import Settings, load_settings
from .evaluator import evaluate
from .logging_setup import configure_logging
from .models import CheckOutcome, Comparator, MetricQuery, Severity, Thresholds
from .normalizer import normalize
from .reporter import DEFAULT_SHORT_TEXT, report

logger = logging.getLogger(__name__)

PROG = "check_prometheus_metric"

USAGE = f"""\
  {PROG} - simple prometheus metric extractor for nagios

  usage:
  {PROG} -H HOST -q QUERY -w INT -c INT -n NAME [-m METHOD] [-O]

  options:
    -H HOST     URL of Prometheus host to query
    -q QUERY    Prometheus query that returns a float or int
    -w INT      Warning level value (must be zero or positive)
    -c INT      Critical level value (must be zero or positive)
    -n NAME     A name for the metric being checked
    -m METHOD   Comparison method, one of gt, ge, lt, le, eq, ne
                (defaults to ge unless otherwise specified)
    -O          Accept NaN as an "OK" result"""

_LEVEL_PATTERN = re.compile(r"[0-9]+")
# Flags that consume a value, keyed to the field they fill.
_VALUE_FLAGS = {
    "H": "server",
    "q": "query",
    "w": "warning",
    "c": "critical",
    "m": "method",
    "n": "name",
}
_SWITCH_FLAGS = {"O": "nan_ok"}
_REQUIRED = ("server", "query", "name", "warning", "critical")


class UsageError(Exception):
    """Raised for invalid command lines; the message is the status text."""


def iter_options(argv: Sequence[str]) -> Iterator[tuple[str, str | None]]:
    """Yield ``(flag, value)`` pairs with POSIX ``getopts`` semantics.

    A flag that takes a value always consumes the rest of its word or the
    next word, even when that word starts with ``-``. Switches may be
    clustered (``-Ow 5``). Option parsing stops at ``--`` or the first
    non-option word.
    """
    index = 0
    while index < len(argv):
        word = argv[index]
        index += 1
        if word == "--":
            return
        if not word.startswith("-") or word == "-":
            return
        position = 1
        while position < len(word):
            flag = word[position]
            position += 1
            if flag in _SWITCH_FLAGS:
                yield flag, None
                continue
            if flag not in _VALUE_FLAGS:
                raise UsageError(f"invalid option: -{flag}")
            if position < len(word):
                yield flag, word[position:]
            elif index < len(argv):
                yield flag, argv[index]
                index += 1
            else:
                raise UsageError(f"-{flag} requires an argument")
            break


def _check_option(flag: str, value: str) -> None:
    if flag == "m" and value not in {comparator.value for comparator in Comparator}:
        raise UsageError(f"invalid comparison method: {value}")
    if flag == "c" and not _LEVEL_PATTERN.fullmatch(value):
        raise UsageError("-c CRITICAL_LEVEL requires an integer")
    if flag == "w" and not _LEVEL_PATTERN.fullmatch(value):
        raise UsageError("-w WARNING_LEVEL requires an integer")


def parse_args(argv: Sequence[str]) -> tuple[MetricQuery, Thresholds]:
    """Validate a command line into query and threshold models.

    Problems are reported for the first offending flag in command-line
    order; missing required options are only checked afterwards.
    """
    options: dict[str, str | bool] = {"method": Comparator.GE.value, "nan_ok": False}
    for flag, value in iter_options(list(argv)):
        if value is None:
            options[_SWITCH_FLAGS[flag]] = True
            continue
        _check_option(flag, value)
        options[_VALUE_FLAGS[flag]] = value

    if any(not options.get(field) for field in _REQUIRED):
        raise UsageError("missing required option")

    query = MetricQuery(server=options["server"], query=options["query"], name=options["name"])
    thresholds = Thresholds(
        warning=int(options["warning"]),
        critical=int(options["critical"]),
        comparator=Comparator(options["method"]),
        nan_ok=options["nan_ok"],
    )
    return query, thresholds


def run_check(
    query: MetricQuery, thresholds: Thresholds, *, settings: Settings | None = None
) -> CheckOutcome:
    """Fetch, normalize and evaluate a single metric."""
    raw = fetch_value(query.server, query.query, settings=settings)
    value = normalize(raw, thresholds.warning, thresholds.critical)
    return evaluate(value, query, thresholds)


def main(argv: Sequence[str] | None = None, stream: TextIO | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = load_settings()
    except ValueError as exc:
        return report(CheckOutcome(severity=Severity.UNKNOWN, short_text=str(exc)), stream)
    configure_logging(PROG, settings.log_level)

    try:
        query, thresholds = parse_args(argv)
    except UsageError as exc:
        outcome = CheckOutcome(severity=Severity.UNKNOWN, short_text=str(exc), long_text=USAGE)
        return report(outcome, stream)

    try:
        outcome = run_check(query, thresholds, settings=settings)
    except Exception as exc:
        logger.exception("Check %s failed unexpectedly", query.name)
        outcome = CheckOutcome(
            severity=Severity.UNKNOWN, short_text=DEFAULT_SHORT_TEXT, long_text=str(exc)
        )
    return report(outcome, stream)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
