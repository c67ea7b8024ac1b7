"""Shared check models."""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Severity(IntEnum):
    """Nagios plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


_OPERATORS: dict[str, Callable[[int, int], bool]] = {
    "gt": operator.gt,
    "ge": operator.ge,
    "lt": operator.lt,
    "le": operator.le,
    "eq": operator.eq,
    "ne": operator.ne,
}


class Comparator(str, Enum):
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    EQ = "eq"
    NE = "ne"

    def holds(self, value: int, threshold: int) -> bool:
        """Return ``value <op> threshold`` for this comparator."""
        return _OPERATORS[self.value](value, threshold)


class ValueKind(str, Enum):
    NUMBER = "number"
    NAN = "nan"
    POSITIVE_INFINITY = "+inf"
    NEGATIVE_INFINITY = "-inf"
    UNPARSABLE = "unparsable"


class MetricQuery(BaseModel):
    """What to ask Prometheus and how to label it."""

    model_config = ConfigDict(frozen=True)

    server: str = Field(..., min_length=1, description="Prometheus base URL")
    query: str = Field(..., min_length=1, description="PromQL expression")
    name: str = Field(..., min_length=1, description="Metric display name")


class Thresholds(BaseModel):
    """Warning/critical levels and the comparator applied to both."""

    model_config = ConfigDict(frozen=True)

    warning: int = Field(..., ge=0, description="Warning level")
    critical: int = Field(..., ge=0, description="Critical level")
    comparator: Comparator = Field(Comparator.GE, description="Comparison method")
    # Treat a NaN result as OK instead of UNKNOWN.
    nan_ok: bool = Field(False, description="Accept NaN as OK")


class NormalizedValue(BaseModel):
    """A query result reduced to something the evaluator can compare."""

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    raw: str = ""
    # Set for NUMBER and both infinity sentinels.
    number: int | None = None

    @property
    def is_numeric(self) -> bool:
        return self.number is not None

    def __str__(self) -> str:
        if self.number is not None:
            return str(self.number)
        return self.raw


class CheckOutcome(BaseModel):
    """Terminal result of one check run."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    short_text: str
    long_text: str | None = None
