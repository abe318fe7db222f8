"""Counting units for fields and amount arithmetic."""

from __future__ import annotations

from enum import Enum
from typing import Any

from chronofield.core.constants import NANOS_PER_DAY, NANOS_PER_HOUR, NANOS_PER_MINUTE, NANOS_PER_SECOND

_NANOS_PER_YEAR = 31_556_952 * NANOS_PER_SECOND


class ChronoUnit(Enum):
    """Standard units, each with an estimated duration in nanoseconds."""

    NANOS = ("Nanos", 1)
    SECONDS = ("Seconds", NANOS_PER_SECOND)
    MINUTES = ("Minutes", NANOS_PER_MINUTE)
    HOURS = ("Hours", NANOS_PER_HOUR)
    DAYS = ("Days", NANOS_PER_DAY)
    WEEKS = ("Weeks", 7 * NANOS_PER_DAY)
    MONTHS = ("Months", _NANOS_PER_YEAR // 12)
    YEARS = ("Years", _NANOS_PER_YEAR)
    ERAS = ("Eras", 1_000_000_000 * _NANOS_PER_YEAR)

    def __init__(self, label: str, estimated_nanos: int) -> None:
        self.label = label
        self.estimated_nanos = estimated_nanos

    @property
    def is_date_based(self) -> bool:
        return self.estimated_nanos >= NANOS_PER_DAY

    @property
    def is_time_based(self) -> bool:
        return not self.is_date_based

    def add_to(self, date_time: Any, amount: int) -> Any:
        """Temporal-unit capability: add amount of this unit to date_time."""
        return date_time.plus_amount(amount, self)

    def __str__(self) -> str:
        return self.label
