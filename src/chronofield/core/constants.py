"""Time unit conversions and numeric limits shared by every chronology."""

from __future__ import annotations

from typing import Final

HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60
MINUTES_PER_DAY: Final[int] = MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY: Final[int] = SECONDS_PER_HOUR * HOURS_PER_DAY

NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR: Final[int] = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY: Final[int] = NANOS_PER_HOUR * HOURS_PER_DAY

DAYS_PER_WEEK: Final[int] = 7

# Values are exchanged as signed 64-bit longs with the parsing layer
LONG_MIN: Final[int] = -(2**63)
LONG_MAX: Final[int] = 2**63 - 1

MIN_YEAR: Final[int] = -999_999_999
MAX_YEAR: Final[int] = 999_999_999
