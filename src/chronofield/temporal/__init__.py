"""Temporal values: times, dates and date-times bound to a chronology.

Architecture Note:
    LocalTime is chronology-neutral and validated by ISO rules. ChronoDate
    and ChronoDateTime are owned by one chronology; every adjuster result is
    checked against it before being returned.
"""

from chronofield.temporal.chrono_date import ChronoDate
from chronofield.temporal.chrono_date_time import ChronoDateTime
from chronofield.temporal.local_time import LocalTime, Overflow
from chronofield.temporal.period import Period

__all__ = [
    "ChronoDate",
    "ChronoDateTime",
    "LocalTime",
    "Overflow",
    "Period",
]
