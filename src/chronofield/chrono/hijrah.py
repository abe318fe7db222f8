"""Hijrah chronology, tabular civil variant.

Arithmetic Islamic calendar: a 30-year cycle with 11 leap years, months
alternating 30 and 29 days, the last month gaining a day in leap years.
Year 1 AH starts on ISO 0622-07-19.
"""

from __future__ import annotations

from chronofield.chrono.base import Chronology, ChronologyId, DateFields, year_ranges
from chronofield.core.field import FieldKind, ValueRange
from chronofield.core.types import EpochDay

# Epoch day of 1 Muharram 1 AH (civil epoch)
_HIJRAH_EPOCH_DAY = -492_148
_DAYS_PER_CYCLE = 10_631


def _days_before_year(year: int) -> int:
    return (year - 1) * 354 + (3 + 11 * year) // 30


def _days_before_month(month: int) -> int:
    return 29 * (month - 1) + month // 2


class HijrahChronology(Chronology):
    """Tabular Hijrah calendar with eras BEFORE_AH (0) and AH (1)."""

    id = ChronologyId.HIJRAH
    era_names = {0: "BEFORE_AH", 1: "AH"}

    def date_ranges(self) -> dict[FieldKind, ValueRange]:
        return {
            FieldKind.DAY_OF_MONTH: ValueRange.of(1, 29, 30),
            FieldKind.DAY_OF_YEAR: ValueRange.of(1, 354, 355),
            FieldKind.MONTH_OF_YEAR: ValueRange.of(1, 12),
            **year_ranges(),
        }

    def date_fields(self, epoch_day: EpochDay) -> DateFields:
        days = epoch_day - _HIJRAH_EPOCH_DAY
        year = (30 * days + _DAYS_PER_CYCLE + 15) // _DAYS_PER_CYCLE
        while _days_before_year(year) > days:
            year -= 1
        while _days_before_year(year + 1) <= days:
            year += 1
        day_of_year = days - _days_before_year(year) + 1
        month = min(12, (2 * (day_of_year - 1)) // 59 + 1)
        while month > 1 and _days_before_month(month) >= day_of_year:
            month -= 1
        day = day_of_year - _days_before_month(month)
        return DateFields(year, month, day, day_of_year)

    def epoch_day_unchecked(self, year: int, month: int, day: int) -> EpochDay:
        return _HIJRAH_EPOCH_DAY + _days_before_year(year) + _days_before_month(month) + day - 1

    def is_leap_year(self, year: int) -> bool:
        return (14 + 11 * year) % 30 < 11

    def length_of_month(self, year: int, month: int) -> int:
        if month == 12 and self.is_leap_year(year):
            return 30
        return 30 if month % 2 == 1 else 29

    def length_of_year(self, year: int) -> int:
        return 355 if self.is_leap_year(year) else 354


HIJRAH = HijrahChronology()
