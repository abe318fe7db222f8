"""ISO-8601 chronology: the proleptic Gregorian calendar.

The module-level helpers are shared by the ISO-aligned chronologies
(Japanese, Minguo, ThaiBuddhist), which only renumber years and eras.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronofield.chrono.base import Chronology, ChronologyId, DateFields, year_ranges
from chronofield.core.field import FieldKind, ValueRange
from chronofield.core.types import EpochDay

if TYPE_CHECKING:
    from chronofield.temporal.chrono_date import ChronoDate

# Days from 0000-03-01 to 1970-01-01
_DAYS_0000_TO_1970 = 719_468
_DAYS_PER_CYCLE = 146_097


def iso_is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def iso_month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if iso_is_leap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def iso_epoch_day(year: int, month: int, day: int) -> EpochDay:
    """Epoch day of an ISO date, counting years from a March 1st origin."""
    if month <= 2:
        year -= 1
    cycle = year // 400
    year_of_cycle = year - cycle * 400
    day_of_march_year = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    day_of_cycle = year_of_cycle * 365 + year_of_cycle // 4 - year_of_cycle // 100 + day_of_march_year
    return cycle * _DAYS_PER_CYCLE + day_of_cycle - _DAYS_0000_TO_1970


def iso_date_fields(epoch_day: EpochDay) -> DateFields:
    shifted = epoch_day + _DAYS_0000_TO_1970
    cycle = shifted // _DAYS_PER_CYCLE
    day_of_cycle = shifted - cycle * _DAYS_PER_CYCLE
    year_of_cycle = (
        day_of_cycle - day_of_cycle // 1460 + day_of_cycle // 36524 - day_of_cycle // 146096
    ) // 365
    day_of_march_year = day_of_cycle - (365 * year_of_cycle + year_of_cycle // 4 - year_of_cycle // 100)
    march_month = (5 * day_of_march_year + 2) // 153
    day = day_of_march_year - (153 * march_month + 2) // 5 + 1
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = year_of_cycle + cycle * 400 + (1 if month <= 2 else 0)
    day_of_year = epoch_day - iso_epoch_day(year, 1, 1) + 1
    return DateFields(year, month, day, day_of_year)


def format_iso_date(year: int, month: int, day: int) -> str:
    """yyyy-mm-dd, with a sign and at least four digits outside 0000-9999."""
    if 0 <= year <= 9999:
        return f"{year:04d}-{month:02d}-{day:02d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"


class IsoChronology(Chronology):
    """Proleptic Gregorian calendar with eras BCE (0) and CE (1)."""

    id = ChronologyId.ISO
    era_names = {0: "BCE", 1: "CE"}

    @property
    def rule_prefix(self) -> str:
        return ""

    def date_ranges(self) -> dict[FieldKind, ValueRange]:
        return {
            FieldKind.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
            FieldKind.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            FieldKind.MONTH_OF_YEAR: ValueRange.of(1, 12),
            **year_ranges(),
        }

    def date_fields(self, epoch_day: EpochDay) -> DateFields:
        return iso_date_fields(epoch_day)

    def epoch_day_unchecked(self, year: int, month: int, day: int) -> EpochDay:
        return iso_epoch_day(year, month, day)

    def is_leap_year(self, year: int) -> bool:
        return iso_is_leap(year)

    def length_of_month(self, year: int, month: int) -> int:
        return iso_month_length(year, month)

    def format_date(self, date: ChronoDate) -> str:
        return format_iso_date(date.year, date.month, date.day)


ISO = IsoChronology()
