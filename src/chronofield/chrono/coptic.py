"""Coptic chronology.

Twelve months of 30 days followed by a thirteenth month of 5 days, or 6 in
a leap year. A year is leap when year % 4 == 3. Year 1 starts on
ISO 0284-08-29.

Month and day-of-month are set through day-of-year: every month but the
last is exactly 30 days, so both relations are linear.
"""

from __future__ import annotations

from chronofield.chrono.base import Chronology, ChronologyId, DateFields, year_ranges
from chronofield.core.field import FieldKind, ValueRange
from chronofield.core.types import EpochDay

# Days from the Coptic epoch day zero to 1970-01-01
_EPOCH_OFFSET = 615_558
_DAYS_PER_MONTH = 30


def _month_from_day_of_year(day_of_year: int) -> int:
    return (day_of_year - 1) // _DAYS_PER_MONTH + 1


def _day_of_month_from_day_of_year(day_of_year: int) -> int:
    return (day_of_year - 1) % _DAYS_PER_MONTH + 1


class CopticChronology(Chronology):
    """The Coptic calendar with eras BEFORE_AM (0) and AM (1)."""

    id = ChronologyId.COPTIC
    months_in_year = 13
    era_names = {0: "BEFORE_AM", 1: "AM"}

    def date_ranges(self) -> dict[FieldKind, ValueRange]:
        return {
            FieldKind.DAY_OF_MONTH: ValueRange.of(1, 5, 30),
            FieldKind.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            FieldKind.MONTH_OF_YEAR: ValueRange.of(1, 13),
            **year_ranges(),
        }

    def base_kinds(self) -> dict[FieldKind, FieldKind]:
        bases = super().base_kinds()
        bases[FieldKind.DAY_OF_MONTH] = FieldKind.DAY_OF_YEAR
        bases[FieldKind.MONTH_OF_YEAR] = FieldKind.DAY_OF_YEAR
        return bases

    def date_fields(self, epoch_day: EpochDay) -> DateFields:
        coptic_epoch_day = epoch_day + _EPOCH_OFFSET
        year = (coptic_epoch_day * 4 + 1463) // 1461
        start_of_year = (year - 1) * 365 + year // 4
        day_of_year = coptic_epoch_day - start_of_year + 1
        return DateFields(
            year,
            _month_from_day_of_year(day_of_year),
            _day_of_month_from_day_of_year(day_of_year),
            day_of_year,
        )

    def epoch_day_unchecked(self, year: int, month: int, day: int) -> EpochDay:
        return (year - 1) * 365 + year // 4 + (month - 1) * _DAYS_PER_MONTH + day - 1 - _EPOCH_OFFSET

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def length_of_month(self, year: int, month: int) -> int:
        if month == 13:
            return 6 if self.is_leap_year(year) else 5
        return _DAYS_PER_MONTH

    def extract_date_from_other(self, kind: FieldKind, other: FieldKind, value: int) -> int | None:
        match (kind, other):
            case (FieldKind.DAY_OF_MONTH, FieldKind.DAY_OF_YEAR):
                return _day_of_month_from_day_of_year(value)
            case (FieldKind.MONTH_OF_YEAR, FieldKind.DAY_OF_YEAR):
                return _month_from_day_of_year(value)
        return None

    def set_date_into(self, kind: FieldKind, new_value: int, base: FieldKind, base_value: int) -> int | None:
        match (kind, base):
            case (FieldKind.DAY_OF_MONTH, FieldKind.DAY_OF_YEAR):
                return base_value + (new_value - _day_of_month_from_day_of_year(base_value))
            case (FieldKind.MONTH_OF_YEAR, FieldKind.DAY_OF_YEAR):
                return base_value + (new_value - _month_from_day_of_year(base_value)) * _DAYS_PER_MONTH
        return None


COPTIC = CopticChronology()
