"""Chronologies that are ISO with a shifted year number.

Minguo (Republic of China) counts from ISO 1912, ThaiBuddhist from ISO -542.
Months, days and leap years are ISO's.
"""

from __future__ import annotations

from typing import ClassVar

from chronofield.chrono.base import Chronology, ChronologyId, DateFields, year_ranges
from chronofield.chrono.iso import iso_date_fields, iso_epoch_day, iso_is_leap, iso_month_length
from chronofield.core.field import FieldKind, ValueRange
from chronofield.core.types import EpochDay


class YearOffsetChronology(Chronology):
    """ISO calendar with year = ISO year + year_offset."""

    year_offset: ClassVar[int]

    def date_ranges(self) -> dict[FieldKind, ValueRange]:
        return {
            FieldKind.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
            FieldKind.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            FieldKind.MONTH_OF_YEAR: ValueRange.of(1, 12),
            **year_ranges(self.year_offset),
        }

    def date_fields(self, epoch_day: EpochDay) -> DateFields:
        iso = iso_date_fields(epoch_day)
        return iso._replace(year=iso.year + self.year_offset)

    def epoch_day_unchecked(self, year: int, month: int, day: int) -> EpochDay:
        return iso_epoch_day(year - self.year_offset, month, day)

    def is_leap_year(self, year: int) -> bool:
        return iso_is_leap(year - self.year_offset)

    def length_of_month(self, year: int, month: int) -> int:
        return iso_month_length(year - self.year_offset, month)


class MinguoChronology(YearOffsetChronology):
    id = ChronologyId.MINGUO
    year_offset = -1911
    era_names = {0: "BEFORE_ROC", 1: "ROC"}


class ThaiBuddhistChronology(YearOffsetChronology):
    id = ChronologyId.THAI_BUDDHIST
    year_offset = 543
    era_names = {0: "BEFORE_BE", 1: "BE"}


MINGUO = MinguoChronology()
THAI_BUDDHIST = ThaiBuddhistChronology()
