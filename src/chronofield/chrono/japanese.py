"""Japanese imperial chronology.

ISO months, days and proleptic years, numbered within the imperial eras
from Meiji onwards. Dates before 1868-01-01 are not supported. An era is a
property of the date, not of the year alone: 1989 is both Showa 64 and
Heisei 1.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronofield.chrono.base import Chronology, ChronologyId, DateFields
from chronofield.chrono.iso import iso_date_fields, iso_epoch_day, iso_is_leap, iso_month_length
from chronofield.core.constants import MAX_YEAR
from chronofield.core.errors import OutOfRangeError
from chronofield.core.field import FieldKind, ValueRange
from chronofield.core.types import EpochDay


@dataclass(frozen=True, slots=True)
class JapaneseEra:
    """An imperial era and the ISO date it starts on."""

    value: int
    name: str
    start_year: int
    start_month: int
    start_day: int

    @property
    def start_epoch_day(self) -> EpochDay:
        return iso_epoch_day(self.start_year, self.start_month, self.start_day)


ERAS: tuple[JapaneseEra, ...] = (
    JapaneseEra(-1, "MEIJI", 1868, 1, 1),
    JapaneseEra(0, "TAISHO", 1912, 7, 30),
    JapaneseEra(1, "SHOWA", 1926, 12, 25),
    JapaneseEra(2, "HEISEI", 1989, 1, 8),
    JapaneseEra(3, "REIWA", 2019, 5, 1),
)
_ERAS_BY_VALUE = {era.value: era for era in ERAS}
MIN_EPOCH_DAY: EpochDay = ERAS[0].start_epoch_day


def era_at(epoch_day: EpochDay) -> JapaneseEra:
    for era in reversed(ERAS):
        if epoch_day >= era.start_epoch_day:
            return era
    raise OutOfRangeError("JapaneseEra", epoch_day, f">= {MIN_EPOCH_DAY} (1868-01-01)")


class JapaneseChronology(Chronology):
    id = ChronologyId.JAPANESE
    era_names = {era.value: era.name for era in ERAS}
    current_era = ERAS[-1].value

    def date_ranges(self) -> dict[FieldKind, ValueRange]:
        return {
            FieldKind.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
            FieldKind.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
            FieldKind.MONTH_OF_YEAR: ValueRange.of(1, 12),
            # Taisho is the shortest era at 15 years
            FieldKind.YEAR_OF_ERA: ValueRange.of(1, 15, MAX_YEAR - ERAS[-1].start_year + 1),
            FieldKind.YEAR: ValueRange.of(ERAS[0].start_year, MAX_YEAR),
            FieldKind.ERA: ValueRange.of(ERAS[0].value, ERAS[-1].value),
        }

    def date_fields(self, epoch_day: EpochDay) -> DateFields:
        return iso_date_fields(epoch_day)

    def epoch_day_unchecked(self, year: int, month: int, day: int) -> EpochDay:
        return iso_epoch_day(year, month, day)

    def is_leap_year(self, year: int) -> bool:
        return iso_is_leap(year)

    def length_of_month(self, year: int, month: int) -> int:
        return iso_month_length(year, month)

    def check_epoch_day(self, epoch_day: EpochDay) -> DateFields:
        if epoch_day < MIN_EPOCH_DAY:
            raise OutOfRangeError(self.name, epoch_day, f"epoch days >= {MIN_EPOCH_DAY} (1868-01-01)")
        return super().check_epoch_day(epoch_day)

    # Year alone does not decide the era

    def era_of_year(self, year: int) -> int | None:
        return None

    def year_of_era(self, year: int) -> int | None:
        return None

    def proleptic_year(self, era: int, year_of_era: int) -> int:
        self.rule(FieldKind.ERA).check_value(era)
        return _ERAS_BY_VALUE[era].start_year + year_of_era - 1

    def era_of_date(self, fields: DateFields, epoch_day: EpochDay) -> int:
        return era_at(epoch_day).value

    def year_of_era_of_date(self, fields: DateFields, epoch_day: EpochDay) -> int:
        return fields.year - era_at(epoch_day).start_year + 1

    def date_of_era(self, era: int, year_of_era: int, month: int, day: int):
        """Create a date from era fields, rejecting dates outside the era.

        Raises:
            OutOfRangeError: If the date falls in another era, e.g. Heisei 1-01-01.
        """
        date = super().date_of_era(era, year_of_era, month, day)
        if date.era != era:
            raise OutOfRangeError(
                self.rule(FieldKind.YEAR_OF_ERA).name,
                year_of_era,
                f"dates within {self.era_name(era)}",
            )
        return date


JAPANESE = JapaneseChronology()
