"""A date-time in a specific chronology: ChronoDate plus LocalTime."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from chronofield.core.adjust import check_same_chronology
from chronofield.core.errors import ChronologyMismatchError, UnsupportedFieldError
from chronofield.core.field import ChronoUnit, FieldKind, FieldRule
from chronofield.core.safe_math import safe_multiply
from chronofield.temporal.chrono_date import ChronoDate
from chronofield.temporal.local_time import LocalTime, Overflow

if TYPE_CHECKING:
    from chronofield.chrono.base import Chronology
    from chronofield.temporal.period import Period


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class ChronoDateTime:
    """Immutable date-time owned by the chronology of its date.

    Every adjuster entry point checks that the result is a ChronoDateTime of
    the same chronology before returning it.
    """

    date: ChronoDate
    time: LocalTime

    @property
    def chronology(self) -> Chronology:
        return self.date.chronology

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def to_epoch_day(self) -> int:
        return self.date.epoch_day

    def to_nano_of_day(self) -> int:
        return self.time.to_nano_of_day()

    def get(self, rule: FieldRule) -> int:
        """Value of any rule of this chronology.

        Raises:
            UnsupportedFieldError: If the rule belongs to another chronology.
        """
        if rule.chronology != self.chronology:
            raise UnsupportedFieldError(f"{rule.name} is not a field of {self.chronology.name}")
        value = rule.extract_from_epoch(self.date.epoch_day, self.time.to_nano_of_day())
        if value is None:
            raise UnsupportedFieldError(f"{rule.name} cannot be derived from a date-time")
        return value

    # --- Replacement --------------------------------------------------------

    def with_date(self, date: ChronoDate) -> ChronoDateTime:
        if date.chronology != self.chronology:
            raise ChronologyMismatchError(self.chronology, date.chronology, "ChronoDateTime.with_date")
        if date == self.date:
            return self
        return ChronoDateTime(date, self.time)

    def with_time(self, time: LocalTime) -> ChronoDateTime:
        if time == self.time:
            return self
        return ChronoDateTime(self.date, time)

    def with_field(self, date_time_field: Any, value: int) -> ChronoDateTime:
        """Copy with one field replaced.

        Raises:
            ChronologyMismatchError: If the rule or result belongs elsewhere.
            OutOfRangeError: If value is invalid for this date-time.
        """
        if not isinstance(date_time_field, FieldRule):
            candidate = date_time_field.set_value(self, value)
            return check_same_chronology(self, candidate, "ChronoDateTime.with_field")
        rule = date_time_field
        if rule.chronology != self.chronology:
            raise ChronologyMismatchError(self.chronology, rule.chronology, "ChronoDateTime.with_field")
        if rule.is_date_based:
            return self.with_date(self.date.with_field(rule, value))
        rule.check_value(value)
        nano_of_day = rule.set_into(value, self.chronology.rule(FieldKind.NANO_OF_DAY), self.to_nano_of_day())
        return self.with_time(LocalTime.from_nano_of_day(nano_of_day))

    # --- Arithmetic ---------------------------------------------------------

    def _plus_overflow(self, overflow: Overflow) -> ChronoDateTime:
        return overflow.to_date_time(self.date)

    def plus_days(self, days: int) -> ChronoDateTime:
        return self.with_date(self.date.plus_days(days))

    def plus_weeks(self, weeks: int) -> ChronoDateTime:
        return self.with_date(self.date.plus_weeks(weeks))

    def plus_months(self, months: int) -> ChronoDateTime:
        return self.with_date(self.date.plus_months(months))

    def plus_years(self, years: int) -> ChronoDateTime:
        return self.with_date(self.date.plus_years(years))

    def plus_hours(self, hours: int) -> ChronoDateTime:
        return self._plus_overflow(self.time.plus_with_overflow(hours, 0, 0, 0))

    def plus_minutes(self, minutes: int) -> ChronoDateTime:
        return self._plus_overflow(self.time.plus_with_overflow(0, minutes, 0, 0))

    def plus_seconds(self, seconds: int) -> ChronoDateTime:
        return self._plus_overflow(self.time.plus_with_overflow(0, 0, seconds, 0))

    def plus_nanos(self, nanos: int) -> ChronoDateTime:
        return self._plus_overflow(self.time.plus_nanos_with_overflow(nanos))

    def plus_amount(self, amount: int, unit: Any) -> ChronoDateTime:
        """Add an amount of a unit, carrying time overflow into the date.

        Raises:
            UnsupportedFieldError: For the era unit.
        """
        if not isinstance(unit, ChronoUnit):
            return check_same_chronology(self, unit.add_to(self, amount), "ChronoDateTime.plus_amount")
        if unit.is_time_based:
            nanos = safe_multiply(amount, unit.estimated_nanos)
            return self._plus_overflow(self.time.plus_nanos_with_overflow(nanos))
        return self.with_date(self.date.plus_amount(amount, unit))

    def minus_amount(self, amount: int, unit: Any) -> ChronoDateTime:
        return self.plus_amount(-amount, unit)

    def plus_period(self, period: Period) -> ChronoDateTime:
        """Add a period: years, months and days to the date, then the time part."""
        date = self.date.plus_years(period.years).plus_months(period.months).plus_days(period.days)
        overflow = self.time.plus_period_with_overflow(period)
        return overflow.to_date_time(date)

    def minus_period(self, period: Period) -> ChronoDateTime:
        date = self.date.minus_years(period.years).minus_months(period.months).minus_days(period.days)
        overflow = self.time.minus_period_with_overflow(period)
        return overflow.to_date_time(date)

    # --- Adjusters ----------------------------------------------------------

    def with_adjuster(self, adjuster: Any) -> ChronoDateTime:
        """Apply a with-adjuster, e.g. a ChronoDate or LocalTime.

        Raises:
            ChronologyMismatchError: If the adjuster yields another chronology.
            TypeError: If the adjuster yields something other than a date-time.
        """
        return check_same_chronology(self, adjuster.adjust_with(self), "ChronoDateTime.with_adjuster")

    def plus(self, adjuster: Any) -> ChronoDateTime:
        return check_same_chronology(self, adjuster.adjust_plus(self), "ChronoDateTime.plus")

    def minus(self, adjuster: Any) -> ChronoDateTime:
        return check_same_chronology(self, adjuster.adjust_minus(self), "ChronoDateTime.minus")

    def with_chronology(self, chronology: Chronology) -> ChronoDateTime:
        return ChronoDateTime(self.date.with_chronology(chronology), self.time)

    # --- Identity and formatting --------------------------------------------

    def to_canonical_string(self) -> str:
        return f"{self.date.to_canonical_string()}T{self.time.to_canonical_string()}"

    def _key(self) -> tuple[int, int]:
        return (self.date.epoch_day, self.time.to_nano_of_day())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChronoDateTime):
            return NotImplemented
        return self.date == other.date and self.time == other.time

    def __lt__(self, other: ChronoDateTime) -> bool:
        if not isinstance(other, ChronoDateTime):
            return NotImplemented
        if other.chronology != self.chronology:
            raise ChronologyMismatchError(self.chronology, other.chronology, "date-time ordering")
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self.chronology.id, *self._key()))

    def __str__(self) -> str:
        return self.to_canonical_string()
