"""Time of day without a date, and the time-plus-day-carry result.

LocalTime is immutable with nanosecond precision. Arithmetic wraps around
midnight; the *_with_overflow variants also report how many whole days the
wrap crossed.

Usage:
    t = LocalTime.of(23, 30)
    overflow = t.plus_with_overflow(1, 0, 0, 0)
    overflow.time, overflow.days  # 00:30, 1
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from chronofield.chrono.base import time_field_from_nano_of_day
from chronofield.chrono.iso import ISO
from chronofield.core.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronofield.core.errors import ChronologyMismatchError, UnsupportedFieldError
from chronofield.core.field import FieldKind, FieldRule
from chronofield.core.safe_math import safe_add, safe_multiply, safe_subtract

if TYPE_CHECKING:
    from chronofield.chrono.base import Chronology
    from chronofield.temporal.chrono_date import ChronoDate
    from chronofield.temporal.chrono_date_time import ChronoDateTime
    from chronofield.temporal.period import Period


@functools.total_ordering
class LocalTime:
    """An immutable time of day, 00:00 to 23:59:59.999999999.

    Created only through the factories. Whole hours are shared instances.
    """

    __slots__ = ("_hour", "_minute", "_second", "_nano")

    HOURS: ClassVar[tuple[LocalTime, ...]]
    MIDNIGHT: ClassVar[LocalTime]
    MIDDAY: ClassVar[LocalTime]

    _hour: int
    _minute: int
    _second: int
    _nano: int

    def __new__(cls, *args: Any, **kwargs: Any) -> LocalTime:
        raise TypeError("LocalTime has no public constructor, use LocalTime.of()")

    @classmethod
    def _new(cls, hour: int, minute: int, second: int, nano: int) -> LocalTime:
        self = object.__new__(cls)
        object.__setattr__(self, "_hour", hour)
        object.__setattr__(self, "_minute", minute)
        object.__setattr__(self, "_second", second)
        object.__setattr__(self, "_nano", nano)
        return self

    @classmethod
    def _create(cls, hour: int, minute: int, second: int, nano: int) -> LocalTime:
        if minute == 0 and second == 0 and nano == 0:
            return cls.HOURS[hour]
        return cls._new(hour, minute, second, nano)

    # --- Factories ----------------------------------------------------------

    @classmethod
    def of(cls, hour: int, minute: int = 0, second: int = 0, nano: int = 0) -> LocalTime:
        """Create a time from its components.

        Raises:
            OutOfRangeError: If any component is outside its ISO rule's range.
        """
        ISO.rule(FieldKind.HOUR_OF_DAY).check_value(hour)
        ISO.rule(FieldKind.MINUTE_OF_HOUR).check_value(minute)
        ISO.rule(FieldKind.SECOND_OF_MINUTE).check_value(second)
        ISO.rule(FieldKind.NANO_OF_SECOND).check_value(nano)
        return cls._create(hour, minute, second, nano)

    @classmethod
    def from_second_of_day(cls, second_of_day: int, nano: int = 0) -> LocalTime:
        ISO.rule(FieldKind.SECOND_OF_DAY).check_value(second_of_day)
        ISO.rule(FieldKind.NANO_OF_SECOND).check_value(nano)
        hours, rest = divmod(second_of_day, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return cls._create(hours, minutes, seconds, nano)

    @classmethod
    def from_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        ISO.rule(FieldKind.NANO_OF_DAY).check_value(nano_of_day)
        hours, rest = divmod(nano_of_day, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        seconds, nanos = divmod(rest, NANOS_PER_SECOND)
        return cls._create(hours, minutes, seconds, nanos)

    # --- Accessors ----------------------------------------------------------

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nano(self) -> int:
        return self._nano

    @property
    def chronology(self) -> Chronology:
        return ISO

    def to_second_of_day(self) -> int:
        return self._hour * SECONDS_PER_HOUR + self._minute * SECONDS_PER_MINUTE + self._second

    def to_nano_of_day(self) -> int:
        return self.to_second_of_day() * NANOS_PER_SECOND + self._nano

    def is_before(self, other: LocalTime) -> bool:
        return self._key() < other._key()

    def is_after(self, other: LocalTime) -> bool:
        return self._key() > other._key()

    def _check_rule(self, rule: FieldRule, operation: str) -> None:
        if rule.chronology is not ISO:
            raise ChronologyMismatchError(ISO, rule.chronology, operation)
        if not rule.is_time_based:
            raise UnsupportedFieldError(f"{rule.name} is not supported by LocalTime")

    def get(self, rule: FieldRule) -> int:
        """Value of an ISO time rule.

        Raises:
            UnsupportedFieldError: If the rule is not an ISO time rule.
        """
        if rule.chronology is not ISO:
            raise UnsupportedFieldError(f"{rule.name} is not a field of LocalTime")
        self._check_rule(rule, "LocalTime.get")
        return time_field_from_nano_of_day(rule.kind, self.to_nano_of_day())

    def with_field(self, rule: FieldRule, value: int) -> LocalTime:
        self._check_rule(rule, "LocalTime.with_field")
        rule.check_value(value)
        nano_of_day = rule.set_into(value, ISO.rule(FieldKind.NANO_OF_DAY), self.to_nano_of_day())
        return LocalTime.from_nano_of_day(nano_of_day)

    def with_hour(self, hour: int) -> LocalTime:
        if hour == self._hour:
            return self
        return LocalTime.of(hour, self._minute, self._second, self._nano)

    def with_minute(self, minute: int) -> LocalTime:
        if minute == self._minute:
            return self
        return LocalTime.of(self._hour, minute, self._second, self._nano)

    def with_second(self, second: int) -> LocalTime:
        if second == self._second:
            return self
        return LocalTime.of(self._hour, self._minute, second, self._nano)

    def with_nano(self, nano: int) -> LocalTime:
        if nano == self._nano:
            return self
        return LocalTime.of(self._hour, self._minute, self._second, nano)

    # --- Wrapping arithmetic ------------------------------------------------
    # Amounts are reduced modulo one day first, so these never overflow.

    def plus_hours(self, hours: int) -> LocalTime:
        if hours == 0:
            return self
        return LocalTime._create((self._hour + hours) % HOURS_PER_DAY, self._minute, self._second, self._nano)

    def plus_minutes(self, minutes: int) -> LocalTime:
        if minutes == 0:
            return self
        current = self._hour * MINUTES_PER_HOUR + self._minute
        updated = (current + minutes) % MINUTES_PER_DAY
        if updated == current:
            return self
        hour, minute = divmod(updated, MINUTES_PER_HOUR)
        return LocalTime._create(hour, minute, self._second, self._nano)

    def plus_seconds(self, seconds: int) -> LocalTime:
        if seconds == 0:
            return self
        current = self.to_second_of_day()
        updated = (current + seconds) % SECONDS_PER_DAY
        if updated == current:
            return self
        return LocalTime.from_second_of_day(updated, self._nano)

    def plus_nanos(self, nanos: int) -> LocalTime:
        if nanos == 0:
            return self
        current = self.to_nano_of_day()
        updated = (current + nanos) % NANOS_PER_DAY
        if updated == current:
            return self
        return LocalTime.from_nano_of_day(updated)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-(hours % HOURS_PER_DAY))

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-(minutes % MINUTES_PER_DAY))

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-(seconds % SECONDS_PER_DAY))

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-(nanos % NANOS_PER_DAY))

    # --- Arithmetic with day carry ------------------------------------------

    def plus_nanos_with_overflow(self, nanos: int) -> Overflow:
        """Add nanoseconds, reporting whole days crossed.

        Raises:
            ArithmeticOverflowError: If the unreduced sum exceeds a long.
        """
        if nanos == 0:
            return Overflow(self, 0)
        current = self.to_nano_of_day()
        days, updated = divmod(safe_add(current, nanos), NANOS_PER_DAY)
        time = self if updated == current else LocalTime.from_nano_of_day(updated)
        return Overflow(time, days)

    def minus_nanos_with_overflow(self, nanos: int) -> Overflow:
        if nanos == 0:
            return Overflow(self, 0)
        current = self.to_nano_of_day()
        days, updated = divmod(safe_subtract(current, nanos), NANOS_PER_DAY)
        time = self if updated == current else LocalTime.from_nano_of_day(updated)
        return Overflow(time, days)

    @staticmethod
    def _total_nanos(hours: int, minutes: int, seconds: int, nanos: int) -> int:
        total = safe_multiply(hours, NANOS_PER_HOUR)
        total = safe_add(total, safe_multiply(minutes, NANOS_PER_MINUTE))
        total = safe_add(total, safe_multiply(seconds, NANOS_PER_SECOND))
        return safe_add(total, nanos)

    def plus_with_overflow(self, hours: int, minutes: int, seconds: int, nanos: int) -> Overflow:
        """Add a combined amount, reporting whole days crossed."""
        return self.plus_nanos_with_overflow(self._total_nanos(hours, minutes, seconds, nanos))

    def minus_with_overflow(self, hours: int, minutes: int, seconds: int, nanos: int) -> Overflow:
        return self.minus_nanos_with_overflow(self._total_nanos(hours, minutes, seconds, nanos))

    def plus_period_with_overflow(self, period: Period) -> Overflow:
        """Add the time part of a period: hours, minutes, seconds, then nanos.

        Date components of the period are ignored.
        """
        return self._apply_period(period, LocalTime.plus_nanos_with_overflow)

    def minus_period_with_overflow(self, period: Period) -> Overflow:
        return self._apply_period(period, LocalTime.minus_nanos_with_overflow)

    def _apply_period(self, period: Period, step: Any) -> Overflow:
        time, days = self, 0
        for amount, unit_nanos in (
            (period.hours, NANOS_PER_HOUR),
            (period.minutes, NANOS_PER_MINUTE),
            (period.seconds, NANOS_PER_SECOND),
            (period.nanos, 1),
        ):
            overflow = step(time, safe_multiply(amount, unit_nanos))
            time, days = overflow.time, safe_add(days, overflow.days)
        return Overflow(time, days)

    def plus_period(self, period: Period) -> LocalTime:
        return self.plus_period_with_overflow(period).time

    def minus_period(self, period: Period) -> LocalTime:
        return self.minus_period_with_overflow(period).time

    # --- Combination --------------------------------------------------------

    def at_date(self, date: ChronoDate) -> ChronoDateTime:
        return date.at_time(self)

    def to_overflow(self, days: int = 0) -> Overflow:
        return Overflow(self, days)

    def adjust_with(self, target: Any) -> Any:
        """With-adjuster capability: replace the time of target."""
        if isinstance(target, LocalTime):
            return self
        return target.with_time(self)

    # --- Identity and formatting --------------------------------------------

    def to_canonical_string(self) -> str:
        """HH:mm, then :ss and a 3, 6 or 9 digit fraction when non-zero."""
        text = f"{self._hour:02d}:{self._minute:02d}"
        if self._second > 0 or self._nano > 0:
            text += f":{self._second:02d}"
            if self._nano > 0:
                if self._nano % 1_000_000 == 0:
                    text += f".{self._nano // 1_000_000:03d}"
                elif self._nano % 1000 == 0:
                    text += f".{self._nano // 1000:06d}"
                else:
                    text += f".{self._nano:09d}"
        return text

    def _key(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._nano)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("LocalTime is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("LocalTime is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (LocalTime.of, self._key())

    def __repr__(self) -> str:
        return f"LocalTime({self.to_canonical_string()})"

    def __str__(self) -> str:
        return self.to_canonical_string()


LocalTime.HOURS = tuple(LocalTime._new(hour, 0, 0, 0) for hour in range(HOURS_PER_DAY))
LocalTime.MIDNIGHT = LocalTime.HOURS[0]
LocalTime.MIDDAY = LocalTime.HOURS[12]


@dataclass(frozen=True, slots=True)
class Overflow:
    """A time of day plus the whole days carried out of an addition."""

    time: LocalTime
    days: int

    def to_date_time(self, date: ChronoDate) -> ChronoDateTime:
        """Apply the carried days to date and combine it with the time."""
        return date.plus_days(self.days).at_time(self.time)

    def __str__(self) -> str:
        return f"{self.time} + P{self.days}D"
