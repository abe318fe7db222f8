"""A date in a specific chronology.

A ChronoDate is an epoch day paired with the chronology that interprets it.
Conversion between chronologies is explicit (with_chronology); every other
operation stays within the date's own chronology and rejects values from
any other.

Usage:
    date = COPTIC.date(1686, 4, 23)
    date.with_chronology(ISO)  # 1970-01-01
    date.plus_months(13)       # Coptic AM 1687-04-23
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from chronofield.core.adjust import check_same_chronology
from chronofield.core.constants import DAYS_PER_WEEK
from chronofield.core.errors import ChronologyMismatchError, UnsupportedFieldError
from chronofield.core.field import ChronoUnit, FieldKind, FieldRule
from chronofield.core.safe_math import safe_add, safe_multiply

if TYPE_CHECKING:
    from chronofield.chrono.base import Chronology, DateFields
    from chronofield.temporal.chrono_date_time import ChronoDateTime
    from chronofield.temporal.local_time import LocalTime
    from chronofield.temporal.period import Period


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class ChronoDate:
    """Immutable date: an epoch day interpreted by one chronology.

    Create through the chronology's factories, which validate the fields.
    """

    chronology: Chronology
    epoch_day: int
    _fields: DateFields = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_fields", self.chronology.date_fields(self.epoch_day))

    # --- Accessors ----------------------------------------------------------

    @property
    def year(self) -> int:
        """Proleptic year."""
        return self._fields.year

    @property
    def month(self) -> int:
        return self._fields.month

    @property
    def day(self) -> int:
        return self._fields.day

    @property
    def day_of_year(self) -> int:
        return self._fields.day_of_year

    @property
    def era(self) -> int:
        return self.chronology.era_of_date(self._fields, self.epoch_day)

    @property
    def year_of_era(self) -> int:
        return self.chronology.year_of_era_of_date(self._fields, self.epoch_day)

    def to_epoch_day(self) -> int:
        return self.epoch_day

    def is_leap_year(self) -> bool:
        return self.chronology.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return self.chronology.length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return self.chronology.length_of_year(self.year)

    def _check_rule(self, rule: FieldRule, operation: str) -> None:
        if rule.chronology != self.chronology:
            raise ChronologyMismatchError(self.chronology, rule.chronology, operation)
        if rule.is_time_based:
            raise UnsupportedFieldError(f"{rule.name} is not supported by a date")

    def get(self, rule: FieldRule) -> int:
        """Value of a date rule of this chronology.

        Raises:
            UnsupportedFieldError: If the rule belongs to another chronology
                or is time-based.
        """
        if rule.chronology != self.chronology:
            raise UnsupportedFieldError(f"{rule.name} is not a field of {self.chronology.name}")
        self._check_rule(rule, "ChronoDate.get")
        value = rule.extract_from_epoch(self.epoch_day, 0)
        if value is None:
            raise UnsupportedFieldError(f"{rule.name} cannot be derived from a date")
        return value

    # --- Field replacement --------------------------------------------------

    def with_field(self, date_field: Any, value: int) -> ChronoDate:
        """Copy with one field replaced.

        Native rules are applied directly. Any other field-setter capability
        is invoked and its result checked to be a date of this chronology.

        Raises:
            ChronologyMismatchError: If the rule or result belongs elsewhere.
            OutOfRangeError: If value is invalid for this date.
        """
        if not isinstance(date_field, FieldRule):
            return check_same_chronology(self, date_field.set_value(self, value), "ChronoDate.with_field")
        rule = date_field
        self._check_rule(rule, "ChronoDate.with_field")
        rule.check_value(value)
        if rule.kind in (FieldKind.DAY_OF_MONTH, FieldKind.DAY_OF_YEAR):
            rule.get_value_range(self).check_value(value, rule.name)
        base = rule.base_rule
        if base is not None and base.is_date_based:
            new_base = rule.set_into(value, base, self.get(base))
            # Out-of-range results fall back to the clamping path below
            if new_base is not None and base.get_value_range(self).contains(new_base):
                return self.with_field(base, new_base)
        return self._with_kind(rule.kind, value)

    def _with_kind(self, kind: FieldKind, value: int) -> ChronoDate:
        chronology = self.chronology
        match kind:
            case FieldKind.DAY_OF_MONTH:
                return chronology.date(self.year, self.month, value)
            case FieldKind.DAY_OF_YEAR:
                return chronology.date_of_year_day(self.year, value)
            case FieldKind.MONTH_OF_YEAR:
                return self._resolve_previous_valid(self.year, value)
            case FieldKind.YEAR:
                return self._resolve_previous_valid(value, self.month)
            case FieldKind.YEAR_OF_ERA:
                return self._resolve_previous_valid(chronology.proleptic_year(self.era, value), self.month)
            case FieldKind.ERA:
                return self._resolve_previous_valid(chronology.proleptic_year(value, self.year_of_era), self.month)
        raise UnsupportedFieldError(f"{kind.name} is not supported by a date")

    def _resolve_previous_valid(self, year: int, month: int) -> ChronoDate:
        """Date at year/month keeping the day, clamped to the month's end."""
        day = min(self.day, self.chronology.length_of_month(year, month))
        return self.chronology.date(year, month, day)

    def with_day_of_month(self, day: int) -> ChronoDate:
        return self.with_field(self.chronology.rule(FieldKind.DAY_OF_MONTH), day)

    def with_day_of_year(self, day_of_year: int) -> ChronoDate:
        return self.with_field(self.chronology.rule(FieldKind.DAY_OF_YEAR), day_of_year)

    def with_month(self, month: int) -> ChronoDate:
        return self.with_field(self.chronology.rule(FieldKind.MONTH_OF_YEAR), month)

    def with_year(self, year: int) -> ChronoDate:
        return self.with_field(self.chronology.rule(FieldKind.YEAR), year)

    # --- Arithmetic ---------------------------------------------------------

    def plus_days(self, days: int) -> ChronoDate:
        if days == 0:
            return self
        return self.chronology.date_from_epoch_day(safe_add(self.epoch_day, days))

    def plus_weeks(self, weeks: int) -> ChronoDate:
        return self.plus_days(safe_multiply(weeks, DAYS_PER_WEEK))

    def plus_months(self, months: int) -> ChronoDate:
        """Add months, clamping the day to the end of the resulting month."""
        if months == 0:
            return self
        per_year = self.chronology.months_in_year
        year, month0 = divmod(self.year * per_year + self.month - 1 + months, per_year)
        self.chronology.rule(FieldKind.YEAR).check_value(year)
        return self._resolve_previous_valid(year, month0 + 1)

    def plus_years(self, years: int) -> ChronoDate:
        if years == 0:
            return self
        year = safe_add(self.year, years)
        self.chronology.rule(FieldKind.YEAR).check_value(year)
        return self._resolve_previous_valid(year, self.month)

    def minus_days(self, days: int) -> ChronoDate:
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> ChronoDate:
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> ChronoDate:
        return self.plus_months(-months)

    def minus_years(self, years: int) -> ChronoDate:
        return self.plus_years(-years)

    def plus_amount(self, amount: int, unit: Any) -> ChronoDate:
        """Add an amount of a unit.

        Raises:
            UnsupportedFieldError: For time-based units and eras.
        """
        if not isinstance(unit, ChronoUnit):
            return check_same_chronology(self, unit.add_to(self, amount), "ChronoDate.plus_amount")
        match unit:
            case ChronoUnit.DAYS:
                return self.plus_days(amount)
            case ChronoUnit.WEEKS:
                return self.plus_weeks(amount)
            case ChronoUnit.MONTHS:
                return self.plus_months(amount)
            case ChronoUnit.YEARS:
                return self.plus_years(amount)
        raise UnsupportedFieldError(f"Unit {unit} is not supported by a date")

    def minus_amount(self, amount: int, unit: Any) -> ChronoDate:
        return self.plus_amount(-amount, unit)

    def plus_period(self, period: Period) -> ChronoDate:
        """Add the years, months and days of a period, in that order.

        Raises:
            UnsupportedFieldError: If the period has a time part.
        """
        if period.has_time:
            raise UnsupportedFieldError(f"Period {period} has a time part and cannot be added to a date")
        return self.plus_years(period.years).plus_months(period.months).plus_days(period.days)

    def minus_period(self, period: Period) -> ChronoDate:
        if period.has_time:
            raise UnsupportedFieldError(f"Period {period} has a time part and cannot be added to a date")
        return self.minus_years(period.years).minus_months(period.months).minus_days(period.days)

    # --- Adjusters ----------------------------------------------------------

    def with_adjuster(self, adjuster: Any) -> ChronoDate:
        return check_same_chronology(self, adjuster.adjust_with(self), "ChronoDate.with_adjuster")

    def plus(self, adjuster: Any) -> ChronoDate:
        return check_same_chronology(self, adjuster.adjust_plus(self), "ChronoDate.plus")

    def minus(self, adjuster: Any) -> ChronoDate:
        return check_same_chronology(self, adjuster.adjust_minus(self), "ChronoDate.minus")

    def adjust_with(self, target: Any) -> Any:
        """With-adjuster capability: replace the date of target."""
        if isinstance(target, ChronoDate):
            return self
        return target.with_date(self)

    # --- Combination and conversion -----------------------------------------

    def at_time(self, time: LocalTime) -> ChronoDateTime:
        from chronofield.temporal.chrono_date_time import ChronoDateTime

        return ChronoDateTime(self, time)

    def at_start_of_day(self) -> ChronoDateTime:
        from chronofield.temporal.local_time import LocalTime

        return self.at_time(LocalTime.MIDNIGHT)

    def with_chronology(self, chronology: Chronology) -> ChronoDate:
        """Same day in another chronology."""
        if chronology == self.chronology:
            return self
        return chronology.date_from_epoch_day(self.epoch_day)

    # --- Identity and formatting --------------------------------------------

    def to_canonical_string(self) -> str:
        return self.chronology.format_date(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChronoDate):
            return NotImplemented
        return self.chronology == other.chronology and self.epoch_day == other.epoch_day

    def __lt__(self, other: ChronoDate) -> bool:
        if not isinstance(other, ChronoDate):
            return NotImplemented
        if other.chronology != self.chronology:
            raise ChronologyMismatchError(self.chronology, other.chronology, "date ordering")
        return self.epoch_day < other.epoch_day

    def __hash__(self) -> int:
        return hash((self.chronology.id, self.epoch_day))

    def __str__(self) -> str:
        return self.to_canonical_string()
