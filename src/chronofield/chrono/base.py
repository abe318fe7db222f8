"""Chronology base: a self-consistent rule set plus the epoch conversion.

Each calendar system subclasses Chronology and supplies the date arithmetic
(epoch day <-> year/month/day, leap years, eras). Everything generic lives
here: rule construction, field extraction and derivation dispatched on
FieldKind, and date factories with validation.

Chronologies are process-wide singletons created when their module is
imported, and never mutated afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, NamedTuple

from chronofield.core.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from chronofield.core.errors import OutOfRangeError, UnsupportedFieldError
from chronofield.core.field import ChronoUnit, FieldKind, FieldRule, ValueRange
from chronofield.core.types import EpochDay, NanoOfDay

if TYPE_CHECKING:
    from chronofield.temporal.chrono_date import ChronoDate
    from chronofield.temporal.chrono_date_time import ChronoDateTime


class ChronologyId(Enum):
    """Tagged identity of the supported calendar systems."""

    ISO = "ISO"
    COPTIC = "Coptic"
    HIJRAH = "Hijrah"
    JAPANESE = "Japanese"
    MINGUO = "Minguo"
    THAI_BUDDHIST = "ThaiBuddhist"


class DateFields(NamedTuple):
    """Calendar fields of one day in one chronology."""

    year: int
    month: int
    day: int
    day_of_year: int


_UNITS: dict[FieldKind, tuple[ChronoUnit, ChronoUnit | None]] = {
    FieldKind.DAY_OF_MONTH: (ChronoUnit.DAYS, ChronoUnit.MONTHS),
    FieldKind.DAY_OF_YEAR: (ChronoUnit.DAYS, ChronoUnit.YEARS),
    FieldKind.MONTH_OF_YEAR: (ChronoUnit.MONTHS, ChronoUnit.YEARS),
    FieldKind.YEAR_OF_ERA: (ChronoUnit.YEARS, ChronoUnit.ERAS),
    FieldKind.YEAR: (ChronoUnit.YEARS, None),
    FieldKind.ERA: (ChronoUnit.ERAS, None),
    FieldKind.HOUR_OF_DAY: (ChronoUnit.HOURS, ChronoUnit.DAYS),
    FieldKind.MINUTE_OF_HOUR: (ChronoUnit.MINUTES, ChronoUnit.HOURS),
    FieldKind.SECOND_OF_MINUTE: (ChronoUnit.SECONDS, ChronoUnit.MINUTES),
    FieldKind.NANO_OF_SECOND: (ChronoUnit.NANOS, ChronoUnit.SECONDS),
    FieldKind.SECOND_OF_DAY: (ChronoUnit.SECONDS, ChronoUnit.DAYS),
    FieldKind.NANO_OF_DAY: (ChronoUnit.NANOS, ChronoUnit.DAYS),
}

_TIME_RANGES: dict[FieldKind, ValueRange] = {
    FieldKind.HOUR_OF_DAY: ValueRange.of(0, 23),
    FieldKind.MINUTE_OF_HOUR: ValueRange.of(0, 59),
    FieldKind.SECOND_OF_MINUTE: ValueRange.of(0, 59),
    FieldKind.NANO_OF_SECOND: ValueRange.of(0, NANOS_PER_SECOND - 1),
    FieldKind.SECOND_OF_DAY: ValueRange.of(0, SECONDS_PER_DAY - 1),
    FieldKind.NANO_OF_DAY: ValueRange.of(0, NANOS_PER_DAY - 1),
}

# Nanoseconds per unit of each time kind, used when setting into nano-of-day
_TIME_UNIT_NANOS: dict[FieldKind, int] = {
    FieldKind.HOUR_OF_DAY: NANOS_PER_HOUR,
    FieldKind.MINUTE_OF_HOUR: NANOS_PER_MINUTE,
    FieldKind.SECOND_OF_MINUTE: NANOS_PER_SECOND,
    FieldKind.NANO_OF_SECOND: 1,
    FieldKind.SECOND_OF_DAY: NANOS_PER_SECOND,
    FieldKind.NANO_OF_DAY: 1,
}


def time_field_from_nano_of_day(kind: FieldKind, nano_of_day: NanoOfDay) -> int:
    """Extract a time kind from nano-of-day."""
    match kind:
        case FieldKind.HOUR_OF_DAY:
            return nano_of_day // NANOS_PER_HOUR
        case FieldKind.MINUTE_OF_HOUR:
            return (nano_of_day // NANOS_PER_MINUTE) % 60
        case FieldKind.SECOND_OF_MINUTE:
            return (nano_of_day // NANOS_PER_SECOND) % 60
        case FieldKind.NANO_OF_SECOND:
            return nano_of_day % NANOS_PER_SECOND
        case FieldKind.SECOND_OF_DAY:
            return nano_of_day // NANOS_PER_SECOND
        case FieldKind.NANO_OF_DAY:
            return nano_of_day
    raise ValueError(f"{kind.name} is not a time field")


class Chronology(ABC):
    """A complete calendar system: its field rules and epoch conversion.

    Subclasses declare id, name, eras, months_in_year and the date-kind
    ranges, and implement the abstract date arithmetic. Two chronologies are
    equal only if they are the same calendar system.
    """

    id: ClassVar[ChronologyId]
    months_in_year: ClassVar[int] = 12
    era_names: ClassVar[dict[int, str]]
    current_era: ClassVar[int] = 1
    # Rules with an ordinal at or below this kind are 1-based
    one_based_threshold: ClassVar[FieldKind] = FieldKind.YEAR_OF_ERA

    def __init__(self) -> None:
        self._rules = self._build_rules()

    # --- Declarations -------------------------------------------------------

    @property
    def name(self) -> str:
        return self.id.value

    @property
    def rule_prefix(self) -> str:
        return self.name

    @abstractmethod
    def date_ranges(self) -> dict[FieldKind, ValueRange]:
        """Ranges of the six date kinds in this chronology."""
        ...

    def base_kinds(self) -> dict[FieldKind, FieldKind]:
        """Kind each rule is set into when replacing its value."""
        bases = {FieldKind.YEAR_OF_ERA: FieldKind.YEAR, FieldKind.ERA: FieldKind.YEAR}
        for kind in _TIME_RANGES:
            if kind is not FieldKind.NANO_OF_DAY:
                bases[kind] = FieldKind.NANO_OF_DAY
        return bases

    # --- Abstract date arithmetic -------------------------------------------

    @abstractmethod
    def date_fields(self, epoch_day: EpochDay) -> DateFields:
        """Convert an epoch day into this chronology's calendar fields."""
        ...

    @abstractmethod
    def epoch_day_unchecked(self, year: int, month: int, day: int) -> EpochDay:
        """Epoch day of year/month/day without validation.

        Linear in day, so a day past the end of the month lands in the
        following month.
        """
        ...

    @abstractmethod
    def is_leap_year(self, year: int) -> bool: ...

    @abstractmethod
    def length_of_month(self, year: int, month: int) -> int: ...

    def length_of_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    # --- Eras ---------------------------------------------------------------
    # Default: two eras split at year 1, year zero belongs to the earlier era.

    def era_of_year(self, year: int) -> int | None:
        """Era of a proleptic year, or None if the year alone does not decide it."""
        return 1 if year >= 1 else 0

    def year_of_era(self, year: int) -> int | None:
        return year if year >= 1 else 1 - year

    def proleptic_year(self, era: int, year_of_era: int) -> int:
        self.rule(FieldKind.ERA).check_value(era)
        return year_of_era if era == 1 else 1 - year_of_era

    def era_of_date(self, fields: DateFields, epoch_day: EpochDay) -> int:
        era = self.era_of_year(fields.year)
        if era is None:
            raise UnsupportedFieldError(f"{self.name} needs the full date to find the era of {fields.year}")
        return era

    def year_of_era_of_date(self, fields: DateFields, epoch_day: EpochDay) -> int:
        yoe = self.year_of_era(fields.year)
        if yoe is None:
            raise UnsupportedFieldError(f"{self.name} needs the full date to find the year-of-era of {fields.year}")
        return yoe

    def era_name(self, era: int) -> str:
        return self.era_names[era]

    # --- Rules --------------------------------------------------------------

    def _build_rules(self) -> tuple[FieldRule, ...]:
        ranges = {**self.date_ranges(), **_TIME_RANGES}
        bases = self.base_kinds()
        built: dict[FieldKind, FieldRule] = {}

        def build(kind: FieldKind) -> FieldRule:
            if kind in built:
                return built[kind]
            base_kind = bases.get(kind)
            unit, range_unit = _UNITS[kind]
            built[kind] = FieldRule(
                name=f"{self.rule_prefix}{kind.label}",
                kind=kind,
                period_unit=unit,
                period_range=range_unit,
                range=ranges[kind],
                ordinal=kind.value,
                chronology=self,
                base_rule=build(base_kind) if base_kind is not None else None,
            )
            return built[kind]

        for kind in FieldKind:
            build(kind)
        return tuple(built[kind] for kind in FieldKind)

    @property
    def rules(self) -> tuple[FieldRule, ...]:
        """All rules, indexed by ordinal."""
        return self._rules

    def rule(self, kind: FieldKind) -> FieldRule:
        return self._rules[kind.value]

    def rule_for_ordinal(self, ordinal: int) -> FieldRule:
        """Canonical rule singleton for an ordinal (deserialization)."""
        if not 0 <= ordinal < len(self._rules):
            raise ValueError(f"No {self.name} rule with ordinal {ordinal}")
        return self._rules[ordinal]

    # --- Field arithmetic, dispatched on FieldKind --------------------------

    def extract_from_epoch(
        self, rule: FieldRule, epoch_day: EpochDay, nano_of_day: NanoOfDay
    ) -> int | None:
        """Value of rule at the given epoch day and nano-of-day."""
        if rule.kind.is_time:
            return time_field_from_nano_of_day(rule.kind, nano_of_day)
        fields = self.date_fields(epoch_day)
        match rule.kind:
            case FieldKind.DAY_OF_MONTH:
                return fields.day
            case FieldKind.DAY_OF_YEAR:
                return fields.day_of_year
            case FieldKind.MONTH_OF_YEAR:
                return fields.month
            case FieldKind.YEAR:
                return fields.year
            case FieldKind.YEAR_OF_ERA:
                return self.year_of_era_of_date(fields, epoch_day)
            case FieldKind.ERA:
                return self.era_of_date(fields, epoch_day)
        return None

    def extract_from_other(self, rule: FieldRule, other: FieldRule, value: int) -> int | None:
        """Direct derivation of rule from another rule's value, or None."""
        match (rule.kind, other.kind):
            case (FieldKind.YEAR_OF_ERA, FieldKind.YEAR):
                return self.year_of_era(value)
            case (FieldKind.ERA, FieldKind.YEAR):
                return self.era_of_year(value)
            case (FieldKind.NANO_OF_DAY, _) | (FieldKind.NANO_OF_SECOND, FieldKind.SECOND_OF_DAY):
                return None
            case (kind, FieldKind.NANO_OF_DAY) if kind.is_time:
                return time_field_from_nano_of_day(kind, value)
            case (kind, FieldKind.SECOND_OF_DAY) if kind.is_time and kind is not FieldKind.SECOND_OF_DAY:
                return time_field_from_nano_of_day(kind, value * NANOS_PER_SECOND)
        return self.extract_date_from_other(rule.kind, other.kind, value)

    def extract_date_from_other(self, kind: FieldKind, other: FieldKind, value: int) -> int | None:
        """Chronology-specific date derivations. None by default."""
        return None

    def set_into(self, rule: FieldRule, new_value: int, base: FieldRule, base_value: int) -> int | None:
        """New base value with rule replaced, or None if undefined."""
        match (rule.kind, base.kind):
            case (kind, base_kind) if kind is base_kind:
                return new_value
            case (FieldKind.YEAR_OF_ERA, FieldKind.YEAR):
                era = self.era_of_year(base_value)
                return None if era is None else self.proleptic_year(era, new_value)
            case (FieldKind.ERA, FieldKind.YEAR):
                yoe = self.year_of_era(base_value)
                return None if yoe is None else self.proleptic_year(new_value, yoe)
            case (kind, FieldKind.NANO_OF_DAY) if kind.is_time:
                current = time_field_from_nano_of_day(kind, base_value)
                return base_value + (new_value - current) * _TIME_UNIT_NANOS[kind]
        return self.set_date_into(rule.kind, new_value, base.kind, base_value)

    def set_date_into(self, kind: FieldKind, new_value: int, base: FieldKind, base_value: int) -> int | None:
        """Chronology-specific date set-into relations. None by default."""
        return None

    def actual_range(self, rule: FieldRule, date: Any) -> ValueRange:
        """Range of rule for a specific date of this chronology."""
        match rule.kind:
            case FieldKind.DAY_OF_MONTH:
                return ValueRange.of(1, self.length_of_month(date.year, date.month))
            case FieldKind.DAY_OF_YEAR:
                return ValueRange.of(1, self.length_of_year(date.year))
        return rule.range

    # --- Date factories -----------------------------------------------------

    def check_epoch_day(self, epoch_day: EpochDay) -> DateFields:
        """Convert and validate that the epoch day is within supported years.

        Raises:
            OutOfRangeError: If the resulting year is unsupported.
        """
        fields = self.date_fields(epoch_day)
        self.rule(FieldKind.YEAR).check_value(fields.year)
        return fields

    def date_from_epoch_day(self, epoch_day: EpochDay) -> ChronoDate:
        # Late import to avoid circular dependency
        from chronofield.temporal.chrono_date import ChronoDate

        self.check_epoch_day(epoch_day)
        return ChronoDate(self, epoch_day)

    def date(self, year: int, month: int, day: int) -> ChronoDate:
        """Create a validated date from proleptic year, month and day.

        Raises:
            OutOfRangeError: If any field is invalid, including day 30 of a
                29-day month.
        """
        self.rule(FieldKind.YEAR).check_value(year)
        self.rule(FieldKind.MONTH_OF_YEAR).check_value(month)
        self.rule(FieldKind.DAY_OF_MONTH).check_value(day)
        check_month_day(self, year, month, day)
        return self.date_from_epoch_day(self.epoch_day_unchecked(year, month, day))

    def epoch_day_of(self, year: int, month: int, day: int) -> EpochDay:
        """Validated epoch day of year/month/day."""
        return self.date(year, month, day).epoch_day

    def date_of_year_day(self, year: int, day_of_year: int) -> ChronoDate:
        self.rule(FieldKind.YEAR).check_value(year)
        doy = self.rule(FieldKind.DAY_OF_YEAR)
        doy.check_value(day_of_year)
        ValueRange.of(1, self.length_of_year(year)).check_value(day_of_year, doy.name)
        return self.date_from_epoch_day(self.epoch_day_unchecked(year, 1, 1) + day_of_year - 1)

    def date_of_era(self, era: int, year_of_era: int, month: int, day: int) -> ChronoDate:
        self.rule(FieldKind.ERA).check_value(era)
        self.rule(FieldKind.YEAR_OF_ERA).check_value(year_of_era)
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def date_from(self, other: Any) -> ChronoDate:
        """Same day as another date, possibly of another chronology."""
        return self.date_from_epoch_day(other.to_epoch_day())

    def date_time(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> ChronoDateTime:
        from chronofield.temporal.local_time import LocalTime

        return self.date(year, month, day).at_time(LocalTime.of(hour, minute, second, nano))

    def format_date(self, date: ChronoDate) -> str:
        """Canonical date string, e.g. 'Coptic AM 1686-04-23'."""
        return f"{self.name} {self.era_name(date.era)} {date.year_of_era}-{date.month:02d}-{date.day:02d}"

    # --- Identity -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chronology):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self) -> tuple[Any, ...]:
        from chronofield.chrono.registry import get_chronology

        return (get_chronology, (self.id.value,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.name


def year_ranges(offset: int = 0) -> dict[FieldKind, ValueRange]:
    """YEAR, YEAR_OF_ERA and ERA ranges for an ISO-aligned year numbering."""
    lowest, highest = MIN_YEAR + offset, MAX_YEAR + offset
    return {
        FieldKind.YEAR: ValueRange.of(lowest, highest),
        FieldKind.YEAR_OF_ERA: ValueRange.of(1, max(highest, 1 - lowest)),
        FieldKind.ERA: ValueRange.of(0, 1),
    }


def check_month_day(chronology: Chronology, year: int, month: int, day: int) -> None:
    """Raise OutOfRangeError unless day exists in year/month."""
    length = chronology.length_of_month(year, month)
    if not 1 <= day <= length:
        raise OutOfRangeError(chronology.rule(FieldKind.DAY_OF_MONTH).name, day, ValueRange.of(1, length))
