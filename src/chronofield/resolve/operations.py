"""Pure resolution steps: derivation, assembly and cross-checking.

Each step takes the map of known values and returns a new result; the
builder chains them. Strict derivation visits sources in insertion order, so
conflict reports name the first writer. Lenient derivation visits them finest
rule first, so the value kept never depends on insertion order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chronofield.core.errors import IncompleteResolutionError, ResolutionConflictError
from chronofield.core.field import FieldKind, FieldRule
from chronofield.resolve.models import Strictness
from chronofield.temporal.local_time import LocalTime

if TYPE_CHECKING:
    from chronofield.chrono.base import Chronology
    from chronofield.temporal.chrono_date import ChronoDate

logger = logging.getLogger(__name__)

_TIME_COMPONENTS = (
    FieldKind.MINUTE_OF_HOUR,
    FieldKind.SECOND_OF_MINUTE,
    FieldKind.NANO_OF_SECOND,
)


def _sources(known: dict[FieldRule, int], strictness: Strictness) -> list[tuple[FieldRule, int]]:
    if strictness is Strictness.STRICT:
        return list(known.items())
    return sorted(known.items(), key=lambda item: item[0].ordinal, reverse=True)


def derive_values(
    chronology: Chronology,
    supplied: dict[FieldRule, int],
    strictness: Strictness,
) -> dict[FieldRule, int]:
    """Extend the supplied values with everything directly derivable.

    Iterates to a fixed point: a derived value can itself be a source.
    Supplied values are never replaced by derived ones.

    Raises:
        ResolutionConflictError: In strict mode, if a derivation disagrees
            with a value already known.
    """
    known = dict(supplied)
    compared: set[tuple[FieldRule, FieldRule]] = set()
    changed = True
    while changed:
        changed = False
        for source, source_value in _sources(known, strictness):
            for target in chronology.rules:
                if target is source or (source, target) in compared:
                    continue
                derived = target.extract_from_other(source, source_value)
                if derived is None:
                    continue
                compared.add((source, target))
                if target not in known:
                    logger.debug("Derived %s=%d from %s=%d", target.name, derived, source.name, source_value)
                    known[target] = derived
                    changed = True
                elif known[target] != derived:
                    if strictness is Strictness.STRICT:
                        raise ResolutionConflictError(
                            target.name, known[target], derived, f"{source.name} {source_value}"
                        )
                    logger.debug(
                        "Discarding %s=%d derived from %s, keeping %d",
                        target.name,
                        derived,
                        source.name,
                        known[target],
                    )
    return known


def _value(chronology: Chronology, known: dict[FieldRule, int], kind: FieldKind) -> int | None:
    return known.get(chronology.rule(kind))


def has_date_fields(chronology: Chronology, known: dict[FieldRule, int]) -> bool:
    return any(rule.is_date_based for rule in known if rule.chronology == chronology)


def has_time_fields(chronology: Chronology, known: dict[FieldRule, int]) -> bool:
    return any(rule.is_time_based for rule in known if rule.chronology == chronology)


def assemble_date(
    chronology: Chronology,
    known: dict[FieldRule, int],
    strictness: Strictness,
) -> ChronoDate:
    """Build the date from year plus month/day or day-of-year.

    Raises:
        IncompleteResolutionError: If no year or no day is known.
        OutOfRangeError: In strict mode, if the day does not exist.
    """
    year = _value(chronology, known, FieldKind.YEAR)
    if year is None:
        year_of_era = _value(chronology, known, FieldKind.YEAR_OF_ERA)
        if year_of_era is None:
            raise IncompleteResolutionError(f"Cannot resolve a {chronology.name} date: no year is known")
        era = _value(chronology, known, FieldKind.ERA)
        if era is None:
            era = chronology.current_era
        year = chronology.proleptic_year(era, year_of_era)
    chronology.rule(FieldKind.YEAR).check_value(year)

    month = _value(chronology, known, FieldKind.MONTH_OF_YEAR)
    day = _value(chronology, known, FieldKind.DAY_OF_MONTH)
    if month is not None and day is not None:
        if strictness is Strictness.LENIENT and day > chronology.length_of_month(year, month):
            logger.debug("Rolling %d-%d-%d over into the next month", year, month, day)
            return chronology.date_from_epoch_day(chronology.epoch_day_unchecked(year, month, day))
        return chronology.date(year, month, day)

    day_of_year = _value(chronology, known, FieldKind.DAY_OF_YEAR)
    if day_of_year is not None:
        if strictness is Strictness.LENIENT and day_of_year > chronology.length_of_year(year):
            logger.debug("Rolling day %d of %d over into the next year", day_of_year, year)
            return chronology.date_from_epoch_day(chronology.epoch_day_unchecked(year, 1, 1) + day_of_year - 1)
        return chronology.date_of_year_day(year, day_of_year)

    raise IncompleteResolutionError(
        f"Cannot resolve a {chronology.name} date: need month and day-of-month, or day-of-year"
    )


def assemble_time(chronology: Chronology, known: dict[FieldRule, int]) -> LocalTime:
    """Build the time of day; midnight if no time field is known.

    Raises:
        IncompleteResolutionError: If finer fields are known without an hour.
    """
    hour = _value(chronology, known, FieldKind.HOUR_OF_DAY)
    if hour is not None:
        minute, second, nano = (_value(chronology, known, kind) or 0 for kind in _TIME_COMPONENTS)
        return LocalTime.of(hour, minute, second, nano)
    nano_of_day = _value(chronology, known, FieldKind.NANO_OF_DAY)
    if nano_of_day is not None:
        return LocalTime.from_nano_of_day(nano_of_day)
    second_of_day = _value(chronology, known, FieldKind.SECOND_OF_DAY)
    if second_of_day is not None:
        return LocalTime.from_second_of_day(second_of_day, _value(chronology, known, FieldKind.NANO_OF_SECOND) or 0)
    if has_time_fields(chronology, known):
        names = ", ".join(rule.name for rule in known if rule.is_time_based)
        raise IncompleteResolutionError(f"Cannot resolve a time from {names} without an hour")
    return LocalTime.MIDNIGHT


def cross_check(
    date: ChronoDate | None,
    time: LocalTime,
    known: dict[FieldRule, int],
    strictness: Strictness,
) -> None:
    """Re-extract every known value from the result and compare.

    Without a date only time values are checked.

    Raises:
        ResolutionConflictError: In strict mode, on the first disagreement.
    """
    epoch_day = 0 if date is None else date.epoch_day
    for rule, value in known.items():
        if date is None and rule.is_date_based:
            continue
        actual = rule.extract_from_epoch(epoch_day, time.to_nano_of_day())
        if actual is None:
            continue
        if actual == value:
            continue
        if strictness is Strictness.STRICT:
            raise ResolutionConflictError(rule.name, value, actual, "resolved value")
        logger.debug("Discarding %s=%d, resolved value has %d", rule.name, value, actual)
