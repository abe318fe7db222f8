"""Tests for ChronoDate and ChronoDateTime."""

import pickle

import pytest

from chronofield import (
    COPTIC,
    HIJRAH,
    ISO,
    JAPANESE,
    ChronologyMismatchError,
    ChronoUnit,
    FieldKind,
    LocalTime,
    UnsupportedFieldError,
)


def test_conversion_keeps_epoch_day(chronology):
    """Every chronology agrees on the day it denotes."""
    iso = ISO.date(2024, 6, 1)
    converted = iso.with_chronology(chronology)
    assert converted.epoch_day == iso.epoch_day
    assert chronology.date_from(iso) == converted
    assert converted.with_chronology(ISO) == iso


@pytest.mark.parametrize(
    ("start", "months", "expected"),
    [
        (ISO.date(2024, 1, 31), 1, ISO.date(2024, 2, 29)),
        (ISO.date(2024, 1, 31), -2, ISO.date(2023, 11, 30)),
        (ISO.date(2024, 3, 15), 22, ISO.date(2026, 1, 15)),
        (HIJRAH.date(1445, 1, 30), 1, HIJRAH.date(1445, 2, 29)),
    ],
    ids=["clamp-leap", "backwards", "across-years", "hijrah"],
)
def test_plus_months(start, months, expected):
    assert start.plus_months(months) == expected


def test_plus_amount_units():
    date = ISO.date(2024, 1, 1)
    assert date.plus_amount(2, ChronoUnit.WEEKS) == ISO.date(2024, 1, 15)
    assert date.plus_amount(1, ChronoUnit.YEARS) == ISO.date(2025, 1, 1)
    assert date.minus_amount(1, ChronoUnit.DAYS) == ISO.date(2023, 12, 31)
    with pytest.raises(UnsupportedFieldError):
        date.plus_amount(1, ChronoUnit.HOURS)


def test_with_field():
    date = ISO.date(2024, 3, 31)
    assert date.with_field(ISO.rule(FieldKind.MONTH_OF_YEAR), 2) == ISO.date(2024, 2, 29)
    assert date.with_field(ISO.rule(FieldKind.YEAR_OF_ERA), 2023) == ISO.date(2023, 3, 31)
    assert date.with_field(ISO.rule(FieldKind.ERA), 0) == ISO.date(-2023, 3, 31)
    assert date.with_day_of_year(1) == ISO.date(2024, 1, 1)
    assert date.with_year(2023) == ISO.date(2023, 3, 31)


def test_with_field_rejects_other_chronology():
    with pytest.raises(ChronologyMismatchError):
        ISO.date(2024, 1, 1).with_field(COPTIC.rule(FieldKind.DAY_OF_MONTH), 5)


def test_japanese_year_of_era_keeps_era():
    date = JAPANESE.date(2020, 6, 1)
    assert date.with_field(JAPANESE.rule(FieldKind.YEAR_OF_ERA), 5) == JAPANESE.date(2023, 6, 1)


def test_ordering_within_chronology_only():
    assert ISO.date(2024, 1, 1) < ISO.date(2024, 1, 2)
    with pytest.raises(ChronologyMismatchError):
        _ = ISO.date(2024, 1, 1) < COPTIC.date(1740, 1, 1)
    assert ISO.date(1970, 1, 1) != COPTIC.date(1686, 4, 23)


@pytest.mark.parametrize(
    "value",
    [ISO.date(2024, 1, 1), ISO.date_time(2024, 1, 1, 12), LocalTime.of(12, 0)],
    ids=["date", "date-time", "time"],
)
def test_get_with_other_chronology_rule_is_unsupported(value):
    """CRITICAL: Querying a rule the value's chronology does not define is recoverable.

    Why: Formatters retry with another rule on UnsupportedFieldError;
    a mismatch error would abort formatting instead.
    """
    with pytest.raises(UnsupportedFieldError, match="Coptic"):
        value.get(COPTIC.rule(FieldKind.MONTH_OF_YEAR))
    with pytest.raises(UnsupportedFieldError):
        value.get(HIJRAH.rule(FieldKind.HOUR_OF_DAY))


def test_date_time_accessors():
    date_time = COPTIC.date_time(1686, 4, 23, 13, 5, 0, 9)
    assert date_time.get(COPTIC.rule(FieldKind.MONTH_OF_YEAR)) == 4
    assert date_time.get(COPTIC.rule(FieldKind.NANO_OF_SECOND)) == 9
    assert str(date_time) == "Coptic AM 1686-04-23T13:05:00.000000009"
    with pytest.raises(UnsupportedFieldError, match="HourOfDay"):
        date_time.get(ISO.rule(FieldKind.HOUR_OF_DAY))


def test_date_time_with_field():
    date_time = ISO.date_time(2024, 1, 31, 10, 30)
    assert date_time.with_field(ISO.rule(FieldKind.HOUR_OF_DAY), 7) == ISO.date_time(2024, 1, 31, 7, 30)
    assert date_time.with_field(ISO.rule(FieldKind.MONTH_OF_YEAR), 2) == ISO.date_time(2024, 2, 29, 10, 30)


def test_date_time_time_units_carry_into_date():
    date_time = ISO.date_time(2024, 12, 31, 23, 59)
    assert date_time.plus_amount(1, ChronoUnit.MINUTES) == ISO.date_time(2025, 1, 1)
    assert date_time.plus_hours(-24) == ISO.date_time(2024, 12, 30, 23, 59)
    assert date_time.plus_nanos(60_000_000_000) == ISO.date_time(2025, 1, 1)
    with pytest.raises(UnsupportedFieldError):
        date_time.plus_amount(1, ChronoUnit.ERAS)


def test_date_and_time_are_adjusters():
    date_time = ISO.date_time(2024, 1, 1, 10)
    assert date_time.with_adjuster(LocalTime.of(18)) == ISO.date_time(2024, 1, 1, 18)
    assert date_time.with_adjuster(ISO.date(2025, 5, 5)) == ISO.date_time(2025, 5, 5, 10)
    assert LocalTime.of(18).at_date(ISO.date(2024, 1, 1)) == ISO.date_time(2024, 1, 1, 18)


def test_pickle_round_trip(chronology):
    date_time = ISO.date_time(2024, 6, 1, 12, 0, 1).with_chronology(chronology)
    restored = pickle.loads(pickle.dumps(date_time))
    assert restored == date_time
    assert restored.chronology is chronology
