"""Tests for the ISO chronology."""

import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from chronofield import ISO, FieldKind, OutOfRangeError, UnsupportedFieldError
from chronofield.chrono.iso import IsoChronology


@given(day=st.dates())
def test_matches_python_calendar(day):
    """PROPERTY: ISO fields agree with the standard library's proleptic Gregorian calendar."""
    epoch_day = day.toordinal() - datetime.date(1970, 1, 1).toordinal()
    date = ISO.date_from_epoch_day(epoch_day)
    assert (date.year, date.month, date.day) == (day.year, day.month, day.day)
    assert date.day_of_year == day.timetuple().tm_yday
    assert ISO.epoch_day_of(day.year, day.month, day.day) == epoch_day


@pytest.mark.parametrize(
    ("year", "leap"),
    [(2024, True), (2023, False), (1900, False), (2000, True), (0, True), (-4, True), (-1, False)],
)
def test_leap_years(year, leap):
    assert ISO.is_leap_year(year) is leap


def test_invalid_dates_rejected():
    with pytest.raises(OutOfRangeError, match="DayOfMonth"):
        ISO.date(2023, 2, 29)
    with pytest.raises(OutOfRangeError, match="MonthOfYear"):
        ISO.date(2023, 13, 1)
    with pytest.raises(OutOfRangeError, match="DayOfYear"):
        ISO.date_of_year_day(2023, 366)


def test_eras():
    assert ISO.date(0, 6, 1).era == 0
    assert ISO.date(0, 6, 1).year_of_era == 1
    assert ISO.date(-1, 6, 1).year_of_era == 2
    assert ISO.date_of_era(0, 2, 6, 1) == ISO.date(-1, 6, 1)


@pytest.mark.parametrize(
    ("date", "text"),
    [
        (ISO.date(1970, 1, 1), "1970-01-01"),
        (ISO.date(12345, 1, 1), "+12345-01-01"),
        (ISO.date(-1, 12, 31), "-0001-12-31"),
    ],
    ids=["plain", "big-year", "negative-year"],
)
def test_canonical_string(date, text):
    assert date.to_canonical_string() == text


def test_time_rule_not_supported_by_date():
    with pytest.raises(UnsupportedFieldError):
        ISO.date(2024, 1, 1).get(ISO.rule(FieldKind.HOUR_OF_DAY))


def test_year_limits():
    with pytest.raises(OutOfRangeError, match="Year"):
        ISO.date(1_000_000_000, 1, 1)


class _DateDependentEras(IsoChronology):
    """ISO whose era cannot be read from the year alone."""

    def era_of_year(self, year):
        return None

    def year_of_era(self, year):
        return None


def test_era_without_year_derivation_is_unsupported():
    """Chronologies that only know eras from full dates must override the date lookups."""
    chronology = _DateDependentEras()
    fields = ISO.date_fields(0)
    with pytest.raises(UnsupportedFieldError, match="era of 1970"):
        chronology.era_of_date(fields, 0)
    with pytest.raises(UnsupportedFieldError, match="year-of-era of 1970"):
        chronology.year_of_era_of_date(fields, 0)
