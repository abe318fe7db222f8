"""Tests for the Coptic chronology.

Why these tests exist:
- Coptic is the chronology with a 13th month, so it exercises every
  variable-length code path
- Its closed-form epoch conversion must agree with the field relations
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from chronofield import COPTIC, ISO, FieldKind, OutOfRangeError


def test_unix_epoch():
    """ISO 1970-01-01 is Coptic 1686-04-23."""
    date = COPTIC.date_from_epoch_day(0)
    assert (date.year, date.month, date.day) == (1686, 4, 23)
    assert COPTIC.date(1686, 4, 23).with_chronology(ISO) == ISO.date(1970, 1, 1)


def test_coptic_year_one_starts_284_08_29():
    assert COPTIC.date(1, 1, 1).with_chronology(ISO) == ISO.date(284, 8, 29)


@pytest.mark.parametrize(
    ("year", "leap"),
    [(3, True), (4, False), (1687, True), (1688, False), (-1, True), (0, False)],
)
def test_leap_years(year, leap):
    assert COPTIC.is_leap_year(year) is leap
    assert COPTIC.length_of_year(year) == (366 if leap else 365)
    assert COPTIC.length_of_month(year, 13) == (6 if leap else 5)


def test_thirteenth_month_limits():
    assert COPTIC.date(3, 13, 6).day_of_year == 366
    with pytest.raises(OutOfRangeError, match="CopticDayOfMonth"):
        COPTIC.date(4, 13, 6)


def test_months_in_year():
    assert COPTIC.months_in_year == 13
    date = COPTIC.date(1700, 12, 30)
    assert date.plus_months(1) == COPTIC.date(1700, 13, 5)
    assert date.plus_months(2) == COPTIC.date(1701, 1, 30)


def test_eras():
    date = COPTIC.date(0, 1, 1)
    assert date.era == 0
    assert date.year_of_era == 1
    assert COPTIC.date_of_era(0, 1, 1, 1) == date
    assert str(COPTIC.date(1686, 4, 23)) == "Coptic AM 1686-04-23"
    assert str(date) == "Coptic BEFORE_AM 1-01-01"


@given(epoch_day=st.integers(min_value=-1_000_000, max_value=1_000_000))
def test_day_of_year_relations_hold_for_every_day(epoch_day):
    """PROPERTY: For every epoch day, day-of-month and month-of-year follow from day-of-year.

    DOM = ((DOY-1) mod 30) + 1 and MOY = ((DOY-1) div 30) + 1.
    """
    date = COPTIC.date_from_epoch_day(epoch_day)
    doy = date.get(COPTIC.rule(FieldKind.DAY_OF_YEAR))
    assert date.get(COPTIC.rule(FieldKind.DAY_OF_MONTH)) == (doy - 1) % 30 + 1
    assert date.get(COPTIC.rule(FieldKind.MONTH_OF_YEAR)) == (doy - 1) // 30 + 1


@given(epoch_day=st.integers(min_value=-1_000_000, max_value=1_000_000))
def test_epoch_round_trip(epoch_day):
    """PROPERTY: Fields of an epoch day map back to the same epoch day."""
    date = COPTIC.date_from_epoch_day(epoch_day)
    assert COPTIC.date(date.year, date.month, date.day).epoch_day == epoch_day
    assert COPTIC.date_of_year_day(date.year, date.day_of_year).epoch_day == epoch_day


def test_with_day_of_month_goes_through_day_of_year():
    date = COPTIC.date(1700, 2, 10)
    assert date.with_day_of_month(30) == COPTIC.date(1700, 2, 30)
    with pytest.raises(OutOfRangeError, match="CopticDayOfMonth"):
        COPTIC.date(1701, 13, 1).with_day_of_month(6)


def test_with_month_clamps_day():
    assert COPTIC.date(1700, 2, 30).with_month(13) == COPTIC.date(1700, 13, 5)
    assert COPTIC.date(1700, 2, 30).with_month(5) == COPTIC.date(1700, 5, 30)
