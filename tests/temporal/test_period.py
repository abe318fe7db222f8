"""Tests for Period."""

import pytest

from chronofield import ISO, ArithmeticOverflowError, LocalTime, Period, UnsupportedFieldError
from chronofield.core.constants import LONG_MAX


@pytest.mark.parametrize(
    ("period", "text"),
    [
        (Period(), "PT0S"),
        (Period(years=1, months=2, days=3), "P1Y2M3D"),
        (Period(hours=4, minutes=5), "PT4H5M"),
        (Period(days=1, seconds=6, nanos=500_000_000), "P1DT6.5S"),
        (Period(seconds=-1, nanos=-1), "PT-1.000000001S"),
    ],
    ids=["zero", "date", "time", "fraction", "negative"],
)
def test_canonical_string(period, text):
    assert period.to_canonical_string() == text


def test_arithmetic():
    period = Period(years=1, hours=2)
    assert period.plus(Period(years=1)) == Period(years=2, hours=2)
    assert period.minus(period).is_zero()
    assert period.multiplied_by(3) == Period(years=3, hours=6)
    assert period.negated() == Period(years=-1, hours=-2)
    with pytest.raises(ArithmeticOverflowError):
        Period(days=LONG_MAX).plus(Period(days=1))


def test_period_adjusts_date_time():
    date_time = ISO.date_time(2024, 1, 31, 23)
    assert date_time.plus(Period(months=1, hours=2)) == ISO.date_time(2024, 3, 1, 1)
    assert date_time.minus(Period(days=31)) == ISO.date_time(2023, 12, 31, 23)


def test_period_adjusts_date():
    date = ISO.date(2024, 2, 29)
    assert date.plus(Period.of_date(years=1)) == ISO.date(2025, 2, 28)
    with pytest.raises(UnsupportedFieldError):
        date.plus(Period.of_time(hours=1))


def test_period_adjusts_time():
    assert LocalTime.of(23).plus_period(Period(hours=2)) == LocalTime.of(1)


@pytest.mark.parametrize(
    ("factory", "amount", "expected"),
    [
        (Period.of_years, 2, Period(years=2)),
        (Period.of_months, -3, Period(months=-3)),
        (Period.of_days, 10, Period(days=10)),
        (Period.of_hours, 4, Period(hours=4)),
        (Period.of_minutes, 5, Period(minutes=5)),
        (Period.of_seconds, 6, Period(seconds=6)),
        (Period.of_nanos, 7, Period(nanos=7)),
    ],
    ids=["years", "months", "days", "hours", "minutes", "seconds", "nanos"],
)
def test_single_unit_factories(factory, amount, expected):
    assert factory(amount) == expected


def test_of_builds_all_units():
    period = Period.of(1, 2, 3, 4, 5, 6, 7)
    assert period.to_canonical_string() == "P1Y2M3DT4H5M6.000000007S"
    assert Period.of() is Period.ZERO
    assert Period.of_days(0) is Period.ZERO


def test_with_unit_replaces_one_amount():
    period = Period.of(years=1, days=3)
    assert period.with_years(5) == Period(years=5, days=3)
    assert period.with_months(2) == Period(years=1, months=2, days=3)
    assert period.with_days(0) == Period(years=1)
    assert period.with_hours(4).with_minutes(5).with_seconds(6).with_nanos(7) == Period.of(1, 0, 3, 4, 5, 6, 7)
    assert period.with_years(1) is period


@pytest.mark.parametrize("name", ["years", "months", "days", "hours", "minutes", "seconds", "nanos"])
def test_components_must_fit_in_a_long(name):
    """CRITICAL: A period never holds an amount outside the signed 64-bit range.

    Why: Amounts travel as longs; an unbounded component would overflow
    downstream instead of failing where it was built.
    """
    assert getattr(Period(**{name: LONG_MAX}), name) == LONG_MAX
    with pytest.raises(ArithmeticOverflowError, match=name):
        Period(**{name: LONG_MAX + 1})
    with pytest.raises(ArithmeticOverflowError):
        Period.of(**{name: -(2**70)})
    with pytest.raises(ArithmeticOverflowError):
        getattr(Period.ZERO, f"with_{name}")(2**70)
